# Find and transform emoji unicode, tokens and emoticons in text.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026
# URL: https://github.com/xolox/python-emoji-parser

"""Test suite for the `emoji-parser` package."""

# Standard library modules.
import collections
import logging
import os
import re

# External dependencies.
from humanfriendly.testing import TemporaryDirectory, TestCase, run_cli
from update_dotdee import ConfigLoader

# Modules included in our package.
import emoji_parser
from emoji_parser import EmojiParser, default_parser
from emoji_parser.catalog import NAME_PATTERN, EmojiCatalog, Symbol, format_image_filename, load_symbols
from emoji_parser.cli import UserInterface, main
from emoji_parser.emoticons import BASE_EMOTICONS, compile_emoticon_pattern, expand_emoticons, strip_nose
from emoji_parser.matchers import (
    NEVER_MATCHES,
    CompiledMatcher,
    ParseOptions,
    combine_matchers,
    compile_unicode_fragment,
    compile_unicode_pattern,
)

# Initialize a logger for this module.
logger = logging.getLogger(__name__)

TEST_UNICODE = "Test 🙈 🙊 🙉 😰 :invalid: 🐠."
TEST_MIXED = "Test 🙈 🙊 🙉 :cold_sweat: :invalid: :tropical_fish:."
TEST_TOKENS = "Test :see_no_evil: :speak_no_evil: :hear_no_evil: :cold_sweat: :invalid: :tropical_fish:."


def make_symbol(name, *variants, **kw):
    """Create a :class:`.Symbol` for a test catalog."""
    raw = variants[0] if variants else ""
    return Symbol(
        name=name,
        aliases=(name,) + tuple(kw.get("aliases", ())),
        unicode_variants=variants,
        raw=raw,
        image_filename=kw.get("image_filename", format_image_filename(raw)),
    )


def make_parser(*symbols):
    """Create an :class:`.EmojiParser` with a small catalog."""
    if not symbols:
        symbols = (
            make_symbol("blush", "\U0001f60a"),
            make_symbol("smiley", "\U0001f603"),
            make_symbol("wink", "\U0001f609"),
            make_symbol("heart", "\u2764\ufe0f", "\u2764"),
            make_symbol("one", "1\ufe0f\u20e3", "1\u20e3"),
            make_symbol("de", "\U0001f1e9\U0001f1ea", aliases=["flag_for_Germany"], image_filename="1f1e9-1f1ea.png"),
            make_symbol("broken"),
        )
    return EmojiParser(catalog=EmojiCatalog(symbols=list(symbols)))


def replace_with_x(symbol):
    """Callback for parse functions that replaces every emoji with an ``X``."""
    return "X"


class EmojiParserTestCase(TestCase):

    """Container for the `emoji-parser` tests."""

    def test_fragment_single_variant(self):
        """A single rendering is emitted verbatim."""
        assert compile_unicode_fragment(["\U0001f600"]) == r"\U0001f600"
        assert compile_unicode_fragment([[0x1F1E9, 0x1F1EA]]) == r"\U0001f1e9\U0001f1ea"

    def test_fragment_optional_suffix(self):
        """A rendering with and without variation selector shares its prefix."""
        fragment = compile_unicode_fragment(["\u2764", "\u2764\ufe0f"])
        assert fragment == r"\U00002764(?:\U0000fe0f)?"
        regex = re.compile(fragment)
        assert regex.fullmatch("\u2764")
        assert regex.fullmatch("\u2764\ufe0f")

    def test_fragment_multiple_options(self):
        """Several renderings extending the shortest one become an optional alternation."""
        fragment = compile_unicode_fragment(["a", "abc", "ab"])
        assert fragment == r"\U00000061(?:\U00000062\U00000063|\U00000062)?"

    def test_fragment_required_suffix(self):
        """A shared first codepoint that isn't a rendering itself must not match on its own."""
        fragment = compile_unicode_fragment(["1\ufe0f\u20e3", "1\u20e3"])
        assert fragment == r"\U00000031(?:\U0000fe0f\U000020e3|\U000020e3)"
        regex = re.compile(fragment)
        assert regex.fullmatch("1\ufe0f\u20e3")
        assert regex.fullmatch("1\u20e3")
        assert not regex.search("1")

    def test_fragment_without_shared_prefix(self):
        """Renderings without a shared prefix are emitted as plain alternatives."""
        assert compile_unicode_fragment(["ab", "c"]) == r"\U00000061\U00000062|\U00000063"

    def test_fragment_without_variants(self):
        """Emoji without renderings don't contribute to the regular expression."""
        assert compile_unicode_fragment([]) is None
        assert compile_unicode_fragment([""]) is None
        assert compile_unicode_pattern([make_symbol("broken")]) == NEVER_MATCHES
        parser = make_parser(make_symbol("broken"))
        assert parser.tokenize("Nothing to see here") == "Nothing to see here"

    def test_fragments_of_catalog(self):
        """The fragment of each emoji matches its own renderings and no others."""
        by_first_character = collections.defaultdict(list)
        for symbol in default_parser.catalog.all():
            for variant in symbol.unicode_variants:
                by_first_character[variant[0]].append((symbol, variant))
        for symbol in default_parser.catalog.all():
            if len(symbol.unicode_variants) >= 2:
                regex = re.compile(compile_unicode_fragment(symbol.unicode_variants))
                for variant in symbol.unicode_variants:
                    assert regex.fullmatch(variant), "%s doesn't match %r" % (symbol.name, variant)
                for other, variant in by_first_character[symbol.unicode_variants[0][0]]:
                    if other is not symbol:
                        assert not regex.fullmatch(variant), "%s matches %r" % (symbol.name, variant)

    def test_longer_emoji_take_precedence(self):
        """An emoji whose rendering is a prefix of another emoji doesn't shadow the longer one."""
        man = make_symbol("man", "\U0001f468")
        family = make_symbol("family", "\U0001f468\u200d\U0001f469\u200d\U0001f467")
        parser = make_parser(man, family)
        assert parser.tokenize("\U0001f468\u200d\U0001f469\u200d\U0001f467 \U0001f468") == ":family: :man:"

    def test_optional_base_does_not_shadow_other_emoji(self):
        """A rendering that's the shared base of a longer emoji doesn't steal the start of another emoji."""
        hearts = make_symbol("hearts", "\u2764\u2764\u2764", "\u2764")
        heart = make_symbol("heart", "\u2764\ufe0f")
        assert compile_unicode_pattern([hearts, heart]) == (
            r"\U00002764(?:\U00002764\U00002764)|\U00002764\U0000fe0f|\U00002764"
        )
        parser = make_parser(hearts, heart)
        assert parser.tokenize("\u2764\ufe0f") == ":heart:"
        assert parser.tokenize("\u2764\u2764\u2764 \u2764 \u2764\ufe0f") == ":hearts: :hearts: :heart:"
        letters = make_symbol("letters", "abcd", "ab", "a")
        other = make_symbol("other", "abx")
        assert compile_unicode_pattern([letters, other]) == (
            r"\U00000061(?:\U00000062\U00000063\U00000064)|\U00000061\U00000062\U00000078"
            r"|\U00000061(?:\U00000062)|\U00000061"
        )
        parser = make_parser(letters, other)
        assert parser.tokenize("abx ab abcd") == ":other: :letters: :letters:"

    def test_expand_emoticons(self):
        """Emoticons are registered with and without nose."""
        emoticons = expand_emoticons(BASE_EMOTICONS)
        assert emoticons[":-)"] == "blush"
        assert emoticons[":)"] == "blush"
        assert emoticons[">:-("] == "angry"
        assert emoticons[">:("] == "angry"
        assert emoticons["=)"] == "smiley"
        assert emoticons[":\\"] == "confused"
        assert emoticons[";b"] == "stuck_out_tongue_winking_eye"
        assert emoticons[":P"] == "stuck_out_tongue"
        assert emoticons[":'("] == "cry"
        assert emoticons[":o)"] == "monkey_face"
        assert strip_nose(":o)") == ":o)"

    def test_emoticon_collisions(self):
        """The first table to define an emoticon wins."""
        emoticons = expand_emoticons({"blush": ":-)"}, {"smiley": (":)", ":-)", ";-)")})
        assert emoticons[":-)"] == "blush"
        assert emoticons[":)"] == "blush"
        assert emoticons[";-)"] == "smiley"

    def test_emoticon_pattern_merges_noses(self):
        """An emoticon and its noseless form are matched by a single alternative."""
        pattern = compile_emoticon_pattern({":-)": "blush", ":)": "blush"})
        assert pattern == r"(?:^|(?<=\s))(?::-?\))(?=\s|$)"
        assert compile_emoticon_pattern({}) == NEVER_MATCHES

    def test_emoticon_pattern_keeps_conflicts(self):
        """An emoticon whose noseless form belongs to another emoji is matched literally."""
        emoticons = {":-(": "disappointed", ":(": "cry"}
        regex = re.compile("(%s)" % compile_emoticon_pattern(emoticons))
        assert regex.findall(":-( :(") == [":-(", ":("]
        parser = make_parser(make_symbol("disappointed", "\U0001f61e"), make_symbol("cry", "\U0001f622"))
        parser.emoticons = emoticons
        assert parser.parse_emoticons(":-( :(", lambda s: s.name) == "disappointed cry"

    def test_emoticon_boundaries(self):
        """Emoticons have to be delimited by whitespace or the start or end of the text."""
        parser = make_parser()
        assert parser.parse_emoticons("word:-)word", replace_with_x) == "word:-)word"
        assert parser.parse_emoticons("word :-)word", replace_with_x) == "word :-)word"
        assert parser.parse_emoticons(":-) word", replace_with_x) == "X word"
        assert parser.parse_emoticons("word :)", replace_with_x) == "word X"
        assert parser.parse_emoticons("word\n;-)\n", replace_with_x) == "word\nX\n"
        assert parser.parse_emoticons(":-) :-)", replace_with_x) == "X X"

    def test_emoticon_nose_equivalence(self):
        """Emoticons with and without nose resolve to the same emoji."""
        for emoticons in BASE_EMOTICONS.values():
            if isinstance(emoticons, str):
                emoticons = [emoticons]
            for emoticon in emoticons:
                symbol = emoji_parser.find(emoticon)
                assert symbol is not None, "Emoticon %r not found!" % emoticon
                assert emoji_parser.find(strip_nose(emoticon)) is symbol

    def test_unknown_emoticons(self):
        """Emoticons that refer to unknown emoji are left alone."""
        parser = make_parser()
        parser.emoticons[":-x"] = "zipper_mouth_face"
        parser.rehash()
        assert parser.parse_emoticons("Hush :-x :)", lambda s: s.name) == "Hush :-x blush"
        assert parser.parse("Hush :-x :)", lambda s: s.name) == "Hush :-x blush"
        assert parser.find(":-x") is None

    def test_parse_options(self):
        """The default parse options enable all notations."""
        assert ParseOptions().kinds == ("unicode", "tokens", "emoticons")
        assert ParseOptions(False, False, False) == ParseOptions(True, True, True)
        assert ParseOptions(tokens=True).kinds == ("tokens",)
        assert ParseOptions(unicode=1, emoticons="yes") == ParseOptions(True, False, True)

    def test_combined_matchers(self):
        """Multiple notations are combined into a single regular expression with known capture groups."""
        parser = make_parser()
        tokens = parser.token_pattern()
        unicode = parser.unicode_pattern()
        emoticons = parser.emoticon_pattern()
        assert combine_matchers(tokens=tokens) is tokens
        assert combine_matchers(unicode=unicode) is unicode
        combined = combine_matchers(tokens=tokens, unicode=unicode)
        assert combined.kinds == (("tokens",), ("unicode",))
        match = combined.regex.search("Hi :wink:")
        assert match.groups() == ("wink", None)
        assert combined.get_group(match) == (("tokens",), "wink")
        match = combined.regex.search("Hi \U0001f609")
        assert match.groups() == (None, "\U0001f609")
        combined = combine_matchers(unicode=unicode, emoticons=emoticons)
        assert combined.kinds == (("emoticons", "unicode"),)
        assert combined.regex.search("Hi :-)").group(1) == ":-)"
        assert combined.regex.search("Hi \U0001f609").group(1) == "\U0001f609"
        combined = combine_matchers(tokens=tokens, unicode=unicode, emoticons=emoticons)
        assert combined.kinds == (("tokens",), ("emoticons", "unicode"))
        assert [m.groups() for m in combined.regex.finditer(":blush: ;) \u2764")] == [
            ("blush", None),
            (None, ";)"),
            (None, "\u2764"),
        ]
        self.assertRaises(ValueError, combine_matchers)

    def test_resolve_by_notation_kind(self):
        """Matches are resolved according to the notation kind of the capture group that matched."""
        parser = make_parser()
        parser.emoticons["wink"] = "blush"
        combined = parser.combined_pattern(ParseOptions())
        match = combined.regex.search("Hi :wink:")
        assert combined.get_group(match) == (("tokens",), "wink")
        assert parser.resolve_match(combined, match).name == "wink"
        match = combined.regex.search("Hi ;-)")
        assert combined.get_group(match) == (("emoticons", "unicode"), ";-)")
        assert parser.resolve_match(combined, match).name == "wink"
        match = combined.regex.search("Hi \u2764")
        assert parser.resolve_match(combined, match).name == "heart"
        assert parser.parse(":wink: \U0001f60a", lambda s: s.name) == "wink blush"

    def test_parse_unicode(self):
        """Unicode emoji are transformed by the callback."""
        assert emoji_parser.parse_unicode(TEST_MIXED, replace_with_x) == "Test X X X :cold_sweat: :invalid: :tropical_fish:."

    def test_parse_tokens(self):
        """Tokens of known emoji are transformed by the callback."""
        assert emoji_parser.parse_tokens(TEST_TOKENS, replace_with_x) == "Test X X X X :invalid: X."

    def test_parse_emoticons(self):
        """Emoticons are transformed by the callback."""
        text = "Hello :-) and ;) but not :-x or:-("
        assert emoji_parser.parse_emoticons(text, lambda s: ":%s:" % s.name) == "Hello :blush: and :wink: but not :-x or:-("

    def test_parse_mixed(self):
        """Unicode emoji and tokens are transformed in a single pass."""
        assert emoji_parser.parse(TEST_MIXED, replace_with_x, unicode=True, tokens=True) == "Test X X X X :invalid: X."

    def test_parse_defaults(self):
        """All notations are transformed when no options are given."""
        assert emoji_parser.parse(TEST_MIXED, replace_with_x) == "Test X X X X :invalid: X."
        assert emoji_parser.parse("Hi :-) :wink: \U0001f609", lambda s: s.name) == "Hi blush wink wink"

    def test_parse_single_notation(self):
        """A single enabled notation is the same as calling the specialized function."""
        parser = make_parser()
        text = "\U0001f60a :blush: :-) :nope:"
        assert parser.parse(text, replace_with_x, unicode=True) == parser.parse_unicode(text, replace_with_x)
        assert parser.parse(text, replace_with_x, tokens=True) == parser.parse_tokens(text, replace_with_x)
        assert parser.parse(text, replace_with_x, emoticons=True) == parser.parse_emoticons(text, replace_with_x)
        assert parser.parse(text, replace_with_x, emoticons=True) == "\U0001f60a :blush: X :nope:"
        assert parser.parse(text, replace_with_x, tokens=True, emoticons=True) == "\U0001f60a X X :nope:"
        assert parser.parse(text, replace_with_x, unicode=True, emoticons=True) == "X :blush: X :nope:"
        assert parser.parse(text, replace_with_x) == "X X X :nope:"

    def test_parse_without_callback(self):
        """Without a callback the text is returned unchanged."""
        parser = make_parser()
        text = "\U0001f60a :blush: :-)"
        assert parser.parse(text) == text
        assert parser.parse_unicode(text) == text
        assert parser.parse_tokens(text) == text
        assert parser.parse_emoticons(text) == text

    def test_parse_invalid_option(self):
        """Unsupported options are reported."""
        self.assertRaises(TypeError, make_parser().parse, "text", None, images=True)

    def test_tokenize(self):
        """Unicode emoji are replaced with tokens."""
        assert emoji_parser.tokenize(TEST_MIXED) == TEST_TOKENS

    def test_tokenize_catalog(self):
        """Every rendering of every emoji in the catalog is tokenized."""
        for symbol in default_parser.catalog.all():
            for variant in symbol.unicode_variants:
                assert emoji_parser.tokenize("Test %s" % variant) == "Test :%s:" % symbol.name

    def test_detokenize(self):
        """Tokens are replaced with unicode emoji."""
        assert emoji_parser.detokenize(TEST_MIXED) == TEST_UNICODE

    def test_detokenize_catalog(self):
        """The canonical name of every emoji is detokenized to its canonical rendering."""
        for symbol in default_parser.catalog.all():
            if NAME_PATTERN.match(symbol.name) and default_parser.catalog.find_by_name(symbol.name) is symbol:
                token = ":%s:" % symbol.name
                assert emoji_parser.detokenize(token) == symbol.raw
                assert emoji_parser.detokenize(emoji_parser.tokenize(symbol.raw)) == symbol.raw

    def test_find(self):
        """Emoji can be found using any notation."""
        blush = emoji_parser.find("blush")
        assert blush is not None
        assert blush.raw == "\U0001f60a"
        assert emoji_parser.find(":-)") is blush
        assert emoji_parser.find(":)") is blush
        assert emoji_parser.find("\U0001f60a") is blush
        assert emoji_parser.find("smiling_face_with_smiling_eyes") is blush
        assert emoji_parser.find(blush) is blush
        assert emoji_parser.find("invalid") is None
        assert emoji_parser.find("") is None
        assert emoji_parser.find(None) is None
        assert emoji_parser.find(42) is None

    def test_find_prefers_emoticons(self):
        """Emoticons are resolved before names."""
        parser = make_parser()
        parser.emoticons["wink"] = "blush"
        assert parser.find("wink").name == "blush"

    def test_filepath(self):
        """Image pathnames can be relative to a custom location."""
        parser = make_parser()
        germany = parser.find("de")
        assert parser.filepath(germany) == "1f1e9-1f1ea.png"
        assert parser.filepath(germany, "//fonts.test.com/emoji") == "//fonts.test.com/emoji/1f1e9-1f1ea.png"
        assert parser.filepath(germany, "//fonts.test.com/emoji/") == "//fonts.test.com/emoji/1f1e9-1f1ea.png"
        assert parser.filepath("flag_for_Germany", "/images") == "/images/1f1e9-1f1ea.png"
        assert parser.filepath(":-)") == "unicode/1f60a.png"
        assert parser.filepath(":-)", "/images") == "/images/1f60a.png"
        assert parser.filepath(":nope:") is None
        assert emoji_parser.filepath("blush", "/images/") == "/images/1f60a.png"

    def test_matchers_are_cached(self):
        """Matchers are reused until they're rehashed."""
        parser = make_parser()
        assert parser.unicode_pattern() is parser.unicode_pattern()
        assert parser.emoticon_pattern() is parser.emoticon_pattern()
        assert parser.token_pattern() is parser.token_pattern()
        assert isinstance(parser.unicode_pattern(), CompiledMatcher)

    def test_rehash(self):
        """Rehashing replaces the unicode and emoticon matchers."""
        parser = make_parser()
        unicode, emoticons, tokens = parser.unicode_pattern(), parser.emoticon_pattern(), parser.token_pattern()
        parser.rehash()
        assert parser.unicode_pattern() is not unicode
        assert parser.emoticon_pattern() is not emoticons
        assert parser.token_pattern() is tokens
        unicode = parser.unicode_pattern()
        assert parser.unicode_pattern(rehash=True) is not unicode
        emoticons = parser.emoticon_pattern()
        assert parser.emoticon_pattern(rehash=True) is not emoticons
        assert parser.token_pattern() is tokens
        self.assertRaises(TypeError, parser.token_pattern, rehash=True)
        self.assertRaises(TypeError, emoji_parser.token_pattern, rehash=True)
        first = emoji_parser.unicode_pattern()
        emoji_parser.rehash()
        assert emoji_parser.unicode_pattern() is not first

    def test_stale_matchers(self):
        """Changes to the emoticon table are ignored until the matchers are rehashed."""
        parser = make_parser()
        assert parser.parse_emoticons("Hey ;o)", replace_with_x) == "Hey ;o)"
        parser.emoticons[";o)"] = "wink"
        assert parser.parse_emoticons("Hey ;o)", replace_with_x) == "Hey ;o)"
        parser.rehash()
        assert parser.parse_emoticons("Hey ;o)", replace_with_x) == "Hey X"

    def test_load_symbols(self):
        """Entries of the emoji package are grouped into symbols."""
        data = collections.OrderedDict(
            [
                ("\u2764\ufe0f", dict(en=":red_heart:", status=2, alias=[":heart:"])),
                ("\u2764", dict(en=":red_heart:", status=4, alias=[":heart:"])),
                ("\U0001f170\ufe0f", dict(en=":A_button_(blood_type):", status=2)),
                ("\U0001f48b", dict(en=":kiss_mark:", status=2, alias=[":kiss:"])),
                ("\U0001f48f", dict(en=":kiss:", status=2)),
            ]
        )
        heart, button, kiss_mark, kiss = load_symbols(data)
        assert heart.name == "heart"
        assert heart.aliases == ("heart", "red_heart")
        assert heart.unicode_variants == ("\u2764\ufe0f", "\u2764")
        assert heart.raw == "\u2764\ufe0f"
        assert heart.image_filename == "unicode/2764.png"
        assert button.name == "A_button_(blood_type)"
        assert kiss_mark.name == "kiss"
        assert kiss.name == "kiss"
        catalog = EmojiCatalog(symbols=[heart, button, kiss_mark, kiss])
        assert catalog.find_by_name("kiss") is kiss_mark
        assert catalog.find_by_name("red_heart") is heart
        assert catalog.find_by_unicode("\u2764") is heart
        assert catalog.find_by_unicode("❣") is None
        assert catalog.all() == [heart, button, kiss_mark, kiss]

    def test_format_image_filename(self):
        """Image filenames are based on the codepoints of an emoji."""
        assert format_image_filename("\U0001f1e9\U0001f1ea") == "unicode/1f1e9-1f1ea.png"
        assert format_image_filename("\u00a9\ufe0f") == "unicode/00a9.png"
        assert format_image_filename("1\ufe0f\u20e3") == "unicode/0031-20e3.png"

    def test_cli_usage(self):
        """The usage message is shown when no command is given."""
        returncode, output = run_cli(main)
        assert returncode == 0
        assert "Usage: emoji-parser" in output
        returncode, output = run_cli(main, "--help")
        assert returncode == 0
        assert "Usage: emoji-parser" in output

    def test_cli_errors(self):
        """Invalid options and commands are reported."""
        returncode, output = run_cli(main, "--nope", merged=True)
        assert returncode == 1
        returncode, output = run_cli(main, "explode", merged=True)
        assert returncode == 1
        assert "Invalid command name" in output

    def test_cli_tokenize(self):
        """The tokenize and detokenize commands convert between unicode and tokens."""
        returncode, output = run_cli(main, "tokenize", "Test", "🙈", "🙊")
        assert returncode == 0
        assert output.strip() == "Test :see_no_evil: :speak_no_evil:"
        returncode, output = run_cli(main, "detokenize", input=TEST_TOKENS)
        assert returncode == 0
        assert output.strip() == TEST_UNICODE

    def test_cli_emojize(self):
        """The emojize command converts any notation to unicode."""
        returncode, output = run_cli(main, "emojize", ":-D :wink: \U0001f60a")
        assert output.strip() == "\U0001f604 \U0001f609 \U0001f60a"
        returncode, output = run_cli(main, "--tokens", "emojize", ":-D :wink:")
        assert output.strip() == ":-D \U0001f609"

    def test_cli_html(self):
        """The html command replaces emoji with image tags."""
        returncode, output = run_cli(main, "--images-path=/images", "html", "I <3 :-) & :nope:")
        assert returncode == 0
        assert output.strip() == (
            'I &lt;3 <img class="emoji" src="/images/1f60a.png" alt="\U0001f60a" title=":blush:"> &amp; :nope:'
        )

    def test_cli_find(self):
        """The find command shows a table of emoji."""
        returncode, output = run_cli(main, "find", "blush", ":-D", "nope")
        assert returncode == 0
        assert "smiling_face_with_smiling_eyes" in output
        assert "unicode/1f60a.png" in output
        assert "smile" in output

    def test_configuration(self):
        """Emoticons and the images path can be configured."""
        with TemporaryDirectory() as directory:
            filename = os.path.join(directory, "emoji-parser.ini")
            with open(filename, "w") as handle:
                handle.write("[emoji-parser]\nimages-path = https://example.com/emoji/\n\n")
                handle.write("[emoticons]\nheart = <3\nsunglasses = 8-) B-)\nblush = :-]\n")
            program = UserInterface(config_loader=ConfigLoader(available_files=[filename]))
            assert program.images_path == "https://example.com/emoji/"
            assert program.find("<3").name == "heart"
            assert program.find("8-)") is program.find("sunglasses")
            assert program.find("8)") is None
            assert program.find(":]") is program.find("blush")
            assert program.find(":-)") is program.find("blush")
            html = program.text_to_html("I <3 you")
            assert html.startswith('I <img class="emoji" src="https://example.com/emoji/2764.png"')
            assert html.endswith("> you")
