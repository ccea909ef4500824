# Find and transform emoji unicode, tokens and emoticons in text.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026
# URL: https://github.com/xolox/python-emoji-parser

"""
Python API for the `emoji-parser` package.

Emoji can be written in three notations:

1. Literal unicode like ``😄``.
2. Tokens like ``:smile:``.
3. Emoticons like ``:-D``.

The :class:`EmojiParser` class finds any of these notations in text and
passes the corresponding :class:`~emoji_parser.catalog.Symbol` to a callback
that decides what to replace it with. The regular expressions used to find
emoji are generated from the catalog when they're first needed and cached
until :func:`~EmojiParser.rehash()` is called.

The functions defined in this module (:func:`parse()`, :func:`tokenize()`,
:func:`find()`, etc.) use :data:`default_parser`:

>>> from emoji_parser import detokenize, find, tokenize
>>> tokenize('Hello 🌍')
'Hello :earth_africa:'
>>> detokenize('Hello :earth_africa:')
'Hello 🌍'
>>> find(':-D').name
'smile'
"""

# External dependencies.
from humanfriendly import Timer, pluralize
from property_manager import PropertyManager, cached_property, lazy_property, mutable_property
from verboselogs import VerboseLogger

# Modules included in our package.
from emoji_parser.catalog import EmojiCatalog, Symbol
from emoji_parser.emoticons import BASE_EMOTICONS, compile_emoticon_pattern, expand_emoticons
from emoji_parser.matchers import (
    KIND_EMOTICONS,
    KIND_TOKENS,
    KIND_UNICODE,
    TOKEN_PATTERN,
    CompiledMatcher,
    ParseOptions,
    combine_matchers,
    compile_unicode_pattern,
)

# Semi-standard package versioning.
__version__ = "1.0"

# Public identifiers that require documentation.
__all__ = (
    "EmojiParser",
    "default_parser",
    "detokenize",
    "emoticon_pattern",
    "filepath",
    "find",
    "parse",
    "parse_emoticons",
    "parse_tokens",
    "parse_unicode",
    "rehash",
    "token_pattern",
    "tokenize",
    "unicode_pattern",
)

# Initialize a logger for this module.
logger = VerboseLogger(__name__)


class EmojiParser(PropertyManager):

    """
    Find and transform emoji unicode, tokens and emoticons in text.

    The compiled matchers are cached on the parser. When the :attr:`catalog`
    or the :attr:`emoticons` table are changed after a matcher was used,
    :func:`rehash()` needs to be called, until then the old matchers remain
    in use.
    """

    @mutable_property(cached=True)
    def catalog(self):
        """
        The catalog of known emoji (an :class:`~emoji_parser.catalog.EmojiCatalog` object).

        Any object that provides the methods ``all()``, ``find_by_name()``
        and ``find_by_unicode()`` can be used.
        """
        return EmojiCatalog()

    @mutable_property(cached=True)
    def emoticons(self):
        """
        A dictionary that maps emoticons to emoji names.

        The default value is generated from
        :data:`~emoji_parser.emoticons.BASE_EMOTICONS` using
        :func:`~emoji_parser.emoticons.expand_emoticons()`. You can modify
        this dictionary to customize the supported emoticons, just don't
        forget to call :func:`rehash()` afterwards.
        """
        return expand_emoticons(BASE_EMOTICONS)

    @cached_property
    def emoticon_matcher(self):
        """A :class:`~emoji_parser.matchers.CompiledMatcher` for the emoticons in :attr:`emoticons`."""
        timer = Timer()
        fragment = compile_emoticon_pattern(self.emoticons)
        matcher = CompiledMatcher(fragment=fragment, pattern="(%s)" % fragment, kinds=((KIND_EMOTICONS,),))
        logger.verbose("Compiled regular expression for %s in %s.", pluralize(len(self.emoticons), "emoticon"), timer)
        return matcher

    @lazy_property
    def token_matcher(self):
        """A :class:`~emoji_parser.matchers.CompiledMatcher` for ``:name:`` tokens."""
        return CompiledMatcher(fragment=TOKEN_PATTERN, pattern=TOKEN_PATTERN, kinds=((KIND_TOKENS,),))

    @cached_property
    def unicode_matcher(self):
        """A :class:`~emoji_parser.matchers.CompiledMatcher` for the unicode renderings in :attr:`catalog`."""
        timer = Timer()
        symbols = self.catalog.all()
        fragment = compile_unicode_pattern(symbols)
        matcher = CompiledMatcher(fragment=fragment, pattern="(%s)" % fragment, kinds=((KIND_UNICODE,),))
        # Compile the regular expression now so that the timing is meaningful.
        logger.debug("Compiling regular expression of %i characters ..", len(matcher.pattern))
        matcher.regex
        logger.verbose("Compiled regular expression for %s in %s.", pluralize(len(symbols), "emoji"), timer)
        return matcher

    def emoticon_pattern(self, rehash=False):
        """
        Get the matcher for emoticons.

        :param rehash: :data:`True` to regenerate the matcher from the
                       current :attr:`emoticons` (defaults to :data:`False`).
        :returns: A :class:`~emoji_parser.matchers.CompiledMatcher` object.
        """
        if rehash:
            del self.emoticon_matcher
        return self.emoticon_matcher

    def token_pattern(self):
        """
        Get the matcher for ``:name:`` tokens.

        :returns: A :class:`~emoji_parser.matchers.CompiledMatcher` object.

        The token matcher doesn't depend on the catalog, so unlike the other
        matchers it is never regenerated.
        """
        return self.token_matcher

    def unicode_pattern(self, rehash=False):
        """
        Get the matcher for unicode emoji.

        :param rehash: :data:`True` to regenerate the matcher from the
                       current :attr:`catalog` (defaults to :data:`False`).
        :returns: A :class:`~emoji_parser.matchers.CompiledMatcher` object.
        """
        if rehash:
            del self.unicode_matcher
        return self.unicode_matcher

    def combined_pattern(self, options):
        """
        Get a matcher for one or more notation kinds.

        :param options: A :class:`~emoji_parser.matchers.ParseOptions` object.
        :returns: A :class:`~emoji_parser.matchers.CompiledMatcher` object.
        """
        return combine_matchers(
            tokens=self.token_pattern() if options.tokens else None,
            unicode=self.unicode_pattern() if options.unicode else None,
            emoticons=self.emoticon_pattern() if options.emoticons else None,
        )

    def rehash(self):
        """
        Discard the cached matchers.

        The matchers are regenerated from the current :attr:`catalog` and
        :attr:`emoticons` when they're next used.
        """
        logger.verbose("Discarding cached regular expressions ..")
        del self.unicode_matcher
        del self.emoticon_matcher

    def parse(self, text, callback=None, **options):
        """
        Find and transform emoji in text.

        :param text: The text to parse (a string).
        :param callback: A callable that receives a
                         :class:`~emoji_parser.catalog.Symbol` and returns
                         the replacement text (a string). When no callback is
                         given the text is returned unchanged.
        :param options: The keyword arguments ``unicode``, ``tokens`` and
                        ``emoticons`` (booleans) select the notations to
                        find. When none of them are :data:`True` all
                        notations are found.
        :returns: The transformed text (a string).
        :raises: :exc:`~exceptions.TypeError` when an unsupported keyword
                 argument is given.

        Emoji that can't be resolved (for example the token ``:invalid:``)
        are left unchanged.
        """
        options = ParseOptions(**options)
        if len(options.kinds) == 1:
            method = getattr(self, "parse_%s" % options.kinds[0])
            return method(text, callback)
        return self.substitute(self.combined_pattern(options), text, callback)

    def parse_emoticons(self, text, callback=None):
        """
        Find and transform emoticons in text.

        :param text: The text to parse (a string).
        :param callback: Refer to :func:`parse()`.
        :returns: The transformed text (a string).
        """
        return self.substitute(self.emoticon_pattern(), text, callback)

    def parse_tokens(self, text, callback=None):
        """
        Find and transform ``:name:`` tokens in text.

        :param text: The text to parse (a string).
        :param callback: Refer to :func:`parse()`.
        :returns: The transformed text (a string).
        """
        return self.substitute(self.token_pattern(), text, callback)

    def parse_unicode(self, text, callback=None):
        """
        Find and transform unicode emoji in text.

        :param text: The text to parse (a string).
        :param callback: Refer to :func:`parse()`.
        :returns: The transformed text (a string).
        """
        return self.substitute(self.unicode_pattern(), text, callback)

    def substitute(self, matcher, text, callback):
        """
        Replace the matches of a matcher.

        :param matcher: A :class:`~emoji_parser.matchers.CompiledMatcher` object.
        :param text: The text to parse (a string).
        :param callback: Refer to :func:`parse()`.
        :returns: The transformed text (a string).
        """

        def replace(match):
            symbol = self.resolve_match(matcher, match)
            return callback(symbol) if callback and symbol else match.group(0)

        return matcher.regex.sub(replace, text)

    def resolve_match(self, matcher, match):
        """
        Resolve a match to the emoji it refers to.

        :param matcher: The :class:`~emoji_parser.matchers.CompiledMatcher`
                        that produced the match.
        :param match: A :class:`re.Match` object.
        :returns: A :class:`~emoji_parser.catalog.Symbol` object or
                  :data:`None` when the emoji isn't known.

        The notation kinds of the capture group that matched determine how
        the captured text is looked up: Token names by name, emoticons via
        :attr:`emoticons` and everything else by unicode rendering.
        """
        kinds, value = matcher.get_group(match)
        if not kinds:
            return None
        if KIND_TOKENS in kinds:
            return self.catalog.find_by_name(value)
        if KIND_EMOTICONS in kinds and value in self.emoticons:
            return self.catalog.find_by_name(self.emoticons[value])
        if KIND_UNICODE in kinds:
            return self.catalog.find_by_unicode(value)
        return None

    def tokenize(self, text):
        """Replace unicode emoji with ``:name:`` tokens."""
        return self.parse_unicode(text, lambda symbol: ":%s:" % symbol.name)

    def detokenize(self, text):
        """Replace ``:name:`` tokens with unicode emoji."""
        return self.parse_tokens(text, lambda symbol: symbol.raw)

    def find(self, symbol):
        """
        Find the emoji corresponding to any of the supported notations.

        :param symbol: A :class:`~emoji_parser.catalog.Symbol` object (which
                       is returned as is) or a string with an emoticon, the
                       name of an emoji or a unicode rendering.
        :returns: A :class:`~emoji_parser.catalog.Symbol` object or
                  :data:`None` when the emoji isn't known.

        Emoticons are resolved first, then names and finally unicode.
        """
        if isinstance(symbol, Symbol):
            return symbol
        if not isinstance(symbol, str):
            return None
        if symbol in self.emoticons:
            symbol = self.emoticons[symbol]
        return self.catalog.find_by_name(symbol) or self.catalog.find_by_unicode(symbol)

    def filepath(self, symbol, path=None):
        """
        Get the pathname of the image of an emoji.

        :param symbol: Any value accepted by :func:`find()`.
        :param path: The directory or URL where images are stored (a string,
                     optional). A single trailing slash is ignored.
        :returns: The pathname of the image (a string) or :data:`None` when
                  the emoji isn't known. When `path` isn't given the
                  pathname from the catalog is returned, otherwise the
                  filename from the catalog is joined to `path`.
        """
        emoji = self.find(symbol)
        if not emoji:
            return None
        if path is None:
            return emoji.image_filename
        if path.endswith("/"):
            path = path[:-1]
        return "%s/%s" % (path, emoji.image_filename.split("/")[-1])


default_parser = EmojiParser()
"""The :class:`EmojiParser` object used by the functions in this module."""


def parse(text, callback=None, **options):
    """Find and transform emoji in text using :data:`default_parser` (see :func:`EmojiParser.parse()`)."""
    return default_parser.parse(text, callback, **options)


def parse_emoticons(text, callback=None):
    """Find and transform emoticons in text using :data:`default_parser`."""
    return default_parser.parse_emoticons(text, callback)


def parse_tokens(text, callback=None):
    """Find and transform ``:name:`` tokens in text using :data:`default_parser`."""
    return default_parser.parse_tokens(text, callback)


def parse_unicode(text, callback=None):
    """Find and transform unicode emoji in text using :data:`default_parser`."""
    return default_parser.parse_unicode(text, callback)


def tokenize(text):
    """Replace unicode emoji with ``:name:`` tokens using :data:`default_parser`."""
    return default_parser.tokenize(text)


def detokenize(text):
    """Replace ``:name:`` tokens with unicode emoji using :data:`default_parser`."""
    return default_parser.detokenize(text)


def find(symbol):
    """Find the emoji corresponding to any of the supported notations using :data:`default_parser`."""
    return default_parser.find(symbol)


def filepath(symbol, path=None):
    """Get the pathname of the image of an emoji using :data:`default_parser`."""
    return default_parser.filepath(symbol, path)


def rehash():
    """Discard the matchers cached by :data:`default_parser`."""
    default_parser.rehash()


def emoticon_pattern(rehash=False):
    """Get the matcher for emoticons from :data:`default_parser`."""
    return default_parser.emoticon_pattern(rehash)


def token_pattern():
    """Get the matcher for ``:name:`` tokens from :data:`default_parser`."""
    return default_parser.token_pattern()


def unicode_pattern(rehash=False):
    """Get the matcher for unicode emoji from :data:`default_parser`."""
    return default_parser.unicode_pattern(rehash)
