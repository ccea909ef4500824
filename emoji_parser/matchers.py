# Find and transform emoji unicode, tokens and emoticons in text.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026
# URL: https://github.com/xolox/python-emoji-parser

"""
Compilation of the regular expressions that find emoji in text.

Emoji can have several unicode renderings, for example with and without a
variation selector, or a keycap sequence with and without variation selector
in the middle. Joining every rendering of every emoji as an independent
alternative produces a huge regular expression that's very slow to match,
because the regular expression engine has to try each alternative at every
position in the text. :func:`factor_variants()` factors out the prefix shared
by the renderings of an emoji so that the renderings extending that prefix
share a single alternative.
"""

# Standard library modules.
import collections
import re

# External dependencies.
from property_manager import PropertyManager, lazy_property, required_property
from verboselogs import VerboseLogger

# Public identifiers that require documentation.
__all__ = (
    "CompiledMatcher",
    "KIND_EMOTICONS",
    "KIND_TOKENS",
    "KIND_UNICODE",
    "NEVER_MATCHES",
    "ParseOptions",
    "TOKEN_PATTERN",
    "combine_matchers",
    "compile_unicode_fragment",
    "compile_unicode_pattern",
    "escape_codepoints",
    "factor_variants",
    "get_unicode_branches",
)

KIND_UNICODE = "unicode"
"""The name of the notation kind for literal unicode emoji (a string)."""

KIND_TOKENS = "tokens"
"""The name of the notation kind for ``:name:`` tokens (a string)."""

KIND_EMOTICONS = "emoticons"
"""The name of the notation kind for ASCII emoticons (a string)."""

TOKEN_PATTERN = r":([\w+-]+):"
"""The regular expression that matches ``:name:`` tokens (a string)."""

NEVER_MATCHES = r"(?!)"
"""A regular expression that doesn't match anything (used for empty catalogs)."""

# Initialize a logger for this module.
logger = VerboseLogger(__name__)


class ParseOptions(collections.namedtuple("ParseOptions", "unicode, tokens, emoticons")):

    """
    The notation kinds that should be recognized in text.

    When none of the notation kinds is enabled all of them are enabled, so
    ``ParseOptions()`` is the same as ``ParseOptions(True, True, True)``.
    """

    __slots__ = ()

    def __new__(cls, unicode=False, tokens=False, emoticons=False):
        """Normalize the flags to booleans and apply the default of enabling all notation kinds."""
        if not (unicode or tokens or emoticons):
            unicode = tokens = emoticons = True
        return super(ParseOptions, cls).__new__(cls, bool(unicode), bool(tokens), bool(emoticons))

    @property
    def kinds(self):
        """The names of the enabled notation kinds (a tuple of strings)."""
        return tuple(name for name in self._fields if getattr(self, name))


class CompiledMatcher(PropertyManager):

    """
    A compiled regular expression that finds one or more notation kinds.

    Compiled matchers are never modified after they've been created, instead
    they're replaced wholesale when the catalog or emoticon table changes.
    """

    @required_property
    def fragment(self):
        """
        The regular expression without the surrounding capture group (a string).

        Fragments are used to compose a matcher for multiple notation kinds
        out of matchers for single notation kinds.
        """

    @required_property
    def kinds(self):
        """
        The notation kinds matched by the capture groups (a tuple).

        Each item in the tuple corresponds to a capture group of :attr:`regex`
        and is itself a tuple with the names of the notation kinds whose text
        is captured by that group.
        """

    @required_property
    def pattern(self):
        """The complete regular expression, including capture groups (a string)."""

    @lazy_property
    def regex(self):
        """The compiled regular expression (a :class:`re.Pattern` object)."""
        return re.compile(self.pattern)

    def get_group(self, match):
        """
        Find the capture group that matched.

        :param match: A :class:`re.Match` object produced by :attr:`regex`.
        :returns: A tuple with two values:

                  1. The notation kinds of the capture group (a tuple of strings).
                  2. The captured text (a string).

                  When no capture group matched both values are :data:`None`.
        """
        for kinds, value in zip(self.kinds, match.groups()):
            if value:
                return kinds, value
        return None, None


def factor_variants(variants):
    """
    Factor out the prefix shared by the unicode renderings of one emoji.

    :param variants: An iterable with the renderings of an emoji. Each
                     rendering can be given as a string or as a sequence of
                     integer codepoints.
    :returns: A tuple with three values:

              1. The shared base (a tuple of codepoints or :data:`None`).
              2. The suffixes that follow the base (a list of tuples). The
                 empty tuple is included when the base is itself a rendering.
              3. The renderings that don't start with the base (a list of
                 tuples).

    The renderings are sorted longest first and the shortest rendering is
    used as the base. When the base is not a prefix of all renderings the
    first codepoint of the base is tried as a shared prefix instead.
    """
    sequences = set()
    for value in variants:
        sequence = tuple(ord(c) for c in value) if isinstance(value, str) else tuple(value)
        if sequence:
            sequences.add(sequence)
    sequences = sorted(sequences, key=lambda s: (-len(s), s))
    if not sequences:
        return None, [], []
    shortest = sequences[-1]
    if all(s[: len(shortest)] == shortest for s in sequences):
        base = shortest
    elif all(s[0] == shortest[0] for s in sequences):
        base = shortest[:1]
    else:
        base = None
    suffixes = []
    standalone = []
    for sequence in sequences:
        if base is not None and sequence[: len(base)] == base:
            suffixes.append(sequence[len(base) :])
        else:
            standalone.append(sequence)
    return base, suffixes, standalone


def compile_unicode_fragment(variants):
    """
    Compile the unicode renderings of one emoji into a regular expression.

    :param variants: Refer to :func:`factor_variants()`.
    :returns: A regular expression (a string) or :data:`None` when no
              renderings are given.

    When the shared base is a rendering the remaining renderings become an
    optional suffix of the base. When it's not (the base is the first
    codepoint of the shortest rendering) the suffix is required, otherwise
    the lone codepoint would match. Renderings that don't share the base are
    emitted as independent alternatives.

    >>> compile_unicode_fragment(['\\u2764\\ufe0f', '\\u2764'])
    '\\\\U00002764(?:\\\\U0000fe0f)?'
    """
    base, suffixes, standalone = factor_variants(variants)
    alternatives = [escape_codepoints(s) for s in standalone]
    if base is not None:
        fragment = escape_codepoints(base)
        options = [escape_codepoints(s) for s in suffixes if s]
        if options:
            fragment += "(?:%s)" % "|".join(options)
            if () in suffixes:
                fragment += "?"
        alternatives.append(fragment)
    return "|".join(alternatives) if alternatives else None


def compile_unicode_pattern(symbols):
    """
    Compile the unicode renderings of all emoji into a single regular expression.

    :param symbols: An iterable of :class:`~emoji_parser.catalog.Symbol` objects.
    :returns: A regular expression without capture groups (a string).

    The regular expression is composed of the branches generated by
    :func:`get_unicode_branches()`, ordered so that branches matching longer
    renderings come first. Python tries the alternatives of a regular
    expression in order, so an emoji whose rendering is a prefix of another
    emoji's rendering (think of zero width joiner sequences, or a rendering
    with and without variation selector) can't shadow the longer emoji.
    Emoji without renderings are silently skipped.
    """
    branches = []
    for symbol in symbols:
        branches.extend(get_unicode_branches(symbol.unicode_variants))
    # The sort is stable, so ties keep the order of the catalog.
    branches.sort(key=lambda b: -b[0])
    return "|".join(b[1] for b in branches) if branches else NEVER_MATCHES


def get_unicode_branches(variants):
    """
    Split the renderings of one emoji into branches of the master pattern.

    :param variants: Refer to :func:`factor_variants()`.
    :returns: A list of tuples with two values each: The length of the
              renderings matched by the branch and the regular expression of
              the branch (a string).

    The renderings that extend the shared base are grouped by length, each
    group becomes a branch that shares the base. Because every branch
    matches renderings of a single length, ordering the branches by length
    is enough to guarantee that the longest rendering at a given position
    wins.
    """
    base, suffixes, standalone = factor_variants(variants)
    branches = [(len(s), escape_codepoints(s)) for s in standalone]
    if base is not None:
        by_length = collections.OrderedDict()
        for suffix in suffixes:
            by_length.setdefault(len(suffix), []).append(suffix)
        for length, group in by_length.items():
            pattern = escape_codepoints(base)
            if length:
                pattern += "(?:%s)" % "|".join(escape_codepoints(s) for s in group)
            branches.append((len(base) + length, pattern))
    return branches


def escape_codepoints(codepoints):
    """
    Encode a sequence of codepoints as regular expression escape sequences.

    :param codepoints: A sequence of integers.
    :returns: A string like ``\\U0001f600``.
    """
    return "".join("\\U%08x" % c for c in codepoints)


def combine_matchers(tokens=None, unicode=None, emoticons=None):
    """
    Combine the matchers of one or more notation kinds into a single matcher.

    :param tokens: The :class:`CompiledMatcher` for ``:name:`` tokens (optional).
    :param unicode: The :class:`CompiledMatcher` for unicode emoji (optional).
    :param emoticons: The :class:`CompiledMatcher` for emoticons (optional).
    :returns: A :class:`CompiledMatcher` object.
    :raises: :exc:`~exceptions.ValueError` when no matchers are given.

    When a single matcher is given it is returned as is. Otherwise the token
    name is captured in the first group, followed by a group that captures
    emoticons and unicode emoji (emoticons never overlap with unicode emoji,
    so they can share a group).
    """
    given = [m for m in (tokens, unicode, emoticons) if m is not None]
    if not given:
        raise ValueError("At least one matcher is required!")
    if len(given) == 1:
        return given[0]
    alternatives = []
    kinds = []
    if tokens is not None:
        alternatives.append("(?:%s)" % tokens.fragment)
        kinds.append((KIND_TOKENS,))
    shared = [m for m in (emoticons, unicode) if m is not None]
    if shared:
        alternatives.append("(%s)" % "|".join("(?:%s)" % m.fragment for m in shared))
        kinds.append(tuple(k for m in shared for k in m.kinds[0]))
    pattern = "|".join(alternatives)
    logger.debug("Combined matchers for %s.", ", ".join(k for group in kinds for k in group))
    return CompiledMatcher(fragment=pattern, pattern=pattern, kinds=tuple(kinds))
