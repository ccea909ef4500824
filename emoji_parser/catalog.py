# Find and transform emoji unicode, tokens and emoticons in text.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026
# URL: https://github.com/xolox/python-emoji-parser

"""
Read-only lookup over the catalog of known emoji.

The default catalog is generated from the ``EMOJI_DATA`` table of the emoji_
package. That table contains a separate entry for every rendering of an emoji
(fully qualified, minimally qualified and unqualified), the entries of one
emoji share an English name. This module folds such entries together into a
single :class:`Symbol` whose :attr:`~Symbol.unicode_variants` lists all of
the renderings.

.. _emoji: https://pypi.org/project/emoji/
"""

# Standard library modules.
import collections
import re

# External dependencies.
import emoji
from humanfriendly import Timer, pluralize
from property_manager import PropertyManager, lazy_property, mutable_property
from verboselogs import VerboseLogger

# Public identifiers that require documentation.
__all__ = (
    "EmojiCatalog",
    "NAME_PATTERN",
    "Symbol",
    "format_image_filename",
    "load_symbols",
)

NAME_PATTERN = re.compile(r"^[\w+-]+$")
"""A compiled regular expression that matches names that are valid inside a ``:name:`` token."""

VARIATION_SELECTOR_16 = "\ufe0f"
"""The variation selector that requests emoji presentation (a string)."""

# Initialize a logger for this module.
logger = VerboseLogger(__name__)


class Symbol(collections.namedtuple("Symbol", "name, aliases, unicode_variants, raw, image_filename")):

    """
    An emoji known to the catalog.

    Symbols are named tuples with the following fields:

    - ``name``: The canonical name of the emoji (a string without colons).
    - ``aliases``: A tuple with every name by which the emoji can be found
      (the canonical name comes first).
    - ``unicode_variants``: A tuple of strings with the unicode renderings of
      the emoji (for example with and without a variation selector).
    - ``raw``: The canonical unicode rendering (a string).
    - ``image_filename``: The relative pathname of an image (a string).
    """

    __slots__ = ()


class EmojiCatalog(PropertyManager):

    """
    Read-only lookup over a list of :class:`Symbol` objects.

    When no :attr:`symbols` are given the catalog is loaded from the emoji
    package by :func:`load_symbols()`. The lookup tables are generated once
    and never updated, so the list of symbols should not be modified after
    the catalog has been used.
    """

    @mutable_property(cached=True)
    def symbols(self):
        """A list of :class:`Symbol` objects (defaults to the result of :func:`load_symbols()`)."""
        timer = Timer()
        symbols = load_symbols()
        logger.verbose("Loaded %s from the emoji package in %s.", pluralize(len(symbols), "emoji"), timer)
        return symbols

    @lazy_property
    def names(self):
        """
        A dictionary that maps names to :class:`Symbol` objects.

        Canonical names are registered before aliases and the first symbol to
        register a name wins, this guarantees that a symbol can always be
        found by its canonical name.
        """
        mapping = {}
        for symbol in self.symbols:
            mapping.setdefault(symbol.name, symbol)
        for symbol in self.symbols:
            for alias in symbol.aliases:
                mapping.setdefault(alias, symbol)
        return mapping

    @lazy_property
    def renderings(self):
        """A dictionary that maps unicode renderings to :class:`Symbol` objects."""
        mapping = {}
        for symbol in self.symbols:
            for variant in symbol.unicode_variants:
                mapping.setdefault(variant, symbol)
        return mapping

    def all(self):
        """Get all symbols in the catalog (a list of :class:`Symbol` objects)."""
        return list(self.symbols)

    def find_by_name(self, name):
        """
        Find a symbol by its canonical name or one of its aliases.

        :param name: The name of the emoji (a string without colons).
        :returns: A :class:`Symbol` object or :data:`None`.
        """
        return self.names.get(name)

    def find_by_unicode(self, rendering):
        """
        Find a symbol by one of its unicode renderings.

        :param rendering: The unicode rendering (a string).
        :returns: A :class:`Symbol` object or :data:`None`.
        """
        return self.renderings.get(rendering)


def load_symbols(data=None):
    """
    Convert the emoji package's data into :class:`Symbol` objects.

    :param data: A dictionary in the format of ``emoji.EMOJI_DATA``
                 (defaults to ``emoji.EMOJI_DATA``).
    :returns: A list of :class:`Symbol` objects.

    The entries in `data` are grouped by their English name. The aliases of a
    symbol are the (GitHub style) aliases provided by the emoji package
    followed by the English name. The canonical name is the first alias that
    can be used inside a ``:name:`` token and isn't claimed by an earlier
    symbol, falling back to the English name.
    """
    if data is None:
        data = emoji.EMOJI_DATA
    groups = collections.OrderedDict()
    for rendering, properties in data.items():
        groups.setdefault(properties["en"], []).append((rendering, properties))
    # Aliases claim names before English names do.
    candidates = []
    owners = {}
    for english_name, entries in groups.items():
        names = []
        for rendering, properties in entries:
            for alias in properties.get("alias", []):
                add_name(names, alias)
        aliases = list(names)
        add_name(names, english_name)
        for alias in aliases:
            owners.setdefault(alias, english_name)
        candidates.append((english_name, entries, names))
    for english_name, entries, names in candidates:
        owners.setdefault(names[-1], english_name)
    symbols = []
    for english_name, entries, names in candidates:
        canonical_name = names[-1]
        for name in names:
            if NAME_PATTERN.match(name) and owners[name] == english_name:
                canonical_name = name
                break
        # Fully qualified renderings have the lowest status value.
        raw = min(entries, key=lambda e: e[1].get("status", 0))[0]
        symbols.append(
            Symbol(
                name=canonical_name,
                aliases=tuple([canonical_name] + [n for n in names if n != canonical_name]),
                unicode_variants=tuple(rendering for rendering, properties in entries),
                raw=raw,
                image_filename=format_image_filename(raw),
            )
        )
    return symbols


def add_name(names, value):
    """Add a name (with surrounding colons stripped) to a list of names, avoiding duplicates."""
    name = value.strip(":")
    if name and name not in names:
        names.append(name)


def format_image_filename(rendering):
    """
    Generate the relative pathname of an emoji image.

    :param rendering: The unicode rendering of the emoji (a string).
    :returns: A pathname like ``unicode/1f1e9-1f1ea.png`` (a string).

    Variation selector 16 is omitted from the filename because image sets
    generally don't include it.
    """
    codepoints = ["%04x" % ord(c) for c in rendering if c != VARIATION_SELECTOR_16]
    return "unicode/%s.png" % "-".join(codepoints)
