# Find and transform emoji unicode, tokens and emoticons in text.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 17, 2026
# URL: https://github.com/xolox/python-emoji-parser

"""Translation between textual emoticons (smilies) and emoji names."""

# Standard library modules.
import re

# External dependencies.
from verboselogs import VerboseLogger

# Modules included in our package.
from emoji_parser.matchers import NEVER_MATCHES

# Public identifiers that require documentation.
__all__ = (
    "BASE_EMOTICONS",
    "NOSE_PATTERN",
    "compile_emoticon_pattern",
    "expand_emoticons",
    "strip_nose",
)

BASE_EMOTICONS = {
    "angry": ">:-(",
    "blush": ":-)",
    "cry": ":'(",
    "confused": (":-\\", ":-/"),
    "disappointed": ":-(",
    "kiss": ":-*",
    "neutral_face": ":-|",
    "monkey_face": ":o)",
    "open_mouth": ":-o",
    "smiley": "=-)",
    "smile": ":-D",
    "stuck_out_tongue": (":-p", ":-P", ":-b"),
    "stuck_out_tongue_winking_eye": (";-p", ";-P", ";-b"),
    "wink": ";-)",
}
"""
Mapping of emoji names to textual emoticons.

The values are strings or tuples of strings. Each emoticon is registered
with and without its "nose" by :func:`expand_emoticons()`.
"""

NOSE_PATTERN = re.compile(r"(?<=[:;=])-")
"""A compiled regular expression that finds the nose of an emoticon."""

# Initialize a logger for this module.
logger = VerboseLogger(__name__)


def expand_emoticons(*tables):
    """
    Generate a mapping of emoticons to emoji names.

    :param tables: One or more dictionaries in the format of
                   :data:`BASE_EMOTICONS`.
    :returns: A dictionary that maps every emoticon, with and without nose,
              to the name of an emoji.

    Emoticons that were already registered are not overwritten, so the first
    table to define an emoticon wins (this also applies to the noseless form
    of an emoticon).
    """
    mapping = {}
    for table in tables:
        for name, emoticons in table.items():
            if isinstance(emoticons, str):
                emoticons = [emoticons]
            for emoticon in emoticons:
                for spelling in (emoticon, strip_nose(emoticon)):
                    if spelling in mapping:
                        if mapping[spelling] != name:
                            logger.debug("Ignoring duplicate emoticon %r for %s.", spelling, name)
                    else:
                        mapping[spelling] = name
    return mapping


def strip_nose(emoticon):
    """Remove the nose from an emoticon (``:-)`` becomes ``:)``)."""
    return NOSE_PATTERN.sub("", emoticon, count=1)


def compile_emoticon_pattern(emoticons):
    """
    Compile a regular expression that matches the given emoticons.

    :param emoticons: A dictionary in the format returned by
                      :func:`expand_emoticons()`.
    :returns: A regular expression without capture groups (a string).

    When an emoticon and its noseless form map to the same emoji a single
    alternative is emitted where the nose is optional (``:-?\\)``). The
    emoticons have to be surrounded by whitespace or the start or end of the
    text, so that an emoticon embedded in a word doesn't match.
    """
    candidates = {}
    for emoticon, name in emoticons.items():
        match = NOSE_PATTERN.search(emoticon)
        compact = strip_nose(emoticon)
        if match and emoticons.get(compact) == name:
            key = compact
            pattern = re.escape(emoticon[: match.start()]) + "-?" + re.escape(emoticon[match.end() :])
        else:
            key = emoticon
            pattern = re.escape(emoticon)
        if len(pattern) > len(candidates.get(key, "")):
            candidates[key] = pattern
    if not candidates:
        return NEVER_MATCHES
    alternatives = sorted(candidates.values(), key=lambda p: (-len(p), p))
    return r"(?:^|(?<=\s))(?:%s)(?=\s|$)" % "|".join(alternatives)
