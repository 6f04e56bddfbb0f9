"""Unicode text segmentation into grapheme clusters and word-bound pieces.

All offsets produced here are UTF-8 byte offsets into the given text.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache
from itertools import accumulate, pairwise

import regex

__all__ = ["grapheme_indices", "word_bound_indices", "is_whitespace_str"]

# Characters Python treats as whitespace that are not Unicode White_Space.
_NOT_UNICODE_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")

_GRAPHEME = regex.compile(r"\X")


class _WB(Enum):
    OTHER = auto()
    CR = auto()
    LF = auto()
    NEWLINE = auto()
    EXTEND = auto()
    ZWJ = auto()
    REGIONAL_INDICATOR = auto()
    FORMAT = auto()
    KATAKANA = auto()
    HEBREW_LETTER = auto()
    ALETTER = auto()
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()
    MIDNUMLET = auto()
    MIDLETTER = auto()
    MIDNUM = auto()
    NUMERIC = auto()
    EXTENDNUMLET = auto()
    WSEGSPACE = auto()


_NEWLINES = frozenset("\x0b\x0c\x85\u2028\u2029")
_WSEGSPACE_CHARS = frozenset(
    " \u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a\u205f\u3000"
)
_MIDLETTER_CHARS = frozenset(":\u00b7\u0387\u055f\u05f4\u2027\ufe13\ufe55\uff1a")
_MIDNUM_CHARS = frozenset(
    ",;\u037e\u0589\u060c\u060d\u066c\u07f8\u2044\ufe10\ufe14\ufe50\ufe54\uff0c\uff1b"
)
_MIDNUMLET_CHARS = frozenset(".\u2018\u2019\u2024\ufe52\uff07\uff0e")

_KATAKANA_RANGES = (
    (0x3031, 0x3035),
    (0x309B, 0x309C),
    (0x30A0, 0x30FA),
    (0x30FC, 0x30FF),
    (0x31F0, 0x31FF),
    (0x32D0, 0x32FE),
    (0x3300, 0x3357),
    (0xFF66, 0xFF9D),
    (0x1B000, 0x1B000),
)

# Letters that are alphabetic but not ALetter: ideographs, hiragana and
# scripts segmented by dictionary (complex context).
_NON_ALETTER_RANGES = (
    (0x0E00, 0x0EFF),
    (0x1000, 0x109F),
    (0x1780, 0x17FF),
    (0x1950, 0x19FF),
    (0x1A20, 0x1AAF),
    (0x3005, 0x3007),
    (0x3040, 0x309F),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xA9E0, 0xA9FF),
    (0xAA60, 0xAADF),
    (0xF900, 0xFAFF),
    (0x20000, 0x3FFFF),
)

_EXT_PICT_RANGES = (
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x231A, 0x231B),
    (0x2328, 0x2328),
    (0x23CF, 0x23CF),
    (0x23E9, 0x23F3),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FE),
    (0x2600, 0x27BF),
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
    (0x1F000, 0x1F1E5),
    (0x1F200, 0x1F3FA),
    (0x1F400, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(low <= cp <= high for low, high in ranges)


def _is_ext_pict(c: str) -> bool:
    return _in_ranges(ord(c), _EXT_PICT_RANGES)


@lru_cache(maxsize=4096)
def _property(c: str) -> _WB:
    cp = ord(c)
    if c == "\r":
        return _WB.CR
    if c == "\n":
        return _WB.LF
    if c in _NEWLINES:
        return _WB.NEWLINE
    if cp == 0x200D:
        return _WB.ZWJ
    if 0x1F1E6 <= cp <= 0x1F1FF:
        return _WB.REGIONAL_INDICATOR
    if c in _WSEGSPACE_CHARS:
        return _WB.WSEGSPACE
    if c == "'":
        return _WB.SINGLE_QUOTE
    if c == '"':
        return _WB.DOUBLE_QUOTE
    if c in _MIDNUMLET_CHARS:
        return _WB.MIDNUMLET
    if c in _MIDLETTER_CHARS:
        return _WB.MIDLETTER
    if c in _MIDNUM_CHARS:
        return _WB.MIDNUM
    category = unicodedata.category(c)
    if (
        category in ("Mn", "Me", "Mc")
        or 0x1F3FB <= cp <= 0x1F3FF
        or cp == 0x200C
        or 0xFF9E <= cp <= 0xFF9F
    ):
        return _WB.EXTEND
    if category == "Cf" and cp != 0x200B:
        return _WB.FORMAT
    if _in_ranges(cp, _KATAKANA_RANGES):
        return _WB.KATAKANA
    if category == "Lo" and (
        0x05D0 <= cp <= 0x05EA or 0x05EF <= cp <= 0x05F2 or 0xFB1D <= cp <= 0xFB4F
    ):
        return _WB.HEBREW_LETTER
    if category == "Nd":
        return _WB.NUMERIC
    if category == "Pc" or cp == 0x202F:
        return _WB.EXTENDNUMLET
    if (c.isalpha() or category == "Nl") and not _in_ranges(cp, _NON_ALETTER_RANGES):
        return _WB.ALETTER
    return _WB.OTHER


_LINE_BREAKS = frozenset({_WB.CR, _WB.LF, _WB.NEWLINE})
_IGNORABLE = frozenset({_WB.EXTEND, _WB.FORMAT, _WB.ZWJ})
_AHLETTER = frozenset({_WB.ALETTER, _WB.HEBREW_LETTER})
_MIDLETTER_Q = frozenset({_WB.MIDLETTER, _WB.MIDNUMLET, _WB.SINGLE_QUOTE})
_MIDNUM_Q = frozenset({_WB.MIDNUM, _WB.MIDNUMLET, _WB.SINGLE_QUOTE})
_BEFORE_EXTENDNUMLET = frozenset(
    {_WB.ALETTER, _WB.HEBREW_LETTER, _WB.NUMERIC, _WB.KATAKANA, _WB.EXTENDNUMLET}
)
_AFTER_EXTENDNUMLET = frozenset(
    {_WB.ALETTER, _WB.HEBREW_LETTER, _WB.NUMERIC, _WB.KATAKANA}
)


@dataclass
class _Unit:
    """A base character with the extend/format/ZWJ characters attached to it."""

    start: int
    first: str
    base: _WB
    last: _WB
    size: int = 1

    @property
    def kind(self) -> _WB:
        return _WB.OTHER if self.base in _IGNORABLE else self.base


def _units(text: str) -> list[_Unit]:
    units: list[_Unit] = []
    for index, c in enumerate(text):
        prop = _property(c)
        if units and prop in _IGNORABLE and units[-1].base not in _LINE_BREAKS:
            units[-1].size += 1
            units[-1].last = prop
        else:
            units.append(_Unit(start=index, first=c, base=prop, last=prop))
    return units


def _breaks_before(units: list[_Unit], k: int) -> bool:
    prev_unit, cur_unit = units[k - 1], units[k]
    if prev_unit.base is _WB.CR and cur_unit.base is _WB.LF:
        return False
    if prev_unit.base in _LINE_BREAKS or cur_unit.base in _LINE_BREAKS:
        return True
    if prev_unit.last is _WB.ZWJ and _is_ext_pict(cur_unit.first):
        return False
    if (
        prev_unit.base is _WB.WSEGSPACE
        and prev_unit.size == 1
        and cur_unit.base is _WB.WSEGSPACE
    ):
        return False

    prev, cur = prev_unit.kind, cur_unit.kind
    prev2 = units[k - 2].kind if k >= 2 else None
    nxt = units[k + 1].kind if k + 1 < len(units) else None

    if prev in _AHLETTER and cur in _AHLETTER:
        return False
    if prev in _AHLETTER and cur in _MIDLETTER_Q and nxt in _AHLETTER:
        return False
    if prev2 in _AHLETTER and prev in _MIDLETTER_Q and cur in _AHLETTER:
        return False
    if prev is _WB.HEBREW_LETTER and cur is _WB.SINGLE_QUOTE:
        return False
    if (
        prev is _WB.HEBREW_LETTER
        and cur is _WB.DOUBLE_QUOTE
        and nxt is _WB.HEBREW_LETTER
    ):
        return False
    if (
        prev2 is _WB.HEBREW_LETTER
        and prev is _WB.DOUBLE_QUOTE
        and cur is _WB.HEBREW_LETTER
    ):
        return False
    if prev is _WB.NUMERIC and cur is _WB.NUMERIC:
        return False
    if prev in _AHLETTER and cur is _WB.NUMERIC:
        return False
    if prev is _WB.NUMERIC and cur in _AHLETTER:
        return False
    if prev2 is _WB.NUMERIC and prev in _MIDNUM_Q and cur is _WB.NUMERIC:
        return False
    if prev is _WB.NUMERIC and cur in _MIDNUM_Q and nxt is _WB.NUMERIC:
        return False
    if prev is _WB.KATAKANA and cur is _WB.KATAKANA:
        return False
    if prev in _BEFORE_EXTENDNUMLET and cur is _WB.EXTENDNUMLET:
        return False
    if prev is _WB.EXTENDNUMLET and cur in _AFTER_EXTENDNUMLET:
        return False
    if prev is _WB.REGIONAL_INDICATOR and cur is _WB.REGIONAL_INDICATOR:
        run = 0
        for unit in reversed(units[:k]):
            if unit.kind is not _WB.REGIONAL_INDICATOR:
                break
            run += 1
        return run % 2 == 0
    return True


def _byte_offsets(text: str) -> list[int]:
    return list(accumulate((len(c.encode("utf-8")) for c in text), initial=0))


def grapheme_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, cluster)`` for each extended grapheme cluster."""
    offset = 0
    for match in _GRAPHEME.finditer(text):
        cluster = match.group()
        yield offset, cluster
        offset += len(cluster.encode("utf-8"))


def word_bound_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, piece)`` for each piece between word boundaries.

    Words, runs of spaces and single punctuation marks each form a piece;
    concatenating the pieces gives back the text.
    """
    if not text:
        return
    units = _units(text)
    starts = [0] + [units[k].start for k in range(1, len(units)) if _breaks_before(units, k)]
    offsets = _byte_offsets(text)
    for begin, end in pairwise([*starts, len(text)]):
        yield offsets[begin], text[begin:end]


def is_whitespace_str(text: str) -> bool:
    """True if every character of ``text`` is Unicode white space."""
    return all(c.isspace() and c not in _NOT_UNICODE_WHITESPACE for c in text)