"""
Shared pure-utility functions for debugstr.

These helpers have no business logic and no side effects.
They are used by renderer.py, inspector.py and the formatters.
"""

import math


def code_units(text):
    """Split text into UTF-16 code units.

    Characters above U+FFFF become a surrogate pair; lone surrogates already
    in the string are kept as-is.
    """
    units = []
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            units.append(0xD800 + (cp >> 10))
            units.append(0xDC00 + (cp & 0x3FF))
        else:
            units.append(cp)
    return units


def _index_digit_width(count):
    """Digits needed to print *count* itself (not count - 1)."""
    if count == 1:
        return 1
    return int(math.floor(math.log10(count) + 1))


def _chunk_ranges(total, size):
    """Split range(total) into consecutive (start, stop) ranges of *size*.
    The last range holds the remainder."""
    return tuple((start, min(start + size, total)) for start in range(0, total, size))
