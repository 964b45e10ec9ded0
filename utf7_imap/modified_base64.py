# Copyright (c) 2023, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses

"""
The modified base64 used inside IMAP UTF-7 shift sequences.

It only differs from standard base64 (RFC 4648) by using "," instead of
"/" and by never emitting the "=" padding character: the length of the
data is implied by the "-" closing the shift sequence.
"""

import binascii
import itertools
from typing import Dict, List

from . import exceptions

__all__ = [
    "ALPHABET",
    "SYMBOL_VALUES",
    "encode",
    "decode",
    "invalid_symbols",
    "valid_segments",
    "is_truncated",
]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+,"
SYMBOL_VALUES: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}


def encode(data: bytes) -> str:
    """Encode bytes to modified base64 symbols, without padding.

    A trailing incomplete 6 bit group is right-padded with zero bits and
    still emitted as a symbol.
    """
    if not data:
        return ""
    b64 = binascii.b2a_base64(data, newline=False).rstrip(b"=")
    return b64.replace(b"/", b",").decode("ascii")


def decode(symbols: str) -> bytes:
    """Decode modified base64 symbols to bytes.

    Bits which don't fill a whole byte are discarded. Any character
    outside ALPHABET, padding included, raises InvalidSymbolError.
    """
    invalid = invalid_symbols(symbols)
    if invalid:
        pos = invalid[0]
        raise exceptions.InvalidSymbolError(
            symbols, pos, pos + 1, "invalid modified base64 symbol %r" % symbols[pos]
        )

    # A lone trailing symbol carries 6 bits, not enough for a byte
    if len(symbols) % 4 == 1:
        symbols = symbols[:-1]
    if not symbols:
        return b""
    padded = symbols.replace(",", "/") + "=" * (-len(symbols) % 4)
    return binascii.a2b_base64(padded.encode("ascii"))


def invalid_symbols(symbols: str) -> List[int]:
    """Return the offsets of characters which aren't modified base64 symbols."""
    return [i for i, c in enumerate(symbols) if c not in SYMBOL_VALUES]


def valid_segments(symbols: str) -> List[str]:
    """Split symbols into the runs of valid symbols between invalid characters."""
    return [
        "".join(group)
        for valid, group in itertools.groupby(symbols, lambda c: c in SYMBOL_VALUES)
        if valid
    ]


def is_truncated(symbols: str) -> bool:
    """
    True if the symbols don't decode to a whole number of UTF-16 code
    units: either a lone trailing symbol or an odd number of bytes.
    """
    return len(symbols) % 4 == 1 or len(symbols) * 6 // 8 % 2 == 1

