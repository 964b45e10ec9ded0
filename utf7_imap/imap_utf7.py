# Copyright (c) 2023, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses

# This file contains two main methods used to encode and decode UTF-7
# string, described in the RFC 3501. There are some variations specific
# to IMAP4rev1, so the built-in Python UTF-7 codec can't be used instead.
#
# The main difference is the shift character (used to switch from ASCII to
# base64 encoding context), which is & in this modified UTF-7 convention,
# since + is considered as mainly used in mailbox names.
# Other variations and examples can be found in the RFC 3501, section 5.1.3.

import logging
from typing import List, Optional, Union

from . import exceptions, modified_base64
from .util import to_unicode

logger = logging.getLogger(__name__)

__all__ = ["encode", "decode", "DIRECT_CHARS"]

SHIFT_CHAR = "&"
UNSHIFT_CHAR = "-"

# RFC 3501 5.1.3: printable US-ASCII represents itself, except "&"
DIRECT_CHARS = frozenset(chr(o) for o in range(0x20, 0x7F)) - {SHIFT_CHAR}


def encode(s: str) -> str:
    """Encode a folder name using IMAP modified UTF-7 encoding.

    Printable ASCII is kept as is, "&" becomes "&-" and each run of
    other characters is replaced by a single base64 shift sequence.
    """
    res: List[str] = []

    b64_buffer: List[str] = []

    def consume_b64_buffer(buf: List[str]) -> None:
        """
        Consume the buffer by encoding it into a modified base 64 representation
        and surround it with shift characters & and -
        """
        if buf:
            # Lone surrogates can't be paired up, let the decoder replace them
            utf16 = "".join(buf).encode("utf-16-be", "surrogatepass")
            res.append(SHIFT_CHAR + modified_base64.encode(utf16) + UNSHIFT_CHAR)
            del buf[:]

    for c in s:
        # printable ascii case should not be modified
        if c in DIRECT_CHARS:
            consume_b64_buffer(b64_buffer)
            res.append(c)
        # Special case: & is used as shift character so we need to escape it
        elif c == SHIFT_CHAR:
            consume_b64_buffer(b64_buffer)
            res.append(SHIFT_CHAR + UNSHIFT_CHAR)
        # Bufferize characters that will be encoded in base64 and append them later
        # in the result, when iterating over ASCII character or the end of string
        else:
            b64_buffer.append(c)

    # Consume the remaining buffer if the string finish with non-ASCII characters
    consume_b64_buffer(b64_buffer)

    return "".join(res)


def decode(s: Union[str, bytes], strict: bool = False) -> str:
    """Decode a folder name from IMAP modified UTF-7 encoding to unicode.

    Input may be text or the raw bytes received from the server.

    By default malformed shift sequences are decoded as well as
    possible: invalid symbols and bits which don't make up a whole
    UTF-16 code unit are dropped, unpaired surrogates are replaced by
    U+FFFD and a missing "-" is assumed at the end of the input. With
    *strict* set, a :class:`~utf7_imap.exceptions.DecodeError` is raised
    instead.
    """
    if isinstance(s, bytes):
        s = to_unicode(s)

    res: List[str] = []
    # Position of the shift character opening the current base64 substring
    shift_pos: Optional[int] = None
    for i, c in enumerate(s):
        # Shift character -> starts a base64 substring
        if shift_pos is None and c == SHIFT_CHAR:
            shift_pos = i
        # No shift sequence in progress, should be an ASCII printable char
        elif shift_pos is None:
            res.append(c)
        # End shift char. -> append the decoded substring to the result
        elif c == UNSHIFT_CHAR:
            res.append(_decode_shifted(s, shift_pos, i, strict))
            shift_pos = None

    # Decode the remaining substring if the closing shift char is missing
    if shift_pos is not None:
        if strict:
            raise exceptions.UnterminatedSequenceError(
                s, shift_pos, len(s), "input ends inside a shift sequence"
            )
        logger.debug("Unterminated shift sequence at position %d in %r", shift_pos, s)
        res.append(_decode_shifted(s, shift_pos, len(s), strict))

    return "".join(res)


def _decode_shifted(text: str, start: int, end: int, strict: bool) -> str:
    """Decode the shift sequence text[start:end], start being the "&"."""
    symbols = text[start + 1 : end]
    # Special case &-, representing "&" escaped
    if not symbols:
        return SHIFT_CHAR

    span_end = min(end + 1, len(text))

    segments = [symbols]
    invalid = modified_base64.invalid_symbols(symbols)
    if invalid:
        if strict:
            pos = start + 1 + invalid[0]
            raise exceptions.InvalidSymbolError(
                text, pos, pos + 1, "invalid modified base64 symbol %r" % text[pos]
            )
        logger.debug(
            "Dropping %d invalid symbol(s) from shift sequence %r",
            len(invalid),
            text[start:span_end],
        )
        # An invalid symbol ends a base64 group, the symbols after it
        # start a new one aligned on a code unit boundary
        segments = modified_base64.valid_segments(symbols)

    return "".join(
        _decode_segment(text, start, span_end, segment, strict) for segment in segments
    )


def _decode_segment(
    text: str, start: int, end: int, symbols: str, strict: bool
) -> str:
    """Decode a run of valid symbols from the shift sequence text[start:end]."""
    sequence = text[start:end]
    if modified_base64.is_truncated(symbols):
        if strict:
            raise exceptions.TruncatedSequenceError(
                text, start, end, "incomplete UTF-16 code unit"
            )
        logger.debug(
            "Dropping incomplete UTF-16 code unit from shift sequence %r", sequence
        )

    utf16 = modified_base64.decode(symbols)
    utf16 = utf16[: len(utf16) - len(utf16) % 2]
    try:
        return utf16.decode("utf-16-be")
    except UnicodeDecodeError:
        if strict:
            raise exceptions.InvalidUTF16Error(
                text, start, end, "unpaired UTF-16 surrogate"
            ) from None
        logger.debug("Replacing unpaired surrogate in shift sequence %r", sequence)
        return utf16.decode("utf-16-be", "replace")
