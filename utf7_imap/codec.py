# Copyright (c) 2023, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses

"""
Registration of IMAP modified UTF-7 with the :mod:`codecs` registry.

Once this module is imported, mailbox names can be converted with the
usual string methods::

    >>> "Отправленные".encode("imap-utf-7")
    b'&BB4EQgQ,BEAEMAQyBDsENQQ9BD0ESwQ1-'
    >>> b"Stuff &- Things".decode("imap-utf-7")
    'Stuff & Things'

Decoding with ``errors="strict"`` (the default of :meth:`bytes.decode`)
raises :class:`UnicodeDecodeError` on malformed input, chained to the
:class:`~utf7_imap.exceptions.DecodeError` describing it;
any other error handler selects the lenient behaviour of
:func:`utf7_imap.imap_utf7.decode`.
"""

import codecs
from typing import Optional, Tuple, Union

from . import exceptions, imap_utf7
from .util import to_bytes

__all__ = ["CODEC_NAME", "search_function"]

CODEC_NAME = "imap-utf-7"
_ALIASES = frozenset(["imap-utf-7", "imap4-utf-7", "utf-7-imap"])


def imap_utf7_encode(input: str, errors: str = "strict") -> Tuple[bytes, int]:
    return to_bytes(imap_utf7.encode(input)), len(input)


def imap_utf7_decode(
    input: Union[bytes, bytearray, memoryview], errors: str = "strict"
) -> Tuple[str, int]:
    data = bytes(input)
    try:
        return imap_utf7.decode(data, strict=errors == "strict"), len(input)
    except exceptions.DecodeError as e:
        # Decoding works on the ASCII text of data, so offsets match
        raise UnicodeDecodeError(CODEC_NAME, data, e.start, e.end, e.reason) from e


def search_function(name: str) -> Optional[codecs.CodecInfo]:
    if name.replace("_", "-") in _ALIASES:
        return codecs.CodecInfo(imap_utf7_encode, imap_utf7_decode, name=CODEC_NAME)
    return None


codecs.register(search_function)
