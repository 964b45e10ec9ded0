# Copyright (c) 2023, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses


# Base class allowing to catch any utf7_imap related exceptions
class IMAPUTF7Error(ValueError):
    pass


class DecodeError(IMAPUTF7Error):
    """
    The input is not valid IMAP modified UTF-7. Only raised when
    decoding in strict mode.

    ``start`` and ``end`` delimit the offending span of ``text``.
    """

    def __init__(self, text: str, start: int, end: int, reason: str) -> None:
        super().__init__(
            "can't decode %r at position %d-%d: %s" % (text, start, end, reason)
        )
        self.text = text
        self.start = start
        self.end = end
        self.reason = reason


class InvalidSymbolError(DecodeError):
    """A shift sequence contains a character outside the modified base64 alphabet."""


class UnterminatedSequenceError(DecodeError):
    """The input ends inside a shift sequence."""


class TruncatedSequenceError(DecodeError):
    """
    The symbols of a shift sequence don't add up to a whole number of
    UTF-16 code units.
    """


class InvalidUTF16Error(DecodeError):
    # Unpaired surrogate in the decoded code units
    pass
