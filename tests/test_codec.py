# Copyright (c) 2023, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses

import codecs
import unittest

import utf7_imap  # noqa: F401 registers the codec
from utf7_imap.exceptions import InvalidSymbolError, UnterminatedSequenceError


class TestIMAPUTF7Codec(unittest.TestCase):
    def _test(self, decoded, encoded):
        self.assertEqual(decoded.encode("imap-utf-7"), encoded)
        self.assertEqual(encoded.decode("imap-utf-7"), decoded)

    def test_direct(self):
        self._test("Hello, world!", b"Hello, world!")

    def test_ampersand(self):
        self._test("Slanted & Enchanted", b"Slanted &- Enchanted")

    def test_shifted(self):
        self._test(
            "Отправленные",
            b"&BB4EQgQ,BEAEMAQyBDsENQQ9BD0ESwQ1-",
        )
        self._test("\U0001030f", b"&2ADfDw-")

    def test_empty(self):
        self._test("", b"")

    def test_lookup(self):
        names = ["imap-utf-7", "IMAP-UTF-7", "imap_utf_7", "utf-7-imap", "imap4-utf-7"]
        for name in names:
            self.assertEqual(codecs.lookup(name).name, "imap-utf-7")

    def test_not_the_standard_utf7(self):
        self.assertNotEqual(codecs.lookup("utf-7").name, "imap-utf-7")
        self.assertNotEqual("&".encode("utf-7"), "&".encode("imap-utf-7"))

    def test_decode_strict(self):
        with self.assertRaises(UnicodeDecodeError) as cm:
            b"Potos&AO0".decode("imap-utf-7")
        self.assertEqual(cm.exception.encoding, "imap-utf-7")
        self.assertEqual(cm.exception.start, 5)
        self.assertEqual(cm.exception.end, 9)
        self.assertIsInstance(cm.exception.__cause__, UnterminatedSequenceError)

    def test_decode_strict_invalid_symbol(self):
        with self.assertRaises(UnicodeDecodeError) as cm:
            b"&AP8*-".decode("imap-utf-7")
        self.assertEqual(cm.exception.start, 4)
        self.assertEqual(cm.exception.end, 5)
        self.assertEqual(cm.exception.reason, "invalid modified base64 symbol '*'")
        self.assertIsInstance(cm.exception.__cause__, InvalidSymbolError)

    def test_decode_lenient(self):
        self.assertEqual(
            b"Potos&AO0".decode("imap-utf-7", errors="ignore"), "Potos\u00ed"
        )
        self.assertEqual(b"&2AA-".decode("imap-utf-7", errors="replace"), "\ufffd")

    def test_codecs_functions(self):
        self.assertEqual(
            codecs.encode("Stuff & Things", "imap-utf-7"), b"Stuff &- Things"
        )
        self.assertEqual(
            codecs.decode(b"Hello&AP8-world", "imap-utf-7"), "Hello\xffworld"
        )
        self.assertEqual(codecs.decode(bytearray(b"&-"), "imap-utf-7"), "&")
