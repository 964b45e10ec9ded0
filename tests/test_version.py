# Copyright (c) 2015, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses

import unittest

import utf7_imap
from utf7_imap.version import _utf7_imap_version_string


class TestVersionString(unittest.TestCase):
    def test_dot_oh(self):
        self.assertEqual(_utf7_imap_version_string((1, 0, 0, "final")), "1.0.0")

    def test_point_release(self):
        self.assertEqual(_utf7_imap_version_string((1, 2, 3, "final")), "1.2.3")

    def test_beta_point(self):
        self.assertEqual(_utf7_imap_version_string((2, 1, 3, "beta")), "2.1.3-beta")

    def test_package_exports(self):
        self.assertEqual(utf7_imap.__version__, utf7_imap.version.version)
        self.assertEqual(utf7_imap.encode("&"), "&-")
        self.assertEqual(utf7_imap.decode("&-"), "&")
        self.assertTrue(issubclass(utf7_imap.DecodeError, utf7_imap.IMAPUTF7Error))
