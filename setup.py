#!/usr/bin/env python3

# Copyright (c) 2023, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses

from os import path
from typing import Dict

from setuptools import setup  # type: ignore[import-untyped]

# Read version info
here = path.dirname(__file__)
version_file = path.join(here, "utf7_imap", "version.py")
info: Dict[str, str] = {}
exec(open(version_file).read(), {}, info)

desc = """\
utf7-imap converts mailbox names to and from the modified UTF-7 encoding
used by IMAP (RFC 3501, section 5.1.3).

Features:
    * Plain ``encode()`` and ``decode()`` functions working on Python strings.
    * Runs of non-ASCII characters are coalesced into a single shift sequence.
    * Lenient decoding of malformed names by default, strict decoding on demand.
    * An ``imap-utf-7`` codec usable with ``str.encode()`` and ``bytes.decode()``.

utf7-imap has no dependencies outside the Python standard library.
"""

setup(
    name="utf7-imap",
    description="Encode and decode IMAP modified UTF-7 mailbox names",
    keywords="imap utf-7 utf7 mailbox email mail",
    version=info["version"],
    maintainer=info["maintainer"],
    maintainer_email=info["maintainer_email"],
    author=info["author"],
    author_email=info["author_email"],
    license="3-Clause BSD License",
    packages=["utf7_imap"],
    long_description=desc,
    python_requires=">=3.7.0",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Communications :: Email :: Post-Office :: IMAP",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
