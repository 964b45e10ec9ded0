# Copyright (c) 2014, Menno Smits
# Released subject to the New BSD License
# Please see http://en.wikipedia.org/wiki/BSD_licenses

from . import codec  # noqa: F401 registers the "imap-utf-7" codec
from .exceptions import *  # noqa: F401,F403
from .imap_utf7 import decode, encode  # noqa: F401
from .version import author as __author__  # noqa: F401
from .version import version as __version__  # noqa: F401

# version_info provides the version number in programmer friendly way.
# The 4th part will be either alpha, beta or final.
from .version import version_info  # noqa: F401
