# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

from .key import Key, FernetError, KeyLengthError, KeyFormatError, ZeroKeyError  # noqa: F401
from .codec import Fernet, InvalidToken  # noqa: F401
from .token import VERSION, MAX_CLOCK_SKEW, generate, verify, authenticate, verify_with_keys  # noqa: F401
from .stream import TokenReader, TokenWriter  # noqa: F401
from .encoding import URLSAFE, STANDARD, Encoding  # noqa: F401
