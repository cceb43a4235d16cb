# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""Object interface over the token functions, bound to a set of keys."""

from . import token
from .key import Key
from .encoding import URLSAFE


class InvalidToken(Exception):
    pass


class Fernet:
    MAX_CLOCK_SKEW = token.MAX_CLOCK_SKEW

    def __init__(self, keys, encoding=URLSAFE):
        """Initialization.

        In:
          - ``keys`` -- a key or a list of keys, newest first. Keys are
            ``Key`` objects or their text forms. The first key encrypts.
          - ``encoding`` -- base64 alphabet of the tokens
        """
        if isinstance(keys, (Key, str, bytes)):
            keys = [keys]

        self.keys = tuple(key if isinstance(key, Key) else Key.decode(key, encoding) for key in keys)
        if not self.keys:
            raise ValueError('At least one Fernet key is required')

        self.encoding = encoding

    @staticmethod
    def generate_key(encoding=URLSAFE):
        return Key.generate().encode(encoding)

    def encrypt(self, data, now=None):
        return token.generate(data, self.keys[0], now, encoding=self.encoding)

    def decrypt(self, data, ttl=None, now=None):
        message = token.verify_with_keys(data, ttl, now, self.keys, self.encoding)
        if message is None:
            raise InvalidToken()

        return message
