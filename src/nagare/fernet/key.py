# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""Fernet keys.

A key is 32 random bytes. The lower half signs the tokens, the upper half
encrypts them.
"""

import os
import hmac
import binascii

from .encoding import URLSAFE

KEY_SIZE = 32
ZERO_KEY = bytes(KEY_SIZE)


class FernetError(Exception):
    pass


class KeyLengthError(FernetError, ValueError):
    def __init__(self, length):
        super().__init__('Fernet key decodes to {} bytes instead of {}'.format(length, KEY_SIZE))
        self.length = length


class KeyFormatError(FernetError, ValueError):
    pass


class ZeroKeyError(FernetError, ValueError):
    def __init__(self):
        super().__init__('Fernet key is all zero bytes')


class Key:
    __slots__ = ('_raw',)

    def __init__(self, raw):
        raw = bytes(raw)
        if len(raw) != KEY_SIZE:
            raise KeyLengthError(len(raw))

        object.__setattr__(self, '_raw', raw)

    def __setattr__(self, name, value):
        raise AttributeError('Fernet keys are immutable')

    @classmethod
    def generate(cls):
        """Create a new random key.

        ``OSError`` raised by the system random source is not caught
        """
        return cls(os.urandom(KEY_SIZE))

    @classmethod
    def decode(cls, text, encoding=URLSAFE):
        """Create a key from its base64 text form.

        In:
          - ``text`` -- ``str`` or ``bytes``
          - ``encoding`` -- base64 alphabet of ``text``

        Return:
          - the key
        """
        try:
            raw = encoding.decode(text.strip())
        except binascii.Error as exc:
            raise KeyFormatError('Fernet key must be {} base64-encoded bytes'.format(KEY_SIZE)) from exc

        return cls(raw)

    def encode(self, encoding=URLSAFE):
        return encoding.encode(self._raw).decode('ascii')

    @property
    def signing_key(self):
        return self._raw[: KEY_SIZE // 2]

    @property
    def encryption_key(self):
        return self._raw[KEY_SIZE // 2 :]

    @property
    def is_zero(self):
        return hmac.compare_digest(self._raw, ZERO_KEY)

    def __bytes__(self):
        return self._raw

    def __eq__(self, other):
        return isinstance(other, Key) and hmac.compare_digest(self._raw, other._raw)

    def __hash__(self):
        return hash((Key, self._raw))
