# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""Base64 alphabets used for the text form of keys and tokens."""

import re
import base64
import binascii


class Encoding:
    """A base64 alphabet.

    Decoding is strict: characters outside the alphabet or a wrong padding
    raise ``binascii.Error`` instead of being silently discarded.
    """

    def __init__(self, name, altchars):
        self.name = name
        self.altchars = altchars
        self._valid = re.compile(b'[A-Za-z0-9' + re.escape(altchars) + b']*={0,2}')

    def encode(self, data):
        return base64.b64encode(bytes(data), self.altchars)

    def decode(self, data):
        if isinstance(data, str):
            try:
                data = data.encode('ascii')
            except UnicodeEncodeError as exc:
                raise binascii.Error('Non-ASCII character in base64 data') from exc

        if not self._valid.fullmatch(data) or (len(data) % 4):
            raise binascii.Error('Invalid {} base64 data'.format(self.name))

        decoded = base64.b64decode(data, self.altchars, validate=False)

        # Unused bits of the last character must be zero
        if self.encode(decoded) != data:
            raise binascii.Error('Non-canonical {} base64 data'.format(self.name))

        return decoded

    def __repr__(self):
        return '<Encoding {}>'.format(self.name)


STANDARD = Encoding('standard', b'+/')
URLSAFE = Encoding('urlsafe', b'-_')
