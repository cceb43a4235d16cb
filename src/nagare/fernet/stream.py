# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""File-like adapters producing or consuming one token.

The whole message is signed, so nothing is written before the writer is
closed and nothing is read before the whole token is verified.
"""

import io

from . import token
from .codec import InvalidToken
from .encoding import URLSAFE


class TokenWriter:
    """Buffer all the written data and write one token on ``close()``."""

    def __init__(self, stream, key, now=None, encoding=URLSAFE):
        """Initialization.

        In:
          - ``stream`` -- file-like object receiving the token
          - ``key`` -- the ``Key`` object encrypting the data
          - ``now`` -- Unix time of the token, time of ``close()`` by default
        """
        self.stream = stream
        self.key = key
        self.now = now
        self.encoding = encoding

        self.reset()

    def reset(self):
        self._buffer = bytearray()
        self.closed = False

    def writable(self):
        return not self.closed

    def write(self, data):
        if self.closed:
            raise ValueError('write to closed token writer')

        self._buffer += data
        return len(data)

    def close(self):
        if not self.closed:
            self.stream.write(token.generate(bytes(self._buffer), self.key, self.now, encoding=self.encoding))
            self._buffer = bytearray()
            self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.close()


class TokenReader:
    """Read a whole token then serve its decrypted message."""

    def __init__(self, stream, keys, ttl=None, now=None, encoding=URLSAFE):
        """Initialization.

        In:
          - ``stream`` -- file-like object the token is read from
          - ``keys`` -- list of ``Key`` objects, newest first
          - ``ttl`` -- maximum age of the token, in seconds
          - ``now`` -- Unix time of the verification, current time by default
        """
        self.keys = keys
        self.ttl = ttl
        self.now = now
        self.encoding = encoding

        self.reset(stream)

    def reset(self, stream=None):
        if stream is not None:
            self.stream = stream

        self._message = None

    def readable(self):
        return True

    def _load(self):
        if self._message is None:
            data = self.stream.read()
            message = token.verify_with_keys(data.strip(), self.ttl, self.now, self.keys, self.encoding)
            if message is None:
                raise InvalidToken()

            self._message = io.BytesIO(message)

        return self._message

    def read(self, size=-1):
        return self._load().read(size)
