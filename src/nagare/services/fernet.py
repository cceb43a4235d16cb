# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""Fernet tokens service.

Configuration::

    [services]
    [[fernet]]
    keys = <newest key>, <previous key>
    ttl = 3600
"""

from nagare.services import plugin
from nagare.fernet import Key, Fernet as Codec, InvalidToken


class Fernet(plugin.Plugin):
    """Encrypt with the newest configured key, decrypt with any of them."""

    LOAD_PRIORITY = 80
    CONFIG_SPEC = dict(
        plugin.Plugin.CONFIG_SPEC,
        keys='string_list(default=list(), help="url-safe base64 encoded keys, newest first")',
        ttl='integer(default=None, help="maximum age of the tokens, in seconds")',
    )

    def __init__(self, name, dist, keys=(), ttl=None, **config):
        """Initialization.

        In:
          - ``keys`` -- text forms of the keys, newest first. A random key
            is generated if empty
          - ``ttl`` -- default maximum age of the tokens, in seconds
        """
        super().__init__(name, dist, keys=keys, ttl=ttl, **config)

        if not keys:
            self.logger.warning('No key configured, the tokens will not be valid after a restart')
            keys = [Key.generate()]

        self.codec = Codec(keys)
        self.ttl = ttl

    @property
    def keys(self):
        return self.codec.keys

    def encrypt(self, data, now=None):
        return self.codec.encrypt(data, now)

    def decrypt(self, token, ttl=None, now=None):
        """Verify a token.

        In:
          - ``token`` -- the token
          - ``ttl`` -- maximum age of the token, the configured one by default

        Return:
          - the decrypted message or ``None`` if the token is invalid
        """
        try:
            return self.codec.decrypt(token, self.ttl if ttl is None else ttl, now)
        except InvalidToken:
            self.logger.debug('Invalid or expired token')
            return None
