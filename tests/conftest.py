# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

import hmac

import pytest
import tinyaes

from nagare.fernet import Key, URLSAFE

SECRET = 'cw_0x689RpI-jtRR7oE8h_eQsKImvJapLeSbXpwF4e4='
IV = bytes(range(16))

# 1985-10-26T01:20:00-07:00
NOW = 499162800
TOKEN = (
    b'gAAAAAAdwJ6wAAECAwQFBgcICQoLDA0ODy021cpGVWKZ_eEwCGM4BLLF_5CV9dOPmrhuVUPgJobwOz7JcbmrR64jVmpU4IwqDA=='
)

NOW2 = 499166400
TOKEN2 = (
    b'gAAAAAAdwKzAAAECAwQFBgcICQoLDA0ODy021cpGVWKZ_eEwCGM4BLJMS83tpkh3xB8373dsdVd9hp9lNpnIo6aqNF0ctVPFMA=='
)


@pytest.fixture
def key():
    return Key.decode(SECRET)


@pytest.fixture
def other_key():
    return Key.generate()


def forge(key, payload, now=NOW, iv=IV, version=0x80):
    """Build a correctly signed token around an already padded payload."""
    payload = bytearray(payload)
    tinyaes.AES(key.encryption_key, iv).CBC_encrypt_buffer_inplace_raw(payload)

    data = bytes([version]) + now.to_bytes(8, 'big') + iv + payload
    return URLSAFE.encode(data + hmac.new(key.signing_key, data, 'sha256').digest())
