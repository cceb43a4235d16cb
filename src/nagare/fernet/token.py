# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""Fernet token generation and verification (https://github.com/fernet/spec/blob/master/Spec.md).

Token layout, before the base64 encoding::

    version (1) | timestamp (8) | IV (16) | ciphertext (16 * n) | HMAC (32)

The verification functions return ``None`` for every invalid token, whatever
the reason: bad encoding, version, signature, expiration date or padding.
"""

import os
import hmac
import time
import binascii

import tinyaes

from . import legacy
from .key import ZeroKeyError
from .padding import BLOCK_SIZE, pad, unpad
from .encoding import URLSAFE

VERSION = 0x80
MAX_CLOCK_SKEW = 60

TIMESTAMP_SIZE = 8
HMAC_SIZE = 32
HEADER_SIZE = 1 + TIMESTAMP_SIZE + BLOCK_SIZE
MIN_TOKEN_SIZE = HEADER_SIZE + HMAC_SIZE


def generate(message, key, now=None, iv=None, encoding=URLSAFE):
    """Encrypt and sign a message.

    In:
      - ``message`` -- bytes to protect
      - ``key`` -- a ``Key`` object
      - ``now`` -- Unix time of the generation, current time by default
      - ``iv`` -- initialization vector, random by default. Never reuse one.
      - ``encoding`` -- base64 alphabet of the token

    Return:
      - the token as base64 bytes
    """
    if key.is_zero:
        raise ZeroKeyError()

    if iv is None:
        iv = os.urandom(BLOCK_SIZE)
    elif len(iv) != BLOCK_SIZE:
        raise ValueError('Initialization vector must be {} bytes'.format(BLOCK_SIZE))

    iv = bytes(iv)
    now = int(time.time() if now is None else now)

    data = pad(message)
    tinyaes.AES(key.encryption_key, iv).CBC_encrypt_buffer_inplace_raw(data)

    token = bytes([VERSION]) + now.to_bytes(length=TIMESTAMP_SIZE, byteorder='big') + iv + data
    sign = hmac.new(key.signing_key, token, 'sha256')

    return encoding.encode(token + sign.digest())


def verify(token, ttl, now, key, encoding=URLSAFE):
    """Verify a token and decrypt its message.

    In:
      - ``token`` -- base64 token, ``str`` or ``bytes``
      - ``ttl`` -- maximum age of the token, in seconds. ``None`` for no limit
      - ``now`` -- Unix time of the verification, current time if ``None``
      - ``key`` -- a ``Key`` object
      - ``encoding`` -- base64 alphabet of the token

    Return:
      - the message or ``None`` if the token is invalid
    """
    if key.is_zero:
        return None

    try:
        data = encoding.decode(token)
    except binascii.Error:
        return None

    if (len(data) < MIN_TOKEN_SIZE) or (data[0] != VERSION):
        return None

    sign = hmac.new(key.signing_key, data[:-HMAC_SIZE], 'sha256')
    valid_sign = hmac.compare_digest(sign.digest(), data[-HMAC_SIZE:])

    if now is None:
        now = time.time()

    timestamp = int.from_bytes(data[1 : 1 + TIMESTAMP_SIZE], byteorder='big')
    expired = (ttl is not None) and (now > timestamp + ttl)
    from_future = timestamp > now + MAX_CLOCK_SKEW

    if not valid_sign or expired or from_future:
        return None

    ciphertext = bytearray(data[HEADER_SIZE:-HMAC_SIZE])
    if not ciphertext or (len(ciphertext) % BLOCK_SIZE):
        return None

    iv = data[1 + TIMESTAMP_SIZE : HEADER_SIZE]
    tinyaes.AES(key.encryption_key, iv).CBC_decrypt_buffer_inplace_raw(ciphertext)

    return unpad(ciphertext)


def authenticate(token, ttl, now, key, encoding=URLSAFE):
    """Verify a token in the binary or the legacy JSON framing.

    ``|`` is not in the base64 alphabets so it only appears in legacy tokens.

    Return:
      - the message or ``None`` if the token is invalid
    """
    if isinstance(token, str):
        try:
            token = token.encode('ascii')
        except UnicodeEncodeError:
            return None

    verifier = legacy.verify if b'|' in token else verify

    return verifier(token, ttl, now, key, encoding)


def verify_with_keys(token, ttl, now, keys, encoding=URLSAFE):
    """Verify a token against several keys, newest first.

    Return:
      - the message decrypted by the first matching key or ``None``
    """
    for key in keys:
        message = authenticate(token, ttl, now, key, encoding)
        if message is not None:
            return message

    return None
