# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""Read-only support of the legacy JSON tokens.

Layout::

    base64(ciphertext) | base64(IV) | hex(HMAC)

The plaintext is a JSON object whose ``issued_at`` field, a RFC 3339 date,
replaces the framing timestamp. These tokens are only verified, never
generated.
"""

import re
import hmac
import json
import time
import binascii
from datetime import datetime

import tinyaes

from .padding import BLOCK_SIZE, unpad
from .encoding import URLSAFE

HMAC_SIZE = 32
UTC_SUFFIX = re.compile(r'[zZ]$')
FRACTION = re.compile(r'\.(\d+)')


def derive_keys(key, encoding=URLSAFE):
    """Signing and encryption keys of the legacy tokens.

    Both are taken from the text form of the key, not from its raw bytes.

    Return:
      - tuple (signing key, encryption key)
    """
    text = key.encode(encoding).encode('ascii')
    i = len(text) // 2

    return text[:i], text[i : i + BLOCK_SIZE]


def parse_issued_at(message):
    """Unix time of the ``issued_at`` field of a JSON message, ``None`` if missing or invalid."""
    try:
        payload = json.loads(message)
    except ValueError:
        return None

    issued_at = payload.get('issued_at') if isinstance(payload, dict) else None
    if not isinstance(issued_at, str):
        return None

    try:
        issued_at = UTC_SUFFIX.sub('+00:00', issued_at)
        # Fractional seconds of any length, rounded down to microseconds
        issued_at = FRACTION.sub(lambda m: '.' + (m.group(1) + '000000')[:6], issued_at)
        issued_at = datetime.fromisoformat(issued_at)
    except ValueError:
        return None

    # A date without UTC offset is ambiguous
    return None if issued_at.tzinfo is None else issued_at.timestamp()


def verify(token, ttl, now, key, encoding=URLSAFE):
    """Verify a legacy token and decrypt its JSON message.

    In:
      - ``token`` -- legacy token, as bytes
      - ``ttl`` -- maximum age of the token, in seconds. ``None`` for no limit
      - ``now`` -- Unix time of the verification, current time if ``None``
      - ``key`` -- a ``Key`` object

    Return:
      - the JSON message or ``None`` if the token is invalid
    """
    if key.is_zero:
        return None

    signing_key, encryption_key = derive_keys(key, encoding)

    fields, _, mac = token.rpartition(b'|')
    try:
        mac = binascii.unhexlify(mac)
    except binascii.Error:
        return None

    if len(mac) != HMAC_SIZE:
        return None

    # Key and message swapped, as the legacy tokens producer does
    sign = hmac.new(fields, signing_key, 'sha256')
    if not hmac.compare_digest(sign.digest(), mac):
        return None

    fields = fields.split(b'|')
    if len(fields) != 2:
        return None

    try:
        ciphertext, iv = (encoding.decode(field) for field in fields)
    except binascii.Error:
        return None

    if (len(iv) != BLOCK_SIZE) or not ciphertext or (len(ciphertext) % BLOCK_SIZE):
        return None

    ciphertext = bytearray(ciphertext)
    tinyaes.AES(encryption_key, iv).CBC_decrypt_buffer_inplace_raw(ciphertext)

    message = unpad(ciphertext)
    if message is None:
        return None

    issued_at = parse_issued_at(message)
    if issued_at is None:
        return None

    if now is None:
        now = time.time()

    if (ttl is not None) and (now > issued_at + ttl):
        return None

    return message
