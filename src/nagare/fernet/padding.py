# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""PKCS #7 block padding (https://tools.ietf.org/html/rfc5652#section-6.3)."""

BLOCK_SIZE = 16


def pad(data, size=BLOCK_SIZE):
    """Pad ``data`` to a multiple of ``size``.

    Between 1 and ``size`` bytes are always appended, a full block when
    ``data`` is already aligned.

    Return:
      - a new ``bytearray``, writable for in-place encryption
    """
    nb = size - len(data) % size
    return bytearray(data) + bytes([nb] * nb)


def unpad(data, size=BLOCK_SIZE):
    """Remove the padding added by ``pad()``.

    Return:
      - the unpadded data or ``None`` if the padding is malformed
    """
    if not data:
        return None

    nb = data[-1]
    if (nb == 0) or (nb > size) or (nb > len(data)):
        return None

    # Every padding byte is checked, wherever the first mismatch is
    mismatch = 0
    for c in data[-nb:]:
        mismatch |= c ^ nb

    return None if mismatch else bytes(data[:-nb])
