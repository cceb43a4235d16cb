# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

import io

import pytest

from nagare.fernet import Key, InvalidToken, TokenReader, TokenWriter
from nagare.fernet.token import verify

from conftest import NOW, TOKEN


class FailingStream:
    def read(self, size=-1):
        raise OSError('disconnected')


def test_writer(key):
    out = io.BytesIO()
    writer = TokenWriter(out, key, NOW)

    assert writer.write(b'hel') == 3
    assert writer.write(b'lo') == 2
    assert out.getvalue() == b''

    writer.close()
    assert verify(out.getvalue(), 60, NOW, key) == b'hello'

    # Only one token
    writer.close()
    assert verify(out.getvalue(), 60, NOW, key) == b'hello'

    with pytest.raises(ValueError):
        writer.write(b'more')


def test_writer_reset(key):
    out = io.BytesIO()
    writer = TokenWriter(out, key, NOW)

    writer.write(b'hello')
    writer.close()
    first = out.getvalue()

    writer.reset()
    assert writer.writable()
    writer.write(b'world')
    writer.close()

    assert verify(out.getvalue()[len(first) :], 60, NOW, key) == b'world'


def test_writer_context(key):
    out = io.BytesIO()

    with TokenWriter(out, key) as writer:
        writer.write(b'hello')

    assert writer.closed
    assert verify(out.getvalue(), 60, None, key) == b'hello'


def test_writer_empty(key):
    out = io.BytesIO()
    TokenWriter(out, key, NOW).close()

    assert verify(out.getvalue(), 60, NOW, key) == b''


def test_reader(key):
    reader = TokenReader(io.BytesIO(TOKEN + b'\n'), [Key.generate(), key], 60, NOW + 1)

    assert reader.readable()
    assert reader.read(2) == b'he'
    assert reader.read() == b'llo'
    assert reader.read() == b''


def test_reader_invalid(key):
    reader = TokenReader(io.BytesIO(TOKEN), [key], 60, NOW + 61)

    with pytest.raises(InvalidToken):
        reader.read()


def test_reader_read_error(key):
    reader = TokenReader(FailingStream(), [key], 60, NOW)

    with pytest.raises(OSError):
        reader.read()


def test_reader_reset(key):
    reader = TokenReader(io.BytesIO(TOKEN), [key], 60, NOW + 1)
    assert reader.read() == b'hello'

    out = io.BytesIO()
    with TokenWriter(out, key, NOW + 1) as writer:
        writer.write(b'world')

    reader.reset(io.BytesIO(out.getvalue()))
    assert reader.read() == b'world'


def test_pipe(key):
    out = io.BytesIO()
    with TokenWriter(out, key) as writer:
        writer.write(b'x' * 1000)

    out.seek(0)
    assert TokenReader(out, [key], 60).read() == b'x' * 1000
