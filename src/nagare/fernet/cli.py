# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

"""``fernet-keygen`` and ``fernet-sign`` commands."""

import os
import sys
import argparse

from . import token
from .key import Key, FernetError


def error(message):
    print('fernet: {}'.format(message), file=sys.stderr)
    return 1


def keygen():
    """Print a new random key. The command line arguments are ignored."""
    try:
        key = Key.generate()
    except OSError as e:
        return error(e)

    print(key.encode())
    return 0


def sign(args=None, stdin=None, stdout=None):
    parser = argparse.ArgumentParser(
        prog='fernet-sign',
        description='Encrypt and sign the standard input and print the resulting token.',
    )
    parser.add_argument('env', metavar='ENV', help='environment variable holding the key')
    args = parser.parse_args(args)

    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout.buffer

    try:
        key = Key.decode(os.environ.get(args.env, ''))
        t = token.generate(stdin.read(), key)
    except (FernetError, OSError) as e:
        return error(e)

    stdout.write(t + b'\n')
    stdout.flush()

    return 0


def run_keygen():
    sys.exit(keygen())


def run_sign():
    sys.exit(sign())
