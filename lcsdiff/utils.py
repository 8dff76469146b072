# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys


# Filename standing for standard input
STDIN_FILE = '-'


def read_text(f, encoding='utf-8'):
    """Read and return the text to diff.

    Parameters:
        f:  The filename to read from, or "-" for stdin.
            Alternatively a file-like object can be passed.
        encoding: Encoding of the file, when given by name.
    """
    if f == STDIN_FILE:
        return sys.stdin.read()
    if isinstance(f, str):
        # newline='' keeps line endings as is, they are part of the diff
        with io.open(f, encoding=encoding, newline='') as fo:
            return fo.read()
    text = f.read()
    if isinstance(text, bytes):
        text = text.decode(encoding)
    return text


def _setup_std_stream_encoding():
    """Make sys.stdout/err escape unencodable characters instead of raising.

    Diffs can contain any character of the inputs, which the terminal
    encoding may not cover.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        if stream is None or stream is not getattr(sys, '__%s__' % name):
            # don't touch captured or redirected output
            continue
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            stream.reconfigure(errors='backslashreplace')


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
