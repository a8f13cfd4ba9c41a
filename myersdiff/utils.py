# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'

# Bytes that are not valid UTF-8 are kept as lone surrogates, so any
# file can be diffed and equal bytes still compare equal.
DECODE_ERRORS = 'surrogateescape'


def split_lines(text):
    """Split text on newlines, dropping the line endings.

    A trailing carriage return is stripped from each line, and a final
    line without a newline is kept. Empty text has no lines.
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def read_lines(f):
    """Read and return the lines of a text file

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows), which reads
            as an empty file. Alternatively a file-like object can be passed.

    The text is decoded as UTF-8, see DECODE_ERRORS for invalid bytes.
    """
    if f == EXPLICIT_MISSING_FILE:
        return []
    if isinstance(f, str):
        # newline='\n' keeps any '\r' for split_lines to handle
        with io.open(f, encoding='utf-8', errors=DECODE_ERRORS, newline='\n') as fo:
            text = fo.read()
    else:
        text = f.read()
        if isinstance(text, bytes):
            text = text.decode('utf8', DECODE_ERRORS)
    return split_lines(text)


def _output_errors(encoding):
    # A UTF-8 stream can write escaped input bytes back out unchanged
    try:
        if codecs.lookup(encoding).name == 'utf-8':
            return 'surrogateescape'
    except LookupError:
        pass
    return 'backslashreplace'


def setup_std_streams():
    """Make sys.stdout/err write any line they are given.

    Lines may hold escaped undecodable bytes, or characters the terminal
    encoding lacks. Streams replaced by the caller (e.g. when captured)
    are left alone, as is everything when PYTHONIOENCODING is set.
    Also enables colorama for ANSI escapes on Windows.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            if stream is not getattr(sys, '__%s__' % name):
                continue
            if not hasattr(stream, 'reconfigure'):
                continue
            stream.reconfigure(errors=_output_errors(stream.encoding))
    # colorama wraps the streams, so it comes last
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
