# -*- coding: utf-8 -*-
"""
Render bytes as rows of an offset followed by paired hexadecimal digits.

    00000000 4865 6c6c 6f2c 2077 6f72 6c64 210a
"""
import logging
import re
import sys

LOGGER = logging.getLogger('HexDump.lib')

BYTES_PER_LINE = 16
CHUNK_SIZE = 4096

# one literal space per digit of a missing pair, plus its separator
_EMPTY_GROUP = ' ' * 5

_HEX = ['{:02x}'.format(i) for i in range(256)]

_LENIENT_INT = re.compile(r'\s*\+?([0-9]+)')
_STRICT_INT = re.compile(r'[0-9]+\Z')


class UsageError(Exception):
    """Malformed or missing command line arguments."""


def parse_length(text, strict=False):
    """
    Convert the argument of -n to a byte count.
    In lenient mode the leading decimal digits are used and anything
    else counts as 0. Unlike atoi() cast to an unsigned size, a negative
    value is not wrapped around to "unlimited", it also counts as 0.
    :param text: the argument as given on the command line
    :type text: str
    :param strict: reject anything that is not a non-negative integer
    :type strict: bool
    :return: the byte count
    :rtype: int
    """
    if strict:
        if _STRICT_INT.match(text) is None:
            raise UsageError('invalid length argument: {!r}'.format(text))
        return int(text)
    match = _LENIENT_INT.match(text)
    if match is None:
        LOGGER.info('length argument %r is not a number, using 0', text)
        return 0
    return int(match.group(1))


def format_row(row, offset):
    """Return the dump line (with newline) for up to 16 bytes at offset."""
    parts = ['{:08x} '.format(offset)]
    n = len(row)
    for j in range(0, BYTES_PER_LINE, 2):
        if j < n:
            parts.append(_HEX[row[j]])
            if j + 1 < n:
                parts.append(_HEX[row[j + 1]])
            parts.append(' ')
        else:
            parts.append(_EMPTY_GROUP)
    parts.append('\n')
    return ''.join(parts)


def hexdump_chunk(buffer, length, start_offset, outfile=None):
    """
    Write the rows for the first length bytes of buffer.
    The buffer may be reused by the caller afterwards, nothing is kept.
    """
    outfile = outfile or sys.stdout
    view = memoryview(buffer)
    for i in range(0, length, BYTES_PER_LINE):
        row = view[i:min(i + BYTES_PER_LINE, length)]
        outfile.write(format_row(row, start_offset + i))


def dump(stream, limit=None, outfile=None, chunk_size=CHUNK_SIZE):
    """
    Dump a binary stream from its current position.
    :param stream: a file opened in binary mode
    :type stream: io.BufferedIOBase
    :param limit: maximum number of bytes to dump, None for no limit
    :type limit: int
    :param outfile: text stream to write to, defaults to sys.stdout
    :param chunk_size: number of bytes read at a time
    :type chunk_size: int
    :return: number of bytes dumped
    :rtype: int
    """
    outfile = outfile or sys.stdout
    buf = bytearray(chunk_size)
    view = memoryview(buf)
    offset = 0

    while limit is None or offset < limit:
        nread = stream.readinto(buf)
        if not nread:
            break
        if limit is not None and offset + nread > limit:
            nread = limit - offset
        LOGGER.debug('chunk at %08x: %d bytes', offset, nread)
        hexdump_chunk(view, nread, offset, outfile)
        offset += nread

    return offset
