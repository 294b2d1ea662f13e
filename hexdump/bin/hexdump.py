# -*- coding: utf-8 -*-
"""Print the bytes of a file as offsets and paired hexadecimal digits."""

import argparse
import configparser
import logging
import os
import sys

from hexdump.core import __version__, config_logging, get_chunk_size, load_config
from hexdump.lib.libhexdump import UsageError, dump, parse_length

LOGGER = logging.getLogger('HexDump.bin')

# value of -n when it is given without an argument
_MISSING = object()


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser():
    p = _ArgumentParser(prog='hexdump', description=__doc__)
    p.add_argument("-n", "--length", nargs="?", const=_MISSING, default=None,
                   metavar="LEN", help="dump only the first LEN bytes of FILE")
    p.add_argument("file", action="store", nargs="?", metavar="FILE",
                   help="file to dump")
    p.add_argument('--no-cfgfile', action='store_true',
                   help='do not load external config files')
    p.add_argument('--log-level',
                   choices=['DEBUG', 'INFO', 'WARN', 'WARNING', 'ERROR', 'CRITICAL'],
                   default=None,
                   help='the logging level')
    p.add_argument('--log-file',
                   help='the file to send logging messages')
    p.add_argument('--version', action='version',
                   version='%(prog)s ' + __version__)
    return p


def resolve_arguments(ns, strict=False):
    """
    Check the parsed arguments and work out what to dump.
    :param ns: namespace returned by the parser
    :type ns: argparse.Namespace
    :param strict: reject a non-numeric length instead of treating it as 0
    :type strict: bool
    :return: the file path and the byte limit (None for the whole file)
    :rtype: tuple
    """
    if ns.length is _MISSING:
        raise UsageError('missing length argument')
    if ns.file is None:
        raise UsageError('missing file path')
    limit = None
    if ns.length is not None:
        limit = parse_length(ns.length, strict=strict)
    return ns.file, limit


def _silence_stdout():
    """Point stdout at devnull so the flush at exit does not fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, ValueError, OSError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(args):
    p = build_parser()

    status = 0

    try:
        ns = p.parse_args(args)
        config = load_config(no_cfgfile=ns.no_cfgfile)
        config_logging({'level': ns.log_level, 'file': ns.log_file}, config)
        strict = config.getboolean('dump', 'strict_length', fallback=False)
        path, limit = resolve_arguments(ns, strict=strict)
    except UsageError as err:
        LOGGER.info('usage error: %s', err)
        print(p.format_usage(), end='', file=sys.stderr)
        print("hexdump: {!s}".format(err), file=sys.stderr)
        sys.exit(1)
    except (configparser.Error, ValueError, IOError) as err:
        # broken config file or unusable log file
        print("hexdump: {!s}".format(err), file=sys.stderr)
        sys.exit(1)

    LOGGER.info('dumping %s (limit: %s)', path, 'none' if limit is None else limit)

    try:
        with open(path, 'rb') as f:
            n = dump(f, limit=limit, chunk_size=get_chunk_size(config))
        LOGGER.debug('dumped %d bytes of %s', n, path)
    except BrokenPipeError:
        # the reader went away, e.g. `hexdump FILE | head`
        LOGGER.info('output closed while dumping %s', path)
        _silence_stdout()
        status = 1
    except IOError as err:
        LOGGER.info('failed on %s: %s', path, err)
        print("hexdump: {}: {!s}".format(path, err.strerror or err), file=sys.stderr)
        status = 1

    sys.exit(status)


if __name__ == "__main__":
    main(sys.argv[1:])
