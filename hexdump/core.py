# coding: utf-8
"""
HexDump - print the bytes of a file as paired hexadecimal digits

Configuration and logging shared by the command and its library.
"""

__version__ = '1.0.0'

import logging
import logging.handlers
import os
import sys
from configparser import ConfigParser
from io import StringIO

# Setup logging
LOGGER = logging.getLogger('HexDump')

_HEXDUMP_CONFIG_FILES = ('.hexdump_config', 'hexdump.cfg')

# largest read buffer accepted from config (16 MiB)
MAX_CHUNK_SIZE = 1 << 24

# Default configuration (can be overridden by external configuration file)
_DEFAULT_CONFIG = """[dump]
chunk_size=4096
strict_length=0

[logging]
level=WARNING
file=
"""

_LOG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(name)s] [%(funcName)s] [%(lineno)d] - %(message)s'


def config_paths():
    """
    Return the external config files to read, lowest precedence first.
    :return: candidate config file paths
    :rtype: list of str
    """
    dirs = (os.path.expanduser('~'), os.getcwd())
    return [os.path.join(d, f) for d in dirs for f in _HEXDUMP_CONFIG_FILES]


def load_config(no_cfgfile=False):
    config = ConfigParser()
    config.optionxform = str  # make it preserve case

    # defaults
    config.read_file(StringIO(_DEFAULT_CONFIG))

    # update from config file
    if not no_cfgfile:
        read = config.read(config_paths())
        if read:
            LOGGER.debug('loaded config files: %s', ', '.join(read))

    return config


def config_logging(log_setting=None, config=None):
    """
    Configure the 'HexDump' logger.
    :param log_setting: overrides for the 'level' and 'file' settings
    :type log_setting: dict
    :param config: config providing the defaults of the [logging] section
    :type config: ConfigParser
    :return: the configured logger
    :rtype: logging.Logger
    """
    logger = logging.getLogger('HexDump')

    _log_setting = {
        'level': 'WARNING',
        'file': None,
    }
    if config is not None:
        _log_setting['level'] = config.get('logging', 'level', fallback='WARNING')
        _log_setting['file'] = config.get('logging', 'file', fallback='') or None

    _log_setting.update(
        (k, v) for k, v in (log_setting or {}).items() if v is not None
    )

    level = {
        'CRITICAL': logging.CRITICAL,
        'ERROR': logging.ERROR,
        'WARNING': logging.WARNING,
        'WARN': logging.WARNING,
        'INFO': logging.INFO,
        'DEBUG': logging.DEBUG,
        'NOTSET': logging.NOTSET,
    }.get(str(_log_setting['level']).upper(),
          logging.WARNING)

    logger.setLevel(level)

    # replace the handler of a previous call, sys.stderr may have changed since
    for handler in list(logger.handlers):
        if getattr(handler, '_hexdump_handler', False):
            logger.removeHandler(handler)
            handler.close()

    # stdout carries the dump itself
    if _log_setting['file']:
        _log_handler = logging.handlers.RotatingFileHandler(_log_setting['file'], mode='w')
    else:
        _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler._hexdump_handler = True
    _log_handler.setLevel(level)
    _log_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(_log_handler)

    return logger


def get_chunk_size(config, default=4096):
    """Return the read size from the [dump] section, 1 to MAX_CHUNK_SIZE."""
    raw = config.get('dump', 'chunk_size', fallback=str(default))
    try:
        chunk_size = int(raw)
    except ValueError:
        chunk_size = 0
    if not 0 < chunk_size <= MAX_CHUNK_SIZE:
        LOGGER.warning('invalid chunk_size %r in config, using %d', raw, default)
        return default
    return chunk_size
