from .core import __version__
