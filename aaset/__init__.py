# flake8: noqa
from .aaset import AASet, AASetIterator, ConcurrentModificationError
from .settings import AASetSettings, settings, use_settings

from ._version import __version__
