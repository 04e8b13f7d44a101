"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import charsets
from . import patterns
from . import transforms
from . import dispatch
from . import frames
from .charsets import get_default_encoding, set_default_encoding
from .dispatch import Method, Stringy, call
from .errors import StringyError, UnknownMethod, InvalidArgument

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'charsets',
    'patterns',
    'transforms',
    'dispatch',
    'frames',
    'call',
    'Method',
    'Stringy',
    'get_default_encoding',
    'set_default_encoding',
    'StringyError',
    'UnknownMethod',
    'InvalidArgument'
]
