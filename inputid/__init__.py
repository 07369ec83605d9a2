"""Deterministic, collision-free ``id`` values for HTML form controls."""

import logging

from .core import DoctypeInfo, DocumentMode, detect_document_mode, normalize, resolve_unique
from .exceptions import ConfigurationError, InputIdError, TypeMismatchError
from .input_id import InputId
from .options import InputIdOptions, resolve_options

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "DoctypeInfo",
    "DocumentMode",
    "InputId",
    "InputIdError",
    "InputIdOptions",
    "TypeMismatchError",
    "detect_document_mode",
    "normalize",
    "resolve_options",
    "resolve_unique",
]
