"""Identifier sanitization and uniqueness algorithms."""

from .modes import DoctypeInfo, DocumentMode, detect_document_mode
from .normalizer import DEFAULT_FALLBACK, DEFAULT_SEPARATOR, normalize, strip_diacritics
from .resolver import resolve_unique

__all__ = [
    "DEFAULT_FALLBACK",
    "DEFAULT_SEPARATOR",
    "DoctypeInfo",
    "DocumentMode",
    "detect_document_mode",
    "normalize",
    "resolve_unique",
    "strip_diacritics",
]
