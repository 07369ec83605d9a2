"""Sanitization of candidate strings into valid HTML ``id`` values.

Invalid characters are replaced by ``-``. When nothing usable is left, the
fallback token replaces the whole candidate; in legacy documents it is also
used as a prefix when the cleaned value does not start with a letter.

See https://html.spec.whatwg.org/multipage/dom.html#the-id-attribute and
https://www.w3.org/TR/html4/types.html#type-id.
"""

from __future__ import annotations

import logging
import re
import unicodedata

from .modes import DocumentMode


logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "f"
DEFAULT_SEPARATOR = "_"

_COMBINING_DIACRITICS = re.compile(r"[\u0300-\u036f]")
_LEGACY_INVALID = re.compile(r"[^0-9a-zA-Z_-]")
_ASCII_DIGITS = frozenset("0123456789")
_PUNCTUATION_ALLOWED = frozenset("_-")
_HYPHEN_RUNS = re.compile(r"-(-+)")
_EDGES = re.compile(r"^-+|-+$|^_|_$")
_ASCII_LETTER = re.compile(r"[a-zA-Z]")


def _is_strict_character(character: str) -> bool:
    if character in _ASCII_DIGITS or character in _PUNCTUATION_ALLOWED:
        return True
    # Letters (Lu, Ll, Lt, Lm, Lo) and marks (Mn, Mc, Me).
    return unicodedata.category(character)[0] in ("L", "M")


def _replace_invalid(text: str, mode: DocumentMode) -> str:
    if mode is DocumentMode.LEGACY:
        return _LEGACY_INVALID.sub("-", text)
    return "".join(
        character if _is_strict_character(character) else "-" for character in text
    )


def strip_diacritics(text: str) -> str:
    """Decompose ``text`` (NFKD) and drop combining diacritical marks."""

    return _COMBINING_DIACRITICS.sub("", unicodedata.normalize("NFKD", text))


def normalize(
    candidate: str,
    mode: DocumentMode,
    fallback: str = DEFAULT_FALLBACK,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Return ``candidate`` sanitized for a document in ``mode``.

    ``fallback`` and ``separator`` are trusted as-is; option resolution
    validates them before any identifier is generated.
    """

    cleaned = strip_diacritics(candidate)
    cleaned = _replace_invalid(cleaned, mode)
    cleaned = _HYPHEN_RUNS.sub("-", cleaned)
    cleaned = _EDGES.sub("", cleaned)
    cleaned = cleaned.lower()

    if not cleaned:
        logger.debug("Candidate %r sanitized to nothing; using fallback %r", candidate, fallback)
        return fallback

    if mode is DocumentMode.LEGACY and not _ASCII_LETTER.match(cleaned[0]):
        return f"{fallback}{separator}{cleaned}"
    return cleaned


__all__ = ["DEFAULT_FALLBACK", "DEFAULT_SEPARATOR", "normalize", "strip_diacritics"]
