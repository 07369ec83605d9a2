"""Document-wide uniqueness for generated identifiers."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .modes import DocumentMode
from .normalizer import DEFAULT_FALLBACK, DEFAULT_SEPARATOR, normalize


logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[Any]]


def resolve_unique(
    base_candidate: str,
    owner: Any,
    lookup: Lookup,
    fallback: str = DEFAULT_FALLBACK,
    separator: str = DEFAULT_SEPARATOR,
    mode: DocumentMode = DocumentMode.STRICT,
) -> str:
    """Return a sanitized identifier that no entity other than ``owner`` holds.

    ``lookup`` is queried with each attempt and must reflect the live state
    of the document. An attempt taken by another entity gets a numeric
    suffix (``base_1``, ``base_2``, ...), tried in increasing order.
    ``owner`` is compared by identity; pass the document itself when the
    identifier is not bound to an element, so every match counts as taken.

    There is no attempt limit: the loop ends as soon as ``lookup`` reports a
    free identifier, which a finite document always does.
    """

    base = normalize(base_candidate, mode, fallback, separator)
    attempt = base
    counter = 0
    while True:
        holder = lookup(attempt)
        if holder is None or holder is owner:
            return attempt
        counter += 1
        logger.debug("Identifier %r is taken; trying suffix %d", attempt, counter)
        attempt = f"{base}{separator}{counter}"


__all__ = ["Lookup", "resolve_unique"]
