"""Document modes derived from the declared doctype.

HTML5 documents (``<!DOCTYPE html>`` without public or system identifiers)
accept almost any Unicode letter in an ``id``. Older doctypes follow the
HTML 4 ``ID`` token rules: ASCII letters, digits, ``_`` and ``-``, starting
with a letter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


CANONICAL_DOCTYPE_NAME = "html"

_DOCTYPE_PATTERN = re.compile(
    r"""
    ^\s*(?:<!DOCTYPE\s+)?
    (?P<name>[^\s"'>]+)
    (?:
        \s+PUBLIC\s+(?P<pq>["'])(?P<public>.*?)(?P=pq)
        (?:\s+(?P<sq>["'])(?P<system>.*?)(?P=sq))?
      |
        \s+SYSTEM\s+(?P<oq>["'])(?P<system_only>.*?)(?P=oq)
    )?
    """,
    re.IGNORECASE | re.VERBOSE | re.DOTALL,
)


class DocumentMode(str, Enum):
    """Character-set policy applied to generated identifiers."""

    STRICT = "strict"
    LEGACY = "legacy"


@dataclass(frozen=True)
class DoctypeInfo:
    """Name and identifiers of a doctype declaration."""

    name: str
    public_id: Optional[str] = None
    system_id: Optional[str] = None

    @classmethod
    def parse(cls, declaration: str) -> Optional["DoctypeInfo"]:
        """Parse ``declaration`` (with or without the ``<!DOCTYPE`` opener).

        Returns ``None`` when the text does not hold a doctype name.
        """

        match = _DOCTYPE_PATTERN.match(declaration or "")
        if match is None:
            return None
        system_id = match.group("system")
        if system_id is None:
            system_id = match.group("system_only")
        return cls(
            name=match.group("name"),
            public_id=match.group("public"),
            system_id=system_id,
        )

    @property
    def is_html5(self) -> bool:
        return (
            self.name.lower() == CANONICAL_DOCTYPE_NAME
            and not self.public_id
            and not self.system_id
        )


def detect_document_mode(doctype: Optional[DoctypeInfo]) -> DocumentMode:
    """Return :attr:`DocumentMode.STRICT` for HTML5 doctypes, else legacy.

    A document without any doctype is rendered in quirks mode by browsers,
    so it gets the legacy rules too.
    """

    if doctype is not None and doctype.is_html5:
        return DocumentMode.STRICT
    return DocumentMode.LEGACY


__all__ = [
    "CANONICAL_DOCTYPE_NAME",
    "DoctypeInfo",
    "DocumentMode",
    "detect_document_mode",
]
