"""Document adapter for BeautifulSoup trees."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from bs4 import BeautifulSoup, Doctype, Tag

from inputid.core.modes import DoctypeInfo

from .base import BaseDocumentAdapter


class SoupDocumentAdapter(BaseDocumentAdapter):
    """Adapter over a :class:`bs4.BeautifulSoup` document."""

    document: BeautifulSoup

    @classmethod
    def accepts_document(cls, value: Any) -> bool:
        return isinstance(value, BeautifulSoup)

    @classmethod
    def accepts_element(cls, value: Any) -> bool:
        # BeautifulSoup is itself a Tag subclass.
        return isinstance(value, Tag) and not isinstance(value, BeautifulSoup)

    @classmethod
    def owner_document_of(cls, element: Tag) -> Optional[BeautifulSoup]:
        for parent in element.parents:
            if isinstance(parent, BeautifulSoup):
                return parent
        return None

    def doctype(self) -> Optional[DoctypeInfo]:
        for node in self.document.contents:
            if isinstance(node, Doctype):
                return DoctypeInfo.parse(str(node))
        return None

    def get_element_by_id(self, identifier: str) -> Optional[Tag]:
        return self.document.find(attrs={"id": identifier})

    def parent_of(self, element: Tag) -> Optional[Tag]:
        parent = element.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return parent

    def tag_name(self, element: Tag) -> str:
        return element.name.lower()

    def attribute(self, element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def has_attribute(self, element: Tag, name: str) -> bool:
        return element.has_attr(name)

    def text(self, element: Tag) -> str:
        return element.get_text()

    def iter_elements(self, tag_name: str) -> Iterator[Tag]:
        return iter(self.document.find_all(tag_name))

    def iter_descendants(self, element: Tag) -> Iterator[Tag]:
        return (node for node in element.descendants if isinstance(node, Tag))


__all__ = ["SoupDocumentAdapter"]
