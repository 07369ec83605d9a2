"""Document adapter for lxml trees (``lxml.html`` or ``lxml.etree``)."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from lxml import etree

from inputid.core.modes import DoctypeInfo

from .base import BaseDocumentAdapter


def _is_element(value: Any) -> bool:
    # Comments and processing instructions are _Element instances too,
    # but their ``tag`` is a factory function instead of a string.
    return isinstance(value, etree._Element) and isinstance(value.tag, str)


class LxmlDocumentAdapter(BaseDocumentAdapter):
    """Adapter over an :class:`lxml.etree._ElementTree` document."""

    document: etree._ElementTree

    @classmethod
    def accepts_document(cls, value: Any) -> bool:
        return isinstance(value, etree._ElementTree)

    @classmethod
    def accepts_element(cls, value: Any) -> bool:
        return _is_element(value)

    @classmethod
    def owner_document_of(cls, element: etree._Element) -> etree._ElementTree:
        return element.getroottree()

    def doctype(self) -> Optional[DoctypeInfo]:
        docinfo = self.document.docinfo
        if not docinfo.doctype:
            return None
        return DoctypeInfo(
            name=docinfo.root_name or "",
            public_id=docinfo.public_id or None,
            system_id=docinfo.system_url or None,
        )

    def get_element_by_id(self, identifier: str) -> Optional[etree._Element]:
        matches = self.document.xpath("//*[@id=$identifier]", identifier=identifier)
        return matches[0] if matches else None

    def parent_of(self, element: etree._Element) -> Optional[etree._Element]:
        return element.getparent()

    def tag_name(self, element: etree._Element) -> str:
        return etree.QName(element).localname.lower()

    def attribute(self, element: etree._Element, name: str) -> Optional[str]:
        return element.get(name)

    def has_attribute(self, element: etree._Element, name: str) -> bool:
        return name in element.attrib

    def text(self, element: etree._Element) -> str:
        return "".join(element.itertext())

    def iter_elements(self, tag_name: str) -> Iterator[etree._Element]:
        return (
            node
            for node in self.document.iter()
            if _is_element(node) and self.tag_name(node) == tag_name
        )

    def iter_descendants(self, element: etree._Element) -> Iterator[etree._Element]:
        return (node for node in element.iterdescendants() if _is_element(node))


__all__ = ["LxmlDocumentAdapter"]
