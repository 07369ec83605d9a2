"""Document adapters for the HTML tree libraries supported by inputid."""

from __future__ import annotations

from typing import Any, Dict, Type

from inputid.exceptions import ConfigurationError, TypeMismatchError

from .base import BaseDocumentAdapter
from .lxml import LxmlDocumentAdapter
from .soup import SoupDocumentAdapter


DOCUMENT_ADAPTERS: Dict[str, Type[BaseDocumentAdapter]] = {
    "soup": SoupDocumentAdapter,
    "lxml": LxmlDocumentAdapter,
}


def is_element(value: Any) -> bool:
    return any(adapter_cls.accepts_element(value) for adapter_cls in DOCUMENT_ADAPTERS.values())


def adapter_for_document(document: Any) -> BaseDocumentAdapter:
    """Wrap ``document`` with the matching adapter.

    Raises :class:`ConfigurationError` when ``document`` is not a supported
    document object.
    """

    if isinstance(document, BaseDocumentAdapter):
        return document
    for adapter_cls in DOCUMENT_ADAPTERS.values():
        if adapter_cls.accepts_document(document):
            return adapter_cls(document)
    raise ConfigurationError(
        f"The owner document must be a BeautifulSoup or lxml document, got {type(document).__name__}"
    )


def adapter_for_element(element: Any) -> BaseDocumentAdapter:
    """Return an adapter over the document ``element`` belongs to."""

    for adapter_cls in DOCUMENT_ADAPTERS.values():
        if not adapter_cls.accepts_element(element):
            continue
        document = adapter_cls.owner_document_of(element)
        if document is None:
            raise ConfigurationError(
                "The element is not attached to a document; pass owner_document explicitly"
            )
        return adapter_cls(document)
    raise TypeMismatchError(f"The element must be an HTML element, got {type(element).__name__}")


__all__ = [
    "BaseDocumentAdapter",
    "DOCUMENT_ADAPTERS",
    "LxmlDocumentAdapter",
    "SoupDocumentAdapter",
    "adapter_for_document",
    "adapter_for_element",
    "is_element",
]
