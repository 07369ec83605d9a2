"""Common interface for read-only views over parsed HTML documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional

from inputid.core.modes import DoctypeInfo, DocumentMode, detect_document_mode
from inputid.exceptions import ConfigurationError


INPUT_TYPES = frozenset(
    {
        "button",
        "checkbox",
        "color",
        "date",
        "datetime-local",
        "email",
        "file",
        "hidden",
        "image",
        "month",
        "number",
        "password",
        "radio",
        "range",
        "reset",
        "search",
        "submit",
        "tel",
        "text",
        "time",
        "url",
        "week",
    }
)
BUTTON_TYPES = frozenset({"submit", "reset", "button"})
LABELABLE_TAGS = frozenset(
    {"button", "input", "meter", "output", "progress", "select", "textarea"}
)


class BaseDocumentAdapter(ABC):
    """Base class wrapping a document tree produced by an HTML library.

    Subclasses only provide tree primitives (parents, attributes, lookups by
    ``id``); DOM-like conveniences such as the ``type`` and ``value`` of form
    controls or the labels of an element are derived here.
    """

    def __init__(self, document: Any) -> None:
        if not self.accepts_document(document):
            raise ConfigurationError(
                f"{type(document).__name__} is not a document supported by {type(self).__name__}"
            )
        self.document = document

    # ------------------------------------------------------------------
    # Type checks
    # ------------------------------------------------------------------
    @classmethod
    @abstractmethod
    def accepts_document(cls, value: Any) -> bool:
        """Return ``True`` when ``value`` is a document this adapter can wrap."""

    @classmethod
    @abstractmethod
    def accepts_element(cls, value: Any) -> bool:
        """Return ``True`` when ``value`` is an element node of this tree type."""

    @classmethod
    @abstractmethod
    def owner_document_of(cls, element: Any) -> Optional[Any]:
        """Return the document ``element`` belongs to, if it is attached to one."""

    # ------------------------------------------------------------------
    # Tree primitives
    # ------------------------------------------------------------------
    @abstractmethod
    def doctype(self) -> Optional[DoctypeInfo]:
        """Return the doctype declared by the document, if any."""

    @abstractmethod
    def get_element_by_id(self, identifier: str) -> Optional[Any]:
        """Return the first element (in document order) whose ``id`` is ``identifier``."""

    @abstractmethod
    def parent_of(self, element: Any) -> Optional[Any]:
        """Return the parent element, or ``None`` at the top of the document."""

    @abstractmethod
    def tag_name(self, element: Any) -> str:
        """Return the lowercase local tag name."""

    @abstractmethod
    def attribute(self, element: Any, name: str) -> Optional[str]:
        """Return an attribute value, or ``None`` when it is absent."""

    @abstractmethod
    def has_attribute(self, element: Any, name: str) -> bool:
        """Return whether the attribute is present, even without a value."""

    @abstractmethod
    def text(self, element: Any) -> str:
        """Return the concatenated text content of ``element``."""

    @abstractmethod
    def iter_elements(self, tag_name: str) -> Iterator[Any]:
        """Yield every element named ``tag_name`` in document order."""

    @abstractmethod
    def iter_descendants(self, element: Any) -> Iterator[Any]:
        """Yield the element descendants of ``element`` in document order."""

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------
    def mode(self) -> DocumentMode:
        return detect_document_mode(self.doctype())

    def lookup(self, identifier: str) -> Optional[Any]:
        """Lookup capability consumed by :func:`inputid.core.resolve_unique`."""

        return self.get_element_by_id(identifier)

    def ancestors(self, element: Any) -> Iterator[Any]:
        parent = self.parent_of(element)
        while parent is not None:
            yield parent
            parent = self.parent_of(parent)

    def enclosing(self, element: Any, tag_name: str) -> Optional[Any]:
        """Return the nearest ancestor named ``tag_name``, or ``None``."""

        for ancestor in self.ancestors(element):
            if self.tag_name(ancestor) == tag_name:
                return ancestor
        return None

    def element_type(self, element: Any) -> str:
        """Return what the DOM ``type`` property reports for ``element``.

        Elements without such a property report their tag name.
        """

        tag = self.tag_name(element)
        if tag == "input":
            declared = (self.attribute(element, "type") or "").strip().lower()
            return declared if declared in INPUT_TYPES else "text"
        if tag == "button":
            declared = (self.attribute(element, "type") or "").strip().lower()
            return declared if declared in BUTTON_TYPES else "submit"
        if tag == "select":
            return "select-multiple" if self.has_attribute(element, "multiple") else "select-one"
        return tag

    def element_value(self, element: Any) -> Optional[str]:
        """Return the DOM ``value`` of checkable inputs and options."""

        value = self.attribute(element, "value")
        if value is not None:
            return value
        tag = self.tag_name(element)
        if tag == "option":
            return " ".join(self.text(element).split())
        if tag == "input" and self.element_type(element) in ("checkbox", "radio"):
            return "on"
        return None

    def is_labelable(self, element: Any) -> bool:
        tag = self.tag_name(element)
        if tag == "input":
            return self.element_type(element) != "hidden"
        return tag in LABELABLE_TAGS

    def labels_for(self, identifier: str) -> List[Any]:
        """Return the labels of the element holding ``identifier``.

        A label points at the element either through its ``for`` attribute
        or, without one, by wrapping it as its first labelable descendant.
        """

        element = self.get_element_by_id(identifier)
        if element is None or not self.is_labelable(element):
            return []

        labels = []
        for label in self.iter_elements("label"):
            target = self.attribute(label, "for")
            if target is not None:
                if target == identifier:
                    labels.append(label)
                continue
            control = next(
                (node for node in self.iter_descendants(label) if self.is_labelable(node)),
                None,
            )
            if control is element:
                labels.append(label)
        return labels


__all__ = ["BaseDocumentAdapter", "INPUT_TYPES", "LABELABLE_TAGS"]
