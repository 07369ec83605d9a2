"""Resolution of the inputs an identifier is generated from.

Everything is derived once, up front: explicit options win, then values read
from the element (``name``, ``value``, ``type``, ``data-name``, the enclosing
``select`` of an ``option``), then configuration, then built-in defaults.
Invalid options raise immediately so no identifier is ever generated from
them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from inputid.adapters.document import (
    BaseDocumentAdapter,
    adapter_for_document,
    adapter_for_element,
    is_element,
)
from inputid.core.modes import DocumentMode
from inputid.core.normalizer import DEFAULT_FALLBACK, DEFAULT_SEPARATOR
from inputid.exceptions import ConfigurationError, TypeMismatchError
from inputid.utils.config import Config


logger = logging.getLogger(__name__)

SEPARATORS = ("_", "-", "")
CHOICE_TYPES = frozenset({"checkbox", "radio", "option"})
_FALLBACK_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9_-]*")


def validate_fallback(fallback: Any) -> str:
    """Return ``fallback`` if it is itself a valid legacy identifier."""

    if not isinstance(fallback, str) or _FALLBACK_PATTERN.fullmatch(fallback) is None:
        raise ConfigurationError(
            f'The "fallback" option value is invalid: {fallback!r} '
            "(expected an ASCII letter followed by letters, digits, '_' or '-')"
        )
    return fallback


def validate_separator(separator: Any) -> str:
    if separator not in SEPARATORS:
        raise ConfigurationError(
            f'The "separator" option value must be "", "_" or "-", got {separator!r}'
        )
    return separator


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _type_name(value: Any) -> str:
    return type(value).__name__


@dataclass(frozen=True, eq=False)
class InputIdOptions:
    """Fully resolved inputs of one identifier."""

    document: BaseDocumentAdapter
    element: Optional[Any] = None
    name: Optional[str] = None
    value: Optional[str] = None
    type: Optional[str] = None
    prefix: Optional[str] = None
    separator: str = DEFAULT_SEPARATOR
    fallback: str = DEFAULT_FALLBACK
    force_uniqueness: bool = True

    def __post_init__(self) -> None:
        validate_separator(self.separator)
        validate_fallback(self.fallback)
        if not isinstance(self.document, BaseDocumentAdapter):
            raise ConfigurationError("InputIdOptions.document must be a document adapter")
        if self.element is not None and not self.document.accepts_element(self.element):
            raise TypeMismatchError(
                f"The element must be an element of the owner document's tree type, "
                f"got {_type_name(self.element)}"
            )

    @property
    def owner(self) -> Any:
        """The node the identifier is generated for: the element, else the document."""

        return self.element if self.element is not None else self.document.document

    @property
    def mode(self) -> DocumentMode:
        return self.document.mode()

    def parts(self) -> List[str]:
        parts: List[str] = []
        if self.prefix:
            parts.append(self.prefix)
        if self.name:
            parts.append(self.name)
        if self.type in CHOICE_TYPES and self.value is not None:
            parts.append(self.value)
        return parts

    def candidate(self) -> str:
        """The raw identifier, before sanitization."""

        return self.separator.join(self.parts())

    def to_dict(self) -> Dict[str, Any]:
        """Inputs without the element, suitable for building a copy."""

        return {
            "prefix": self.prefix,
            "type": self.type,
            "name": self.name,
            "value": self.value,
            "fallback": self.fallback,
            "separator": self.separator,
            "owner_document": self.document,
            "force_uniqueness": self.force_uniqueness,
        }


def _form_id(form: Any, document: Optional[BaseDocumentAdapter]) -> Optional[str]:
    if document is not None and document.accepts_element(form):
        return document.attribute(form, "id")
    if is_element(form):
        return adapter_for_element(form).attribute(form, "id")
    if isinstance(form, Mapping):
        return _optional_text(form.get("id"))
    return _optional_text(getattr(form, "id", None))


def _resolve_document(element: Any, owner_document: Any) -> BaseDocumentAdapter:
    if owner_document is None:
        if element is None:
            raise ConfigurationError(
                "An owner document is required when no element is given"
            )
        return adapter_for_element(element)

    document = adapter_for_document(owner_document)
    if element is not None and not document.accepts_element(element):
        raise ConfigurationError(
            "The element and the owner document come from different tree libraries"
        )
    return document


def resolve_options(
    element: Any = None,
    *,
    name: Any = None,
    value: Any = None,
    type: Optional[str] = None,
    prefix: Any = None,
    form: Any = None,
    owner_document: Any = None,
    separator: Optional[str] = None,
    fallback: Optional[str] = None,
    force_uniqueness: Optional[bool] = None,
    config: Optional[Config] = None,
) -> InputIdOptions:
    """Build the :class:`InputIdOptions` for an element and/or explicit options.

    Raises :class:`TypeMismatchError` when ``element`` is not an element and
    :class:`ConfigurationError` for an invalid fallback, separator or owner
    document.
    """

    if config is not None:
        if separator is None:
            separator = config.separator
        if fallback is None:
            fallback = config.fallback
        if force_uniqueness is None:
            force_uniqueness = config.force_uniqueness

    separator = validate_separator(DEFAULT_SEPARATOR if separator is None else separator)
    fallback = validate_fallback(DEFAULT_FALLBACK if fallback is None else fallback)

    if element is not None and not is_element(element):
        raise TypeMismatchError(
            f'The "element" option value must be an HTML element, got {_type_name(element)}'
        )
    document = _resolve_document(element, owner_document)

    name = _optional_text(name)
    value = _optional_text(value)
    prefix = _optional_text(prefix)

    if element is not None:
        if name is None:
            name = document.attribute(element, "name")
        if value is None:
            value = document.element_value(element)
        if not type:
            type = document.element_type(element)

    if not name and element is not None:
        name = document.attribute(element, "data-name") or name
    if not name and type == "option" and element is not None:
        group = document.enclosing(element, "select")
        if group is not None:
            name = document.attribute(group, "name")

    if not prefix and form is not None:
        prefix = _form_id(form, document)

    if force_uniqueness is None:
        force_uniqueness = element is not None or not name

    options = InputIdOptions(
        document=document,
        element=element,
        name=name,
        value=value,
        type=type or None,
        prefix=prefix or None,
        separator=separator,
        fallback=fallback,
        force_uniqueness=bool(force_uniqueness),
    )
    logger.debug(
        "Resolved options: prefix=%r name=%r value=%r type=%r unique=%s",
        options.prefix,
        options.name,
        options.value,
        options.type,
        options.force_uniqueness,
    )
    return options


__all__ = [
    "CHOICE_TYPES",
    "InputIdOptions",
    "SEPARATORS",
    "resolve_options",
    "validate_fallback",
    "validate_separator",
]
