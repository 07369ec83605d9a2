"""Value object representing the ``id`` of an HTML form control."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from inputid.core.normalizer import normalize
from inputid.core.resolver import resolve_unique
from inputid.options import InputIdOptions, resolve_options


logger = logging.getLogger(__name__)


class InputId:
    """Identifier of a form control, derived from its semantic attributes.

    Build it from an element (its ``name``, ``value``, ``type`` and owner
    document are read from the tree) and/or explicit options::

        InputId(element)
        InputId(name="color", value="red", type="radio", owner_document=soup)

    Options are resolved and validated by the constructor. The identifier
    itself is computed on first use (``str(input_id)``) against the live
    document and cached; the instance cannot be modified.
    """

    __slots__ = ("_options", "_string")

    def __init__(self, element: Any = None, **options: Any) -> None:
        object.__setattr__(self, "_options", resolve_options(element, **options))
        object.__setattr__(self, "_string", None)

    @classmethod
    def from_options(cls, options: InputIdOptions) -> "InputId":
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_options", options)
        object.__setattr__(instance, "_string", None)
        return instance

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        options = self._options
        fields = ", ".join(
            f"{key}={getattr(options, key)!r}" for key in ("prefix", "name", "value", "type")
        )
        return f"{type(self).__name__}({fields})"

    @property
    def options(self) -> InputIdOptions:
        return self._options

    @property
    def resolved(self) -> bool:
        """Whether the identifier has already been computed."""

        return self._string is not None

    def to_string(self) -> str:
        if self._string is None:
            object.__setattr__(self, "_string", self._generate())
        return self._string

    def _generate(self) -> str:
        options = self._options
        candidate = options.candidate()
        mode = options.mode
        if options.force_uniqueness:
            identifier = resolve_unique(
                candidate,
                options.owner,
                options.document.lookup,
                fallback=options.fallback,
                separator=options.separator,
                mode=mode,
            )
        else:
            identifier = normalize(candidate, mode, options.fallback, options.separator)
        logger.debug("Generated id %r from %r (%s mode)", identifier, candidate, mode.value)
        return identifier

    def to_dict(self) -> Dict[str, Any]:
        """Inputs of the identifier, excluding the element."""

        return self._options.to_dict()

    def _copy(self, **changes: Any) -> "InputId":
        return type(self)(**{**self.to_dict(), **changes})

    def with_type(self, type: Optional[str]) -> "InputId":
        """Copy with another element type (the element itself is not carried over)."""

        return self._copy(type=type)

    def with_name(self, name: Optional[str]) -> "InputId":
        return self._copy(name=name)

    def with_value(self, value: Optional[str]) -> "InputId":
        return self._copy(value=value)

    def with_prefix(self, prefix: Optional[str]) -> "InputId":
        return self._copy(prefix=prefix)

    def force_uniqueness(self) -> "InputId":
        return self._copy(force_uniqueness=True)

    def ignore_uniqueness(self) -> "InputId":
        return self._copy(force_uniqueness=False)

    def get_element(self) -> Optional[Any]:
        """Return the element of the document currently holding this id."""

        return self._options.document.get_element_by_id(self.to_string())

    def get_labels(self) -> List[Any]:
        """Return the labels associated with :meth:`get_element`, in document order."""

        return self._options.document.labels_for(self.to_string())


__all__ = ["InputId"]
