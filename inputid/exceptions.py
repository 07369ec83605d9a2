"""Errors raised while configuring or generating form control identifiers."""

from __future__ import annotations


class InputIdError(Exception):
    """Base class for every error raised by :mod:`inputid`."""


class ConfigurationError(InputIdError, ValueError):
    """An option value is invalid (fallback, separator, owner document)."""


class TypeMismatchError(InputIdError, TypeError):
    """A value passed as an element is not an element of a supported tree."""


__all__ = ["InputIdError", "ConfigurationError", "TypeMismatchError"]
