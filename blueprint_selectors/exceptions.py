"""Exceptions raised while checking selector documents."""

from __future__ import annotations

from typing import Any, Sequence


def format_path(path: Sequence[Any]) -> str:
    """Render a document path as a dotted string, list indexes in brackets."""

    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered or "<root>"


class SelectorError(Exception):
    """Base class for selector document errors."""

    translation_key = "invalid_selector"

    def __init__(
        self,
        message: str,
        *,
        path: Sequence[Any] = (),
        expected: str | None = None,
        translation_placeholders: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path: tuple[Any, ...] = tuple(path)
        self.expected = expected
        self.translation_placeholders = {
            "path": format_path(self.path),
            **(translation_placeholders or {}),
        }

    def __str__(self) -> str:
        text = f"{self.message} at {format_path(self.path)}"
        if self.expected:
            text += f" (expected {self.expected})"
        return text


class DocumentLoadError(SelectorError):
    """Raised when YAML or JSON text cannot be parsed."""

    translation_key = "load_failed"


class EmptyDocumentError(SelectorError):
    """Raised when a document has no selector key or is not a mapping."""

    translation_key = "empty_document"


class UnknownTagError(SelectorError):
    """Raised when the top-level key is not a known selector type."""

    translation_key = "unknown_tag"


class MultipleTopLevelKeysError(SelectorError):
    """Raised when a document names more than one selector type."""

    translation_key = "multiple_top_level_keys"


class MissingRequiredFieldError(SelectorError):
    """Raised when a field required by the selector type is absent."""

    translation_key = "missing_required_field"


class TypeMismatchError(SelectorError):
    """Raised when a field holds a value of the wrong type or format."""

    translation_key = "type_mismatch"


class InvalidEnumValueError(SelectorError):
    """Raised when a value is not one of the allowed literals."""

    translation_key = "invalid_enum_value"


class UnknownFieldError(SelectorError):
    """Raised when a field is not declared for the selector type."""

    translation_key = "unknown_field"
