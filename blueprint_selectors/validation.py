"""Validate selector documents against the closed selector vocabulary."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import voluptuous as vol

from .const import SELECTOR_TAGS
from .exceptions import (
    EmptyDocumentError,
    InvalidEnumValueError,
    MissingRequiredFieldError,
    MultipleTopLevelKeysError,
    SelectorError,
    TypeMismatchError,
    UnknownFieldError,
    UnknownTagError,
)
from .selector import SELECTORS, Selector

_LOGGER = logging.getLogger(__name__)

EXPECTED_TAGS = "one of " + ", ".join(SELECTOR_TAGS)

# voluptuous reports unknown keys with a plain Invalid carrying this message
EXTRA_KEYS_MESSAGE = "extra keys not allowed"
REQUIRED_KEY_MESSAGE = "required key not provided"


def _convert_invalid(err: vol.Invalid, path: Sequence[Any]) -> SelectorError:
    """Translate a voluptuous error into a selector error."""

    # Missing keys are reported with their vol.Required marker in the path
    err_path = tuple(
        part.schema if isinstance(part, vol.Marker) else part for part in err.path
    )
    full_path = (*path, *err_path)

    if (
        isinstance(err, vol.RequiredFieldInvalid)
        or err.error_message == REQUIRED_KEY_MESSAGE
    ):
        return MissingRequiredFieldError(
            "Required field is missing",
            path=full_path,
            expected=f"field '{err_path[-1]}'" if err_path else None,
        )
    if err.error_message == EXTRA_KEYS_MESSAGE:
        return UnknownFieldError(
            f"Unknown field '{err_path[-1]}'" if err_path else "Unknown field",
            path=full_path,
        )
    if isinstance(err, vol.InInvalid):
        return InvalidEnumValueError(err.error_message, path=full_path)
    if isinstance(err, vol.RangeInvalid):
        return TypeMismatchError(
            err.error_message, path=full_path, expected="a positive integer"
        )
    return TypeMismatchError(err.error_message, path=full_path)


def _split_document(document: Any, path: Sequence[Any]) -> tuple[str, Any]:
    """Return the selector type and raw config of a document."""

    if not isinstance(document, dict):
        raise EmptyDocumentError(
            f"Selector document must be a mapping, got {type(document).__name__}",
            path=path,
            expected=EXPECTED_TAGS,
        )
    if not document:
        raise EmptyDocumentError(
            "Selector document has no selector type", path=path, expected=EXPECTED_TAGS
        )
    if len(document) > 1:
        keys = ", ".join(str(key) for key in document)
        raise MultipleTopLevelKeysError(
            f"Selector document has more than one selector type: {keys}",
            path=path,
            expected="exactly one selector type",
            translation_placeholders={"keys": keys},
        )

    ((tag, config),) = document.items()
    if tag not in SELECTORS:
        raise UnknownTagError(
            f"Unknown selector type '{tag}'",
            path=(*path, tag),
            expected=EXPECTED_TAGS,
            translation_placeholders={"tag": str(tag)},
        )
    return tag, config


def _errors_from(err: vol.Invalid, path: Sequence[Any]) -> list[SelectorError]:
    if isinstance(err, vol.MultipleInvalid):
        return [_convert_invalid(error, path) for error in err.errors]
    return [_convert_invalid(err, path)]


def validate_document(document: Any, path: Sequence[Any] = ()) -> Selector:
    """Validate a document and return the typed selector.

    The first problem found is raised as a :class:`SelectorError` naming the
    offending path. Nothing is accepted partially.
    """

    tag, config = _split_document(document, path)
    try:
        return SELECTORS[tag](config)
    except vol.Invalid as err:
        errors = _errors_from(err, (*path, tag))
        _LOGGER.debug("Rejected %s selector: %s", tag, errors[0])
        raise errors[0] from err


def collect_errors(document: Any, path: Sequence[Any] = ()) -> list[SelectorError]:
    """Return every problem with a document, an empty list when it is valid."""

    try:
        tag, config = _split_document(document, path)
    except SelectorError as err:
        return [err]

    try:
        SELECTORS[tag](config)
    except vol.Invalid as err:
        return _errors_from(err, (*path, tag))
    return []


def is_valid(document: Any) -> bool:
    """Return True when the document is a valid selector."""

    return not collect_errors(document)
