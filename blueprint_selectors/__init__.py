"""Blueprint selector vocabulary.

Typed, validated descriptions of the UI input widgets (selectors) that
blueprint inputs use.
"""

from __future__ import annotations

from .exceptions import (
    DocumentLoadError,
    EmptyDocumentError,
    InvalidEnumValueError,
    MissingRequiredFieldError,
    MultipleTopLevelKeysError,
    SelectorError,
    TypeMismatchError,
    UnknownFieldError,
    UnknownTagError,
)
from .loader import (
    iter_blueprint_selectors,
    load_document,
    load_document_file,
    load_selector,
    load_selector_file,
    validate_blueprint,
)
from .selector import SELECTORS, Selector, validate_selector
from .validation import collect_errors, is_valid, validate_document

__all__ = [
    "DocumentLoadError",
    "EmptyDocumentError",
    "InvalidEnumValueError",
    "MissingRequiredFieldError",
    "MultipleTopLevelKeysError",
    "SELECTORS",
    "Selector",
    "SelectorError",
    "TypeMismatchError",
    "UnknownFieldError",
    "UnknownTagError",
    "collect_errors",
    "is_valid",
    "iter_blueprint_selectors",
    "load_document",
    "load_document_file",
    "load_selector",
    "load_selector_file",
    "validate_blueprint",
    "validate_document",
    "validate_selector",
]
