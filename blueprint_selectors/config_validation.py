"""Voluptuous validators shared by the selector schemas."""

from __future__ import annotations

import math
import re
from enum import Enum
from numbers import Real
from typing import Any, Callable, Type, TypeVar

import voluptuous as vol

from .const import DEVICE_CLASSES

_EnumT = TypeVar("_EnumT", bound=Enum)

# Matches integration domains such as ``light`` or ``binary_sensor``
VALID_DOMAIN = re.compile(r"^(?!.+__)(?!_)[\da-z_]+(?<!_)$")
# Matches entity IDs such as ``light.living_room``
VALID_ENTITY_ID = re.compile(r"^(?!.+__)(?!_)[\da-z_]+(?<!_)\.(?!_)[\da-z_]+(?<!_)$")


def string(value: Any) -> str:
    """Validate that the value is a string."""

    if isinstance(value, str):
        return value
    raise vol.Invalid(f"expected str, got {type(value).__name__}")


def boolean(value: Any) -> bool:
    """Validate that the value is a boolean.

    Integers are rejected even though ``bool`` is an ``int`` subclass in
    Python, so ``multiple: 1`` does not pass for ``multiple: true``.
    """

    if isinstance(value, bool):
        return value
    raise vol.Invalid(f"expected bool, got {type(value).__name__}")


def number(value: Any) -> float | int:
    """Validate that the value is a finite int or float, but not a bool.

    NaN and the infinities are rejected, they have no JSON form.
    """

    if not isinstance(value, Real) or isinstance(value, bool):
        raise vol.Invalid(f"expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise vol.Invalid(f"expected a finite number, got {value}")
    return value  # type: ignore[return-value]


def _strict_int(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise vol.Invalid(f"expected int, got {type(value).__name__}")


positive_int = vol.All(_strict_int, vol.Range(min=1))


def domain(value: Any) -> str:
    """Validate an integration domain identifier."""

    value = string(value)
    if VALID_DOMAIN.match(value) is None:
        raise vol.Invalid(f"invalid domain '{value}'")
    return value


def entity_id(value: Any) -> str:
    """Validate an entity ID."""

    value = string(value)
    if VALID_ENTITY_ID.match(value) is None:
        raise vol.Invalid(f"invalid entity ID '{value}'")
    return value


def _sequence_of(validator: Callable[[Any], Any]) -> Callable[[Any], tuple[Any, ...]]:
    def validate(value: Any) -> tuple[Any, ...]:
        if not isinstance(value, list):
            raise vol.Invalid(f"expected a list, got {type(value).__name__}")
        validated: list[Any] = []
        for index, item in enumerate(value):
            try:
                validated.append(validator(item))
            except vol.Invalid as err:
                err.prepend([index])
                raise
        return tuple(validated)

    return validate


entity_ids = _sequence_of(entity_id)
domain_list = _sequence_of(domain)


def domains(value: Any) -> tuple[str, ...]:
    """Validate a single domain or a list of domains, keeping author order."""

    if isinstance(value, list):
        return domain_list(value)
    return (domain(value),)


def device_class(value: Any) -> str:
    """Validate a device class against the known vocabulary."""

    value = string(value)
    if value not in DEVICE_CLASSES:
        raise vol.InInvalid(f"unknown device class '{value}'")
    return value


def enum_value(enum_cls: Type[_EnumT]) -> Callable[[Any], _EnumT]:
    """Return a validator accepting the string values of ``enum_cls``."""

    allowed = [member.value for member in enum_cls]

    def validate(value: Any) -> _EnumT:
        value = string(value)
        if value not in allowed:
            raise vol.InInvalid(
                f"value must be one of {', '.join(allowed)}, got '{value}'"
            )
        return enum_cls(value)

    return validate


def optional_mapping(value: Any) -> dict[str, Any]:
    """Accept ``None`` or a mapping, normalising ``None`` to an empty dict."""

    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise vol.Invalid(f"expected a dictionary or null, got {type(value).__name__}")
