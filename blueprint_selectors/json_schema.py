"""JSON Schema (draft-07) export of the selector vocabulary.

Editors and language servers use the exported schema to complete and check
selector documents without running the validators of this package.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable

from . import config_validation as cv
from .const import (
    CONF_CUSTOM_VALUE,
    CONF_DEVICE,
    CONF_DEVICE_CLASS,
    CONF_DOMAIN,
    CONF_ENABLE_DAY,
    CONF_ENTITY,
    CONF_ENTITY_ID,
    CONF_EXCLUDE_ENTITIES,
    CONF_ICON,
    CONF_INCLUDE_ENTITIES,
    CONF_INTEGRATION,
    CONF_LABEL,
    CONF_MANUFACTURER,
    CONF_MAX,
    CONF_MAX_MIREDS,
    CONF_MIN,
    CONF_MIN_MIREDS,
    CONF_MODE,
    CONF_MODEL,
    CONF_MULTILINE,
    CONF_MULTIPLE,
    CONF_OPTIONS,
    CONF_PLACEHOLDER,
    CONF_RADIUS,
    CONF_STEP,
    CONF_SUFFIX,
    CONF_TYPE,
    CONF_UNIT_OF_MEASUREMENT,
    CONF_VALUE,
    DEVICE_CLASSES,
    DOCS_URL,
    EMPTY_CONFIG_SELECTORS,
    SELECTOR_AREA,
    SELECTOR_ATTRIBUTE,
    SELECTOR_COLOR_TEMP,
    SELECTOR_DEVICE,
    SELECTOR_DURATION,
    SELECTOR_ENTITY,
    SELECTOR_ICON,
    SELECTOR_LOCATION,
    SELECTOR_NUMBER,
    SELECTOR_SELECT,
    SELECTOR_TAGS,
    SELECTOR_TARGET,
    SELECTOR_TEXT,
)
from .selector import (
    SELECTORS,
    NumberSelectorMode,
    SelectSelectorMode,
    TextSelectorType,
)

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

# Anchors of the selector documentation that do not follow ``<tag>-selector``
DOCS_ANCHORS = {
    "addon": "add-on-selector",
    "color_rgb": "rgb-color-selector",
    "color_temp": "color-temperature-selector",
    "datetime": "date--time-selector",
}

_BOOLEAN = {"type": "boolean"}
_NUMBER = {"type": "number"}
_STRING = {"type": "string"}
_POSITIVE_INTEGER = {"type": "integer", "minimum": 1}
_DOMAIN = {"type": "string", "pattern": cv.VALID_DOMAIN.pattern}
_ENTITY_ID = {"type": "string", "pattern": cv.VALID_ENTITY_ID.pattern}
_DEVICE_CLASS = {"type": "string", "enum": sorted(DEVICE_CLASSES)}
_DOMAINS = {"anyOf": [_DOMAIN, {"type": "array", "items": _DOMAIN}]}
_ENTITY_IDS = {"type": "array", "items": _ENTITY_ID}


def _enum(values: Iterable[Any]) -> Dict[str, Any]:
    return {"type": "string", "enum": [getattr(value, "value", value) for value in values]}


def _object(
    properties: Dict[str, Any], required: Iterable[str] = ()
) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }
    required = list(required)
    if required:
        schema["required"] = required
    return schema


def _nullable(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"anyOf": [{"type": "null"}, schema]}


DEVICE_FILTER = _object(
    {
        CONF_INTEGRATION: _DOMAIN,
        CONF_MANUFACTURER: _STRING,
        CONF_MODEL: _STRING,
    }
)

ENTITY_FILTER = _object(
    {
        CONF_DOMAIN: _DOMAINS,
        CONF_DEVICE_CLASS: _DEVICE_CLASS,
        CONF_INTEGRATION: _DOMAIN,
    }
)

SELECT_OPTIONS = {
    "anyOf": [
        {"type": "array", "items": _STRING},
        {
            "type": "array",
            "items": _object(
                {CONF_LABEL: _STRING, CONF_VALUE: _STRING},
                required=(CONF_LABEL, CONF_VALUE),
            ),
        },
    ]
}

CONFIG_SCHEMAS: Dict[str, Dict[str, Any]] = {
    SELECTOR_AREA: _nullable(
        _object(
            {
                CONF_DEVICE: DEVICE_FILTER,
                CONF_ENTITY: ENTITY_FILTER,
                CONF_MULTIPLE: _BOOLEAN,
            }
        )
    ),
    SELECTOR_ATTRIBUTE: _object(
        {CONF_ENTITY_ID: _ENTITY_ID}, required=(CONF_ENTITY_ID,)
    ),
    SELECTOR_COLOR_TEMP: _nullable(
        _object(
            {
                CONF_MIN_MIREDS: _POSITIVE_INTEGER,
                CONF_MAX_MIREDS: _POSITIVE_INTEGER,
            }
        )
    ),
    SELECTOR_DEVICE: _nullable(
        _object(
            {
                CONF_ENTITY: ENTITY_FILTER,
                CONF_INTEGRATION: _DOMAIN,
                CONF_MANUFACTURER: _STRING,
                CONF_MODEL: _STRING,
                CONF_MULTIPLE: _BOOLEAN,
            }
        )
    ),
    SELECTOR_DURATION: _nullable(_object({CONF_ENABLE_DAY: _BOOLEAN})),
    SELECTOR_ENTITY: _nullable(
        _object(
            {
                CONF_EXCLUDE_ENTITIES: _ENTITY_IDS,
                CONF_INCLUDE_ENTITIES: _ENTITY_IDS,
                CONF_INTEGRATION: _DOMAIN,
                CONF_DOMAIN: _DOMAINS,
                CONF_DEVICE_CLASS: _DEVICE_CLASS,
                CONF_MULTIPLE: _BOOLEAN,
            }
        )
    ),
    SELECTOR_ICON: _nullable(_object({CONF_PLACEHOLDER: _STRING})),
    SELECTOR_LOCATION: _nullable(
        _object({CONF_ICON: _STRING, CONF_RADIUS: _BOOLEAN})
    ),
    SELECTOR_NUMBER: _object(
        {
            CONF_MIN: _NUMBER,
            CONF_MAX: _NUMBER,
            CONF_MODE: _enum(NumberSelectorMode),
            CONF_STEP: _NUMBER,
            CONF_UNIT_OF_MEASUREMENT: _STRING,
        },
        required=(CONF_MIN, CONF_MAX),
    ),
    SELECTOR_SELECT: _object(
        {
            CONF_OPTIONS: SELECT_OPTIONS,
            CONF_CUSTOM_VALUE: _BOOLEAN,
            CONF_MODE: _enum(SelectSelectorMode),
            CONF_MULTIPLE: _BOOLEAN,
        },
        required=(CONF_OPTIONS,),
    ),
    SELECTOR_TARGET: _nullable(
        _object({CONF_DEVICE: DEVICE_FILTER, CONF_ENTITY: ENTITY_FILTER})
    ),
    SELECTOR_TEXT: _nullable(
        _object(
            {
                CONF_MULTILINE: _BOOLEAN,
                CONF_SUFFIX: _STRING,
                CONF_TYPE: _enum(TextSelectorType),
            }
        )
    ),
}

for _tag in EMPTY_CONFIG_SELECTORS:
    CONFIG_SCHEMAS[_tag] = _nullable(_object({}))


def docs_url(tag: str) -> str:
    """Return the documentation URL of a selector type."""

    return DOCS_URL + "#" + DOCS_ANCHORS.get(tag, f"{tag}-selector")


def _description(tag: str) -> str:
    doc = SELECTORS[tag].__doc__ or ""
    return doc.strip().splitlines()[0] if doc.strip() else tag


def selector_json_schema() -> Dict[str, Any]:
    """Return the JSON Schema describing every selector document."""

    variants = []
    for tag in SELECTOR_TAGS:
        variant = _object({tag: CONFIG_SCHEMAS[tag]}, required=(tag,))
        variant["title"] = f"{tag} selector"
        variant["description"] = f"{_description(tag)}\n{docs_url(tag)}"
        variants.append(variant)

    return copy.deepcopy(
        {
            "$schema": JSON_SCHEMA_DRAFT,
            "title": "Selector",
            "oneOf": variants,
        }
    )
