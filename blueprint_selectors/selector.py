"""Selector vocabulary for blueprint inputs.

Every selector describes one UI input widget. A selector document is a
mapping with a single key, the selector type, whose value is the selector
configuration::

    number:
      min: 0
      max: 100
      mode: slider

Each selector type is a subclass of :class:`Selector` registered in
:data:`SELECTORS`. Instances validate their configuration with a voluptuous
``CONFIG_SCHEMA`` and keep it as an immutable, typed config record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Generic, Mapping, Tuple, TypeVar

import voluptuous as vol

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
    SELECTOR_ACTION,
    SELECTOR_ADDON,
    SELECTOR_AREA,
    SELECTOR_ATTRIBUTE,
    SELECTOR_BOOLEAN,
    SELECTOR_COLOR_RGB,
    SELECTOR_COLOR_TEMP,
    SELECTOR_DATE,
    SELECTOR_DATETIME,
    SELECTOR_DEVICE,
    SELECTOR_DURATION,
    SELECTOR_ENTITY,
    SELECTOR_ICON,
    SELECTOR_LOCATION,
    SELECTOR_MEDIA,
    SELECTOR_NUMBER,
    SELECTOR_OBJECT,
    SELECTOR_SELECT,
    SELECTOR_TARGET,
    SELECTOR_TEMPLATE,
    SELECTOR_TEXT,
    SELECTOR_THEME,
    SELECTOR_TIME,
)

_LOGGER = logging.getLogger(__name__)

_ConfigT = TypeVar("_ConfigT", bound="SelectorConfig")
_SelectorT = TypeVar("_SelectorT", bound="type[Selector]")


def _to_plain(value: Any) -> Any:
    if isinstance(value, SelectorConfig):
        return value.as_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_to_plain(item) for item in value]
    return value


@dataclass(frozen=True)
class SelectorConfig:
    """Base class for the immutable selector config records."""

    def as_dict(self) -> dict[str, Any]:
        """Return the plain document form, leaving out unset fields."""

        return {
            field.name: _to_plain(getattr(self, field.name))
            for field in fields(self)
            if getattr(self, field.name) is not None
        }


class NumberSelectorMode(str, Enum):
    """Display modes of the number selector."""

    BOX = "box"
    SLIDER = "slider"


class SelectSelectorMode(str, Enum):
    """Display modes of the select selector."""

    LIST = "list"
    DROPDOWN = "dropdown"


class TextSelectorType(str, Enum):
    """Browser input hints for the text selector.

    The hint only improves client side validation, the entered text itself
    is never checked against it.
    """

    COLOR = "color"
    DATE = "date"
    DATETIME_LOCAL = "datetime-local"
    EMAIL = "email"
    MONTH = "month"
    NUMBER = "number"
    PASSWORD = "password"
    SEARCH = "search"
    TEL = "tel"
    TEXT = "text"
    TIME = "time"
    URL = "url"
    WEEK = "week"


# ----------------------------------------------------------------------
# Shared filters


@dataclass(frozen=True)
class DeviceFilter(SelectorConfig):
    """Narrow a selection down to devices matching all set conditions."""

    integration: str | None = None
    manufacturer: str | None = None
    model: str | None = None


@dataclass(frozen=True)
class EntityFilter(SelectorConfig):
    """Narrow a selection down to entities matching all set conditions."""

    domain: Tuple[str, ...] | None = None
    device_class: str | None = None
    integration: str | None = None

    def as_dict(self) -> dict[str, Any]:
        data = super().as_dict()
        if self.domain is not None and len(self.domain) == 1:
            data[CONF_DOMAIN] = self.domain[0]
        return data


DEVICE_FILTER_SCHEMA = vol.All(
    vol.Schema(
        {
            vol.Optional(CONF_INTEGRATION): cv.domain,
            vol.Optional(CONF_MANUFACTURER): cv.string,
            vol.Optional(CONF_MODEL): cv.string,
        }
    ),
    lambda data: DeviceFilter(**data),
)

ENTITY_FILTER_SCHEMA = vol.All(
    vol.Schema(
        {
            vol.Optional(CONF_DOMAIN): cv.domains,
            vol.Optional(CONF_DEVICE_CLASS): cv.device_class,
            vol.Optional(CONF_INTEGRATION): cv.domain,
        }
    ),
    lambda data: EntityFilter(**data),
)


# ----------------------------------------------------------------------
# Config records


@dataclass(frozen=True)
class EmptySelectorConfig(SelectorConfig):
    """Config of the selectors that take no options."""


@dataclass(frozen=True)
class AreaSelectorConfig(SelectorConfig):
    device: DeviceFilter | None = None
    entity: EntityFilter | None = None
    multiple: bool | None = None


@dataclass(frozen=True)
class AttributeSelectorConfig(SelectorConfig):
    entity_id: str


@dataclass(frozen=True)
class ColorTempSelectorConfig(SelectorConfig):
    min_mireds: int | None = None
    max_mireds: int | None = None


@dataclass(frozen=True)
class DeviceSelectorConfig(SelectorConfig):
    entity: EntityFilter | None = None
    integration: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    multiple: bool | None = None


@dataclass(frozen=True)
class DurationSelectorConfig(SelectorConfig):
    enable_day: bool | None = None


@dataclass(frozen=True)
class EntitySelectorConfig(EntityFilter):
    exclude_entities: Tuple[str, ...] | None = None
    include_entities: Tuple[str, ...] | None = None
    multiple: bool | None = None


@dataclass(frozen=True)
class IconSelectorConfig(SelectorConfig):
    placeholder: str | None = None


@dataclass(frozen=True)
class LocationSelectorConfig(SelectorConfig):
    icon: str | None = None
    radius: bool | None = None


@dataclass(frozen=True)
class NumberSelectorConfig(SelectorConfig):
    """Config of the number selector.

    ``min <= max`` is expected from the author but not enforced here.
    """

    min: float
    max: float
    mode: NumberSelectorMode | None = None
    step: float | None = None
    unit_of_measurement: str | None = None


@dataclass(frozen=True)
class SelectOption(SelectorConfig):
    """A select option, ``label`` is shown and ``value`` is returned."""

    value: str
    label: str


@dataclass(frozen=True)
class SelectSelectorConfig(SelectorConfig):
    options: Tuple[SelectOption, ...]
    custom_value: bool | None = None
    mode: SelectSelectorMode | None = None
    multiple: bool | None = None

    def as_dict(self) -> dict[str, Any]:
        data = super().as_dict()
        # Options that only ever had a value go back to the plain string form
        if all(option.label == option.value for option in self.options):
            data[CONF_OPTIONS] = [option.value for option in self.options]
        return data


@dataclass(frozen=True)
class TargetSelectorConfig(SelectorConfig):
    device: DeviceFilter | None = None
    entity: EntityFilter | None = None


@dataclass(frozen=True)
class TextSelectorConfig(SelectorConfig):
    multiline: bool | None = None
    suffix: str | None = None
    type: TextSelectorType | None = None


SELECT_OPTION_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_LABEL): cv.string,
        vol.Required(CONF_VALUE): cv.string,
    }
)


def select_options(value: Any) -> Tuple[SelectOption, ...]:
    """Validate select options and normalise them to ``SelectOption`` records.

    Options are either all plain strings or all ``{label, value}`` mappings.
    A plain string is used as both the value and the label.
    """

    if not isinstance(value, list):
        raise vol.Invalid(f"expected a list, got {type(value).__name__}")

    if all(isinstance(item, str) for item in value):
        return tuple(SelectOption(value=item, label=item) for item in value)

    for index, item in enumerate(value):
        if not isinstance(item, (str, dict)):
            raise vol.Invalid(
                "options must be strings or label/value mappings, "
                f"got {type(item).__name__}",
                path=[index],
            )
    if not all(isinstance(item, dict) for item in value):
        raise vol.Invalid(
            "options must be all strings or all label/value mappings, not a mix"
        )

    options: list[SelectOption] = []
    for index, item in enumerate(value):
        try:
            validated = SELECT_OPTION_SCHEMA(item)
        except vol.Invalid as err:
            err.prepend([index])
            raise
        options.append(
            SelectOption(value=validated[CONF_VALUE], label=validated[CONF_LABEL])
        )
    return tuple(options)


# ----------------------------------------------------------------------
# Selectors


class Registry(Dict[str, "type[Selector]"]):
    """Registry of selector classes keyed by selector type."""

    def register(self, name: str) -> Callable[[_SelectorT], _SelectorT]:
        """Return a decorator that registers a selector class."""

        def decorator(cls: _SelectorT) -> _SelectorT:
            cls.selector_type = name
            self[name] = cls
            return cls

        return decorator


SELECTORS: Registry = Registry()


class Selector(Generic[_ConfigT]):
    """Base class for selectors."""

    CONFIG_SCHEMA: ClassVar[Callable[[Any], Any]]
    CONFIG_CLASS: ClassVar[type[SelectorConfig]]
    selector_type: ClassVar[str]

    config: _ConfigT

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        """Validate and store the selector configuration."""

        validated = self.CONFIG_SCHEMA(cv.optional_mapping(config))
        self.config = self.CONFIG_CLASS(**validated)  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return (
            self.selector_type == other.selector_type and self.config == other.config
        )

    def __hash__(self) -> int:
        return hash((self.selector_type, self.config))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.config!r})"

    def serialize(self) -> dict[str, Any]:
        """Serialize the selector back to a plain document."""

        return {self.selector_type: self.config.as_dict()}


class _EmptySelector(Selector[EmptySelectorConfig]):
    """Selector that takes no configuration, ``null`` and ``{}`` are equal."""

    CONFIG_SCHEMA = vol.Schema({})
    CONFIG_CLASS = EmptySelectorConfig


@SELECTORS.register(SELECTOR_ACTION)
class ActionSelector(_EmptySelector):
    """Input one or more sequences of actions."""


@SELECTORS.register(SELECTOR_ADDON)
class AddonSelector(_EmptySelector):
    """Pick an installed add-on by its slug."""


@SELECTORS.register(SELECTOR_AREA)
class AreaSelector(Selector[AreaSelectorConfig]):
    """Pick one or more areas."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Optional(CONF_DEVICE): DEVICE_FILTER_SCHEMA,
            vol.Optional(CONF_ENTITY): ENTITY_FILTER_SCHEMA,
            vol.Optional(CONF_MULTIPLE): cv.boolean,
        }
    )
    CONFIG_CLASS = AreaSelectorConfig


@SELECTORS.register(SELECTOR_ATTRIBUTE)
class AttributeSelector(Selector[AttributeSelectorConfig]):
    """Pick a state attribute of an entity."""

    CONFIG_SCHEMA = vol.Schema({vol.Required(CONF_ENTITY_ID): cv.entity_id})
    CONFIG_CLASS = AttributeSelectorConfig


@SELECTORS.register(SELECTOR_BOOLEAN)
class BooleanSelector(_EmptySelector):
    """Toggle an option on or off."""


@SELECTORS.register(SELECTOR_COLOR_RGB)
class ColorRGBSelector(_EmptySelector):
    """Pick an RGB color."""


@SELECTORS.register(SELECTOR_COLOR_TEMP)
class ColorTempSelector(Selector[ColorTempSelectorConfig]):
    """Pick a color temperature in mireds."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Optional(CONF_MIN_MIREDS): cv.positive_int,
            vol.Optional(CONF_MAX_MIREDS): cv.positive_int,
        }
    )
    CONFIG_CLASS = ColorTempSelectorConfig


@SELECTORS.register(SELECTOR_DATE)
class DateSelector(_EmptySelector):
    """Pick a date."""


@SELECTORS.register(SELECTOR_DATETIME)
class DateTimeSelector(_EmptySelector):
    """Pick a date with a time of day."""


@SELECTORS.register(SELECTOR_DEVICE)
class DeviceSelector(Selector[DeviceSelectorConfig]):
    """Pick one or more devices."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Optional(CONF_ENTITY): ENTITY_FILTER_SCHEMA,
            vol.Optional(CONF_INTEGRATION): cv.domain,
            vol.Optional(CONF_MANUFACTURER): cv.string,
            vol.Optional(CONF_MODEL): cv.string,
            vol.Optional(CONF_MULTIPLE): cv.boolean,
        }
    )
    CONFIG_CLASS = DeviceSelectorConfig


@SELECTORS.register(SELECTOR_DURATION)
class DurationSelector(Selector[DurationSelectorConfig]):
    """Pick a time duration, e.g. for delays or offsets."""

    CONFIG_SCHEMA = vol.Schema({vol.Optional(CONF_ENABLE_DAY): cv.boolean})
    CONFIG_CLASS = DurationSelectorConfig


@SELECTORS.register(SELECTOR_ENTITY)
class EntitySelector(Selector[EntitySelectorConfig]):
    """Pick one or more entities."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Optional(CONF_EXCLUDE_ENTITIES): cv.entity_ids,
            vol.Optional(CONF_INCLUDE_ENTITIES): cv.entity_ids,
            vol.Optional(CONF_INTEGRATION): cv.domain,
            vol.Optional(CONF_DOMAIN): cv.domains,
            vol.Optional(CONF_DEVICE_CLASS): cv.device_class,
            vol.Optional(CONF_MULTIPLE): cv.boolean,
        }
    )
    CONFIG_CLASS = EntitySelectorConfig


@SELECTORS.register(SELECTOR_ICON)
class IconSelector(Selector[IconSelectorConfig]):
    """Pick an icon."""

    CONFIG_SCHEMA = vol.Schema({vol.Optional(CONF_PLACEHOLDER): cv.string})
    CONFIG_CLASS = IconSelectorConfig


@SELECTORS.register(SELECTOR_LOCATION)
class LocationSelector(Selector[LocationSelectorConfig]):
    """Pick a location on a map, optionally with a radius in meters."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Optional(CONF_ICON): cv.string,
            vol.Optional(CONF_RADIUS): cv.boolean,
        }
    )
    CONFIG_CLASS = LocationSelectorConfig


@SELECTORS.register(SELECTOR_MEDIA)
class MediaSelector(_EmptySelector):
    """Pick media to play on a media device."""


@SELECTORS.register(SELECTOR_NUMBER)
class NumberSelector(Selector[NumberSelectorConfig]):
    """Input a number with a box or a slider."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Required(CONF_MIN): cv.number,
            vol.Required(CONF_MAX): cv.number,
            vol.Optional(CONF_MODE): cv.enum_value(NumberSelectorMode),
            vol.Optional(CONF_STEP): cv.number,
            vol.Optional(CONF_UNIT_OF_MEASUREMENT): cv.string,
        }
    )
    CONFIG_CLASS = NumberSelectorConfig


@SELECTORS.register(SELECTOR_OBJECT)
class ObjectSelector(_EmptySelector):
    """Input arbitrary data in YAML form."""


@SELECTORS.register(SELECTOR_SELECT)
class SelectSelector(Selector[SelectSelectorConfig]):
    """Pick one or more values from a list of options."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Required(CONF_OPTIONS): select_options,
            vol.Optional(CONF_CUSTOM_VALUE): cv.boolean,
            vol.Optional(CONF_MODE): cv.enum_value(SelectSelectorMode),
            vol.Optional(CONF_MULTIPLE): cv.boolean,
        }
    )
    CONFIG_CLASS = SelectSelectorConfig


@SELECTORS.register(SELECTOR_TARGET)
class TargetSelector(Selector[TargetSelectorConfig]):
    """Pick entities, devices or areas targeted by an action."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Optional(CONF_DEVICE): DEVICE_FILTER_SCHEMA,
            vol.Optional(CONF_ENTITY): ENTITY_FILTER_SCHEMA,
        }
    )
    CONFIG_CLASS = TargetSelectorConfig


@SELECTORS.register(SELECTOR_TEMPLATE)
class TemplateSelector(_EmptySelector):
    """Input a Jinja2 template."""


@SELECTORS.register(SELECTOR_TEXT)
class TextSelector(Selector[TextSelectorConfig]):
    """Input a text string."""

    CONFIG_SCHEMA = vol.Schema(
        {
            vol.Optional(CONF_MULTILINE): cv.boolean,
            vol.Optional(CONF_SUFFIX): cv.string,
            vol.Optional(CONF_TYPE): cv.enum_value(TextSelectorType),
        }
    )
    CONFIG_CLASS = TextSelectorConfig


@SELECTORS.register(SELECTOR_THEME)
class ThemeSelector(_EmptySelector):
    """Pick one of the installed themes."""


@SELECTORS.register(SELECTOR_TIME)
class TimeSelector(_EmptySelector):
    """Pick a time of day."""


def selector(document: Mapping[str, Any]) -> Selector:
    """Instantiate the selector described by a document.

    Errors are reported with the taxonomy of :mod:`.exceptions`, see
    :func:`.validation.validate_document`.
    """

    from .validation import validate_document

    return validate_document(document)


def validate_selector(document: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a selector document and return its normalised form."""

    built = selector(document)
    _LOGGER.debug("Validated %s selector", built.selector_type)
    return built.serialize()
