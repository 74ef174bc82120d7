"""Constants for the blueprint selector vocabulary."""

from __future__ import annotations

from typing import Tuple

DOMAIN = "blueprint_selectors"
DOCS_URL = "https://www.home-assistant.io/docs/blueprint/selectors/"

SELECTOR_ACTION = "action"
SELECTOR_ADDON = "addon"
SELECTOR_AREA = "area"
SELECTOR_ATTRIBUTE = "attribute"
SELECTOR_BOOLEAN = "boolean"
SELECTOR_COLOR_RGB = "color_rgb"
SELECTOR_COLOR_TEMP = "color_temp"
SELECTOR_DATE = "date"
SELECTOR_DATETIME = "datetime"
SELECTOR_DEVICE = "device"
SELECTOR_DURATION = "duration"
SELECTOR_ENTITY = "entity"
SELECTOR_ICON = "icon"
SELECTOR_LOCATION = "location"
SELECTOR_MEDIA = "media"
SELECTOR_NUMBER = "number"
SELECTOR_OBJECT = "object"
SELECTOR_SELECT = "select"
SELECTOR_TARGET = "target"
SELECTOR_TEMPLATE = "template"
SELECTOR_TEXT = "text"
SELECTOR_THEME = "theme"
SELECTOR_TIME = "time"

SELECTOR_TAGS: Tuple[str, ...] = (
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

# Selectors whose configuration is always null or an empty mapping
EMPTY_CONFIG_SELECTORS: Tuple[str, ...] = (
    SELECTOR_ACTION,
    SELECTOR_ADDON,
    SELECTOR_BOOLEAN,
    SELECTOR_COLOR_RGB,
    SELECTOR_DATE,
    SELECTOR_DATETIME,
    SELECTOR_MEDIA,
    SELECTOR_OBJECT,
    SELECTOR_TEMPLATE,
    SELECTOR_THEME,
    SELECTOR_TIME,
)

# Selectors that must carry a configuration mapping
CONFIG_REQUIRED_SELECTORS: Tuple[str, ...] = (
    SELECTOR_ATTRIBUTE,
    SELECTOR_NUMBER,
    SELECTOR_SELECT,
)

CONF_CUSTOM_VALUE = "custom_value"
CONF_DEVICE = "device"
CONF_DEVICE_CLASS = "device_class"
CONF_DOMAIN = "domain"
CONF_ENABLE_DAY = "enable_day"
CONF_ENTITY = "entity"
CONF_ENTITY_ID = "entity_id"
CONF_EXCLUDE_ENTITIES = "exclude_entities"
CONF_ICON = "icon"
CONF_INCLUDE_ENTITIES = "include_entities"
CONF_INTEGRATION = "integration"
CONF_LABEL = "label"
CONF_MANUFACTURER = "manufacturer"
CONF_MAX = "max"
CONF_MAX_MIREDS = "max_mireds"
CONF_MIN = "min"
CONF_MIN_MIREDS = "min_mireds"
CONF_MODE = "mode"
CONF_MODEL = "model"
CONF_MULTILINE = "multiline"
CONF_MULTIPLE = "multiple"
CONF_OPTIONS = "options"
CONF_PLACEHOLDER = "placeholder"
CONF_RADIUS = "radius"
CONF_STEP = "step"
CONF_SUFFIX = "suffix"
CONF_TYPE = "type"
CONF_UNIT_OF_MEASUREMENT = "unit_of_measurement"
CONF_VALUE = "value"

# Blueprint document keys
CONF_BLUEPRINT = "blueprint"
CONF_INPUT = "input"
CONF_SELECTOR = "selector"
INPUT_TAG = "!input"

# Device classes accepted by entity filters, the union of the device classes
# known to binary_sensor, sensor, cover, button, event, humidifier,
# media_player, number, switch, update and valve entities.
DEVICE_CLASSES: frozenset[str] = frozenset(
    {
        # binary_sensor
        "battery",
        "battery_charging",
        "carbon_monoxide",
        "cold",
        "connectivity",
        "door",
        "garage_door",
        "gas",
        "heat",
        "light",
        "lock",
        "moisture",
        "motion",
        "moving",
        "occupancy",
        "opening",
        "plug",
        "power",
        "presence",
        "problem",
        "running",
        "safety",
        "smoke",
        "sound",
        "tamper",
        "update",
        "vibration",
        "window",
        # sensor
        "absolute_humidity",
        "apparent_power",
        "aqi",
        "area",
        "atmospheric_pressure",
        "blood_glucose_concentration",
        "carbon_dioxide",
        "conductivity",
        "current",
        "data_rate",
        "data_size",
        "date",
        "distance",
        "duration",
        "energy",
        "energy_distance",
        "energy_storage",
        "enum",
        "frequency",
        "humidity",
        "illuminance",
        "irradiance",
        "monetary",
        "nitrogen_dioxide",
        "nitrogen_monoxide",
        "nitrous_oxide",
        "ozone",
        "ph",
        "pm1",
        "pm10",
        "pm25",
        "power_factor",
        "precipitation",
        "precipitation_intensity",
        "pressure",
        "reactive_energy",
        "reactive_power",
        "signal_strength",
        "speed",
        "sulphur_dioxide",
        "temperature",
        "timestamp",
        "volatile_organic_compounds",
        "volatile_organic_compounds_parts",
        "voltage",
        "volume",
        "volume_flow_rate",
        "volume_storage",
        "water",
        "weight",
        "wind_direction",
        "wind_speed",
        # cover
        "awning",
        "blind",
        "curtain",
        "damper",
        "garage",
        "gate",
        "shade",
        "shutter",
        # button
        "identify",
        "restart",
        # event
        "button",
        "doorbell",
        # humidifier
        "dehumidifier",
        "humidifier",
        # media_player
        "receiver",
        "speaker",
        "tv",
        # switch
        "outlet",
        "switch",
        # update
        "firmware",
        # valve
        "water_heater",
    }
)
