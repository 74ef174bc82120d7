"""Tests for the selector classes and their config records."""

from __future__ import annotations

import dataclasses

import pytest

from blueprint_selectors.const import (
    CONFIG_REQUIRED_SELECTORS,
    EMPTY_CONFIG_SELECTORS,
    SELECTOR_TAGS,
)
from blueprint_selectors.selector import (
    SELECTORS,
    AreaSelector,
    ColorTempSelector,
    DeviceFilter,
    EmptySelectorConfig,
    EntityFilter,
    EntitySelector,
    LocationSelector,
    NumberSelector,
    NumberSelectorMode,
    SelectOption,
    SelectSelector,
    SelectSelectorMode,
    TargetSelector,
    TextSelector,
    TextSelectorType,
    selector,
    validate_selector,
)

MINIMAL_CONFIGS = {
    "attribute": {"entity_id": "sensor.outside_temperature"},
    "number": {"min": 0, "max": 10},
    "select": {"options": ["a", "b", "c"]},
}


def test_registry_holds_every_selector_type():
    assert set(SELECTORS) == set(SELECTOR_TAGS)
    assert len(SELECTORS) == 23
    for tag, cls in SELECTORS.items():
        assert cls.selector_type == tag


@pytest.mark.parametrize("tag", SELECTOR_TAGS)
def test_minimal_document_is_accepted(tag):
    document = {tag: MINIMAL_CONFIGS.get(tag)}

    built = selector(document)

    assert built.selector_type == tag
    assert isinstance(built, SELECTORS[tag])


@pytest.mark.parametrize("tag", EMPTY_CONFIG_SELECTORS)
def test_null_and_empty_config_are_equivalent(tag):
    from_null = selector({tag: None})
    from_empty = selector({tag: {}})

    assert from_null == from_empty
    assert from_null.config == EmptySelectorConfig()
    assert from_null.serialize() == {tag: {}}


@pytest.mark.parametrize(
    "tag", [tag for tag in SELECTOR_TAGS if tag not in CONFIG_REQUIRED_SELECTORS]
)
def test_optional_config_defaults_to_unset_fields(tag):
    built = SELECTORS[tag]()

    assert built.serialize() == {tag: {}}


def test_number_selector_config():
    built = NumberSelector(
        {"min": 0, "max": 100, "step": 0.5, "mode": "slider", "unit_of_measurement": "%"}
    )

    assert built.config.min == 0
    assert built.config.max == 100
    assert built.config.step == 0.5
    assert built.config.mode is NumberSelectorMode.SLIDER
    assert built.serialize() == {
        "number": {
            "min": 0,
            "max": 100,
            "step": 0.5,
            "mode": "slider",
            "unit_of_measurement": "%",
        }
    }


def test_number_selector_does_not_enforce_bound_order():
    built = NumberSelector({"min": 10, "max": 0})

    assert built.config.min == 10
    assert built.config.max == 0


def test_select_string_options_are_normalised():
    built = SelectSelector({"options": ["red", "green", "blue"], "multiple": True})

    assert built.config.options == (
        SelectOption(value="red", label="red"),
        SelectOption(value="green", label="green"),
        SelectOption(value="blue", label="blue"),
    )
    assert built.config.multiple is True
    assert built.serialize() == {
        "select": {"options": ["red", "green", "blue"], "multiple": True}
    }


def test_select_label_value_options_keep_order():
    built = SelectSelector(
        {
            "options": [
                {"label": "Zebra", "value": "z"},
                {"label": "Aardvark", "value": "a"},
            ],
            "mode": "dropdown",
            "custom_value": True,
        }
    )

    assert [option.value for option in built.config.options] == ["z", "a"]
    assert built.config.options[0].label == "Zebra"
    assert built.config.mode is SelectSelectorMode.DROPDOWN
    assert built.serialize()["select"]["options"] == [
        {"value": "z", "label": "Zebra"},
        {"value": "a", "label": "Aardvark"},
    ]


def test_text_selector_type_enum():
    built = TextSelector({"type": "url", "suffix": "px", "multiline": False})

    assert built.config.type is TextSelectorType.URL
    assert built.serialize() == {
        "text": {"type": "url", "suffix": "px", "multiline": False}
    }
    assert len(TextSelectorType) == 13


def test_area_selector_nested_filters():
    built = AreaSelector({"device": {"integration": "hue"}, "multiple": True})

    assert built.config.device == DeviceFilter(integration="hue")
    assert built.config.entity is None
    assert built.config.multiple is True
    assert built.serialize() == {
        "area": {"device": {"integration": "hue"}, "multiple": True}
    }


def test_entity_filter_domain_forms():
    single = EntitySelector({"domain": "light"})
    several = EntitySelector({"domain": ["switch", "light"]})

    assert single.config.domain == ("light",)
    assert several.config.domain == ("switch", "light")
    assert single.serialize() == {"entity": {"domain": "light"}}
    assert several.serialize() == {"entity": {"domain": ["switch", "light"]}}


def test_entity_selector_entity_lists():
    built = EntitySelector(
        {
            "include_entities": ["light.kitchen", "light.hallway"],
            "exclude_entities": ["light.garage"],
            "device_class": "motion",
            "integration": "zha",
        }
    )

    assert built.config.include_entities == ("light.kitchen", "light.hallway")
    assert built.config.exclude_entities == ("light.garage",)
    assert isinstance(built.config, EntityFilter)


def test_target_selector_filters():
    built = TargetSelector(
        {
            "device": {"manufacturer": "Signify", "model": "LCT015"},
            "entity": {"domain": "light", "device_class": "motion"},
        }
    )

    assert built.config.device.manufacturer == "Signify"
    assert built.config.entity == EntityFilter(domain=("light",), device_class="motion")


def test_color_temp_and_location_configs():
    color_temp = ColorTempSelector({"min_mireds": 153, "max_mireds": 500})
    location = LocationSelector({"icon": "mdi:home", "radius": True})

    assert color_temp.config.min_mireds == 153
    assert location.config.radius is True


def test_configs_are_immutable():
    built = NumberSelector({"min": 0, "max": 1})

    with pytest.raises(dataclasses.FrozenInstanceError):
        built.config.min = 5  # type: ignore[misc]


def test_selectors_are_hashable_values():
    first = selector({"entity": {"domain": ["light", "switch"]}})
    second = selector({"entity": {"domain": ["light", "switch"]}})

    assert first == second
    assert len({first, second}) == 1
    assert first != selector({"entity": {"domain": "light"}})


@pytest.mark.parametrize(
    "document",
    [
        {"number": {"min": -5.5, "max": 5.5, "mode": "box"}},
        {"select": {"options": [{"label": "A", "value": "a"}]}},
        {"entity": {"domain": ["light"], "multiple": True}},
        {"device": {"entity": {"integration": "mqtt"}, "model": "X1"}},
        {"duration": {"enable_day": True}},
        {"icon": {"placeholder": "mdi:lightbulb"}},
        {"time": None},
    ],
)
def test_serialized_selector_validates_to_equal_selector(document):
    built = selector(document)

    assert selector(built.serialize()) == built


def test_validate_selector_returns_normalised_document():
    assert validate_selector({"boolean": None}) == {"boolean": {}}
    assert validate_selector({"entity": {"domain": ["light"]}}) == {
        "entity": {"domain": "light"}
    }
