import pytest

from ginkgokit.settings import SettingCategory, SettingConfig, SettingType


def test_setting_types_in_declared_order():
    configs = [
        SettingConfig(member.name.title(), member.name.lower(), member, False)
        for member in SettingType
    ]
    assert [c.type.name for c in configs] == ["SLIDER", "CHECKBOX", "DROPDOWN", "BUTTON"]
    assert SettingType["DROPDOWN"] is SettingType.DROPDOWN


def test_config_defaults_for_range_and_options():
    config = SettingConfig("Volume", "volume", SettingType.SLIDER, 0.5)
    assert config.min_value == 0.0
    assert config.max_value == 1.0
    assert config.options == []


def test_config_keeps_given_values():
    config = SettingConfig(
        "Quality",
        "quality",
        SettingType.DROPDOWN,
        1,
        options=["Low", "High"],
    )
    assert config.default_value == 1
    assert config.options == ["Low", "High"]
    assert config.type is SettingType.DROPDOWN


def test_options_not_shared_between_instances():
    first = SettingConfig("A", "a", SettingType.CHECKBOX, True)
    second = SettingConfig("B", "b", SettingType.CHECKBOX, False)
    first.options.append("x")
    assert second.options == []


@pytest.mark.parametrize("value", ["loud", None, [1.0]])
def test_config_rejects_unsupported_default(value):
    with pytest.raises(TypeError):
        SettingConfig("Bad", "bad", SettingType.SLIDER, value)


def test_config_rejects_non_enum_type():
    with pytest.raises(TypeError):
        SettingConfig("Bad", "bad", "slider", 0.5)


def test_category_holds_settings_in_order():
    volume = SettingConfig("Volume", "volume", SettingType.SLIDER, 0.5)
    mute = SettingConfig("Mute", "mute", SettingType.CHECKBOX, False)
    category = SettingCategory("Audio", "audio", [volume, mute])
    assert [s.id for s in category.settings] == ["volume", "mute"]


def test_category_settings_default_empty_and_independent():
    first = SettingCategory("One", "one")
    second = SettingCategory("Two", "two")
    first.settings.append(SettingConfig("X", "x", SettingType.BUTTON, False))
    assert len(first.settings) == 1
    assert second.settings == []