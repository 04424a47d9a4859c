"""
Tests for the AppSettings record.
"""
import pytest

from core.settings.models import (
    AppSettings,
    IOSDevice,
    REFRESH_RATES,
    SETTINGS_KEYS,
    coerce_field,
    to_bool,
)


class TestAppSettings:
    """Test AppSettings dataclass."""

    def test_default_values(self):
        settings = AppSettings()

        assert settings.keymapping is True
        assert settings.mouse_mapping is True
        assert settings.sensitivity == 50.0
        assert settings.disable_timeout is False
        assert settings.ios_device_model == "iPad8,6"
        assert settings.refresh_rate == 60
        assert settings.window_width == 1920
        assert settings.window_height == 1080
        assert settings.bypass is False

    def test_every_field_has_a_storage_key(self):
        assert sorted(SETTINGS_KEYS) == sorted(AppSettings.field_names())

    def test_to_dict_uses_dotted_keys(self):
        result = AppSettings(window_width=1440).to_dict()

        assert result["graphics.window_width"] == 1440
        assert result["graphics.ios_device_model"] == "iPad8,6"
        assert result["keymapping.mouse_mapping"] is True

    def test_restore_defaults_mutates_in_place(self):
        settings = AppSettings(keymapping=False, window_width=3000, bypass=True)
        same = settings

        settings.restore_defaults()

        assert same is settings
        assert settings == AppSettings()


class TestCoercion:

    @pytest.mark.parametrize("raw, expected", [
        (True, True), ("true", True), ("1", True), ("on", True),
        (False, False), ("false", False), ("0", False), ("off", False),
        (1, True), (0, False),
    ])
    def test_to_bool(self, raw, expected):
        assert to_bool(raw) is expected

    def test_to_bool_unrecognised_string_uses_default(self):
        assert to_bool("maybe", default=True) is True

    def test_int_fields_accept_float_strings(self):
        assert coerce_field("window_height", "1080.0") == 1080

    def test_sensitivity_is_clamped(self):
        assert coerce_field("sensitivity", 150) == 100.0
        assert coerce_field("sensitivity", -3) == 0.0

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            coerce_field("notch", True)

    def test_non_numeric_raises(self):
        with pytest.raises(ValueError):
            coerce_field("window_width", "wide")

    @pytest.mark.parametrize("raw", ["inf", "-inf", "nan", 1e999, float("nan")])
    def test_non_finite_numbers_raise_value_error(self, raw):
        with pytest.raises(ValueError):
            coerce_field("window_width", raw)
        with pytest.raises(ValueError):
            coerce_field("sensitivity", raw)

    @pytest.mark.parametrize("raw, expected", [
        (60, 60), ("120", 120), (120.0, 120), (90, 60), (0, 60), ("144", 60),
    ])
    def test_refresh_rate_limited_to_supported_rates(self, raw, expected):
        assert coerce_field("refresh_rate", raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("iPad6,7", "iPad6,7"),
        ("iPad13,8", "iPad13,8"),
        ("bogus", "iPad8,6"),
        ("", "iPad8,6"),
    ])
    def test_device_model_limited_to_known_devices(self, raw, expected):
        assert coerce_field("ios_device_model", raw) == expected


class TestIOSDevice:

    def test_identifiers(self):
        assert [d.value for d in IOSDevice] == ["iPad6,7", "iPad8,6", "iPad13,8"]

    def test_labels(self):
        assert IOSDevice.IPAD_PRO_12_9_GEN5.label == "iPad Pro (12.9-inch) (5th gen) | M1 | 8GB"

    def test_unknown_identifier_falls_back(self):
        assert IOSDevice.from_identifier("iPhone14,2") is IOSDevice.IPAD_PRO_12_9_GEN3

    def test_refresh_rates(self):
        assert REFRESH_RATES == (60, 120)
