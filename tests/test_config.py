"""Tests for environment settings."""

import pytest
from models.decode_params import DecodeParams
from models.encode_params import EncodeParams
from utils.config import BlurHashSettings, load_settings


def test_defaults_without_environment():
    settings = load_settings({})
    assert settings == BlurHashSettings()
    assert settings.enabled is True
    assert (settings.component_x, settings.component_y) == (4, 3)
    assert (settings.preview_width, settings.preview_height) == (32, 32)


def test_reads_environment():
    settings = load_settings({
        "BLURHASH_ENABLED": "off",
        "BLURHASH_COMPONENT_X": "6",
        "BLURHASH_COMPONENT_Y": "2",
        "BLURHASH_PREVIEW_WIDTH": "48",
        "BLURHASH_PUNCH": "1.5",
        "BLURHASH_LOG_LEVEL": "debug",
    })
    assert settings.enabled is False
    assert (settings.component_x, settings.component_y) == (6, 2)
    assert settings.preview_width == 48
    assert settings.punch == 1.5
    assert settings.log_level == "DEBUG"


def test_component_counts_are_clamped():
    settings = load_settings({"BLURHASH_COMPONENT_X": "0", "BLURHASH_COMPONENT_Y": "12"})
    assert (settings.component_x, settings.component_y) == (1, 9)


def test_malformed_values_name_the_variable():
    with pytest.raises(ValueError, match="BLURHASH_COMPONENT_X"):
        load_settings({"BLURHASH_COMPONENT_X": "four"})
    with pytest.raises(ValueError, match="BLURHASH_ENABLED"):
        load_settings({"BLURHASH_ENABLED": "maybe"})


def test_invalid_preview_size():
    with pytest.raises(ValueError):
        load_settings({"BLURHASH_PREVIEW_HEIGHT": "0"})


def test_params_from_settings():
    settings = BlurHashSettings(component_x=5, component_y=5, preview_width=20,
                                preview_height=10, punch=1.2)
    assert EncodeParams.from_settings(settings) == EncodeParams(components_x=5, components_y=5)
    assert DecodeParams.from_settings(settings) == DecodeParams(width=20, height=10, punch=1.2)
