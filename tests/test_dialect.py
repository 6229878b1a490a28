"""Tests for the dialect configuration."""

import dataclasses

import pytest

from agsl2glsl.dialect import DEFAULT_DIALECT, DialectConfig


def test_default_ignored_uniforms():
    """Test the names the parser ignores by default."""
    assert DEFAULT_DIALECT.ignored_uniforms == {
        "iResolution",
        "resolution",
        "uResolution",
        "iTime",
        "uShapeMask",
    }


def test_default_builtin_uniforms():
    """Test the uniforms the preamble declares by default."""
    assert DEFAULT_DIALECT.builtin_uniforms == (
        ("vec2", "iResolution"),
        ("float", "iTime"),
        ("vec4", "iMouse"),
        ("sampler2D", "uShapeMask"),
    )


def test_config_is_immutable():
    """Test that the configuration cannot be modified in place."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_DIALECT.mask_name = "uOther"  # type: ignore


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mask_name": "not an identifier"},
        {"resolution_aliases": ("ok", "1bad")},
        {"user_entry_name": "main"},
        {"mask_threshold": 1.5},
        {"mask_threshold": -0.1},
    ],
)
def test_invalid_config_rejected(kwargs):
    """Test that invalid configuration raises ValueError."""
    with pytest.raises(ValueError):
        DialectConfig(**kwargs)


def test_alias_equal_to_resolution_rejected():
    """Test that the resolution name cannot be one of its own aliases."""
    with pytest.raises(ValueError):
        DialectConfig(resolution_aliases=("resolution", "iResolution"))


@pytest.mark.parametrize("threshold", [True, "0.1", None])
def test_non_numeric_threshold_rejected(threshold):
    """Test that the mask threshold must be an int or float."""
    with pytest.raises(TypeError):
        DialectConfig(mask_threshold=threshold)


def test_int_threshold_accepted():
    """Test that an integer threshold within range is accepted."""
    assert DialectConfig(mask_threshold=1).mask_threshold == 1
