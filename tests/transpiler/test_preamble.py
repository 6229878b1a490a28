"""Tests for preamble and driver generation."""

from agsl2glsl.dialect import DialectConfig
from agsl2glsl.transpiler.preamble import (
    build_driver,
    build_preamble,
    build_texture_accessor,
)


def test_preamble_declares_builtins(dialect):
    """Test that the preamble declares every built-in uniform once."""
    preamble = build_preamble(dialect)

    assert preamble.startswith("precision mediump float;\n")
    for declaration in (
        "uniform vec2 iResolution;",
        "uniform float iTime;",
        "uniform vec4 iMouse;",
        "uniform sampler2D uShapeMask;",
    ):
        assert preamble.count(declaration) == 1


def test_preamble_macros_and_helpers(dialect):
    """Test that type aliases, resolution aliases and helpers are present."""
    preamble = build_preamble(dialect)

    for macro in (
        "#define half float",
        "#define half4 vec4",
        "#define float2 vec2",
        "#define sk_FragCoord gl_FragCoord",
        "#define resolution iResolution",
        "#define uResolution iResolution",
        "#define saturate(x) clamp(x, 0.0, 1.0)",
    ):
        assert macro in preamble.splitlines()
    assert "vec3 toLinearSrgb(vec3 color)" in preamble
    assert "vec3 fromLinearSrgb(vec3 color)" in preamble


def test_preamble_ends_with_newline(dialect):
    """Test that user code always starts on a fresh line."""
    assert build_preamble(dialect).endswith("\n")
    assert build_preamble(dialect, ["uTex"]).endswith("\n")


def test_preamble_textures(dialect):
    """Test that each texture gets a declaration and an accessor, in order."""
    preamble = build_preamble(dialect, ["uB", "uA"])

    assert preamble.count("uniform sampler2D uB;") == 1
    assert preamble.count("uniform sampler2D uA;") == 1
    assert preamble.count("vec4 uB_eval(vec2 p)") == 1
    assert preamble.count("vec4 uA_eval(vec2 p)") == 1
    assert preamble.index("uniform sampler2D uB;") < preamble.index(
        "uniform sampler2D uA;"
    )
    assert preamble.index("uB_eval") < preamble.index("uA_eval")


def test_texture_accessor(dialect):
    """Test that the accessor samples in pixel coordinates."""
    assert build_texture_accessor("uTex", dialect) == [
        "vec4 uTex_eval(vec2 p) {",
        "    return texture2D(uTex, p / iResolution.xy);",
        "}",
    ]


def test_driver_with_automatic_mask(dialect):
    """Test that the driver clips and fades by the mask."""
    driver = build_driver(dialect, uses_manual_mask=False)

    assert driver.startswith("void main() {")
    assert "deviceCoord.y = iResolution.y - gl_FragCoord.y;" in driver
    assert "texture2D(uShapeMask, uv).r" in driver
    assert "if (maskAlpha < 0.1) {" in driver
    assert "discard;" in driver
    assert "gl_FragColor = userMain(deviceCoord);" in driver
    assert "gl_FragColor.a *= maskAlpha;" in driver


def test_driver_with_manual_mask(dialect):
    """Test that the driver leaves masking to the user shader."""
    driver = build_driver(dialect, uses_manual_mask=True)

    assert "discard" not in driver
    assert "*= maskAlpha" not in driver
    assert "gl_FragColor = userMain(deviceCoord);" in driver


def test_driver_threshold_from_dialect():
    """Test that the discard threshold is emitted as a float literal."""
    driver = build_driver(DialectConfig(mask_threshold=0), uses_manual_mask=False)
    assert "if (maskAlpha < 0.0) {" in driver
