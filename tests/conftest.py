"""Fixtures and configuration for pytest."""

import textwrap

import pytest


@pytest.fixture
def color_and_speed_source() -> str:
    """AGSL source with an annotated color and a plain float uniform."""
    return textwrap.dedent("""
        layout(color) uniform half4 uColor;
        uniform float uSpeed;

        half4 main(float2 coord) {
            float2 uv = coord / iResolution.xy;
            float wave = sin(uv.x * 10.0 + iTime * uSpeed);
            half4 col = uColor + half4(wave * 0.2);
            col.a = 1.0;
            return col;
        }
    """)


@pytest.fixture
def texture_source() -> str:
    """AGSL source sampling a user texture."""
    return textwrap.dedent("""
        uniform shader uTex;

        half4 main(float2 coord) {
            half4 c = uTex.eval(coord);
            return c;
        }
    """)
