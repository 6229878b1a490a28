"""
Pytest configuration and shared fixtures for transpiler tests.

This module contains fixtures that are shared across multiple test modules.
"""

import textwrap

import pytest

from agsl2glsl.dialect import DEFAULT_DIALECT, DialectConfig


@pytest.fixture
def dialect() -> DialectConfig:
    """Fixture providing the default dialect configuration."""
    return DEFAULT_DIALECT


@pytest.fixture
def loop_source() -> str:
    """Fixture providing a shader with a literal and a dynamic loop."""
    return textwrap.dedent("""
        uniform int uCount;

        half4 main(float2 coord) {
            float acc = 0.0;
            for (float i = 0.0; i < 8.0; i++) {
                acc += 0.1;
            }
            for (int j = 0; j < uCount; j++) {
                acc += 0.1;
            }
            return half4(acc);
        }
    """)


@pytest.fixture
def redeclared_builtins_source() -> str:
    """Fixture providing a shader that redeclares every built-in."""
    return textwrap.dedent("""
        uniform float2 resolution;
        uniform vec2   uResolution ;
        uniform vec2 iResolution;
        uniform float iTime;
        uniform float4 iMouse;
        uniform sampler2D uShapeMask;

        half4 main(float2 coord) {
            return half4(coord / resolution, 0.0, 1.0);
        }
    """)
