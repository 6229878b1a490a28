"""
Constants and predefined patterns for the AGSL to GLSL transpiler.

Identifier and digit parts use explicit ASCII classes. Whitespace classes keep
their default Unicode meaning, the same as in the uniform parser.
"""

import re

# Indentation used in generated code
INDENT = "    "

PRECISION_STATEMENT = "precision mediump float;"

# Raw type tokens
TEXTURE_TYPES = ("shader", "sampler2D")
COLOR_RETURN_TYPES = ("half4", "vec4", "float4")
COORD_PARAM_TYPES = ("float2", "vec2")

# Advisory checks, applied to the untouched source
LAYOUT_COLOR_PATTERN = re.compile(r"layout\s*\(\s*color\s*\)\s*")
DEFINE_PATTERN = re.compile(r"#define\s+")
DYNAMIC_LOOP_PATTERN = re.compile(r"for\s*\(.*;\s*[a-zA-Z0-9_]+\s*[<>=]+\s*[a-zA-Z_]")

TEXTURE_DECLARATION_PATTERN = re.compile(
    rf"uniform\s+(?:{'|'.join(TEXTURE_TYPES)})\s+([a-zA-Z0-9_]+)\s*;"
)
EVAL_CALL_PATTERN = re.compile(r"([A-Za-z0-9_]+)\.eval\s*\(")

# for (float i = 0.0; i < 10.0; i++)
FLOAT_LOOP_PATTERN = re.compile(
    r"for\s*\(\s*float\s+([a-zA-Z0-9_]+)\s*=\s*([0-9]+)\.0\s*;"
    r"\s*\1\s*<\s*([0-9]+)\.0\s*;"
    r"\s*\1\s*\+\+\s*\)",
)
INT_LOOP_TEMPLATE = r"for (int \1 = \2; \1 < \3; \1++)"

# WebGL compiler messages: "ERROR: 0:57: 'foo' : undeclared identifier"
DIAGNOSTIC_LINE_PATTERN = re.compile(r"ERROR:\s+[0-9]+:([0-9]+):")
DIAGNOSTIC_LABEL = "ERROR: Line {line}:"

# Helper functions available to every shader
HELPER_FUNCTIONS = [
    "#define saturate(x) clamp(x, 0.0, 1.0)",
    "",
    "vec3 toLinearSrgb(vec3 color) { return pow(color, vec3(2.2)); }",
    "vec3 fromLinearSrgb(vec3 color) { return pow(color, vec3(1.0 / 2.2)); }",
]
