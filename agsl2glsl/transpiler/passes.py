"""
Text rewrite passes of the AGSL to GLSL transpiler.

Each pass takes the output of the previous one. The order matters: built-in
redeclarations must be gone before textures are extracted, and texture
declarations must be gone before the color annotation is stripped.
"""

import re

from loguru import logger

from agsl2glsl.dialect import DialectConfig
from agsl2glsl.transpiler.constants import (
    COLOR_RETURN_TYPES,
    COORD_PARAM_TYPES,
    DEFINE_PATTERN,
    DYNAMIC_LOOP_PATTERN,
    EVAL_CALL_PATTERN,
    FLOAT_LOOP_PATTERN,
    INT_LOOP_TEMPLATE,
    LAYOUT_COLOR_PATTERN,
    TEXTURE_DECLARATION_PATTERN,
)
from agsl2glsl.transpiler.models import TranspileWarning, WarningKind


def collect_warnings(source: str) -> list[TranspileWarning]:
    """Detect constructs the preview handles only partially.

    Args:
        source: Original AGSL source

    Returns:
        Advisory warnings, possibly empty
    """
    warnings = []
    if LAYOUT_COLOR_PATTERN.search(source):
        warnings.append(
            TranspileWarning(WarningKind.LAYOUT_COLOR, "Stripped 'layout(color)'.")
        )
    if DEFINE_PATTERN.search(source):
        warnings.append(
            TranspileWarning(WarningKind.DEFINE, "'#define' is not supported in AGSL.")
        )
    if DYNAMIC_LOOP_PATTERN.search(source):
        warnings.append(
            TranspileWarning(
                WarningKind.DYNAMIC_LOOP, "Dynamic loops may fail in WebGL."
            )
        )
    return warnings


def _builtin_declaration_patterns(
    dialect: DialectConfig,
) -> list[tuple[re.Pattern[str], str]]:
    resolution_types = ("vec2", "float2")
    declarations = [
        (resolution_types, dialect.resolution_aliases),
        (resolution_types, (dialect.resolution_name,)),
        (("float",), (dialect.time_name,)),
        (("vec2", "float2", "vec4", "float4"), (dialect.mouse_name,)),
        (("sampler2D",), (dialect.mask_name,)),
    ]

    patterns = []
    for types, names in declarations:
        pattern = re.compile(
            rf"uniform\s+(?:{'|'.join(types)})\s+({'|'.join(map(re.escape, names))})\s*;",
        )
        patterns.append((pattern, r"// \1 removed"))
    return patterns


def suppress_builtin_redeclarations(source: str, dialect: DialectConfig) -> str:
    """Comment out user declarations of uniforms the preamble declares itself."""
    for pattern, replacement in _builtin_declaration_patterns(dialect):
        source = pattern.sub(replacement, source)
    return source


def extract_texture_uniforms(
    source: str, dialect: DialectConfig
) -> tuple[str, list[str]]:
    """Move texture uniform declarations out of the user source.

    GLSL ES declares textures as sampler2D, so every ``shader``/``sampler2D``
    declaration is commented out and re-declared by the preamble. The shape
    mask is always declared by the preamble and is not recorded.

    Args:
        source: Source after built-in suppression
        dialect: Dialect configuration

    Returns:
        Tuple of (rewritten source, texture names in declaration order)
    """
    names: list[str] = []

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == dialect.mask_name:
            return "// built-in mask"
        if name not in names:
            names.append(name)
        return f"// moved {name}"

    source = TEXTURE_DECLARATION_PATTERN.sub(replace, source)
    if names:
        logger.debug(f"Extracted texture uniforms: {names}")
    return source, names


def rewrite_eval_calls(source: str) -> str:
    """Turn ``tex.eval(p)`` into ``tex_eval(p)`` for any identifier."""
    return EVAL_CALL_PATTERN.sub(r"\1_eval(", source)


def strip_color_annotations(source: str) -> str:
    return LAYOUT_COLOR_PATTERN.sub("", source)


def rewrite_float_loops(source: str) -> str:
    """Give literal ascending float loops an int counter.

    Only ``for (float i = A.0; i < B.0; i++)`` is rewritten.
    """
    return FLOAT_LOOP_PATTERN.sub(INT_LOOP_TEMPLATE, source)


def rewrite_entry_point(source: str, dialect: DialectConfig) -> str:
    """Rename the AGSL entry function so the driver can call it.

    ``half4 main(float2 p)`` becomes ``vec4 userMain(vec2 p)``. Only the first
    matching signature is rewritten.
    """
    pattern = re.compile(
        rf"(?:{'|'.join(COLOR_RETURN_TYPES)})\s+{re.escape(dialect.entry_point_name)}"
        rf"\s*\(\s*(?:in\s+)?(?:{'|'.join(COORD_PARAM_TYPES)})\s+([a-zA-Z0-9_]+)\s*\)",
    )
    return pattern.sub(rf"vec4 {dialect.user_entry_name}(vec2 \1)", source, count=1)
