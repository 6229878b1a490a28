"""
AGSL to GLSL ES transpilation.

This module provides the top-level interface for turning an AGSL runtime
shader into a WebGL fragment shader:

    from agsl2glsl.transpiler import remap_diagnostics, transpile

    result = transpile(source)
    # compile result.generated_source; on failure:
    print(remap_diagnostics(info_log, result.line_offset))
"""

from loguru import logger

from agsl2glsl.dialect import DEFAULT_DIALECT, DialectConfig
from agsl2glsl.transpiler.diagnostics import (
    find_diagnostic_lines,
    remap_diagnostics,
    remap_line,
)
from agsl2glsl.transpiler.models import TranspileResult, TranspileWarning, WarningKind
from agsl2glsl.transpiler.passes import (
    collect_warnings,
    extract_texture_uniforms,
    rewrite_entry_point,
    rewrite_eval_calls,
    rewrite_float_loops,
    strip_color_annotations,
    suppress_builtin_redeclarations,
)
from agsl2glsl.transpiler.preamble import build_driver, build_preamble


def transpile(source: str, dialect: DialectConfig = DEFAULT_DIALECT) -> TranspileResult:
    """Transpile AGSL source to a GLSL ES fragment shader.

    The transpiler never fails on user text. Anything it cannot handle is left
    for the GPU compiler to reject.

    Args:
        source: AGSL shader source
        dialect: Dialect configuration

    Returns:
        Generated source together with its line offset and advisory warnings
    """
    warnings = collect_warnings(source)

    glsl = suppress_builtin_redeclarations(source, dialect)
    glsl, image_uniforms = extract_texture_uniforms(glsl, dialect)
    glsl = rewrite_eval_calls(glsl)
    glsl = strip_color_annotations(glsl)
    glsl = rewrite_float_loops(glsl)
    glsl = rewrite_entry_point(glsl, dialect)

    # Raw substring test: a mention in a comment also counts
    uses_manual_mask = dialect.mask_name in source

    preamble = build_preamble(dialect, image_uniforms)
    driver = build_driver(dialect, uses_manual_mask)
    line_offset = preamble.count("\n")

    logger.debug(
        f"Transpiled shader: {line_offset} preamble lines, "
        f"{len(image_uniforms)} textures, {len(warnings)} warnings"
    )

    return TranspileResult(
        generated_source=f"{preamble}{glsl}\n{driver}",
        line_offset=line_offset,
        warnings=tuple(warnings),
        image_uniforms=tuple(image_uniforms),
        uses_manual_mask=uses_manual_mask,
    )


__all__ = [
    "TranspileResult",
    "TranspileWarning",
    "WarningKind",
    "find_diagnostic_lines",
    "remap_diagnostics",
    "remap_line",
    "transpile",
]
