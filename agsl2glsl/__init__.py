from agsl2glsl.dialect import DEFAULT_DIALECT, DialectConfig
from agsl2glsl.transpiler import TranspileResult, remap_diagnostics, transpile
from agsl2glsl.uniforms import (
    Declaration,
    SemanticType,
    get_default_value,
    merge_uniform_values,
    parse_uniforms,
)

__version__ = "0.1.0"


__all__ = [
    "DEFAULT_DIALECT",
    "Declaration",
    "DialectConfig",
    "SemanticType",
    "TranspileResult",
    "get_default_value",
    "merge_uniform_values",
    "parse_uniforms",
    "remap_diagnostics",
    "transpile",
]
