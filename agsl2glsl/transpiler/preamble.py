"""
Generated GLSL surrounding the user source.

The preamble goes before the rewritten user code and declares everything the
AGSL runtime provides implicitly. The driver goes after it and is the real
fragment shader entry point.
"""

from collections.abc import Sequence

from agsl2glsl.dialect import DialectConfig
from agsl2glsl.transpiler.constants import HELPER_FUNCTIONS, INDENT, PRECISION_STATEMENT


def _format_float(value: float) -> str:
    """Format a Python number as a GLSL float literal."""
    return repr(float(value))


def build_texture_accessor(name: str, dialect: DialectConfig) -> list[str]:
    """Generate the ``<name>_eval`` function sampling a texture in pixels."""
    return [
        f"vec4 {name}_eval(vec2 p) {{",
        f"{INDENT}return texture2D({name}, p / {dialect.resolution_name}.xy);",
        "}",
    ]


def build_preamble(dialect: DialectConfig, image_uniforms: Sequence[str] = ()) -> str:
    """Generate the code placed before the user source.

    Args:
        dialect: Dialect configuration
        image_uniforms: Texture uniform names extracted from the user source

    Returns:
        Preamble text, always ending with a newline
    """
    lines = [PRECISION_STATEMENT]
    for type_name, name in dialect.builtin_uniforms:
        lines.append(f"uniform {type_name} {name};")

    lines.append("")
    for agsl_name, glsl_name in dialect.type_aliases:
        lines.append(f"#define {agsl_name} {glsl_name}")
    for agsl_name, glsl_name in dialect.builtin_aliases:
        lines.append(f"#define {agsl_name} {glsl_name}")

    # Common spellings of the resolution uniform
    lines.append("")
    for alias in dialect.resolution_aliases:
        lines.append(f"#define {alias} {dialect.resolution_name}")

    lines.append("")
    lines.extend(HELPER_FUNCTIONS)

    if image_uniforms:
        lines.append("")
        for name in image_uniforms:
            lines.append(f"uniform sampler2D {name};")
        for name in image_uniforms:
            lines.append("")
            lines.extend(build_texture_accessor(name, dialect))

    lines.append("")
    return "\n".join(lines) + "\n"


def build_driver(dialect: DialectConfig, uses_manual_mask: bool) -> str:
    """Generate the parameterless ``main`` calling the user's entry function.

    AGSL coordinates start at the top left, GL fragment coordinates at the
    bottom left, so the vertical axis is flipped before the call. Unless the
    shader samples the mask itself, fragments outside the mask are discarded
    and the output alpha is scaled by the mask.

    Args:
        dialect: Dialect configuration
        uses_manual_mask: Whether the user source references the mask

    Returns:
        Driver source text
    """
    resolution = dialect.resolution_name
    lines = [
        "void main() {",
        f"{INDENT}vec2 deviceCoord = gl_FragCoord.xy;",
        f"{INDENT}deviceCoord.y = {resolution}.y - gl_FragCoord.y;",
        f"{INDENT}vec2 uv = deviceCoord / {resolution}.xy;",
        f"{INDENT}float maskAlpha = texture2D({dialect.mask_name}, uv).r;",
    ]

    if not uses_manual_mask:
        lines.append(
            f"{INDENT}if (maskAlpha < {_format_float(dialect.mask_threshold)}) {{"
        )
        lines.append(f"{INDENT * 2}discard;")
        lines.append(f"{INDENT}}}")

    lines.append(f"{INDENT}gl_FragColor = {dialect.user_entry_name}(deviceCoord);")

    if not uses_manual_mask:
        lines.append(f"{INDENT}gl_FragColor.a *= maskAlpha;")

    lines.append("}")
    return "\n".join(lines) + "\n"
