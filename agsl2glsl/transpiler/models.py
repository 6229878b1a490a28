"""
Data models for the AGSL to GLSL transpiler.

This module contains the dataclass definitions returned by the transpiler:
advisory warnings and the transpilation result itself.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class WarningKind(Enum):
    """Kinds of advisory warnings raised while transpiling."""

    LAYOUT_COLOR = auto()
    DEFINE = auto()
    DYNAMIC_LOOP = auto()


@dataclass(frozen=True)
class TranspileWarning:
    """Non-blocking note about a construct the preview may not handle.

    Attributes:
        kind: Warning category
        message: Human readable description
    """

    kind: WarningKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TranspileResult:
    """Output of a single transpilation.

    The line offset is only valid for the generated source of the same
    result.

    Attributes:
        generated_source: GLSL ES fragment shader source
        line_offset: Number of preamble lines before the first user line
        warnings: Advisory warnings, in detection order
        image_uniforms: Texture uniforms declared by the preamble, in order
        uses_manual_mask: Whether the source handles the shape mask itself
    """

    generated_source: str
    line_offset: int
    warnings: tuple[TranspileWarning, ...] = field(default_factory=tuple)
    image_uniforms: tuple[str, ...] = field(default_factory=tuple)
    uses_manual_mask: bool = False
