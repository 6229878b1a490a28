"""Dialect configuration shared by the uniform parser and the transpiler.

The names the preview runtime injects on its own (resolution, time, mouse and
the shape mask) and the spelling bridges between AGSL and GLSL ES live here as
one immutable value, so both components can be configured and tested without
hidden module state:

    from agsl2glsl.dialect import DEFAULT_DIALECT, DialectConfig

    dialect = DialectConfig(mask_threshold=0.25)
"""

import re
from dataclasses import dataclass

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True)
class DialectConfig:
    """Reserved names and spelling aliases of the AGSL preview dialect.

    Attributes:
        resolution_name: Built-in resolution uniform (vec2, pixels)
        resolution_aliases: Alternative spellings mapped onto the resolution
        time_name: Built-in elapsed time uniform (seconds)
        mouse_name: Built-in mouse state uniform
        mask_name: Built-in shape mask sampler
        entry_point_name: Name of the user's AGSL entry function
        user_entry_name: Name the user's entry function is renamed to
        mask_threshold: Mask opacity below which fragments are discarded
        type_aliases: AGSL type spellings and their GLSL ES equivalents
        builtin_aliases: AGSL built-in variables and their GLSL ES equivalents
    """

    resolution_name: str = "iResolution"
    resolution_aliases: tuple[str, ...] = ("resolution", "uResolution")
    time_name: str = "iTime"
    mouse_name: str = "iMouse"
    mask_name: str = "uShapeMask"
    entry_point_name: str = "main"
    user_entry_name: str = "userMain"
    mask_threshold: float = 0.1
    type_aliases: tuple[tuple[str, str], ...] = (
        ("half", "float"),
        ("half2", "vec2"),
        ("half3", "vec3"),
        ("half4", "vec4"),
        ("float2", "vec2"),
        ("float3", "vec3"),
        ("float4", "vec4"),
    )
    builtin_aliases: tuple[tuple[str, str], ...] = (("sk_FragCoord", "gl_FragCoord"),)

    def __post_init__(self) -> None:
        names = [
            self.resolution_name,
            *self.resolution_aliases,
            self.time_name,
            self.mouse_name,
            self.mask_name,
            self.entry_point_name,
            self.user_entry_name,
        ]
        for name in names:
            if not IDENTIFIER_PATTERN.fullmatch(name):
                raise ValueError(f"Invalid identifier in dialect config: {name!r}")

        if self.user_entry_name == self.entry_point_name:
            raise ValueError("user_entry_name must differ from entry_point_name")

        if self.resolution_name in self.resolution_aliases:
            raise ValueError(
                f"resolution_aliases must not contain {self.resolution_name!r}"
            )

        # bool is an int subclass
        if isinstance(self.mask_threshold, bool) or not isinstance(
            self.mask_threshold, (int, float)
        ):
            raise TypeError(
                f"mask_threshold must be a number, got {self.mask_threshold!r}"
            )
        if not 0.0 <= self.mask_threshold <= 1.0:
            raise ValueError(
                f"mask_threshold must be within [0, 1], got {self.mask_threshold}"
            )

    @property
    def ignored_uniforms(self) -> frozenset[str]:
        """Names the uniform parser never reports as user declarations."""
        return frozenset(
            {
                self.resolution_name,
                *self.resolution_aliases,
                self.time_name,
                self.mask_name,
            }
        )

    @property
    def builtin_uniforms(self) -> tuple[tuple[str, str], ...]:
        """(GLSL type, name) of every uniform the preamble declares itself."""
        return (
            ("vec2", self.resolution_name),
            ("float", self.time_name),
            ("vec4", self.mouse_name),
            ("sampler2D", self.mask_name),
        )


DEFAULT_DIALECT = DialectConfig()
