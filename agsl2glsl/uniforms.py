"""Uniform declaration parser for AGSL sources.

Scans shader text line by line and recovers the user-declared uniforms with
a semantic type that a host UI can turn into controls:

    from agsl2glsl.uniforms import get_default_value, parse_uniforms

    for decl in parse_uniforms(source):
        print(decl.name, decl.semantic_type, get_default_value(decl.semantic_type))

The parser never fails. Lines it does not understand are skipped.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger

from agsl2glsl.dialect import DEFAULT_DIALECT, DialectConfig


class SemanticType(str, Enum):
    """Classified uniform type used to pick a UI control."""

    FLOAT = "float"
    INT = "int"
    VEC2 = "vec2"
    VEC3 = "vec3"
    COLOR = "color"
    BOOL = "bool"
    IMAGE = "image"


# Raw AGSL type tokens recognised in a declaration
IMAGE_RAW_TYPES = frozenset({"shader", "sampler2D"})
RAW_TYPE_MAPPING: dict[str, SemanticType] = {
    "float": SemanticType.FLOAT,
    "half": SemanticType.FLOAT,
    "int": SemanticType.INT,
    "bool": SemanticType.BOOL,
    "vec2": SemanticType.VEC2,
    "half2": SemanticType.VEC2,
    "vec3": SemanticType.VEC3,
    "half3": SemanticType.VEC3,
    # A bare 4-vector is treated as a color
    "vec4": SemanticType.COLOR,
    "half4": SemanticType.COLOR,
}

COMMENT_PREFIX = "//"
COLOR_ANNOTATION_PATTERN = re.compile(r"layout\s*\(\s*color\s*\)")
DECLARATION_PATTERN = re.compile(
    r"uniform\s+"
    r"(float|half|int|bool|vec2|half2|vec3|half3|vec4|half4|shader|sampler2D)"
    r"\s+([a-zA-Z0-9_]+)\s*;"
)


@dataclass(frozen=True)
class Declaration:
    """A single user-authored uniform.

    Attributes:
        name: Uniform identifier
        raw_type: Type token as written in the source
        has_color_annotation: Whether the line carried ``layout(color)``
    """

    name: str
    raw_type: str
    has_color_annotation: bool = False

    @property
    def semantic_type(self) -> SemanticType:
        return classify(self.raw_type, self.has_color_annotation)


def classify(raw_type: str, has_color_annotation: bool = False) -> SemanticType:
    """Classify a raw declaration type.

    Texture types always win, then the color annotation (even on scalars),
    then the literal mapping of the raw type.
    """
    if raw_type in IMAGE_RAW_TYPES:
        return SemanticType.IMAGE
    if has_color_annotation:
        return SemanticType.COLOR
    return RAW_TYPE_MAPPING.get(raw_type, SemanticType.FLOAT)


def parse_uniforms(
    source: str, dialect: DialectConfig = DEFAULT_DIALECT
) -> list[Declaration]:
    """Extract user uniform declarations from AGSL source.

    Args:
        source: Full shader source
        dialect: Dialect configuration providing the reserved names

    Returns:
        Declarations in first-appearance order, without duplicates or
        reserved built-ins
    """
    ignored = dialect.ignored_uniforms
    seen: set[str] = set()
    declarations: list[Declaration] = []

    for line in source.split("\n"):
        trimmed = line.strip()
        # Only single-line comments are recognised
        if trimmed.startswith(COMMENT_PREFIX):
            continue

        has_annotation = COLOR_ANNOTATION_PATTERN.search(trimmed) is not None
        match = DECLARATION_PATTERN.search(trimmed)
        if not match:
            continue

        raw_type, name = match.groups()
        if name in ignored or name in seen:
            logger.debug(f"Skipping uniform declaration: {name}")
            continue

        seen.add(name)
        declarations.append(Declaration(name, raw_type, has_annotation))

    return declarations


def get_default_value(semantic_type: SemanticType | str) -> Any:
    """Initial control value for a semantic type.

    Images have no renderable default and return None.
    """
    semantic_type = SemanticType(semantic_type)
    if semantic_type == SemanticType.FLOAT:
        return 0.5
    elif semantic_type == SemanticType.INT:
        return 1
    elif semantic_type == SemanticType.VEC2:
        return [0.5, 0.5]
    elif semantic_type == SemanticType.VEC3:
        return [1.0, 1.0, 1.0]
    elif semantic_type == SemanticType.COLOR:
        return [1.0, 0.0, 0.0, 1.0]
    elif semantic_type == SemanticType.BOOL:
        return False
    return None


def merge_uniform_values(
    previous: Mapping[str, Any], declarations: Iterable[Declaration]
) -> dict[str, Any]:
    """Carry control values over a re-parse of an edited source.

    Values of names that are still declared are kept, new names get their
    default. Values of names that disappeared are kept as well, so they come
    back unchanged if the declaration is restored.

    Args:
        previous: Values from the last parse
        declarations: Result of the new parse

    Returns:
        New mapping of uniform name to value
    """
    values = dict(previous)
    for decl in declarations:
        if decl.name not in values:
            values[decl.name] = get_default_value(decl.semantic_type)
    return values
