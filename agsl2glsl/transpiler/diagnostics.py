"""
Mapping of GPU compiler diagnostics back to the user's source lines.

Compiler messages refer to lines of the generated source. Subtracting the
preamble length of the same transpilation gives the user's line. Lines inside
the preamble or the driver come out as zero, negative, or past the end of the
user source, and are left as they are.
"""

import re

from agsl2glsl.transpiler.constants import DIAGNOSTIC_LABEL, DIAGNOSTIC_LINE_PATTERN


def remap_line(line: int, line_offset: int) -> int:
    """Convert a generated-source line number to a user-source line number."""
    return line - line_offset


def find_diagnostic_lines(message: str) -> list[int]:
    """Return the generated-source line numbers mentioned in a message."""
    return [int(line) for line in DIAGNOSTIC_LINE_PATTERN.findall(message)]


def remap_diagnostics(message: str, line_offset: int) -> str:
    """Rewrite every line reference in a compiler message to user coordinates.

    ``ERROR: 0:57:`` becomes ``ERROR: Line 7:`` for an offset of 50. Text that
    does not match the pattern passes through unchanged.

    Args:
        message: Compiler info log
        line_offset: Offset from the transpilation that produced the source

    Returns:
        Message with remapped line references
    """

    def replace(match: re.Match[str]) -> str:
        line = remap_line(int(match.group(1)), line_offset)
        return DIAGNOSTIC_LABEL.format(line=line)

    return DIAGNOSTIC_LINE_PATTERN.sub(replace, message)
