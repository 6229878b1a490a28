"""Command line interface for agsl2glsl.

This module provides a command-line interface for inspecting the uniforms of
an AGSL shader, exporting its GLSL ES translation and mapping GPU compiler
messages back to the AGSL source.
"""

import json
import os
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import arrow
import typer
import watchdog.events
import watchdog.observers
from loguru import logger
from watchdog.events import FileSystemEventHandler

from agsl2glsl.transpiler import TranspileResult, remap_diagnostics, transpile
from agsl2glsl.uniforms import Declaration, get_default_value, parse_uniforms

# Define type variables for TypedCallable
F = TypeVar("F", bound=Callable[..., Any])


# TypedCommand decorator helper
def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="agsl2glsl",
    help=(
        "Preview AGSL runtime shaders as WebGL GLSL. "
        "Commands: uniforms, export-code, remap, watch."
    ),
    add_completion=False,
)


def _read_shader_source(shader_file: str) -> str:
    """Read a shader file.

    Args:
        shader_file: Path to the AGSL source

    Returns:
        File contents

    Raises:
        typer.Exit: If the file cannot be read
    """
    try:
        return Path(shader_file).read_text()
    except OSError as e:
        logger.error(f"Failed to read shader file: {e}")
        raise typer.Exit(1) from e


def _log_warnings(result: TranspileResult) -> None:
    for warning in result.warnings:
        logger.warning(f"AGSL: {warning}")


def _format_declarations(declarations: list[Declaration]) -> str:
    """Format declarations as an aligned text table."""
    if not declarations:
        return "No uniforms detected"

    width = max(len(decl.name) for decl in declarations)
    lines = []
    for decl in declarations:
        default = get_default_value(decl.semantic_type)
        lines.append(
            f"{decl.name.ljust(width)}  {decl.semantic_type.value:<5}  {default}"
        )
    return "\n".join(lines)


def _declarations_to_json(declarations: list[Declaration]) -> str:
    return json.dumps(
        [
            {
                "name": decl.name,
                "type": decl.semantic_type.value,
                "default": get_default_value(decl.semantic_type),
            }
            for decl in declarations
        ],
        indent=2,
    )


# Comment lines plus the blank separator written by _add_header_comments
COMMENTED_HEADER_LINES = 5


def _add_header_comments(code: str, source_file: str, line_offset: int) -> str:
    """Add header comments to the code.

    Args:
        code: Generated source
        source_file: Source AGSL file
        line_offset: Line offset of the transpilation

    Returns:
        Code with header comments
    """
    timestamp = arrow.utcnow().format("YYYY-MM-DD HH:mm:ss UTC")
    header_lines = [
        f"// Generated by agsl2glsl v{__import__('agsl2glsl').__version__}",
        f"// Generation time: {timestamp}",
        f"// Source file: {os.path.basename(source_file)}",
    ]
    # The header itself shifts the user source down
    first_user_line = COMMENTED_HEADER_LINES + line_offset + 1
    header_lines.append(f"// User source starts at line {first_user_line}")
    return "\n".join(header_lines) + "\n\n" + code


def _format_shader_code(
    result: TranspileResult, format_type: str, source_file: str
) -> str:
    """Format generated code for export.

    Args:
        result: Transpilation result
        format_type: Format type (plain, commented)
        source_file: Source AGSL file

    Returns:
        Formatted shader code
    """
    if format_type == "commented":
        return _add_header_comments(
            result.generated_source, source_file, result.line_offset
        )
    if format_type != "plain":
        logger.warning(f"Unknown format: {format_type}. Using plain.")
    return result.generated_source


@typed_command(app.command("uniforms"))
def show_uniforms(
    shader_file: str = typer.Argument(..., help="AGSL shader file"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
) -> None:
    """List the uniforms detected in a shader.

    Prints each user uniform with its semantic type and default control value.

    Example: agsl2glsl uniforms examples/waves.agsl
    """
    source = _read_shader_source(shader_file)
    declarations = parse_uniforms(source)

    if as_json:
        typer.echo(_declarations_to_json(declarations))
    else:
        typer.echo(_format_declarations(declarations))


@typed_command(app.command("export-code"))
def export_shader_code(
    shader_file: str = typer.Argument(..., help="AGSL shader file"),
    output: Path | None = typer.Argument(
        None, help="Output code file path (stdout if omitted)"
    ),
    format: str = typer.Option(
        "plain", "--format", "-f", help="Code format (plain, commented)"
    ),
) -> None:
    """Export shader as GLSL ES code.

    Transpiles the AGSL shader and writes the WebGL fragment shader.

    Example: agsl2glsl export-code examples/waves.agsl waves.frag
    """
    source = _read_shader_source(shader_file)
    result = transpile(source)
    _log_warnings(result)

    formatted_code = _format_shader_code(result, format, shader_file)

    if output is None:
        typer.echo(formatted_code, nl=False)
        return

    logger.info(f"Exporting shader code to {output}...")
    try:
        output.write_text(formatted_code)
    except OSError as e:
        logger.error(f"Failed to write shader code: {e}")
        raise typer.Exit(1) from e

    logger.info(f"Shader code exported to {output}")
    logger.info(f"User source starts after {result.line_offset} preamble lines")


@typed_command(app.command("remap"))
def remap_compiler_log(
    shader_file: str = typer.Argument(..., help="AGSL shader file"),
    log_file: str = typer.Argument(
        "-", help="Compiler log file ('-' reads from stdin)"
    ),
    format: str = typer.Option(
        "plain",
        "--format",
        "-f",
        help="Format the log's program was exported with (plain, commented)",
    ),
) -> None:
    """Map GPU compiler messages back to AGSL source lines.

    The shader is transpiled again to obtain the line offset that belongs to
    the generated source the log was produced from. Logs of a program exported
    with --format commented are also shifted by its header lines.

    Example: agsl2glsl remap examples/waves.agsl compile.log
    """
    source = _read_shader_source(shader_file)
    result = transpile(source)

    if log_file == "-":
        message = typer.get_text_stream("stdin").read()
    else:
        try:
            message = Path(log_file).read_text()
        except OSError as e:
            logger.error(f"Failed to read compiler log: {e}")
            raise typer.Exit(1) from e

    line_offset = result.line_offset
    if format == "commented":
        line_offset += COMMENTED_HEADER_LINES
    elif format != "plain":
        logger.warning(f"Unknown format: {format}. Using plain.")

    typer.echo(remap_diagnostics(message, line_offset), nl=False)


class ShaderChangeHandler(FileSystemEventHandler):  # type: ignore
    """Event handler for shader file changes."""

    def __init__(self, shader_file: str, output: Path | None = None):
        """Initialize shader change handler.

        Args:
            shader_file: Path to shader file
            output: Optional file receiving the generated code
        """
        self.shader_file = shader_file
        self.output = output
        self.needs_reload = False

    def on_modified(self, event: watchdog.events.FileSystemEvent) -> None:
        """Handle file modified event.

        Args:
            event: File system event
        """
        if os.path.abspath(event.src_path) == os.path.abspath(self.shader_file):
            logger.info(f"Detected changes in {self.shader_file}")
            self.needs_reload = True

    def process_shader(self) -> TranspileResult | None:
        """Re-parse and re-transpile the shader.

        Returns:
            Transpilation result, or None if the file could not be processed
        """
        try:
            source = Path(self.shader_file).read_text()
        except OSError as e:
            logger.error(f"Error reading shader: {e}")
            return None

        declarations = parse_uniforms(source)
        names = [f"{d.name}: {d.semantic_type.value}" for d in declarations]
        logger.info(f"Uniforms: {names}")

        result = transpile(source)
        _log_warnings(result)

        if self.output is not None:
            try:
                self.output.write_text(result.generated_source)
            except OSError as e:
                logger.error(f"Error writing shader code: {e}")
                return None
            logger.info(f"Shader code written to {self.output}")

        return result


@typed_command(app.command("watch"))
def watch_shader(
    shader_file: str = typer.Argument(..., help="AGSL shader file"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="File receiving the generated code"
    ),
) -> None:
    """Watch shader file and re-transpile on changes.

    Uniforms and warnings are logged after every change.

    Example: agsl2glsl watch examples/waves.agsl -o waves.frag
    """
    abs_shader_file = os.path.abspath(shader_file)

    # Watch the file's directory, not the file itself
    directory = os.path.dirname(abs_shader_file)
    if not os.path.isdir(directory):
        logger.error(f"Shader directory does not exist: {directory}")
        raise typer.Exit(1)

    observer = watchdog.observers.Observer()
    handler = ShaderChangeHandler(abs_shader_file, output)
    observer.schedule(handler, path=directory, recursive=False)
    observer.start()

    try:
        handler.process_shader()
        logger.info("Watching for changes (press Ctrl-C to exit)...")
        while True:
            if handler.needs_reload:
                handler.needs_reload = False
                handler.process_shader()
            time.sleep(0.1)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received, stopping...")
    finally:
        observer.stop()
        observer.join()


if __name__ == "__main__":
    app()
