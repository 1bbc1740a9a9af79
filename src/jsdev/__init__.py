"""
JSDev — macro comments for JavaScript

A single-pass preprocessor that activates specially formed comments.
Comments such as ``/*log 'loaded'*/`` are inert until JSDev rewrites them
into executable statements for debugging, testing, logging or tracing.
Every other character passes through unchanged.

Quick Start:
    >>> from jsdev import transform
    >>> transform("/*log 'hi'*/", ["debug", "log:console.log"])
    "{console.log('hi');}"
    >>> transform("/*alarm(x>0) 'danger'*/", ["alarm:alert"])
    "if (x>0) {alert('danger');}"

Macro comment grammar:
    /*<name> <stuff>*/                 ->  {<stuff>;}
    /*<name>(<condition>) <stuff>*/    ->  if (<condition>) {<stuff>;}

A name registered with a target (``log:console.log``) wraps the stuff in a
call instead: ``{console.log(<stuff>);}``.

Command line:
    jsdev debug log:console.log alarm:alert -comment "Devel Edition" < in.js
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import TextIO

from jsdev.config import (
    TransformConfig,
    get_transform_config,
    reset_transform_config,
    set_transform_config,
    transform_config_context,
)
from jsdev.errors import (
    AmbiguousCommentBoundary,
    ConfigError,
    JSDevError,
    NestedComment,
    OutputError,
    ScanError,
    UnclosedLiteralInComment,
    UnterminatedComment,
    UnterminatedCondition,
    UnterminatedLiteral,
    UnterminatedStuff,
)
from jsdev.macros import (
    Macro,
    MacroTable,
    MacroTableBuilder,
    build_macro_table,
    parse_macro_spec,
)
from jsdev.scanner import Scanner
from jsdev.stream import InputStream

__version__ = "0.2.0"


def _resolve_macros(macros: MacroTable | Iterable[str] | None) -> MacroTable:
    if macros is None:
        return get_transform_config().macros
    if isinstance(macros, MacroTable):
        return macros
    if isinstance(macros, str):
        return build_macro_table([macros])
    return build_macro_table(macros)


def transform_stream(
    reader: TextIO,
    writer: TextIO,
    macros: MacroTable | Iterable[str] | None = None,
    *,
    comments: Iterable[str] | None = None,
    source_file: str | None = None,
) -> None:
    """Transform program text from reader to writer as it is read.

    Args:
        reader: Program text. Open files with newline="" to keep CRs.
        writer: Output sink
        macros: MacroTable, ``name[:target]`` words, or None for the active config
        comments: Banner lines; None uses the active config
        source_file: Source path for error messages; None uses the active config

    Raises:
        ConfigError: If a macro word is malformed
        ScanError: On malformed input. Output already written stays written.
        OutputError: If writing or the final flush of writer fails
    """
    config = get_transform_config()
    table = _resolve_macros(macros)
    if comments is None:
        comments = config.comments
    if source_file is None:
        source_file = config.source_file

    scanner = Scanner(reader, writer, table, source_file=source_file)
    scanner.emit_banner(comments)
    scanner.run()


def transform(
    source: str,
    macros: MacroTable | Iterable[str] | None = None,
    *,
    comments: Iterable[str] | None = None,
    source_file: str | None = None,
) -> str:
    """Transform program text, expanding registered macro comments.

    Args:
        source: Program text
        macros: MacroTable, ``name[:target]`` words, or None for the active config
        comments: Banner lines; None uses the active config
        source_file: Source path for error messages; None uses the active config

    Returns:
        Transformed text. Nothing is returned when scanning fails.

    Raises:
        ConfigError: If a macro word is malformed
        ScanError: On malformed input

    Example:
        >>> transform("/*debug x=1*/ a/b", ["debug"])
        '{x=1;} a/b'
    """
    out = io.StringIO(newline="")
    transform_stream(
        io.StringIO(source, newline=""),
        out,
        macros,
        comments=comments,
        source_file=source_file,
    )
    return out.getvalue()


__all__ = [
    # Main API
    "transform",
    "transform_stream",
    # Macros
    "Macro",
    "MacroTable",
    "MacroTableBuilder",
    "build_macro_table",
    "parse_macro_spec",
    # Scanning
    "InputStream",
    "Scanner",
    # Configuration
    "TransformConfig",
    "get_transform_config",
    "set_transform_config",
    "reset_transform_config",
    "transform_config_context",
    # Errors
    "JSDevError",
    "ConfigError",
    "ScanError",
    "UnterminatedLiteral",
    "UnterminatedCondition",
    "UnterminatedStuff",
    "UnterminatedComment",
    "NestedComment",
    "AmbiguousCommentBoundary",
    "UnclosedLiteralInComment",
    "OutputError",
    # Version
    "__version__",
]
