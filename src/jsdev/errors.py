"""Exception classes for JSDev.

Every failure is fatal: the scanner performs no partial expansion and no
resynchronization, so each error aborts the whole run.
"""

from __future__ import annotations


class JSDevError(Exception):
    """Base exception for all JSDev errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(JSDevError):
    """Malformed macro registration.

    Raised while building the macro table, before any source is read,
    so there is no line to report.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"bad command line {message}")


class ScanError(JSDevError):
    """Error while scanning program text.

    Raised when the scanner meets input it cannot classify or that
    never closes.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}. "
        elif location:
            location += " "

        super().__init__(f"{location}{message}")


class UnterminatedLiteral(ScanError):
    """A string or regexp literal was never closed.

    The line number points at the opening delimiter.
    """


class UnterminatedCondition(ScanError):
    """A macro condition never returned to depth zero."""


class UnterminatedStuff(ScanError):
    """A macro body reached end of input before its closing ``*/``."""


class UnterminatedComment(ScanError):
    """A plain block comment reached end of input before ``*/``."""


class NestedComment(ScanError):
    """A ``/*`` was found inside a plain block comment."""


class AmbiguousCommentBoundary(ScanError):
    """Text inside a macro comment looks like a comment boundary."""


class UnclosedLiteralInComment(AmbiguousCommentBoundary, UnterminatedLiteral):
    """A literal inside a macro comment runs into the comment terminator.

    The literal is unterminated as far as the comment is concerned, and the
    ``*/`` it contains is ambiguous, so this is both.
    """


class OutputError(ScanError):
    """Writing to the output sink failed."""
