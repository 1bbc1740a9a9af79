"""Single-pass scanner that expands macro comments.

Ordinary program text is echoed as it is read. Block comments whose first
word is a registered macro name are rewritten into statements; every other
comment is echoed verbatim.

There is no grammar parse. Whether a slash divides or opens a regexp
literal is decided by the last significant character to its left, which
is a heuristic and can be wrong (``return /x/`` reads as division).

Thread Safety:
Scanner instances are single-use. Create one per input stream.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from jsdev.charsets import (
    EOF,
    IDENTIFIER_CHARS,
    MAX_NAME_LENGTH,
    PRE_REGEXP,
    QUOTES,
    is_significant,
)
from jsdev.errors import NestedComment, ScanError, UnterminatedComment
from jsdev.macros import MacroTable
from jsdev.scanner.expander import ExpanderMixin
from jsdev.scanner.scanners import (
    ConditionScannerMixin,
    LiteralScannerMixin,
    StuffScannerMixin,
)
from jsdev.stream import InputStream
from jsdev.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    # Literal scanners first: later mixins only declare them
    LiteralScannerMixin,
    ConditionScannerMixin,
    StuffScannerMixin,
    ExpanderMixin,
):
    """Macro-comment scanner over one input stream.

    Usage:
            >>> import io
            >>> from jsdev.macros import build_macro_table
            >>> out = io.StringIO()
            >>> table = build_macro_table(["log:console.log"])
            >>> Scanner(io.StringIO("/*log 'hi'*/"), out, table).run()
            >>> out.getvalue()
            "{console.log('hi');}"

    Thread Safety:
        Scanner instances are single-use. Create one per input stream.

    """

    __slots__ = ("_stream", "_macros", "_source_file")

    def __init__(
        self,
        reader: TextIO,
        writer: TextIO,
        macros: MacroTable,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            reader: Program text. Open files with newline="" to keep CRs.
            writer: Output sink
            macros: Active macro table
            source_file: Optional source file path for error messages
        """
        self._stream = InputStream(reader, writer, source_file=source_file)
        self._macros = macros
        self._source_file = source_file

    def emit_banner(self, comments: Iterable[str]) -> None:
        """Write each comment as a ``//`` line ahead of the program."""
        for comment in comments:
            self._emit(f"// {comment}\n")

    def run(self) -> None:
        """Scan the whole input, writing the transformed text.

        ``left`` is the last significant character of code written to the
        output. Comments echoed verbatim are not code and leave it alone;
        an expansion is code and ends with ``}``.

        Raises:
            ScanError: On the first malformed construct. Output written so
                far is not retracted.
            OutputError: If the output sink fails, including on the final flush
        """
        left = EOF
        while True:
            c = self._get()
            if c == EOF:
                self._stream.flush()
                return
            if c in QUOTES:
                self._emit(c)
                self._scan_string(c, False)
                left = c
            elif c == "/":
                nxt = self._peek()
                if nxt == "/":
                    self._emit(c)
                    self._scan_line_comment()
                elif nxt == "*":
                    self._get()
                    if self._scan_block_comment():
                        left = "}"
                else:
                    self._emit(c)
                    if left in PRE_REGEXP:
                        self._scan_regexp(False)
                    left = "/"
            else:
                self._emit(c)
                if is_significant(c):
                    left = c

    # =========================================================================
    # Comments
    # =========================================================================

    def _scan_line_comment(self) -> None:
        """Echo a line comment through its line terminator."""
        while True:
            c = self._get(echo=True)
            if c in ("\n", "\r", EOF):
                return

    def _scan_block_comment(self) -> bool:
        """Handle a block comment whose ``/*`` has been consumed.

        Returns:
            True if the comment was a macro and has been expanded.
        """
        start = self._lineno()
        name = self._read_name()
        index = self._macros.match(name) if name else None
        if index is not None:
            macro = self._macros[index]
            logger.debug("Expanding macro %r at line %d", macro.name, start)
            self._expand(macro)
            return True

        self._emit("/*")
        self._emit(name)
        while True:
            c = self._get(echo=True)
            if c == EOF:
                raise self._error(UnterminatedComment, "unterminated comment.")
            if c == "/" and self._peek() == "*":
                raise self._error(NestedComment, "nested comment.")
            if c == "*" and self._peek() == "/":
                self._get(echo=True)
                break
        if name:
            logger.debug("Echoed unregistered comment %r at line %d", name, start)
        return False

    def _read_name(self) -> str:
        """Read the candidate macro name directly after ``/*``."""
        chars: list[str] = []
        while len(chars) < MAX_NAME_LENGTH and self._peek() in IDENTIFIER_CHARS:
            chars.append(self._get())
        return "".join(chars)

    # =========================================================================
    # Stream access
    # =========================================================================

    def _get(self, echo: bool = False) -> str:
        return self._stream.get(echo)

    def _peek(self) -> str:
        return self._stream.peek()

    def _emit(self, text: str) -> None:
        self._stream.emit(text)

    def _lineno(self) -> int:
        return self._stream.lineno

    def _error(
        self, error_type: type[ScanError], message: str, lineno: int | None = None
    ) -> ScanError:
        """Create an error located at lineno, or at the current line."""
        if lineno is None:
            lineno = self._stream.lineno
        return error_type(message, lineno, self._source_file)
