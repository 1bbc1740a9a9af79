"""Character stream with one-character pushback and line tracking.

The scanner never needs more than one character of lookahead, so the
stream keeps a single pushback slot on top of a chunked reader. Every
consumed character can be echoed straight to the output sink, which keeps
the transform streaming rather than whole-file buffered.

Thread Safety:
InputStream instances are single-use. Create one per run.

"""

from __future__ import annotations

from typing import TextIO

from jsdev.charsets import EOF
from jsdev.errors import OutputError


class InputStream:
    """Buffered reader with a one-slot pushback and an attached output sink.

    Line numbers start at 1. A CR counts a line; an LF counts a line only
    when it does not immediately follow a CR, so CR, LF and CRLF each count
    once.

    Usage:
            >>> import io
            >>> out = io.StringIO()
            >>> stream = InputStream(io.StringIO("ab"), out)
            >>> stream.peek()
            'a'
            >>> stream.get(echo=True)
            'a'
            >>> out.getvalue()
            'a'

    """

    __slots__ = (
        "_reader",
        "_writer",
        "_chunk_size",
        "_buffer",
        "_index",
        "_preview",
        "_cr",
        "lineno",
        "source_file",
    )

    def __init__(
        self,
        reader: TextIO,
        writer: TextIO,
        *,
        chunk_size: int = 8192,
        source_file: str | None = None,
    ) -> None:
        """Initialize stream over a text reader.

        Args:
            reader: Text source. Open files with newline="" to keep CRs.
            writer: Output sink receiving echoed characters
            chunk_size: Characters fetched from reader per refill
            source_file: Optional source file path for error messages
        """
        self._reader = reader
        self._writer = writer
        self._chunk_size = chunk_size
        self._buffer = ""
        self._index = 0
        self._preview: str | None = None
        self._cr = False
        self.lineno = 1
        self.source_file = source_file

    def _read(self) -> str:
        """Read one raw character from the reader, refilling as needed."""
        if self._index >= len(self._buffer):
            self._buffer = self._reader.read(self._chunk_size)
            self._index = 0
            if not self._buffer:
                return EOF
        char = self._buffer[self._index]
        self._index += 1
        return char

    def peek(self) -> str:
        """Return the next character without consuming it.

        Returns:
            Next character or EOF ("") at end of input.
        """
        if self._preview is None:
            self._preview = self._read()
        return self._preview

    def get(self, echo: bool = False) -> str:
        """Consume one character, updating the line counter.

        Args:
            echo: Also write the character to the output sink

        Returns:
            The consumed character or EOF ("") at end of input.
        """
        if self._preview is not None:
            char = self._preview
            self._preview = None
        else:
            char = self._read()

        if char == EOF:
            return EOF
        if char == "\r":
            self._cr = True
            self.lineno += 1
        else:
            if char == "\n" and not self._cr:
                self.lineno += 1
            self._cr = False

        if echo:
            self.emit(char)
        return char

    def unget(self, char: str) -> None:
        """Push a character back. Only one slot exists."""
        self._preview = char

    def emit(self, text: str) -> None:
        """Write text to the output sink.

        Raises:
            OutputError: If the sink fails
        """
        try:
            self._writer.write(text)
        except OSError as e:
            raise OutputError("write error.", self.lineno, self.source_file) from e

    def flush(self) -> None:
        """Flush the output sink.

        Buffered sinks may only report a failed write here.

        Raises:
            OutputError: If the sink fails
        """
        try:
            self._writer.flush()
        except OSError as e:
            raise OutputError("write error.", self.lineno, self.source_file) from e
