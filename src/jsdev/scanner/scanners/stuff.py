"""Macro body scanner mixin."""

from __future__ import annotations

from jsdev.charsets import EOF, PRE_REGEXP, QUOTES, is_significant
from jsdev.errors import AmbiguousCommentBoundary, ScanError, UnterminatedStuff


class StuffScannerMixin:
    """Mixin providing macro body ("stuff") scanning.

    Echoes the body and swallows the closing ``*/`` of the macro comment.

    """

    def _get(self, echo: bool = False) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _peek(self) -> str:
        """Look at the next character. Implemented by Scanner."""
        raise NotImplementedError

    def _emit(self, text: str) -> None:
        """Write to the output. Implemented by Scanner."""
        raise NotImplementedError

    def _error(
        self, error_type: type[ScanError], message: str, lineno: int | None = None
    ) -> ScanError:
        """Build a located error. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_string(self, quote: str, in_comment: bool) -> None:
        """Scan a string literal. Implemented by LiteralScannerMixin."""
        raise NotImplementedError

    def _scan_regexp(self, in_comment: bool) -> None:
        """Scan a regexp literal. Implemented by LiteralScannerMixin."""
        raise NotImplementedError

    def _scan_stuff(self) -> None:
        """Echo the macro body up to and excluding its closing ``*/``.

        The body is treated as if it followed an opening brace, so a slash
        at its very start opens a regexp.

        Raises:
            UnterminatedStuff: EOF before the closing ``*/``
            AmbiguousCommentBoundary: a comment opener inside the body
        """
        left = "{"
        while True:
            while self._peek() == "*":
                self._get()
                if self._peek() == "/":
                    self._get()
                    return
                self._emit("*")
                left = "*"
            c = self._get(echo=True)
            if c == EOF:
                raise self._error(UnterminatedStuff, "Unterminated stuff.")
            elif c in QUOTES:
                self._scan_string(c, True)
            elif c == "/":
                if self._peek() in ("/", "*"):
                    raise self._error(AmbiguousCommentBoundary, "unexpected comment.")
                if left in PRE_REGEXP:
                    self._scan_regexp(True)
            if is_significant(c):
                left = c
