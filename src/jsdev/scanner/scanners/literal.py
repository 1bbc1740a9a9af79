"""String and regexp literal scanner mixin."""

from __future__ import annotations

from jsdev.charsets import EOF
from jsdev.errors import (
    AmbiguousCommentBoundary,
    ScanError,
    UnclosedLiteralInComment,
    UnterminatedLiteral,
)


class LiteralScannerMixin:
    """Mixin providing string and regexp literal scanning.

    Both scanners echo the literal body, including the closing delimiter.
    The opening delimiter has already been echoed by the caller.

    When invoked from inside a macro comment (``in_comment``), a literal
    that contains ``*/`` would close the comment under a plain
    comment-stripping reader, so it is rejected.

    """

    def _get(self, echo: bool = False) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _peek(self) -> str:
        """Look at the next character. Implemented by Scanner."""
        raise NotImplementedError

    def _lineno(self) -> int:
        """Current line number. Implemented by Scanner."""
        raise NotImplementedError

    def _error(
        self, error_type: type[ScanError], message: str, lineno: int | None = None
    ) -> ScanError:
        """Build a located error. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_string(self, quote: str, in_comment: bool) -> None:
        """Scan the rest of a string literal opened by quote.

        Args:
            quote: The opening quote character
            in_comment: Whether the literal sits inside a macro comment

        Raises:
            UnterminatedLiteral: EOF before the closing quote
            UnclosedLiteralInComment: ``*/`` inside the literal
        """
        start = self._lineno()
        while True:
            c = self._get(echo=True)
            if c == quote:
                return
            if c == "\\":
                c = self._get(echo=True)
            if in_comment and c == "*" and self._peek() == "/":
                raise self._error(
                    UnclosedLiteralInComment, "unexpected close comment in string.", start
                )
            if c == EOF:
                raise self._error(UnterminatedLiteral, "unterminated string literal.", start)

    def _scan_regexp(self, in_comment: bool) -> None:
        """Scan the rest of a regexp literal after its opening slash.

        A ``[`` opens a class in which ``/`` does not terminate.

        Args:
            in_comment: Whether the literal sits inside a macro comment

        Raises:
            UnterminatedLiteral: EOF before the closing slash
            AmbiguousCommentBoundary: closing slash followed by ``/`` or ``*``
            UnclosedLiteralInComment: ``*/`` inside the literal
        """
        start = self._lineno()
        while True:
            c = self._get(echo=True)
            if c == "[":
                while True:
                    c = self._get(echo=True)
                    if c == "]":
                        break
                    if c == "\\":
                        c = self._get(echo=True)
                    if in_comment and c == "*" and self._peek() == "/":
                        raise self._error(
                            UnclosedLiteralInComment, "unexpected close comment in regexp.", start
                        )
                    if c == EOF:
                        raise self._error(
                            UnterminatedLiteral,
                            "unterminated set in Regular Expression literal.",
                            start,
                        )
            elif c == "/":
                if in_comment and self._peek() in ("/", "*"):
                    raise self._error(AmbiguousCommentBoundary, "unexpected comment.")
                return
            elif c == "\\":
                c = self._get(echo=True)
            if in_comment and c == "*" and self._peek() == "/":
                raise self._error(UnclosedLiteralInComment, "unexpected comment.", start)
            if c == EOF:
                raise self._error(UnterminatedLiteral, "unterminated regexp literal.", start)
