"""Macro condition scanner mixin."""

from __future__ import annotations

from jsdev.charsets import CLOSERS, EOF, OPENERS, PRE_REGEXP, QUOTES, is_significant
from jsdev.errors import AmbiguousCommentBoundary, ScanError, UnterminatedCondition


class ConditionScannerMixin:
    """Mixin providing condition scanning for ``/*name(<condition>) ...*/``.

    Parens, braces and brackets all feed one shared depth counter. The
    bracket kinds are not matched against each other, so ``(]`` closes a
    condition just like ``()``.

    """

    def _get(self, echo: bool = False) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _peek(self) -> str:
        """Look at the next character. Implemented by Scanner."""
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

    def _scan_condition(self) -> None:
        """Echo a balanced condition, starting at its opening paren.

        Stops right after the delimiter that brings the depth back to zero.

        Raises:
            UnterminatedCondition: EOF, or the comment closes inside the condition
            AmbiguousCommentBoundary: a comment opener inside the condition
        """
        depth = 0
        left = "("
        while True:
            c = self._get(echo=True)
            if c in OPENERS:
                depth += 1
            elif c in CLOSERS:
                depth -= 1
                if depth == 0:
                    return
            elif c == EOF:
                raise self._error(UnterminatedCondition, "Unterminated condition.")
            elif c in QUOTES:
                self._scan_string(c, True)
            elif c == "/":
                if self._peek() in ("/", "*"):
                    raise self._error(AmbiguousCommentBoundary, "unexpected comment.")
                if left in PRE_REGEXP:
                    self._scan_regexp(True)
            elif c == "*" and self._peek() == "/":
                raise self._error(UnterminatedCondition, "unclosed condition.")
            if is_significant(c):
                left = c
