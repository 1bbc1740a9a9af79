"""Macro expansion mixin."""

from __future__ import annotations

from jsdev.charsets import SEPARATORS
from jsdev.macros import Macro


class ExpanderMixin:
    """Mixin that rewrites a matched macro comment into a statement.

    Four shapes are produced:

        /*debug <stuff>*/            ->  {<stuff>;}
        /*log <stuff>*/              ->  {console.log(<stuff>);}
        /*debug(<cond>) <stuff>*/    ->  if (<cond>) {<stuff>;}
        /*log(<cond>) <stuff>*/      ->  if (<cond>) {console.log(<stuff>);}

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

    def _scan_condition(self) -> None:
        """Scan a condition. Implemented by ConditionScannerMixin."""
        raise NotImplementedError

    def _scan_stuff(self) -> None:
        """Scan a macro body. Implemented by StuffScannerMixin."""
        raise NotImplementedError

    def _expand(self, macro: Macro) -> None:
        """Expand macro; the stream sits right after its name.

        A condition must follow the name with no space in between. One
        space or tab between the header and the body is a separator and
        is dropped.
        """
        if self._peek() == "(":
            self._emit("if ")
            self._scan_condition()
            self._emit(" ")
        if self._peek() in SEPARATORS:
            self._get()
        self._emit("{")
        if macro.target is not None:
            self._emit(f"{macro.target}(")
            self._scan_stuff()
            self._emit(")")
        else:
            self._scan_stuff()
        self._emit(";}")
