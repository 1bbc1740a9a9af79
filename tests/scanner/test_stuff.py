"""Tests for macro body scanning."""

import pytest

from jsdev import transform
from jsdev.errors import AmbiguousCommentBoundary, UnterminatedStuff


class TestBody:
    """Body text up to the closing */."""

    def test_star_in_body(self) -> None:
        assert transform("/*debug a*b*/", ["debug"]) == "{a*b;}"

    def test_star_run_before_close(self) -> None:
        assert transform("/*debug a**/", ["debug"]) == "{a*;}"

    def test_multiline_body(self) -> None:
        source = "/*log 'a',\n    b*/"
        assert transform(source, ["log:console.log"]) == "{console.log('a',\n    b);}"

    def test_empty_body(self) -> None:
        assert transform("/*debug*/", ["debug"]) == "{;}"

    def test_only_one_separator_dropped(self) -> None:
        assert transform("/*debug   x*/", ["debug"]) == "{  x;}"

    def test_tab_separator(self) -> None:
        assert transform("/*debug\tx*/", ["debug"]) == "{x;}"

    def test_newline_is_body(self) -> None:
        assert transform("/*debug\nx*/", ["debug"]) == "{\nx;}"

    def test_closing_sequence_in_string_rejected(self) -> None:
        with pytest.raises(AmbiguousCommentBoundary):
            transform("/*debug s = '*/'*/", ["debug"])


class TestBodyErrors:
    """Malformed bodies."""

    def test_eof(self) -> None:
        with pytest.raises(UnterminatedStuff) as exc_info:
            transform("/*debug x\n\n", ["debug"])
        assert exc_info.value.lineno == 3

    @pytest.mark.parametrize("source", ["/*debug a // b*/", "/*debug a /* b*/"])
    def test_comment_opener(self, source: str) -> None:
        with pytest.raises(AmbiguousCommentBoundary):
            transform(source, ["debug"])
