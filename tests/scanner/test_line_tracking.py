"""Tests for line numbers reported in scan errors.

CR, LF and CRLF each end exactly one line.
"""

import pytest

from jsdev import transform
from jsdev.errors import UnterminatedComment, UnterminatedLiteral


class TestLineEndings:
    """Each line-ending style counts once."""

    @pytest.mark.parametrize("newline", ["\n", "\r", "\r\n"])
    def test_error_on_third_line(self, newline: str) -> None:
        source = f"a;{newline}b;{newline}'oops"
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform(source, [])
        assert exc_info.value.lineno == 3

    def test_mixed_endings(self) -> None:
        source = "a\r\nb\nc\rd\n\r'x"
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform(source, [])
        assert exc_info.value.lineno == 6

    def test_lf_cr_is_two_lines(self) -> None:
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform("\n\r'x", [])
        assert exc_info.value.lineno == 3


class TestErrorLocation:
    """Which line an error points at."""

    def test_literal_points_at_opening_quote(self) -> None:
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform("x;\ny = 'a\nb\nc", [])
        assert exc_info.value.lineno == 2

    def test_comment_points_at_end_of_input(self) -> None:
        with pytest.raises(UnterminatedComment) as exc_info:
            transform("/* a\nb\nc", [])
        assert exc_info.value.lineno == 3

    def test_lines_inside_expansion_counted(self) -> None:
        source = "/*debug a,\nb*/\n'x"
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform(source, ["debug"])
        assert exc_info.value.lineno == 3
