"""Tests for string and regexp literal scanning.

Literals are echoed untouched, but while inside one the scanner must not
mistake quotes, slashes or comment markers for structure.
"""

import pytest

from jsdev import transform
from jsdev.errors import (
    AmbiguousCommentBoundary,
    UnclosedLiteralInComment,
    UnterminatedComment,
    UnterminatedLiteral,
)


class TestStrings:
    """String literals outside macro comments."""

    @pytest.mark.parametrize(
        "source",
        [
            "x = 'it\\'s';",
            'x = "say \\"hi\\"";',
            "x = `tpl ${a}`;",
            "x = '/*debug y*/';",
            'x = "// not a comment";',
            "x = '\"';",
            "x = `multi\nline`;",
        ],
    )
    def test_passed_through(self, source: str) -> None:
        assert transform(source, ["debug"]) == source

    def test_unterminated_reports_start_line(self) -> None:
        source = "\n\nx = \"abc\n\ndef"
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform(source, [])
        assert exc_info.value.lineno == 3
        assert str(exc_info.value) == "3. unterminated string literal."

    def test_trailing_backslash_at_eof(self) -> None:
        with pytest.raises(UnterminatedLiteral):
            transform("'abc\\", [])


class TestStringsInComments:
    """String literals inside macro comments."""

    def test_quote_inside_body(self) -> None:
        assert transform("/*log \"a*b\"*/", ["log:f"]) == '{f("a*b");}'

    def test_close_comment_in_string(self) -> None:
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform("/*debug 'oops*/", ["debug"])
        assert isinstance(exc_info.value, AmbiguousCommentBoundary)
        assert isinstance(exc_info.value, UnclosedLiteralInComment)
        assert exc_info.value.lineno == 1

    def test_unterminated_output_stops_at_failure(self) -> None:
        with pytest.raises(UnterminatedLiteral):
            transform("/*debug 'oops*/ tail();", ["debug"])


class TestRegexps:
    """Regexp literals and the division heuristic."""

    def test_division_after_identifier(self) -> None:
        assert transform("a/b", []) == "a/b"

    def test_division_before_quote(self) -> None:
        # If the slash were read as a regexp the quote would be swallowed
        assert transform("x = a/'b'.length;", []) == "x = a/'b'.length;"

    def test_regexp_after_paren(self) -> None:
        assert transform("f(/x/)", []) == "f(/x/)"

    def test_regexp_hides_quote(self) -> None:
        assert transform("f(/'/)", []) == "f(/'/)"

    def test_regexp_class_hides_comment_opener(self) -> None:
        assert transform("r = /[/*]/;", []) == "r = /[/*]/;"

    def test_regexp_escaped_slash(self) -> None:
        assert transform("r = /a\\/b/g;", []) == "r = /a\\/b/g;"

    @pytest.mark.parametrize("left", list("(,=:[!&|?{};"))
    def test_every_pre_regexp_char(self, left: str) -> None:
        source = f"{left} /[/*]/"
        assert transform(source, []) == source

    def test_return_keyword_reads_as_division(self) -> None:
        # Keywords are not tracked: the slash after "return" divides
        with pytest.raises(UnterminatedComment):
            transform("return /[/*]/;", [])

    def test_unterminated_regexp(self) -> None:
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform("\nx = /abc", [])
        assert exc_info.value.lineno == 2

    def test_unterminated_class_reports_start_line(self) -> None:
        with pytest.raises(UnterminatedLiteral) as exc_info:
            transform("x = /[abc\n\n", [])
        assert exc_info.value.lineno == 1

    def test_regexp_after_string(self) -> None:
        # The closing quote is the left neighbour, so this is division
        assert transform("x = 'a' / 2;", []) == "x = 'a' / 2;"


class TestRegexpsInComments:
    """Regexp literals inside macro comments."""

    def test_regexp_at_start_of_body(self) -> None:
        result = transform("/*log /x/.test(s)*/", ["log:console.log"])
        assert result == "{console.log(/x/.test(s));}"

    def test_division_in_body(self) -> None:
        assert transform("/*debug a/b*/", ["debug"]) == "{a/b;}"

    def test_regexp_followed_by_star(self) -> None:
        with pytest.raises(AmbiguousCommentBoundary) as exc_info:
            transform("/*debug x=/a/*/", ["debug"])
        assert not isinstance(exc_info.value, UnterminatedLiteral)

    def test_close_comment_in_regexp(self) -> None:
        with pytest.raises(UnclosedLiteralInComment):
            transform("/*debug (/a*/", ["debug"])

    def test_close_comment_in_regexp_class(self) -> None:
        with pytest.raises(UnclosedLiteralInComment):
            transform("/*debug (/[a*/", ["debug"])
