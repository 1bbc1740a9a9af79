"""Tests for error construction, formatting and hierarchy."""

import pytest

from jsdev.errors import (
    AmbiguousCommentBoundary,
    ConfigError,
    JSDevError,
    NestedComment,
    OutputError,
    ScanError,
    UnclosedLiteralInComment,
    UnterminatedComment,
    UnterminatedCondition,
    UnterminatedLiteral,
    UnterminatedStuff,
)


class TestScanErrorFormatting:
    """ScanError produces ``<line>. <message>`` diagnostics."""

    def test_message_only(self) -> None:
        err = ScanError("unexpected comment.")
        assert str(err) == "unexpected comment."
        assert err.lineno is None

    def test_with_line_number(self) -> None:
        err = ScanError("unterminated string literal.", lineno=12)
        assert str(err) == "12. unterminated string literal."
        assert err.message == "unterminated string literal."

    def test_with_source_file(self) -> None:
        err = ScanError("nested comment.", lineno=3, source_file="app.js")
        assert str(err) == "app.js:3. nested comment."

    def test_source_file_without_line(self) -> None:
        err = ScanError("write error.", source_file="app.js")
        assert str(err) == "app.js: write error."


class TestConfigError:
    """ConfigError has no line context."""

    def test_format(self) -> None:
        err = ConfigError("log:")
        assert str(err) == "bad command line log:"
        assert err.message == "log:"


class TestHierarchy:
    """Every error is a JSDevError."""

    @pytest.mark.parametrize(
        "error_type",
        [
            UnterminatedLiteral,
            UnterminatedCondition,
            UnterminatedStuff,
            UnterminatedComment,
            NestedComment,
            AmbiguousCommentBoundary,
            UnclosedLiteralInComment,
            OutputError,
        ],
    )
    def test_scan_errors(self, error_type: type[ScanError]) -> None:
        err = error_type("x", 1)
        assert isinstance(err, ScanError)
        assert isinstance(err, JSDevError)

    def test_config_error_is_not_scan_error(self) -> None:
        assert not isinstance(ConfigError("x"), ScanError)
        assert isinstance(ConfigError("x"), JSDevError)

    def test_unclosed_literal_is_both(self) -> None:
        err = UnclosedLiteralInComment("unexpected close comment in string.", 4)
        assert isinstance(err, UnterminatedLiteral)
        assert isinstance(err, AmbiguousCommentBoundary)
        assert str(err) == "4. unexpected close comment in string."
