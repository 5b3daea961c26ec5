"""Tests for line streams."""

from __future__ import annotations

import io
import re

import pytest

from resource_fixtures.lines import LineStream, open_line_stream, text_lines


def _split_terminators(text: str) -> list[str]:
    parts = re.split(r"\r\n|\r|\n", text)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


class TestTextLines:
    """Tests for splitting in-memory text."""

    def test_mixed_terminators(self) -> None:
        assert list(text_lines("a\nb\r\nc")) == ["a", "b", "c"]

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\r", ["a"]),
            ("a\r\n", ["a"]),
            ("\n", [""]),
            ("a\n\n", ["a", ""]),
            ("a\rb", ["a", "b"]),
            ("a\r\rb", ["a", "", "b"]),
            ("a\n\rb", ["a", "", "b"]),
        ],
    )
    def test_boundaries(self, text: str, expected: list[str]) -> None:
        """Test final terminators and empty lines."""
        assert list(text_lines(text)) == expected

    def test_other_breaks_are_kept(self) -> None:
        """Test only CR and LF end lines, unlike str.splitlines."""
        text = "a\x0bb\x0cc\x1cd\u2028e\u0085f"
        assert list(text_lines(text)) == [text]

    @pytest.mark.parametrize(
        "text",
        ["one\ntwo", "one\r\ntwo\r\n", "\r\n\r\n", "x\ry\nz\r\n\n", "tail\r"],
    )
    def test_matches_terminator_split(self, text: str) -> None:
        assert list(text_lines(text)) == _split_terminators(text)

    def test_is_lazy(self) -> None:
        stream = text_lines("a\nb\nc")
        assert next(stream) == "a"
        assert next(stream) == "b"
        assert list(stream) == ["c"]


class TestLineStream:
    """Tests for LineStream lifecycle."""

    def test_context_manager_closes(self) -> None:
        with text_lines("a\nb") as stream:
            assert not stream.closed
            assert next(stream) == "a"

        assert stream.closed

    def test_read_after_close_raises(self) -> None:
        stream = text_lines("a\nb")
        stream.close()

        with pytest.raises(ValueError):
            next(stream)

    def test_close_is_idempotent(self) -> None:
        stream = text_lines("a")
        stream.close()
        stream.close()
        assert stream.closed

    def test_iter_returns_self(self) -> None:
        stream = text_lines("a")
        assert iter(stream) is stream
        assert isinstance(stream, LineStream)


class TestOpenLineStream:
    """Tests for decoding binary streams into lines."""

    def test_decodes_with_encoding(self) -> None:
        binary = io.BytesIO("Grüße\r\nMünchen".encode("latin-1"))

        with open_line_stream(binary, "latin-1") as stream:
            assert list(stream) == ["Grüße", "München"]

    def test_closing_closes_binary(self) -> None:
        binary = io.BytesIO(b"a\n")
        stream = open_line_stream(binary)
        stream.close()

        assert binary.closed

    def test_crlf_across_buffer_boundary(self) -> None:
        """Test a CRLF pair split between reads stays one terminator."""
        first = "a" * 8191
        binary = io.BytesIO(first.encode("ascii") + b"\r\nb")

        with open_line_stream(binary, "ascii") as stream:
            assert list(stream) == [first, "b"]

    def test_decode_error_propagates(self) -> None:
        binary = io.BytesIO(b"\xff\xfe broken\n")

        with open_line_stream(binary, "utf-8") as stream:
            with pytest.raises(UnicodeDecodeError):
                list(stream)
