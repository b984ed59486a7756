"""Tests for the shared tree formatting helpers."""

from __future__ import annotations

import pytest

from arbor.trees._formatting import (
    chunk_message,
    clean_tag,
    format_message,
    stack_trace_string,
)


class TestFormatMessage:
    def test_substitutes(self):
        assert format_message("%s=%d", ("a", 1)) == "a=1"

    def test_single_argument(self):
        assert format_message("[%r]", ("x",)) == "['x']"

    def test_no_args_verbatim(self):
        assert format_message("100% %s %d", ()) == "100% %s %d"


class TestStackTraceString:
    def test_includes_chained_cause(self):
        try:
            try:
                raise KeyError("inner")
            except KeyError as inner:
                raise RuntimeError("outer") from inner
        except RuntimeError as exc:
            text = stack_trace_string(exc)

        assert "KeyError: 'inner'" in text
        assert "direct cause" in text
        assert text.endswith("RuntimeError: outer")

    def test_unraised_exception(self):
        assert stack_trace_string(ValueError("plain")) == "ValueError: plain"


class TestChunkMessage:
    def test_short_message_whole(self):
        assert list(chunk_message("short", 10)) == ["short"]

    def test_splits_on_newlines(self):
        assert list(chunk_message("aaaa\nbbbb\ncc", 5)) == ["aaaa", "bbbb", "cc"]

    def test_splits_long_lines(self):
        assert list(chunk_message("abcdefghij", 4)) == ["abcd", "efgh", "ij"]

    def test_mixed(self):
        assert list(chunk_message("ab\ncdef", 3)) == ["ab", "cde", "f"]

    def test_chunks_never_exceed_limit(self):
        message = "\n".join("x" * n for n in range(0, 40, 7))
        chunks = list(chunk_message(message, 8))
        assert all(len(chunk) <= 8 for chunk in chunks)
        assert "".join(chunks) == message.replace("\n", "")

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValueError):
            list(chunk_message("abc", 0))


class TestCleanTag:
    def test_plain_name(self):
        assert clean_tag("Uploader") == "Uploader"

    def test_strips_lambda(self):
        assert clean_tag("handler.<locals>.<lambda>") == "handler"

    def test_strips_locals(self):
        assert clean_tag("outer.<locals>.Inner") == "outer"

    def test_truncates(self):
        assert clean_tag("AVeryLongComponentName", 5) == "AVery"
