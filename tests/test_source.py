# =============================================================================
# test_source.py - Character Source Unit Tests
# =============================================================================
# Tests for the character cursor shared by all token builders:
#   - Sequential reads and end of stream
#   - The single-slot pushback buffer
#   - Line and column tracking, including pushed-back newlines
#   - Stream lifetime and I/O failures
# =============================================================================

import io

import pytest
from rpal_scanner.errors import ScannerIOError
from rpal_scanner.source import CharacterSource


class FailingStream(io.StringIO):
    """Text stream whose reads always fail."""

    def read(self, size=-1):
        raise OSError("device not ready")


# =============================================================================
# Reading Tests
# =============================================================================

class TestReading:
    """Test sequential character reads."""

    def test_reads_characters_in_order(self):
        source = CharacterSource.from_string("ab")
        assert source.next_char() == "a"
        assert source.next_char() == "b"
        assert source.next_char() is None

    def test_end_of_stream_is_sticky(self):
        source = CharacterSource.from_string("")
        assert source.next_char() is None
        assert source.next_char() is None

    def test_carriage_return_preserved(self):
        source = CharacterSource.from_string("\r\n")
        assert source.next_char() == "\r"
        assert source.next_char() == "\n"


# =============================================================================
# Pushback Tests
# =============================================================================

class TestPushback:
    """Test the one-character pushback slot."""

    def test_pushback_returns_same_character(self):
        source = CharacterSource.from_string("ab")
        char = source.next_char()
        source.pushback(char)
        assert source.next_char() == "a"
        assert source.next_char() == "b"

    def test_pushback_after_end_of_stream(self):
        source = CharacterSource.from_string("a")
        source.next_char()
        assert source.next_char() is None
        source.pushback("a")
        assert source.next_char() == "a"
        assert source.next_char() is None

    def test_second_pushback_rejected(self):
        source = CharacterSource.from_string("ab")
        source.pushback(source.next_char())
        with pytest.raises(RuntimeError):
            source.pushback("b")


# =============================================================================
# Position Tests
# =============================================================================

class TestPosition:
    """Test line and column tracking."""

    def test_initial_position(self):
        source = CharacterSource.from_string("x", "demo.rpal")
        assert (source.line, source.column) == (1, 1)
        assert str(source.location) == "demo.rpal:1:1"

    def test_newline_advances_line(self):
        source = CharacterSource.from_string("ab\ncd")
        for _ in range(3):
            source.next_char()
        assert (source.line, source.column) == (2, 1)

    def test_pushback_rewinds_column(self):
        source = CharacterSource.from_string("ab")
        source.next_char()
        source.next_char()
        source.pushback("b")
        assert (source.line, source.column) == (1, 2)

    def test_pushed_back_newline_rewinds_line(self):
        source = CharacterSource.from_string("a\nb")
        source.next_char()
        source.next_char()
        assert (source.line, source.column) == (2, 1)
        source.pushback("\n")
        assert (source.line, source.column) == (1, 2)
        assert source.next_char() == "\n"
        assert (source.line, source.column) == (2, 1)


# =============================================================================
# Resource Tests
# =============================================================================

class TestResources:
    """Test stream lifetime and failure reporting."""

    def test_closed_at_end_of_stream(self):
        source = CharacterSource.from_string("a")
        source.next_char()
        assert not source.closed
        source.next_char()
        assert source.closed

    def test_context_manager_closes(self, tmp_path):
        path = tmp_path / "a.rpal"
        path.write_text("let x")
        with CharacterSource.open(path) as source:
            assert source.next_char() == "l"
        assert source.closed

    def test_close_is_idempotent(self):
        source = CharacterSource.from_string("a")
        source.close()
        source.close()
        assert source.closed
        assert source.next_char() is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScannerIOError) as exc_info:
            CharacterSource.open(tmp_path / "missing.rpal")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "a.rpal"
        path.write_text("x")
        with pytest.raises(ScannerIOError):
            CharacterSource.open(path, encoding="no-such-codec")

    def test_read_failure_is_not_end_of_stream(self):
        source = CharacterSource(FailingStream(), "<failing>")
        with pytest.raises(ScannerIOError) as exc_info:
            source.next_char()
        assert "device not ready" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert source.closed

    def test_failed_source_keeps_failing(self):
        """A failed stream never turns into a clean end of stream."""
        source = CharacterSource(FailingStream(), "<failing>")
        with pytest.raises(ScannerIOError):
            source.next_char()
        with pytest.raises(ScannerIOError) as exc_info:
            source.next_char()
        assert "device not ready" in str(exc_info.value)
