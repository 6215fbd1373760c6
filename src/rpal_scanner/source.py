"""
Character Source
================

A forward-only cursor over a text stream with exactly one character of
pushback. All token builders read through the same CharacterSource, so
the lookahead state lives in one place instead of being spread over the
scanner.

Position Tracking
-----------------
`line` and `column` always describe the character the *next* call to
next_char() will return. Pushing a character back rewinds the position
too, including across a newline, so a builder that records the position
before consuming a token's first character gets the right line even when
the previous builder overran onto the next line.

Resource Handling
-----------------
The stream is closed the first time end of stream is observed, on
close(), or when the source is used as a context manager and the block
exits. Closing is idempotent.

I/O and decoding failures raise ScannerIOError; they are never mistaken
for a clean end of input.
"""

from pathlib import Path
from typing import Optional, TextIO, Union
import io
import logging

from rpal_scanner.errors import ScannerIOError, SourceLocation

# Logger for this module
logger = logging.getLogger(__name__)


class CharacterSource:
    """
    Single-character reader with a one-slot pushback buffer.

    Usage:
        with CharacterSource.open("fact.rpal") as source:
            char = source.next_char()
            while char is not None:
                ...
                char = source.next_char()

    Attributes:
        filename: Name of the source (for token locations and errors)
    """

    def __init__(self, stream: TextIO, filename: str = "<string>"):
        """
        Take ownership of an already-open text stream.

        Args:
            stream: Text stream to read from; closed by this object
            filename: Name used in token locations and error messages
        """
        self.filename = filename
        self._stream: Optional[TextIO] = stream
        self._pending: Optional[str] = None
        # Set once a read fails; later reads raise it again
        self._error: Optional[ScannerIOError] = None

        # Position of the next character to be returned
        self._line = 1
        self._column = 1
        # Column of the most recent newline, restored when it is pushed back
        self._previous_line_end = 1

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        encoding: str = "utf-8",
    ) -> "CharacterSource":
        """
        Open a file for sequential character reading.

        Raises:
            ScannerIOError: If the file cannot be opened
        """
        path = Path(path)
        try:
            # newline="" keeps \r characters as written
            stream = open(path, "r", encoding=encoding, newline="")
        except (OSError, LookupError) as e:
            raise ScannerIOError(f"cannot open '{path}': {e}") from e
        logger.debug(f"Opened {path} ({encoding})")
        return cls(stream, str(path))

    @classmethod
    def from_string(cls, text: str, filename: str = "<string>") -> "CharacterSource":
        """Create a source reading from in-memory text."""
        return cls(io.StringIO(text, newline=""), filename)

    # =========================================================================
    # Position
    # =========================================================================

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def location(self) -> SourceLocation:
        """Location of the next character to be read."""
        return SourceLocation(self.filename, self._line, self._column)

    @property
    def closed(self) -> bool:
        return self._stream is None

    # =========================================================================
    # Reading
    # =========================================================================

    def next_char(self) -> Optional[str]:
        """
        Return the next character, or None at end of stream.

        A pushed-back character is returned before anything new is read.

        Raises:
            ScannerIOError: If the underlying stream fails or cannot be decoded
        """
        if self._pending is not None:
            char = self._pending
            self._pending = None
        else:
            char = self._read()
            if char is None:
                return None
        self._advance(char)
        return char

    def pushback(self, char: str) -> None:
        """
        Return one character to the source.

        Only one character may be pending at a time.

        Raises:
            RuntimeError: If a character is already pending
        """
        if self._pending is not None:
            raise RuntimeError(
                f"pushback slot already holds {self._pending!r}; "
                f"cannot push back {char!r}"
            )
        self._pending = char
        if char == "\n":
            self._line -= 1
            self._column = self._previous_line_end
        else:
            self._column -= 1

    def _read(self) -> Optional[str]:
        """Read one character from the stream, closing it at end of stream."""
        if self._error is not None:
            error = self._error
            raise ScannerIOError(error.message, error.location) from error
        if self._stream is None:
            return None
        try:
            char = self._stream.read(1)
        # UnicodeDecodeError is a ValueError, as is reading a closed file
        except (OSError, ValueError) as e:
            self._error = ScannerIOError(
                f"cannot read '{self.filename}': {e}", self.location
            )
            self.close()
            raise self._error from e
        if char == "":
            logger.debug(f"End of stream in {self.filename} at line {self._line}")
            self.close()
            return None
        return char

    def _advance(self, char: str) -> None:
        if char == "\n":
            self._previous_line_end = self._column
            self._line += 1
            self._column = 1
        else:
            self._column += 1

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        if self._stream is not None:
            stream = self._stream
            self._stream = None
            stream.close()

    def __enter__(self) -> "CharacterSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
