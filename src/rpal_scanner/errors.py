"""
RPAL Scanner Error Hierarchy
============================

This module defines the exception hierarchy for the RPAL scanner.
All exceptions inherit from RpalError, allowing callers to catch every
scanner-related failure with a single except clause if desired.

Exception Hierarchy
-------------------
RpalError (base)
└── ScannerError (lexical errors)
    ├── UnterminatedStringError - end of input inside a string literal
    ├── InvalidCharacterError - character outside the RPAL lexicon
    └── ScannerIOError - the source could not be opened, read or decoded

End of input is not an error: the scanner signals it by returning None.

Error messages follow this format:
    filename:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class RpalError(Exception):
    """
    Base exception for all RPAL scanner errors.

        try:
            tokens = tokenize_file("program.rpal")
        except RpalError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<string>" for in-memory text)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScannerError(RpalError):
    """
    Base exception for lexical errors.

    Any ScannerError aborts the remainder of the token stream; the
    scanner performs no recovery.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            fact.rpal:3:9: error: unterminated string literal
            hint: add a closing "'" to complete the string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(ScannerError):
    """
    Unterminated string literal.

    Raised when the input ends before the closing quote of a string
    literal. The location is where the literal starts (its opening quote),
    not where the input ran out.

    Example:
        let s = 'hello
    """

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add a closing \"'\" to complete the string",
        )


class InvalidCharacterError(ScannerError):
    """
    Character that is not part of the RPAL lexicon.

    Raised when a token cannot start with the character, or when the
    character is not allowed inside a string literal or comment.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        context: Optional[str] = None,
    ):
        self.char = char
        message = f"invalid character {char!r} (U+{ord(char):04X})"
        if context:
            message = f"{message} in {context}"
        super().__init__(message, location=location)


class ScannerIOError(ScannerError):
    """
    The source stream could not be opened, read or decoded.

    The original exception is chained as __cause__.
    """
    pass
