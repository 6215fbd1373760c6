"""
RPAL Scanner
============

The scanner facade: reads the first character of each token, picks the
builder for its character class and returns the finished token.

The scanner is a pull source. Each call to next_token() returns one
Token, or None once the input is exhausted. Whitespace and comments are
returned like any other token; use screen() to drop them before handing
the stream to a parser.

Example Usage
-------------
>>> from rpal_scanner import Scanner, screen
>>> with Scanner.from_string("let x = 1 in x // done") as scanner:
...     for token in screen(scanner):
...         print(token)
Token(RESERVED, 'let', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(OPERATOR, '=', 1:7)
Token(INTEGER, '1', 1:9)
Token(RESERVED, 'in', 1:11)
Token(IDENTIFIER, 'x', 1:14)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Union
import logging
import os

from rpal_scanner.builders import TokenBuilder
from rpal_scanner.errors import InvalidCharacterError, ScannerError, SourceLocation
from rpal_scanner.lexicon import CharClass, classify
from rpal_scanner.source import CharacterSource
from rpal_scanner.tokens import Token

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Options
# =============================================================================

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        encoding: Text encoding used when opening source files
        keep_comment_newline: Emit the newline that ends a comment as a
            whitespace token instead of dropping it. With this set,
            concatenating every token's text reproduces the input exactly.
    """
    encoding: str = "utf-8"
    keep_comment_newline: bool = False

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Environment variables (all optional):
            RPAL_SCANNER_ENCODING: Source file encoding
            RPAL_SCANNER_KEEP_COMMENT_NEWLINE: "1"/"true"/"yes"/"on" to enable
        """
        options = cls()

        if encoding := os.environ.get("RPAL_SCANNER_ENCODING"):
            options.encoding = encoding

        if keep := os.environ.get("RPAL_SCANNER_KEEP_COMMENT_NEWLINE"):
            options.keep_comment_newline = keep.strip().lower() in _TRUE_VALUES

        return options


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Tokenizes RPAL source text.

    Usage:
        with Scanner("fact.rpal") as scanner:
            token = scanner.next_token()
            while token is not None:
                ...
                token = scanner.next_token()

    The scanner owns its CharacterSource. The underlying stream is closed
    at end of input, by close(), when a with block exits, or when a loop
    over the scanner is abandoned early.

    Attributes:
        source: The character source being scanned
        options: Scanner configuration
    """

    def __init__(
        self,
        path: Union[str, Path, CharacterSource],
        options: Optional[ScannerOptions] = None,
    ):
        """
        Open a source file for scanning.

        Args:
            path: Path of the RPAL source file, or a ready CharacterSource.
                A CharacterSource is already decoded, so options.encoding
                does not apply to it.
            options: Scanner options (defaults to ScannerOptions())

        Raises:
            ScannerIOError: If the file cannot be opened
        """
        self.options = options or ScannerOptions()
        if isinstance(path, CharacterSource):
            self.source = path
        else:
            self.source = CharacterSource.open(path, self.options.encoding)

        self._builder = TokenBuilder(
            self.source, keep_comment_newline=self.options.keep_comment_newline
        )
        # One entry per CharClass
        self._dispatch: dict[CharClass, Callable[[str, SourceLocation], Token]] = {
            CharClass.LETTER: self._builder.build_identifier,
            CharClass.DIGIT: self._builder.build_integer,
            CharClass.OPERATOR: self._builder.build_operator,
            CharClass.QUOTE: self._start_string,
            CharClass.SPACE: self._builder.build_whitespace,
            CharClass.PUNCTUATION: self._builder.build_punctuation,
        }
        self.token_count = 0
        # First lexical or I/O error; the stream ends there
        self._error: Optional[ScannerError] = None

    @classmethod
    def from_string(
        cls,
        text: str,
        filename: str = "<string>",
        options: Optional[ScannerOptions] = None,
    ) -> "Scanner":
        """Create a scanner over in-memory source text."""
        return cls(CharacterSource.from_string(text, filename), options)

    # =========================================================================
    # Token Stream
    # =========================================================================

    def next_token(self) -> Optional[Token]:
        """
        Scan and return the next token.

        After a ScannerError the stream is over: the source is closed and
        every later call raises the same error again.

        Returns:
            The next Token, or None at end of input

        Raises:
            UnterminatedStringError: If the input ends inside a string
            InvalidCharacterError: For a character outside the RPAL lexicon
            ScannerIOError: If the source cannot be read
        """
        if self._error is not None:
            raise self._error
        try:
            return self._scan_token()
        except ScannerError as e:
            self._error = e
            self.close()
            raise

    def _scan_token(self) -> Optional[Token]:
        start = self.source.location
        char = self.source.next_char()
        if char is None:
            return None

        char_class = classify(char)
        if char_class is None:
            raise InvalidCharacterError(char, start)

        token = self._dispatch[char_class](char, start)
        self.token_count += 1
        return token

    def _start_string(self, quote: str, start: SourceLocation) -> Token:
        # The opening quote is not part of the value
        return self._builder.build_string(start)

    def tokens(self, screened: bool = False) -> Iterator[Token]:
        """
        Generate tokens until end of input.

        Args:
            screened: Skip whitespace and comment tokens

        The source is closed when the generator finishes, fails or is
        closed early.
        """
        try:
            while (token := self.next_token()) is not None:
                if screened and token.is_discardable:
                    continue
                yield token
        finally:
            self.close()
            logger.debug(f"Scanned {self.token_count} tokens from {self.source.filename}")

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Release the source stream. Safe to call more than once."""
        self.source.close()

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# =============================================================================
# Convenience Functions
# =============================================================================

def screen(tokens: Iterable[Token]) -> Iterator[Token]:
    """
    Drop discardable tokens (whitespace and comments) from a token stream.

    This is the filter a parser-facing consumer applies to the raw stream.
    """
    return (token for token in tokens if not token.is_discardable)


def render_tokens(tokens: Iterable[Token]) -> str:
    """
    Join the source text of tokens back together.

    For a full, unscreened stream this reproduces the input, minus the
    newline ending each comment unless keep_comment_newline was set.
    """
    return "".join(token.text for token in tokens)


def tokenize(
    text: str,
    filename: str = "<string>",
    options: Optional[ScannerOptions] = None,
    screened: bool = False,
) -> list[Token]:
    """
    Tokenize in-memory RPAL source text.

    Args:
        text: The source text
        filename: Name used in token locations and error messages
        options: Scanner options
        screened: Drop whitespace and comment tokens

    Returns:
        All tokens in source order
    """
    return list(Scanner.from_string(text, filename, options).tokens(screened))


def tokenize_file(
    path: Union[str, Path],
    options: Optional[ScannerOptions] = None,
    screened: bool = False,
) -> list[Token]:
    """Tokenize an RPAL source file. See tokenize()."""
    return list(Scanner(path, options).tokens(screened))
