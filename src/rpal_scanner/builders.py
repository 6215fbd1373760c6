"""
Token Builders
==============

One maximal-munch routine per token category. Every builder has the same
shape: it is handed the character that triggered it, keeps reading from
the shared CharacterSource while the category's predicate holds, and
pushes back the first character it rejects so the next token starts
there.

Grammar
-------
    Identifier -> Letter (Letter | Digit | '_')*
    Integer    -> Digit+
    Operator   -> Operator_symbol+
    String     -> '''' (Escape | String_body)* ''''
    Escape     -> '\\' ('t' | 'n' | '\\' | '''')
    Spaces     -> Space+
    Comment    -> '//' Comment_body* Eol
    Punction   -> '(' | ')' | ';' | ','

Comments
--------
A comment stops at the newline that ends its line. That newline is not
part of the comment's value. By default it is dropped from the token
stream entirely (the line counter still advances past it); with
keep_comment_newline it is pushed back and comes out as whitespace.
"""

from typing import Callable, Optional

from rpal_scanner.errors import (
    InvalidCharacterError,
    SourceLocation,
    UnterminatedStringError,
)
from rpal_scanner.lexicon import (
    QUOTE,
    STRING_ESCAPES,
    is_comment_body,
    is_digit,
    is_identifier_char,
    is_operator_symbol,
    is_space,
    is_string_body,
)
from rpal_scanner.source import CharacterSource
from rpal_scanner.tokens import PUNCTUATION_KINDS, Token, TokenKind


class TokenBuilder:
    """
    Assembles tokens from a CharacterSource.

    Each build_* method takes the already-consumed first character of the
    token and the location that character was read from.

    Attributes:
        source: The character source shared by all builders
        keep_comment_newline: Push back the newline that ends a comment
            instead of dropping it
    """

    def __init__(self, source: CharacterSource, keep_comment_newline: bool = False):
        self.source = source
        self.keep_comment_newline = keep_comment_newline

    # =========================================================================
    # Helpers
    # =========================================================================

    def _munch(self, text: list[str], accept: Callable[[str], bool]) -> str:
        """
        Append characters to text while accept() holds.

        The first rejected character is pushed back; end of stream simply
        ends the token.
        """
        char = self.source.next_char()
        while char is not None:
            if not accept(char):
                self.source.pushback(char)
                break
            text.append(char)
            char = self.source.next_char()
        return "".join(text)

    def _make(self, kind: TokenKind, value: str, start: SourceLocation) -> Token:
        return Token(kind, value, start.line, start.column, start.filename)

    # =========================================================================
    # Builders
    # =========================================================================

    def build_identifier(self, first: str, start: SourceLocation) -> Token:
        """Identifier or reserved word: Letter (Letter | Digit | '_')*."""
        value = self._munch([first], is_identifier_char)
        return Token.identifier(value, start.line, start.column, start.filename)

    def build_integer(self, first: str, start: SourceLocation) -> Token:
        """Integer: Digit+."""
        return self._make(TokenKind.INTEGER, self._munch([first], is_digit), start)

    def build_operator(self, first: str, start: SourceLocation) -> Token:
        """
        Operator: Operator_symbol+.

        If the first two characters are '//' the token is a comment
        instead. The check only looks at the start of the operator, so
        '+//' is a single operator.
        """
        second = self.source.next_char()
        if first == "/" and second == "/":
            return self.build_comment(start)

        if second is not None:
            self.source.pushback(second)
        return self._make(
            TokenKind.OPERATOR, self._munch([first], is_operator_symbol), start
        )

    def build_comment(self, start: SourceLocation) -> Token:
        """
        Comment: '//' followed by the rest of the line.

        Called after both slashes have been consumed.

        Raises:
            InvalidCharacterError: For a character not allowed in comments
        """
        text = ["//"]
        while True:
            location = self.source.location
            char = self.source.next_char()
            if char is None:
                break
            if char == "\n":
                if self.keep_comment_newline:
                    self.source.pushback(char)
                break
            if not is_comment_body(char):
                raise InvalidCharacterError(char, location, context="comment")
            text.append(char)
        return self._make(TokenKind.COMMENT, "".join(text), start)

    def build_string(self, start: SourceLocation) -> Token:
        """
        String: the text between two quotes, kept exactly as written.

        Called after the opening quote has been consumed. A backslash
        followed by t, n, backslash or quote is kept as two characters;
        in particular \\' does not end the string.

        Raises:
            UnterminatedStringError: If the input ends before the closing quote
            InvalidCharacterError: For a character not allowed in strings
        """
        text: list[str] = []
        while True:
            location = self.source.location
            char = self.source.next_char()
            if char is None:
                raise UnterminatedStringError(start)
            if char == QUOTE:
                return self._make(TokenKind.STRING, "".join(text), start)
            if not is_string_body(char):
                raise InvalidCharacterError(char, location, context="string literal")
            text.append(char)
            if char == "\\":
                escaped = self._read_escape()
                if escaped is not None:
                    text.append(escaped)

    def _read_escape(self) -> Optional[str]:
        """
        Consume the character after a backslash if it forms an escape.

        Anything else is pushed back and scanned as ordinary string text.
        """
        char = self.source.next_char()
        if char is None:
            return None
        if char in STRING_ESCAPES:
            return char
        self.source.pushback(char)
        return None

    def build_whitespace(self, first: str, start: SourceLocation) -> Token:
        """Whitespace: Space+ (discardable)."""
        return self._make(TokenKind.WHITESPACE, self._munch([first], is_space), start)

    def build_punctuation(self, first: str, start: SourceLocation) -> Token:
        """Punctuation: exactly one of ( ) ; ,"""
        return self._make(PUNCTUATION_KINDS[first], first, start)
