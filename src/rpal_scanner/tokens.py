"""
RPAL Tokens
===========

Token kinds and the immutable Token record produced by the scanner.

Whitespace and comments are emitted as *discardable* tokens. The scanner
never filters them; a parser-facing consumer drops them (see
rpal_scanner.scanner.screen).
"""

from dataclasses import dataclass
from enum import Enum, auto

from rpal_scanner.errors import SourceLocation
from rpal_scanner.lexicon import QUOTE, is_reserved


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds of the RPAL lexicon.

    Reserved words are a separate kind from identifiers so the parser
    never has to look at identifier text to recognise a keyword.
    """

    # === Identifiers and Literals ===
    IDENTIFIER = auto()     # Letter (Letter | Digit | '_')*
    RESERVED = auto()       # let, in, where, fn, ...
    INTEGER = auto()        # Digit+
    STRING = auto()         # '...'
    OPERATOR = auto()       # Operator_symbol+

    # === Discardable ===
    WHITESPACE = auto()     # Space+
    COMMENT = auto()        # // ... up to end of line

    # === Punctuation ===
    L_PAREN = auto()        # (
    R_PAREN = auto()        # )
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,

    @property
    def is_discardable(self) -> bool:
        """True for kinds the parser must skip (whitespace, comments)."""
        return self in (TokenKind.WHITESPACE, TokenKind.COMMENT)


PUNCTUATION_KINDS: dict[str, TokenKind] = {
    "(": TokenKind.L_PAREN,
    ")": TokenKind.R_PAREN,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token of RPAL source text.

    Attributes:
        kind: The TokenKind classification
        value: Raw text of the token. For strings, the text between the
            quotes exactly as written; escape sequences are not decoded.
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
        filename: Name of the source the token was read from
    """
    kind: TokenKind
    value: str
    line: int
    column: int = 1
    filename: str = "<string>"

    @classmethod
    def identifier(
        cls,
        value: str,
        line: int,
        column: int = 1,
        filename: str = "<string>",
    ) -> "Token":
        """
        Build an identifier token, classifying reserved words as RESERVED.

        This is the only place an identifier's kind is decided.
        """
        kind = TokenKind.RESERVED if is_reserved(value) else TokenKind.IDENTIFIER
        return cls(kind, value, line, column, filename)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.value!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def is_discardable(self) -> bool:
        return self.kind.is_discardable

    @property
    def text(self) -> str:
        """The token exactly as it appeared in the source."""
        if self.kind is TokenKind.STRING:
            return f"{QUOTE}{self.value}{QUOTE}"
        return self.value
