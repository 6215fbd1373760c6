"""
RPAL Scanner - Lexical Analysis for RPAL
========================================

This package converts source text of RPAL, a small functional language,
into a stream of classified tokens for a downstream parser.

Main Components
---------------
- **scanner**: the Scanner facade and convenience functions
    Pulls one token at a time from a file or string

- **builders**: maximal-munch routines, one per token category

- **source**: CharacterSource, a character cursor with one-character pushback

- **lexicon**: character classes and reserved words

- **tokens**: TokenKind and the immutable Token record

Quick Start
-----------
Scan a file:
    >>> from rpal_scanner import Scanner
    >>> with Scanner("fact.rpal") as scanner:
    ...     for token in scanner:
    ...         print(token)

Scan a string, dropping whitespace and comments:
    >>> from rpal_scanner import tokenize
    >>> tokenize("let x = 5 in x", screened=True)

Or use the command-line tool:
    $ rpalscan fact.rpal
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from rpal_scanner.errors import (
    RpalError,
    SourceLocation,
    ScannerError,
    UnterminatedStringError,
    InvalidCharacterError,
    ScannerIOError,
)
from rpal_scanner.lexicon import CharClass, RESERVED_WORDS, classify
from rpal_scanner.tokens import Token, TokenKind
from rpal_scanner.source import CharacterSource
from rpal_scanner.builders import TokenBuilder
from rpal_scanner.scanner import (
    Scanner,
    ScannerOptions,
    screen,
    render_tokens,
    tokenize,
    tokenize_file,
)

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "CharacterSource",
    "TokenBuilder",
    "screen",
    "render_tokens",
    "tokenize",
    "tokenize_file",
    # Tokens and lexicon
    "Token",
    "TokenKind",
    "CharClass",
    "RESERVED_WORDS",
    "classify",
    # Exception hierarchy
    "RpalError",
    "SourceLocation",
    "ScannerError",
    "UnterminatedStringError",
    "InvalidCharacterError",
    "ScannerIOError",
]
