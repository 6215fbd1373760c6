"""
RPAL Lexicon
============

Character classes and reserved words of the RPAL language, defined once
from literal character sets so the lexicon and the scanner cannot drift
apart.

Character Classes
-----------------
| Class       | Members                                          |
|-------------|--------------------------------------------------|
| Letter      | a-z A-Z                                          |
| Digit       | 0-9                                              |
| Operator    | + - * < > & . @ / : = ~ | $ ! # % ^ _ [ ] { } " ?|
| Punctuation | ( ) ; ,                                          |
| Space       | space, tab, newline (and \\r \\f \\v)              |
| Quote       | '                                                |

The classes a token may start with are pairwise disjoint, so the first
character of a token selects exactly one builder. Note that '_' is an
operator symbol when it starts a token but continues an identifier.
"""

from enum import Enum, auto
from typing import Optional
import string


# =============================================================================
# Character Sets
# =============================================================================

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
IDENTIFIER_CHARS = LETTERS | DIGITS | {"_"}

OPERATOR_SYMBOLS = frozenset('+-*<>&.@/:=~|$!#%^_[]{}"?')
PUNCTUATION = frozenset("();,")
SPACES = frozenset(" \t\n\r\f\v")
QUOTE = "'"

# Everything legal inside a string literal apart from the closing quote
STRING_BODY = (
    frozenset(" \t\n\\") | PUNCTUATION | LETTERS | DIGITS | OPERATOR_SYMBOLS
)

# Everything legal inside a // comment apart from the terminating newline
COMMENT_BODY = (
    frozenset(" \t\r'\\") | PUNCTUATION | LETTERS | DIGITS | OPERATOR_SYMBOLS
)

# Characters that may follow a backslash inside a string literal
STRING_ESCAPES = frozenset("tn\\'")


# =============================================================================
# Reserved Words
# =============================================================================

RESERVED_WORDS: frozenset[str] = frozenset({
    # Definitions
    "let", "in", "within", "fn", "where", "aug", "rec", "and",
    # Boolean and comparison operators
    "or", "not", "gr", "ge", "ls", "le", "eq", "ne",
    # Literal values
    "true", "false", "nil", "dummy",
})


# =============================================================================
# Predicates
# =============================================================================

def is_letter(char: str) -> bool:
    return char in LETTERS


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_identifier_char(char: str) -> bool:
    return char in IDENTIFIER_CHARS


def is_operator_symbol(char: str) -> bool:
    return char in OPERATOR_SYMBOLS


def is_punctuation(char: str) -> bool:
    return char in PUNCTUATION


def is_space(char: str) -> bool:
    return char in SPACES


def is_string_body(char: str) -> bool:
    return char in STRING_BODY


def is_comment_body(char: str) -> bool:
    return char in COMMENT_BODY


def is_reserved(word: str) -> bool:
    """Return True if word is one of the RPAL reserved words."""
    return word in RESERVED_WORDS


# =============================================================================
# Start-Character Classification
# =============================================================================

class CharClass(Enum):
    """
    Category selected by the first character of a token.

    Each member corresponds to exactly one token builder.
    """
    LETTER = auto()
    DIGIT = auto()
    OPERATOR = auto()
    QUOTE = auto()
    SPACE = auto()
    PUNCTUATION = auto()


_START_CLASSES: dict[CharClass, frozenset[str]] = {
    CharClass.LETTER: LETTERS,
    CharClass.DIGIT: DIGITS,
    CharClass.OPERATOR: OPERATOR_SYMBOLS,
    CharClass.QUOTE: frozenset(QUOTE),
    CharClass.SPACE: SPACES,
    CharClass.PUNCTUATION: PUNCTUATION,
}

# Flattened lookup table; built once at import
_CLASS_OF: dict[str, CharClass] = {
    char: char_class
    for char_class, chars in _START_CLASSES.items()
    for char in chars
}


def start_class_members(char_class: CharClass) -> frozenset[str]:
    """Return the characters that start a token of the given class."""
    return _START_CLASSES[char_class]


def classify(char: str) -> Optional[CharClass]:
    """
    Classify the first character of a token.

    Args:
        char: A single character

    Returns:
        The CharClass the character belongs to, or None if no token
        can start with it.
    """
    return _CLASS_OF.get(char)
