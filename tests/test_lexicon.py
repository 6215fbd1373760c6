# =============================================================================
# test_lexicon.py - Lexicon Unit Tests
# =============================================================================
# Tests for the RPAL character classes and reserved words.
# =============================================================================

from itertools import combinations

import pytest
from rpal_scanner.lexicon import (
    CharClass,
    OPERATOR_SYMBOLS,
    RESERVED_WORDS,
    classify,
    is_comment_body,
    is_identifier_char,
    is_operator_symbol,
    is_reserved,
    is_space,
    is_string_body,
    start_class_members,
)


class TestCharacterClasses:
    """Test character class membership."""

    def test_start_classes_are_disjoint(self):
        """The first character of a token selects exactly one class."""
        for a, b in combinations(CharClass, 2):
            assert not (start_class_members(a) & start_class_members(b)), (a, b)

    @pytest.mark.parametrize("char, expected", [
        ("a", CharClass.LETTER),
        ("Z", CharClass.LETTER),
        ("7", CharClass.DIGIT),
        ("+", CharClass.OPERATOR),
        ("_", CharClass.OPERATOR),
        ('"', CharClass.OPERATOR),
        ("'", CharClass.QUOTE),
        (" ", CharClass.SPACE),
        ("\n", CharClass.SPACE),
        ("\t", CharClass.SPACE),
        ("(", CharClass.PUNCTUATION),
        (",", CharClass.PUNCTUATION),
    ])
    def test_classify(self, char, expected):
        assert classify(char) is expected

    @pytest.mark.parametrize("char", ["`", "é", "\x00", "\\"])
    def test_unclassifiable(self, char):
        assert classify(char) is None

    def test_underscore_continues_identifiers(self):
        assert is_identifier_char("_")
        assert is_operator_symbol("_")

    def test_operator_symbols(self):
        assert OPERATOR_SYMBOLS == frozenset('+-*<>&.@/:=~|$!#%^_[]{}"?')

    def test_space(self):
        assert is_space("\r")
        assert not is_space("x")


class TestBodyClasses:
    """Test the characters allowed inside strings and comments."""

    def test_string_body(self):
        assert is_string_body("\\")
        assert is_string_body("\n")
        assert is_string_body(";")
        assert not is_string_body("'")
        assert not is_string_body("\r")

    def test_comment_body(self):
        assert is_comment_body("'")
        assert is_comment_body("\r")
        assert is_comment_body("\\")
        assert not is_comment_body("\n")


class TestReservedWords:
    """Test the reserved word set."""

    def test_reserved_word_count(self):
        assert len(RESERVED_WORDS) == 20

    @pytest.mark.parametrize("word", ["let", "in", "within", "fn", "where",
                                      "aug", "or", "not", "gr", "ge", "ls",
                                      "le", "eq", "ne", "true", "false", "nil",
                                      "dummy", "rec", "and"])
    def test_is_reserved(self, word):
        assert is_reserved(word)

    @pytest.mark.parametrize("word", ["Let", "lets", "x", "", "print"])
    def test_not_reserved(self, word):
        assert not is_reserved(word)
