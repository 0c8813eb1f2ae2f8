"""Lexer tests covering keywords, operators, literals and positions."""

import pytest

from ember.lexer import Lexer
from ember.ember_token import *


def _types_and_literals(source):
    return [(tok.type, tok.literal) for tok in Lexer(source).tokens()]


def test_fn_keyword_token():
    lexer = Lexer("fn")
    token = lexer.next_token()
    assert token.type == FUNCTION
    assert token.literal == "fn"
    assert lexer.next_token().type == EOF


def test_let_followed_by_identifier():
    lexer = Lexer("let simplest")
    first = lexer.next_token()
    second = lexer.next_token()

    assert first.type == LET
    assert second.type == IDENT
    assert second.literal == "simplest"
    assert lexer.next_token().type == EOF


def test_full_statement_sequence():
    source = 'let add = fn(x, y) { x + y; };\nlet result = add(five, ten);'
    assert _types_and_literals(source) == [
        (LET, "let"), (IDENT, "add"), (ASSIGN, "="), (FUNCTION, "fn"),
        (LPAREN, "("), (IDENT, "x"), (COMMA, ","), (IDENT, "y"), (RPAREN, ")"),
        (LBRACE, "{"), (IDENT, "x"), (PLUS, "+"), (IDENT, "y"), (SEMICOLON, ";"),
        (RBRACE, "}"), (SEMICOLON, ";"),
        (LET, "let"), (IDENT, "result"), (ASSIGN, "="), (IDENT, "add"),
        (LPAREN, "("), (IDENT, "five"), (COMMA, ","), (IDENT, "ten"), (RPAREN, ")"),
        (SEMICOLON, ";"), (EOF, ""),
    ]


@pytest.mark.parametrize("source, expected_type", [
    ("==", EQ),
    ("!=", NOT_EQ),
    ("<=", LTE),
    (">=", GTE),
    ("<", LT),
    (">", GT),
    ("!", BANG),
    ("=", ASSIGN),
    ("*", STAR),
    ("/", SLASH),
    ("[", LBRACKET),
    ("]", RBRACKET),
])
def test_operator_tokens(source, expected_type):
    token = Lexer(source).next_token()
    assert token.type == expected_type
    assert token.literal == source


@pytest.mark.parametrize("word, expected_type", [
    ("true", TRUE),
    ("false", FALSE),
    ("null", NULL),
    ("if", IF),
    ("else", ELSE),
    ("return", RETURN),
    ("iffy", IDENT),
    ("_private9", IDENT),
])
def test_keyword_lookup(word, expected_type):
    assert Lexer(word).next_token().type == expected_type


def test_string_with_escapes():
    token = Lexer(r'"a\tb\n\"q\" \\"').next_token()
    assert token.type == STRING
    assert token.literal == 'a\tb\n"q" \\'


def test_unterminated_string_is_illegal():
    token = Lexer('"never closed').next_token()
    assert token.type == ILLEGAL
    assert token.literal == '"never closed'


def test_unknown_character_is_illegal():
    tokens = _types_and_literals("1 @ 2")
    assert tokens == [(INT, "1"), (ILLEGAL, "@"), (INT, "2"), (EOF, "")]


def test_comments_are_skipped():
    source = "// leading comment\nlet x = 1; # trailing\n5"
    assert _types_and_literals(source) == [
        (LET, "let"), (IDENT, "x"), (ASSIGN, "="), (INT, "1"), (SEMICOLON, ";"),
        (INT, "5"), (EOF, ""),
    ]


def test_slash_is_division_not_comment():
    assert _types_and_literals("4 / 2") == [(INT, "4"), (SLASH, "/"), (INT, "2"), (EOF, "")]


def test_line_and_column_tracking():
    tokens = Lexer("let x\n  = 10").tokens()
    positions = [(tok.literal, tok.line, tok.column) for tok in tokens[:-1]]
    assert positions == [("let", 1, 1), ("x", 1, 5), ("=", 2, 3), ("10", 2, 5)]


def test_eof_repeats():
    lexer = Lexer("")
    assert lexer.next_token().type == EOF
    assert lexer.next_token().type == EOF
