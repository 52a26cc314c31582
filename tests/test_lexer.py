import pytest

from rotten.lexer import (
    KEYWORDS,
    LexerError,
    LexerErrorMessage,
    Reader,
    Scanner,
    scan,
)
from rotten.token import Token, TokenPosition, TokenType


def pos(row, column):
    return TokenPosition(row, column)


def tok(kind, value, lexeme, position):
    return Token(kind, value, lexeme, position)


def test_simple_arithmetic():
    assert scan("1 + 2;") == [
        tok(TokenType.NUMBER, 1.0, "1", pos(1, 1)),
        tok(TokenType.PLUS, None, "+", pos(1, 3)),
        tok(TokenType.NUMBER, 2.0, "2", pos(1, 5)),
        tok(TokenType.SEMICOLON, None, ";", pos(1, 6)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 7)),
    ]


def test_keywords_and_identifiers():
    assert scan("var x = 5.42;") == [
        tok(TokenType.VAR, None, "var", pos(1, 1)),
        tok(TokenType.IDENTIFIER, None, "x", pos(1, 5)),
        tok(TokenType.EQUAL, None, "=", pos(1, 7)),
        tok(TokenType.NUMBER, 5.42, "5.42", pos(1, 9)),
        tok(TokenType.SEMICOLON, None, ";", pos(1, 13)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 14)),
    ]


def test_string():
    assert scan('"hello"') == [
        tok(TokenType.STRING, "hello", '"hello"', pos(1, 1)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 8)),
    ]


def test_line_comment():
    assert scan("// comment\nvar y = 10;") == [
        tok(TokenType.VAR, None, "var", pos(2, 1)),
        tok(TokenType.IDENTIFIER, None, "y", pos(2, 5)),
        tok(TokenType.EQUAL, None, "=", pos(2, 7)),
        tok(TokenType.NUMBER, 10.0, "10", pos(2, 9)),
        tok(TokenType.SEMICOLON, None, ";", pos(2, 11)),
        tok(TokenType.END_OF_FILE, None, "", pos(2, 12)),
    ]


def test_block_comment():
    assert scan("/* comment */ var z = 1;") == [
        tok(TokenType.VAR, None, "var", pos(1, 15)),
        tok(TokenType.IDENTIFIER, None, "z", pos(1, 19)),
        tok(TokenType.EQUAL, None, "=", pos(1, 21)),
        tok(TokenType.NUMBER, 1.0, "1", pos(1, 23)),
        tok(TokenType.SEMICOLON, None, ";", pos(1, 24)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 25)),
    ]


def test_multi_char_operators():
    assert scan("a != b == c") == [
        tok(TokenType.IDENTIFIER, None, "a", pos(1, 1)),
        tok(TokenType.BANG_EQUAL, None, "!=", pos(1, 3)),
        tok(TokenType.IDENTIFIER, None, "b", pos(1, 6)),
        tok(TokenType.EQUAL_EQUAL, None, "==", pos(1, 8)),
        tok(TokenType.IDENTIFIER, None, "c", pos(1, 11)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 12)),
    ]


def test_less_equal():
    assert scan("1 <= 2") == [
        tok(TokenType.NUMBER, 1.0, "1", pos(1, 1)),
        tok(TokenType.LESS_EQUAL, None, "<=", pos(1, 3)),
        tok(TokenType.NUMBER, 2.0, "2", pos(1, 6)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 7)),
    ]


def test_greater_equal():
    assert scan("1 >= 2") == [
        tok(TokenType.NUMBER, 1.0, "1", pos(1, 1)),
        tok(TokenType.GREATER_EQUAL, None, ">=", pos(1, 3)),
        tok(TokenType.NUMBER, 2.0, "2", pos(1, 6)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 7)),
    ]


def test_unexpected_character():
    with pytest.raises(LexerError) as info:
        scan("@")
    expected = LexerError(LexerErrorMessage.UNEXPECTED_CHARACTER, "@", pos(1, 2))
    assert str(info.value) == str(expected)
    assert str(info.value) == "[1:2] Error: Unexpected character.\n@"


def test_unterminated_string():
    with pytest.raises(LexerError) as info:
        scan('"unterminated')
    expected = LexerError(LexerErrorMessage.UNTERMINATED_STRING, '"unterminated', pos(1, 14))
    assert str(info.value) == str(expected)
    assert info.value.message is LexerErrorMessage.UNTERMINATED_STRING


def test_empty_input():
    assert scan("") == [tok(TokenType.END_OF_FILE, None, "", pos(1, 1))]


def test_whitespace_only():
    assert scan(" \t\n ") == [tok(TokenType.END_OF_FILE, None, "", pos(2, 2))]


def test_multiline_string():
    assert scan('"line1\\nline2"') == [
        tok(TokenType.STRING, "line1\\nline2", '"line1\\nline2"', pos(1, 1)),
        tok(TokenType.END_OF_FILE, None, "", pos(1, 15)),
    ]


def test_unterminated_block_comment():
    assert scan("/* unterminated") == [tok(TokenType.END_OF_FILE, None, "", pos(1, 16))]


def test_unicode_identifier():
    with pytest.raises(LexerError) as info:
        scan("π = 3.14;")
    expected = LexerError(LexerErrorMessage.UNEXPECTED_CHARACTER, "π", pos(1, 2))
    assert str(info.value) == str(expected)


def test_scanner_class_matches_scan_function():
    source = "var x = (1 + 2) * 3;"
    assert Scanner(source).scan_tokens() == scan(source)


@pytest.mark.parametrize("word", sorted(KEYWORDS))
def test_every_keyword_is_recognised(word):
    tokens = scan(word)
    assert tokens[0].kind is KEYWORDS[word]
    assert tokens[0].lexeme == word
    assert tokens[-1].kind is TokenType.END_OF_FILE


def test_slash_and_single_operators():
    kinds = [token.kind for token in scan("/ ! = < > ( ) { } , . - + ; *")]
    assert kinds == [
        TokenType.SLASH,
        TokenType.BANG,
        TokenType.EQUAL,
        TokenType.LESS,
        TokenType.GREATER,
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SEMICOLON,
        TokenType.STAR,
        TokenType.END_OF_FILE,
    ]


def test_number_followed_by_dot_without_digits():
    tokens = scan("12.")
    assert [(t.kind, t.lexeme) for t in tokens] == [
        (TokenType.NUMBER, "12"),
        (TokenType.DOT, "."),
        (TokenType.END_OF_FILE, ""),
    ]
    assert tokens[0].value == 12.0


def test_reader_peek_and_advance():
    reader = Reader("ab")
    assert reader.peek() == "a"
    assert reader.peek_next() == "b"
    assert reader.advance() == "a"
    assert reader.peek_next() == "\0"
    assert reader.advance() == "b"
    assert reader.is_at_end()
    assert reader.peek() == "\0"
    assert reader.current_lexeme() == "ab"


def test_reader_advance_at_end_raises():
    reader = Reader("")
    with pytest.raises(LexerError) as info:
        reader.advance()
    assert info.value.message is LexerErrorMessage.UNEXPECTED_CHARACTER
    assert info.value.position == pos(1, 1)


def test_reader_next_is_only_consumes_on_match():
    reader = Reader("=x")
    assert not reader.next_is("x")
    assert reader.next_is("=")
    assert reader.column == 2
    assert not reader.next_is("=")


def test_reader_rows_and_columns():
    reader = Reader("abc")
    reader.advance()
    reader.advance()
    assert reader.calculate_column(2) == 1
    reader.start_to_current()
    assert reader.current_lexeme() == ""
    reader.next_row()
    assert (reader.row, reader.column) == (2, 1)