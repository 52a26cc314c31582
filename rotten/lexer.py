"""Turning source text into a list of tokens."""

from __future__ import annotations

from enum import Enum

from rotten.token import Token, TokenPosition, TokenType, TokenValue

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Characters that may be followed by '=' to form a two-character operator.
_EQUAL_PAIRS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

_DIGITS = "0123456789"


def _is_digit(char: str) -> bool:
    return char != "" and char in _DIGITS


def _is_alpha_start(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_alphanumeric(char: str) -> bool:
    return char.isascii() and char.isalnum()


class LexerErrorMessage(Enum):
    """Reasons the lexer can fail."""

    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."
    NUMBER_PARSE_ERROR = "Failed to parse number."


class LexerError(Exception):
    """A failure while scanning, with the offending lexeme and position."""

    def __init__(self, message: LexerErrorMessage, lexeme: str, position: TokenPosition):
        self.message = message
        self.lexeme = lexeme
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"[{self.position.row}:{self.position.column}] "
            f"Error: {self.message.value}\n{self.lexeme}"
        )


class Reader:
    """A cursor over the source characters that tracks row and column."""

    def __init__(self, source: str):
        self._source = source
        self._start = 0
        self._current = 0
        self.row = 1
        self.column = 1

    @property
    def position(self) -> TokenPosition:
        return TokenPosition(self.row, self.column)

    def _error(self, message: LexerErrorMessage, lexeme: str | None = None) -> LexerError:
        return LexerError(
            message,
            self.current_lexeme() if lexeme is None else lexeme,
            self.position,
        )

    def advance(self) -> str:
        """Consume and return the next character; raise at the end of input."""
        if self.is_at_end():
            raise self._error(LexerErrorMessage.UNEXPECTED_CHARACTER)
        char = self._source[self._current]
        self._current += 1
        self.column += 1
        return char

    def next_is(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self.is_at_end() or self._source[self._current] != expected:
            return False
        self.advance()
        return True

    def next_row(self) -> None:
        self.row += 1
        self.column = 1

    def peek(self) -> str:
        """The next character, or NUL at the end of input."""
        return self._char_at(self._current)

    def peek_next(self) -> str:
        """The character after the next one, or NUL past the end."""
        return self._char_at(self._current + 1)

    def _char_at(self, index: int) -> str:
        return self._source[index] if index < len(self._source) else "\0"

    def is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def current_lexeme(self) -> str:
        return self._source[self._start:self._current]

    def calculate_column(self, lexeme_len: int) -> int:
        """Column where a lexeme of ``lexeme_len`` ending here started."""
        return self.column - lexeme_len

    def start_to_current(self) -> None:
        self._start = self._current


class Scanner:
    """Scans a whole source text into tokens."""

    def __init__(self, source: str):
        self._reader = Reader(source)
        self._tokens: list[Token] = []

    def scan_tokens(self) -> list[Token]:
        """Scan the entire source, ending with an end-of-file token."""
        reader = self._reader
        while not reader.is_at_end():
            reader.start_to_current()
            self._scan_token()

        self._tokens.append(
            Token(TokenType.END_OF_FILE, None, "", TokenPosition(reader.row, reader.column))
        )
        return list(self._tokens)

    def _scan_token(self) -> None:
        reader = self._reader
        char = reader.advance()

        if char in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[char])
        elif char in _EQUAL_PAIRS:
            single, double = _EQUAL_PAIRS[char]
            self._add_token(double if reader.next_is("=") else single)
        elif char == "/":
            self._slash()
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha_start(char):
            self._identifier()
        elif char in "\r\t ":
            pass
        elif char in "\n\0":
            reader.next_row()
        else:
            raise reader._error(LexerErrorMessage.UNEXPECTED_CHARACTER)

    def _slash(self) -> None:
        reader = self._reader
        if reader.next_is("/"):
            while reader.peek() != "\n" and not reader.is_at_end():
                reader.advance()
        elif reader.next_is("*"):
            while reader.peek() != "*" and reader.peek_next() != "/":
                if reader.is_at_end():
                    break
                reader.advance()
            if not reader.is_at_end():
                reader.advance()  # *
                reader.advance()  # /
        else:
            self._add_token(TokenType.SLASH)

    def _string(self) -> None:
        reader = self._reader
        while reader.peek() != '"' and not reader.is_at_end():
            if reader.peek() == "\n":
                reader.next_row()
            reader.advance()

        if reader.is_at_end():
            raise reader._error(LexerErrorMessage.UNTERMINATED_STRING)

        reader.advance()  # closing quote
        lexeme = reader.current_lexeme()
        self._add_token(TokenType.STRING, lexeme[1:-1])

    def _number(self) -> None:
        reader = self._reader
        while _is_digit(reader.peek()):
            reader.advance()

        if reader.peek() == "." and _is_digit(reader.peek_next()):
            reader.advance()
            while _is_digit(reader.peek()):
                reader.advance()

        lexeme = reader.current_lexeme()
        try:
            value = float(lexeme)
        except ValueError:
            raise reader._error(LexerErrorMessage.NUMBER_PARSE_ERROR, lexeme) from None
        self._add_token(TokenType.NUMBER, value)

    def _identifier(self) -> None:
        reader = self._reader
        while _is_alphanumeric(reader.peek()):
            reader.advance()

        lexeme = reader.current_lexeme()
        self._add_token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER))

    def _add_token(self, kind: TokenType, value: TokenValue | None = None) -> None:
        reader = self._reader
        lexeme = reader.current_lexeme()
        # Columns are counted back by the lexeme's encoded length.
        column = reader.calculate_column(len(lexeme.encode("utf-8")))
        self._tokens.append(Token(kind, value, lexeme, TokenPosition(reader.row, column)))


def scan(source: str) -> list[Token]:
    """Scan ``source`` into a list of tokens; raise LexerError on bad input."""
    return Scanner(source).scan_tokens()