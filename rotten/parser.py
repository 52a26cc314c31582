"""Recursive-descent parser that turns tokens into an expression tree."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional

from rotten.nodes import (
    BinaryExpression,
    GroupingExpression,
    LiteralExpression,
    Node,
    UnaryExpression,
)
from rotten.token import Nil, Token, TokenType


class ParserErrorMessage(Enum):
    """Reasons the parser can fail."""

    GET_TOKEN_ERROR = "Failed to get token"
    LITERAL_TOKEN_WITHOUT_VALUE = "Literal type token without value"
    UNEXPECTED_TOKEN_TYPE = "Unexpected token type"
    EXPECT_RIGHT_PARENTHESIS = "'}' expected"


class ParserError(Exception):
    """A failure while parsing, optionally tied to the offending token."""

    def __init__(self, message: ParserErrorMessage, token: Optional[Token] = None):
        self.message = message
        self.token = token
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.token is None:
            return f"Error: {self.message.value}"
        position = self.token.position
        return (
            f"[{position.row}:{position.column}] "
            f"Error: {self.message.value}\n{self.token.lexeme}"
        )


_STATEMENT_STARTS = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.RETURN,
    }
)


class Parser:
    """Parses a list of tokens into a syntax tree."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = list(tokens)
        self._current = 0

    def parse(self) -> Node:
        """Parse one expression from the current position."""
        return self._expression()

    # Token cursor.

    def _peek(self) -> Token:
        if self._current < len(self._tokens):
            return self._tokens[self._current]
        raise ParserError(ParserErrorMessage.GET_TOKEN_ERROR)

    def _previous(self) -> Token:
        index = self._current - 1
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        raise ParserError(ParserErrorMessage.GET_TOKEN_ERROR)

    def _is_at_end(self) -> bool:
        try:
            return self._peek().kind == TokenType.END_OF_FILE
        except ParserError:
            return True

    def _check(self, kind: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._peek().kind == kind

    def _advance(self) -> Token:
        if not self._is_at_end():
            self._current += 1
        return self._previous()

    def _match(self, *kinds: TokenType) -> bool:
        if any(self._check(kind) for kind in kinds):
            self._advance()
            return True
        return False

    def _synchronize(self) -> None:
        """Skip tokens until a likely statement boundary."""
        self._advance()
        while not self._is_at_end():
            if self._previous().kind == TokenType.SEMICOLON:
                return
            if self._peek().kind in _STATEMENT_STARTS:
                return
            self._advance()

    # Grammar.

    def _binary(self, operand: Callable[[], Node], *kinds: TokenType) -> Node:
        expr = operand()
        while self._match(*kinds):
            operator = self._previous()
            right = operand()
            expr = BinaryExpression(expr, operator, right)
        return expr

    def _expression(self) -> Node:
        return self._equality()

    def _equality(self) -> Node:
        return self._binary(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Node:
        return self._binary(
            self._term,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def _term(self) -> Node:
        return self._binary(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Node:
        return self._binary(self._unary, TokenType.SLASH, TokenType.STAR)

    def _unary(self) -> Node:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return UnaryExpression(operator, right)
        return self._primary()

    def _primary(self) -> Node:
        if self._match(TokenType.FALSE):
            return LiteralExpression(False)
        if self._match(TokenType.TRUE):
            return LiteralExpression(True)
        if self._match(TokenType.NIL):
            return LiteralExpression(Nil())

        if self._match(TokenType.NUMBER, TokenType.STRING):
            previous = self._previous()
            if previous.value is None:
                raise ParserError(ParserErrorMessage.LITERAL_TOKEN_WITHOUT_VALUE, previous)
            return LiteralExpression(previous.value)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            if not self._check(TokenType.RIGHT_PAREN):
                raise ParserError(ParserErrorMessage.EXPECT_RIGHT_PARENTHESIS, self._peek())
            self._advance()
            return GroupingExpression(expr)

        raise ParserError(ParserErrorMessage.UNEXPECTED_TOKEN_TYPE, self._previous())