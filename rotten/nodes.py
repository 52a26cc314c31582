"""Syntax tree nodes and the visitor interfaces that walk them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from rotten.token import Token, TokenValue

T = TypeVar("T")


class ExpressionVisitor(ABC, Generic[T]):
    """Operations over every kind of expression node."""

    @abstractmethod
    def visit_assign_expr(self, expression: AssignExpression) -> T: ...

    @abstractmethod
    def visit_binary_expr(self, expression: BinaryExpression) -> T: ...

    @abstractmethod
    def visit_call_expr(self, expression: CallExpression) -> T: ...

    @abstractmethod
    def visit_get_expr(self, expression: GetExpression) -> T: ...

    @abstractmethod
    def visit_grouping_expr(self, expression: GroupingExpression) -> T: ...

    @abstractmethod
    def visit_literal_expr(self, expression: LiteralExpression) -> T: ...

    @abstractmethod
    def visit_logical_expr(self, expression: LogicalExpression) -> T: ...

    @abstractmethod
    def visit_set_expr(self, expression: SetExpression) -> T: ...

    @abstractmethod
    def visit_super_expr(self, expression: SuperExpression) -> T: ...

    @abstractmethod
    def visit_this_expr(self, expression: ThisExpression) -> T: ...

    @abstractmethod
    def visit_unary_expr(self, expression: UnaryExpression) -> T: ...

    @abstractmethod
    def visit_variable_expr(self, expression: VariableExpression) -> T: ...


class StatementVisitor(ABC, Generic[T]):
    """Operations over every kind of statement node."""

    @abstractmethod
    def visit_block_stmt(self, statement: BlockStatement) -> T: ...

    @abstractmethod
    def visit_class_stmt(self, statement: ClassStatement) -> T: ...

    @abstractmethod
    def visit_expression_stmt(self, statement: ExpressionStatement) -> T: ...

    @abstractmethod
    def visit_function_stmt(self, statement: FunctionStatement) -> T: ...

    @abstractmethod
    def visit_if_stmt(self, statement: IfStatement) -> T: ...

    @abstractmethod
    def visit_return_stmt(self, statement: ReturnStatement) -> T: ...

    @abstractmethod
    def visit_var_stmt(self, statement: VarStatement) -> T: ...

    @abstractmethod
    def visit_while_stmt(self, statement: WhileStatement) -> T: ...

    @abstractmethod
    def visit_for_stmt(self, statement: ForStatement) -> T: ...


class Visitor(ExpressionVisitor[T], StatementVisitor[T]):
    """A visitor over both expressions and statements."""


class Node(ABC):
    """A node of the syntax tree."""

    @abstractmethod
    def accept(self, visitor):
        """Dispatch to the visitor method for this kind of node."""


# Expressions.


@dataclass
class AssignExpression(Node):
    token: Token
    value: Node

    def accept(self, visitor):
        return visitor.visit_assign_expr(self)


@dataclass
class BinaryExpression(Node):
    left: Node
    operator: Token
    right: Node

    def accept(self, visitor):
        return visitor.visit_binary_expr(self)


@dataclass
class CallExpression(Node):
    callee: Node
    paren: Token
    arguments: list[Node] = field(default_factory=list)

    def accept(self, visitor):
        return visitor.visit_call_expr(self)


@dataclass
class GetExpression(Node):
    object: Node
    name: Token

    def accept(self, visitor):
        return visitor.visit_get_expr(self)


@dataclass
class GroupingExpression(Node):
    expression: Node

    def accept(self, visitor):
        return visitor.visit_grouping_expr(self)


@dataclass
class LiteralExpression(Node):
    value: TokenValue

    def accept(self, visitor):
        return visitor.visit_literal_expr(self)


@dataclass
class LogicalExpression(Node):
    left: Node
    operator: Token
    right: Node

    def accept(self, visitor):
        return visitor.visit_logical_expr(self)


@dataclass
class SetExpression(Node):
    object: Node
    name: Token
    value: Node

    def accept(self, visitor):
        return visitor.visit_set_expr(self)


@dataclass
class SuperExpression(Node):
    keyword: Token
    method: Token

    def accept(self, visitor):
        return visitor.visit_super_expr(self)


@dataclass
class ThisExpression(Node):
    keyword: Token

    def accept(self, visitor):
        return visitor.visit_this_expr(self)


@dataclass
class UnaryExpression(Node):
    operator: Token
    right: Node

    def accept(self, visitor):
        return visitor.visit_unary_expr(self)


@dataclass
class VariableExpression(Node):
    name: Token

    def accept(self, visitor):
        return visitor.visit_variable_expr(self)


# Statements.


@dataclass
class BlockStatement(Node):
    statements: list[Node] = field(default_factory=list)

    def accept(self, visitor):
        return visitor.visit_block_stmt(self)


@dataclass
class ClassStatement(Node):
    name: Token
    superclass: Optional[Node] = None
    methods: list[Node] = field(default_factory=list)

    def accept(self, visitor):
        return visitor.visit_class_stmt(self)


@dataclass
class ExpressionStatement(Node):
    expression: Node

    def accept(self, visitor):
        return visitor.visit_expression_stmt(self)


@dataclass
class ForStatement(Node):
    initializer: Optional[Node]
    condition: Optional[Node]
    increment: Optional[Node]
    body: Node

    def accept(self, visitor):
        return visitor.visit_for_stmt(self)


@dataclass
class FunctionStatement(Node):
    name: Token
    params: list[Token] = field(default_factory=list)
    body: list[Node] = field(default_factory=list)

    def accept(self, visitor):
        return visitor.visit_function_stmt(self)


@dataclass
class IfStatement(Node):
    condition: Node
    then_branch: Node
    else_branch: Optional[Node] = None

    def accept(self, visitor):
        return visitor.visit_if_stmt(self)


@dataclass
class ReturnStatement(Node):
    keyword: Token
    value: Optional[Node] = None

    def accept(self, visitor):
        return visitor.visit_return_stmt(self)


@dataclass
class VarStatement(Node):
    name: Token
    initializer: Optional[Node] = None

    def accept(self, visitor):
        return visitor.visit_var_stmt(self)


@dataclass
class WhileStatement(Node):
    condition: Node
    body: Node

    def accept(self, visitor):
        return visitor.visit_while_stmt(self)