"""
Defines the abstract syntax tree (AST) for the Monkey programming language.

Classes:
    Node:
        Base class for every tree node. Keeps the originating token for literal
        text reconstruction and provides equality, repr and dict serialisation.

    Program:
        Root node holding the top-level statements in source order.

    Statements:
        LetStatement, ReturnStatement, ExpressionStatement, BlockStatement

    Expressions:
        Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression,
        IfExpression

    NodeDict:
        TypedDict shape of ``Node.to_dict()`` output, suitable for JSON.

Each node owns its children exclusively; the parser builds a node only once all
of its children exist, and nothing mutates it afterwards.

``str(node)`` renders the node back to source-like text with every prefix and
infix expression parenthesized, which makes grouping visible:

    >>> str(program)
    '((a + b) + c)'
"""

from typing import Any, TypedDict, Union

from monkey.monkey_constants import EOF
from monkey.monkey_lexer import Token


class NodeDict(TypedDict, total=False):
    """
    Serialized form of a Node.

    Fields:
        kind (str): Variant name (e.g. "infix", "let", "if").
        line (int): Line of the originating token.
        col (int): Column of the originating token.

    Remaining keys are the variant's own fields; child nodes are nested
    NodeDicts and statement sequences are lists of NodeDicts.
    """

    kind: str
    line: int
    col: int


class Node:
    """Base class of all Monkey AST nodes.

    Subclasses set ``kind`` and list their data attributes in ``fields``; equality,
    repr and ``to_dict()`` are driven by that list.
    """

    kind: str = "node"
    fields: tuple[str, ...] = ()

    def __init__(self, token: Token) -> None:
        self.token = token

    def token_literal(self) -> str:
        return self.token.literal

    def __repr__(self) -> str:
        parts = [f"{name}={getattr(self, name)!r}" for name in self.fields]
        return f"{type(self).__name__}({', '.join(parts)})"

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return self.token == other.token and all(
            getattr(self, name) == getattr(other, name) for name in self.fields
        )

    def to_dict(self) -> NodeDict:
        out: dict[str, Any] = {
            "kind": self.kind,
            "line": self.token.line,
            "col": self.token.col,
        }
        for name in self.fields:
            val = getattr(self, name)
            if isinstance(val, Node):
                val = val.to_dict()
            elif isinstance(val, list):
                val = [v.to_dict() for v in val]
            out[name] = val
        return out  # type: ignore[return-value]


# Expressions


class Identifier(Node):
    kind = "identifier"
    fields = ("value",)

    def __init__(self, token: Token, value: str) -> None:
        super().__init__(token)
        self.value = value

    def __str__(self) -> str:
        return self.value


class IntegerLiteral(Node):
    kind = "integer"
    fields = ("value",)

    def __init__(self, token: Token, value: int) -> None:
        super().__init__(token)
        self.value = value

    def __str__(self) -> str:
        return self.token.literal


class Boolean(Node):
    kind = "boolean"
    fields = ("value",)

    def __init__(self, token: Token, value: bool) -> None:
        super().__init__(token)
        self.value = value

    def __str__(self) -> str:
        return self.token.literal


class PrefixExpression(Node):
    """Unary operator applied to ``right``, e.g. ``-a`` or ``!ok``."""

    kind = "prefix"
    fields = ("operator", "right")

    def __init__(self, token: Token, operator: str, right: "Expression") -> None:
        super().__init__(token)
        self.operator = operator
        self.right = right

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


class InfixExpression(Node):
    """Binary operator; ``token`` is the operator token."""

    kind = "infix"
    fields = ("left", "operator", "right")

    def __init__(
        self, token: Token, left: "Expression", operator: str, right: "Expression"
    ) -> None:
        super().__init__(token)
        self.left = left
        self.operator = operator
        self.right = right

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


class IfExpression(Node):
    """
    Conditional expression.

    Attributes:
        condition (Expression): The parenthesized test.
        consequence (BlockStatement): Body taken when the test holds.
        alternative (BlockStatement | None): The ``else`` body; None iff the
            source has no ``else`` branch.
    """

    kind = "if"
    fields = ("condition", "consequence", "alternative")

    def __init__(
        self,
        token: Token,
        condition: "Expression",
        consequence: "BlockStatement",
        alternative: "BlockStatement | None" = None,
    ) -> None:
        super().__init__(token)
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative

    def __str__(self) -> str:
        out = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out


# Statements


class LetStatement(Node):
    kind = "let"
    fields = ("name", "value")

    def __init__(self, token: Token, name: Identifier, value: "Expression") -> None:
        super().__init__(token)
        self.name = name
        self.value = value

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"


class ReturnStatement(Node):
    kind = "return"
    fields = ("return_value",)

    def __init__(self, token: Token, return_value: "Expression") -> None:
        super().__init__(token)
        self.return_value = return_value

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.return_value};"


class ExpressionStatement(Node):
    """An expression standing on its own; ``token`` is the expression's first token."""

    kind = "expression_statement"
    fields = ("expression",)

    def __init__(self, token: Token, expression: "Expression") -> None:
        super().__init__(token)
        self.expression = expression

    def __str__(self) -> str:
        return str(self.expression)


class BlockStatement(Node):
    """Brace-delimited statement list; ``token`` is the opening ``{``."""

    kind = "block"
    fields = ("statements",)

    def __init__(self, token: Token, statements: list["Statement"]) -> None:
        super().__init__(token)
        self.statements = statements

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


class Program(Node):
    """Root of the tree. Statements keep source order."""

    kind = "program"
    fields = ("statements",)

    def __init__(self, statements: list["Statement"]) -> None:
        first = statements[0].token if statements else Token(EOF, "")
        super().__init__(first)
        self.statements = statements

    def token_literal(self) -> str:
        return self.statements[0].token_literal() if self.statements else ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


Expression = Union[
    Identifier,
    IntegerLiteral,
    Boolean,
    PrefixExpression,
    InfixExpression,
    IfExpression,
]

Statement = Union[
    LetStatement,
    ReturnStatement,
    ExpressionStatement,
    BlockStatement,
]
