"""
Monkey Language Parser

Parses a Monkey token stream into an abstract syntax tree (`Program`).

The parser is a recursive-descent statement parser with a two-token window
(`cur_token` / `peek_token`) over a token source, combined with a Pratt
(operator-precedence) expression parser. Expressions are built by looking up a
*prefix* handler for the current token and then repeatedly extending the left
operand with *infix* handlers while the next operator binds tighter than the
caller's precedence.

Supported Constructs
--------------------
- Statements:
    * `let <ident> = <expr>;`
    * `return <expr>;`
    * `<expr>;` (expression statement, trailing `;` optional)
- Expressions:
    * identifiers, integer literals (any base Python's `int(x, 0)` accepts,
      plus leading-zero octal), `true` / `false`
    * prefix `!` and `-`
    * infix `+ - * / == != < > <= >=`
    * grouping with `( ... )`
    * `if (<cond>) { ... } else { ... }`

Parser Behavior
---------------
- Never raises on malformed input. Each failure appends a message to the
  parser's diagnostics and drops the construct being built; parsing resumes
  with the next statement.
- Expressions nested deeper than `MAX_EXPRESSION_DEPTH` are rejected with an
  "expression nested too deeply" diagnostic instead of exhausting the stack.
- Operators of equal precedence group to the left: `a - b - c` is
  `((a - b) - c)`.

Entry Points
------------
- `Parser(source).parse_program()`: parse until EOF.
- `Parser.errors()`: the diagnostics collected so far.
- `parse(source)`: tokenize and parse a string, returning `(program, errors)`.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from monkey.monkey_ast import (
    BlockStatement,
    Boolean,
    Expression,
    ExpressionStatement,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.monkey_constants import (
    ASSIGN,
    ASTERISK,
    BANG,
    ELSE,
    EOF,
    EQ,
    FALSE,
    GT,
    GTE,
    IDENT,
    IF,
    INT,
    LBRACE,
    LET,
    LPAREN,
    LT,
    LTE,
    MINUS,
    NEQ,
    PLUS,
    RBRACE,
    RETURN,
    RPAREN,
    SEMICOLON,
    SLASH,
    TRUE,
)
from monkey.monkey_lexer import CharacterStream, Lexer, Token, TokenSource

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Nested parse_expression calls allowed before giving up; keeps the deepest
# case (nested `if` blocks, five frames per level) under the recursion limit.
MAX_EXPRESSION_DEPTH = 100


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -X or !X
    CALL = 7  # reserved for myFunction(X)


precedences: dict[str, Precedence] = {
    EQ: Precedence.EQUALS,
    NEQ: Precedence.EQUALS,
    LT: Precedence.LESSGREATER,
    GT: Precedence.LESSGREATER,
    LTE: Precedence.LESSGREATER,
    GTE: Precedence.LESSGREATER,
    PLUS: Precedence.SUM,
    MINUS: Precedence.SUM,
    SLASH: Precedence.PRODUCT,
    ASTERISK: Precedence.PRODUCT,
}


def parse_int_literal(text: str) -> int | None:
    """Converts integer literal text to a signed 64-bit value.

    Accepts decimal, `0x`/`0o`/`0b` prefixed literals, `_` digit separators and
    C-style leading-zero octal (`017` is 15). Returns None if the text is not an
    integer or does not fit in 64 bits.
    """
    try:
        value = int(text, 0)
    except ValueError:
        digits = text.replace("_", "")
        if not (len(digits) > 1 and text[0] == "0" and digits.isdigit()):
            return None
        try:
            value = int(text, 8)
        except ValueError:
            return None
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


class Parser:
    """
    Monkey Parser Class

    Pulls tokens one at a time from a token source and builds a `Program`.

    Attributes
    ----------
    source : TokenSource
        Where tokens come from (a `Lexer`, a `TokenStream`, ...).
    cur_token : Token
        The token under examination.
    peek_token : Token
        The token after `cur_token`.

    The prefix/infix handler tables are fixed class attributes keyed by token
    type; there is no runtime registration.
    """

    def __init__(self, source: TokenSource) -> None:
        self.source = source
        self._errors: list[str] = []
        self._depth = 0
        self.cur_token: Token = source.next_token()
        self.peek_token: Token = source.next_token()

    # Cursor

    def advance(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.source.next_token()

    def current_is(self, type_: str) -> bool:
        return self.cur_token.type == type_

    def peek_is(self, type_: str) -> bool:
        return self.peek_token.type == type_

    def expect(self, type_: str) -> bool:
        """Advances if the peek token has ``type_``; otherwise records an error and stays put."""
        if self.peek_is(type_):
            self.advance()
            return True
        self.peek_error(type_)
        return False

    def peek_precedence(self) -> Precedence:
        return precedences.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return precedences.get(self.cur_token.type, Precedence.LOWEST)

    # Diagnostics

    def errors(self) -> list[str]:
        return list(self._errors)

    def peek_error(self, type_: str) -> None:
        self._errors.append(
            f"expected next token to be {type_}, got {self.peek_token.type} instead"
        )

    def no_prefix_parse_fn_error(self, type_: str) -> None:
        self._errors.append(f"no prefix parse function found for {type_}")

    # Statements

    def parse_program(self) -> Program:
        """Parse statements until EOF. Always returns a Program."""
        statements: list[Statement] = []
        while not self.current_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.advance()
        return Program(statements)

    def parse_statement(self) -> Statement | None:
        if self.cur_token.type == LET:
            return self.parse_let_statement()
        if self.cur_token.type == RETURN:
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement | None:
        tok = self.cur_token
        if not self.expect(IDENT):
            return None
        name = Identifier(self.cur_token, self.cur_token.literal)
        if not self.expect(ASSIGN):
            return None

        self.advance()
        value = self.parse_expression(Precedence.LOWEST)
        if self.peek_is(SEMICOLON):
            self.advance()
        if value is None:
            return None
        return LetStatement(tok, name, value)

    def parse_return_statement(self) -> ReturnStatement | None:
        tok = self.cur_token
        self.advance()
        return_value = self.parse_expression(Precedence.LOWEST)
        if self.peek_is(SEMICOLON):
            self.advance()
        if return_value is None:
            return None
        return ReturnStatement(tok, return_value)

    def parse_expression_statement(self) -> ExpressionStatement | None:
        tok = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)
        if self.peek_is(SEMICOLON):
            self.advance()
        if expression is None:
            return None
        return ExpressionStatement(tok, expression)

    def parse_block_statement(self) -> BlockStatement:
        """Parse from the current `{` up to the matching `}` (or EOF)."""
        tok = self.cur_token
        statements: list[Statement] = []
        self.advance()
        while not self.current_is(RBRACE) and not self.current_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.advance()
        return BlockStatement(tok, statements)

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Expression | None:
        """Pratt loop: build a prefix operand, then absorb tighter-binding infix operators."""
        self._depth += 1
        try:
            if self._depth > MAX_EXPRESSION_DEPTH:
                self._errors.append("expression nested too deeply")
                return None
            prefix = self.prefix_parse_fns.get(self.cur_token.type)
            if prefix is None:
                self.no_prefix_parse_fn_error(self.cur_token.type)
                return None
            left = prefix(self)
            if left is None:
                return None

            while not self.peek_is(SEMICOLON) and precedence < self.peek_precedence():
                infix = self.infix_parse_fns.get(self.peek_token.type)
                if infix is None:
                    return left
                self.advance()
                left = infix(self, left)
                if left is None:
                    return None
            return left
        finally:
            self._depth -= 1

    def parse_identifier(self) -> Expression | None:
        return Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self) -> Expression | None:
        value = parse_int_literal(self.cur_token.literal)
        if value is None:
            self._errors.append(
                f"could not parse {self.cur_token.literal!r} as integer"
            )
            return None
        return IntegerLiteral(self.cur_token, value)

    def parse_boolean(self) -> Expression | None:
        return Boolean(self.cur_token, self.current_is(TRUE))

    def parse_prefix_expression(self) -> Expression | None:
        tok = self.cur_token
        self.advance()
        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return PrefixExpression(tok, tok.literal, right)

    def parse_grouped_expression(self) -> Expression | None:
        self.advance()
        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None
        if not self.expect(RPAREN):
            return None
        return expression

    def parse_if_expression(self) -> Expression | None:
        tok = self.cur_token
        if not self.expect(LPAREN):
            return None
        self.advance()
        condition = self.parse_expression(Precedence.LOWEST)
        if condition is None:
            return None
        if not self.expect(RPAREN):
            return None
        if not self.expect(LBRACE):
            return None
        consequence = self.parse_block_statement()

        alternative = None
        if self.peek_is(ELSE):
            self.advance()
            if not self.expect(LBRACE):
                return None
            alternative = self.parse_block_statement()

        return IfExpression(tok, condition, consequence, alternative)

    def parse_infix_expression(self, left: Expression) -> Expression | None:
        tok = self.cur_token
        precedence = self.cur_precedence()
        self.advance()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(tok, left, tok.literal, right)

    prefix_parse_fns: dict[str, Callable[[Parser], Expression | None]] = {
        IDENT: parse_identifier,
        INT: parse_integer_literal,
        TRUE: parse_boolean,
        FALSE: parse_boolean,
        BANG: parse_prefix_expression,
        MINUS: parse_prefix_expression,
        LPAREN: parse_grouped_expression,
        IF: parse_if_expression,
    }

    infix_parse_fns: dict[str, Callable[[Parser, Expression], Expression | None]] = {
        PLUS: parse_infix_expression,
        MINUS: parse_infix_expression,
        ASTERISK: parse_infix_expression,
        SLASH: parse_infix_expression,
        EQ: parse_infix_expression,
        NEQ: parse_infix_expression,
        LT: parse_infix_expression,
        GT: parse_infix_expression,
        LTE: parse_infix_expression,
        GTE: parse_infix_expression,
    }


def parse(source: str) -> tuple[Program, list[str]]:
    """Tokenize and parse ``source``; returns the program and its diagnostics."""
    parser = Parser(Lexer(CharacterStream(source)))
    program = parser.parse_program()
    return program, parser.errors()
