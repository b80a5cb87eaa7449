"""
Lexical analyzer for the Monkey programming language.

This module provides the token sources consumed by the parser:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with type, literal text, and source location.
    TokenSource: Protocol implemented by anything the parser can pull tokens from.
    Lexer: Converts a CharacterStream into a sequence of tokens.
    TokenStream: Replays a prepared list of tokens.

Features:
    - Skips whitespace
    - Longest-match recognition of operators (`==`, `!=`, `<=`, `>=`)
    - Recognizes identifiers, keywords and integer literals
    - Unknown characters become ILLEGAL tokens instead of raising

Both token sources are idempotent at end of input: once EOF is reached every
further call to ``next_token()`` returns another EOF token.

Example:
    >>> lexer = Lexer(CharacterStream("let x = 5;"))
    >>> lexer.next_token()
    Token(LET, 'let')

Exports:
    - CharacterStream
    - Token
    - TokenSource
    - Lexer
    - TokenStream
    - tokenize
"""

from typing import Any, Iterable, Protocol

from monkey.monkey_constants import EOF, IDENT, ILLEGAL, INT, keywords, operator_tokens


class CharacterStream:
    """Source text with a read cursor that tracks the 1-based line and column."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """Character ``offset`` places ahead of the cursor, "" past either end."""
        index = self.position + offset
        return self.source[index] if 0 <= index < len(self.source) else ""

    def advance(self) -> str:
        if self.at_end():
            raise IndexError(f"read past end of source at line {self.line}")
        char = self.source[self.position]
        self.position += 1
        if char == "\n":
            self.line, self.column = self.line + 1, 1
        else:
            self.column += 1
        return char


class Token:
    """Represents a single lexical token in the Monkey language.

    Attributes:
        type (str): The token type, one of ``monkey_constants.TOKEN_TYPES``.
        literal (str): The exact source text of the token ("" for EOF).
        line (int): The 1-based line number where the token appears.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, type_: str, literal: str, line: int = 0, col: int = 0):
        self.type = type_
        self.literal = literal
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.literal!r})"

    def __str__(self) -> str:
        return f"{{Type:{self.type} Literal:{self.literal}}}"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.literal == other.literal
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.literal, self.line, self.col))


class TokenSource(Protocol):
    """Anything that hands out one token per call and repeats EOF once exhausted."""

    def next_token(self) -> Token: ...


class Lexer:
    """Lexical analyzer for the Monkey language.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self, offset: int = 0) -> str:
        return self.stream.peek(offset)

    def advance(self) -> str:
        return self.stream.advance()

    def skip_whitespace(self) -> None:
        while not self.stream.at_end() and self.peek() in " \t\r\n":
            self.advance()

    def match_operator(self) -> Token | None:
        """Attempts to match the longest operator or delimiter at the current position.

        Returns:
            Token | None: A Token if a match is found, otherwise None.
        """
        line, col = self.stream.line, self.stream.column
        max_token = None
        candidate = ""

        for i in range(2):  # longest spelling is two characters
            ch = self.peek(i)
            if ch == "":
                break
            candidate += ch
            if candidate in operator_tokens:
                max_token = candidate

        if max_token:
            for _ in range(len(max_token)):
                self.advance()
            return Token(operator_tokens[max_token], max_token, line, col)

        return None

    def read_word(self) -> str:
        word = ""
        while not self.stream.at_end() and (
            self.peek().isalnum() or self.peek() == "_"
        ):
            word += self.advance()
        return word

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token, or an EOF token once the source is exhausted.
        """
        self.skip_whitespace()

        if self.stream.at_end():
            return Token(EOF, "", self.stream.line, self.stream.column)

        ch = self.peek()
        line, col = self.stream.line, self.stream.column

        # 1. Identifier or keyword
        if ch.isalpha() or ch == "_":
            ident = self.read_word()
            return Token(keywords.get(ident, IDENT), ident, line, col)

        # 2. Integer literal; conversion (and rejection of "12abc") is the parser's job
        if ch.isdigit():
            return Token(INT, self.read_word(), line, col)

        # 3. Operator or delimiter
        token = self.match_operator()
        if token:
            return token

        # 4. Unknown character
        return Token(ILLEGAL, self.advance(), line, col)


class TokenStream:
    """Replays a fixed list of tokens, then repeats EOF.

    A trailing EOF token is not required; one is synthesized after the last token.
    Anything after the first EOF in ``tokens`` is discarded.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: list[Token] = []
        for tok in tokens:
            self.tokens.append(tok)
            if tok.type == EOF:
                break
        self.position: int = 0

    def next_token(self) -> Token:
        if self.position < len(self.tokens):
            tok = self.tokens[self.position]
            self.position += 1
            return tok
        last = self.tokens[-1] if self.tokens else None
        if last is not None and last.type == EOF:
            return last
        return Token(EOF, "", last.line if last else 0, last.col if last else 0)


def tokenize(source: str) -> list[Token]:
    """Lexes ``source`` into a list of tokens, excluding the final EOF."""
    lexer = Lexer(CharacterStream(source))
    tokens: list[Token] = []
    while True:
        tok = lexer.next_token()
        if tok.type == EOF:
            break
        tokens.append(tok)
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "TokenSource", "TokenStream", "tokenize"]
