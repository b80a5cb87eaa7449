"""
Token vocabulary for the Monkey language.

The set of token types is closed: the lexer never produces a type that is not
listed in ``TOKEN_TYPES`` and the parser dispatches on nothing else.

Exports:
    - one constant per token type (``IDENT``, ``INT``, ``PLUS``, ...)
    - TOKEN_TYPES: every token type, in declaration order
    - keywords: keyword spelling -> token type
    - operator_tokens: operator/delimiter spelling -> token type
    - token_hashmap: keywords and operator_tokens merged
"""

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
INT = "INT"

# Operators
ASSIGN = "ASSIGN"
PLUS = "PLUS"
MINUS = "MINUS"
BANG = "BANG"
ASTERISK = "ASTERISK"
SLASH = "SLASH"

LT = "LT"
GT = "GT"
LTE = "LTE"
GTE = "GTE"
EQ = "EQ"
NEQ = "NEQ"

# Delimiters
COMMA = "COMMA"
SEMICOLON = "SEMICOLON"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
LBRACE = "LBRACE"
RBRACE = "RBRACE"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

TOKEN_TYPES: tuple[str, ...] = (
    ILLEGAL,
    EOF,
    IDENT,
    INT,
    ASSIGN,
    PLUS,
    MINUS,
    BANG,
    ASTERISK,
    SLASH,
    LT,
    GT,
    LTE,
    GTE,
    EQ,
    NEQ,
    COMMA,
    SEMICOLON,
    LPAREN,
    RPAREN,
    LBRACE,
    RBRACE,
    FUNCTION,
    LET,
    TRUE,
    FALSE,
    IF,
    ELSE,
    RETURN,
)

keywords: dict[str, str] = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

operator_tokens: dict[str, str] = {
    "=": ASSIGN,
    "+": PLUS,
    "-": MINUS,
    "!": BANG,
    "*": ASTERISK,
    "/": SLASH,
    "<": LT,
    ">": GT,
    "<=": LTE,
    ">=": GTE,
    "==": EQ,
    "!=": NEQ,
    ",": COMMA,
    ";": SEMICOLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
}

token_hashmap: dict[str, str] = {**operator_tokens, **keywords}
