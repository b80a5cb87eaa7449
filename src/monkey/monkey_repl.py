"""
Interactive read-eval-print loop for Monkey.

Reads one line at a time. In ``tokens`` mode every token of the line is printed
as ``{Type:<TYPE> Literal:<text>}``; in ``parse`` mode the line is parsed and
the rendered program (or the parser's diagnostics) is printed.

Commands:
    exit / quit     leave the REPL
    parse-mode      switch to parse mode
    tokens-mode     switch to tokens mode
"""

from monkey.monkey_constants import EOF
from monkey.monkey_lexer import CharacterStream, Lexer
from monkey.monkey_parser import parse

PROMPT = ">> "
MODES = ("tokens", "parse")


def print_tokens(src: str) -> None:
    lexer = Lexer(CharacterStream(src))
    tok = lexer.next_token()
    while tok.type != EOF:
        print(tok)
        tok = lexer.next_token()


def print_parse_errors(errors: list[str]) -> None:
    print("[error] >>>")
    for msg in errors:
        print(f"\t{msg}")


def print_program(src: str) -> None:
    program, errors = parse(src)
    if errors:
        print_parse_errors(errors)
        return
    print(program)


def start_repl(mode: str = "tokens") -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown REPL mode: {mode}")
    print(f"Monkey REPL [mode={mode}]. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            line = input(PROMPT)
        except (KeyboardInterrupt, EOFError):
            print("\nExiting Monkey REPL.")
            return

        src = line.strip()
        if not src:
            continue
        if src in ("exit", "quit"):
            print("Exiting Monkey REPL.")
            return
        if src in ("parse-mode", "tokens-mode"):
            mode = src.split("-", 1)[0]
            print(f"[mode] >>> {mode}")
            continue

        if mode == "parse":
            print_program(src)
        else:
            print_tokens(src)


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
