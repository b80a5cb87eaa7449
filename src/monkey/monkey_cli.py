"""
Monkey CLI Entrypoint.

Parses Monkey source and prints the result, or starts the interactive REPL.

Features:
    - Read source from `.monkey` files or inline strings.
    - Print the parsed program in its fully parenthesized rendering.
    - Dump the token stream (`--tokens`) or the AST as JSON (`--json`).
    - Launch the REPL in tokens or parse mode.

Example usage:
    monkey
    monkey prog.monkey
    monkey -s "let x = 1 + 2 * 3;"
    monkey -s "a + b" --json
    monkey --repl --parse

Functions:
    run_monkey(source: str, is_string: bool = False, tokens: bool = False, as_json: bool = False) -> int:
        Runs lex -> parse -> print and returns the process exit status.

    main() -> None:
        Parses CLI arguments and dispatches to the REPL or run_monkey.
"""

import argparse
import getpass
import json
import sys

from monkey.monkey_lexer import CharacterStream, Lexer, tokenize
from monkey.monkey_parser import Parser


def run_monkey(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    as_json: bool = False,
) -> int:
    """
    Run the Monkey front end over a file or a source string.

    Args:
        source (str): Monkey source code, or a path to a `.monkey` file.
        is_string (bool): If True, treats `source` as code instead of a path.
        tokens (bool): Print the token stream instead of parsing.
        as_json (bool): Print the AST as indented JSON instead of its rendering.

    Returns:
        int: 0 on success, 1 if the parser reported diagnostics.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.monkey'.
    """
    if not is_string and not source.endswith(".monkey"):
        raise ValueError("Only .monkey files are supported.")
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    # 2. Token dump
    if tokens:
        for tok in tokenize(source):
            print(tok)
        return 0

    # 3. Parsing
    parser = Parser(Lexer(CharacterStream(source)))
    program = parser.parse_program()
    errors = parser.errors()
    if errors:
        print("[error] >>> parser errors:", file=sys.stderr)
        for msg in errors:
            print(f"\t{msg}", file=sys.stderr)
        return 1

    # 4. Output result
    if as_json:
        print(json.dumps(program.to_dict(), indent=2))
    else:
        print(program)
    return 0


def greeting() -> str:
    return f"Monkey-Language called by {getpass.getuser()}"


def main() -> None:
    """
    Entry point for the Monkey CLI.

    - No arguments: print a greeting and start the REPL in tokens mode.
    - `--repl` (optionally with `--parse`): start the REPL.
    - Otherwise: parse the given file or `-s` string and exit with run_monkey's status.
    """
    if len(sys.argv) == 1:
        from monkey.monkey_repl import start_repl

        print(greeting())
        start_repl()
        return
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print tokens instead of parsing"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument("--repl", action="store_true", help="Launch interactive REPL")
    parser.add_argument(
        "--parse", action="store_true", help="Start the REPL in parse mode (with --repl)"
    )

    args = parser.parse_args()

    if args.repl or args.source is None:
        from monkey.monkey_repl import start_repl

        start_repl(mode="parse" if args.parse else "tokens")
        return

    status = run_monkey(
        source=args.source,
        is_string=args.string,
        tokens=args.tokens,
        as_json=args.as_json,
    )
    if status:
        sys.exit(status)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
