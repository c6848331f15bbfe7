"""Command line entry point: prints the token stream of a source file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from minicc.lexer import Lexer
from minicc.tokens import Token


def format_token(token: Token) -> str:
    """Render a token as one line of output."""
    return f"Token: Type={int(token.type)}, Lexeme='{token.lexeme}'"


def main(argv: Sequence[str] | None = None) -> int:
    """Lex the file named by the first argument and print each token."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: minicc <source_file>")
        return 1

    try:
        with open(args[0], encoding="utf-8", errors="replace") as handle:
            source = handle.read()
    except OSError as error:
        print(f"Failed to open file: {error.strerror}", file=sys.stderr)
        return 1

    for token in Lexer(source):
        print(format_token(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())