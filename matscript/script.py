"""Running scripts of matrix definitions and expressions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from matscript.expression import evaluate_expr
from matscript.matrix import Matrix, MatrixError, create_matrix, format_matrix
from matscript.tree import MatrixTree


def run_script(lines: Iterable[str]) -> Matrix | None:
    """Execute script lines and return the last matrix defined, or None."""
    tree = MatrixTree()
    last: Matrix | None = None
    for line in lines:
        text = line.lstrip()
        if not text:
            continue
        name, rest = text[0], text[1:].lstrip()
        if not rest.startswith("="):
            continue
        body = rest[1:].lstrip()
        if not body:
            continue
        if body[0].isascii() and body[0].isdigit():
            matrix = create_matrix(name, body)
        else:
            matrix = evaluate_expr(name, body, tree)
        tree.insert(matrix)
        last = matrix
    return last


def execute_script(path: str) -> Matrix | None:
    """Execute the script stored in a file and return its last matrix."""
    with open(path, encoding="utf-8") as handle:
        return run_script(handle)


def main(argv: list[str] | None = None) -> int:
    """Run a script file and print the final matrix."""
    parser = argparse.ArgumentParser(description="Evaluate a matrix script.")
    parser.add_argument("script", help="path of the script to run")
    args = parser.parse_args(argv)
    try:
        result = execute_script(args.script)
    except (OSError, MatrixError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if result is None:
        print("error: the script defines no matrix", file=sys.stderr)
        return 1
    print(format_matrix(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())