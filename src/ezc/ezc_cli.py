"""
EZC CLI Entrypoint.

This module provides the command-line interface for evaluating EZC expressions.

Features:
    - Evaluate an expression given on the command line or read from a `.ez` file.
    - Optionally print the syntax tree.
    - Launch an interactive REPL.

Example usage:
    ezc "1 + 2 * (3 - 4)"
    ezc -t "(1 + 2) * 3"
    ezc -f expr.ez
    ezc --repl --verbose

Functions:
    run_ezc(source: str, is_file: bool = False, show_tree: bool = False) -> int:
        Executes the full pipeline (lex → parse → evaluate) and returns an exit status.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or evaluate).
"""

import argparse
import logging
import sys

from ezc.ezc_evaluator import EvaluationError, Evaluator
from ezc.ezc_parser import Parser
from ezc.ezc_printer import pretty_print

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def run_ezc(source: str, is_file: bool = False, show_tree: bool = False) -> int:
    """
    Run the EZC pipeline on one expression and print the result.

    Args:
        source (str): The expression text, or a path to a `.ez` file when `is_file` is set.
        is_file (bool): If True, reads the expression from `source`. Defaults to False.
        show_tree (bool): If True, prints the syntax tree before the result.

    Returns:
        int: 0 on success, 1 if diagnostics were reported or evaluation failed.

    Raises:
        ValueError: If `is_file` is True and the path does not end with '.ez'.
    """
    if is_file:
        if not source.endswith(".ez"):
            raise ValueError("Only .ez files are supported.")
        with open(source, encoding="utf-8") as f:
            source = f.read().strip()

    try:
        tree = Parser(source).parse()
    except RecursionError:
        print("[error] >>> Expression is nested too deeply", file=sys.stderr)
        return 1

    if show_tree:
        pretty_print(tree.root)

    if tree.diagnostics:
        logger.debug("not evaluating: %d diagnostic(s)", len(tree.diagnostics))
        for diagnostic in tree.diagnostics:
            print(diagnostic, file=sys.stderr)
        return 1

    try:
        result = Evaluator(tree.root).evaluate()
    except EvaluationError as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


def main() -> None:
    """
    Entry point for the EZC CLI.

    - Launches the REPL if no arguments are passed or `--repl` is specified.
    - Otherwise evaluates the given expression (or `-f` file) and exits with its status.

    Supported flags:
        - `-f`, `--file`: Interpret source as a path to a `.ez` file.
        - `-t`, `--tree`: Print the syntax tree.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Enable debug logging.
    """
    parser = argparse.ArgumentParser(prog="ezc")
    parser.add_argument("source", nargs="?", help="Expression text, or a path with -f")
    parser.add_argument(
        "-f", "--file", action="store_true", help="Read the expression from a .ez file"
    )
    parser.add_argument(
        "-t", "--tree", action="store_true", help="Print the syntax tree"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of evaluating",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if args.repl or args.source is None:
        from ezc.ezc_repl import start_repl

        start_repl()
        return

    sys.exit(run_ezc(args.source, is_file=args.file, show_tree=args.tree))


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
