import logging

from ezc.ezc_evaluator import EvaluationError, Evaluator
from ezc.ezc_parser import Parser
from ezc.ezc_printer import pretty_print

logger = logging.getLogger(__name__)


def eval_line(src: str, show_tree: bool = True) -> int | None:
    """Parse, optionally print the tree, and evaluate one line.

    Returns the result, or None if diagnostics were reported or evaluation failed.
    """
    try:
        tree = Parser(src).parse()
    except RecursionError:
        print("[error] >>> Expression is nested too deeply")
        return None

    if show_tree:
        pretty_print(tree.root)

    if tree.diagnostics:
        for diagnostic in tree.diagnostics:
            print(diagnostic)
        return None

    try:
        result = Evaluator(tree.root).evaluate()
    except EvaluationError as e:
        print(f"[error] >>> {e}")
        return None
    print(result)
    return result


def start_repl(show_tree: bool = True) -> None:
    print("EZC REPL. Enter an empty line, 'exit' or 'quit' to leave.")

    while True:
        try:
            line = input("> ")
            src = line.strip()
            if not src or src in ("exit", "quit"):
                print("Exiting EZC REPL.")
                return
            if src == "#showtree":
                show_tree = not show_tree
                print(f"[mode] >>> Tree display {'ON' if show_tree else 'OFF'}")
                continue
            logger.debug("repl input: %r", line)
            eval_line(line, show_tree=show_tree)
        except (KeyboardInterrupt, EOFError):
            print("\nExiting EZC REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
