"""
Tree renderer for EZC syntax trees.

Renders any node using only ``kind``, ``get_children()`` and, for tokens, ``value``:

    └──BinaryExpression
        ├──NumberExpression
        │   └──Number 1
        ├──Plus
        └──NumberExpression
            └──Number 2
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from ezc.ezc_lexer import Token
from ezc.ezc_syntax import SyntaxNode


def iter_tree_lines(node: SyntaxNode) -> Iterator[str]:
    """Yields the rendered lines of ``node`` top-down, without recursing."""
    # (node, indent, is_last)
    stack: list[tuple[SyntaxNode, str, bool]] = [(node, "", True)]
    while stack:
        current, indent, is_last = stack.pop()
        marker = "└──" if is_last else "├──"
        line = f"{indent}{marker}{current.kind}"
        if isinstance(current, Token) and current.value is not None:
            line += f" {current.value}"
        yield line

        indent += "    " if is_last else "│   "
        children = current.get_children()
        for i in reversed(range(len(children))):
            stack.append((children[i], indent, i == len(children) - 1))


def format_tree(node: SyntaxNode) -> list[str]:
    return list(iter_tree_lines(node))


def pretty_print(node: SyntaxNode, out: TextIO | None = None) -> None:
    if out is None:
        out = sys.stdout
    for line in iter_tree_lines(node):
        print(line, file=out)


__all__ = ["format_tree", "iter_tree_lines", "pretty_print"]
