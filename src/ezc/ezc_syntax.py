"""
Defines the syntax tree structure for the EZC expression compiler.

Classes:
    NumberExpressionSyntax: A single integer literal.
    BinaryExpressionSyntax: ``left <op> right`` for one of ``+ - * /``.
    ParenthesizedExpressionSyntax: ``( expression )`` with both delimiters kept.
    SyntaxTree: The result of one parse: diagnostics, root expression, EOF token.

Every node, token or expression, exposes:
    kind (SyntaxKind): The variant tag.
    get_children() -> tuple: The node's structural parts, left to right.
        Tokens have no children.

Nodes are frozen dataclasses, so trees are immutable and compare structurally.

Usage:
    This module is the output format of ``Parser.parse`` and the input format of
    ``Evaluator`` and ``pretty_print``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from ezc.ezc_constants import SyntaxKind
from ezc.ezc_lexer import Token


@dataclass(frozen=True)
class NumberExpressionSyntax:
    number_token: Token

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NUMBER_EXPRESSION

    def get_children(self) -> tuple[SyntaxNode, ...]:
        return (self.number_token,)


@dataclass(frozen=True)
class BinaryExpressionSyntax:
    left: ExpressionSyntax
    operator_token: Token
    right: ExpressionSyntax

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.BINARY_EXPRESSION

    def get_children(self) -> tuple[SyntaxNode, ...]:
        return (self.left, self.operator_token, self.right)


@dataclass(frozen=True)
class ParenthesizedExpressionSyntax:
    open_paren_token: Token
    expression: ExpressionSyntax
    close_paren_token: Token

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.PARENTHESIZED_EXPRESSION

    def get_children(self) -> tuple[SyntaxNode, ...]:
        return (self.open_paren_token, self.expression, self.close_paren_token)


ExpressionSyntax = Union[
    NumberExpressionSyntax, BinaryExpressionSyntax, ParenthesizedExpressionSyntax
]
SyntaxNode = Union[Token, ExpressionSyntax]


@dataclass(frozen=True)
class SyntaxTree:
    """
    The product of a single ``Parser.parse`` call.

    Attributes:
        diagnostics (tuple[str, ...]): Lexical then syntactic messages. Empty means
            the tree is safe to evaluate.
        root (ExpressionSyntax): The top-level expression.
        end_of_file_token (Token): The terminating END_OF_FILE token.
    """

    diagnostics: tuple[str, ...]
    root: ExpressionSyntax
    end_of_file_token: Token

    @classmethod
    def parse(cls, text: str) -> SyntaxTree:
        from ezc.ezc_parser import Parser

        return Parser(text).parse()


def walk_tokens(node: SyntaxNode) -> Iterator[Token]:
    """Yields every token under ``node`` in left-to-right source order."""
    stack: list[SyntaxNode] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Token):
            yield current
        else:
            stack.extend(reversed(current.get_children()))


__all__ = [
    "BinaryExpressionSyntax",
    "ExpressionSyntax",
    "NumberExpressionSyntax",
    "ParenthesizedExpressionSyntax",
    "SyntaxNode",
    "SyntaxTree",
    "walk_tokens",
]
