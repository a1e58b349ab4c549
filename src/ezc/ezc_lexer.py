"""
Lexical analyzer for the EZC expression compiler.

This module provides core components for converting a line of source text into tokens:

Classes:
    CharacterStream: Stream abstraction for reading characters with offset tracking.
    Token: Represents a single token with kind, position, text and optional value.
    Lexer: Converts source text into a sequence of tokens.

Features:
    - Emits whitespace runs as WHITESPACE tokens (the parser discards them)
    - Recognizes:
        * Decimal integer literals (Int32)
        * Operators and parentheses: + - * / ( )
    - Never raises on bad input: invalid characters and out-of-range numbers are
      reported through ``Lexer.diagnostics``

Example:
    >>> lexer = Lexer("12 + 3")
    >>> lexer.next_token()
    Token(Number, 12)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - token_hashmap
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ezc.ezc_constants import (
    EOF_TEXT,
    INFORMATION_SEPARATORS,
    INT32_MAX,
    INT32_MIN,
    SyntaxKind,
    token_hashmap,
)

logger = logging.getLogger(__name__)


class CharacterStream:
    """
    A utility for reading characters from a string source with offset tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
    """

    def __init__(self, source: str, position: int = 0):
        self.source = source
        self.position = position

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            Exception: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise Exception(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>"
            )
        char = self.source[self.position]
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """
        Returns the character at the given offset from the current position without advancing.

        Returns:
            str: The character at the offset, or an empty string if out of bounds.
        """
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)

    def slice_from(self, start: int) -> str:
        """Returns the source text between ``start`` and the current position."""
        return self.source[start : self.position]


@dataclass(frozen=True)
class Token:
    """A single lexical token; also a leaf of the syntax tree.

    Attributes:
        kind (SyntaxKind): The token kind.
        position (int): Offset of the first character of the token in the source.
        text (str): The exact text matched. Empty for error-recovery tokens.
        value (int | None): The integer value of a NUMBER token, otherwise None.
    """

    kind: SyntaxKind
    position: int
    text: str = ""
    value: int | None = None

    def get_children(self) -> tuple[Any, ...]:
        return ()

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.kind}, {self.value})"
        return f"Token({self.kind}, {self.text!r})"


def is_whitespace(ch: str) -> bool:
    # str.isspace also accepts the information separators \x1c-\x1f
    return ch.isspace() and ch not in INFORMATION_SEPARATORS


def parse_int32(text: str) -> int | None:
    """Parses a run of decimal digits, returning None if it does not fit an Int32.

    Only ASCII digits have a value: other Unicode decimal digits are scanned as part
    of a number but never parse.
    """
    if not text.isascii():
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


class Lexer:
    """Lexical analyzer for EZC expressions.

    Each call to ``next_token`` scans one token starting at the current position.
    Once the input is exhausted every further call returns an END_OF_FILE token.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.stream = CharacterStream(text)
        self._diagnostics: list[str] = []

    @property
    def diagnostics(self) -> tuple[str, ...]:
        """Diagnostics reported so far, in emission order."""
        return tuple(self._diagnostics)

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def read_while(self, predicate: Any) -> str:
        """Consumes the maximal run of characters satisfying ``predicate``."""
        start = self.stream.position
        while not self.stream.end_of_file() and predicate(self.peek()):
            self.advance()
        return self.stream.slice_from(start)

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token; END_OF_FILE once the input is exhausted.
        """
        start = self.stream.position

        # 1. End of input
        if self.stream.end_of_file():
            return Token(SyntaxKind.END_OF_FILE, start, EOF_TEXT)

        ch = self.peek()

        # 2. Number
        if ch.isdecimal():
            text = self.read_while(str.isdecimal)
            value = parse_int32(text)
            if value is None:
                self._diagnostics.append(f"The number {self.text} is not a valid Int32.")
            return Token(SyntaxKind.NUMBER, start, text, value)

        # 3. Whitespace run
        if is_whitespace(ch):
            text = self.read_while(is_whitespace)
            return Token(SyntaxKind.WHITESPACE, start, text)

        # 4. Single-character operator
        kind = token_hashmap.get(ch)
        if kind is not None:
            return Token(kind, start, self.advance())

        # 5. Unknown character
        bad = self.advance()
        self._diagnostics.append(f"ERROR: Invalid character in input: '{bad}'")
        return Token(SyntaxKind.INVALID, start, bad)

    def tokens(self) -> Iterator[Token]:
        """Yields tokens up to and including the first END_OF_FILE token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is SyntaxKind.END_OF_FILE:
                logger.debug(
                    "lexed %d characters with %d diagnostic(s)",
                    len(self.text),
                    len(self._diagnostics),
                )
                return


__all__ = [
    "CharacterStream",
    "Lexer",
    "Token",
    "is_whitespace",
    "parse_int32",
    "token_hashmap",
]
