"""Split a command line into shell tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

_WHITESPACE = frozenset(" \t\n\v\f\r")
_WORD_STOPS = frozenset("|<>'\"")


class TokenType(enum.Enum):
    """Kinds of token the lexer produces."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    HEREDOC = enum.auto()
    APPEND = enum.auto()
    VAR = enum.auto()
    QUOTE_SINGLE = enum.auto()
    QUOTE_DOUBLE = enum.auto()


@dataclass(frozen=True)
class Token:
    """One lexical unit: its kind, its text and how it was quoted.

    ``quoted`` is 0 for unquoted text, 1 for single quotes and 2 for
    double quotes.
    """

    type: TokenType
    value: str
    quoted: int = 0


_OPERATORS = (
    (">>", TokenType.APPEND),
    ("<<", TokenType.HEREDOC),
    (">", TokenType.REDIR_OUT),
    ("<", TokenType.REDIR_IN),
    ("|", TokenType.PIPE),
)

_QUOTES = {
    "'": (TokenType.QUOTE_SINGLE, 1),
    '"': (TokenType.QUOTE_DOUBLE, 2),
}


def is_space(char: str) -> bool:
    """Return True if ``char`` is one of the whitespace characters."""
    return char in _WHITESPACE


def _scan(text: str) -> Iterator[Token]:
    pos = 0
    end = len(text)
    while pos < end:
        while pos < end and is_space(text[pos]):
            pos += 1
        if pos >= end:
            break
        char = text[pos]

        operator = next(
            ((op, kind) for op, kind in _OPERATORS if text.startswith(op, pos)),
            None,
        )
        if operator is not None:
            op, kind = operator
            yield Token(kind, op, 0)
            pos += len(op)
            continue

        if char in _QUOTES:
            kind, quoted = _QUOTES[char]
            close = text.find(char, pos + 1)
            if close == -1:
                value = text[pos + 1:]
                pos = end
            else:
                value = text[pos + 1:close]
                pos = close + 1
            if value:
                yield Token(kind, value, quoted)
            continue

        start = pos
        while pos < end and not is_space(text[pos]) and text[pos] not in _WORD_STOPS:
            pos += 1
        yield Token(TokenType.WORD, text[start:pos], 0)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens.

    Quoted sections run to the matching quote or to the end of the text;
    empty quoted sections produce no token.
    """
    return list(_scan(text))