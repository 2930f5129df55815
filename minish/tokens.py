"""Lexical analysis of a command line into words and operators."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, TextIO

_OPERATORS = frozenset("<>|")
_SPACES = frozenset("\a\b\t\n\v ")
_QUOTES = frozenset("'\"")

UNCLOSED_QUOTE_MESSAGE = "minishell: syntax error: unclosed quote\n"

# Operator sequences that are rejected outright, with the message reported
# for each; checked in this order.
_EXCLUSIONS: tuple[tuple[str, str], ...] = (
    ("||", "minishell: syntax error near unexpected token '||'\n"),
    ("<<<", "minishell: syntax error near unexpected token '<<<'\n"),
    ("><", "minishell: syntax error near unexpected token `><`\n"),
    ("<>", "minishell: syntax error near unexpected token `<>`\n"),
)


class TokenType(IntEnum):
    """Kind of a lexical token."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    APPEND = 4
    HEREDOC = 5


_OPERATOR_TYPES = {
    "|": TokenType.PIPE,
    "<": TokenType.REDIR_IN,
    ">": TokenType.REDIR_OUT,
    "<<": TokenType.HEREDOC,
    ">>": TokenType.APPEND,
}


@dataclass(frozen=True)
class Token:
    """A piece of the command line with its kind.

    ``quoted`` is 0 for none, 1 for single and 2 for double quotes;
    ``expandable`` tells whether variable expansion applies.
    """

    value: str
    type: TokenType
    quoted: int = 0
    expandable: bool = True


class UnclosedQuoteError(ValueError):
    """A quote was opened and never closed."""

    def __init__(self, position: int) -> None:
        super().__init__(UNCLOSED_QUOTE_MESSAGE.strip())
        self.position = position


def is_space(c: str) -> bool:
    """Return True for the characters that separate tokens."""
    return c in _SPACES and c != ""


def is_operator(c: str) -> bool:
    """Return True for the characters that start an operator."""
    return c in _OPERATORS and c != ""


def operator_len(s: str) -> int:
    """Length of the operator at the start of ``s``: 2 for << and >>, else 1."""
    return 2 if s.startswith(("<<", ">>")) else 1


def operator_type(op: str) -> TokenType:
    """Token type of an operator string; WORD when it is not an operator."""
    return _OPERATOR_TYPES.get(op, TokenType.WORD)


def remove_quotes(s: str) -> str:
    """Drop the quote characters that delimit quoted parts of ``s``."""
    out: list[str] = []
    chars = iter(s)
    for c in chars:
        if c in _QUOTES:
            for inner in chars:
                if inner == c:
                    break
                out.append(inner)
        else:
            out.append(c)
    return "".join(out)


def operator_exclusion(text: str, pos: int) -> str | None:
    """Return the rejected operator sequence starting at ``pos``, if any."""
    for sequence, _ in _EXCLUSIONS:
        if text.startswith(sequence, pos):
            return sequence
    return None


def extract_word(text: str, pos: int) -> tuple[str, int]:
    """Read the word starting at ``pos``.

    Returns the word with its quotes removed and the position just past it.
    Raises UnclosedQuoteError when a quote inside the word is not closed.
    """
    end = pos
    length = len(text)
    while end < length and not is_space(text[end]) and not is_operator(text[end]):
        c = text[end]
        if c in _QUOTES:
            closing = text.find(c, end + 1)
            if closing == -1:
                raise UnclosedQuoteError(length)
            end = closing + 1
        else:
            end += 1
    return remove_quotes(text[pos:end]), end


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def tokenize(line: str | None, err: TextIO | None = None) -> list[Token]:
    """Split ``line`` into tokens.

    Syntax errors are reported on ``err`` (standard error by default) and the
    offending input is skipped; the tokens found so far are kept.
    """
    if line is None:
        return []
    stream = sys.stderr if err is None else err
    messages = dict(_EXCLUSIONS)
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        pos = _skip_spaces(line, pos)
        if pos < len(line) and is_operator(line[pos]):
            excluded = operator_exclusion(line, pos)
            if excluded is not None:
                stream.write(messages[excluded])
                pos += len(excluded)
                continue
            size = operator_len(line[pos:])
            op = line[pos:pos + size]
            tokens.append(Token(op, operator_type(op)))
            pos += size
        else:
            try:
                word, pos = extract_word(line, pos)
            except UnclosedQuoteError as exc:
                stream.write(UNCLOSED_QUOTE_MESSAGE)
                pos = exc.position
                continue
            tokens.append(Token(word, TokenType.WORD))
    return tokens


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as a framed table of type names and values."""
    lines = ["\n--- TOKENS ---\n"]
    lines.extend(
        f'Type: {token.type.name:<10} | Value: "{token.value}"\n' for token in tokens
    )
    lines.append("--------------\n\n")
    return "".join(lines)


def format_token_indices(tokens: Iterable[Token]) -> str:
    """Render tokens one per line with their index and numeric type."""
    return "".join(
        f"[{index}] type={int(token.type)}, value='{token.value}'\n"
        for index, token in enumerate(tokens)
    )