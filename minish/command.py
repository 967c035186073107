"""Tokens of a parsed command line and queries over their positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence


class TokenType(IntEnum):
    """Kind of a token on the command line.

    Words (command, option, argument) sort before redirections and pipes.
    """

    COMMAND = 0
    OPTION = 1
    ARGUMENT = 2
    INFILE = 3
    OUTFILE = 4
    HEREDOC = 5
    APPEND = 6
    PIPE = 7

    @property
    def is_word(self) -> bool:
        """True for a command, an option or an argument."""
        return self < TokenType.INFILE

    @property
    def is_redirection(self) -> bool:
        """True for a redirection operator."""
        return not self.is_word and self is not TokenType.PIPE


@dataclass(frozen=True)
class Token:
    """One element of a command line."""

    type: TokenType
    content: str = ""


def _check_index(tokens: Sequence[Token], index: int) -> None:
    if not 0 <= index < len(tokens):
        raise IndexError(f"token index {index} out of range")


def no_further_args(tokens: Sequence[Token], index: int) -> bool:
    """True when no argument follows the token at ``index``."""
    _check_index(tokens, index)
    return all(tok.type is not TokenType.ARGUMENT for tok in tokens[index + 1:])


def no_pipes_before(tokens: Sequence[Token], index: int) -> bool:
    """True when neither the token at ``index`` nor any before it is a pipe."""
    _check_index(tokens, index)
    return all(tok.type is not TokenType.PIPE for tok in tokens[:index + 1])


def no_args_or_options(tokens: Sequence[Token], index: int) -> bool:
    """True when no argument or option appears from ``index`` onwards."""
    _check_index(tokens, index)
    return all(
        tok.type not in (TokenType.ARGUMENT, TokenType.OPTION)
        for tok in tokens[index:]
    )