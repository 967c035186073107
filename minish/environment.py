"""The shell's variable table and the export, unset and env builtins."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Mapping, Sequence, TextIO, Union

from minish.command import Token, TokenType
from minish.libtext import atoi, is_alnum, is_alpha, itoa

EXIT_STATUS_KEY = "EXIT_STATUS"

_Items = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


class Environment:
    """Ordered table of shell variables.

    The last exit status is kept under ``EXIT_STATUS`` and is hidden from
    listings.
    """

    def __init__(self, items: _Items = None) -> None:
        self._vars: dict[str, str] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self._vars[key] = value

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None when it is not set."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Set ``key``; an existing variable keeps its position."""
        self._vars[key] = "" if value is None else value

    def unset(self, key: str) -> None:
        """Remove ``key`` if it is set."""
        self._vars.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"Environment({list(self._vars.items())!r})"

    def set_exit_status(self, status: int) -> int:
        """Record ``status`` as the last exit status and return it as stored."""
        self._vars[EXIT_STATUS_KEY] = itoa(status)
        return atoi(self._vars[EXIT_STATUS_KEY])

    def listing(self, as_export: bool = False) -> list[str]:
        """Lines printed by ``env``, or by ``export`` without arguments."""
        prefix = "export " if as_export else ""
        lines = []
        for key, value in self._vars.items():
            if key == EXIT_STATUS_KEY:
                continue
            if not key:
                break
            lines.append(f"{prefix}{key}={value}")
        return lines


def is_valid_identifier(text: str) -> bool:
    """True when the name before any ``=`` is a valid variable name."""
    if not text or not (is_alpha(text[0]) or text[0] == "_"):
        return False
    name = text.split("=", 1)[0]
    return all(is_alnum(char) or char == "_" for char in name)


def split_assignment(text: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` at the first ``=``."""
    key, sep, value = text.partition("=")
    if not sep:
        raise ValueError(f"no '=' in {text!r}")
    return key, value


def _operands(tokens: Sequence[Token], index: int) -> Iterator[Token]:
    """Word tokens after ``index`` up to the next pipe, skipping redirections."""
    for token in tokens[index + 1:]:
        if token.type is TokenType.PIPE:
            return
        if token.type.is_redirection:
            continue
        yield token


def _write_lines(lines: Iterable[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")


def export_builtin(
    env: Environment,
    tokens: Sequence[Token],
    index: int,
    out: TextIO | None = None,
) -> None:
    """Run ``export``; the token at ``index`` is the command itself."""
    out = sys.stdout if out is None else out
    if index + 1 >= len(tokens):
        _write_lines(env.listing(as_export=True), out)
        return
    for token in _operands(tokens, index):
        if not is_valid_identifier(token.content):
            out.write(f"export: {token.content}: not a valid identifier\n")
        elif "=" in token.content:
            key, value = split_assignment(token.content)
            env.set(key, value)


def unset_builtin(env: Environment, tokens: Sequence[Token], index: int) -> None:
    """Run ``unset``; the token at ``index`` is the command itself."""
    for token in _operands(tokens, index):
        env.unset(token.content)


def env_builtin(
    env: Environment,
    tokens: Sequence[Token],
    index: int,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> bool:
    """Run ``env``; return False when it was refused for taking an option."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    name = tokens[index].content
    for token in tokens[index:]:
        if token.type is TokenType.PIPE:
            break
        if token.type is TokenType.OPTION:
            err.write(f"{name} cannot take options\n")
            return False
    _write_lines(env.listing(), out)
    return True