"""The echo, cd, pwd, exit and history builtins and their option checks."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, TextIO

from minish.command import Token, TokenType, no_args_or_options, no_further_args, no_pipes_before
from minish.environment import Environment
from minish.libtext import atoi

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


class OptionCheck(Enum):
    """Which rule a builtin's options and arguments are checked against."""

    NONE = 0
    CD = 1
    ENV = 2
    HISTORY = 3
    ECHO = 4


class ShellExit(Exception):
    """Raised by ``exit`` when the shell is to terminate with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _stream(stream: TextIO | None, default: TextIO) -> TextIO:
    return default if stream is None else stream


def _is_numeric(text: str) -> bool:
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all("0" <= char <= "9" for char in body)


def _fits_int(text: str) -> bool:
    return _is_numeric(text) and _INT_MIN <= int(text) <= _INT_MAX


def _segment(tokens: Sequence[Token], start: int):
    """Yield (position, token) from ``start`` up to the next pipe."""
    for position in range(start, len(tokens)):
        token = tokens[position]
        if token.type is TokenType.PIPE:
            return
        yield position, token


@dataclass
class History:
    """Lines entered at the prompt, oldest first."""

    _lines: list[str] = field(default_factory=list)

    def __init__(self) -> None:
        self._lines = []

    def add(self, line: str) -> None:
        """Append ``line`` to the history."""
        self._lines.append(line)

    def entries(self, count: int | None = None) -> list[tuple[int, str]]:
        """Return numbered entries: all of them, or the last ``count``.

        Numbering always starts at 1 in the returned selection.
        """
        if count is None or count == -1:
            selected = self._lines
        else:
            if count < 0:
                raise ValueError("count must not be negative")
            count = min(count, len(self._lines))
            selected = self._lines[len(self._lines) - count:]
        return list(enumerate(selected, start=1))

    def show(self, count: int | None = None, out: TextIO | None = None) -> None:
        """Write the selected entries as ``<number> <line>`` lines."""
        out = _stream(out, sys.stdout)
        for number, line in self.entries(count):
            out.write(f"{number} {line}\n")

    def clear(self) -> None:
        """Forget every entry."""
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)


def history_option(tokens: Sequence[Token], index: int, err: TextIO | None = None) -> bool:
    """Check the operand of ``history``: at most one numeric argument."""
    err = _stream(err, sys.stderr)
    if index + 1 >= len(tokens):
        return True
    following = tokens[index + 1]
    if (
        following.type in (TokenType.COMMAND, TokenType.OPTION)
        or not _fits_int(following.content)
    ):
        err.write(f"bash: history: {following.content}: numeric argument required\n")
        return False
    if index + 2 < len(tokens) and tokens[index + 2].type.is_word:
        err.write("bash: history: too many arguments\n")
        return False
    return True


def check_options(
    tokens: Sequence[Token],
    index: int,
    kind: OptionCheck,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> bool:
    """Check the options and arguments of the builtin at ``index``.

    Returns False, after reporting on ``err``, when the builtin must not run.
    """
    err = _stream(err, sys.stderr)
    name = tokens[index].content
    if kind is OptionCheck.NONE:
        for _, token in _segment(tokens, index):
            if token.type is TokenType.OPTION:
                err.write(f"{name} cannot take options\n")
                return False
        return True
    if kind is OptionCheck.CD:
        arguments = 0
        for _, token in _segment(tokens, index):
            if token.type is TokenType.OPTION:
                err.write(f"{name}: cannot take options\n")
                return False
            if token.type is TokenType.ARGUMENT:
                arguments += 1
        if arguments > 1:
            err.write(f"{name}: too many arguments\n")
            return False
        return True
    if kind is OptionCheck.ENV:
        if index + 1 < len(tokens) and tokens[index + 1].type.is_word:
            err.write("env cannot take arguments nor options\n")
            return False
        return True
    if kind is OptionCheck.HISTORY:
        return history_option(tokens, index, err)
    arguments = 0
    for position, token in _segment(tokens, index):
        if token.type is TokenType.ARGUMENT:
            arguments += 1
        if token.type is TokenType.OPTION:
            if token.content != "-n":
                err.write("echo only accepts option -n\n")
                return False
            if arguments == 0 and no_further_args(tokens, position):
                return False
    return True


def echo(tokens: Sequence[Token], index: int, out: TextIO | None = None) -> None:
    """Print the arguments of the ``echo`` at ``index``; ``-n`` drops the newline."""
    out = _stream(out, sys.stdout)
    if no_further_args(tokens, index):
        out.write("\n")
        return
    newline = True
    for position, token in _segment(tokens, index + 1):
        if token.type is TokenType.OPTION:
            newline = False
        elif token.type is TokenType.ARGUMENT:
            if token.content:
                out.write(token.content)
            if not no_further_args(tokens, position):
                out.write(" ")
    if newline:
        out.write("\n")


def pwd(out: TextIO | None = None) -> str | None:
    """Return the working directory, also writing it to ``out`` when given."""
    try:
        path = os.getcwd()
    except OSError as exc:
        sys.stderr.write(f"bash: {exc.strerror}\n")
        return None
    if out is not None:
        out.write(path + "\n")
    return path


def update_pwd(env: Environment) -> None:
    """Refresh ``PWD`` in ``env`` if it is set there."""
    if "PWD" not in env:
        return
    current = pwd()
    if current is not None:
        env.set("PWD", current)


def _cd_home(env: Environment, err: TextIO) -> bool:
    current = pwd()
    if current is None:
        return False
    home = env.get("HOME")
    if home is None:
        err.write("bash: cd: HOME not set\n")
        return False
    if current != home:
        try:
            os.chdir(home)
        except OSError as exc:
            err.write(f"bash: {exc.strerror}\n")
            return False
    return True


def cd(
    tokens: Sequence[Token],
    index: int,
    env: Environment,
    err: TextIO | None = None,
) -> bool:
    """Change directory to the operand, or to ``HOME`` without one."""
    err = _stream(err, sys.stderr)
    position = index + 1
    while position < len(tokens) and tokens[position].type.is_redirection:
        position += 1
    if position >= len(tokens) or tokens[position].type is TokenType.PIPE:
        return _cd_home(env, err)
    path = tokens[position].content
    try:
        os.chdir(path)
    except OSError as exc:
        err.write(f"bash: cd: {path}: {exc.strerror}\n")
        return False
    return True


def exit_builtin(
    tokens: Sequence[Token],
    index: int,
    env: Environment,
    err: TextIO | None = None,
) -> None:
    """Run ``exit``; raise ShellExit when the shell is to stop.

    With more than one argument nothing is raised and the exit status 127 is
    recorded in ``env``.
    """
    err = _stream(err, sys.stderr)
    if no_args_or_options(tokens, index):
        if no_pipes_before(tokens, index):
            err.write("exit\n")
        raise ShellExit(0)
    arguments = 0
    for position, token in _segment(tokens, index + 1):
        if token.type is not TokenType.ARGUMENT:
            continue
        arguments += 1
        if arguments > 1:
            if no_pipes_before(tokens, position):
                err.write("exit\n")
            err.write("bash: exit: too many arguments\n")
            env.set_exit_status(127)
            return
        if not _fits_int(token.content):
            if no_pipes_before(tokens, position):
                err.write("exit\n")
            err.write(f"bash: {token.content}: numeric argument required\n")
            raise ShellExit(2)
    for position, token in _segment(tokens, index):
        if token.type is TokenType.ARGUMENT:
            code = atoi(token.content)
            if no_pipes_before(tokens, position):
                err.write("exit\n")
            raise ShellExit(code % 256)