# minish

The pieces of a small interactive shell, as a Python library with no
dependencies outside the standard library.

## Modules

- `minish.libtext`: character-class tests and string helpers with the
  shell's own rules: `atoi` (C-style parsing that wraps to a signed 32-bit
  integer), `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `is_alpha`, `is_alnum`, `is_digit`, `is_ascii`, `is_print`, `to_upper`
  and `to_lower`.
- `minish.command`: the token model, `TokenType` (command, option,
  argument, the redirections and pipe) and the frozen `Token` dataclass,
  plus queries over a tokenised command line: `no_further_args`,
  `no_pipes_before` and `no_args_or_options`.
- `minish.environment`: `Environment`, an ordered table of shell variables
  (`get`, `set`, `unset`, `in`, iteration, `len`, `set_exit_status`,
  `listing`). The last exit status is kept under `EXIT_STATUS` and left out
  of listings. Also `is_valid_identifier`, `split_assignment` and the
  builtins `export_builtin`, `unset_builtin` and `env_builtin`.
- `minish.expansion`: `expand(text, env)` replaces `$NAME` (ASCII letters
  only) and `$?` in a word. Unset names expand to nothing; a `$` at the very
  end of the word is kept.
- `minish.builtins`: `echo`, `cd`, `pwd`, `update_pwd`, `exit_builtin`,
  the `History` list, and option checking with `check_options` (rules chosen
  by `OptionCheck`) and `history_option`. `exit_builtin` raises `ShellExit`
  carrying the status where a shell would end.

Builtins take the token list and the index of the command token. They
write to the file objects passed as `out` and `err` (standard output and
standard error by default), so they run as easily against `io.StringIO` as
against the terminal.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Example

```python
import io

from minish.builtins import ShellExit, echo, exit_builtin
from minish.command import Token, TokenType
from minish.environment import Environment
from minish.expansion import expand

env = Environment([("USER", "alice"), ("HOME", "/home/alice")])
env.set_exit_status(0)
print(expand("hello $USER, status $?", env))   # hello alice, status 0

out = io.StringIO()
line = [
    Token(TokenType.COMMAND, "echo"),
    Token(TokenType.OPTION, "-n"),
    Token(TokenType.ARGUMENT, "hi"),
]
echo(line, 0, out)
print(repr(out.getvalue()))                      # 'hi'

try:
    exit_builtin(
        [Token(TokenType.COMMAND, "exit"), Token(TokenType.ARGUMENT, "300")],
        0,
        env,
        io.StringIO(),
    )
except ShellExit as stop:
    print(stop.status)                           # 44
```

## What it does not do

This is a library of parts, not a shell you can start. It has no command
to run, no prompt or line reader, and no parser that turns a typed line
into tokens: you build the `Token` lists yourself. It does not run external
programs, and it does not carry out pipes, redirections or here-documents;
those token types exist only so the builtins can stop or skip at them.
`History` is an in-memory list that you fill with `History.add`; nothing is
saved to disk.