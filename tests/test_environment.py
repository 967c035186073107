import io

import pytest

from minish.command import Token, TokenType
from minish.environment import (
    EXIT_STATUS_KEY,
    Environment,
    env_builtin,
    export_builtin,
    is_valid_identifier,
    split_assignment,
    unset_builtin,
)


def _cmd(name, *args, kind=TokenType.ARGUMENT):
    return [Token(TokenType.COMMAND, name)] + [Token(kind, a) for a in args]


@pytest.fixture
def env():
    return Environment([("HOME", "/home/u"), ("PATH", "/bin"), ("USER", "u")])


def test_get_set_and_contains(env):
    assert env.get("HOME") == "/home/u"
    assert env.get("MISSING") is None
    env.set("NEW", "v")
    assert "NEW" in env
    assert env.get("NEW") == "v"
    assert len(env) == 4


def test_replace_keeps_position(env):
    env.set("HOME", "/tmp")
    assert list(env) == ["HOME", "PATH", "USER"]
    assert env.get("HOME") == "/tmp"


def test_set_none_stores_empty_string(env):
    env.set("EMPTY", None)
    assert env.get("EMPTY") == ""


def test_unset_removes_and_ignores_missing(env):
    env.unset("PATH")
    env.unset("NOPE")
    assert list(env) == ["HOME", "USER"]


def test_init_from_mapping():
    table = Environment({"A": "1", "B": "2"})
    assert list(table) == ["A", "B"]
    assert table.get("B") == "2"


def test_exit_status_round_trip_and_hidden(env):
    assert env.set_exit_status(127) == 127
    assert env.get(EXIT_STATUS_KEY) == "127"
    assert env.set_exit_status(0) == 0
    assert all(EXIT_STATUS_KEY not in line for line in env.listing())


def test_listing_formats(env):
    assert env.listing() == ["HOME=/home/u", "PATH=/bin", "USER=u"]
    assert env.listing(as_export=True)[0] == "export HOME=/home/u"


@pytest.mark.parametrize("text", ["A", "_x", "a1=b", "VAR=with space", "x_Y9"])
def test_valid_identifiers(text):
    assert is_valid_identifier(text) is True


@pytest.mark.parametrize("text", ["", "1A", "=x", "a-b=c", "-n", "A.B"])
def test_invalid_identifiers(text):
    assert is_valid_identifier(text) is False


def test_split_assignment():
    assert split_assignment("KEY=a=b") == ("KEY", "a=b")
    assert split_assignment("KEY=") == ("KEY", "")
    with pytest.raises(ValueError):
        split_assignment("KEY")


def test_export_without_arguments_lists(env):
    out = io.StringIO()
    export_builtin(env, _cmd("export"), 0, out)
    assert out.getvalue().splitlines() == env.listing(as_export=True)


def test_export_sets_and_replaces(env):
    out = io.StringIO()
    export_builtin(env, _cmd("export", "FOO=bar", "HOME=/root", "NOEQ"), 0, out)
    assert env.get("FOO") == "bar"
    assert env.get("HOME") == "/root"
    assert "NOEQ" not in env
    assert out.getvalue() == ""


def test_export_reports_invalid_identifier(env):
    out = io.StringIO()
    export_builtin(env, _cmd("export", "1BAD=x", "OK=y"), 0, out)
    assert out.getvalue() == "export: 1BAD=x: not a valid identifier\n"
    assert env.get("OK") == "y"
    assert "1BAD" not in env


def test_export_stops_at_pipe(env):
    tokens = _cmd("export", "A=1") + [
        Token(TokenType.PIPE, "|"),
        Token(TokenType.COMMAND, "B=2"),
    ]
    export_builtin(env, tokens, 0, io.StringIO())
    assert env.get("A") == "1"
    assert "B" not in env


def test_unset_builtin(env):
    unset_builtin(env, _cmd("unset", "HOME", "USER", "MISSING"), 0)
    assert list(env) == ["PATH"]


def test_unset_builtin_can_empty_environment():
    table = Environment([("ONLY", "1")])
    unset_builtin(table, _cmd("unset", "ONLY"), 0)
    assert len(table) == 0


def test_env_builtin_prints_listing(env):
    out, err = io.StringIO(), io.StringIO()
    env.set_exit_status(1)
    assert env_builtin(env, _cmd("env"), 0, out, err) is True
    assert out.getvalue().splitlines() == env.listing()
    assert err.getvalue() == ""


def test_env_builtin_refuses_options(env):
    out, err = io.StringIO(), io.StringIO()
    tokens = _cmd("env", "-i", kind=TokenType.OPTION)
    assert env_builtin(env, tokens, 0, out, err) is False
    assert err.getvalue() == "env cannot take options\n"
    assert out.getvalue() == ""