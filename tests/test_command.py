import pytest

from minish.command import (
    Token,
    TokenType,
    no_args_or_options,
    no_further_args,
    no_pipes_before,
)


def _line(*spec):
    return [Token(kind, text) for kind, text in spec]


@pytest.fixture
def piped():
    return _line(
        (TokenType.COMMAND, "echo"),
        (TokenType.OPTION, "-n"),
        (TokenType.ARGUMENT, "hi"),
        (TokenType.PIPE, "|"),
        (TokenType.COMMAND, "cat"),
    )


def test_token_type_classification():
    assert TokenType.OPTION.is_word
    assert not TokenType.PIPE.is_word
    assert TokenType.OUTFILE.is_redirection
    assert not TokenType.PIPE.is_redirection
    assert not TokenType.ARGUMENT.is_redirection

    with_option = _line((TokenType.COMMAND, "exit"), (TokenType.OPTION, "-x"))
    with_redirection = _line(
        (TokenType.COMMAND, "exit"), (TokenType.OUTFILE, ">")
    )
    assert no_args_or_options(with_option, 0) is False
    assert no_args_or_options(with_redirection, 0) is True


def test_no_further_args_detects_following_argument(piped):
    assert no_further_args(piped, 0) is False
    assert no_further_args(piped, 1) is False


def test_no_further_args_at_and_after_last_argument(piped):
    assert no_further_args(piped, 2) is True
    assert no_further_args(piped, 4) is True


def test_no_further_args_looks_past_pipes():
    tokens = _line(
        (TokenType.COMMAND, "echo"),
        (TokenType.PIPE, "|"),
        (TokenType.COMMAND, "grep"),
        (TokenType.ARGUMENT, "x"),
    )
    assert no_further_args(tokens, 0) is False


def test_no_pipes_before(piped):
    assert no_pipes_before(piped, 2) is True
    assert no_pipes_before(piped, 3) is False
    assert no_pipes_before(piped, 4) is False


def test_no_args_or_options(piped):
    assert no_args_or_options(piped, 0) is False
    assert no_args_or_options(piped, 2) is False
    assert no_args_or_options(piped, 3) is True


def test_no_args_or_options_ignores_redirections():
    tokens = _line(
        (TokenType.COMMAND, "exit"),
        (TokenType.OUTFILE, ">"),
        (TokenType.PIPE, "|"),
    )
    assert no_args_or_options(tokens, 0) is True


@pytest.mark.parametrize("index", [-1, 5, 10])
def test_index_out_of_range_raises(piped, index):
    with pytest.raises(IndexError):
        no_further_args(piped, index)
    with pytest.raises(IndexError):
        no_pipes_before(piped, index)
    with pytest.raises(IndexError):
        no_args_or_options(piped, index)


def test_tokens_compare_by_value():
    assert Token(TokenType.ARGUMENT, "a") == Token(TokenType.ARGUMENT, "a")
    assert Token(TokenType.ARGUMENT, "a") != Token(TokenType.OPTION, "a")