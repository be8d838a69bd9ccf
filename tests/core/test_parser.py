# tests/core/test_parser.py
import pytest

from wsh.core.managers.variable_manager import VariableStore
from wsh.core.parser import (
    parse_command_line,
    parse_positive_int,
    split_assignment,
    split_line,
    substitute_token,
)


@pytest.fixture
def variables():
    store = VariableStore()
    store.set("NAME", "local-value")
    return store


def test_split_on_all_delimiters():
    assert split_line("ls\t-l  \r\n") == ["ls", "-l"]
    assert split_line("a\ab") == ["a", "b"]


def test_split_empty_and_whitespace_input():
    assert split_line("") == []
    assert split_line("   \t ") == []


def test_no_quoting_support():
    assert split_line('echo "a b"') == ["echo", '"a', 'b"']


def test_plain_tokens_are_copied_verbatim(variables):
    assert parse_command_line("echo hello world", variables) == ["echo", "hello", "world"]


def test_environment_wins_over_local_variable(variables, monkeypatch):
    monkeypatch.setenv("NAME", "env-value")
    assert substitute_token("$NAME", variables) == "env-value"


def test_local_variable_used_when_not_in_environment(variables, monkeypatch):
    monkeypatch.delenv("NAME", raising=False)
    assert substitute_token("$NAME", variables) == "local-value"


def test_unknown_variable_becomes_empty_argument(variables, monkeypatch):
    monkeypatch.delenv("NOPE", raising=False)
    # The empty token is kept, so argument counts do not shift
    assert parse_command_line("echo $NOPE x", variables) == ["echo", "", "x"]


def test_only_whole_tokens_are_substituted(variables, monkeypatch):
    monkeypatch.delenv("NAME", raising=False)
    assert parse_command_line("echo pre$NAME", variables) == ["echo", "pre$NAME"]


def test_lone_dollar_is_empty(variables):
    assert substitute_token("$", variables) == ""


@pytest.mark.parametrize("arg, expected", [
    ("A=1", ("A", "1")),
    ("A=", ("A", "")),
    ("A=b=c", ("A", "b=c")),
    ("A", None),
    ("=1", None),
])
def test_split_assignment(arg, expected):
    assert split_assignment(arg) == expected


@pytest.mark.parametrize("token, expected", [
    ("1", 1),
    ("42", 42),
    ("0", None),
    ("-3", None),
    ("abc", None),
    ("set", None),
    ("1_0", None),
    ("+3", None),
    (" 3", None),
    ("3 ", None),
    ("\u0663", None),
])
def test_parse_positive_int(token, expected):
    assert parse_positive_int(token) == expected
