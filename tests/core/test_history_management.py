# tests/core/test_history_management.py
import pytest

from wsh.core import core as shell_core
from wsh.core.context.shell_context import ShellContext
from wsh.core.handlers.history_handler import handle_history
from wsh.core.managers.history_manager import HistoryRing


def filled_ring(capacity, commands):
    ring = HistoryRing(capacity)
    for cmd in commands:
        ring.add(cmd)
    return ring


# --- HistoryRing ---

def test_entries_are_numbered_most_recent_first():
    ring = filled_ring(5, ["a", "b", "c"])
    assert ring.entries() == ["c", "b", "a"]
    assert ring.get(1) == "c"
    assert ring.get(3) == "a"


def test_consecutive_duplicates_are_collapsed():
    ring = filled_ring(5, ["a", "a", "b", "b", "a"])
    assert ring.entries() == ["a", "b", "a"]


def test_full_ring_evicts_the_oldest_entry():
    ring = filled_ring(3, ["c1", "c2", "c3", "c4", "c5"])
    assert ring.count == 3
    assert ring.entries() == ["c5", "c4", "c3"]


@pytest.mark.parametrize("number", [0, -1, 4, 100])
def test_out_of_range_get_returns_none(number):
    ring = filled_ring(5, ["a", "b", "c"])
    assert ring.get(number) is None


def test_resize_smaller_keeps_most_recent_entries():
    ring = filled_ring(5, ["c1", "c2", "c3", "c4", "c5", "c6"])
    ring.resize(2)
    assert ring.capacity == 2
    assert ring.start == 0
    assert ring.entries() == ["c6", "c5"]


def test_resize_larger_keeps_everything_and_allows_growth():
    ring = filled_ring(3, ["c1", "c2", "c3", "c4"])
    ring.resize(10)
    assert ring.entries() == ["c4", "c3", "c2"]

    ring.add("c5")
    assert ring.entries() == ["c5", "c4", "c3", "c2"]


def test_resize_then_overflow_evicts_in_order():
    ring = filled_ring(5, ["c1", "c2", "c3"])
    ring.resize(2)
    ring.add("c4")
    assert ring.entries() == ["c4", "c3"]


@pytest.mark.parametrize("capacity", [0, -5])
def test_non_positive_capacity_is_rejected(capacity):
    ring = filled_ring(3, ["a", "b"])
    with pytest.raises(ValueError):
        ring.resize(capacity)
    assert ring.entries() == ["b", "a"]


# --- 'history' built-in ---

@pytest.fixture
def history_ctx():
    ctx = ShellContext(history_capacity=5)
    for cmd in ["echo one", "echo two", "echo three"]:
        ctx.history.add(cmd)
    return ctx


def test_history_without_arguments_prints_numbered_list(history_ctx, capsys):
    assert handle_history([], history_ctx) == 0
    assert capsys.readouterr().out == "1) echo three\n2) echo two\n3) echo one\n"


def test_history_set_resizes(history_ctx):
    assert handle_history(["set", "2"], history_ctx) == 0
    assert history_ctx.history.capacity == 2
    assert history_ctx.history.entries() == ["echo three", "echo two"]


@pytest.mark.parametrize("args, message", [
    (["set"], "wsh: history set requires a number"),
    (["set", "0"], "wsh: history set requires a positive integer"),
    (["set", "-4"], "wsh: history set requires a positive integer"),
    (["set", "many"], "wsh: history set requires a positive integer"),
    (["set", "1_0"], "wsh: history set requires a positive integer"),
    (["set", "+3"], "wsh: history set requires a positive integer"),
])
def test_history_set_rejects_bad_sizes(history_ctx, capsys, args, message):
    assert handle_history(args, history_ctx) == 1
    assert message in capsys.readouterr().err
    assert history_ctx.history.capacity == 5
    assert history_ctx.history.entries() == ["echo three", "echo two", "echo one"]


def test_history_number_replays_through_the_engine(history_ctx, monkeypatch):
    calls = []
    monkeypatch.setattr(shell_core.XNGINE, "replay_history", lambda n, ctx: calls.append(n) or 0)

    assert handle_history(["2"], history_ctx) == 0
    assert calls == [2]


@pytest.mark.parametrize("arg", ["0", "-1", "abc"])
def test_history_other_arguments_are_silent_no_ops(history_ctx, capsys, arg):
    assert handle_history([arg], history_ctx) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
