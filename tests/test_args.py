"""Tests for git argument parsing and reconstruction."""

import pytest

from aigcw.core.args import CommitInvocation, PassthroughInvocation, parse_git_args


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["status"],
        ["log", "--oneline", "-m"],
        ["push", "origin", "main", "--force-with-lease"],
        ["Commit", "-m", "x"],
        ["--help"],
    ],
)
def test_non_commit_passes_through(argv):
    """Anything not starting with ``commit`` is forwarded verbatim."""
    invocation = parse_git_args(argv)

    assert isinstance(invocation, PassthroughInvocation)
    assert list(invocation.args) == argv


@pytest.mark.parametrize(
    "argv",
    [
        ["commit", "-m", "X Y"],
        ["commit", "--message", "X Y"],
        ["commit", "-mX Y"],
        ["commit", "--message=X Y"],
    ],
)
def test_message_forms(argv):
    """Every message flag form yields the same value."""
    invocation = parse_git_args(argv)

    assert isinstance(invocation, CommitInvocation)
    assert invocation.message == "X Y"
    assert invocation.extra_args == ()


def test_flags_and_extra_args():
    """Boolean flags are recognised and the rest keeps its order."""
    invocation = parse_git_args(
        ["commit", "-a", "extra1", "-p", "--amend", "-m", "msg", "--no-verify", "extra2"]
    )

    assert invocation.all is True
    assert invocation.patch is True
    assert invocation.amend is True
    assert invocation.message == "msg"
    assert invocation.extra_args == ("extra1", "--no-verify", "extra2")


def test_long_flags():
    """Long spellings of the boolean flags."""
    invocation = parse_git_args(["commit", "--all", "--patch"])

    assert invocation.all is True
    assert invocation.patch is True
    assert invocation.amend is False
    assert invocation.message is None


def test_rebuilt_args_order():
    """Flags come first, then the message, then the remaining args."""
    invocation = parse_git_args(["commit", "-a", "-p", "--amend", "-m", "msg", "extra1", "extra2"])

    assert invocation.build_args("feat: ✨ msg") == [
        "commit",
        "--all",
        "--patch",
        "--amend",
        "-m",
        "feat: ✨ msg",
        "extra1",
        "extra2",
    ]


def test_rebuild_without_message():
    """No flags and no message gives back ``commit`` plus the extra args."""
    invocation = parse_git_args(["commit", "file.py", "--", "other.py"])

    assert invocation.message is None
    assert invocation.build_args() == ["commit", "file.py", "--", "other.py"]


def test_empty_message_is_kept():
    """An empty message is distinct from a missing one."""
    assert parse_git_args(["commit", "-m", ""]).message == ""
    assert parse_git_args(["commit", "--message="]).message == ""
    assert parse_git_args(["commit"]).message is None


def test_trailing_message_flag_means_no_message():
    """A trailing ``-m`` without a value leaves no message."""
    assert parse_git_args(["commit", "-a", "-m"]).message is None
    assert parse_git_args(["commit", "-m", "first", "--message"]).message is None


def test_last_message_wins():
    """When several message flags are given the last one is used."""
    invocation = parse_git_args(["commit", "-m", "first", "--message=second", "-mthird"])

    assert invocation.message == "third"
    assert invocation.extra_args == ()


def test_message_value_consumed_whole():
    """The value after ``-m`` is never interpreted as a flag."""
    invocation = parse_git_args(["commit", "-m", "--amend"])

    assert invocation.message == "--amend"
    assert invocation.amend is False


def test_raw_args_preserved():
    """The original argv is kept for pass-through."""
    argv = ["commit", "-a", "-m"]

    assert parse_git_args(argv).raw_args == tuple(argv)
