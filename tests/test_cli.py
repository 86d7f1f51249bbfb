import json

import pytest

from edgekit.cli import (
    Command,
    CommandKind,
    complete_group_and_widget,
    complete_only_group,
    main,
    parse_args,
)


@pytest.mark.parametrize(
    "argv, kind",
    [
        (["daemon"], CommandKind.DAEMON),
        (["d"], CommandKind.DAEMON),
        (["reload"], CommandKind.RELOAD),
        (["quit"], CommandKind.EXIT),
        (["q"], CommandKind.EXIT),
    ],
)
def test_parse_commands_without_arguments(argv, kind):
    args = parse_args(argv)
    assert args.command == Command(kind)


@pytest.mark.parametrize(
    "argv, kind",
    [
        (["add", "grp"], CommandKind.ADD),
        (["a", "grp"], CommandKind.ADD),
        (["rm", "grp"], CommandKind.REMOVE),
        (["r", "grp"], CommandKind.REMOVE),
        (["togglepin", "grp"], CommandKind.TOGGLE_PIN),
    ],
)
def test_parse_commands_with_argument(argv, kind):
    args = parse_args(argv)
    assert args.command == Command(kind, "grp")


def test_parse_mouse_debug_and_no_command():
    assert parse_args(["-d"]).mouse_debug is True
    args = parse_args([])
    assert args.mouse_debug is False
    assert args.command is None


def test_parse_rejects_missing_argument():
    with pytest.raises(SystemExit):
        parse_args(["add"])


def test_to_ipc_add_and_remove():
    assert Command(CommandKind.ADD, "g").to_ipc() == ("add", ["g"])
    assert Command(CommandKind.REMOVE, "g").to_ipc() == ("rm", ["g"])


def test_to_ipc_without_args():
    assert Command(CommandKind.RELOAD).to_ipc() == ("reload", [])
    assert Command(CommandKind.EXIT).to_ipc() == ("quit", [])
    assert Command(CommandKind.DAEMON).to_ipc() is None


def test_to_ipc_toggle_pin_splits_at_first_colon():
    cmd = Command(CommandKind.TOGGLE_PIN, "grp:w:x")
    assert cmd.to_ipc() == ("togglepin", ["grp", "w:x"])


def test_to_ipc_toggle_pin_requires_colon():
    with pytest.raises(ValueError, match="group_name:widget_name"):
        Command(CommandKind.TOGGLE_PIN, "grp").to_ipc()


def test_complete_only_group():
    names = ["alpha", "alps", "beta"]
    assert complete_only_group(names, "al") == ["alpha", "alps"]
    assert complete_only_group(names, "") == names
    assert complete_only_group(names, "z") == []


def test_complete_group_prefix_adds_colon():
    groups = {"alpha": ["one"], "beta": ["two"]}
    assert complete_group_and_widget(groups, "a") == ["alpha:"]


def test_complete_widgets_of_named_group():
    groups = {"alpha": ["one", "only", None, "", "two"], "beta": ["one"]}
    assert complete_group_and_widget(groups, "alpha:o") == ["alpha:one", "alpha:only"]
    assert complete_group_and_widget(groups, "missing:o") == []


def test_main_prints_request(capsys):
    assert main(["add", "grp"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"command": "add", "args": ["grp"]}


def test_main_toggle_pin_error(capsys):
    assert main(["togglepin", "grp"]) == 2
    assert "group_name:widget_name" in capsys.readouterr().err


def test_main_without_command_fails():
    assert main([]) == 1
    assert main(["daemon"]) == 1