"""Command-line interface: argument parsing, completion helpers and IPC requests."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Sequence

log = logging.getLogger(__name__)

PROG = "edgekit"
LOG_ENV = "EDGEKIT_LOG"

_TOGGLE_PIN_FORMAT = "widget must be specified with: `group_name:widget_name`"


class CommandKind(Enum):
    """The subcommands; each value is the canonical command name."""

    DAEMON = "daemon"
    ADD = "add"
    REMOVE = "rm"
    TOGGLE_PIN = "togglepin"
    RELOAD = "reload"
    EXIT = "quit"


@dataclass(frozen=True)
class Command:
    """A parsed subcommand and its single argument, if it takes one."""

    kind: CommandKind
    argument: Optional[str] = None

    def to_ipc(self) -> Optional[tuple[str, list[str]]]:
        """Return the ``(command, args)`` request for the daemon.

        ``None`` is returned for the daemon command, which sends nothing.
        Raises ``ValueError`` when a toggle-pin target lacks ``group:widget``.
        """
        kind = self.kind
        if kind is CommandKind.DAEMON:
            return None
        if kind in (CommandKind.ADD, CommandKind.REMOVE):
            return kind.value, [self.argument or ""]
        if kind is CommandKind.TOGGLE_PIN:
            group, sep, widget = (self.argument or "").partition(":")
            if not sep:
                raise ValueError(_TOGGLE_PIN_FORMAT)
            return kind.value, [group, widget]
        return kind.value, []


def complete_only_group(group_names: Iterable[str], current: str) -> list[str]:
    """Return the group names that start with ``current``."""
    return [name for name in group_names if name.startswith(current)]


def complete_group_and_widget(
    groups: Mapping[str, Iterable[Optional[str]]], current: str
) -> list[str]:
    """Complete ``group:widget`` targets.

    Before a colon, matching groups are offered as ``"group:"``; after it,
    the named widgets of that exact group that start with the rest.
    """
    group_name, sep, widget_prefix = current.partition(":")
    if not sep:
        return [f"{name}:" for name in groups if name.startswith(current)]
    widgets = groups.get(group_name)
    if widgets is None:
        return []
    return [
        f"{group_name}:{widget}"
        for widget in widgets
        if widget and widget.startswith(widget_prefix)
    ]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Hidden widget on the screen edges"
    )
    parser.add_argument(
        "-d",
        "--mouse-debug",
        action="store_true",
        help="enable mouse click output; used together with the daemon",
    )
    sub = parser.add_subparsers(dest="subcommand")

    daemon = sub.add_parser(
        "daemon", aliases=["d"], help="run daemon; only one may run at a time"
    )
    daemon.set_defaults(kind=CommandKind.DAEMON)

    add = sub.add_parser("add", aliases=["a"], help="add a group of widgets by name")
    add.add_argument("name", help="group name")
    add.set_defaults(kind=CommandKind.ADD)

    remove = sub.add_parser(
        "rm", aliases=["r"], help="remove a group of widgets by name"
    )
    remove.add_argument("name", help="group name")
    remove.set_defaults(kind=CommandKind.REMOVE)

    toggle = sub.add_parser(
        "togglepin", help="toggle pin of a widget: <group_name>:<widget_name>"
    )
    toggle.add_argument("name", metavar="group_and_widget_name")
    toggle.set_defaults(kind=CommandKind.TOGGLE_PIN)

    reload = sub.add_parser("reload", help="reload the configuration")
    reload.set_defaults(kind=CommandKind.RELOAD)

    quit_ = sub.add_parser("quit", aliases=["q"], help="close daemon")
    quit_.set_defaults(kind=CommandKind.EXIT)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` into a namespace with ``mouse_debug`` and ``command``."""
    namespace = _build_parser().parse_args(argv)
    kind = getattr(namespace, "kind", None)
    command = None
    if kind is not None:
        command = Command(kind, getattr(namespace, "name", None))
    return argparse.Namespace(mouse_debug=namespace.mouse_debug, command=command)


def _configure_logging() -> None:
    level = logging.getLevelName(os.environ.get(LOG_ENV, "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and emit the daemon request as a JSON line."""
    _configure_logging()
    args = parse_args(argv)
    command = args.command

    if command is not None and command.kind is CommandKind.DAEMON:
        log.warning("daemon command is deprecated, please just run `%s`", PROG)
        command = None

    if command is None:
        log.error("no daemon frontend is available (mouse_debug=%s)", args.mouse_debug)
        return 1

    try:
        request = command.to_ipc()
    except ValueError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 2

    name, request_args = request
    print(json.dumps({"command": name, "args": request_args}))
    return 0


if __name__ == "__main__":
    sys.exit(main())