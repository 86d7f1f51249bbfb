"""Running shell commands and sending desktop notifications."""

from __future__ import annotations

import logging
import shutil
import subprocess
import threading

log = logging.getLogger(__name__)

_ERROR_SUMMARY = "edgekit command error"


class ShellCommandError(RuntimeError):
    """Raised when a shell command cannot run or exits unsuccessfully."""


def notify_send(summary: str, body: str, is_critical: bool = False) -> None:
    """Show a desktop notification; failures are logged, never raised."""
    executable = shutil.which("notify-send")
    if executable is None:
        log.error(
            'Failed to send notification: "%s" - "%s"\nError: notify-send not found',
            summary,
            body,
        )
        return
    command = [executable]
    if is_critical:
        command += ["--urgency", "critical"]
    command += ["--", summary, body]
    try:
        subprocess.run(command, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        log.error(
            'Failed to send notification: "%s" - "%s"\nError: %s', summary, body, exc
        )


def shell_cmd(value: str) -> str:
    """Run ``value`` with ``/bin/sh -c`` and return its standard output."""
    log.debug("running command: %s", value)
    try:
        proc = subprocess.run(["/bin/sh", "-c", value], capture_output=True)
    except OSError as exc:
        message = f"Error: {exc}"
    else:
        if proc.returncode == 0:
            return proc.stdout.decode("utf-8", errors="replace")
        stderr = proc.stderr.decode("utf-8", errors="replace")
        message = f"command exit with code {proc.returncode}: {stderr}"

    log.error("error running command: %s\n%s", value, message)
    notify_send(_ERROR_SUMMARY, message, True)
    raise ShellCommandError(message)


def _run_quietly(value: str) -> None:
    try:
        shell_cmd(value)
    except ShellCommandError:
        pass  # already logged and notified


def shell_cmd_non_block(value: str) -> threading.Thread:
    """Run a shell command on a background thread and return that thread."""
    thread = threading.Thread(target=_run_quietly, args=(value,), daemon=True)
    thread.start()
    return thread