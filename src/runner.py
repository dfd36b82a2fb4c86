""" Execute a shell command. """
import logging
import subprocess
import sys

from command import Command
from parser import parse_command
from resolver import find_executable
from shell_builtins import BUILTINS
from shell_state import ShellState

log = logging.getLogger(__name__)

STATUS_NOT_FOUND = 127
STATUS_CANNOT_EXECUTE = 126


def dispatch(tokens: list[str], shell_state: ShellState) -> int:
    """ Run one tokenized line and return its exit status. """
    cmd = parse_command(tokens)
    if cmd is None:
        return 0
    return execute_command(cmd, shell_state)


def execute_command(cmd: Command, shell_state: ShellState) -> int:
    # Builtins never see a redirection: redirected lines run externally
    if not cmd.external and cmd.name in BUILTINS:
        return BUILTINS[cmd.name](cmd.args, shell_state) or 0

    return run_external(cmd, shell_state)


def run_external(cmd: Command, shell_state: ShellState) -> int:
    path = find_executable(cmd.name, shell_state.get_var("PATH"))
    if path is None:
        print(f"{cmd.name}: command not found", file=sys.stderr)
        return STATUS_NOT_FOUND

    stream = cmd.redirect.kind.stream
    handle = None
    try:
        if stream is not None:
            try:
                handle = open(cmd.redirect.target, cmd.redirect.kind.mode)
            except OSError as e:
                print(f"{cmd.name}: {cmd.redirect.target}: {e.strerror}", file=sys.stderr)
                return 1
            log.debug("%s redirected to %s (mode %s)",
                      stream, cmd.redirect.target, cmd.redirect.kind.mode)

        # keep our own buffered output ahead of the child's
        sys.stdout.flush()
        sys.stderr.flush()

        log.debug("running %s as %r", path, cmd.argv)
        try:
            completed = subprocess.run(
                cmd.argv,
                executable=path,
                stdout=handle if stream == "stdout" else None,
                stderr=handle if stream == "stderr" else None,
            )
        except OSError as e:
            print(f"{cmd.name}: {e.strerror or e}", file=sys.stderr)
            return STATUS_CANNOT_EXECUTE
        return completed.returncode
    finally:
        if handle:
            handle.close()
