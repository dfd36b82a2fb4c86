""" Current state of the shell. """
import os


class ShellState:
    """
    Per-session state.

    The working directory is not kept here: `cd` changes the process-wide
    directory, which pwd, path lookup and child processes all read.
    """
    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ
        self.last_status = 0

    def get_var(self, name):
        return self.environ.get(name, "")

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0
