""" Implement the core of the shell. """
import logging
import sys

from constants import PROMPT
from exceptions import ShellExit, UnclosedQuoteError
from lexer import tokenize
from runner import dispatch
from shell_state import ShellState

log = logging.getLogger(__name__)

STATUS_SYNTAX_ERROR = 2


def read_command(prompt=PROMPT):
    """ Read one line of input; raises EOFError at end of input. """
    return input(prompt)


class Shell:
    def __init__(self, state=None):
        self.state = state if state is not None else ShellState()

    def run_line(self, line: str) -> int:
        """ Tokenize and dispatch a single line. ShellExit propagates. """
        try:
            tokens = tokenize(line)
        except UnclosedQuoteError as e:
            print(f"Error: {e}", file=sys.stderr)
            status = STATUS_SYNTAX_ERROR
        else:
            log.debug("tokens: %r", tokens)
            status = dispatch(tokens, self.state) if tokens else 0
        self.state.set_status(status)
        return status

    def run(self):
        while True:
            try:
                line = read_command()
                self.run_line(line)
            except ShellExit as e:
                return e.status

            except UnicodeDecodeError as e:
                print(f"Error: cannot decode input: {e.reason}", file=sys.stderr)
                self.state.set_status(1)

            except EOFError:
                print()
                return self.state.last_status

            except KeyboardInterrupt:
                print()
