""" Tab completion of command names. """
import sys

try:
    import readline
except ImportError:  # not available on every platform
    readline = None

from resolver import list_executables


class CommandCompleter:
    """ readline completer over a fixed set of command names. """
    def __init__(self, names):
        self.names = sorted(names)
        self.matches = []

    def complete(self, text, state):
        if state == 0:
            self.matches = [n for n in self.names if n.startswith(text)]
        if state < len(self.matches):
            return self.matches[state] + " "
        return None


def install_completer(path_list) -> CommandCompleter|None:
    """ Bind Tab to command-name completion when running on a terminal. """
    if readline is None or not sys.stdin.isatty():
        return None

    completer = CommandCompleter(list_executables(path_list))
    readline.set_completer(completer.complete)
    readline.parse_and_bind("tab: complete")
    return completer
