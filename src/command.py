""" Command to be executed. """
import enum
from typing import NamedTuple, Optional


class RedirectKind(enum.Enum):
    NONE = "none"
    STDOUT_TRUNCATE = "stdout"
    STDOUT_APPEND = "stdout_append"
    STDERR_TRUNCATE = "stderr"
    STDERR_APPEND = "stderr_append"

    @classmethod
    def from_operator(cls, op):
        return _OPERATOR_KINDS.get(op, cls.NONE)

    @property
    def stream(self):
        """ "stdout", "stderr" or None. """
        if self in (RedirectKind.STDOUT_TRUNCATE, RedirectKind.STDOUT_APPEND):
            return "stdout"
        if self in (RedirectKind.STDERR_TRUNCATE, RedirectKind.STDERR_APPEND):
            return "stderr"
        return None

    @property
    def mode(self):
        """ File mode used to open the redirect target. """
        if self in (RedirectKind.STDOUT_APPEND, RedirectKind.STDERR_APPEND):
            return "a"
        return "w"


_OPERATOR_KINDS = {
    ">": RedirectKind.STDOUT_TRUNCATE,
    "1>": RedirectKind.STDOUT_TRUNCATE,
    ">>": RedirectKind.STDOUT_APPEND,
    "1>>": RedirectKind.STDOUT_APPEND,
    "2>": RedirectKind.STDERR_TRUNCATE,
    "2>>": RedirectKind.STDERR_APPEND,
}


class RedirectSpec(NamedTuple):
    kind: RedirectKind
    target: Optional[str] = None


NO_REDIRECT = RedirectSpec(RedirectKind.NONE)


class Command:
    """ A parsed command. """
    def __init__(self, name, args, redirect=NO_REDIRECT, external=False):
        self.name = name
        self.args = args
        self.redirect = redirect
        # True when the line carried a redirect operator; such lines
        # always run as an external process.
        self.external = external

    @property
    def argv(self) -> list[str]:
        return [self.name] + list(self.args)

    def __repr__(self):
        return (f"Command({self.name!r}, {self.args!r}, "
                f"redirect={self.redirect!r}, external={self.external!r})")
