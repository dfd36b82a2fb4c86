""" Parse shell commands. """
import logging

from command import Command, RedirectKind, RedirectSpec
from constants import REDIRECT_OPERATORS

log = logging.getLogger(__name__)


def is_redirect_operator(tok: str) -> bool:
    """ True for a bare redirect operator; quoted words never count. """
    return tok in REDIRECT_OPERATORS and not getattr(tok, "quoted", False)


def find_redirect(tokens: list[str]) -> int:
    """ Index of the first redirect operator, or -1. """
    for i, tok in enumerate(tokens):
        if is_redirect_operator(tok):
            return i
    return -1


def parse_command(tokens: list[str]) -> Command|None:
    """ Build a Command from a token sequence. """
    if not tokens:
        return None

    idx = find_redirect(tokens)
    if idx == -1:
        return Command(tokens[0], tokens[1:])

    if idx == 0:
        log.debug("redirect operator %r has no command", tokens[idx])
        return None

    if idx == len(tokens) - 1:
        # No target after the operator: run the line literally, operator
        # included, as an external command.
        log.debug("redirect operator %r has no target, running %r as is",
                  tokens[idx], tokens)
        return Command(tokens[0], tokens[1:], external=True)

    redirect = RedirectSpec(RedirectKind.from_operator(tokens[idx]), tokens[idx + 1])
    return Command(tokens[0], tokens[1:idx], redirect=redirect, external=True)
