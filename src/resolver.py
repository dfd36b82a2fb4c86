""" Locate executables on the search path. """
import logging
import os

from constants import BUILTIN_NAMES, PATH_SEP

log = logging.getLogger(__name__)


def search_path(path_list) -> list[str]:
    """ Directories of a PATH-style value, in order, empty entries dropped. """
    if not path_list:
        return []
    return [d for d in path_list.split(PATH_SEP) if d]


def is_executable_file(path: str) -> bool:
    return os.path.exists(path) and not os.path.isdir(path) and os.access(path, os.X_OK)


def find_executable(name: str, path_list) -> str|None:
    """
    Return the absolute path of the first executable called `name` in the
    directories of `path_list`, or None.
    """
    if not name or "/" in name:
        return None

    for directory in search_path(path_list):
        candidate = os.path.join(directory, name)
        if is_executable_file(candidate):
            found = os.path.abspath(candidate)
            log.debug("resolved %s -> %s", name, found)
            return found

    log.debug("%s not found on search path", name)
    return None


def list_executables(path_list) -> set[str]:
    """ Every executable name on the search path, plus the builtins. """
    names = set(BUILTIN_NAMES)

    for directory in search_path(path_list):
        try:
            entries = os.listdir(directory)
        except OSError as e:
            log.debug("skipping %s: %s", directory, e.strerror)
            continue

        for entry in entries:
            if is_executable_file(os.path.join(directory, entry)):
                names.add(entry)

    return names
