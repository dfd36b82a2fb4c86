""" Registry of builtin commands. """
import logging
import os
import sys

from exceptions import ShellExit
from resolver import find_executable

log = logging.getLogger(__name__)

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def expand_home(path: str, home: str) -> str:
    """ Expand a leading ~ or ~/ to the home directory. """
    if not home:
        return path
    if path == "~":
        return home
    if path.startswith("~/"):
        return home + path[1:]
    return path


@builtin("cd")
def builtin_cd(args, state):
    if len(args) == 0:
        print("cd: missing argument", file=sys.stderr)
        return 1

    target = args[0]
    path = expand_home(target, state.get_var("HOME"))
    try:
        # getcwd() fails once the current directory has been removed
        if not os.path.isabs(path):
            path = os.path.join(os.getcwd(), path)
        path = os.path.realpath(path)
    except OSError as e:
        print(f"cd: {target}: {e.strerror}", file=sys.stderr)
        return 1

    if not os.path.exists(path):
        print(f"cd: {target}: No such file or directory", file=sys.stderr)
        return 1
    if not os.path.isdir(path):
        print(f"cd: {target}: Not a directory", file=sys.stderr)
        return 1

    try:
        os.chdir(path)
    except OSError as e:
        print(f"cd: {target}: {e.strerror}", file=sys.stderr)
        return 1

    log.debug("cwd is now %s", path)
    return 0


@builtin("echo")
def builtin_echo(args, state) -> int:
    print(" ".join(args))
    return 0


@builtin("exit")
def builtin_exit(args, state):
    try:
        status = int(args[0]) if args else 0
    except ValueError:
        print("exit: numeric argument required", file=sys.stderr)
        status = 2
    raise ShellExit(status)


@builtin("pwd")
def builtin_pwd(args, state):
    try:
        cwd = os.getcwd()
    except OSError as e:
        print(f"pwd: {e.strerror}", file=sys.stderr)
        return 1
    print(cwd)
    return 0


@builtin("type")
def builtin_type(args, state):
    if not args:
        print("type: missing argument", file=sys.stderr)
        return 1

    name = args[0]
    if name in BUILTINS:
        print(f"{name} is a shell builtin")
        return 0

    path = find_executable(name, state.get_var("PATH"))
    if path is not None:
        print(f"{name} is {path}")
        return 0

    print(f"{name}: not found")
    return 1
