""" Command-line entry point. """
import argparse
import logging
import sys

from completion import install_completer
from exceptions import ShellExit
from shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(
        prog="minish",
        description="A small interactive command interpreter"
    )
    parser.add_argument(
        "-c",
        metavar="COMMAND",
        dest="command",
        help="run a single command line and exit with its status"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log diagnostics to stderr"
    )
    parser.add_argument(
        "--no-completion",
        action="store_true",
        help="do not set up tab completion"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    sh = Shell()

    if args.command is not None:
        try:
            return sh.run_line(args.command)
        except ShellExit as e:
            return e.status

    if not args.no_completion:
        install_completer(sh.state.get_var("PATH"))
    return sh.run()


if __name__ == "__main__":
    raise SystemExit(main())
