""" Command line front end for desh. """
import argparse
import os
import sys

from .constants import VAR_NAME_RX
from .exceptions import ShellError
from .logging_config import configure_logging
from .shell import Shell
from .verbosity import Verbosity


def build_parser():
    parser = argparse.ArgumentParser(
        prog="desh",
        description="Run a desh script: commands, pipes, $(...) and $VAR."
    )
    parser.add_argument(
        "script",
        nargs="*",
        help="script text; read from stdin when omitted"
    )
    parser.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="read the script from PATH"
    )
    parser.add_argument(
        "-v", "--verbosity",
        type=str.lower,
        choices=[level.name.lower() for level in Verbosity],
        default=os.environ.get("DESH_VERBOSITY", "info").lower(),
        help="diagnostic level (default: info, or $DESH_VERBOSITY)"
    )
    parser.add_argument(
        "-i", "--ignore-errors",
        action="store_true",
        help="keep going when a command exits non-zero"
    )
    parser.add_argument(
        "-e", "--env",
        metavar="NAME=VALUE",
        action="append",
        default=[],
        help="set a variable before the script starts (repeatable)"
    )
    return parser


def read_script(args) -> str:
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    if args.script:
        return " ".join(args.script)
    return sys.stdin.read()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check choices against the default
    try:
        verbosity = Verbosity.parse(args.verbosity)
    except ValueError as exc:
        parser.error(str(exc))

    env = dict(os.environ)
    for pair in args.env:
        name, sep, value = pair.partition("=")
        if not sep or not VAR_NAME_RX.match(name):
            parser.error(f"invalid --env value: {pair}")
        env[name] = value

    try:
        script = read_script(args)
    except OSError as exc:
        parser.error(f"cannot read script: {exc}")

    configure_logging()
    shell = Shell(verbosity, env, ignore_error=args.ignore_errors)
    try:
        output = shell.run_script(script)
    except ShellError:
        # already reported by the script runner
        return 1

    if output and not shell.verbosity.allows(Verbosity.INFO):
        print(output)
    return 0
