""" desh: run shell-like scripts that drive external tools. """
from .exceptions import AssumptionError, CommandFailedError, ShellError, SpawnError
from .shell import Shell
from .shell_state import ShellState
from .verbosity import Verbosity

__all__ = [
    "Shell",
    "ShellState",
    "Verbosity",
    "ShellError",
    "SpawnError",
    "CommandFailedError",
    "AssumptionError",
]
