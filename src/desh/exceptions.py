""" Errors raised while running desh scripts. """


class ShellError(Exception):
    """ Base class for every error raised by the interpreter. """


class SpawnError(ShellError):
    """ The target executable could not be launched. """
    def __init__(self, segment, reason):
        super().__init__(f"Failed to spawn command: {segment}\n{reason}")
        self.segment = segment


class CommandFailedError(ShellError):
    """ A spawned process exited with a non-zero status. """
    def __init__(self, command, returncode, stderr=""):
        super().__init__(f"Command failed ({returncode}): {command}")
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class AssumptionError(ShellError):
    """ `assume` got something other than what it was told to expect. """
