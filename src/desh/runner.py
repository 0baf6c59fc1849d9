""" Execute one interpolated command line, segment by segment. """
import contextlib
import re
import subprocess
import sys
import threading

from .command import Command
from .exceptions import CommandFailedError, SpawnError
from .lexer import split_segments

KUBECTL_TTY_RX = re.compile(r"(?<!\S)-it(?!\S)")


def normalize(command: str) -> str:
    """ Fold newlines and drop the tty flag from `kubectl exec -it`. """
    command = command.replace("\n", " ").strip()
    if "kubectl exec" in command:
        # no terminal to attach to, keep stdin only
        command = KUBECTL_TTY_RX.sub("-i", command)
    return command


def drain(stream, sink, echo=None):
    """ Read `stream` line by line into `sink` until EOF. """
    for line in stream:
        line = line.rstrip("\r\n")
        sink.append(line)
        if echo is not None:
            echo(line)
    stream.close()


def feed(proc, piped_input, shell):
    """ Write piped input to the child and close its stdin. """
    if not piped_input.endswith("\n"):
        piped_input += "\n"
    try:
        proc.stdin.write(piped_input)
        proc.stdin.flush()
    except BrokenPipeError:
        # child exited without reading all of its input
        shell.trace("stdin closed early", pid=proc.pid)
    with contextlib.suppress(BrokenPipeError):
        proc.stdin.close()


def run_process(shell, cmd: Command, piped_input: str, prefix: str) -> str:
    """ Spawn `cmd`, capture its stdout, surface its stderr. """
    try:
        proc = subprocess.Popen(
            cmd.argv,
            stdin=subprocess.PIPE if piped_input else subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=shell.state.child_environ(),
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise SpawnError(cmd.segment, exc) from exc

    stdout_lines = []
    stderr_lines = []

    def echo_stdout(line):
        shell.trace(prefix + line)

    def echo_stderr(line):
        print(prefix + line, file=sys.stderr)

    # Both pipes are drained at once so a chatty stderr cannot stall stdout.
    readers = [
        threading.Thread(target=drain, args=(proc.stdout, stdout_lines, echo_stdout), daemon=True),
        threading.Thread(target=drain, args=(proc.stderr, stderr_lines, echo_stderr), daemon=True),
    ]
    for reader in readers:
        reader.start()
    if piped_input:
        feed(proc, piped_input, shell)
    for reader in readers:
        reader.join()
    returncode = proc.wait()

    if not cmd.tolerates(returncode):
        if shell.ignore_error:
            shell.warn(f"Ignored error {cmd.segment}", returncode=returncode)
        else:
            raise CommandFailedError(cmd.segment, returncode, "\n".join(stderr_lines))

    return "\n".join(stdout_lines)


def execute_segment(shell, segment: str, piped_input: str, prefix: str = "") -> str:
    """ Run one segment as an internal command or an external process. """
    cmd = Command.parse(segment)
    if not cmd.name:
        raise SpawnError(segment, "empty command")

    handler = shell.registry.get(cmd.name)
    if handler is not None:
        return handler(segment, shell.state, piped_input)
    return run_process(shell, cmd, piped_input, prefix)


def run_pipeline(shell, command: str, prefix: str = "") -> str:
    """
    Run `command`, feeding each segment's output to the next one.
    Returns the trimmed output of the last segment and records it as the
    shell's last pipe output.
    """
    command = normalize(command)
    segments = split_segments(command)
    total = len(segments)

    output = ""
    for i, segment in enumerate(segments, start=1):
        intermediate = i < total
        if intermediate:
            shell.debug(f"{prefix}[SEGMENT {i}/{total}]: {segment}")
        output = execute_segment(shell, segment, output.strip(), prefix)
        if intermediate:
            shell.debug(f"{prefix}[SEGMENT {i}/{total}]: {segment} =>\n{output}")

    shell.last_pipe_output = output.strip()
    return shell.last_pipe_output
