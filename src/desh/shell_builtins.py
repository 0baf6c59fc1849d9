""" Registry of internal commands. """
import re
import subprocess
import sys

from .constants import START_LAUNCHERS, VAR_NAME_RX
from .exceptions import AssumptionError, ShellError
from .lexer import tokenize

# Default builtins. Each takes the owning shell first; the shell binds it
# so the registered handler is handler(line, state, piped_input).
BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


class Registry:
    """ Internal commands of one session, looked up by leading token. """
    def __init__(self):
        self.commands = {}

    def register(self, name, handler):
        # later registrations win
        self.commands[name] = handler

    def unregister(self, name):
        self.commands.pop(name, None)

    def get(self, name):
        return self.commands.get(name)

    def __contains__(self, name):
        return name in self.commands


def start_launcher(platform=None):
    """ Launcher argv for `platform` (default: this host), or None. """
    platform = platform or sys.platform
    for prefix, launcher in START_LAUNCHERS.items():
        if platform.startswith(prefix):
            return list(launcher)
    return None


@builtin("start")
def builtin_start(shell, line, state, piped_input=""):
    """ Open a URL or path with the platform's default handler. """
    url = shell.interpolate(line[len("start"):].strip())
    launcher = start_launcher()
    if launcher is None:
        print(f"Open manually this url {url}")
        return ""

    try:
        subprocess.run(
            launcher + [url],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        shell.error("start: cannot launch", launcher=launcher[0], url=url, reason=str(exc))
    return ""


@builtin("export")
def builtin_export(shell, line, state, piped_input=""):
    """
    export NAME=EXPR
    EXPR containing a pipe is run as a pipeline, anything else is
    interpolated. Bad syntax is reported and ignored.
    """
    assignment = line[len("export"):].strip()
    name, sep, expr = assignment.partition("=")
    name = name.strip()
    if not sep or not VAR_NAME_RX.match(name):
        shell.error("Invalid export syntax", line=line)
        return ""

    expr = expr.strip()
    if "|" in expr:
        value = shell.run_pipeline(expr)
    else:
        value = shell.interpolate(expr)
    state.set_var(name, value)
    shell.debug("export", name=name, value=value)
    return ""


@builtin("assume")
def builtin_assume(shell, line, state, piped_input=""):
    """ Pass piped input through only if it has exactly N non-blank lines. """
    parts = tokenize(line)
    if len(parts) < 2:
        raise AssumptionError("assume requires a parameter, e.g. 'assume 1'")
    try:
        expected = int(parts[1])
    except ValueError:
        raise AssumptionError(f"assume parameter must be a number, got {parts[1]!r}") from None
    if not piped_input:
        raise AssumptionError("assume: no piped input available")

    lines = [ln for ln in piped_input.split("\n") if ln.strip()]
    if len(lines) != expected:
        raise AssumptionError(
            f"assume: expected {expected} line(s), got {len(lines)}:\n{piped_input}"
        )
    return "\n".join(lines)


@builtin("regexp")
def builtin_regexp(shell, line, state, piped_input=""):
    """ First capture group of PATTERN in the piped input, or "". """
    parts = tokenize(line)
    if len(parts) < 2:
        raise ShellError("regexp: no pattern provided")
    pattern = " ".join(parts[1:])
    try:
        match = re.search(pattern, piped_input or "")
    except re.error as exc:
        raise ShellError(f"regexp: invalid pattern {pattern!r}: {exc}") from exc

    shell.trace("regexp", pattern=pattern, piped_input=piped_input, matched=bool(match))
    if match and match.re.groups and match.group(1):
        return match.group(1)
    return ""
