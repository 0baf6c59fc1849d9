""" Implement the core of the shell. """
import contextlib
import functools

from .constants import INDENT, PREFIX_WIDTH, SUBST_OPEN
from .lexer import find_substitution, first_token, paren_balance
from .logging_config import get_logger
from .runner import run_pipeline
from .shell_builtins import BUILTINS, Registry
from .shell_state import ShellState
from .verbosity import Verbosity


def preprocess(script: str) -> list[str]:
    """
    Turn raw script text into statements.
    Blank lines are dropped, comments are kept as-is, and an `export` whose
    $( openers are not all closed swallows the following lines until they are.
    """
    raw_lines = script.split("\n")
    statements = []
    i = 0
    while i < len(raw_lines):
        line = raw_lines[i].strip()
        i += 1
        if not line:
            continue
        if line.startswith("#"):
            statements.append(line)
            continue
        if line.startswith("export ") and SUBST_OPEN in line:
            while paren_balance(line) > 0 and i < len(raw_lines):
                line += "\n" + raw_lines[i].strip()
                i += 1
        statements.append(line)
    return statements


class Shell:
    """
    One interpreter session: variables, verbosity, internal commands and the
    output of the last pipeline. Not safe to share between threads.
    """
    def __init__(self, verbosity=Verbosity.INFO, env=None, ignore_error=False):
        self.verbosity = Verbosity.parse(verbosity)
        self.state = ShellState(env)
        self.registry = Registry()
        self.ignore_error = ignore_error
        self.last_pipe_output = ""
        self.logger = get_logger()
        for name, func in BUILTINS.items():
            self.registry.register(name, functools.partial(func, self))

    def register(self, name, handler):
        """ Add an internal command: handler(line, state, piped_input) -> str. """
        self.registry.register(name, handler)

    def unregister(self, name):
        self.registry.unregister(name)

    @contextlib.contextmanager
    def ignoring_errors(self, ignore=True):
        """ Temporarily tolerate failing processes. """
        saved = self.ignore_error
        self.ignore_error = ignore
        try:
            yield self
        finally:
            self.ignore_error = saved

    # Logging, gated by the session verbosity.
    def _emit(self, level, method, event, **kw):
        if self.verbosity.allows(level):
            getattr(self.logger, method)(event, **kw)

    def trace(self, event, **kw):
        self._emit(Verbosity.TRACE, "debug", event, trace=True, **kw)

    def debug(self, event, **kw):
        self._emit(Verbosity.DEBUG, "debug", event, **kw)

    def info(self, event, **kw):
        self._emit(Verbosity.INFO, "info", event, **kw)

    def warn(self, event, **kw):
        self._emit(Verbosity.WARN, "warning", event, **kw)

    def error(self, event, **kw):
        self._emit(Verbosity.ERROR, "error", event, **kw)

    def interpolate(self, text: str, indent_level: int = 0) -> str:
        """ Resolve $(...) substitutions, then $NAME and ${NAME}. """
        pos = 0
        while True:
            span = find_substitution(text, pos)
            if span is None:
                break
            begin, end = span
            inner = self.interpolate(text[begin + len(SUBST_OPEN):end - 1].strip(), indent_level)
            if "\n" in inner:
                result = self.run_script(inner, indent_level + 1)
            else:
                result = self.run_pipeline(inner)
            result = result.strip()
            text = text[:begin] + result + text[end:]
            # substituted output is never re-scanned
            pos = begin + len(result)

        text = self.state.interpolate(text)
        self.trace("interpolate", text=text)
        return text

    def run_pipeline(self, command: str, prefix: str = "") -> str:
        return run_pipeline(self, command, prefix)

    def _execute_statement(self, line, piped_input="", prefix=""):
        name = first_token(line)
        handler = self.registry.get(name)
        if handler is not None:
            return handler(line, self.state, piped_input)
        return self.run_pipeline(line, prefix)

    def run_command(self, line: str) -> str:
        """ Interpolate and execute one command line. """
        return self._execute_statement(self.interpolate(line))

    def run_script(self, script: str, indent_level: int = 0) -> str:
        """ Execute `script` line by line; returns the last line's output. """
        self.trace(f"shellScript:[{script}]")
        indent = INDENT * indent_level
        last_output = ""

        for lineno, line in enumerate(preprocess(script), start=1):
            if line.startswith("#"):
                self.info(indent + line)
                continue

            self.debug(f"{indent}Script: {line}")
            base = f"{first_token(line)}:{lineno}".ljust(PREFIX_WIDTH)
            try:
                interpolated = self.interpolate(line, indent_level)
                base = f"{first_token(interpolated)}:{lineno}".ljust(PREFIX_WIDTH)
                out_prefix = f"{indent}{base}< "
                self.info(f"{indent}{base}> {interpolated}")
                last_output = self._execute_statement(interpolated, last_output, out_prefix)
            except Exception as exc:
                self.error(f"{indent}{base}err> {exc}")
                raise

            for out_line in last_output.split("\n"):
                self.info(out_prefix + out_line)

        return last_output

    def sh(self, *parts) -> str:
        """ Join literal text and values into a script and run it. """
        self.trace("sh", parts=parts)
        return self.run_script("".join(str(part) for part in parts))

    __call__ = sh
