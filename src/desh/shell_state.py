""" Variables visible to one desh session. """
import os

from .constants import VAR_REF_RX


class ShellState:
    def __init__(self, env=None):
        self.vars = dict(env or {})

    def set_var(self, name, value):
        self.vars[name] = value

    def get_var(self, name):
        return self.vars.get(name, "")

    def __contains__(self, name):
        return name in self.vars

    def child_environ(self) -> dict[str, str]:
        """ Host environment overlaid with the session variables. """
        environ = dict(os.environ)
        environ.update(self.vars)
        return environ

    def interpolate(self, text: str) -> str:
        """
        Replace $NAME and ${NAME} references, left to right. Names are ASCII
        identifiers; a $ that does not start one is kept literally.
        """
        return VAR_REF_RX.sub(lambda m: self.get_var(m.group(1) or m.group(2)), text)
