import re

VAR_NAME_RX = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
# matches: $NAME and ${NAME}
VAR_REF_RX = re.compile(r"\$(?:\{([A-Za-z_][A-Za-z0-9_]*)\}|([A-Za-z_][A-Za-z0-9_]*))")

SUBST_OPEN = "$("
INDENT = "  "
PREFIX_WIDTH = 10

# sys.platform prefix -> launcher argv for the `start` builtin
START_LAUNCHERS = {
    "win32": ["cmd", "/c", "start"],
    "cygwin": ["cmd", "/c", "start"],
    "darwin": ["open"],
    "linux": ["xdg-open"],
}
