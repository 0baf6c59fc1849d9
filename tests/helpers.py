import io
from unittest.mock import MagicMock


def fake_proc(stdout="", stderr="", returncode=0):
    """ Stand-in for a subprocess.Popen object. """
    proc = MagicMock()
    proc.pid = 4242
    proc.stdout = io.StringIO(stdout)
    proc.stderr = io.StringIO(stderr)
    proc.stdin = MagicMock()
    proc.wait.return_value = returncode
    return proc
