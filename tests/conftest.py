import os
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def pytest_sessionstart(session):  # noqa: D401 - test harness helper
    """Make ``python -m arithtri`` runnable from subprocesses.

    Some environments lack a global 'python' shim, so the directory holding
    the running interpreter is prepended to PATH. The source tree is added
    to PYTHONPATH so the CLI resolves without an installed distribution.
    """

    bin_dir = os.path.dirname(sys.executable)
    path = os.environ.get("PATH", "")
    if bin_dir and bin_dir not in path.split(os.pathsep):
        os.environ["PATH"] = os.pathsep.join([bin_dir, path]) if path else bin_dir

    pythonpath = os.environ.get("PYTHONPATH", "")
    if str(SRC_DIR) not in pythonpath.split(os.pathsep):
        os.environ["PYTHONPATH"] = (
            os.pathsep.join([str(SRC_DIR), pythonpath]) if pythonpath else str(SRC_DIR)
        )
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
