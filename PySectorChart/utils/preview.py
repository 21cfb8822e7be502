import os
import sys
import logging
import subprocess

logger = logging.getLogger(__name__)


def viewer_command(path: str, platform: str = sys.platform):
    if platform == "darwin":
        return ["open", path]
    if platform.startswith("win"):
        return None
    return ["xdg-open", path]


def preview(path: str) -> bool:
    """Open `path` in the default viewer without waiting for it."""
    cmd = viewer_command(path)
    try:
        if cmd is None:
            os.startfile(path)
        else:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        logger.warning("could not open %s: %s", path, e)
        return False
    return True
