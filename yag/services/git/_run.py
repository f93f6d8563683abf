"""Internal helper: run git commands and return their output."""

import logging
import subprocess
from pathlib import Path

from yag.errors import GitRunnerError

LOG = logging.getLogger("yag.services.git")


def _run_git(args: list[str], cwd: Path | None = None) -> str:
    """Run git command and return stripped stdout; raise GitRunnerError on non-zero exit."""
    cmd = ["git"] + args
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
            timeout=60,
        )
    except subprocess.CalledProcessError as e:
        err = (e.stderr or e.stdout or "").strip()
        LOG.debug("git %s failed: %s", args, err)
        raise GitRunnerError(f"git {' '.join(args)}: {err}") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e
    return result.stdout.strip()
