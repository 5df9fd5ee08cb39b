"""Git subprocess wrappers used to fetch remote templates."""

import subprocess
from pathlib import Path
from typing import Optional

from kickstart.errors import KickstartError


# =============================================================================
# Exceptions
# =============================================================================

class GitError(KickstartError):
    """Base exception for Git operations."""
    pass


class GitNotInstalledError(GitError):
    """Git is not installed or not in PATH."""
    pass


class GitTimeoutError(GitError):
    """Git command timed out."""

    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout


class GitCommandError(GitError):
    """Git command failed with non-zero exit code."""

    def __init__(self, message: str, returncode: int, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


# =============================================================================
# Core Functions
# =============================================================================

def run_git(
    *args,
    cwd: Optional[Path] = None,
    check: bool = False,
    timeout: Optional[float] = None,
    capture: bool = True,
) -> subprocess.CompletedProcess:
    """Run a git command.

    Args:
        *args: Git command arguments
        cwd: Working directory
        check: Raise exception on failure
        timeout: Command timeout in seconds (None waits forever)
        capture: Capture output; when False the child inherits the
            terminal so the user sees git's own progress and errors

    Returns:
        CompletedProcess result

    Raises:
        GitNotInstalledError: If git is not installed
        GitTimeoutError: If command times out
        GitCommandError: If check=True and command fails
    """
    cmd = ["git"] + [str(a) for a in args]
    cmd_str = " ".join(cmd)

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd or Path.cwd(),
            capture_output=capture,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GitNotInstalledError(
            "Git is not installed or not in PATH. "
            "Please install git: https://git-scm.com/downloads"
        )
    except subprocess.TimeoutExpired:
        raise GitTimeoutError(
            f"Git command timed out after {timeout}s: {cmd_str}",
            timeout=timeout,
        )

    if check and result.returncode != 0:
        stderr = result.stderr or ""
        raise GitCommandError(
            f"Git command failed: {cmd_str}\n{stderr}".rstrip(),
            returncode=result.returncode,
            stderr=stderr,
        )
    return result


def clone_shallow(url: str, dest: Path) -> None:
    """Clone the latest commit of ``url`` into ``dest``.

    Output goes straight to the terminal. Blocks until git exits.

    Raises:
        GitCommandError: If the clone fails
    """
    run_git("clone", "--depth=1", url, str(dest), check=True, capture=False)
