"""Git helpers for kickstart."""

from kickstart.git.utils import (
    GitError,
    GitNotInstalledError,
    GitTimeoutError,
    GitCommandError,
    run_git,
    clone_shallow,
)

__all__ = [
    "GitError",
    "GitNotInstalledError",
    "GitTimeoutError",
    "GitCommandError",
    "run_git",
    "clone_shallow",
]
