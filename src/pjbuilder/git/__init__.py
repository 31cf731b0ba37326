"""Git utilities for pj-builder."""

from pjbuilder.git.utils import (
    clone_repo,
    run_git,
    GitError,
    GitNotInstalledError,
    GitTimeoutError,
    GitCommandError,
)

__all__ = [
    "clone_repo",
    "run_git",
    "GitError",
    "GitNotInstalledError",
    "GitTimeoutError",
    "GitCommandError",
]
