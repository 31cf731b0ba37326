"""Shared Git utilities for pj-builder.

Templates are fetched by shelling out to the ``git`` binary. Every
invocation goes through :func:`run_git` so missing binaries, timeouts and
non-zero exits surface as the exceptions defined here.
"""

import subprocess
from pathlib import Path
from typing import Optional, Union


# =============================================================================
# Exceptions
# =============================================================================

class GitError(Exception):
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
    stream: bool = False,
) -> subprocess.CompletedProcess:
    """Run a git command with standard options.

    Args:
        *args: Git command arguments
        cwd: Working directory
        check: Raise exception on failure
        timeout: Command timeout in seconds (None waits forever)
        stream: Let output reach our stdout instead of capturing it.
            Git's stderr (where progress goes) is merged into stdout.

    Returns:
        CompletedProcess result

    Raises:
        GitNotInstalledError: If git is not installed
        GitTimeoutError: If command times out
        GitCommandError: If check=True and command fails
    """
    cmd = ["git"] + [str(arg) for arg in args]
    cmd_str = " ".join(cmd)

    if stream:
        output_options = {"stderr": subprocess.STDOUT}
    else:
        output_options = {"capture_output": True}

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd or Path.cwd(),
            text=True,
            timeout=timeout,
            **output_options,
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


def clone_repo(
    url: str,
    destination: Union[str, Path],
    timeout: Optional[float] = None,
) -> None:
    """Clone ``url`` into ``destination`` with progress on stdout.

    ``destination`` may be an existing empty directory. The full history is
    fetched; there is no shallow or authenticated mode.

    Raises:
        GitError: If git is missing, times out or exits non-zero
    """
    run_git(
        "clone", "--progress", url, str(destination),
        cwd=Path(destination).parent,
        check=True,
        timeout=timeout,
        stream=True,
    )
