"""Scanning and pruning of a cloned template tree.

A single walk collects the placeholder directories and README files, then
the mutation helpers rename and delete them:
- rename_placeholder_dirs: substitute the project name for the token
- relocate_paths: follow recorded paths through those renames
- remove_files: drop template README files
- remove_metadata: drop the clone's .git directory
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from pjbuilder.core.errors import (
    MetadataRemovalError,
    RemoveError,
    RenameError,
    ScanError,
)

logger = logging.getLogger(__name__)


@dataclass
class TreeMatches:
    """Paths collected by one walk of a workspace."""
    placeholder_dirs: List[Path] = field(default_factory=list)  # deepest first
    readme_files: List[Path] = field(default_factory=list)  # walk order


def _raise_scan_error(error: OSError):
    raise ScanError("failed in listing directories") from error


def scan_tree(
    root: Union[str, Path],
    placeholder: str,
    readme_name: str = "README.md",
    skip_dirs: Iterable[str] = (".git",),
) -> TreeMatches:
    """Walk ``root`` once and collect placeholder dirs and README files.

    The walk is lexical and top-down. Directory matches are returned in
    reverse walk order, which puts every match before its ancestors, so
    they can be renamed one by one without invalidating the paths still
    to be processed. Symlinks are never treated as directories. Entries of
    the root named in ``skip_dirs`` are not descended into (they are deleted
    whole later); the root itself never matches.

    Raises:
        ScanError: If any part of the tree cannot be listed
    """
    root = Path(root)
    skip = set(skip_dirs)
    found_dirs: List[Path] = []
    matches = TreeMatches()

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_scan_error):
        current = Path(dirpath)
        dirnames.sort()

        entries = []
        for name in list(dirnames):
            path = current / name
            if path.is_symlink():
                # os.walk lists links to directories with the directories
                dirnames.remove(name)
                entries.append((name, False))
            elif name in skip and current == root:
                dirnames.remove(name)
            else:
                entries.append((name, True))
        entries.extend((name, False) for name in filenames)
        entries.sort()

        for name, is_dir in entries:
            if is_dir:
                if name.endswith(placeholder):
                    found_dirs.append(current / name)
            elif name == readme_name:
                matches.readme_files.append(current / name)

    matches.placeholder_dirs = list(reversed(found_dirs))
    logger.debug(
        "Scan found %d placeholder dirs and %d README files",
        len(matches.placeholder_dirs), len(matches.readme_files),
    )
    return matches


def rename_placeholder_dirs(
    dirs: Iterable[Path], placeholder: str, name: str
) -> List[Tuple[Path, Path]]:
    """Rename each directory, replacing ``placeholder`` in its base name.

    Only the final path component is rewritten, so ``dirs`` must be ordered
    children before parents (as :func:`scan_tree` returns them). The new
    name is not validated: a separator in ``name`` reaches ``os.rename``
    as-is and fails there like any other OS error.

    Returns:
        (old, new) path pairs, in rename order

    Raises:
        RenameError: On the first rename that fails
    """
    renames = []
    for path in dirs:
        path = Path(path)
        new_path = Path(f"{path.parent}{os.sep}{path.name.replace(placeholder, name)}")
        logger.debug("Renaming %s -> %s", path, new_path)
        try:
            os.rename(path, new_path)
        except OSError as e:
            raise RenameError(f"failed to rename directory with appname: {path}") from e
        renames.append((path, new_path))
    return renames


def relocate_paths(paths: Iterable[Path], renames: Iterable[Tuple[Path, Path]]) -> List[Path]:
    """Rewrite ``paths`` recorded before ``renames`` were applied."""
    renames = list(renames)
    relocated = []
    for path in paths:
        path = Path(path)
        for old, new in renames:
            try:
                path = new / path.relative_to(old)
            except ValueError:
                continue
        relocated.append(path)
    return relocated


def remove_files(paths: Iterable[Path]) -> int:
    """Delete each file, stopping at the first failure."""
    count = 0
    for path in paths:
        logger.debug("Removing %s", path)
        try:
            os.remove(path)
        except OSError as e:
            raise RemoveError(f"failed to remove {Path(path).name}: {path}") from e
        count += 1
    return count


def remove_metadata(root: Union[str, Path], metadata_dir: str = ".git") -> bool:
    """Recursively delete ``root/metadata_dir``.

    Returns:
        False if there was nothing to delete

    Raises:
        MetadataRemovalError: If the directory exists but cannot be deleted
    """
    target = Path(root) / metadata_dir
    if not os.path.lexists(target):
        return False
    try:
        if target.is_symlink() or not target.is_dir():
            # A "gitdir:" file, as left by worktrees and submodules
            target.unlink()
        else:
            shutil.rmtree(target)
    except OSError as e:
        raise MetadataRemovalError(f"failed to remove {metadata_dir} directory") from e
    return True
