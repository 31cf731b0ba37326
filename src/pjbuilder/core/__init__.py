"""Core build pipeline for pj-builder."""

from pjbuilder.core.builder import ProjectBuilder, create_project
from pjbuilder.core.errors import (
    BuildError,
    InvalidProjectNameError,
    ProjectExistsError,
    WorkspaceError,
    FetchError,
    ScanError,
    MutationError,
    RenameError,
    RemoveError,
    MetadataRemovalError,
    FinalizeError,
)
from pjbuilder.core.tree import (
    TreeMatches,
    scan_tree,
    rename_placeholder_dirs,
    relocate_paths,
    remove_files,
    remove_metadata,
)

__all__ = [
    # Builder
    "ProjectBuilder",
    "create_project",
    # Errors
    "BuildError",
    "InvalidProjectNameError",
    "ProjectExistsError",
    "WorkspaceError",
    "FetchError",
    "ScanError",
    "MutationError",
    "RenameError",
    "RemoveError",
    "MetadataRemovalError",
    "FinalizeError",
    # Tree
    "TreeMatches",
    "scan_tree",
    "rename_placeholder_dirs",
    "relocate_paths",
    "remove_files",
    "remove_metadata",
]
