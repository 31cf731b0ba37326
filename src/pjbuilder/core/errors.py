"""Exceptions raised while building a project.

Every failure in the build pipeline is a :class:`BuildError`. Where an
OS or git error triggered the failure it is chained as ``__cause__``.
"""


class BuildError(Exception):
    """Base exception for project builds."""
    pass


class InvalidProjectNameError(BuildError):
    """Project name is unusable (currently: empty)."""
    pass


class ProjectExistsError(BuildError):
    """Something already exists at the target path."""

    def __init__(self, path):
        super().__init__(f"{path} already exists")
        self.path = path


class WorkspaceError(BuildError):
    """Temporary workspace could not be created."""
    pass


class FetchError(BuildError):
    """Template repository could not be cloned."""

    def __init__(self, url: str):
        super().__init__(f"failed to clone {url}")
        self.url = url


class ScanError(BuildError):
    """Walking the cloned tree failed."""
    pass


class MutationError(BuildError):
    """Renaming or pruning the cloned tree failed."""
    pass


class RenameError(MutationError):
    """A placeholder directory could not be renamed."""
    pass


class RemoveError(MutationError):
    """A README file could not be removed."""
    pass


class MetadataRemovalError(MutationError):
    """The version-control metadata directory could not be removed."""
    pass


class FinalizeError(BuildError):
    """The prepared workspace could not be moved into place."""
    pass
