"""Project builder: clone a template and turn it into a new project.

The build is a straight sequence of steps, each of which either succeeds
or raises a :class:`~pjbuilder.core.errors.BuildError`:

1. validate the project name
2. check the target path is free
3. create a temporary workspace
4. clone the template into it
5. scan the tree
6. rename placeholder dirs, delete READMEs, delete .git
7. move the workspace to the target

If anything fails after step 3 the workspace is deleted before the error
propagates.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Optional

from pjbuilder.config import BuilderConfig
from pjbuilder.core.errors import (
    FetchError,
    FinalizeError,
    InvalidProjectNameError,
    ProjectExistsError,
    WorkspaceError,
)
from pjbuilder.core.tree import (
    TreeMatches,
    relocate_paths,
    remove_files,
    remove_metadata,
    rename_placeholder_dirs,
    scan_tree,
)
from pjbuilder.git.utils import GitError, clone_repo

logger = logging.getLogger(__name__)

# (template_url, destination) -> None; raises GitError on failure
Fetcher = Callable[[str, Path], None]


class ProjectBuilder:
    """Builds projects from a template repository.

    The working directory, temp root and fetcher are all injectable so a
    build can run against a local repository in an isolated directory.
    """

    def __init__(
        self,
        config: Optional[BuilderConfig] = None,
        root: Optional[Path] = None,
        fetcher: Optional[Fetcher] = None,
    ):
        """Initialize the builder.

        Args:
            config: Build settings (defaults to BuilderConfig())
            root: Directory new projects are created in (defaults to cwd)
            fetcher: Clone function (defaults to a full git clone)
        """
        self.config = config or BuilderConfig()
        self.root = Path(root) if root is not None else Path.cwd()
        self.fetcher = fetcher or self._git_fetch

    def _git_fetch(self, url: str, destination: Path) -> None:
        clone_repo(url, destination, timeout=self.config.clone_timeout)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def validate_name(self, name: str) -> str:
        if not name:
            raise InvalidProjectNameError("app name is empty")
        logger.info("App name: %s", name)
        return name

    def check_target(self, name: str) -> Path:
        """Return the target path for ``name``, failing if it is taken.

        Leading separators are dropped so an absolute name still lands
        under the root directory.
        """
        target = self.root / name.lstrip(os.sep)
        if os.path.lexists(target):
            raise ProjectExistsError(target)
        return target

    def provision_workspace(self) -> Path:
        temp_root = self.config.temp_root
        try:
            workdir = tempfile.mkdtemp(
                prefix=self.config.temp_prefix,
                dir=str(temp_root) if temp_root is not None else None,
            )
        except OSError as e:
            raise WorkspaceError("failed to create temp dir") from e
        logger.info("Working directory: %s", workdir)
        return Path(workdir)

    def fetch_template(self, workdir: Path) -> None:
        url = self.config.template_url
        logger.info("Cloning %s", url)
        try:
            self.fetcher(url, workdir)
        except GitError as e:
            raise FetchError(url) from e

    def prepare_tree(self, workdir: Path, name: str) -> TreeMatches:
        """Rename placeholders and strip READMEs and metadata in ``workdir``."""
        config = self.config
        matches = scan_tree(
            workdir,
            config.placeholder,
            readme_name=config.readme_name,
            skip_dirs=(config.metadata_dir,),
        )
        renames = rename_placeholder_dirs(matches.placeholder_dirs, config.placeholder, name)
        remove_files(relocate_paths(matches.readme_files, renames))
        remove_metadata(workdir, config.metadata_dir)
        return matches

    def finalize(self, workdir: Path, target: Path) -> Path:
        # shutil.move would nest the workspace inside an existing directory
        if os.path.lexists(target):
            raise ProjectExistsError(target)
        try:
            shutil.move(str(workdir), str(target))
        except OSError as e:
            raise FinalizeError(f"failed to move directory to {target}") from e
        return target

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def build(self, name: str) -> Path:
        """Create project ``name`` under the root directory.

        Returns:
            Path of the new project

        Raises:
            BuildError: If any step fails
        """
        logger.debug("Build config: %s", self.config.to_dict())
        name = self.validate_name(name)
        target = self.check_target(name)
        workdir = self.provision_workspace()

        try:
            self.fetch_template(workdir)
            self.prepare_tree(workdir, name)
            self.finalize(workdir, target)
        except BaseException:
            logger.debug("Removing workspace %s", workdir)
            shutil.rmtree(workdir, ignore_errors=True)
            raise

        logger.info("Project created: %s", target)
        return target


def create_project(
    name: str,
    root: Optional[Path] = None,
    config: Optional[BuilderConfig] = None,
) -> Path:
    """Create a project (convenience function)."""
    return ProjectBuilder(config=config, root=root).build(name)
