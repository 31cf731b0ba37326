"""Shared test fixtures for pj-builder.

Provides:
- write_template: Callable that lays out a project-layout style tree
- template_repo: Real local git repository holding that tree
- fake_fetch: Fetcher that writes the tree (plus .git/HEAD) without git
- temp_root: Directory used as the builder's temp location
- make_builder: ProjectBuilder factory rooted in tmp_path
- cli_runner: Click CliRunner
"""

import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner

from pjbuilder.config import BuilderConfig
from pjbuilder.core.builder import ProjectBuilder

TEMPLATE_FILES = {
    "README.md": "# project-layout\n",
    "cmd/README.md": "# /cmd\n",
    "cmd/_your_app_/main.go": "package main\n\nfunc main() {}\n",
    "internal/app/_your_app_/app.go": "package app\n",
    "internal/app/_your_app_/README.md": "# app\n",
    "_your_app_/sub_your_app_/keep.txt": "nested\n",
    "docs/notes.md": "notes\n",
}


def _write_template(root: Path) -> Path:
    for relative, content in TEMPLATE_FILES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def write_template():
    """Return a function that writes the template tree under a root."""
    return _write_template


@pytest.fixture
def template_repo(tmp_path):
    """Create a real git repository containing the template tree."""
    repo = tmp_path / "template"
    repo.mkdir()
    _write_template(repo)
    subprocess.run(["git", "init"], cwd=repo, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=repo,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo,
        capture_output=True,
    )
    subprocess.run(["git", "add", "-A"], cwd=repo, capture_output=True)
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", "commit", "-m", "Initial commit"],
        cwd=repo,
        capture_output=True,
    )
    return repo


@pytest.fixture
def fake_fetch():
    """Fetcher that writes the template and a stub .git directory.

    Records every (url, destination) call in ``fake_fetch.calls``.
    """
    def fetch(url, destination):
        fetch.calls.append((url, Path(destination)))
        _write_template(Path(destination))
        git_dir = Path(destination) / ".git"
        git_dir.mkdir()
        (git_dir / "HEAD").write_text("ref: refs/heads/main\n")

    fetch.calls = []
    return fetch


@pytest.fixture
def temp_root(tmp_path):
    """Empty directory standing in for the system temp dir."""
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def projects_root(tmp_path):
    """Empty directory new projects are created in."""
    path = tmp_path / "projects"
    path.mkdir()
    return path


@pytest.fixture
def make_builder(projects_root, temp_root, fake_fetch):
    """Factory for builders isolated under tmp_path."""
    def factory(fetcher=fake_fetch, **config_overrides):
        config_overrides.setdefault("temp_root", temp_root)
        config = BuilderConfig(**config_overrides)
        return ProjectBuilder(config=config, root=projects_root, fetcher=fetcher)
    return factory


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()
