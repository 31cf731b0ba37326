"""Configuration for pj-builder.

The CLI always runs with the defaults below; the dataclass exists so the
builder can be pointed at a local template repository in tests.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional


DEFAULT_TEMPLATE_URL = "https://github.com/golang-standards/project-layout"
DEFAULT_PLACEHOLDER = "_your_app_"


@dataclass(frozen=True)
class BuilderConfig:
    """Settings for a single project build."""

    # Template source
    template_url: str = DEFAULT_TEMPLATE_URL
    placeholder: str = DEFAULT_PLACEHOLDER

    # Pruning
    readme_name: str = "README.md"
    metadata_dir: str = ".git"

    # Workspace
    temp_prefix: str = "pj"
    temp_root: Optional[Path] = None  # None uses the system temp dir

    # Clone
    clone_timeout: Optional[float] = None  # None waits forever

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "BuilderConfig":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })
