"""pj-builder - create a Go project from golang-standards/project-layout."""

__version__ = "0.1.0"
