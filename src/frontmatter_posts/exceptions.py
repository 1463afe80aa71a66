"""Exceptions raised while reading posts."""

from __future__ import annotations

from pathlib import Path


class PostsError(Exception):
    """Base class for errors raised by frontmatter-posts."""


class PostNotFoundError(PostsError, FileNotFoundError):
    """No markdown file exists for the requested slug."""

    def __init__(self, slug: str, path: Path) -> None:
        super().__init__(f"Post '{slug}' not found at {path}")
        self.slug = slug
        self.path = path


class PostEncodingError(PostsError, ValueError):
    """A post file is not valid text in the configured encoding."""

    def __init__(self, slug: str, path: Path, reason: str) -> None:
        super().__init__(f"Post '{slug}' at {path} could not be decoded: {reason}")
        self.slug = slug
        self.path = path


class MetadataDecodeError(PostsError, ValueError):
    """The frontmatter block is not valid YAML."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Invalid frontmatter in {source}: {reason}")
        self.source = source
