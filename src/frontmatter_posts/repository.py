"""PostRepository — reads markdown posts with frontmatter from a directory.

Usage::

    from frontmatter_posts import PostRepository

    # Posts in ./posts, resolved against the working directory at call time
    repo = PostRepository()

    # Explicit base path, e.g. the site root
    repo = PostRepository("content/blog", base_path=site_root)

    for post in repo.list_all():
        render(post.slug, post.metadata, post.content)

Every call reads from disk; nothing is cached between calls.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from frontmatter_posts.exceptions import PostEncodingError, PostNotFoundError
from frontmatter_posts.frontmatter import parse_frontmatter
from frontmatter_posts.types import MARKDOWN_SUFFIX, Post, PostParams, strip_extension

logger = logging.getLogger(__name__)

DEFAULT_POSTS_DIR = "posts"
BOM = "\ufeff"


class PostRepository(BaseModel):
    """Read-only access to the markdown posts in a directory.

    Relative directories resolve against ``base_path``, or against the
    process working directory when ``base_path`` is ``None``. Absolute
    directories are used as-is. Every method takes an optional
    ``directory`` that overrides the configured one for that call.

    Args:
        directory: Directory holding the ``.md`` post files.
        base_path: Base for relative directories. ``None`` means
            ``Path.cwd()`` at call time.
        encoding: Text encoding of the post files.
    """

    directory: str = DEFAULT_POSTS_DIR
    base_path: Path | None = None
    encoding: str = "utf-8"

    model_config = {"frozen": True}

    def __init__(
        self, directory: str | os.PathLike[str] = DEFAULT_POSTS_DIR, **kwargs: Any
    ) -> None:
        super().__init__(directory=os.fspath(directory), **kwargs)

    def resolve_directory(self, directory: str | os.PathLike[str] | None = None) -> Path:
        """Return the absolute-or-based path of *directory* (or the configured one)."""
        target = Path(self.directory if directory is None else directory)
        if target.is_absolute():
            return target
        base = self.base_path if self.base_path is not None else Path.cwd()
        return base / target

    def list_slugs(self, directory: str | os.PathLike[str] | None = None) -> list[str]:
        """Return the entry names of the posts directory in filesystem order.

        Names are returned as-is, extension included. Nothing is filtered.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """
        posts_dir = self.resolve_directory(directory)
        names = [entry.name for entry in posts_dir.iterdir()]
        logger.debug("Listed %d entries in %s", len(names), posts_dir)
        return names

    def list_params(self, directory: str | os.PathLike[str] | None = None) -> list[PostParams]:
        """Return ``{"slug": ...}`` route parameters for every entry."""
        return [PostParams(slug=strip_extension(name)) for name in self.list_slugs(directory)]

    def get_by_slug(self, slug: str, directory: str | os.PathLike[str] | None = None) -> Post:
        """Read and parse ``<directory>/<slug>.md``.

        *slug* may carry the ``.md`` extension; ``"hello"`` and
        ``"hello.md"`` name the same post.

        Raises:
            PostNotFoundError: If no file exists for *slug*.
            PostEncodingError: If the file is not valid text in ``encoding``.
            MetadataDecodeError: If the frontmatter block is not valid YAML.
        """
        real_slug = strip_extension(slug)
        path = self.resolve_directory(directory) / f"{real_slug}{MARKDOWN_SUFFIX}"

        try:
            # newline="" keeps \r\n intact for the frontmatter splitter
            with path.open(encoding=self.encoding, newline="") as fh:
                text = fh.read()
        except FileNotFoundError as exc:
            raise PostNotFoundError(real_slug, path) from exc
        except UnicodeDecodeError as exc:
            raise PostEncodingError(real_slug, path, str(exc)) from exc

        # a leading byte-order mark would hide the opening delimiter
        text = text.removeprefix(BOM)
        logger.debug("Read post '%s' from %s", real_slug, path)
        result = parse_frontmatter(text, source=str(path))
        return Post(slug=real_slug, metadata=result.metadata, content=result.content)

    def list_all(self, directory: str | os.PathLike[str] | None = None) -> list[Post]:
        """Read every post in the directory, in listing order.

        Stops at the first post that fails to read or decode.
        """
        return [self.get_by_slug(name, directory) for name in self.list_slugs(directory)]


def get_all_post_slugs(
    directory: str = DEFAULT_POSTS_DIR, *, base_path: Path | None = None
) -> list[str]:
    """Return the entry names of *directory*; see ``PostRepository.list_slugs``."""
    return PostRepository(directory, base_path=base_path).list_slugs()


def get_all_post_params(
    directory: str = DEFAULT_POSTS_DIR, *, base_path: Path | None = None
) -> list[PostParams]:
    """Return ``{"slug": ...}`` params for *directory*; see ``PostRepository.list_params``."""
    return PostRepository(directory, base_path=base_path).list_params()


def get_all_posts(directory: str = DEFAULT_POSTS_DIR, *, base_path: Path | None = None) -> list[Post]:
    """Read every post in *directory*; see ``PostRepository.list_all``."""
    return PostRepository(directory, base_path=base_path).list_all()


def get_post_by_slug(
    slug: str, directory: str = DEFAULT_POSTS_DIR, *, base_path: Path | None = None
) -> Post:
    """Read one post from *directory*; see ``PostRepository.get_by_slug``."""
    return PostRepository(directory, base_path=base_path).get_by_slug(slug)
