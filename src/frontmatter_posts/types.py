"""Record types for posts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypedDict

MARKDOWN_SUFFIX = ".md"


def strip_extension(name: str) -> str:
    """Return *name* without its trailing ``.md`` suffix(es)."""
    while name.endswith(MARKDOWN_SUFFIX):
        name = name[: -len(MARKDOWN_SUFFIX)]
    return name


class PostParams(TypedDict):
    """Route parameters for a single post page.

    Fields:
        slug: Post filename without its ``.md`` extension.
    """

    slug: str


@dataclass(frozen=True)
class Post:
    """A markdown post read from disk.

    Attributes:
        slug: Filename with the ``.md`` extension removed.
        metadata: Decoded frontmatter; empty when the file has none.
        content: Body text with the frontmatter block removed.
    """

    slug: str
    metadata: dict[str, Any] = field(default_factory=dict)
    content: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the post as a plain ``{"slug", "metadata", "content"}`` dict."""
        return {"slug": self.slug, "metadata": self.metadata, "content": self.content}
