"""Markdown posts with YAML frontmatter for static site generation.

Two paths to use:

**Repository** — configure once, read many times::

    from frontmatter_posts import PostRepository

    repo = PostRepository("posts", base_path=site_root)
    params = repo.list_params()          # [{"slug": "hello-world"}, ...]
    post = repo.get_by_slug("hello-world")
    post.metadata["title"], post.content

**Parser only** — split and decode text you already have::

    from frontmatter_posts import parse_frontmatter

    result = parse_frontmatter("---\\ntitle: Hello\\n---\\nBody")
    result.metadata  # {"title": "Hello"}
    result.content   # "Body"
"""

from frontmatter_posts.exceptions import (
    MetadataDecodeError,
    PostEncodingError,
    PostNotFoundError,
    PostsError,
)
from frontmatter_posts.frontmatter import (
    FrontmatterResult,
    FrontmatterSplit,
    decode_metadata,
    parse_frontmatter,
    parse_frontmatter_file,
    split_frontmatter,
)
from frontmatter_posts.repository import (
    PostRepository,
    get_all_post_params,
    get_all_post_slugs,
    get_all_posts,
    get_post_by_slug,
)
from frontmatter_posts.types import Post, PostParams, strip_extension

__all__ = [
    "PostRepository",
    "Post",
    "PostParams",
    "FrontmatterResult",
    "FrontmatterSplit",
    "parse_frontmatter",
    "parse_frontmatter_file",
    "split_frontmatter",
    "decode_metadata",
    "strip_extension",
    "get_all_post_slugs",
    "get_all_post_params",
    "get_all_posts",
    "get_post_by_slug",
    "PostsError",
    "PostNotFoundError",
    "PostEncodingError",
    "MetadataDecodeError",
]
