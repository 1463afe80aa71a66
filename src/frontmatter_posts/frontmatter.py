"""YAML frontmatter parser for markdown posts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from frontmatter_posts.exceptions import MetadataDecodeError

logger = logging.getLogger(__name__)

DELIMITER = "---"
_CLOSING = "\n" + DELIMITER


@dataclass(frozen=True)
class FrontmatterSplit:
    """Raw frontmatter text and the body that follows it."""

    raw_metadata: str = ""
    content: str = ""


@dataclass(frozen=True)
class FrontmatterResult:
    """Parsed frontmatter metadata and markdown body content."""

    metadata: dict[str, Any] = field(default_factory=dict)
    content: str = ""


def split_frontmatter(raw: str) -> FrontmatterSplit:
    """Separate a leading ``---`` block from the body of *raw*.

    The block must open with ``---`` followed by ``\\n`` or ``\\r\\n`` and
    closes at the first ``\\n---``. Text without an opening delimiter, or
    with no closing delimiter, comes back unchanged as content.

    One line break directly after the closing delimiter is dropped from the
    body; anything else after it is kept as-is.
    """
    if raw.startswith(DELIMITER + "\r\n"):
        start = len(DELIMITER) + 2
    elif raw.startswith(DELIMITER + "\n"):
        start = len(DELIMITER) + 1
    else:
        return FrontmatterSplit(raw_metadata="", content=raw)

    end = raw.find(_CLOSING, len(DELIMITER))
    if end == -1:
        # TODO: raise MetadataDecodeError for unterminated blocks instead of
        # passing the whole text through as body.
        logger.debug("Frontmatter block is never closed; treating text as body")
        return FrontmatterSplit(raw_metadata="", content=raw)

    raw_metadata = raw[start:end].strip() if end >= start else ""

    body_start = end + len(_CLOSING)
    if raw.startswith("\r\n", body_start):
        body_start += 2
    elif raw.startswith("\n", body_start):
        body_start += 1

    return FrontmatterSplit(raw_metadata=raw_metadata, content=raw[body_start:])


def decode_metadata(raw_metadata: str, source: str = "<string>") -> dict[str, Any]:
    """Decode frontmatter YAML into a dict.

    Empty input and YAML whose root is not a mapping (a list, a scalar or
    null) decode to ``{}``.

    Raises:
        MetadataDecodeError: If *raw_metadata* is not valid YAML.
    """
    if not raw_metadata.strip():
        return {}

    try:
        data = yaml.safe_load(raw_metadata)
    except yaml.YAMLError as exc:
        raise MetadataDecodeError(source, str(exc)) from exc

    if not isinstance(data, dict):
        logger.debug(
            "Ignoring frontmatter in %s: root is %s, not a mapping",
            source,
            type(data).__name__,
        )
        return {}

    return data


def parse_frontmatter(raw: str, source: str = "<string>") -> FrontmatterResult:
    """Split *raw* into decoded metadata and body content.

    Raises:
        MetadataDecodeError: If the frontmatter block is not valid YAML.
    """
    split = split_frontmatter(raw)
    metadata = decode_metadata(split.raw_metadata, source=source)
    return FrontmatterResult(metadata=metadata, content=split.content)


def parse_frontmatter_file(path: Path, encoding: str = "utf-8") -> FrontmatterResult:
    """Parse a markdown file with optional YAML frontmatter.

    Raises:
        FileNotFoundError: If *path* does not exist.
        MetadataDecodeError: If the frontmatter block is not valid YAML.
    """
    text = Path(path).read_text(encoding=encoding)
    return parse_frontmatter(text, source=str(path))
