"""Docs collection loading.

Reads markdown/MDX pages with YAML frontmatter from the content directory
and turns them into Document records for the exports.
"""

import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import yaml

SLUG_STRIP_PATTERN = re.compile(r"[^\w\- ]")
FM_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
CONTENT_SUFFIXES = (".md", ".mdx")


class ContentError(ValueError):
    """A docs page could not be turned into a Document."""


@dataclass(frozen=True)
class Document:
    """A single page of the docs collection."""

    id: str
    title: str
    description: str = ""
    body: Optional[str] = None
    sidebar_order: Optional[float] = None
    is_in_llms: bool = True

    @property
    def category(self) -> str:
        """First segment of the id."""
        return self.id.split("/", 1)[0]

    @property
    def slug(self) -> str:
        """Everything after the category, empty for top-level pages."""
        parts = self.id.split("/", 1)
        return parts[1] if len(parts) > 1 else ""


def split_frontmatter(text: str) -> tuple[dict, str]:
    """Split a page into its frontmatter mapping and body.

    Raises:
        yaml.YAMLError: If the frontmatter is not valid YAML
    """
    match = FM_PATTERN.match(text)
    if not match:
        return {}, text

    data = yaml.safe_load(match.group(1)) or {}
    return data, text[match.end():]


def slugify(segment: str) -> str:
    """Slug of one path segment: lower-cased, punctuation dropped, spaces as hyphens."""
    return SLUG_STRIP_PATTERN.sub("", segment.strip().lower()).replace(" ", "-")


def document_id(path: Path, content_dir: Path) -> str:
    """Build the collection id of a page from its location."""
    relative = path.relative_to(content_dir).with_suffix("")
    parts = [slugify(part) for part in relative.parts]

    # guides/index.md is served as guides
    if len(parts) > 1 and parts[-1] == "index":
        parts = parts[:-1]

    return "/".join(parts)


def _sidebar_order(data: dict, path: Path) -> Optional[float]:
    sidebar = data.get("sidebar") or {}
    if not isinstance(sidebar, dict):
        raise ContentError(f"{path}: 'sidebar' must be a mapping")

    order = sidebar.get("order")
    if order is None:
        return None

    if isinstance(order, bool):
        raise ContentError(f"{path}: sidebar order must be a number, got {order!r}")
    try:
        value = float(order)
    except (TypeError, ValueError):
        raise ContentError(f"{path}: sidebar order must be a number, got {order!r}") from None

    if not math.isfinite(value):
        raise ContentError(f"{path}: sidebar order must be finite, got {order!r}")
    return value


def load_document(path: Path, content_dir: Path) -> Document:
    """Parse a single page into a Document.

    Args:
        path: Markdown/MDX file inside the content directory
        content_dir: Root of the docs collection

    Returns:
        The parsed Document

    Raises:
        ContentError: If the frontmatter is invalid or lacks a title
    """
    text = path.read_text(encoding="utf-8")

    try:
        data, body = split_frontmatter(text)
    except yaml.YAMLError as e:
        raise ContentError(f"{path}: invalid frontmatter: {e}") from e

    if not isinstance(data, dict):
        raise ContentError(f"{path}: frontmatter must be a mapping")

    title = data.get("title")
    if not title:
        raise ContentError(f"{path}: missing title")

    return Document(
        id=document_id(path, content_dir),
        title=str(title),
        description=str(data.get("description") or ""),
        body=body or None,
        sidebar_order=_sidebar_order(data, path),
        is_in_llms=bool(data.get("isInLLMs", True)),
    )


def get_documents(
    content_dir: Path,
    filter: Optional[Callable[[Document], bool]] = None
) -> list[Document]:
    """Load every page of the docs collection.

    Args:
        content_dir: Root of the docs collection
        filter: Only keep documents for which this returns True

    Returns:
        Documents sorted by id

    Raises:
        FileNotFoundError: If the content directory does not exist
        ContentError: If a page is invalid or two pages share an id
    """
    if not content_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    documents: dict[str, Document] = {}
    for path in sorted(content_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in CONTENT_SUFFIXES:
            continue

        doc = load_document(path, content_dir)
        if doc.id in documents:
            raise ContentError(f"{path}: duplicate document id '{doc.id}'")
        documents[doc.id] = doc

    result = [documents[doc_id] for doc_id in sorted(documents)]
    if filter is not None:
        result = [doc for doc in result if filter(doc)]
    return result
