"""Shared fixtures for the playbook export tests."""

from pathlib import Path
from typing import Callable, Optional

import pytest

from playbook.core.content import Document


def make_doc(
    id: str,
    title: Optional[str] = None,
    body: Optional[str] = "Body",
    order: Optional[float] = None,
    in_llms: bool = True,
    description: str = "",
) -> Document:
    """Build a Document with sensible defaults."""
    return Document(
        id=id,
        title=title or id.rsplit("/", 1)[-1].title(),
        description=description,
        body=body,
        sidebar_order=order,
        is_in_llms=in_llms,
    )


@pytest.fixture
def content_dir(tmp_path) -> Path:
    """Empty docs content directory."""
    path = tmp_path / "content" / "docs"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_page(content_dir) -> Callable[..., Path]:
    """Write a page with frontmatter into the content directory."""

    def _write(relative: str, frontmatter: str, body: str = "") -> Path:
        path = content_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{frontmatter.strip()}\n---\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def playbook_dir(write_page, content_dir) -> Path:
    """A small playbook: two ordered pages, one unordered, one excluded."""
    write_page(
        "introduction/getting-started.mdx",
        "title: Getting started\ndescription: Start here\nsidebar:\n  order: 1",
        '\nimport { Aside } from "@astrojs/starlight/components"\n\nHello.\n',
    )
    write_page(
        "guides/naming.md",
        "title: Naming\ndescription: How to name things\nsidebar:\n  order: 2",
        "\nUse PascalCase.\n",
    )
    write_page(
        "guides/drafts.md",
        "title: Drafts\ndescription: Not in the sidebar",
        "\nWork in progress.\n",
    )
    write_page(
        "changelog.md",
        "title: Changelog\ndescription: Release notes\nisInLLMs: false",
        "\n## 1.0.0\n",
    )
    return content_dir
