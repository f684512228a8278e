"""Copies the root changelog into the docs collection."""

import re
from pathlib import Path

from playbook import config

FRONTMATTER = """---
title: Changelog
description: Release notes for {site_title}
editUrl: false
isInLLMs: false
---

"""


def sync_changelog(changelog_path: Path, content_dir: Path) -> Path:
    """Write changelog.md into the docs collection.

    The first two lines of the root changelog ("# Changelog" and the blank
    line after it) are dropped since the page title comes from frontmatter.

    Args:
        changelog_path: The root CHANGELOG.md
        content_dir: Root of the docs collection

    Returns:
        Path of the written page
    """
    raw = changelog_path.read_text(encoding="utf-8")
    lines = re.split(r"\r?\n", raw)
    without_heading = "\n".join(lines[2:])

    dest = content_dir / "changelog.md"
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(
        FRONTMATTER.format(site_title=config.SITE_TITLE) + without_heading,
        encoding="utf-8"
    )
    return dest
