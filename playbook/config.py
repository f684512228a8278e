"""Configuration for the Frontend Playbook exports."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# Public site origin and the base path the playbook is served under
SITE_URL = "https://applifting.github.io"
BASE_PATH = "/frontend-playbook/"

SITE_TITLE = "Applifting Frontend Playbook"
SITE_DESCRIPTION = "How we build, review and ship frontend applications at Applifting."

# Markdown/MDX sources with YAML frontmatter
CONTENT_DIR = PROJECT_ROOT / "content" / "docs"

# Root changelog copied into the docs collection by `sync-changelog`
CHANGELOG_PATH = PROJECT_ROOT / "CHANGELOG.md"

# Default destination for `build`
OUTPUT_DIR = PROJECT_ROOT / "dist"

CONTENT_TYPE = "text/plain; charset=utf-8"
