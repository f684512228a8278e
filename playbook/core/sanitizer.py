"""Import removal for markdown/MDX sources.

MDX pages pull in components with `import` lines that mean nothing to a
plain-text reader. Recognized forms (single line only):
- import { X } from "y"
- import X from "y"
- import * as X from "y"
- import X, { Y } from "y"
- import type { X } from "y"
"""

import re
from typing import Optional

IMPORT_PATTERN = re.compile(
    r"""^[ \t]*import[ \t]+(?:type[ \t]+)?"""
    r"""(?:\*[ \t]+as[ \t]+\w+|\{[^}\n]*\}|\w+|\w+[ \t]*,[ \t]*\{[^}\n]*\})"""
    r"""[ \t]+from[ \t]+["'][^"'\n]+["'];?[ \t]*\r?$""",
    re.MULTILINE,
)
# Line breaks may be \n or \r\n; the kept breaks retain their original form
EXTRA_BLANK_LINES = re.compile(r"(\r?\n)(\r?\n)(?:\r?\n)+")
LEADING_NEWLINES = re.compile(r"\A(?:\r?\n)+")
TRAILING_NEWLINES = re.compile(r"(\r?\n)(?:\r?\n)+\Z")


def remove_imports(content: Optional[str]) -> Optional[str]:
    """Remove single-line import statements from markdown/MDX content.

    Blank lines left behind are collapsed so an import surrounded by empty
    lines leaves a single empty line. Leading newlines are trimmed and
    trailing ones reduced to one, so the result concatenates cleanly.

    Args:
        content: The markdown/MDX source

    Returns:
        The cleaned content, or None when there is nothing to clean
    """
    if not content:
        return None

    result = IMPORT_PATTERN.sub("", content)
    result = EXTRA_BLANK_LINES.sub(r"\1\2", result)
    result = LEADING_NEWLINES.sub("", result)
    result = TRAILING_NEWLINES.sub(r"\1", result)

    return result
