"""HTML to Markdown conversion for Wrike rich-text fields."""
from __future__ import annotations

import re
from typing import Optional

from markdownify import markdownify

from .logger import get_logger

log = get_logger(__name__)


def html_to_markdown(html: Optional[str]) -> Optional[str]:
    """
    Convert a Wrike description (HTML) to Markdown.

    Empty values are returned as-is. Markup that cannot be converted is
    logged and yields None rather than aborting the run.
    """
    if not html:
        return html
    try:
        result = markdownify(html, heading_style="ATX", bullets="-", strip=["script", "style"])
    except Exception as e:  # markdownify/bs4 raise assorted errors on broken input
        log.warning("Could not convert description to Markdown: %s", e)
        return None
    # markdownify can leave runs of 3+ blank lines around block elements; collapse them
    return re.sub(r"\n{3,}", "\n\n", result).strip()
