"""HTML file exporter for rendered documents."""

import html as html_lib
import logging
import re
from pathlib import Path
from typing import Optional

from mdrender.core.models import Document
from mdrender.exporters.base import Exporter

logger = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"<h([1-6])[^>]*>(.*?)</h\1>", re.IGNORECASE | re.DOTALL)
TAG_PATTERN = re.compile(r"<[^>]+>")


def extract_title(html: str) -> Optional[str]:
    """
    extracts the text of the first heading in rendered HTML.

    Args:
        html: rendered HTML fragment

    Returns:
        heading text without tags, or None if there is no heading
    """
    match = HEADING_PATTERN.search(html)
    if not match:
        return None
    title = html_lib.unescape(TAG_PATTERN.sub("", match.group(2))).strip()
    return title or None


def output_filename(name: str) -> str:
    """returns the .html filename for a markdown source name."""
    return f"{Path(name).stem}.html"


class HTMLExporter(Exporter):  # pylint: disable=too-few-public-methods
    """exports rendered documents to HTML files."""

    def __init__(self, standalone: bool = False) -> None:
        """
        Initialize HTML exporter.

        Args:
            standalone: if True, wrap fragments in a full HTML page
        """
        self.standalone = standalone

    def export(
        self,
        document: Document,
        destination: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> bool:
        """exports document to <destination>/<stem>.html."""
        output_path = Path(destination) / output_filename(document.name)

        if dry_run:
            logger.info("Would write to: %s", output_path)
            return False

        if output_path.exists() and not overwrite:
            logger.info("Skipping existing file: %s", output_path)
            return False

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.generate_html(document), encoding="utf-8")
        logger.debug("Wrote %s", output_path)
        return True

    def generate_html(self, document: Document) -> str:
        """returns the file content for a document."""
        if not self.standalone:
            return document.html + "\n"

        title = document.title or Path(document.name).stem
        title_escaped = html_lib.escape(title)
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title_escaped}</title>
</head>
<body>
{document.html}
</body>
</html>
"""
