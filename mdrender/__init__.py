"""Lite markdown to HTML renderer."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from mdrender.batch import render_files
from mdrender.core.models import THEMES, RenderOptions
from mdrender.core.renderer import render
from mdrender.engines import registry

logger = logging.getLogger(__name__)

__all__ = ["main", "render", "RenderOptions"]


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for mdrender CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    parser = argparse.ArgumentParser(description="Render markdown files to HTML")
    parser.add_argument(
        "source",
        help="markdown file, directory of markdown files, or ZIP archive",
    )
    parser.add_argument(
        "destination",
        nargs="?",
        default=None,
        help="output directory for .html files (default: write to stdout)",
    )
    parser.add_argument(
        "--engine",
        choices=registry.names(),
        default="lite",
        help="render engine (default: lite)",
    )
    parser.add_argument(
        "--theme",
        choices=sorted(THEMES),
        default="plain",
        help="class theme for generated elements (default: plain)",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="HTML-escape the markdown source before rendering",
    )
    parser.add_argument(
        "--fence-languages",
        action="store_true",
        help="treat a word after an opening fence as the code language",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="wrap output in a complete HTML page",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="render files but don't write any output",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="replace existing .html files",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    # validates source path exists
    source_path = Path(args.source)
    if not source_path.exists():
        logger.error("Source not found: %s", args.source)
        return 2

    options = RenderOptions.for_theme(
        args.theme,
        escape_html=args.escape,
        fence_languages=args.fence_languages,
    )

    try:
        return render_files(
            source=source_path,
            destination=Path(args.destination) if args.destination else None,
            engine_name=args.engine,
            options=options,
            standalone=args.standalone,
            dry_run=args.dry_run,
            overwrite=args.overwrite,
            quiet=args.quiet,
            progress=args.progress,
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Fatal error: %s", e)
        return 2
