"""Batch rendering of markdown files."""

import logging
import shutil
import sys
import tempfile
import zipfile
from pathlib import Path
from typing import Optional

from mdrender.core.models import Document, RenderOptions
from mdrender.engines import registry
from mdrender.exporters.html import HTMLExporter, extract_title
from mdrender.progress import ProgressHandler

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def discover_files(source: Path) -> list[Path]:
    """
    discovers markdown files from source path.

    Args:
        source: path to markdown file, directory, or ZIP archive

    Returns:
        list of paths to markdown files

    Raises:
        FileNotFoundError: if source doesn't exist
    """
    if not source.exists():
        raise FileNotFoundError(f"Source not found: {source}")

    if source.is_file():
        if source.suffix == ".zip":
            return _extract_zip(source)
        if source.suffix in MARKDOWN_SUFFIXES:
            return [source]
        return []

    if source.is_dir():
        return sorted(p for p in source.iterdir() if p.suffix in MARKDOWN_SUFFIXES)

    return []


def _unique_name(name: str, taken: set[str]) -> str:
    """returns name, or name with a -2, -3, ... suffix if already taken."""
    candidate = name
    stem, suffix = Path(name).stem, Path(name).suffix
    counter = 2
    while candidate in taken:
        candidate = f"{stem}-{counter}{suffix}"
        counter += 1
    return candidate


def _extract_zip(zip_path: Path) -> list[Path]:
    """
    extracts markdown files from ZIP archive to temp directory.

    Entries are flattened to their file names, which keeps writes inside the
    temp directory. Entries that share a file name get numbered suffixes.
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="mdrender_"))
    taken: set[str] = set()
    with zipfile.ZipFile(zip_path, "r") as zf:
        for info in zf.infolist():
            if info.is_dir() or not info.filename.endswith(MARKDOWN_SUFFIXES):
                continue
            base_name = Path(info.filename).name
            safe_name = _unique_name(base_name, taken)
            if safe_name != base_name:
                logger.warning(
                    "Duplicate file name in %s: %s extracted as %s",
                    zip_path.name,
                    info.filename,
                    safe_name,
                )
            taken.add(safe_name)
            (temp_dir / safe_name).write_bytes(zf.read(info))

    files = sorted(temp_dir.glob("*.*"))
    if not files:
        shutil.rmtree(temp_dir, ignore_errors=True)
    return files


def render_document(
    path: Path, engine_name: str = "lite", options: Optional[RenderOptions] = None
) -> Document:
    """
    reads and renders one markdown file.

    Args:
        path: markdown file path
        engine_name: registered engine name
        options: render options

    Returns:
        rendered Document

    Raises:
        OSError: if the file can't be read
        UnicodeDecodeError: if the file isn't valid UTF-8
    """
    source = path.read_text(encoding="utf-8")
    html = registry.render(engine_name, source, options)
    logger.debug("Rendered %s with %s engine", path.name, engine_name)
    return Document(name=path.name, source=source, html=html, title=extract_title(html))


def render_files(
    source: Path,
    destination: Optional[Path] = None,
    engine_name: str = "lite",
    options: Optional[RenderOptions] = None,
    standalone: bool = False,
    dry_run: bool = False,
    overwrite: bool = False,
    quiet: bool = False,
    progress: bool = False,
) -> int:
    """
    renders markdown files from source to HTML.

    Args:
        source: path to markdown file, directory, or ZIP archive
        destination: output directory; None writes HTML to stdout
        engine_name: registered engine name
        options: render options
        standalone: if True, wrap output in a full HTML page
        dry_run: if True, don't write any files
        overwrite: if True, replace existing output files
        quiet: if True, suppress non-error output
        progress: if True, show progress bar

    Returns:
        exit code (0 success, 1 partial failure)
    """
    # fails fast on a bad engine name before touching the filesystem
    registry.get(engine_name)

    with ProgressHandler(quiet=quiet, show_progress=progress) as handler:
        handler.start_discovery()

        files = discover_files(source)
        if not files:
            handler.log_info(f"No markdown files found in {source}")
            return 0

        handler.log_info(f"Found {len(files)} markdown file(s) to render")
        handler.set_total(len(files))

        exporter = HTMLExporter(standalone=standalone)

        try:
            for path in files:
                try:
                    document = render_document(path, engine_name, options)
                except (OSError, UnicodeDecodeError) as e:
                    handler.record_failure(path.name, e)
                    continue

                if destination is None:
                    if not dry_run:
                        sys.stdout.write(exporter.generate_html(document))
                else:
                    exporter.export(document, str(destination), dry_run, overwrite)
                handler.record_success(path.name)
        finally:
            if source.suffix == ".zip":
                shutil.rmtree(files[0].parent, ignore_errors=True)

        return handler.finish()
