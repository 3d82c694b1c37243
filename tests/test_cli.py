"""tests for CLI argument parsing."""

from pathlib import Path

import pytest

from mdrender import main


def test_cli_requires_source_argument() -> None:
    """CLI requires source argument."""
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2  # argparse exits with 2 for missing args


def test_cli_missing_source_is_fatal() -> None:
    """a missing source returns the fatal exit code."""
    assert main(["nonexistent.md"]) == 2


def test_cli_accepts_destination() -> None:
    """CLI accepts source and destination as positional arguments."""
    assert main(["nonexistent.md", "out"]) == 2


@pytest.mark.parametrize(
    "flag",
    [
        "--escape",
        "--fence-languages",
        "--standalone",
        "--dry-run",
        "--overwrite",
        "--progress",
        "-q",
        "--quiet",
        "-v",
        "--verbose",
    ],
)
def test_cli_accepts_flags(flag: str) -> None:
    """CLI accepts each boolean flag."""
    assert main(["nonexistent.md", flag]) == 2


def test_cli_rejects_unknown_engine() -> None:
    """--engine only accepts registered engines."""
    with pytest.raises(SystemExit) as exc_info:
        main(["nonexistent.md", "--engine", "nope"])
    assert exc_info.value.code == 2


def test_cli_rejects_unknown_theme() -> None:
    """--theme only accepts known themes."""
    with pytest.raises(SystemExit):
        main(["nonexistent.md", "--theme", "nope"])


def test_cli_renders_to_stdout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """renders a single file to stdout."""
    md_file = tmp_path / "a.md"
    md_file.write_text("# Hi\n\n5. five", encoding="utf-8")

    assert main([str(md_file), "-q"]) == 0
    assert capsys.readouterr().out == (
        '<h1>Hi</h1>\n<ol start="5">\n<li>five</li>\n</ol>\n'
    )


def test_cli_renders_directory_with_theme(tmp_path: Path) -> None:
    """renders a directory into a destination with the chosen theme."""
    source = tmp_path / "docs"
    source.mkdir()
    (source / "a.md").write_text("---", encoding="utf-8")
    destination = tmp_path / "out"

    result = main([str(source), str(destination), "--theme", "tailwind", "-q"])

    assert result == 0
    assert (destination / "a.html").read_text(encoding="utf-8") == (
        '<hr class="my-4" />\n'
    )


def test_cli_commonmark_engine(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """--engine commonmark renders with markdown-it-py."""
    md_file = tmp_path / "a.md"
    md_file.write_text("* a\n* b", encoding="utf-8")

    assert main([str(md_file), "--engine", "commonmark", "-q"]) == 0
    assert capsys.readouterr().out == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"


def test_cli_partial_failure(tmp_path: Path) -> None:
    """undecodable files give the partial failure exit code."""
    (tmp_path / "bad.md").write_bytes(b"\xff\xfe")

    assert main([str(tmp_path), str(tmp_path / "out"), "-q"]) == 1
