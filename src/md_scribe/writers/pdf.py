# src/md_scribe/writers/pdf.py
"""
PDF export for generated Markdown documents.

Strategy:
1) If `pandoc` is on PATH (and preferred), render with it (GitHub-flavored input).
2) Otherwise: Markdown -> HTML with markdown-it-py, then HTML -> PDF with WeasyPrint.

Relative image paths are resolved against `root_dir` (defaults to the folder of
the first Markdown file).
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import Optional, Sequence, Union

from markdown_it import MarkdownIt
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from md_scribe.utils.paths import ensure_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PdfExportResult:
    pdf_path: Path
    engine: str  # "pandoc" or "weasyprint"


def md_to_pdf(
    md_paths: Union[str, Path, Sequence[Path]],
    pdf_path: Optional[Path] = None,
    *,
    root_dir: Optional[Path] = None,
    title: Optional[str] = None,
    prefer_pandoc: bool = True,
) -> PdfExportResult:
    """
    Convert one or more Markdown files to a single PDF.

    Args:
        md_paths: A single .md file or a sequence of .md files (concatenated in order).
        pdf_path: Output PDF path. Defaults to <first_md>.with_suffix(".pdf").
        root_dir: Base directory used to resolve relative images/links.
        title: Optional title injected at top (WeasyPrint path only).
        prefer_pandoc: If True, try pandoc first when available.

    Raises:
        ValueError: if md_paths is empty.
        FileNotFoundError: if any md file is missing.
        RuntimeError: if pandoc is not used and WeasyPrint is not installed.
        subprocess.CalledProcessError: if pandoc fails.
    """
    md_list = _normalize_md_paths(md_paths)
    first_md = md_list[0]

    out_pdf = Path(pdf_path) if pdf_path is not None else first_md.with_suffix(".pdf")
    ensure_dir(out_pdf.parent)

    base_dir = Path(root_dir) if root_dir is not None else first_md.parent

    if prefer_pandoc and _pandoc_available():
        try:
            _render_with_pandoc(md_list, out_pdf, root_dir=base_dir)
        except subprocess.CalledProcessError as e:
            logger.error(f"pandoc failed:\n{e.stderr}")
            raise
        logger.info(f"Exported {out_pdf} with pandoc")
        return PdfExportResult(pdf_path=out_pdf, engine="pandoc")

    _render_with_weasyprint(md_list, out_pdf, root_dir=base_dir, title=title)
    logger.info(f"Exported {out_pdf} with weasyprint")
    return PdfExportResult(pdf_path=out_pdf, engine="weasyprint")


def _pandoc_available() -> bool:
    return shutil.which("pandoc") is not None


def _render_with_pandoc(md_list: Sequence[Path], pdf_path: Path, *, root_dir: Path) -> None:
    # pandoc resolves images relative to cwd and --resource-path
    cmd = [
        "pandoc",
        "--from=gfm",
        *[str(p) for p in md_list],
        "-o",
        str(pdf_path),
        "--resource-path",
        str(root_dir),
    ]
    subprocess.run(
        cmd,
        cwd=str(root_dir),
        check=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def _render_with_weasyprint(
    md_list: Sequence[Path],
    pdf_path: Path,
    *,
    root_dir: Path,
    title: Optional[str],
) -> None:
    try:
        from weasyprint import HTML  # type: ignore
    except ImportError as e:  # pragma: no cover
        raise RuntimeError(
            "WeasyPrint is not installed and pandoc was not used. "
            "Install the 'pdf' extra to enable PDF export without pandoc."
        ) from e

    md_text = "\n\n".join(p.read_text(encoding="utf-8", errors="replace") for p in md_list)
    html_full = build_html(md_text, title=title or md_list[0].stem, show_title=title is not None)

    # base_url makes relative image paths resolve against root_dir
    HTML(string=html_full, base_url=str(root_dir)).write_pdf(str(pdf_path))


def markdown_to_html(md_text: str) -> str:
    # GFM extensions the builder emits: tables, strikethrough, task lists, footnotes, deflists
    md = (
        MarkdownIt("commonmark", {"html": True})
        .enable(["table", "strikethrough"])
        .use(tasklists_plugin)
        .use(footnote_plugin)
        .use(deflist_plugin)
    )
    return md.render(md_text)


def build_html(md_text: str, *, title: str, show_title: bool = False) -> str:
    heading = f"<h1>{escape(title)}</h1>" if show_title else ""
    return f"""<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>
<style>
  @page {{ size: letter; margin: 0.75in; }}
  body {{
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
    font-size: 11pt;
    line-height: 1.35;
  }}
  img {{ max-width: 100%; height: auto; }}
  table {{ border-collapse: collapse; margin: 0.6em 0; }}
  th, td {{ border: 1px solid #999; padding: 4px 6px; vertical-align: top; }}
  blockquote {{ border-left: 3px solid #ccc; margin-left: 0; padding-left: 0.8em; color: #444; }}
  code, pre {{ font-family: ui-monospace, Menlo, Consolas, monospace; font-size: 10pt; }}
  pre {{ white-space: pre-wrap; }}
</style>
</head>
<body>
{heading}
{markdown_to_html(md_text)}
</body>
</html>
"""


def _normalize_md_paths(md_paths: Union[str, Path, Sequence[Path]]) -> list[Path]:
    if isinstance(md_paths, (str, Path)):
        md_list = [Path(md_paths)]
    else:
        md_list = [Path(p) for p in md_paths]

    if not md_list:
        raise ValueError("md_paths is empty")

    for p in md_list:
        if not p.exists():
            raise FileNotFoundError(p)

    return md_list
