from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from md_scribe.builder import MarkdownBuilder
from md_scribe.utils.paths import ensure_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkdownArtifact:
    path: Path
    n_chars: int


def write_markdown(
    document: MarkdownBuilder | str,
    out_path: str | Path,
) -> MarkdownArtifact:
    """
    Write a builder (rendered here) or an already rendered string to `out_path`.
    Parent directories are created as needed.
    """
    out_path = Path(out_path)
    ensure_dir(out_path.parent)

    text = document.render() if isinstance(document, MarkdownBuilder) else str(document)
    out_path.write_text(text, encoding="utf-8")
    logger.info(f"Wrote {len(text)} chars of markdown to {out_path}")

    return MarkdownArtifact(path=out_path, n_chars=len(text))
