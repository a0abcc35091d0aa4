from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[2] / "src"))

from md_scribe.sample import build_sample_document
from md_scribe.writers.markdown import write_markdown
from md_scribe.writers.pdf import md_to_pdf


DEFAULT_OUT = Path("build/dev_docs/sample")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render the sample document with every builder operation."
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=DEFAULT_OUT,
        help="Output directory",
    )
    parser.add_argument(
        "--title",
        default="md-scribe sample",
        help="Document title (H1)",
    )
    parser.add_argument(
        "--pdf",
        action="store_true",
        help="Also export PDF (pandoc, or weasyprint fallback)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    artifact = write_markdown(build_sample_document(args.title), args.out / "sample.md")
    if args.pdf:
        md_to_pdf(artifact.path, root_dir=args.out, title=args.title)

    print(f"Wrote sample document to: {args.out}")


if __name__ == "__main__":
    main()
