from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from md_scribe.builder import MarkdownBuilder


def pytest_configure() -> None:
    # Import md_scribe from src/ without an editable install.
    src_dir = Path(__file__).resolve().parents[1] / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def mdb() -> MarkdownBuilder:
    from md_scribe.builder import MarkdownBuilder

    return MarkdownBuilder()
