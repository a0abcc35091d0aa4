from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from textual.app import App, ComposeResult
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.widgets import Button, Footer, Header, Input, Markdown, Static

from md_scribe.sample import build_sample_document

logger = logging.getLogger(__name__)


# ----------------------------
# Persistence (super simple)
# ----------------------------

def _default_config_path() -> Path:
    return Path.home() / ".config" / "md_scribe" / "preview.json"


@dataclass
class PreviewConfig:
    last_path: str = ""

    @classmethod
    def load(cls, path: Path) -> "PreviewConfig":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls(last_path=str(data.get("last_path", "")))
        except FileNotFoundError:
            return cls()
        except (OSError, ValueError, AttributeError) as exc:
            # corrupt config: start from defaults rather than crashing the app
            logger.warning(f"Ignoring unreadable preview config {path}: {exc!r}")
            return cls()

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {"last_path": self.last_path}
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_markdown_source(raw_path: str) -> tuple[str, str]:
    """
    Return (markdown text, label) for the preview.
    An empty path previews the built-in sample document.
    """
    if not raw_path.strip():
        return build_sample_document().render(), "sample document"

    path = Path(raw_path.strip()).expanduser()
    return path.read_text(encoding="utf-8"), str(path)


# ----------------------------
# Textual app
# ----------------------------

class PreviewApp(App):
    BINDINGS = [("q", "quit", "Quit"), ("r", "reload", "Reload")]

    DEFAULT_CSS = """
    #controls { height: auto; }
    #path { width: 1fr; }
    #preview_scroll { height: 1fr; border: round $accent; }
    """

    def __init__(self, path: str | None = None, *, cfg_path: Path | None = None) -> None:
        super().__init__()
        self._cfg_path = cfg_path or _default_config_path()
        self._cfg = PreviewConfig.load(self._cfg_path)
        self._initial_path = path if path is not None else self._cfg.last_path
        self.status_message = ""

    def compose(self) -> ComposeResult:
        yield Header()

        with Vertical(id="root"):
            with Horizontal(id="controls"):
                yield Input(
                    value=self._initial_path,
                    placeholder="path/to/file.md (empty = sample document)",
                    id="path",
                )
                yield Button("Load", id="load", variant="primary")
            yield Static("", id="status", markup=False)
            with ScrollableContainer(id="preview_scroll"):
                yield Markdown("", id="preview")

        yield Footer()

    def on_mount(self) -> None:
        self.action_reload()

    def _set_status(self, msg: str) -> None:
        self.status_message = msg
        self.query_one("#status", Static).update(msg)

    def action_reload(self) -> None:
        raw_path = self.query_one("#path", Input).value
        try:
            text, label = load_markdown_source(raw_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Could not load {raw_path!r}: {exc!r}")
            self._set_status(f"❌ Failed: {exc!r}")
            return

        self.query_one("#preview", Markdown).update(text)
        status = f"Showing: {label} ({len(text)} chars)"

        self._cfg.last_path = raw_path.strip()
        try:
            self._cfg.save(self._cfg_path)
        except OSError as exc:
            # preview still works, only the last path is not remembered
            logger.warning(f"Could not save preview config {self._cfg_path}: {exc!r}")
            status += f"\n⚠️ Config not saved: {exc!r}"

        self._set_status(status)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "load":
            self.action_reload()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_reload()


def main() -> None:
    PreviewApp(sys.argv[1] if len(sys.argv) > 1 else None).run()


if __name__ == "__main__":
    main()
