from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from md_scribe.alignment import separator_for


@dataclass(frozen=True)
class TaskItem:
    text: str
    done: bool = False


def _clean_header(text: str) -> str:
    # a header must stay on a single line
    return text.replace("\r", "").replace("\n", " ").strip()


class MarkdownBuilder:
    """
    Fluent helper to build Markdown without a pile of brittle string concatenation.

    Every method appends to an internal buffer and returns the builder, so calls
    chain. Block elements end with one blank line; inline elements add no newline.
    User text is written as-is (no escaping).

    `len()` is the number of characters written so far, so an empty builder is
    falsy: test `builder is None`, not `not builder`, when picking a default.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._n_chars = 0

    def _add(self, text: str) -> None:
        self._parts.append(text)
        self._n_chars += len(text)

    def _line(self, text: str = "") -> None:
        self._add(text + "\n")

    def __len__(self) -> int:
        return self._n_chars

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        return "".join(self._parts)

    # Raw

    def append_raw(self, text: str) -> MarkdownBuilder:
        self._add(text)
        return self

    def append_line(self, text: str = "") -> MarkdownBuilder:
        self._line(text)
        return self

    # Headers

    def heading(self, level: int, text: str) -> MarkdownBuilder:
        prefix = "#" * max(1, min(6, int(level)))
        self._line(f"{prefix} {_clean_header(text)}")
        self._line()
        return self

    def h1(self, text: str) -> MarkdownBuilder:
        return self.heading(1, text)

    def h2(self, text: str) -> MarkdownBuilder:
        return self.heading(2, text)

    def h3(self, text: str) -> MarkdownBuilder:
        return self.heading(3, text)

    def h4(self, text: str) -> MarkdownBuilder:
        return self.heading(4, text)

    def h5(self, text: str) -> MarkdownBuilder:
        return self.heading(5, text)

    def h6(self, text: str) -> MarkdownBuilder:
        return self.heading(6, text)

    def h2_with_anchor(self, text: str, anchor: str) -> MarkdownBuilder:
        """H2 followed by an HTML anchor, so other sections can link to `#anchor`."""
        self._line(f'## {_clean_header(text)} <a name="{anchor}"></a>')
        self._line()
        return self

    # Text blocks

    def paragraph(self, text: str) -> MarkdownBuilder:
        self._line(text.strip())
        self._line()
        return self

    def blockquote(self, text: str) -> MarkdownBuilder:
        for line in text.split("\n"):
            self._line(f"> {line.rstrip()}")
        self._line()
        return self

    def horizontal_rule(self) -> MarkdownBuilder:
        self._line("---")
        self._line()
        return self

    # Inline

    def bold(self, text: str) -> MarkdownBuilder:
        self._add(f"**{text}**")
        return self

    def italic(self, text: str) -> MarkdownBuilder:
        self._add(f"*{text}*")
        return self

    def strike(self, text: str) -> MarkdownBuilder:
        self._add(f"~~{text}~~")
        return self

    def inline_code(self, text: str) -> MarkdownBuilder:
        self._add(f"`{text}`")
        return self

    def highlight(self, text: str) -> MarkdownBuilder:
        self._add(f"=={text}==")
        return self

    def emoji(self, shortcode: str) -> MarkdownBuilder:
        self._add(f":{shortcode}:")
        return self

    def link(self, text: str, url: str) -> MarkdownBuilder:
        self._add(f"[{text}]({url})")
        return self

    # Media

    def image(self, alt: str, url: str) -> MarkdownBuilder:
        self._line(f"![{alt}]({url})")
        self._line()
        return self

    # Lists

    def bullet_list(self, items: Iterable[str]) -> MarkdownBuilder:
        for it in items:
            self._line(f"- {it.strip()}")
        self._line()
        return self

    def number_list(self, items: Iterable[str]) -> MarkdownBuilder:
        for i, it in enumerate(items, start=1):
            self._line(f"{i}. {it.strip()}")
        self._line()
        return self

    def task_list(
        self, items: Iterable[TaskItem | tuple[str, bool]]
    ) -> MarkdownBuilder:
        """Checkbox list; accepts `TaskItem`s or plain `(text, done)` pairs."""
        for it in items:
            text, done = (it.text, it.done) if isinstance(it, TaskItem) else it
            mark = "x" if done else " "
            self._line(f"- [{mark}] {text.strip()}")
        self._line()
        return self

    def definition_list(self, term: str, definition: str) -> MarkdownBuilder:
        self._line(term)
        self._line(f": {definition}")
        self._line()
        return self

    # Code

    def code_block(self, code: str, language: str = "") -> MarkdownBuilder:
        lang = language if language.strip() else ""
        self._line(f"```{lang}")
        self._line(code)
        self._line("```")
        self._line()
        return self

    def math_block(self, expression: str) -> MarkdownBuilder:
        return self.code_block(expression, "math")

    # Tables

    def table(
        self, headers: Sequence[str], rows: Iterable[Sequence[str]]
    ) -> MarkdownBuilder:
        # column counts are not checked against the header row
        self._line(" | ".join(headers))
        self._line(" | ".join(["---"] * len(headers)))
        self._rows(rows)
        return self

    def table_with_alignment(
        self,
        headers: Sequence[str],
        alignment: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> MarkdownBuilder:
        """
        Table whose separator row carries one marker per entry of `alignment`:
        left -> `:---`, center -> `:---:`, right -> `---:`, anything else -> `---`.
        Matching is case-insensitive.
        """
        self._line(" | ".join(headers))
        self._line(" | ".join(separator_for(a) for a in alignment))
        self._rows(rows)
        return self

    def _rows(self, rows: Iterable[Sequence[str]]) -> None:
        for r in rows:
            self._line(" | ".join(r))
        self._line()

    # Footnotes

    def footnote_reference(self, footnote_id: str) -> MarkdownBuilder:
        self._add(f"[^{footnote_id}]")
        return self

    def footnote_definition(self, footnote_id: str, text: str) -> MarkdownBuilder:
        self._line(f"[^{footnote_id}]: {text}")
        self._line()
        return self

    # Collapsible

    def collapsible(self, summary: str, content: str) -> MarkdownBuilder:
        self._line("<details>")
        self._line(f"<summary>{summary}</summary>")
        self._line()
        self._line(content)
        self._line()
        self._line("</details>")
        self._line()
        return self

    # Callouts

    def note(self, text: str) -> MarkdownBuilder:
        return self._callout("Note", text)

    def tip(self, text: str) -> MarkdownBuilder:
        return self._callout("Tip", text)

    def warning(self, text: str) -> MarkdownBuilder:
        return self._callout("Warning", text)

    def _callout(self, label: str, text: str) -> MarkdownBuilder:
        self._line(f"> **{label}:** {text}")
        self._line()
        return self
