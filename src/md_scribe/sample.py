from __future__ import annotations

from md_scribe.builder import MarkdownBuilder, TaskItem


def build_sample_document(title: str = "md-scribe sample") -> MarkdownBuilder:
    """One call of every builder operation, in reading order."""
    mdb = MarkdownBuilder()
    mdb.h1(title)
    mdb.paragraph("Generated with the fluent Markdown builder.")

    mdb.h2_with_anchor("Text", "text")
    mdb.append_raw("Inline styles: ")
    mdb.bold("bold").append_raw(", ").italic("italic").append_raw(", ")
    mdb.strike("strike").append_raw(", ").inline_code("code").append_raw(", ")
    mdb.highlight("highlight").append_raw(" ").emoji("sparkles").append_raw(". See ")
    mdb.link("the lists", "#lists").append_raw(" or the footnote")
    mdb.footnote_reference("1").append_line(".")
    mdb.append_line()
    mdb.blockquote("Quoted text\nspanning two lines")
    mdb.horizontal_rule()

    mdb.h2_with_anchor("Lists", "lists")
    mdb.bullet_list(["First", "Second"])
    mdb.number_list(["One", "Two", "Three"])
    mdb.task_list([TaskItem("Write the builder", done=True), ("Ship it", False)])
    mdb.definition_list("Fence", "Delimiter line around a code block")

    mdb.h3("Code")
    mdb.code_block('print("hello")', "python")
    mdb.math_block(r"e^{i\pi} + 1 = 0")

    mdb.h3("Tables")
    mdb.table(["Field", "Value"], [["Name", "md-scribe"], ["Kind", "builder"]])
    mdb.table_with_alignment(
        ["Left", "Center", "Right"],
        ["left", "center", "right"],
        [["a", "b", "c"]],
    )

    mdb.h4("Media")
    mdb.image("logo", "https://example.com/logo.png")

    mdb.h5("Details")
    mdb.collapsible("Click to expand", "Hidden content.")

    mdb.h6("Callouts")
    mdb.note("Text is written as-is.")
    mdb.tip("Chain calls to keep report code short.")
    mdb.warning("Table column counts are not checked.")

    mdb.footnote_definition("1", "Footnotes render at the end on GitHub.")
    return mdb
