from __future__ import annotations

from md_scribe.builder import MarkdownBuilder


def test_header_then_paragraph(mdb: MarkdownBuilder) -> None:
    mdb.h1("Title").paragraph("Hello")
    assert mdb.render() == "# Title\n\nHello\n\n"


def test_paragraph_is_trimmed(mdb: MarkdownBuilder) -> None:
    mdb.paragraph("  spaced out \n")
    assert mdb.render() == "spaced out\n\n"


def test_blockquote_prefixes_each_line(mdb: MarkdownBuilder) -> None:
    mdb.blockquote("line1\nline2")
    assert mdb.render() == "> line1\n> line2\n\n"


def test_blockquote_strips_trailing_whitespace_and_cr(mdb: MarkdownBuilder) -> None:
    mdb.blockquote("a  \r\nb\t")
    assert mdb.render() == "> a\n> b\n\n"


def test_horizontal_rule(mdb: MarkdownBuilder) -> None:
    assert mdb.horizontal_rule().render() == "---\n\n"


def test_raw_and_line(mdb: MarkdownBuilder) -> None:
    mdb.append_raw("a").append_raw("b").append_line("c").append_line()
    assert mdb.render() == "abc\n\n"


def test_code_block_with_language(mdb: MarkdownBuilder) -> None:
    mdb.code_block("x = 1\ny = 2", "python")
    assert mdb.render() == "```python\nx = 1\ny = 2\n```\n\n"


def test_code_block_blank_language_uses_bare_fence(mdb: MarkdownBuilder) -> None:
    mdb.code_block("  keep  ", "   ")
    assert mdb.render() == "```\n  keep  \n```\n\n"


def test_math_block(mdb: MarkdownBuilder) -> None:
    mdb.math_block("a^2 + b^2 = c^2")
    assert mdb.render() == "```math\na^2 + b^2 = c^2\n```\n\n"


def test_image_is_a_block(mdb: MarkdownBuilder) -> None:
    mdb.image("alt text", "img/a.png")
    assert mdb.render() == "![alt text](img/a.png)\n\n"


def test_footnote_definition(mdb: MarkdownBuilder) -> None:
    mdb.footnote_definition("1", "Source")
    assert mdb.render() == "[^1]: Source\n\n"


def test_collapsible(mdb: MarkdownBuilder) -> None:
    mdb.collapsible("More", "Hidden")
    assert mdb.render() == (
        "<details>\n<summary>More</summary>\n\nHidden\n\n</details>\n\n"
    )


def test_callouts(mdb: MarkdownBuilder) -> None:
    mdb.note("n").tip("t").warning("w")
    assert mdb.render() == (
        "> **Note:** n\n\n> **Tip:** t\n\n> **Warning:** w\n\n"
    )


def test_render_is_idempotent_and_str_matches(mdb: MarkdownBuilder) -> None:
    mdb.h1("T").paragraph("p")
    first = mdb.render()
    assert mdb.render() == first
    assert str(mdb) == first
    assert len(mdb) == len(first)


def test_buffer_only_grows(mdb: MarkdownBuilder) -> None:
    mdb.paragraph("one")
    before = mdb.render()
    mdb.paragraph("two")
    assert mdb.render().startswith(before)


def test_empty_builder_renders_empty_string(mdb: MarkdownBuilder) -> None:
    assert mdb.render() == ""
    assert len(mdb) == 0


def test_len_tracks_every_append(mdb: MarkdownBuilder) -> None:
    mdb.append_raw("ab")
    assert len(mdb) == 2
    mdb.bold("c").h3("Head\nline")
    assert len(mdb) == len(mdb.render())


def test_empty_builder_is_falsy_until_written(mdb: MarkdownBuilder) -> None:
    assert not mdb
    mdb.append_line()
    assert mdb
