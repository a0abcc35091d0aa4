from __future__ import annotations

from md_scribe.builder import MarkdownBuilder


def test_inline_delimiters_without_newlines(mdb: MarkdownBuilder) -> None:
    mdb.bold("b").italic("i").strike("s").inline_code("c").highlight("h")
    assert mdb.render() == "**b***i*~~s~~`c`==h=="


def test_emoji_link_and_footnote_reference(mdb: MarkdownBuilder) -> None:
    mdb.emoji("smile").link("docs", "https://example.com").footnote_reference("n1")
    assert mdb.render() == ":smile:[docs](https://example.com)[^n1]"


def test_inline_text_is_not_escaped(mdb: MarkdownBuilder) -> None:
    mdb.bold("*already* | piped")
    assert mdb.render() == "***already* | piped**"


def test_inline_fragments_compose_into_a_line(mdb: MarkdownBuilder) -> None:
    mdb.append_raw("See ").link("here", "#x").append_line(".").append_line()
    assert mdb.render() == "See [here](#x).\n\n"


def test_footnote_id_is_a_keyword_argument(mdb: MarkdownBuilder) -> None:
    mdb.footnote_reference(footnote_id="src").append_line()
    mdb.footnote_definition(footnote_id="src", text="Origin")
    assert mdb.render() == "[^src]\n[^src]: Origin\n\n"
