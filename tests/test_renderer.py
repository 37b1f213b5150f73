"""Tests for the markup renderer."""

from __future__ import annotations

import io

import pytest

from tagsmith import StringBuilder, empty_tag, fragment, render, render_plain_text, stream_to, tag


def _page():
    return tag("html")[
        tag("head")[tag("title")["Title"], tag("script")["var a = 1;"]],
        tag("body")[
            tag("h1")["Heading"],
            tag("p")["This is the ", tag("i")["full"], " content"],
            tag("script", "src", "x.js"),
            tag("p")["More"],
        ],
    ]


class TestMarkupRendering:
    """Markup mode."""

    def test_children_render_in_order(self) -> None:
        a, b, c = tag("a")["1"], tag("b")["2"], tag("c")["3"]
        parent = tag("div")[a, b, c]
        assert render(parent) == "<div>" + render(a) + render(b) + render(c) + "</div>"

    def test_transparent_root_renders_only_children(self) -> None:
        assert render(fragment()[tag("a"), "x", tag("b")]) == "<a></a>x<b></b>"

    def test_nested_fragments_flatten(self) -> None:
        inner = fragment()["b", fragment()["c"]]
        assert render(tag("p")["a", inner, "d"]) == "<p>abcd</p>"

    def test_empty_tag_inside_fragment(self) -> None:
        assert render(fragment()[empty_tag("br"), "x"]) == "<br/>x"

    def test_transparent_empty_node_still_renders_content(self) -> None:
        node = fragment()["x"].empty()
        assert render(node) == "x"

    def test_text_is_not_escaped(self) -> None:
        assert render(tag("p")["a < b & c"]) == "<p>a < b & c</p>"

    def test_str_and_html_protocol(self) -> None:
        node = tag("b")["x"]
        assert str(node) == node.render() == node.__html__() == "<b>x</b>"

    def test_render_is_repeatable(self) -> None:
        page = _page()
        first = page.render()
        assert page.render() == first
        assert page.render() == first

    def test_empty_node_without_content(self) -> None:
        assert render(tag("p")) == "<p></p>"


class TestExclusion:
    """Skipping subtrees by tag name."""

    def test_excluded_subtrees_removed_in_markup_mode(self) -> None:
        out = StringBuilder()
        stream_to(_page(), out, exclude={"head", "script", "h1"})
        assert out.build() == (
            "<html><body><p>This is the <i>full</i> content</p><p>More</p></body></html>"
        )

    def test_excluded_subtrees_removed_in_plain_text_mode(self) -> None:
        text = _page().to_plain_text("head", "script", "h1")
        assert text == "This is the full contentMore"

    def test_excluding_root_gives_empty_output(self) -> None:
        assert _page().to_plain_text("html") == ""
        out = io.StringIO()
        _page().stream_to(out, exclude=["html"])
        assert out.getvalue() == ""

    def test_single_string_is_one_name(self) -> None:
        node = tag("div")[tag("h1")["Title"], tag("h")["a"], tag("1")["b"], "rest"]
        out = io.StringIO()
        node.stream_to(out, exclude="h1")
        assert out.getvalue() == "<div><h>a</h><1>b</1>rest</div>"
        assert render_plain_text(node, "h1") == "abrest"

    def test_exclusion_matches_exact_name_only(self) -> None:
        node = tag("div")[tag("span")["a"], tag("spans")["b"]]
        assert render_plain_text(node, ["span"]) == "b"

    def test_exclusion_does_not_touch_fragments(self) -> None:
        assert render_plain_text(fragment()["x"], [""]) == "x"

    def test_exclusion_applies_to_empty_tags(self) -> None:
        node = tag("p")["a", empty_tag("br"), "b"]
        out = io.StringIO()
        node.stream_to(out, exclude=("br",))
        assert out.getvalue() == "<p>ab</p>"


class TestPlainText:
    """Plain-text mode."""

    def test_plain_text_of_inline_markup(self) -> None:
        node = tag("p")["This is the ", tag("i")["full"], " content"]
        assert node.to_plain_text() == "This is the full content"

    def test_plain_text_of_text_only_tag(self) -> None:
        assert tag("div", "class", "glass")["Hello"].to_plain_text() == "Hello"

    def test_plain_text_ignores_attributes(self) -> None:
        assert tag("a", "href", "#")["x"].to_plain_text() == "x"

    def test_plain_text_of_all_content(self) -> None:
        assert _page().to_plain_text() == (
            "Titlevar a = 1;HeadingThis is the full contentMore"
        )

    def test_stream_to_without_tags(self) -> None:
        out = io.StringIO()
        tag("p")["a", tag("b")["c"]].stream_to(out, render_tags=False)
        assert out.getvalue() == "ac"


class TestStreaming:
    """Writing to text and byte sinks."""

    def test_write_to_a_text_stream(self) -> None:
        out = io.StringIO()
        tag("div")["1", tag("p")["2"], "3"].stream_to(out)
        assert out.getvalue() == "<div>1<p>2</p>3</div>"

    def test_write_to_a_text_stream_multiple_times(self) -> None:
        out = io.StringIO()
        subject = tag("div")["yo"]
        subject.stream_to(out)
        subject.stream_to(out)
        subject.stream_to(out)
        assert out.getvalue() == "<div>yo</div><div>yo</div><div>yo</div>"

    def test_write_to_a_string_builder(self) -> None:
        sb = StringBuilder()
        tag("p")["x"].stream_to(sb)
        assert sb.getvalue() == "<p>x</p>"

    def test_write_to_a_byte_stream(self) -> None:
        out = io.BytesIO()
        tag("div")["1", tag("p")["2"], "3"].stream_bytes(out, "ascii")
        assert out.getvalue().decode("ascii") == "<div>1<p>2</p>3</div>"

    def test_write_to_a_byte_stream_multiple_times(self) -> None:
        out = io.BytesIO()
        subject = tag("div")["yo"]
        subject.stream_bytes(out, "ascii")
        subject.stream_bytes(out, "ascii")
        subject.stream_bytes(out, "ascii")
        assert out.getvalue() == b"<div>yo</div><div>yo</div><div>yo</div>"

    def test_byte_stream_defaults_to_utf8(self) -> None:
        out = io.BytesIO()
        tag("p")["café"].stream_bytes(out)
        assert out.getvalue() == "<p>café</p>".encode("utf-8")

    def test_byte_order_mark_comes_from_codec(self) -> None:
        out = io.BytesIO()
        subject = tag("p")["x"]
        subject.stream_bytes(out, "utf-8-sig")
        subject.stream_bytes(out, "utf-8-sig")
        assert out.getvalue() == b"\xef\xbb\xbf<p>x</p>\xef\xbb\xbf<p>x</p>"

    def test_utf16_encoding(self) -> None:
        out = io.BytesIO()
        tag("p")["x"].stream_bytes(out, "utf-16-le")
        assert out.getvalue().decode("utf-16-le") == "<p>x</p>"

    def test_unencodable_text_propagates(self) -> None:
        out = io.BytesIO()
        with pytest.raises(UnicodeEncodeError):
            tag("p")["café"].stream_bytes(out, "ascii")
        assert out.getvalue() == b""

    def test_write_to_a_file(self, tmp_path) -> None:
        path = tmp_path / "out.html"
        with path.open("wb") as f:
            tag("p")["one"].stream_bytes(f)
            tag("p")["two"].stream_bytes(f)
        assert path.read_text(encoding="utf-8") == "<p>one</p><p>two</p>"

    def test_streaming_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="tagsmith"):
            tag("p")["x"].stream_bytes(io.BytesIO(), "ascii")
        assert any("ascii" in r.getMessage() for r in caplog.records)
