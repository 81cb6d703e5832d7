"""Unit tests for per-tag rendering."""

import pytest

from html2mark.colors import Paint, paint
from html2mark.options import ConversionOptions, RenderFlags
from html2mark.references import ReferenceRegistry
from html2mark.renderer import Frame, RenderContext, TagRenderer
from html2mark.tags import classify


def _renderer(flags=RenderFlags.DEFAULT, **kwargs):
    registry = ReferenceRegistry()
    return TagRenderer(ConversionOptions(flags, **kwargs), registry), registry


def _frame(tag_name, content="", **attrs):
    return Frame(classify(tag_name), attrs, content)


@pytest.mark.unit
class TestInlineRendering:
    """Test emphasis, strong, strike and code spans."""

    def test_emphasis(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("em", "Text")) == "_Text_"

    def test_strong(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("b", "Text")) == "**Text**"

    def test_strike(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("del", "gone")) == "~~gone~~"

    @pytest.mark.parametrize("content", ["", " ", "\n"])
    def test_whitespace_only_spans_keep_whitespace(self, content):
        renderer, _ = _renderer()
        assert renderer.render(_frame("i", content)) == content

    def test_code(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("code", "    Some\ttext ")) == "`    Some\ttext `"

    def test_code_containing_backtick(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("code", "a`b")) == "``a`b``"

    def test_empty_code(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("code")) == ""

    def test_code_inside_pre_is_bare(self):
        renderer, _ = _renderer()
        context = RenderContext(in_preformatted=True)
        assert renderer.render(_frame("code", "x = 1"), context) == "x = 1"

    def test_colored_emphasis_is_painted(self):
        renderer, _ = _renderer(RenderFlags.COLORS)
        assert renderer.render(_frame("em", "Text")) == paint(Paint.EMPHASIS, "Text")


@pytest.mark.unit
class TestBlockRendering:
    """Test paragraphs, headings, rules and other blocks."""

    def test_paragraph(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("p", "Text ")) == "\nText\n"

    def test_empty_paragraph_still_breaks(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("p")) == "\n\n"

    def test_empty_div_renders_nothing(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("div", " ")) == ""

    def test_div(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("div", "Text")) == "\nText\n"

    def test_atx_heading(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("h3", " Text ")) == "\n### Text\n"

    def test_setext_headings(self):
        renderer, _ = _renderer(RenderFlags.UNDERSCORED_HEADINGS)
        assert renderer.render(_frame("h1", "Text")) == "\nText\n====\n"
        assert renderer.render(_frame("h2", "Text")) == "\nText\n----\n"

    def test_setext_applies_to_levels_one_and_two_only(self):
        renderer, _ = _renderer(RenderFlags.UNDERSCORED_HEADINGS)
        assert renderer.render(_frame("h3", "Text")) == "\n### Text\n"

    def test_heading_line_breaks_fold_to_spaces(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("h1", "one\ntwo")) == "\n# one two\n"

    def test_empty_heading(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("h2", "  ")) == ""

    def test_setext_underline_ignores_markers(self):
        renderer, _ = _renderer(RenderFlags.UNDERSCORED_HEADINGS | RenderFlags.COLORS)
        rendered = renderer.render(_frame("h1", paint(Paint.EMPHASIS, "Text")))
        assert rendered.endswith("\n====" + "\U000f00ff" + "\n")

    def test_rule(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("hr")) == "\n* * *\n"

    def test_break(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("br")) == "\n"

    def test_preformatted(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("pre", "\nsome\n\ttext\n")) == "\n\tsome\n\t\ttext\n"

    def test_blockquote(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("blockquote", "\n# some\n\ntext\n")) == "\n> \n> # some\n> \n> text\n"

    def test_document_strips_whitespace(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("body", "  Text\n ")) == "Text"

    def test_discarded(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("style", "body { color: red }")) == ""

    def test_unknown_tag_passes_through(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("table", "cells")) == "<table>cells</table>"


@pytest.mark.unit
class TestListRendering:
    """Test list and list item rendering."""

    def test_item_in_list_is_bare(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("li", "\none\n"), RenderContext(in_list=True)) == "one"

    def test_item_outside_list_is_a_paragraph(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("li", "one")) == "\none\n"

    def test_unordered(self):
        renderer, _ = _renderer()
        frame = _frame("ul")
        frame.items.extend(["one", "two"])
        assert renderer.render(frame) == "\n* one\n* two\n"

    def test_ordered_continuation_indent(self):
        renderer, _ = _renderer()
        frame = _frame("ol")
        frame.items.extend(["* some\n* text"])
        assert renderer.render(frame) == "\n1. * some\n  * text\n"

    def test_ordered_start(self):
        renderer, _ = _renderer()
        frame = _frame("ol", start="9")
        frame.items.extend(["nine", "ten"])
        assert renderer.render(frame) == "\n9. nine\n10. ten\n"

    def test_invalid_start_falls_back_to_one(self):
        renderer, _ = _renderer()
        frame = _frame("ol", start="x")
        frame.items.append("one")
        assert renderer.render(frame) == "\n1. one\n"

    def test_empty_list(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("ul")) == ""


@pytest.mark.unit
class TestLinkRendering:
    """Test links, images and reference registration."""

    def test_inline_link(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("a", "Text", href="http://example.com/")) == "[Text](http://example.com/)"

    def test_link_title(self):
        renderer, _ = _renderer()
        frame = _frame("a", "Text", href="http://example.com/", title="Title")
        assert renderer.render(frame) == '[Text](http://example.com/ "Title")'

    def test_link_without_href_keeps_text(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("a", "anchor", name="top")) == "anchor"

    def test_reference_link_registers(self):
        renderer, registry = _renderer(RenderFlags.MAKE_REFERENCE_LINKS, min_reference_link_length=15)
        assert renderer.render(_frame("a", "Text", href="http://example.com")) == "[Text][1]"
        assert registry.entries[0].url == "http://example.com"

    def test_short_target_stays_inline(self):
        renderer, registry = _renderer(RenderFlags.MAKE_REFERENCE_LINKS)
        assert renderer.render(_frame("a", "Text", href="/short")) == "[Text](/short)"
        assert len(registry) == 0

    def test_threshold_is_inclusive(self):
        renderer, registry = _renderer(RenderFlags.MAKE_REFERENCE_LINKS, min_reference_link_length=6)
        assert renderer.render(_frame("a", "Text", href="/short")) == "[Text][1]"

    def test_image(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("img", src="/path/to/img", alt="Alt")) == "![Alt](/path/to/img)"

    def test_image_title(self):
        renderer, _ = _renderer()
        assert renderer.render(_frame("img", src="/path/to/img", title="Title")) == '![](/path/to/img "Title")'

    def test_colored_link(self):
        renderer, _ = _renderer(RenderFlags.COLORS)
        rendered = renderer.render(_frame("a", "Text", href="http://example.com/"))
        assert rendered == paint(Paint.LINK, "Text") + paint(Paint.TARGET, "(http://example.com/)")
