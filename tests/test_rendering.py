"""Tests for rendering recommendation text into content blocks."""

import pytest

from src.rendering import (
    BlockQuote,
    Emphasis,
    FencedCode,
    Heading,
    InlineCode,
    Link,
    ListBlock,
    NodeKind,
    Paragraph,
    RenderedDocument,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
    render,
    to_html,
)

SAMPLE_RESULT = """# 渋谷区のおすすめ

以下の3店舗をご提案します。

| 店名 | 種類 | 価格 |
|:---|:---:|---:|
| 麺屋 一 | 味噌 | 950円 |
| 醤油亭 | 醤油 | 880円 |

1. **麺屋 一**: 濃厚な*味噌*スープ
2. **醤油亭**: `あっさり` 系

```json
{"recommend": "麺屋 一"}
```

詳しくは[公式サイト](https://example.com/shop "お店")をご覧ください。
"""


class TestBlockStructure:
    """Test block-level structure."""

    def test_block_order_matches_source(self):
        """Test that blocks appear in source order."""
        kinds = [block.kind for block in render(SAMPLE_RESULT)]

        assert kinds == [
            NodeKind.HEADING,
            NodeKind.PARAGRAPH,
            NodeKind.TABLE,
            NodeKind.LIST,
            NodeKind.FENCED_CODE,
            NodeKind.PARAGRAPH,
        ]

    def test_heading_levels(self):
        """Test heading level detection."""
        blocks = list(render("# 一\n\n### 三"))

        assert [(b.level, b.plain_text()) for b in blocks] == [(1, "一"), (3, "三")]

    def test_bold_paragraph(self):
        """Test a heading followed by bold text."""
        blocks = list(render("# Best pick\n\n**Shibuya Miso**"))

        assert len(blocks) == 2
        heading, paragraph = blocks
        assert isinstance(heading, Heading)
        assert heading.plain_text() == "Best pick"
        assert isinstance(paragraph, Paragraph)
        strong = [c for c in paragraph.children if isinstance(c, Strong)]
        assert [s.plain_text() for s in strong] == ["Shibuya Miso"]

    def test_table(self):
        """Test pipe tables with alignment."""
        table = next(b for b in render(SAMPLE_RESULT) if isinstance(b, Table))

        assert [cell.plain_text() for cell in table.header] == ["店名", "種類", "価格"]
        assert table.alignments == ("left", "center", "right")
        assert [[cell.plain_text() for cell in row] for row in table.rows] == [
            ["麺屋 一", "味噌", "950円"],
            ["醤油亭", "醤油", "880円"],
        ]

    def test_ordered_list(self):
        """Test ordered list items and inline styling inside them."""
        listing = next(b for b in render(SAMPLE_RESULT) if isinstance(b, ListBlock))

        assert listing.ordered is True
        assert listing.start == 1
        assert len(listing.items) == 2
        first = listing.items[0].children[0]
        assert isinstance(first, Paragraph)
        assert any(isinstance(c, Strong) for c in first.children)
        assert any(isinstance(c, Emphasis) for c in first.children)

    def test_ordered_list_start(self):
        """Test that a list starting at another number keeps it."""
        (listing,) = render("3. 三番目\n4. 四番目")

        assert listing.start == 3

    def test_bullet_list(self):
        """Test unordered lists."""
        (listing,) = render("- 醤油\n- 塩")

        assert listing.ordered is False
        assert [item.plain_text() for item in listing.items] == ["醤油", "塩"]

    def test_block_quote_and_rule(self):
        """Test quotes and thematic breaks."""
        blocks = list(render("> 行列必至\n\n---"))

        assert isinstance(blocks[0], BlockQuote)
        assert blocks[0].plain_text() == "行列必至"
        assert isinstance(blocks[1], ThematicBreak)

    def test_strikethrough(self):
        """Test GFM strikethrough."""
        (paragraph,) = render("~~閉店~~")

        assert isinstance(paragraph.children[0], Strikethrough)

    def test_link(self):
        """Test link href, title and text."""
        paragraph = list(render(SAMPLE_RESULT))[-1]
        link = next(c for c in paragraph.children if isinstance(c, Link))

        assert link.href == "https://example.com/shop"
        assert link.title == "お店"
        assert link.text == "公式サイト"


class TestCodeRendering:
    """Test that inline and fenced code stay distinct."""

    def test_fenced_code_keeps_language(self):
        """Test fenced blocks keep their language tag as a hint."""
        code = next(b for b in render(SAMPLE_RESULT) if isinstance(b, FencedCode))

        assert code.language == "json"
        assert code.text == '{"recommend": "麺屋 一"}\n'
        assert code.kind is NodeKind.FENCED_CODE

    def test_fence_without_language(self):
        """Test a fence without an info string."""
        (code,) = render("```\nplain\n```")

        assert code.language is None
        assert code.text == "plain\n"

    def test_inline_code_is_tagged_separately(self):
        """Test that code spans are InlineCode nodes, not blocks."""
        (paragraph,) = render("`味噌` を選んでください")

        code = paragraph.children[0]
        assert isinstance(code, InlineCode)
        assert code.kind is NodeKind.INLINE_CODE
        assert code.text == "味噌"

    def test_indented_code_block(self):
        """Test indented code becomes a code block without language."""
        (code,) = render("    x = 1\n")

        assert isinstance(code, FencedCode)
        assert code.language is None
        assert code.text == "x = 1\n"


class TestGracefulDegradation:
    """Test that malformed input never raises."""

    def test_unterminated_fence(self):
        """Test that an unclosed fence runs to the end of the text."""
        blocks = list(render("はじめに\n\n```python\nprint('一蘭')\n次の行"))

        assert isinstance(blocks[0], Paragraph)
        assert isinstance(blocks[-1], FencedCode)
        assert blocks[-1].language == "python"
        assert "print('一蘭')" in blocks[-1].text
        assert "次の行" in blocks[-1].text

    def test_broken_table_row_falls_back_to_text(self):
        """Test that a table with a mismatched delimiter row is plain text."""
        blocks = list(render("| a | b |\n|---|\n| 1 | 2 |"))

        assert blocks
        assert not any(isinstance(b, Table) for b in blocks)
        assert all(isinstance(b, Paragraph) for b in blocks)

    def test_short_table_row_is_padded(self):
        """Test that rows with missing cells still render."""
        (table,) = render("| a | b |\n|---|---|\n| 1 |")

        assert len(table.rows) == 1
        assert table.rows[0][0].plain_text() == "1"

    @pytest.mark.parametrize("text", ["", "\n\n", "**", "[", "```", "| |", "<div>"])
    def test_degenerate_inputs(self, text):
        """Test odd fragments render without raising."""
        list(render(text))

    def test_parser_failure_falls_back_to_paragraphs(self):
        """Test that an unexpected parser error degrades to plain text."""

        class BrokenParser:
            def parse(self, src):
                raise RuntimeError("parser bug")

        document = RenderedDocument("一行目\n\n二行目", BrokenParser())

        assert list(document) == [
            Paragraph(children=(Text("一行目"),)),
            Paragraph(children=(Text("二行目"),)),
        ]


class TestSafety:
    """Test that rendering is display-only."""

    def test_raw_html_is_literal_text(self):
        """Test that embedded HTML is kept as text."""
        (paragraph,) = render("<script>alert('x')</script>")

        assert paragraph.plain_text() == "<script>alert('x')</script>"

    def test_html_output_is_escaped(self):
        """Test the HTML projection escapes embedded markup."""
        html = to_html(render("**<b>危険</b>** <img src=x onerror=alert(1)>"))

        assert "<b>" not in html
        assert "<img" not in html
        assert "&lt;b&gt;" in html

    def test_javascript_links_are_not_links(self):
        """Test that unsafe link schemes stay plain text."""
        (paragraph,) = render("[click](javascript:alert(1))")

        assert not any(isinstance(c, Link) for c in paragraph.children)


class TestRenderedDocument:
    """Test document iteration semantics."""

    def test_iteration_is_restartable(self):
        """Test that a document can be iterated more than once."""
        document = render(SAMPLE_RESULT)

        assert list(document) == list(document)
        assert len(document) == 6

    def test_blocks_are_immutable(self):
        """Test that produced nodes cannot be modified."""
        (heading,) = render("# 見出し")

        with pytest.raises(AttributeError):
            heading.level = 2

    def test_empty_text(self):
        """Test that empty text renders to no blocks."""
        assert list(render("")) == []


class TestHTMLProjection:
    """Test the HTML projection used by the Streamlit view."""

    def test_inline_and_block_code_classes(self):
        """Test that inline and fenced code get different classes."""
        html = to_html(render("`a`\n\n```python\nb\n```"))

        assert '<code class="inline-code">a</code>' in html
        assert '<pre class="code-block"><code class="language-python">b\n</code></pre>' in html

    def test_table_alignment(self):
        """Test table cells carry alignment styles."""
        html = to_html(render("| a | b |\n|:-:|--:|\n| 1 | 2 |"))

        assert '<th style="text-align:center">a</th>' in html
        assert '<td style="text-align:right">2</td>' in html

    def test_tight_list_items(self):
        """Test that tight list items are rendered without paragraphs."""
        html = to_html(render("- 塩\n- 味噌"))

        assert html == "<ul><li>塩</li><li>味噌</li></ul>"

    def test_heading_and_emphasis(self):
        """Test a heading with nested emphasis."""
        html = to_html(render("## *極上*の一杯"))

        assert html == "<h2><em>極上</em>の一杯</h2>"
