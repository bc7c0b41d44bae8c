"""Convert recommendation text (GitHub-flavoured markdown) into content nodes.

The renderer is display-only: code is never executed, raw HTML is kept as
literal text and link schemes such as ``javascript:`` are not turned into
links. Malformed input never raises; an unterminated code fence runs to the
end of the text and a broken table row falls back to a paragraph.
"""

import logging
from collections.abc import Iterator

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from src.rendering.blocks import (
    Block,
    BlockQuote,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Inline,
    InlineCode,
    LineBreak,
    Link,
    ListBlock,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    Text,
    ThematicBreak,
)

logger = logging.getLogger(__name__)


def _build_parser() -> MarkdownIt:
    """CommonMark with GFM tables and strikethrough, raw HTML disabled."""
    return MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])


class RenderedDocument:
    """Rendered result text.

    Parsing happens on first access and the blocks are cached, so the document
    can be iterated any number of times.
    """

    def __init__(self, source: str, parser: MarkdownIt):
        self.source = source
        self._parser = parser
        self._blocks: tuple[Block, ...] | None = None

    @property
    def blocks(self) -> tuple[Block, ...]:
        if self._blocks is None:
            self._blocks = self._build()
        return self._blocks

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __repr__(self) -> str:
        return f"RenderedDocument(source={self.source[:30]!r})"

    def _build(self) -> tuple[Block, ...]:
        try:
            tree = SyntaxTreeNode(self._parser.parse(self.source))
            return tuple(_convert_blocks(tree.children))
        except Exception:
            logger.exception("Failed to parse result text, rendering as plain paragraphs")
            return _plain_paragraphs(self.source)


class ResultRenderer:
    """Renders recommendation text into content blocks."""

    def __init__(self) -> None:
        self._parser = _build_parser()

    def render(self, text: str) -> RenderedDocument:
        """Render text into a lazily parsed document.

        Args:
            text: Raw ``message`` from the recommendation service.

        Returns:
            RenderedDocument whose iteration yields blocks in source order.
        """
        return RenderedDocument(text or "", self._parser)


_default_renderer = ResultRenderer()


def render(text: str) -> RenderedDocument:
    """Render text with the shared default renderer."""
    return _default_renderer.render(text)


def _plain_paragraphs(source: str) -> tuple[Block, ...]:
    chunks = [chunk.strip() for chunk in source.split("\n\n")]
    return tuple(Paragraph(children=(Text(chunk),)) for chunk in chunks if chunk)


def _convert_blocks(nodes: list[SyntaxTreeNode]) -> Iterator[Block]:
    for node in nodes:
        block = _convert_block(node)
        if block is not None:
            yield block


def _convert_block(node: SyntaxTreeNode) -> Block | None:
    node_type = node.type

    if node_type == "heading":
        return Heading(children=_inline_children(node), level=int(node.tag[1:]))
    if node_type == "paragraph":
        return Paragraph(children=_inline_children(node))
    if node_type == "fence":
        info = node.info.strip()
        return FencedCode(text=node.content, language=info.split()[0] if info else None)
    if node_type == "code_block":
        return FencedCode(text=node.content)
    if node_type in ("bullet_list", "ordered_list"):
        items = tuple(
            ListItem(children=tuple(_convert_blocks(item.children)))
            for item in node.children
        )
        start = int(node.attrs.get("start", 1)) if node_type == "ordered_list" else 1
        return ListBlock(items=items, ordered=node_type == "ordered_list", start=start)
    if node_type == "blockquote":
        return BlockQuote(children=tuple(_convert_blocks(node.children)))
    if node_type == "hr":
        return ThematicBreak()
    if node_type == "table":
        return _convert_table(node)

    # html_block and anything unknown: keep the source as literal text
    content = node.content.strip("\n")
    if content:
        return Paragraph(children=(Text(content),))
    return None


def _convert_table(node: SyntaxTreeNode) -> Table:
    header: tuple[TableCell, ...] = ()
    alignments: tuple[str | None, ...] = ()
    rows: list[tuple[TableCell, ...]] = []

    for section in node.children:
        for row in section.children:
            cells = tuple(TableCell(children=_inline_children(cell)) for cell in row.children)
            if section.type == "thead":
                header = cells
                alignments = tuple(_cell_alignment(cell) for cell in row.children)
            else:
                rows.append(cells)

    return Table(header=header, rows=tuple(rows), alignments=alignments)


def _cell_alignment(cell: SyntaxTreeNode) -> str | None:
    style = str(cell.attrs.get("style", ""))
    if style.startswith("text-align:"):
        return style.split(":", 1)[1].strip()
    return None


def _inline_children(node: SyntaxTreeNode) -> tuple[Inline, ...]:
    inlines: list[Inline] = []
    for child in node.children:
        if child.type == "inline":
            inlines.extend(_convert_inlines(child.children))
    return tuple(inlines)


def _convert_inlines(nodes: list[SyntaxTreeNode]) -> list[Inline]:
    return [_convert_inline(node) for node in nodes]


def _convert_inline(node: SyntaxTreeNode) -> Inline:
    node_type = node.type

    if node_type == "code_inline":
        return InlineCode(node.content)
    if node_type == "softbreak":
        return LineBreak(hard=False)
    if node_type == "hardbreak":
        return LineBreak(hard=True)
    if node_type == "strong":
        return Strong(children=tuple(_convert_inlines(node.children)))
    if node_type == "em":
        return Emphasis(children=tuple(_convert_inlines(node.children)))
    if node_type == "s":
        return Strikethrough(children=tuple(_convert_inlines(node.children)))
    if node_type == "link":
        title = node.attrs.get("title")
        return Link(
            children=tuple(_convert_inlines(node.children)),
            href=str(node.attrs.get("href", "")),
            title=str(title) if title is not None else None,
        )
    if node_type == "image":
        title = node.attrs.get("title")
        return Image(
            src=str(node.attrs.get("src", "")),
            alt=node.content,
            title=str(title) if title is not None else None,
        )

    # text, html_inline and anything unknown
    return Text(node.content)
