"""HTML projection of rendered content for display surfaces.

All text is escaped; nothing from the source is passed through as markup.
"""

import html
from collections.abc import Iterable

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

INLINE_CODE_CLASS = "inline-code"
CODE_BLOCK_CLASS = "code-block"


def _esc(text: str | None) -> str:
    return html.escape(str(text or ""))


def to_html(blocks: Iterable[Block]) -> str:
    """Render content blocks to an HTML fragment."""
    return "\n".join(block_to_html(block) for block in blocks)


def block_to_html(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{inlines_to_html(block.children)}</h{block.level}>"
    if isinstance(block, Paragraph):
        return f"<p>{inlines_to_html(block.children)}</p>"
    if isinstance(block, FencedCode):
        code_class = f' class="language-{_esc(block.language)}"' if block.language else ""
        return f'<pre class="{CODE_BLOCK_CLASS}"><code{code_class}>{_esc(block.text)}</code></pre>'
    if isinstance(block, ListBlock):
        items = "".join(block_to_html(item) for item in block.items)
        if block.ordered:
            start = f' start="{block.start}"' if block.start != 1 else ""
            return f"<ol{start}>{items}</ol>"
        return f"<ul>{items}</ul>"
    if isinstance(block, ListItem):
        return f"<li>{_list_item_body(block)}</li>"
    if isinstance(block, BlockQuote):
        return f"<blockquote>{to_html(block.children)}</blockquote>"
    if isinstance(block, ThematicBreak):
        return "<hr>"
    if isinstance(block, Table):
        return _table_to_html(block)
    return f"<p>{_esc(block.plain_text())}</p>"


def _list_item_body(item: ListItem) -> str:
    # Tight list items hold a single paragraph; render it without <p>
    if len(item.children) == 1 and isinstance(item.children[0], Paragraph):
        return inlines_to_html(item.children[0].children)
    return to_html(item.children)


def _table_to_html(table: Table) -> str:
    def cell_html(tag: str, cell: TableCell, index: int) -> str:
        align = table.alignments[index] if index < len(table.alignments) else None
        style = f' style="text-align:{_esc(align)}"' if align else ""
        return f"<{tag}{style}>{inlines_to_html(cell.children)}</{tag}>"

    head = "".join(cell_html("th", cell, i) for i, cell in enumerate(table.header))
    body = "".join(
        "<tr>" + "".join(cell_html("td", cell, i) for i, cell in enumerate(row)) + "</tr>"
        for row in table.rows
    )
    out = f"<table><thead><tr>{head}</tr></thead>"
    if body:
        out += f"<tbody>{body}</tbody>"
    return out + "</table>"


def inlines_to_html(inlines: Iterable[Inline]) -> str:
    return "".join(inline_to_html(inline) for inline in inlines)


def inline_to_html(inline: Inline) -> str:
    if isinstance(inline, Text):
        return _esc(inline.text)
    if isinstance(inline, InlineCode):
        return f'<code class="{INLINE_CODE_CLASS}">{_esc(inline.text)}</code>'
    if isinstance(inline, Strong):
        return f"<strong>{inlines_to_html(inline.children)}</strong>"
    if isinstance(inline, Emphasis):
        return f"<em>{inlines_to_html(inline.children)}</em>"
    if isinstance(inline, Strikethrough):
        return f"<del>{inlines_to_html(inline.children)}</del>"
    if isinstance(inline, Link):
        title = f' title="{_esc(inline.title)}"' if inline.title else ""
        return f'<a href="{_esc(inline.href)}"{title}>{inlines_to_html(inline.children)}</a>'
    if isinstance(inline, Image):
        return f'<img src="{_esc(inline.src)}" alt="{_esc(inline.alt)}">'
    if isinstance(inline, LineBreak):
        return "<br>" if inline.hard else "\n"
    return _esc(inline.plain_text())
