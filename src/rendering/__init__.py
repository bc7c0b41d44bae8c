"""Rendering of recommendation text into display-independent content nodes."""

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
    NodeKind,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    Text,
    ThematicBreak,
)
from src.rendering.markup import to_html
from src.rendering.renderer import RenderedDocument, ResultRenderer, render

__all__ = [
    "Block",
    "BlockQuote",
    "Emphasis",
    "FencedCode",
    "Heading",
    "Image",
    "Inline",
    "InlineCode",
    "LineBreak",
    "Link",
    "ListBlock",
    "ListItem",
    "NodeKind",
    "Paragraph",
    "RenderedDocument",
    "ResultRenderer",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "Text",
    "ThematicBreak",
    "render",
    "to_html",
]
