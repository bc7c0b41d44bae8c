"""Content nodes produced by the result renderer.

Every node is an immutable dataclass carrying a ``kind`` tag, so display
surfaces (and tests) can dispatch on structure without knowing anything about
how the text was parsed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class NodeKind(str, Enum):
    """Semantic tag of a content node."""

    # Blocks
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TABLE = "table"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE_CELL = "table_cell"
    FENCED_CODE = "fenced_code"
    BLOCK_QUOTE = "block_quote"
    THEMATIC_BREAK = "thematic_break"

    # Inlines
    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    STRIKETHROUGH = "strikethrough"
    INLINE_CODE = "inline_code"
    LINK = "link"
    IMAGE = "image"
    LINE_BREAK = "line_break"


# Inline nodes


@dataclass(frozen=True)
class Text:
    text: str
    kind: ClassVar[NodeKind] = NodeKind.TEXT

    def plain_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class InlineCode:
    """Code span inside running text (``single backticks``)."""

    text: str
    kind: ClassVar[NodeKind] = NodeKind.INLINE_CODE

    def plain_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class LineBreak:
    hard: bool = False
    kind: ClassVar[NodeKind] = NodeKind.LINE_BREAK

    def plain_text(self) -> str:
        return "\n"


@dataclass(frozen=True)
class Image:
    src: str
    alt: str = ""
    title: str | None = None
    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    def plain_text(self) -> str:
        return self.alt


@dataclass(frozen=True)
class _InlineContainer:
    children: tuple["Inline", ...] = ()

    def plain_text(self) -> str:
        return "".join(child.plain_text() for child in self.children)


@dataclass(frozen=True)
class Strong(_InlineContainer):
    kind: ClassVar[NodeKind] = NodeKind.STRONG


@dataclass(frozen=True)
class Emphasis(_InlineContainer):
    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS


@dataclass(frozen=True)
class Strikethrough(_InlineContainer):
    kind: ClassVar[NodeKind] = NodeKind.STRIKETHROUGH


@dataclass(frozen=True)
class Link(_InlineContainer):
    href: str = ""
    title: str | None = None
    kind: ClassVar[NodeKind] = NodeKind.LINK

    @property
    def text(self) -> str:
        return self.plain_text()


Inline = Union[Text, InlineCode, LineBreak, Image, Strong, Emphasis, Strikethrough, Link]


# Block nodes


@dataclass(frozen=True)
class Heading(_InlineContainer):
    level: int = 1
    kind: ClassVar[NodeKind] = NodeKind.HEADING


@dataclass(frozen=True)
class Paragraph(_InlineContainer):
    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH


@dataclass(frozen=True)
class FencedCode:
    """Code block. ``language`` is a display hint only; the text is never run."""

    text: str
    language: str | None = None
    kind: ClassVar[NodeKind] = NodeKind.FENCED_CODE

    def plain_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class ThematicBreak:
    kind: ClassVar[NodeKind] = NodeKind.THEMATIC_BREAK

    def plain_text(self) -> str:
        return ""


@dataclass(frozen=True)
class TableCell(_InlineContainer):
    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL


@dataclass(frozen=True)
class Table:
    """Pipe table. ``alignments`` holds "left", "center", "right" or None per column."""

    header: tuple[TableCell, ...] = ()
    rows: tuple[tuple[TableCell, ...], ...] = ()
    alignments: tuple[str | None, ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.TABLE

    def plain_text(self) -> str:
        lines = [" | ".join(cell.plain_text() for cell in self.header)]
        lines.extend(" | ".join(cell.plain_text() for cell in row) for row in self.rows)
        return "\n".join(lines)


@dataclass(frozen=True)
class _BlockContainer:
    children: tuple["Block", ...] = ()

    def plain_text(self) -> str:
        return "\n".join(child.plain_text() for child in self.children)


@dataclass(frozen=True)
class ListItem(_BlockContainer):
    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM


@dataclass(frozen=True)
class BlockQuote(_BlockContainer):
    kind: ClassVar[NodeKind] = NodeKind.BLOCK_QUOTE


@dataclass(frozen=True)
class ListBlock:
    items: tuple[ListItem, ...] = ()
    ordered: bool = False
    start: int = 1
    kind: ClassVar[NodeKind] = NodeKind.LIST

    def plain_text(self) -> str:
        return "\n".join(item.plain_text() for item in self.items)


Block = Union[
    Heading, Paragraph, Table, ListBlock, ListItem, FencedCode, BlockQuote, ThematicBreak
]

