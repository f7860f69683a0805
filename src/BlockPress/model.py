from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Mapping, Optional


@dataclass
class InlineContent:
    text: str = ""
    type: str = "text"
    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False
    href: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return self.type == "link"


@dataclass
class Block:
    """Base class for editor blocks.

    ``props`` keeps the attribute mapping as it arrived from the editor; the
    variant subclasses expose the attributes they render as typed fields.
    """

    id: Optional[str] = None
    content: List[InlineContent] = field(default_factory=list)
    children: List["Block"] = field(default_factory=list)
    props: Mapping[str, Any] = field(default_factory=dict)

    block_type: ClassVar[str] = ""

    @property
    def type(self) -> str:
        return self.block_type


@dataclass
class Heading(Block):
    level: int = 1

    block_type: ClassVar[str] = "heading"


@dataclass
class Paragraph(Block):
    block_type: ClassVar[str] = "paragraph"


@dataclass
class BulletListItem(Block):
    block_type: ClassVar[str] = "bulletListItem"


@dataclass
class NumberedListItem(Block):
    block_type: ClassVar[str] = "numberedListItem"


@dataclass
class CheckListItem(Block):
    checked: bool = False

    block_type: ClassVar[str] = "checkListItem"


@dataclass
class ImageBlock(Block):
    url: str = ""
    caption: str | None = None
    name: str | None = None

    block_type: ClassVar[str] = "image"


@dataclass
class CodeBlock(Block):
    language: str = ""

    block_type: ClassVar[str] = "codeBlock"


@dataclass
class Quote(Block):
    block_type: ClassVar[str] = "quote"


@dataclass
class UnknownBlock(Block):
    """Any block kind the renderer has no dedicated syntax for."""

    kind: str = ""

    @property
    def type(self) -> str:
        return self.kind


BLOCK_TYPES: dict[str, type[Block]] = {
    cls.block_type: cls
    for cls in (
        Heading,
        Paragraph,
        BulletListItem,
        NumberedListItem,
        CheckListItem,
        ImageBlock,
        CodeBlock,
        Quote,
    )
}
