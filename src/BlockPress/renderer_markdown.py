from __future__ import annotations

from typing import Iterable, Sequence

from . import markdown_format
from .model import (
    Block,
    BulletListItem,
    CheckListItem,
    CodeBlock,
    Heading,
    ImageBlock,
    InlineContent,
    NumberedListItem,
    Paragraph,
    Quote,
)


def serialize(blocks: Sequence[Block] | None) -> str:
    """Serialize a block tree into a Markdown document.

    Top-level blocks are separated by one blank line. Anything that is not a
    list or tuple of blocks serializes to an empty string.
    """
    if not blocks or not isinstance(blocks, (list, tuple)):
        return ""
    return markdown_format.BLOCK_SEPARATOR.join(render_block(block) for block in blocks)


def render_block(block: Block) -> str:
    content = render_inline(block.content)
    children = serialize(block.children) if block.children else ""

    if isinstance(block, Heading):
        level = block.level if block.level and block.level > 0 else markdown_format.DEFAULT_HEADING_LEVEL
        return f"{'#' * level} {content}"
    if isinstance(block, Paragraph):
        return content
    if isinstance(block, BulletListItem):
        return _with_children(markdown_format.BULLET_MARKER + content, children)
    if isinstance(block, NumberedListItem):
        return _with_children(markdown_format.NUMBERED_MARKER + content, children)
    if isinstance(block, CheckListItem):
        return _with_children(markdown_format.check_marker(block.checked) + content, children)
    if isinstance(block, ImageBlock):
        alt = block.caption or block.name or markdown_format.DEFAULT_IMAGE_ALT
        return f"![{alt}]({block.url or ''})"
    if isinstance(block, CodeBlock):
        fence = markdown_format.CODE_FENCE
        return f"{fence}{block.language or ''}\n{content}\n{fence}"
    if isinstance(block, Quote):
        return markdown_format.QUOTE_MARKER + content
    return content


def _with_children(line: str, children: str) -> str:
    if not children:
        return line
    return f"{line}\n{markdown_format.indent_block(children)}"


def render_inline(content: Iterable[InlineContent] | None) -> str:
    if not content:
        return ""
    return "".join(_render_run(item) for item in content)


def _render_run(item: InlineContent) -> str:
    # Order matters: bold, italic, strike, code, then the link wrapper.
    text = item.text or ""
    if item.bold:
        text = markdown_format.wrap(text, markdown_format.BOLD_MARK)
    if item.italic:
        text = markdown_format.wrap(text, markdown_format.ITALIC_MARK)
    if item.strike:
        text = markdown_format.wrap(text, markdown_format.STRIKE_MARK)
    if item.code:
        text = markdown_format.wrap(text, markdown_format.CODE_MARK)
    if item.is_link:
        text = f"[{text}]({item.href or ''})"
    return text
