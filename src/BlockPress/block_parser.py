from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping

import yaml

from .markdown_format import DEFAULT_HEADING_LEVEL
from .model import (
    BLOCK_TYPES,
    Block,
    CheckListItem,
    CodeBlock,
    Heading,
    ImageBlock,
    InlineContent,
    UnknownBlock,
)

_STYLE_FLAGS = ("bold", "italic", "strike", "code")


def load_blocks(text: str) -> List[Block]:
    """Load editor output (JSON or YAML) into a list of blocks.

    The root may be empty, a list of blocks, or a page mapping whose
    ``content`` field holds the blocks.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text)
    if data is None:
        return []
    if isinstance(data, dict):
        content = data.get("content")
        if not isinstance(content, list):
            raise ValueError("Page mapping must carry its blocks in a 'content' list.")
        data = content
    if not isinstance(data, list):
        raise ValueError("Block document root must be a list of blocks or a page mapping.")
    return parse_blocks(data)


def parse_blocks(data: Any) -> List[Block]:
    if not isinstance(data, list):
        return []
    blocks: List[Block] = []
    for entry in data:
        if not isinstance(entry, dict):
            logging.debug("Skipping non-mapping block entry: %r", entry)
            continue
        blocks.append(parse_block(entry))
    return blocks


def parse_block(data: Mapping[str, Any]) -> Block:
    block_type = str(data.get("type") or "")
    props = data.get("props")
    if not isinstance(props, dict):
        props = {}

    common = dict(
        id=_optional_str(data.get("id")),
        content=parse_inline(data.get("content")),
        children=parse_blocks(data.get("children")),
        props=props,
    )

    cls = BLOCK_TYPES.get(block_type)
    if cls is None:
        logging.debug("Unknown block type %r, rendering content only", block_type)
        return UnknownBlock(kind=block_type, **common)
    if cls is Heading:
        return Heading(level=_heading_level(props.get("level")), **common)
    if cls is CheckListItem:
        return CheckListItem(checked=bool(props.get("checked")), **common)
    if cls is ImageBlock:
        return ImageBlock(
            url=_optional_str(props.get("url")) or "",
            caption=_optional_str(props.get("caption")),
            name=_optional_str(props.get("name")),
            **common,
        )
    if cls is CodeBlock:
        return CodeBlock(language=_optional_str(props.get("language")) or "", **common)
    return cls(**common)


def parse_inline(data: Any) -> List[InlineContent]:
    if not isinstance(data, list):
        return []
    runs: List[InlineContent] = []
    for item in data:
        if isinstance(item, str):
            runs.append(InlineContent(text=item))
        elif isinstance(item, dict):
            runs.append(_inline_from_mapping(item))
        else:
            logging.debug("Skipping inline entry of type %s", type(item).__name__)
    return runs


def _inline_from_mapping(item: Mapping[str, Any]) -> InlineContent:
    run_type = str(item.get("type") or "text")
    text = item.get("text")
    if text is None and run_type == "link":
        # Editor links nest their styled text runs under "content".
        text = "".join(run.text for run in parse_inline(item.get("content")))
    styles = item.get("styles")
    if not isinstance(styles, dict):
        styles = {}
    flags = {name: bool(styles.get(name)) for name in _STYLE_FLAGS}
    return InlineContent(
        text="" if text is None else str(text),
        type=run_type,
        href=_optional_str(item.get("href")),
        **flags,
    )


def _heading_level(value: Any) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError):
        return DEFAULT_HEADING_LEVEL
    return level if level > 0 else DEFAULT_HEADING_LEVEL


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
