from __future__ import annotations

from typing import Sequence

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from .model import Block
from .renderer_markdown import serialize


def _drop_html(self, tokens, idx, options, env) -> str:
    return ""


_md = (
    MarkdownIt("commonmark", {"html": True, "linkify": True})
    .enable(["table", "strikethrough", "linkify"])
    .use(tasklists_plugin)
    .use(footnote_plugin)
)
# Raw HTML is parsed so it can be removed; its text content is kept.
_md.add_render_rule("html_inline", _drop_html)
_md.add_render_rule("html_block", _drop_html)


def render_markdown_to_html(markdown: str | None) -> str:
    """Render page Markdown to HTML that is safe to embed in the storefront."""
    if not (markdown and markdown.strip()):
        return ""
    return _md.render(markdown)


def render_blocks_to_html(blocks: Sequence[Block] | None) -> str:
    return render_markdown_to_html(serialize(blocks))
