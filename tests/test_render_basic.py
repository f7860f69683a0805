from BlockPress.markdown_format import indent_block
from BlockPress.model import (
    BulletListItem,
    CheckListItem,
    CodeBlock,
    Heading,
    ImageBlock,
    InlineContent,
    NumberedListItem,
    Paragraph,
    Quote,
    UnknownBlock,
)
from BlockPress.renderer_markdown import render_block, render_inline, serialize


def _text(value: str, **styles) -> list[InlineContent]:
    return [InlineContent(text=value, **styles)]


def test_empty_or_absent_input_serializes_to_empty_string():
    assert serialize(None) == ""
    assert serialize([]) == ""
    assert serialize("not a list") == ""
    assert serialize({"type": "paragraph"}) == ""


def test_paragraph_and_heading():
    assert serialize([Paragraph(content=_text("Hello world"))]) == "Hello world"
    assert render_block(Heading(level=2, content=_text("Title"))) == "## Title"
    assert render_block(Heading(content=_text("Default"))) == "# Default"
    assert render_block(Heading(level=0, content=_text("T"))) == "# T"
    assert render_block(Heading(level=-2, content=_text("T"))) == "# T"


def test_serialize_leaves_input_untouched():
    child = BulletListItem(content=_text("sub"))
    parent = BulletListItem(content=_text("parent"), children=[child])
    serialize([parent])
    assert parent.children == [child]
    assert parent.content == _text("parent")
    assert child.children == []


def test_top_level_blocks_joined_by_blank_line():
    blocks = [Paragraph(content=_text("A")), Paragraph(content=_text("B"))]
    assert serialize(blocks) == "A\n\nB"


def test_inline_style_order():
    assert render_inline(_text("x", bold=True, italic=True)) == "***x***"
    assert render_inline(_text("x", bold=True, strike=True, code=True)) == "`~~**x**~~`"
    assert render_inline(None) == ""
    assert render_inline([]) == ""


def test_inline_runs_concatenate_without_separator():
    runs = [
        InlineContent(text="Buy "),
        InlineContent(text="now", bold=True),
        InlineContent(text="!"),
    ]
    assert render_inline(runs) == "Buy **now**!"


def test_link_wraps_styled_text():
    link = InlineContent(text="shop", type="link", href="https://example.com", italic=True)
    assert render_inline([link]) == "[*shop*](https://example.com)"
    assert render_inline([InlineContent(text="bare", type="link")]) == "[bare]()"


def test_text_is_not_escaped():
    assert render_inline(_text("2 * 3 # [x]")) == "2 * 3 # [x]"


def test_check_list_item_with_nested_child():
    block = CheckListItem(
        checked=True,
        content=_text("parent"),
        children=[BulletListItem(content=_text("sub"))],
    )
    assert render_block(block) == "- [x] parent\n  - sub"
    assert render_block(CheckListItem(content=_text("todo"))) == "- [ ] todo"


def test_nested_children_are_indented_as_a_unit():
    block = BulletListItem(
        content=_text("a"),
        children=[
            BulletListItem(content=_text("b"), children=[BulletListItem(content=_text("c"))]),
            BulletListItem(content=_text("d")),
        ],
    )
    assert render_block(block) == "- a\n  - b\n    - c\n  \n  - d"


def test_numbered_items_always_use_literal_one():
    blocks = [NumberedListItem(content=_text("first")), NumberedListItem(content=_text("second"))]
    assert serialize(blocks) == "1. first\n\n1. second"


def test_code_block_fence():
    block = CodeBlock(language="ts", content=_text("let x = 1;"))
    assert render_block(block) == "```ts\nlet x = 1;\n```"
    assert render_block(CodeBlock(content=_text("plain"))) == "```\nplain\n```"


def test_image_alt_fallbacks():
    assert render_block(ImageBlock(url="https://cdn.test/a.png")) == "![image](https://cdn.test/a.png)"
    assert render_block(ImageBlock(url="u", name="bed.png")) == "![bed.png](u)"
    assert render_block(ImageBlock(url="u", caption="Queen size", name="bed.png")) == "![Queen size](u)"
    assert render_block(ImageBlock(url="u", caption="", name="bed.png")) == "![bed.png](u)"


def test_blocks_that_ignore_children():
    child = [Paragraph(content=_text("hidden"))]
    assert render_block(Quote(content=_text("Sleep well"), children=child)) == "> Sleep well"
    assert render_block(Heading(level=3, content=_text("H"), children=child)) == "### H"
    assert render_block(Paragraph(content=_text("p"), children=child)) == "p"


def test_unknown_block_falls_back_to_content():
    block = UnknownBlock(kind="table", content=_text("cells"), children=[Paragraph(content=_text("x"))])
    assert block.type == "table"
    assert render_block(block) == "cells"


def test_indent_block_prefixes_every_line():
    assert indent_block("a\nb") == "  a\n  b"
    assert indent_block("") == "  "


def test_serialization_is_deterministic():
    blocks = [
        Heading(level=1, content=_text("Mattress")),
        BulletListItem(content=_text("firm"), children=[NumberedListItem(content=_text("layer"))]),
    ]
    assert serialize(blocks) == serialize(list(blocks))
    assert serialize(blocks) == "# Mattress\n\n- firm\n  1. layer"
