from __future__ import annotations

BLOCK_SEPARATOR = "\n\n"
CHILD_INDENT = "  "

CODE_FENCE = "```"
DEFAULT_HEADING_LEVEL = 1
DEFAULT_IMAGE_ALT = "image"

BOLD_MARK = "**"
ITALIC_MARK = "*"
STRIKE_MARK = "~~"
CODE_MARK = "`"

BULLET_MARKER = "- "
# Ordered items always use "1."; the Markdown renderer renumbers the list.
NUMBERED_MARKER = "1. "
QUOTE_MARKER = "> "


def wrap(text: str, mark: str) -> str:
    return f"{mark}{text}{mark}"


def indent_block(text: str) -> str:
    """Prefix every line of ``text`` with the child indent."""
    return "\n".join(CHILD_INDENT + line for line in text.split("\n"))


def check_marker(checked: bool) -> str:
    return "- [x] " if checked else "- [ ] "
