from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import block_parser, html_renderer, renderer_markdown
from .utils import configure_logging, read_document, resolve_output_path, write_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockpress",
        description="Convert block editor JSON into Markdown or sanitized HTML.",
    )
    parser.add_argument("input", type=str, help="Path to a JSON or YAML block document")
    parser.add_argument("-o", "--output", type=str, help="Output file or directory")
    parser.add_argument("--html", action="store_true", help="Render HTML instead of Markdown")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output, suffix=".html" if args.html else ".md")

    logging.info("Reading %s", input_path)
    blocks = block_parser.load_blocks(read_document(input_path))
    logging.debug("Loaded %d top-level blocks", len(blocks))

    logging.info("Serializing blocks...")
    markdown = renderer_markdown.serialize(blocks)
    logging.debug("Markdown length: %d chars", len(markdown))

    if args.html:
        logging.info("Rendering HTML to %s", output_path)
        write_text(output_path, html_renderer.render_markdown_to_html(markdown))
    else:
        logging.info("Writing Markdown to %s", output_path)
        write_text(output_path, markdown)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
