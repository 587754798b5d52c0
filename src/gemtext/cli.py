"""Parse a Gemtext document and print the resulting Page as JSON.

Options come from the environment / .env (see gemtext.config) and can be
overridden on the command line.

Usage:
    python -m gemtext.cli capsule/index.gmi
    python -m gemtext.cli capsule/index.gmi --links
    python -m gemtext.cli - --heading-mode leading < index.gmi
    gemtext-parse index.gmi --preserve-pre-newlines --indent 0
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from gemtext.config import load_options
from gemtext.parsing.parser import parse_page

logger = logging.getLogger(__name__)


def read_source(source: str) -> str:
    """Read document text from a file path, or from stdin when ``source`` is '-'."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    logger.info("Reading %s", path)
    with open(path, "r", encoding="utf-8") as fopen:
        return fopen.read()


def main(argv: list[str] | None = None) -> int:
    """Parse the requested document and write JSON to stdout."""
    parser = argparse.ArgumentParser(description="Parse a Gemtext document into typed line records")
    parser.add_argument("source", help="Path to a .gmi file, or '-' to read stdin")
    parser.add_argument("--heading-mode", choices=["window", "leading"], default=None, help="Override GEMTEXT_HEADING_MODE")
    parser.add_argument("--preserve-pre-newlines", action="store_true", help="Join preformatted body lines with newlines")
    parser.add_argument("--links", action="store_true", help="Only print link records")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    # Environment first, then explicit flags
    options = load_options()
    overrides = {}
    if args.heading_mode is not None:
        overrides["heading_mode"] = args.heading_mode
    if args.preserve_pre_newlines:
        overrides["preserve_pre_newlines"] = True
    if overrides:
        options = options.model_copy(update=overrides)

    try:
        text = read_source(args.source)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", args.source, exc)
        return 1

    page = parse_page(text, options)
    logger.info("Parsed %d line records (%d links, %d headings)", len(page), len(page.links()), len(page.headings()))

    if args.links:
        payload = [link.model_dump() for link in page.links()]
        sys.stdout.write(json.dumps(payload, indent=args.indent) + "\n")
    else:
        sys.stdout.write(page.model_dump_json(indent=args.indent) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
