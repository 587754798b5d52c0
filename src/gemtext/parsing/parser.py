"""Classify Gemtext source lines into typed ``Line`` records.

The input is split into physical lines and each line is matched against a
fixed, ordered list of prefixes; the first match decides the record type:

    1. "=>"   link
    2. "#"    heading
    3. "* "   list item
    4. ">"    quote
    5. "```"  preformatted block (consumes following lines up to a closing fence)
    6.        anything else is plain text

Parsing is total: every string, including the empty string, yields a Page.
Malformed lines degrade into a best-effort record instead of raising.
"""

import logging
import re
from typing import Iterator

from gemtext.config import ParseOptions
from gemtext.parsing.lines import Heading, Line, Link, ListItem, Page, Pre, Quote, Text

logger = logging.getLogger(__name__)

# ── Line prefixes ────────────────────────────────────────────────────────────

LINK_PREFIX = "=>"
HEADING_PREFIX = "#"
LIST_ITEM_PREFIX = "* "
QUOTE_PREFIX = ">"
PRE_FENCE = "```"

# Number of leading characters inspected for "#" in window heading mode
HEADING_WINDOW = 3
MAX_HEADING_LEVEL = 3

# Unicode White_Space characters.  str.isspace() also accepts the
# U+001C..U+001F separators, which do not count as whitespace here.
WHITESPACE = "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"

# Separates a link URL from its name
_WHITESPACE_RE = re.compile("[" + re.escape(WHITESPACE) + "]")


def split_lines(text: str) -> list[str]:
    """Split text into physical lines on "\\n", dropping a "\\r" that precedes it.

    A terminator at the very end does not open an extra empty line, so
    "a\\nb\\n" and "a\\r\\nb" both give ["a", "b"].  A bare "\\r" at the end of
    the text is not part of a boundary and is kept.  The empty string has no lines.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
        unterminated = []
    else:
        unterminated = [lines.pop()]
    return [line[:-1] if line.endswith("\r") else line for line in lines] + unterminated


# ── Per-kind rules ───────────────────────────────────────────────────────────


def _parse_link(line: str) -> Link:
    """'=> url  Some name' -> Link(url='url', name='Some name')."""
    trailing = line[len(LINK_PREFIX) :].lstrip(WHITESPACE)
    match = _WHITESPACE_RE.search(trailing)
    if match is None:
        return Link(url=trailing.strip(WHITESPACE), name=None)
    return Link(url=trailing[: match.start()], name=trailing[match.end() :].strip(WHITESPACE))


def _parse_heading(line: str, mode: str) -> Heading:
    """Build a Heading from a line starting with '#'.

    In "window" mode only the first three characters are inspected, and exactly
    ``level`` characters are sliced off before trimming, so extra hashes beyond
    the third stay in the content.
    """
    if mode == "leading":
        hashes = len(line) - len(line.lstrip(HEADING_PREFIX))
        return Heading(level=min(hashes, MAX_HEADING_LEVEL), content=line[hashes:].strip(WHITESPACE))

    level = line[:HEADING_WINDOW].count(HEADING_PREFIX)
    return Heading(level=level, content=line[level:].strip(WHITESPACE))


def _parse_preformatted(opening: str, raw_lines: Iterator[str], separator: str) -> Pre:
    """Consume body lines from ``raw_lines`` up to and including the closing fence.

    The closing fence line is discarded along with anything after the backticks.
    Running out of input closes the block implicitly.
    """
    alt: str | None = opening[len(PRE_FENCE) :].strip(WHITESPACE) or None
    body = []
    for line in raw_lines:
        if line.startswith(PRE_FENCE):
            break
        body.append(line)
    else:
        logger.debug("Preformatted block %r not closed before end of input (%d body lines)", opening, len(body))
    return Pre(alt=alt, content=separator.join(body))


def _classify(line: str, raw_lines: Iterator[str], options: ParseOptions) -> Line:
    """Return the record for ``line``; preformatted blocks also advance ``raw_lines``."""
    if line.startswith(LINK_PREFIX):
        return _parse_link(line)

    if line.startswith(HEADING_PREFIX):
        return _parse_heading(line, options.heading_mode)

    if line.startswith(LIST_ITEM_PREFIX):
        return ListItem(text=line[len(LIST_ITEM_PREFIX) :].strip(WHITESPACE))

    if line.startswith(QUOTE_PREFIX):
        return Quote(text=line[len(QUOTE_PREFIX) :].strip(WHITESPACE))

    if line.startswith(PRE_FENCE):
        separator = "\n" if options.preserve_pre_newlines else ""
        return _parse_preformatted(line, raw_lines, separator)

    return Text(text=line.strip(WHITESPACE))


def parse_page(text: str, options: ParseOptions | None = None) -> Page:
    """Parse a complete Gemtext document into a Page."""
    if options is None:
        options = ParseOptions()

    raw_lines = iter(split_lines(text))
    lines: list[Line] = []
    for line in raw_lines:
        lines.append(_classify(line, raw_lines, options))

    logger.debug("Parsed %d characters into %d line records", len(text), len(lines))
    return Page(lines=tuple(lines))
