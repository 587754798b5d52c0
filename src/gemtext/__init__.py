"""Parse Gemtext documents into a typed, immutable line model.

    >>> from gemtext import parse
    >>> page = parse("# Hello\\n=> gemini://example.org/ Example")
    >>> page.headings()[0].content
    'Hello'
"""

from gemtext.config import ParseOptions, load_options
from gemtext.parsing.lines import Heading, Line, Link, ListItem, Page, Pre, Quote, Text
from gemtext.parsing.parser import parse_page, split_lines

parse = parse_page

__all__ = [
    "Heading",
    "Line",
    "Link",
    "ListItem",
    "Page",
    "ParseOptions",
    "Pre",
    "Quote",
    "Text",
    "load_options",
    "parse",
    "parse_page",
    "split_lines",
]
