"""Typed records produced by the Gemtext line classifier.

A parsed document is a ``Page``: an ordered tuple of line records, one per
physical source line except for preformatted blocks, which collapse their whole
run of lines into a single ``Pre`` record.

Every record is a frozen pydantic model carrying a literal ``kind`` field, and
``Line`` is the discriminated union over all six of them:

    Text      -- any line that matches no prefix (trimmed)
    Link      -- "=>" url [name]
    Pre       -- ``` fenced block, optional alt text on the opening fence
    Heading   -- "#", "##" or "###" followed by content
    ListItem  -- "* " bullet, one record per bullet (no grouping)
    Quote     -- ">" quoted line, one record per line (no merging)
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from gemtext.config import ParseOptions


class _LineRecord(BaseModel):
    """Common configuration for all line records: immutable and hashable."""

    model_config = ConfigDict(frozen=True)


class Text(_LineRecord):
    kind: Literal["text"] = "text"
    text: str


class Link(_LineRecord):
    """A link line.  ``name`` is None when no text followed the URL, and an
    empty string when only whitespace did."""

    kind: Literal["link"] = "link"
    url: str
    name: str | None = None


class Pre(_LineRecord):
    """A preformatted block.  ``content`` is the untrimmed body."""

    kind: Literal["pre"] = "pre"
    alt: str | None = None
    content: str


class Heading(_LineRecord):
    kind: Literal["heading"] = "heading"
    level: int = Field(ge=1, le=3)
    content: str


class ListItem(_LineRecord):
    kind: Literal["list_item"] = "list_item"
    text: str


class Quote(_LineRecord):
    kind: Literal["quote"] = "quote"
    text: str


Line = Annotated[Union[Text, Link, Pre, Heading, ListItem, Quote], Field(discriminator="kind")]


class Page(BaseModel):
    """A parsed Gemtext document."""

    model_config = ConfigDict(frozen=True)

    lines: tuple[Line, ...] = ()

    @classmethod
    def parse(cls, text: str, options: ParseOptions | None = None) -> "Page":
        """Parse a complete Gemtext document.  Never fails."""
        from gemtext.parsing.parser import parse_page  # pylint: disable=import-outside-toplevel

        return parse_page(text, options)

    def __len__(self) -> int:
        return len(self.lines)

    def links(self) -> list[Link]:
        """Return every link record in document order."""
        return [line for line in self.lines if isinstance(line, Link)]

    def headings(self) -> list[Heading]:
        """Return every heading record in document order."""
        return [line for line in self.lines if isinstance(line, Heading)]
