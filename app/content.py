"""
Article content model: turns a raw article body into typed blocks.

The body dialect is a small, line-oriented subset of markdown:

    ## Heading            -> Heading(level=2)
    ### Sub-heading       -> Heading(level=3)
    - bullet              -> ListItem(ordinal=None)
    3. numbered           -> ListItem(ordinal=3)
    anything else         -> Paragraph (line kept as-is)
    blank line            -> nothing

Each line is classified on its own; there is no multi-line state, no
nesting and no inline emphasis.  ``parse`` never raises: anything it
does not recognise becomes a Paragraph.

Grouping consecutive list items into one list is a rendering concern;
``group_lists`` does it for renderers that want it, and the API returns
both shapes.
"""
import re
from typing import Annotated, Iterable, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Block types
# ---------------------------------------------------------------------------


class Heading(BaseModel):
    kind: Literal["heading"] = "heading"
    level: Literal[2, 3]
    text: str
    model_config = ConfigDict(frozen=True)


class ListItem(BaseModel):
    kind: Literal["list_item"] = "list_item"
    text: str
    ordinal: Optional[int] = None  # None for bulleted items
    model_config = ConfigDict(frozen=True)


class Paragraph(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    text: str
    model_config = ConfigDict(frozen=True)


ContentBlock = Annotated[Union[Heading, ListItem, Paragraph], Field(discriminator="kind")]


class ListGroup(BaseModel):
    """A run of consecutive list items, as a renderer would draw them."""

    kind: Literal["list"] = "list"
    ordered: bool
    items: list[ListItem]
    model_config = ConfigDict(frozen=True)


Section = Annotated[Union[Heading, ListGroup, Paragraph], Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")
_NUMBERED_RE = re.compile(r"([0-9]+)\. ")

_H3_PREFIX = "### "
_H2_PREFIX = "## "
_BULLET_PREFIX = "- "


def _classify(line: str) -> Optional[Union[Heading, ListItem, Paragraph]]:
    if line.startswith(_H3_PREFIX):
        return Heading(level=3, text=line[len(_H3_PREFIX):])
    if line.startswith(_H2_PREFIX):
        return Heading(level=2, text=line[len(_H2_PREFIX):])
    if line.startswith(_BULLET_PREFIX):
        return ListItem(text=line[len(_BULLET_PREFIX):])

    match = _NUMBERED_RE.match(line)
    if match:
        return ListItem(text=line[match.end():], ordinal=int(match.group(1)))

    if line.strip():
        return Paragraph(text=line)
    return None


def iter_blocks(raw_body: str) -> Iterator[Union[Heading, ListItem, Paragraph]]:
    """Yield content blocks for *raw_body* lazily, in source line order."""
    for line in _LINE_BREAK_RE.split(raw_body):
        block = _classify(line)
        if block is not None:
            yield block


def parse(raw_body: str) -> list[Union[Heading, ListItem, Paragraph]]:
    """Return the ordered content blocks for *raw_body*.  Never raises."""
    return list(iter_blocks(raw_body))


# ---------------------------------------------------------------------------
# Renderer helpers
# ---------------------------------------------------------------------------


def group_lists(
    blocks: Iterable[Union[Heading, ListItem, Paragraph]],
) -> list[Union[Heading, Paragraph, ListGroup]]:
    """
    Collapse runs of consecutive ListItem blocks into ListGroup entries.

    A run is split whenever the item style changes (bulleted vs numbered).
    Headings and paragraphs pass through untouched.
    """
    grouped: list[Union[Heading, Paragraph, ListGroup]] = []
    run: list[ListItem] = []

    def flush() -> None:
        if run:
            grouped.append(ListGroup(ordered=run[0].ordinal is not None, items=list(run)))
            run.clear()

    for block in blocks:
        if isinstance(block, ListItem):
            if run and (run[0].ordinal is None) != (block.ordinal is None):
                flush()
            run.append(block)
            continue
        flush()
        grouped.append(block)
    flush()
    return grouped
