# parsers/tokenizer.py

"""Splits a document into block delimiters and the literal text between them.

Recognized delimiter shapes::

    <!-- wp:NAME ATTRS? -->     opener
    <!-- wp:NAME ATTRS? /-->    self-closing opener
    <!-- /wp:NAME -->           closer

Anything else, ordinary HTML comments included, is literal text. The
tokenizer knows nothing about nesting.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from .config import NAME_PART_PATTERN, ParserConfig

_NAME = rf"(?:{NAME_PART_PATTERN}/)?{NAME_PART_PATTERN}"

# Attribute text starts and ends on a non-space character, so a whitespace run
# has exactly one way to split between the separators and the payload.
DELIMITER_RE = re.compile(
    rf"""
    <!--\s*
    (?:
        /wp:(?P<closer>{_NAME})\s*
      |
        wp:(?P<opener>{_NAME})
        (?:\s+(?P<attrs>(?!<!--)\S(?:(?:(?!<!--).)*?\S)??))??
        \s*(?P<void>/)?
    )
    -->
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True)
class Opener:
    name: str
    raw_attributes: str
    self_closing: bool
    raw: str


@dataclass(frozen=True)
class Closer:
    name: str
    raw: str


@dataclass(frozen=True)
class TextRun:
    text: str


Token: TypeAlias = Opener | Closer | TextRun


def normalize_name(name: str, default_namespace: str) -> str:
    if "/" in name:
        return name
    return f"{default_namespace}/{name}"


def tokenize(document: str, config: ParserConfig = ParserConfig()) -> Iterator[Token]:
    position = 0

    for match in DELIMITER_RE.finditer(document):
        if match.start() > position:
            yield TextRun(document[position : match.start()])
        position = match.end()

        closer = match.group("closer")
        if closer is not None:
            yield Closer(
                name=normalize_name(closer, config.default_namespace),
                raw=match.group(0),
            )
            continue

        yield Opener(
            name=normalize_name(match.group("opener"), config.default_namespace),
            raw_attributes=match.group("attrs") or "",
            self_closing=match.group("void") is not None,
            raw=match.group(0),
        )

    if position < len(document):
        yield TextRun(document[position:])
