# parsers/walker.py

import logging
from collections import Counter
from collections.abc import Iterable

from pydantic import JsonValue

from .attributes import MalformedAttributesError, parse_attributes
from .markers import MarkerTracker
from .models import Block, Freeform, Node
from .tokenizer import Closer, Opener, TextRun, Token

logger = logging.getLogger(__name__)

MALFORMED_ATTRIBUTES = "malformed_attributes"
UNMATCHED_CLOSER = "unmatched_closer"
UNTERMINATED_BLOCK = "unterminated_block"


class _Frame:
    """A block that has been opened but not yet finalized."""

    def __init__(self, name: str, attributes: dict[str, JsonValue]) -> None:
        self.name = name
        self.attributes = attributes
        self._content: list[str] = []
        self._children: list[Node] = []
        self._tracker = MarkerTracker()

    def append_text(self, text: str) -> None:
        self._content.append(text)
        self._tracker.feed(text)

    def append_child(self, node: Node) -> None:
        self._tracker.mark()
        self._children.append(node)

    def finalize(self) -> Block:
        return Block(
            name=self.name,
            attributes=self.attributes,
            inner_blocks=tuple(self._children),
            inner_content="".join(self._content),
            block_markers=self._tracker.markers,
        )


class DocumentWalker:
    """Assembles a token stream into a tree of nodes.

    Nesting is tracked with an explicit stack of open frames, so document
    depth is not bounded by the interpreter's recursion limit.

    Recovery rules:
    - malformed attributes fall back to an empty mapping
    - a closer with no open frame of that name is kept as literal text
    - a closer naming an enclosing frame force-closes the frames inside it
    - frames still open at end of input are force-closed with their content

    One walker per document; instances are not reused.
    """

    def __init__(self) -> None:
        self._stack: list[_Frame] = []
        self._pending_text: list[str] = []
        self._output: list[Node] = []
        self.recoveries: Counter[str] = Counter()
        self.blocks_created = 0
        self.max_depth = 0

    def walk(self, tokens: Iterable[Token]) -> list[Node]:
        for token in tokens:
            if isinstance(token, TextRun):
                self._append_text(token.text)
            elif isinstance(token, Opener):
                self._open(token)
            elif isinstance(token, Closer):
                self._close(token)

        while self._stack:
            frame = self._stack[-1]
            logger.debug(
                "Force-closing unterminated block at end of input: %s", frame.name
            )
            self.recoveries[UNTERMINATED_BLOCK] += 1
            self._finish_innermost()

        self._flush_freeform()
        return self._output

    def _append_text(self, text: str) -> None:
        if self._stack:
            self._stack[-1].append_text(text)
        else:
            self._pending_text.append(text)

    def _open(self, token: Opener) -> None:
        try:
            attributes = parse_attributes(token.raw_attributes)
        except MalformedAttributesError as exc:
            logger.debug("Using empty attributes for %s: %s", token.name, exc)
            self.recoveries[MALFORMED_ATTRIBUTES] += 1
            attributes = {}

        frame = _Frame(token.name, attributes)
        if token.self_closing:
            self.max_depth = max(self.max_depth, len(self._stack) + 1)
            self._emit(frame.finalize())
            return

        self._stack.append(frame)
        self.max_depth = max(self.max_depth, len(self._stack))

    def _close(self, token: Closer) -> None:
        depth = self._find_open(token.name)
        if depth is None:
            logger.debug("Keeping unmatched closer as text: %s", token.raw)
            self.recoveries[UNMATCHED_CLOSER] += 1
            self._append_text(token.raw)
            return

        while len(self._stack) > depth + 1:
            logger.debug(
                "Force-closing %s before closer for %s",
                self._stack[-1].name,
                token.name,
            )
            self.recoveries[UNTERMINATED_BLOCK] += 1
            self._finish_innermost()

        self._finish_innermost()

    def _find_open(self, name: str) -> int | None:
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].name == name:
                return depth
        return None

    def _finish_innermost(self) -> None:
        self._emit(self._stack.pop().finalize())

    def _emit(self, block: Block) -> None:
        self.blocks_created += 1
        if self._stack:
            self._stack[-1].append_child(block)
            return

        self._flush_freeform()
        self._output.append(block)

    def _flush_freeform(self) -> None:
        if not self._pending_text:
            return
        self._output.append(Freeform(inner_content="".join(self._pending_text)))
        self._pending_text = []
