# parsers/block_parser.py

import logging
from time import monotonic

from block_kit.observability import names
from block_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import ParserConfig
from .models import Node
from .tokenizer import tokenize
from .walker import DocumentWalker

logger = logging.getLogger(__name__)


class BlockParser(DocumentParser):
    """
    Parser for comment-delimited block markup.
    - Block names are opaque; no registry lookups
    - Emits UTF-8 byte offsets for inner block boundaries
    - Never raises on malformed markup
    """

    def __init__(
        self,
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook

    def parse(self, document: str) -> list[Node]:
        start = monotonic()
        walker = DocumentWalker()
        nodes = walker.walk(tokenize(document, self.config))

        elapsed_ms = 1000 * (monotonic() - start)
        logger.debug(
            "Parsed %d characters into %d top-level nodes (%d blocks) in %.2fms",
            len(document),
            len(nodes),
            walker.blocks_created,
            elapsed_ms,
        )

        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.PARSE_BLOCKS_CREATED, walker.blocks_created
        )
        self.metrics_hook.record_gauge(names.PARSE_MAX_DEPTH, walker.max_depth)
        for kind, count in walker.recoveries.items():
            self.metrics_hook.increment(
                names.PARSE_RECOVERIES_TOTAL, count, labels={"kind": kind}
            )
        return nodes


def parse(document: str) -> list[Node]:
    """Parse ``document`` with the default configuration.

    Example:
        >>> parse('<p>Intro</p><!-- wp:block {"ref":313} /-->')
        [Freeform(inner_content='<p>Intro</p>'), Block(name='core/block', ...)]
    """
    return BlockParser().parse(document)
