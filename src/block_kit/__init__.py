# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Block,
    BlockParser,
    DocumentParser,
    Freeform,
    Node,
    ParserConfig,
    parse,
)

__all__ = [
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Block",
    "BlockParser",
    "DocumentParser",
    "Freeform",
    "Node",
    "ParserConfig",
    "parse",
]
