from .attributes import MalformedAttributesError, parse_attributes
from .base import DocumentParser
from .block_parser import BlockParser, parse
from .config import ParserConfig
from .markers import MarkerTracker, utf8_byte_length
from .models import Block, Freeform, Node
from .tokenizer import Closer, Opener, TextRun, Token, tokenize
from .walker import DocumentWalker

__all__ = [
    "Block",
    "BlockParser",
    "Closer",
    "DocumentParser",
    "DocumentWalker",
    "Freeform",
    "MalformedAttributesError",
    "MarkerTracker",
    "Node",
    "Opener",
    "ParserConfig",
    "TextRun",
    "Token",
    "parse",
    "parse_attributes",
    "tokenize",
    "utf8_byte_length",
]
