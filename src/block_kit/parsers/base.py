# parsers/base.py

from abc import ABC, abstractmethod

from .models import Node


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, document: str) -> list[Node]:
        """
        Parse a document and return its top-level nodes in document order.

        Requirements:
        - Deterministic output for same input
        - Total: every string yields a result, nothing is raised
        - Nodes are freshly built and never shared between calls
        """
        raise NotImplementedError
