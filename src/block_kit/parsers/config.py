# src/block_kit/parsers/config.py

import re
from dataclasses import dataclass

NAME_PART_PATTERN = r"[a-z][a-z0-9_-]*"

_NAME_PART_RE = re.compile(NAME_PART_PATTERN)


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for block parsers.

    Immutable. Explicit. No magic defaults from environment.
    """

    default_namespace: str = "core"  # Applied to names written without "/"

    def __post_init__(self) -> None:
        if not _NAME_PART_RE.fullmatch(self.default_namespace):
            raise ValueError(
                f"default_namespace must match {NAME_PART_PATTERN!r}, "
                f"got {self.default_namespace!r}"
            )
