# parsers/models.py

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from pydantic import JsonValue


@dataclass(frozen=True)
class Freeform:
    """Literal text found outside any block delimiter.

    Deliberately has no ``block_markers`` attribute: consumers tell the two
    node kinds apart by presence, not by emptiness.
    """

    inner_content: str

    def to_dict(self) -> dict[str, Any]:
        return {"innerHTML": self.inner_content}


@dataclass(frozen=True)
class Block:
    """A parsed block.

    - ``inner_content`` is the literal text at this nesting level only
    - ``block_markers[i]`` is the UTF-8 byte offset in ``inner_content``
      where child ``i`` was found
    - ``attributes`` is a read-only view; ``to_dict`` returns a deep copy
    """

    name: str
    attributes: Mapping[str, JsonValue] = field(default_factory=dict)
    inner_blocks: tuple["Node", ...] = ()
    inner_content: str = ""
    block_markers: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )

    @property
    def namespace(self) -> str:
        return self.name.partition("/")[0]

    @property
    def identifier(self) -> str:
        return self.name.partition("/")[2]

    def to_dict(self) -> dict[str, Any]:
        return {
            "blockName": self.name,
            "attrs": copy.deepcopy(dict(self.attributes)),
            "innerBlocks": [child.to_dict() for child in self.inner_blocks],
            "innerHTML": self.inner_content,
            "blockMarkers": list(self.block_markers),
        }


Node: TypeAlias = Block | Freeform
