"""
Node conventions for the spanning-structure library.

Any hashable value can act as a node. ObjectNode is a small named node for
callers that want something more descriptive than a bare string.
"""

from dataclasses import dataclass
from typing import Hashable

Node = Hashable


@dataclass(frozen=True)
class ObjectNode:
    """
    Named node; equality and hashing follow the name.
    """

    name: str

    def __str__(self) -> str:
        return self.name
