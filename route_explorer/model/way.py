"""Way - An OSM road segment as an ordered polyline of nodes."""

from dataclasses import dataclass
from typing import Any

from route_explorer.model.node import Node


@dataclass(frozen=True)
class Way:
    """A road segment received from the routing service.

    Node order is the physical course of the road and is preserved.

    Attributes:
        id: Unique way identifier
        nodes: Ordered nodes defining the polyline
    """

    id: str
    nodes: tuple[Node, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Way":
        """Create Way from service JSON ({"id", "nodes": [...]})."""
        return cls(
            id=str(data["id"]),
            nodes=tuple(Node.from_dict(n) for n in data["nodes"]),
        )

    def __repr__(self) -> str:
        return f"Way({self.id}, {len(self.nodes)} nodes)"
