"""Path - A candidate route returned by one of the search strategies.

A result set of paths replaces the previous one wholesale; paths are never
merged across requests.
"""

from dataclasses import dataclass
from typing import Any

from route_explorer.model.node import Node


@dataclass(frozen=True)
class Path:
    """A candidate route between the selected start and goal.

    Attributes:
        id: Identifier, unique within the current result set
        distance: Total length in meters (non-negative)
        nodes: Traversed nodes in order
    """

    id: str
    distance: float
    nodes: tuple[Node, ...]

    def __post_init__(self) -> None:
        if self.distance < 0:
            raise ValueError(f"Path {self.id} has negative distance {self.distance}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Create Path from service JSON ({"id", "distance", "nodes": [...]})."""
        return cls(
            id=str(data["id"]),
            distance=float(data["distance"]),
            nodes=tuple(Node.from_dict(n) for n in data["nodes"]),
        )

    def __repr__(self) -> str:
        return f"Path({self.id}, {self.distance:.0f}m, {len(self.nodes)} nodes)"
