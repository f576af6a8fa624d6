"""SearchStrategy - Route search algorithms offered by the routing service."""

from enum import Enum


class SearchStrategy(Enum):
    """Named search strategy; each one has its own service endpoint."""

    BREADTH_FIRST = "breadth_first"
    DEPTH_FIRST = "depth_first"
    DISTANCE_TARGETED = "distance_targeted"

    @property
    def endpoint(self) -> str:
        """Service path that runs this strategy."""
        return _ENDPOINTS[self]

    @property
    def label(self) -> str:
        """Human-friendly name for display."""
        return _LABELS[self]


_ENDPOINTS = {
    SearchStrategy.BREADTH_FIRST: "/paths_bfs",
    SearchStrategy.DEPTH_FIRST: "/paths_dfs",
    SearchStrategy.DISTANCE_TARGETED: "/paths_special_dijkstra",
}
assert set(_ENDPOINTS.keys()) == set(SearchStrategy)

_LABELS = {
    SearchStrategy.BREADTH_FIRST: "Breadth-first",
    SearchStrategy.DEPTH_FIRST: "Depth-first",
    SearchStrategy.DISTANCE_TARGETED: "Distance-targeted Dijkstra",
}
assert set(_LABELS.keys()) == set(SearchStrategy)
