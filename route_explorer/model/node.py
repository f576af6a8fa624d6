"""Node - A single geographic point of a way or path.

Node ids come from OSM and are only unique within the way or path that
owns them. Nodes are immutable once received from the routing service.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Node:
    """A point on a way or path.

    Attributes:
        id: OSM node identifier (normalized to str)
        lat: Latitude in decimal degrees (WGS84)
        lon: Longitude in decimal degrees (WGS84)

    Example:
        node = Node(id="42", lat=51.069, lon=4.030)
        node.lon_lat  # (4.030, 51.069)
    """

    id: str
    lat: float
    lon: float

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.lon, self.lat)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Node":
        """Create Node from service JSON ({"id", "lat", "lon"})."""
        return cls(id=str(data["id"]), lat=float(data["lat"]), lon=float(data["lon"]))

    def __repr__(self) -> str:
        return f"Node({self.id}, lat={self.lat:.6f}, lon={self.lon:.6f})"
