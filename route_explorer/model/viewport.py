"""ViewportBounds - The geographic extent currently shown by the map.

Bounds are written only by the map surface (pan/zoom) and read by the
viewport filter. Containment is inclusive on all four edges.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewportBounds:
    """Rectangular lat/lon extent.

    Attributes:
        min_lat: Southern edge in decimal degrees
        max_lat: Northern edge in decimal degrees
        min_lon: Western edge in decimal degrees
        max_lon: Eastern edge in decimal degrees
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self) -> None:
        if self.min_lat > self.max_lat:
            raise ValueError(f"min_lat {self.min_lat} is north of max_lat {self.max_lat}")
        if self.min_lon > self.max_lon:
            raise ValueError(f"min_lon {self.min_lon} is east of max_lon {self.max_lon}")

    def contains(self, lat: float, lon: float) -> bool:
        """Check if a point lies inside the bounds (edges included)."""
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon

    def __repr__(self) -> str:
        return (
            f"ViewportBounds(lat=[{self.min_lat:.5f}, {self.max_lat:.5f}], "
            f"lon=[{self.min_lon:.5f}, {self.max_lon:.5f}])"
        )


# Extent for surfaces that cannot report their pan/zoom: culls nothing
WORLD_BOUNDS = ViewportBounds(min_lat=-90.0, max_lat=90.0, min_lon=-180.0, max_lon=180.0)
