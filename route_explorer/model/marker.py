"""Marker - A user-placed start or goal point."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """A point selected by clicking the map.

    Attributes:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
    """

    lat: float
    lon: float

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.lon, self.lat)

    def __repr__(self) -> str:
        return f"Marker(lat={self.lat:.6f}, lon={self.lon:.6f})"
