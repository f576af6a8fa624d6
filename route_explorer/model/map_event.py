"""Map events - Discrete events emitted by the map surface.

The map surface is a black-box producer of totally ordered events:
pointer clicks, hovers and viewport changes. Handlers subscribe by
MapEventKind and receive one of the payload classes below.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from route_explorer.model.viewport import ViewportBounds


class MapEventKind(Enum):
    """Kinds of events a map surface emits."""

    PRIMARY_CLICK = "primary_click"  # Left click: add marker
    SECONDARY_CLICK = "secondary_click"  # Right click / cancel: remove last marker
    HOVER = "hover"  # Pointer moved over the map
    HOVER_END = "hover_end"  # Pointer left the map
    VIEWPORT_CHANGE = "viewport_change"  # Pan/zoom finished


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position with the picked feature (if any).

    Attributes:
        lat, lon: Pointer position in decimal degrees
        feature: Properties of the picked object, None over empty map
    """

    lat: float
    lon: float
    feature: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class ViewportChangeEvent:
    """New visible extent after pan/zoom."""

    bounds: ViewportBounds


@dataclass(frozen=True)
class HoverInfo:
    """Popup content for the path under the pointer.

    Attributes:
        lat, lon: Popup anchor
        path_id: Hovered path id
        distance: Path distance in meters
    """

    lat: float
    lon: float
    path_id: str
    distance: float

    @property
    def text(self) -> str:
        """Popup text, one line per field."""
        return f"Path ID: {self.path_id}\nDistance: {self.distance:g} m"
