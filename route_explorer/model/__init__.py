"""Data model classes for the route explorer.

- Node: A point of a way or path (id, lat, lon)
- Way: OSM road segment as ordered nodes
- Path: Candidate route with total distance
- Marker: User-placed start/goal point
- ViewportBounds: Visible geographic extent
- SearchStrategy: Route search algorithm offered by the service
- Color: HSL color with deck.gl/CSS conversions
- Map events: PointerEvent, ViewportChangeEvent, HoverInfo
"""

from route_explorer.model.color import Color
from route_explorer.model.map_event import (
    HoverInfo,
    MapEventKind,
    PointerEvent,
    ViewportChangeEvent,
)
from route_explorer.model.marker import Marker
from route_explorer.model.node import Node
from route_explorer.model.path import Path
from route_explorer.model.strategy import SearchStrategy
from route_explorer.model.viewport import ViewportBounds
from route_explorer.model.way import Way

__all__ = [
    "Node",
    "Way",
    "Path",
    "Marker",
    "ViewportBounds",
    "SearchStrategy",
    "Color",
    "MapEventKind",
    "PointerEvent",
    "ViewportChangeEvent",
    "HoverInfo",
]
