"""StreamlitMapSurface - MapSurface backed by streamlit-deckgl.

Uses st_deckgl from streamlit-deckgl to capture ALL click events including
clicks on empty map, not just object selections:
- st.pydeck_chart: Only returns object selections (pickable=True objects)
- st_deckgl: Returns full deck.gl onClick event with coordinate field for ALL clicks

Event mapping:
- Map click -> PRIMARY_CLICK (plus HOVER when a route was clicked, so the
  popup also works on touch screens)
- "Remove last marker" button -> SECONDARY_CLICK (the browser context menu
  is not reported by the component)

The component reports clicks only, never the pan/zoom view state, so the
surface cannot know which part of the map is on screen. Its viewport is
therefore the whole world (nothing is culled) and it never emits
VIEWPORT_CHANGE. Pointer hover is shown by the deck.gl tooltip.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import streamlit as st
from streamlit_deckgl import st_deckgl  # type: ignore[import-untyped]

from route_explorer.constants import ClickConfig, CoordinateConfig, MapConfig
from route_explorer.model.map_event import MapEventKind, PointerEvent
from route_explorer.model.viewport import WORLD_BOUNDS, ViewportBounds
from route_explorer.ui.center_map import MapRenderer
from route_explorer.ui.coordinator import RenderFrame
from route_explorer.ui.map_surface import MapSurface

logger = logging.getLogger(__name__)


@dataclass
class PydeckClickResult:
    """Result from Pydeck click detection.

    Attributes:
        clicked_object: The picked deck.gl object data (dict) or None for empty map
        clicked_coordinate: [lon, lat] of click location (always available for clicks)
    """

    clicked_object: dict[str, Any] | None
    clicked_coordinate: list[float] | None

    @property
    def is_click(self) -> bool:
        return self.clicked_coordinate is not None

    @property
    def is_path_click(self) -> bool:
        return self.clicked_object is not None and self.clicked_object.get("type") == ClickConfig.TYPE_PATH

    @staticmethod
    def empty() -> "PydeckClickResult":
        """Return empty result (no click detected)."""
        return PydeckClickResult(clicked_object=None, clicked_coordinate=None)


def parse_deckgl_event(event: Any) -> PydeckClickResult:
    """Extract click coordinate and picked object from a st_deckgl event.

    st_deckgl SPREADS object properties into the event dict (no "object" key!):
    - Empty map click: {coordinate: [lon, lat], eventType: "deck-click-event"}
    - Object click: {type: ..., id: ..., coordinate: [lon, lat], eventType: "deck-click-event"}
    """
    if not event or not isinstance(event, dict):
        return PydeckClickResult.empty()

    clicked_coordinate: list[float] | None = None
    coord = event.get("coordinate")
    if isinstance(coord, (list, tuple)) and len(coord) >= 2:
        clicked_coordinate = [float(coord[0]), float(coord[1])]

    clicked_object: dict[str, Any] | None = None
    if event.get("type") and event["type"] != "click":
        clicked_object = {k: v for k, v in event.items() if k not in ("coordinate", "eventType")}

    return PydeckClickResult(clicked_object=clicked_object, clicked_coordinate=clicked_coordinate)


def get_click_id(result: PydeckClickResult) -> str:
    """Generate unique ID for click deduplication."""
    parts = []
    if result.clicked_object:
        obj_type = result.clicked_object.get("type", "")
        obj_id = result.clicked_object.get("id", "")
        if obj_type and obj_id:
            parts.append(f"{obj_type}_{obj_id}")
    if result.clicked_coordinate:
        lon, lat = result.clicked_coordinate
        decimals = CoordinateConfig.DEDUP_KEY_DECIMALS
        parts.append(f"coord_{lon:.{decimals}f}_{lat:.{decimals}f}")
    return "_".join(parts)


class StreamlitMapSurface(MapSurface):
    """Draws frames with st_deckgl and turns component events into map events.

    Args:
        key: Unique Streamlit component key
        height: Map height in pixels
    """

    def __init__(self, key: str = "route_map", height: int = MapConfig.MAP_HEIGHT_PX) -> None:
        super().__init__()
        self.key = key
        self.height = height
        self.renderer = MapRenderer()
        self.last_click_id: Optional[str] = None

    def query_viewport_bounds(self) -> ViewportBounds:
        """Whole world: st_deckgl does not report pan/zoom, so nothing is culled."""
        return WORLD_BOUNDS

    def draw(self, frame: RenderFrame) -> None:
        """Render the frame and emit events for a new click (then rerun)."""
        deck = self.renderer.render(frame=frame)
        # MUST pass events=["click"] to enable click detection!
        # "hover" is not requested: every mouse move would rerun the whole script.
        event = st_deckgl(deck, key=self.key, height=self.height, events=["click"])
        if not event:
            return

        logger.debug(f"st_deckgl event keys: {list(event.keys()) if isinstance(event, dict) else type(event)}")
        result = parse_deckgl_event(event)
        if not result.is_click:
            return

        click_id = get_click_id(result)
        if click_id == self.last_click_id:
            return
        self.last_click_id = click_id

        lon, lat = result.clicked_coordinate
        pointer = PointerEvent(lat=lat, lon=lon, feature=result.clicked_object)
        logger.info(f"[CLICK] ({lat:.6f}, {lon:.6f}) object={result.clicked_object is not None}")

        if result.is_path_click:
            self.emit(MapEventKind.HOVER, pointer)
        else:
            self.emit(MapEventKind.HOVER_END, pointer)
        self.emit(MapEventKind.PRIMARY_CLICK, pointer)
        st.rerun()

    def remove_last_marker(self) -> None:
        """Secondary action from the sidebar button."""
        self.emit(MapEventKind.SECONDARY_CLICK, None)
