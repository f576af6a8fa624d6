"""User interface components for the route explorer.

File Structure (layout-based naming):
- left_panel.py: Sidebar with selection, overlay toggles, route settings
- center_map.py: Pydeck map with ways, nodes, routes, markers
- right_panel.py: Route visibility panel
- bottom_chart.py: Plotly route distance chart

Core Components:
- coordinator.py: MapInteractionCoordinator (owns all map state) + RenderFrame
- selection_machine.py: SelectionStateMachine (3 states) + SelectionContext
- map_surface.py: MapSurface interface (events in, frames out)
- pydeck_click_handler.py: StreamlitMapSurface on top of streamlit-deckgl
- validators.py: Input validation with Optional[Message] returns
"""

from route_explorer.ui.bottom_chart import DistanceChart
from route_explorer.ui.center_map import MapRenderer
from route_explorer.ui.coordinator import MapInteractionCoordinator, RenderFrame, RouteRequestToken
from route_explorer.ui.left_panel import SidebarRenderer
from route_explorer.ui.map_surface import MapSurface
from route_explorer.ui.pydeck_click_handler import StreamlitMapSurface
from route_explorer.ui.right_panel import PathSelectionPanel
from route_explorer.ui.selection_machine import (
    SelectionContext,
    SelectionStateMachine,
    StreamlitRerunListener,
)
from route_explorer.ui.validators import validate_selection_complete

__all__ = [
    "MapInteractionCoordinator",
    "RenderFrame",
    "RouteRequestToken",
    "SelectionStateMachine",
    "SelectionContext",
    "StreamlitRerunListener",
    "MapSurface",
    "StreamlitMapSurface",
    "MapRenderer",
    "DistanceChart",
    "SidebarRenderer",
    "PathSelectionPanel",
    "validate_selection_complete",
]
