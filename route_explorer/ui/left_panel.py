"""Sidebar UI renderer for the route explorer.

Renders the left sidebar with:
- Current start/goal selection
- Overlay toggles (Show Nodes / Show Ways)
- Search strategy, target distance and result count
- Calculate Route, Remove last marker and Reload ways buttons

Toggles and settings are applied to the coordinator directly; buttons are
returned as action flags so app.py decides what runs and which toasts show.
"""

import logging

import streamlit as st

from route_explorer.constants import RouteConfig
from route_explorer.model.message import SelectionContextMessage
from route_explorer.model.strategy import SearchStrategy
from route_explorer.ui.coordinator import MapInteractionCoordinator
from route_explorer.ui.pydeck_click_handler import StreamlitMapSurface

logger = logging.getLogger(__name__)


class SidebarRenderer:
    """Renders the sidebar UI and returns action flags."""

    def __init__(self, coordinator: MapInteractionCoordinator, surface: StreamlitMapSurface) -> None:
        self.coordinator = coordinator
        self.surface = surface

    def render(self) -> dict[str, bool]:
        """Render all sidebar sections.

        Returns:
            Dict with keys: calculate_route, reload_ways
        """
        with st.sidebar:
            actions = {"calculate_route": False, "reload_ways": False}

            self._render_selection()
            st.divider()
            self._render_overlay_toggles()
            st.divider()
            self._render_route_settings()
            st.divider()
            actions.update(self._render_buttons())

            return actions

    def _render_selection(self) -> None:
        context = self.coordinator.selection.context
        start, goal = context.start, context.goal
        SelectionContextMessage(
            start_lat=start.lat if start else None,
            start_lon=start.lon if start else None,
            goal_lat=goal.lat if goal else None,
            goal_lon=goal.lon if goal else None,
        ).display()

    def _render_overlay_toggles(self) -> None:
        st.markdown("**🗺️ Overlays**")
        show_nodes = st.checkbox("Show Nodes", value=self.coordinator.nodes_visible, key="show_nodes")
        show_ways = st.checkbox("Show Ways", value=self.coordinator.ways_visible, key="show_ways")
        if show_nodes != self.coordinator.nodes_visible:
            logger.info(f"[UI] Show Nodes -> {show_nodes}")
            self.coordinator.set_nodes_visible(show_nodes)
        if show_ways != self.coordinator.ways_visible:
            logger.info(f"[UI] Show Ways -> {show_ways}")
            self.coordinator.set_ways_visible(show_ways)

    def _render_route_settings(self) -> None:
        st.markdown("**⚙️ Route Settings**")
        strategies = list(SearchStrategy)
        strategy = st.radio(
            "Search strategy",
            options=strategies,
            index=strategies.index(self.coordinator.strategy),
            format_func=lambda s: s.label,
            key="strategy",
        )
        target_distance = st.number_input(
            "Target distance (m)",
            min_value=0,
            value=int(self.coordinator.target_distance),
            step=RouteConfig.TARGET_DISTANCE_STEP_M,
            key="target_distance",
        )
        result_count = st.number_input(
            "Amount of routes",
            min_value=RouteConfig.MIN_RESULT_COUNT,
            value=self.coordinator.result_count,
            step=1,
            key="result_count",
        )
        self.coordinator.set_strategy(strategy)
        self.coordinator.set_target_distance(target_distance)
        self.coordinator.set_result_count(int(result_count))

    def _render_buttons(self) -> dict[str, bool]:
        num_markers = len(self.coordinator.markers)
        calculate = st.button(
            "🧭 Calculate Route",
            type="primary",
            width="stretch",
            help="Request routes between start and goal",
        )
        if st.button(
            "↩️ Remove last marker",
            width="stretch",
            disabled=num_markers == 0,
            help="Remove the most recently placed marker",
        ):
            # NOTE: State transition triggers st.rerun() via listener
            self.surface.remove_last_marker()
        reload_ways = st.button(
            "🛣️ Reload ways",
            width="stretch",
            help="Fetch the road network again from the routing service",
        )
        return {"calculate_route": calculate, "reload_ways": reload_ways}
