"""Right panel components for the route explorer.

- PathSelectionPanel: Which routes are drawn, with color swatch and distance
- Instruction message while start/goal are missing
- "No routes found" message for an empty result

Checkbox keys include the committed request number, so a new result set
starts with fresh widgets (all routes visible).
"""

import logging

import streamlit as st

from route_explorer.model.message import NoRoutesFoundMessage, RouteActionMessage
from route_explorer.ui.coordinator import MapInteractionCoordinator

logger = logging.getLogger(__name__)


class PathSelectionPanel:
    """Renders route visibility controls."""

    def __init__(self, coordinator: MapInteractionCoordinator) -> None:
        self.coordinator = coordinator

    def render(self) -> None:
        """Render the route panel for the current result."""
        st.markdown("### 🧭 Routes")
        result = self.coordinator.result

        if not result.has_result:
            RouteActionMessage(num_markers=len(self.coordinator.markers)).display()
            return

        if not result.paths:
            NoRoutesFoundMessage(strategy_label=result.strategy.label).display()
            return

        st.caption(f"{len(result.paths)} route(s) • {result.strategy.label}")
        colors = self.coordinator.path_colors()
        for path in result.paths:
            col_swatch, col_box = st.columns([1, 8])
            with col_swatch:
                st.markdown(
                    f"<div style='width:18px;height:18px;border-radius:3px;margin-top:8px;"
                    f"background:{colors[path.id].css}'></div>",
                    unsafe_allow_html=True,
                )
            with col_box:
                is_visible = path.id in self.coordinator.visible_path_ids
                checked = st.checkbox(
                    f"Path {path.id} • {path.distance:g} m",
                    value=is_visible,
                    key=f"path_visible_{result.latest_sequence}_{path.id}",
                )
            if checked != is_visible:
                logger.info(f"[UI] Path {path.id} visible -> {checked}")
                self.coordinator.toggle_path(path.id)
