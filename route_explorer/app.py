"""Route Explorer - Compare candidate routes between two map points.

Pick a start and a goal on the map, choose a search strategy and let the
routing service propose routes. Roads, nodes and routes are drawn as
colored overlays; hover a route to see its id and distance.

Run: streamlit run route_explorer/app.py
"""

import logging
import traceback

import streamlit as st

from route_explorer.constants import AppConfig, ChartConfig, ServiceConfig
from route_explorer.core.route_dispatcher import RouteRequestDispatcher
from route_explorer.core.routing_client import RoutingServiceClient
from route_explorer.model.message import WaysLoadingMessage
from route_explorer.ui.bottom_chart import DistanceChart
from route_explorer.ui.coordinator import MapInteractionCoordinator
from route_explorer.ui.left_panel import SidebarRenderer
from route_explorer.ui.pydeck_click_handler import StreamlitMapSurface
from route_explorer.ui.right_panel import PathSelectionPanel
from route_explorer.ui.selection_machine import SelectionStateMachine, StreamlitRerunListener

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Create surface, service client and coordinator once per session."""
    if "coordinator" not in st.session_state:
        client = RoutingServiceClient(base_url=ServiceConfig.BASE_URL)
        surface = StreamlitMapSurface()
        selection = SelectionStateMachine()
        selection.add_listener(StreamlitRerunListener())
        st.session_state.surface = surface
        st.session_state.coordinator = MapInteractionCoordinator(
            surface=surface,
            dispatcher=RouteRequestDispatcher(client=client),
            client=client,
            selection=selection,
        )
        logger.info(f"[MAIN] Session created, routing service at {client.base_url}")

    if "ways_requested" not in st.session_state:
        st.session_state.ways_requested = False


def reset_ui_state() -> None:
    """Reset interaction state while preserving the loaded ways.

    Called when an error occurs to recover gracefully. Resets markers,
    routes and the hover popup; keeps ways and request settings.
    """
    logger.info("Resetting UI state due to error recovery")
    coordinator: MapInteractionCoordinator = st.session_state.coordinator
    coordinator.reset_interaction()
    logger.info("UI state reset complete - ways preserved")


def load_ways_once(coordinator: MapInteractionCoordinator, force: bool = False) -> None:
    """Fetch the road network on first run (or when forced)."""
    if st.session_state.ways_requested and not force:
        return
    st.session_state.ways_requested = True
    with st.spinner("Loading roads..."):
        failure = coordinator.load_ways()
    if failure is not None:
        failure.display()


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(f"{AppConfig.ICON} {AppConfig.TITLE}")

    try:
        _run_app_ui()
    except Exception as e:
        # Log full traceback for debugging
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        # Show user-friendly error message
        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")

        # Reset UI state while preserving the ways
        reset_ui_state()

        # Add a button to manually recover
        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


def _run_app_ui() -> None:
    """Run the main application UI. Separated for error handling wrapper."""
    coordinator: MapInteractionCoordinator = st.session_state.coordinator
    surface: StreamlitMapSurface = st.session_state.surface
    logger.info(f"[MAIN] Render cycle starting: {coordinator!r}")

    # Sidebar
    sidebar = SidebarRenderer(coordinator=coordinator, surface=surface)
    actions = sidebar.render()

    load_ways_once(coordinator, force=actions["reload_ways"])

    if actions["calculate_route"]:
        with st.spinner(f"Requesting routes ({coordinator.strategy.label})..."):
            toast = coordinator.request_routes()
        if toast is not None:
            toast.display()

    # Main content
    col_map, col_ctrl = st.columns([3, 1])

    with col_map:
        if not coordinator.ways_loaded:
            WaysLoadingMessage().display()
        coordinator.render()

    with col_ctrl:
        PathSelectionPanel(coordinator=coordinator).render()

    # Full-width distance comparison
    if coordinator.paths:
        chart = DistanceChart(height=ChartConfig.DISTANCE_CHART_HEIGHT)
        fig = chart.render(
            paths=coordinator.paths,
            colors=coordinator.path_colors(),
            visible_ids=coordinator.visible_path_ids,
            target_distance=coordinator.target_distance,
        )
        st.plotly_chart(fig, key="distance_chart")


if __name__ == "__main__":
    main()
