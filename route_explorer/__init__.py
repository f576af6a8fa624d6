"""Route Explorer - Compare candidate routes on an interactive map.

Client-side map state and viewport interaction engine:
- Ways, paths and nodes projected to GeoJSON and colored by position
- Viewport culling with node clustering when zoomed out
- Start/goal selection as a state machine
- Route requests against a remote routing service (BFS, DFS, distance-targeted)

Modules:
    core: Geometry projection, colors, viewport filtering, service client
    model: Data structures (Node, Way, Path, Marker, ViewportBounds, messages)
    ui: Streamlit interface components (coordinator, selection, pydeck map, panels)

Example:
    from route_explorer.core import RoutingServiceClient, RouteRequestDispatcher
    from route_explorer.ui import MapInteractionCoordinator
"""
