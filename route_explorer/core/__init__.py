"""Core engine: geometry, colors, viewport culling and service access.

- GeometryProjector: Ways/paths/nodes as GeoJSON feature collections
- assign_colors: Golden-angle color per entity position
- filter_to_viewport / cluster_points: Viewport culling and node clustering
- RoutingServiceClient: HTTP client for ways and paths
- RouteRequestDispatcher: One route request, one resolved outcome
- IdentityMemo: Recompute only when inputs change identity
"""

from route_explorer.core.color_assigner import assign_colors, color_for_index
from route_explorer.core.geometry_projector import GeometryProjector, empty_feature_collection
from route_explorer.core.memo import IdentityMemo
from route_explorer.core.route_dispatcher import RouteOutcome, RouteRequestDispatcher, RouteRequestFailure
from route_explorer.core.routing_client import RoutingServiceClient, TransportFailure
from route_explorer.core.viewport_filter import cluster_points, filter_to_viewport

__all__ = [
    "GeometryProjector",
    "empty_feature_collection",
    "assign_colors",
    "color_for_index",
    "filter_to_viewport",
    "cluster_points",
    "RoutingServiceClient",
    "TransportFailure",
    "RouteRequestDispatcher",
    "RouteRequestFailure",
    "RouteOutcome",
    "IdentityMemo",
]
