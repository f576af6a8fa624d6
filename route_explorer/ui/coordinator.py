"""MapInteractionCoordinator - Owner of all mutable map state.

The coordinator owns ways, paths, the start/goal selection, the visible
path set, overlay toggles, request settings and the hover popup slot. It
wires map surface events to the selection state machine and composes each
render frame from the pure core functions:

    ways  -> assign_colors -> GeometryProjector -> filter_to_viewport -> frame
    paths -> assign_colors -> GeometryProjector -> visible-set filter -> frame

Colors and projections are memoized on the identity of their inputs. Ways
and paths are stored as tuples and replaced wholesale, so a new result set
invalidates exactly the memos that depend on it, while hover, toggles and
visibility changes reuse the cached data.

Route requests:
    request_routes() validates the selection, then runs both halves:
    begin_route_request() issues a sequence token and
    complete_route_request(token, outcome) commits the outcome only if no
    newer request has been issued since. Superseded responses are logged and
    discarded ("last issued wins").

Visible path set:
    Every committed result set resets the visible set to all of its ids, so
    ids of previous result sets never linger.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from route_explorer.constants import ClickConfig, LayerConfig, RouteConfig, ServiceConfig
from route_explorer.core.color_assigner import assign_colors
from route_explorer.core.geometry_projector import (
    FeatureCollection,
    GeometryProjector,
    empty_feature_collection,
    feature_collection,
)
from route_explorer.core.memo import IdentityMemo
from route_explorer.core.route_dispatcher import RouteOutcome, RouteRequestDispatcher, RouteRequestFailure
from route_explorer.core.routing_client import RoutingServiceClient, TransportFailure
from route_explorer.core.viewport_filter import cluster_points, feature_extent, filter_to_viewport
from route_explorer.model.color import Color
from route_explorer.model.map_event import HoverInfo, MapEventKind, PointerEvent, ViewportChangeEvent
from route_explorer.model.marker import Marker
from route_explorer.model.message import (
    RouteRequestFailedMessage,
    RoutesFoundMessage,
    ToastMessage,
    WaysLoadFailedMessage,
)
from route_explorer.model.path import Path
from route_explorer.model.strategy import SearchStrategy
from route_explorer.model.viewport import ViewportBounds
from route_explorer.model.way import Way
from route_explorer.ui.map_surface import MapSurface
from route_explorer.ui.selection_machine import SelectionStateMachine
from route_explorer.ui.validators import validate_selection_complete

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteRequestToken:
    """Identifies one issued route request.

    Attributes:
        sequence: Monotonic request number (1, 2, ...)
        strategy: Strategy the request was issued with
    """

    sequence: int
    strategy: SearchStrategy


@dataclass(frozen=True)
class RenderFrame:
    """Everything the map surface needs to draw one frame.

    Layers that are toggled off are empty collections, never None.
    """

    ways: FeatureCollection
    nodes: FeatureCollection
    paths: FeatureCollection
    markers: tuple[Marker, ...]
    hover: Optional[HoverInfo]
    way_colors: dict[str, Color]
    path_colors: dict[str, Color]
    bounds: ViewportBounds
    nodes_clustered: bool = False

    @property
    def layer_counts(self) -> dict[str, int]:
        return {
            "ways": len(self.ways["features"]),
            "nodes": len(self.nodes["features"]),
            "paths": len(self.paths["features"]),
            "markers": len(self.markers),
        }


@dataclass
class RouteSettings:
    """Parameters forwarded unchanged with every route request."""

    strategy: SearchStrategy = SearchStrategy.BREADTH_FIRST
    target_distance: float = RouteConfig.DEFAULT_TARGET_DISTANCE_M
    result_count: int = RouteConfig.DEFAULT_RESULT_COUNT


@dataclass
class RouteResultContext:
    """Committed route result and the requests issued for it."""

    paths: tuple[Path, ...] = ()
    visible_ids: set[str] = field(default_factory=set)
    strategy: Optional[SearchStrategy] = None  # Strategy of the committed result
    latest_sequence: int = 0  # Newest issued request

    def clear(self) -> None:
        """Drop the committed result (sequence keeps counting)."""
        self.paths = ()
        self.visible_ids = set()
        self.strategy = None

    @property
    def has_result(self) -> bool:
        return self.strategy is not None


class MapInteractionCoordinator:
    """Compose selection, requests and rendering on top of a MapSurface.

    Args:
        surface: Map widget abstraction (events in, frames out)
        dispatcher: Route request dispatcher
        client: Routing service client used to load ways
        selection: Selection state machine (created if None)
    """

    def __init__(
        self,
        surface: MapSurface,
        dispatcher: RouteRequestDispatcher,
        client: RoutingServiceClient,
        selection: Optional[SelectionStateMachine] = None,
    ) -> None:
        self.surface = surface
        self.dispatcher = dispatcher
        self.client = client
        self.selection = selection if selection is not None else SelectionStateMachine()

        self.ways: tuple[Way, ...] = ()
        self.ways_loaded = False
        self.nodes_visible = LayerConfig.SHOW_NODES_DEFAULT
        self.ways_visible = LayerConfig.SHOW_WAYS_DEFAULT
        self.settings = RouteSettings()
        self.result = RouteResultContext()
        self.hover: Optional[HoverInfo] = None
        self.bounds: ViewportBounds = surface.query_viewport_bounds()

        self.way_colors_memo: IdentityMemo[dict[str, Color]] = IdentityMemo(assign_colors, name="way_colors")
        self.path_colors_memo: IdentityMemo[dict[str, Color]] = IdentityMemo(assign_colors, name="path_colors")
        self.way_lines_memo: IdentityMemo[FeatureCollection] = IdentityMemo(
            GeometryProjector.project_lines, name="way_lines"
        )
        self.node_points_memo: IdentityMemo[FeatureCollection] = IdentityMemo(
            GeometryProjector.project_nodes, name="node_points"
        )
        self.path_lines_memo: IdentityMemo[FeatureCollection] = IdentityMemo(
            GeometryProjector.project_lines, name="path_lines"
        )
        self.visible_ways_memo: IdentityMemo[FeatureCollection] = IdentityMemo(
            filter_to_viewport, name="visible_ways"
        )
        self.visible_nodes_memo: IdentityMemo[FeatureCollection] = IdentityMemo(
            filter_to_viewport, name="visible_nodes"
        )
        self.clustered_nodes_memo: IdentityMemo[FeatureCollection] = IdentityMemo(
            self._cluster_nodes, name="clustered_nodes"
        )

        surface.subscribe(MapEventKind.PRIMARY_CLICK, self._on_primary_click)
        surface.subscribe(MapEventKind.SECONDARY_CLICK, self._on_secondary_click)
        surface.subscribe(MapEventKind.HOVER, self._on_hover)
        surface.subscribe(MapEventKind.HOVER_END, self._on_hover_end)
        surface.subscribe(MapEventKind.VIEWPORT_CHANGE, self._on_viewport_change)

    # ==========================================================================
    # Read access for the UI shell
    # ==========================================================================

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(self.selection.markers)

    @property
    def paths(self) -> tuple[Path, ...]:
        return self.result.paths

    @property
    def visible_path_ids(self) -> frozenset[str]:
        return frozenset(self.result.visible_ids)

    @property
    def strategy(self) -> SearchStrategy:
        return self.settings.strategy

    @property
    def target_distance(self) -> float:
        return self.settings.target_distance

    @property
    def result_count(self) -> int:
        return self.settings.result_count

    def path_colors(self) -> dict[str, Color]:
        return self.path_colors_memo(self.result.paths)

    # ==========================================================================
    # Surface events
    # ==========================================================================

    def _on_primary_click(self, event: PointerEvent) -> None:
        self.selection.try_add_marker(lat=event.lat, lon=event.lon)

    def _on_secondary_click(self, event: Optional[PointerEvent]) -> None:
        self.selection.try_remove_marker()

    def _on_hover(self, event: PointerEvent) -> None:
        feature = event.feature or {}
        if feature.get("type") == ClickConfig.TYPE_PATH and feature.get("id") in self.result.visible_ids:
            self.hover = HoverInfo(
                lat=event.lat,
                lon=event.lon,
                path_id=str(feature["id"]),
                distance=float(feature.get("distance", 0.0)),
            )
        else:
            self.hover = None

    def _on_hover_end(self, event: Optional[PointerEvent]) -> None:
        self.hover = None

    def _on_viewport_change(self, event: ViewportChangeEvent) -> None:
        if event.bounds != self.bounds:
            self.bounds = event.bounds
            logger.debug(f"[VIEWPORT] Bounds changed to {self.bounds}")

    # ==========================================================================
    # Ways and toggles
    # ==========================================================================

    def load_ways(self, tags: Sequence[str] = ServiceConfig.ACCEPTED_ROAD_TYPES) -> Optional[ToastMessage]:
        """Fetch the road network; on failure keep whatever was loaded before.

        Returns:
            None on success, WaysLoadFailedMessage on failure.
        """
        try:
            ways = self.client.fetch_ways(tags=tags)
        except TransportFailure as e:
            logger.error(f"[WAYS] Loading ways failed: {e.reason}")
            return WaysLoadFailedMessage(reason=e.reason)

        self.ways = tuple(ways)
        self.ways_loaded = True
        logger.info(f"[WAYS] {len(self.ways)} ways loaded")
        return None

    def set_nodes_visible(self, visible: bool) -> None:
        self.nodes_visible = visible

    def set_ways_visible(self, visible: bool) -> None:
        self.ways_visible = visible

    # ==========================================================================
    # Visible path set
    # ==========================================================================

    def set_visible_paths(self, path_ids: Iterable[str]) -> None:
        """Replace the visible set; ids outside the current result are dropped."""
        known = {p.id for p in self.result.paths}
        self.result.visible_ids = {pid for pid in path_ids if pid in known}

    def toggle_path(self, path_id: str) -> None:
        """Show a hidden path or hide a shown one."""
        if path_id in self.result.visible_ids:
            self.result.visible_ids.discard(path_id)
            if self.hover is not None and self.hover.path_id == path_id:
                self.hover = None
        elif any(p.id == path_id for p in self.result.paths):
            self.result.visible_ids.add(path_id)
        else:
            logger.warning(f"[PATHS] Cannot toggle unknown path {path_id}")

    # ==========================================================================
    # Request settings
    # ==========================================================================

    def set_strategy(self, strategy: SearchStrategy) -> None:
        self.settings.strategy = strategy

    def set_target_distance(self, target_distance: float) -> None:
        self.settings.target_distance = target_distance

    def set_result_count(self, result_count: int) -> None:
        self.settings.result_count = result_count

    # ==========================================================================
    # Route requests
    # ==========================================================================

    def request_routes(self) -> Optional[ToastMessage]:
        """Validate the selection, dispatch once and commit the outcome.

        Returns:
            Toast to show: incomplete selection, failure or success summary.
        """
        invalid = validate_selection_complete(self.selection.markers)
        if invalid is not None:
            logger.info(f"[REQUEST] Blocked: {len(self.selection.markers)} marker(s) placed")
            return invalid

        start, goal = self.selection.context.start, self.selection.context.goal
        token = self.begin_route_request()
        outcome = self.dispatcher.request_routes(
            start=start,
            goal=goal,
            target_distance=self.settings.target_distance,
            result_count=self.settings.result_count,
            strategy=token.strategy,
        )
        return self.complete_route_request(token=token, outcome=outcome)

    def begin_route_request(self) -> RouteRequestToken:
        """Issue a token for a request that is about to be dispatched."""
        self.result.latest_sequence += 1
        token = RouteRequestToken(sequence=self.result.latest_sequence, strategy=self.settings.strategy)
        logger.debug(f"[REQUEST] Issued token #{token.sequence} ({token.strategy.value})")
        return token

    def complete_route_request(self, token: RouteRequestToken, outcome: RouteOutcome) -> Optional[ToastMessage]:
        """Commit the outcome of an issued request.

        Outcomes of superseded requests are discarded. Failures leave the
        previously committed paths untouched.
        """
        if token.sequence != self.result.latest_sequence:
            logger.info(
                f"[REQUEST] Discarding stale response #{token.sequence} (latest is #{self.result.latest_sequence})"
            )
            return None

        if isinstance(outcome, RouteRequestFailure):
            return RouteRequestFailedMessage(strategy_label=token.strategy.label, reason=outcome.reason)

        self.result.paths = tuple(outcome)
        self.result.visible_ids = {p.id for p in self.result.paths}
        self.result.strategy = token.strategy
        self.hover = None
        logger.info(f"[REQUEST] Committed {len(self.result.paths)} paths from #{token.sequence}")
        return RoutesFoundMessage(num_paths=len(self.result.paths), strategy_label=token.strategy.label)

    # ==========================================================================
    # Rendering
    # ==========================================================================

    @staticmethod
    def _cluster_nodes(nodes: FeatureCollection, bounds: ViewportBounds) -> FeatureCollection:
        # Visible nodes already lie inside bounds; their own extent gives a finer grid
        extent = feature_extent(nodes) or bounds
        return cluster_points(nodes, extent, divisions=LayerConfig.NODE_CLUSTER_DIVISIONS)

    def _node_layer(self, way_colors: dict[str, Color]) -> tuple[FeatureCollection, bool]:
        points = self.node_points_memo(self.ways, way_colors)
        visible = self.visible_nodes_memo(points, self.bounds)
        if len(visible["features"]) > LayerConfig.NODE_CLUSTER_THRESHOLD:
            return self.clustered_nodes_memo(visible, self.bounds), True
        return visible, False

    def build_frame(self) -> RenderFrame:
        """Compose the current frame; hidden layers are skipped, not recomputed."""
        way_colors = self.way_colors_memo(self.ways)
        path_colors = self.path_colors_memo(self.result.paths)

        ways = empty_feature_collection()
        if self.ways_visible:
            ways = self.visible_ways_memo(self.way_lines_memo(self.ways, way_colors), self.bounds)

        nodes, clustered = empty_feature_collection(), False
        if self.nodes_visible:
            nodes, clustered = self._node_layer(way_colors)

        all_paths = self.path_lines_memo(self.result.paths, path_colors)
        paths = feature_collection(
            [f for f in all_paths["features"] if f["properties"]["id"] in self.result.visible_ids]
        )

        return RenderFrame(
            ways=ways,
            nodes=nodes,
            paths=paths,
            markers=self.markers,
            hover=self.hover,
            way_colors=way_colors,
            path_colors=path_colors,
            bounds=self.bounds,
            nodes_clustered=clustered,
        )

    def render(self) -> RenderFrame:
        """Build the current frame and hand it to the surface."""
        frame = self.build_frame()
        logger.debug(f"[RENDER] {frame.layer_counts}")
        self.surface.draw(frame)
        return frame

    # ==========================================================================
    # Reset
    # ==========================================================================

    def reset_interaction(self) -> None:
        """Clear selection, routes and popup; loaded ways are preserved."""
        self.selection.reset()
        self.result.clear()
        self.hover = None
        logger.info("[STATE] Interaction state reset (ways preserved)")

    def __repr__(self) -> str:
        return (
            f"MapInteractionCoordinator(ways={len(self.ways)}, markers={len(self.selection.markers)}, "
            f"paths={len(self.result.paths)}, visible={len(self.result.visible_ids)})"
        )
