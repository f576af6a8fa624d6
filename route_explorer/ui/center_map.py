"""MapRenderer - Pydeck map rendering for the route explorer.

Turns a RenderFrame into a deck.gl Deck:
- Ways as thin colored lines (PathLayer)
- Way nodes as small dots, or grid clusters when zoomed out (ScatterplotLayer)
- Routes as 2 px lines in their assigned colors (PathLayer)
- An invisible wide copy of each route for easier hover picking
- Start/goal markers with labels (ScatterplotLayer + TextLayer)
- The hover popup anchored at the pointer (TextLayer)

Pydeck conventions:
- [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- Data prepared as list[dict] carrying "type"/"id" for click detection
- pickable=True enables click and tooltip detection
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import pydeck as pdk

from route_explorer.constants import ClickConfig, LayerConfig, MapConfig, MarkerConfig
from route_explorer.core.geometry_projector import FeatureCollection
from route_explorer.model.map_event import HoverInfo
from route_explorer.model.marker import Marker
from route_explorer.ui.coordinator import RenderFrame

logger = logging.getLogger(__name__)


@dataclass
class LayerCollection:
    """Manages Pydeck layers with correct z-ordering.

    Z-order (back to front): ways → nodes → paths → path_hits → markers → popup

    Routes sit above the road network so that overlapping roads never hide
    them; the invisible hit lines come right after so they win picking.
    """

    ways: list[pdk.Layer] = field(default_factory=list)
    nodes: list[pdk.Layer] = field(default_factory=list)
    paths: list[pdk.Layer] = field(default_factory=list)
    path_hits: list[pdk.Layer] = field(default_factory=list)
    markers: list[pdk.Layer] = field(default_factory=list)
    popup: list[pdk.Layer] = field(default_factory=list)

    def get_ordered_layers(self) -> list[pdk.Layer]:
        """Return all layers in correct z-order (back to front)."""
        return self.ways + self.nodes + self.paths + self.path_hits + self.markers + self.popup


class MapRenderer:
    """Renders a RenderFrame on a Pydeck map.

    Example:
        renderer = MapRenderer()
        deck = renderer.render(frame=coordinator.build_frame())
    """

    def __init__(
        self,
        center_lat: float = MapConfig.START_CENTER_LAT,
        center_lon: float = MapConfig.START_CENTER_LON,
        zoom: float = MapConfig.DEFAULT_ZOOM,
        pitch: float = MapConfig.DEFAULT_PITCH,
        bearing: float = MapConfig.DEFAULT_BEARING,
    ) -> None:
        self.center_lat = center_lat
        self.center_lon = center_lon
        self.zoom = zoom
        self.pitch = pitch
        self.bearing = bearing

    def get_view_state(self) -> pdk.ViewState:
        """Create Pydeck ViewState from current settings."""
        return pdk.ViewState(
            latitude=self.center_lat,
            longitude=self.center_lon,
            zoom=self.zoom,
            pitch=self.pitch,
            bearing=self.bearing,
        )

    def render(self, frame: RenderFrame) -> pdk.Deck:
        """Render all layers of a frame.

        Returns:
            pdk.Deck object ready for display.
        """
        layer_collection = LayerCollection()

        if frame.ways["features"]:
            layer_collection.ways.append(self._create_way_layer(frame.ways))
        if frame.nodes["features"]:
            layer_collection.nodes.append(self._create_node_layer(frame.nodes, clustered=frame.nodes_clustered))
        if frame.paths["features"]:
            path_layer, hit_layer = self._create_path_layers(frame.paths)
            layer_collection.paths.append(path_layer)
            layer_collection.path_hits.append(hit_layer)
        if frame.markers:
            layer_collection.markers.extend(self._create_marker_layers(frame.markers))
        if frame.hover is not None:
            layer_collection.popup.append(self._create_popup_layer(frame.hover))

        return pdk.Deck(
            map_style=MapConfig.MAP_STYLE,
            initial_view_state=self.get_view_state(),
            layers=layer_collection.get_ordered_layers(),
            tooltip=self._create_tooltip_config(),
            parameters={"pickingRadius": ClickConfig.PICKING_RADIUS_PX},
        )

    # =========================================================================
    # DATA CONVERSION
    # =========================================================================

    @staticmethod
    def line_rows(collection: FeatureCollection) -> list[dict[str, Any]]:
        """Flatten LineString features into PathLayer rows."""
        rows = []
        for feature in collection["features"]:
            props = feature["properties"]
            row = {
                "type": props["type"],
                "id": props["id"],
                "path": feature["geometry"]["coordinates"],
                "color": props["color"],
            }
            if "distance" in props:
                row["distance"] = props["distance"]
                row["name"] = f"Path ID: {props['id']}<br/>Distance: {props['distance']:g} m"
            else:
                row["name"] = f"Way {props['id']}"
            rows.append(row)
        return rows

    @staticmethod
    def point_rows(collection: FeatureCollection) -> list[dict[str, Any]]:
        """Flatten Point features into ScatterplotLayer rows."""
        rows = []
        for feature in collection["features"]:
            props = feature["properties"]
            count = props.get("count")
            rows.append(
                {
                    "type": props.get("type", ClickConfig.TYPE_NODE),
                    "id": props["id"],
                    "way_id": props.get("way_id"),
                    "position": feature["geometry"]["coordinates"],
                    "color": props["color"],
                    "name": f"{count} nodes" if count is not None else f"Node {props['id']}",
                }
            )
        return rows

    # =========================================================================
    # LAYERS
    # =========================================================================

    def _create_way_layer(self, ways: FeatureCollection) -> pdk.Layer:
        return pdk.Layer(
            "PathLayer",
            self.line_rows(ways),
            get_path="path",
            get_color="color",
            width_units="pixels",
            get_width=LayerConfig.WAY_WIDTH_PX,
            pickable=False,
            id="ways",
        )

    def _create_node_layer(self, nodes: FeatureCollection, clustered: bool) -> pdk.Layer:
        radius = LayerConfig.CLUSTER_RADIUS_PX if clustered else LayerConfig.NODE_RADIUS_PX
        return pdk.Layer(
            "ScatterplotLayer",
            self.point_rows(nodes),
            get_position="position",
            get_fill_color="color",
            radius_units="pixels",
            get_radius=radius,
            pickable=True,
            id="node_clusters" if clustered else "nodes",
        )

    def _create_path_layers(self, paths: FeatureCollection) -> tuple[pdk.Layer, pdk.Layer]:
        """Visible 2 px route lines plus an invisible wide copy for hover picking."""
        rows = self.line_rows(paths)
        visible = pdk.Layer(
            "PathLayer",
            rows,
            get_path="path",
            get_color="color",
            width_units="pixels",
            get_width=LayerConfig.PATH_WIDTH_PX,
            pickable=False,
            id="paths",
        )
        hits = pdk.Layer(
            "PathLayer",
            rows,
            get_path="path",
            get_color=[0, 0, 0, 0],
            width_units="pixels",
            get_width=LayerConfig.PATH_HIT_WIDTH_PX,
            pickable=True,
            id="path_hits",
        )
        return visible, hits

    def _create_marker_layers(self, markers: tuple[Marker, ...]) -> list[pdk.Layer]:
        colors = [MarkerConfig.START_COLOR, MarkerConfig.GOAL_COLOR]
        data = [
            {
                "type": ClickConfig.TYPE_MARKER,
                "id": MarkerConfig.LABELS[i].lower(),
                "position": list(marker.lon_lat),
                "color": colors[i],
                "name": MarkerConfig.LABELS[i],
            }
            for i, marker in enumerate(markers)
        ]
        return [
            pdk.Layer(
                "ScatterplotLayer",
                data,
                get_position="position",
                get_fill_color="color",
                get_line_color=MarkerConfig.BORDER_COLOR,
                stroked=True,
                line_width_min_pixels=2,
                radius_units="pixels",
                get_radius=MarkerConfig.RADIUS_PX,
                pickable=True,
                id="markers",
            ),
            pdk.Layer(
                "TextLayer",
                data,
                get_position="position",
                get_text="name",
                get_color=[30, 30, 30, 255],
                get_size=14,
                get_pixel_offset=[0, -18],
                id="marker_labels",
            ),
        ]

    def _create_popup_layer(self, hover: HoverInfo) -> pdk.Layer:
        return pdk.Layer(
            "TextLayer",
            [{"position": [hover.lon, hover.lat], "text": hover.text}],
            get_position="position",
            get_text="text",
            get_color=[30, 30, 30, 255],
            get_size=13,
            background=True,
            get_background_color=[255, 255, 255, 235],
            get_pixel_offset=[0, -24],
            id="hover_popup",
        )

    # =========================================================================
    # TOOLTIP CONFIGURATION
    # =========================================================================

    def _create_tooltip_config(self) -> dict[str, str | dict[str, str]]:
        """Pydeck tooltip: path id and distance for routes, names elsewhere."""
        return {
            "html": "<b>{name}</b>",
            "style": {
                "backgroundColor": "rgba(255, 255, 255, 0.95)",
                "color": "#333",
                "padding": "6px 10px",
                "borderRadius": "4px",
            },
        }
