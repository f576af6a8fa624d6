"""GeometryProjector - Ways, paths and nodes as GeoJSON feature collections.

Each way or path becomes one LineString feature, each way node one Point
feature. Properties carry what the map needs to draw and inspect them:
    lines:  {"type", "id", "color", "distance"?}
    points: {"type", "id", "way_id", "color"}

Coordinates use [lon, lat] order (GeoJSON standard). Colors are RGBA lists
(deck.gl format). All functions are pure and run in O(total node count).
"""

from collections.abc import Mapping, Sequence
from typing import Any

from route_explorer.constants import ClickConfig, StyleConfig
from route_explorer.model.color import Color
from route_explorer.model.path import Path
from route_explorer.model.way import Way

Feature = dict[str, Any]
FeatureCollection = dict[str, Any]


def empty_feature_collection() -> FeatureCollection:
    """Return a valid FeatureCollection without features."""
    return {"type": "FeatureCollection", "features": []}


def feature_collection(features: list[Feature]) -> FeatureCollection:
    """Wrap features in a FeatureCollection."""
    return {"type": "FeatureCollection", "features": features}


class GeometryProjector:
    """Static projections from domain entities to feature collections.

    Example:
        colors = assign_colors(ways)
        lines = GeometryProjector.project_lines(ways, colors)
        nodes = GeometryProjector.project_nodes(ways, colors)
    """

    @staticmethod
    def _rgba(colors: Mapping[str, Color], entity_id: str) -> list[int]:
        color = colors.get(entity_id)
        return color.rgba if color is not None else list(StyleConfig.FALLBACK_COLOR_RGBA)

    @staticmethod
    def project_lines(entities: Sequence[Way | Path], colors: Mapping[str, Color]) -> FeatureCollection:
        """One LineString feature per way or path.

        Args:
            entities: Ways or paths in presentation order
            colors: Assigned colors by entity id

        Returns:
            FeatureCollection; paths additionally carry "distance".
        """
        features: list[Feature] = []
        for entity in entities:
            is_path = isinstance(entity, Path)
            properties: dict[str, Any] = {
                "type": ClickConfig.TYPE_PATH if is_path else ClickConfig.TYPE_WAY,
                "id": entity.id,
                "color": GeometryProjector._rgba(colors, entity.id),
            }
            if is_path:
                properties["distance"] = entity.distance
            features.append(
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [[n.lon, n.lat] for n in entity.nodes],
                    },
                    "properties": properties,
                }
            )
        return feature_collection(features)

    @staticmethod
    def project_nodes(ways: Sequence[Way], colors: Mapping[str, Color]) -> FeatureCollection:
        """One Point feature per node, tagged with its way and that way's color."""
        features: list[Feature] = []
        for way in ways:
            rgba = GeometryProjector._rgba(colors, way.id)
            for node in way.nodes:
                features.append(
                    {
                        "type": "Feature",
                        "geometry": {"type": "Point", "coordinates": [node.lon, node.lat]},
                        "properties": {
                            "type": ClickConfig.TYPE_NODE,
                            "id": node.id,
                            "way_id": way.id,
                            "color": rgba,
                        },
                    }
                )
        return feature_collection(features)
