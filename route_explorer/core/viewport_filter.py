"""Viewport culling and clustering of feature collections.

Culling rule:
    - Point: kept when its coordinate lies inside the bounds
    - LineString: kept when AT LEAST ONE vertex lies inside the bounds
Bounds are inclusive on all edges. Filtering is stateless and idempotent:
filtering a filtered collection with the same bounds returns the same
features. A linear scan is sufficient at single-city scale; the signature
(full collection + bounds in, collection out) leaves room for a spatial
index later.

Clustering merges point features into a regular grid so that dense node
layers stay readable when zoomed out. The grid spans the extent of the
points themselves when that is tighter than the bounds.
"""

import logging
from typing import Any, Optional

import numpy as np

from route_explorer.core.geometry_projector import Feature, FeatureCollection, feature_collection
from route_explorer.model.viewport import ViewportBounds

logger = logging.getLogger(__name__)


def _vertices(feature: Feature) -> np.ndarray:
    """Return feature vertices as an (n, 2) array of [lon, lat]."""
    geometry = feature["geometry"]
    geom_type = geometry["type"]
    if geom_type == "Point":
        return np.asarray([geometry["coordinates"]], dtype=float).reshape(-1, 2)
    if geom_type == "LineString":
        return np.asarray(geometry["coordinates"], dtype=float).reshape(-1, 2)
    raise ValueError(f"Unsupported geometry type for viewport filtering: {geom_type}")


def is_in_viewport(feature: Feature, bounds: ViewportBounds) -> bool:
    """Check if a feature's representative coordinate lies in bounds."""
    coords = _vertices(feature)
    if coords.size == 0:
        return False
    lons, lats = coords[:, 0], coords[:, 1]
    inside = (lats >= bounds.min_lat) & (lats <= bounds.max_lat) & (lons >= bounds.min_lon) & (lons <= bounds.max_lon)
    return bool(inside.any())


def filter_to_viewport(collection: FeatureCollection, bounds: ViewportBounds) -> FeatureCollection:
    """Return the subset of features visible in bounds (order preserved).

    The input collection is not modified; retained features are the same
    objects as in the input.
    """
    features = collection["features"]
    visible = [f for f in features if is_in_viewport(feature=f, bounds=bounds)]
    logger.debug(f"[VIEWPORT] Kept {len(visible)}/{len(features)} features in {bounds}")
    return feature_collection(visible)


def feature_extent(collection: FeatureCollection) -> Optional[ViewportBounds]:
    """Smallest bounds holding every vertex of the collection, None when empty."""
    if not collection["features"]:
        return None
    coords = np.concatenate([_vertices(f) for f in collection["features"]])
    if coords.size == 0:
        return None
    lo, hi = coords.min(axis=0), coords.max(axis=0)
    return ViewportBounds(min_lat=float(lo[1]), max_lat=float(hi[1]), min_lon=float(lo[0]), max_lon=float(hi[0]))


def cluster_points(collection: FeatureCollection, bounds: ViewportBounds, divisions: int) -> FeatureCollection:
    """Merge point features into a divisions × divisions grid over bounds.

    Each occupied cell becomes one point at the centroid of its members with
    properties {"type": "cluster", "id": "cluster_<row>_<col>", "way_id": None,
    "color": <first member color>, "count": <members>}. Points outside the
    bounds are clamped into the border cells.

    Args:
        collection: Point feature collection
        bounds: Extent the grid covers
        divisions: Cells per axis (>= 1)
    """
    if divisions < 1:
        raise ValueError(f"divisions must be >= 1, got {divisions}")

    features = collection["features"]
    if not features:
        return feature_collection([])

    coords = np.asarray([f["geometry"]["coordinates"] for f in features], dtype=float).reshape(-1, 2)
    lat_span = max(bounds.max_lat - bounds.min_lat, 1e-12)
    lon_span = max(bounds.max_lon - bounds.min_lon, 1e-12)
    rows = np.clip(((coords[:, 1] - bounds.min_lat) / lat_span * divisions).astype(int), 0, divisions - 1)
    cols = np.clip(((coords[:, 0] - bounds.min_lon) / lon_span * divisions).astype(int), 0, divisions - 1)

    cells: dict[tuple[int, int], list[int]] = {}
    for idx, cell in enumerate(zip(rows.tolist(), cols.tolist())):
        cells.setdefault(cell, []).append(idx)

    clusters: list[Feature] = []
    for (row, col), members in cells.items():
        centroid = coords[members].mean(axis=0)
        properties: dict[str, Any] = {
            "type": "cluster",
            "id": f"cluster_{row}_{col}",
            "way_id": None,
            "color": features[members[0]]["properties"].get("color"),
            "count": len(members),
        }
        clusters.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [float(centroid[0]), float(centroid[1])]},
                "properties": properties,
            }
        )

    logger.debug(f"[VIEWPORT] Clustered {len(features)} points into {len(clusters)} cells")
    return feature_collection(clusters)
