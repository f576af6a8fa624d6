"""Configuration constants for Route Explorer.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    MapConfig: Default map view parameters
    ServiceConfig: Routing service location, endpoints and road tags
    RouteConfig: Route request defaults and input limits
    StyleConfig: Color assignment parameters
    LayerConfig: Layer widths, clustering and culling parameters
    MarkerConfig: Start/goal marker styling
    ClickConfig: Object types used for click/hover detection
    ChartConfig: Chart rendering dimensions
    CoordinateConfig: Coordinate rounding for deduplication
"""

import math
import os


class AppConfig:
    """UI application settings."""

    TITLE = "Route Explorer"
    ICON = "🧭"
    LAYOUT = "wide"


class MapConfig:
    """Default map view parameters."""

    # Initial center: Sint-Niklaas area, Belgium
    START_CENTER_LAT = 51.069144704301806
    START_CENTER_LON = 4.038468861183304
    DEFAULT_ZOOM = 14
    DEFAULT_PITCH = 0.0
    DEFAULT_BEARING = 0.0

    # Map component height in pixels
    MAP_HEIGHT_PX = 650

    # Carto basemap, no API key needed
    MAP_STYLE = "https://basemaps.cartocdn.com/gl/positron-gl-style/style.json"


class ServiceConfig:
    """Routing service location, endpoints and road tags."""

    BASE_URL = os.environ.get("ROUTE_EXPLORER_SERVICE_URL", "http://localhost:8000")

    WAYS_ENDPOINT = "/ways_by_tags"

    # None = wait for the service indefinitely (no timeout imposed)
    ROUTE_TIMEOUT_S = None

    # OSM highway values requested when loading the road network
    ACCEPTED_ROAD_TYPES = (
        "residential",
        "unclassified",
        "track",
        "service",
        "tertiary",
        "road",
        "secondary",
        "primary",
        "trunk",
        "primary_link",
        "trunk_link",
        "tertiary_link",
        "secondary_link",
        "highway",
    )


class RouteConfig:
    """Route request defaults and input limits."""

    DEFAULT_TARGET_DISTANCE_M = 500
    DEFAULT_RESULT_COUNT = 3

    # Widget limits only - values are forwarded to the service unclamped
    TARGET_DISTANCE_STEP_M = 50
    MIN_RESULT_COUNT = 1

    # A selection holds a start and a goal
    MAX_MARKERS = 2


class StyleConfig:
    """Color assignment parameters."""

    # Golden angle: consecutive hues never land close to each other
    GOLDEN_ANGLE_DEG = 180.0 * (3.0 - math.sqrt(5.0))
    SATURATION_PCT = 60.0
    LIGHTNESS_PCT = 50.0

    # Fallback for entities without an assigned color
    FALLBACK_COLOR_RGBA = [0, 0, 0, 255]


assert 137.5 < StyleConfig.GOLDEN_ANGLE_DEG < 137.51, "Golden angle must be ~137.508 degrees"


class LayerConfig:
    """Layer widths, clustering and culling parameters."""

    PATH_WIDTH_PX = 2
    PATH_HIT_WIDTH_PX = 12  # Invisible wide line for hover picking
    WAY_WIDTH_PX = 2
    NODE_RADIUS_PX = 3

    # Initial overlay toggles
    SHOW_NODES_DEFAULT = False
    SHOW_WAYS_DEFAULT = True

    # Cluster node points when more than this many are visible
    NODE_CLUSTER_THRESHOLD = 5000
    NODE_CLUSTER_DIVISIONS = 64
    CLUSTER_RADIUS_PX = 6


class MarkerConfig:
    """Start/goal marker styling."""

    START_COLOR = [34, 197, 94, 255]  # green-500
    GOAL_COLOR = [239, 68, 68, 255]  # red-500
    BORDER_COLOR = [255, 255, 255, 255]
    RADIUS_PX = 8
    LABELS = ["Start", "Goal"]


assert len(MarkerConfig.LABELS) == RouteConfig.MAX_MARKERS


class ClickConfig:
    """Object types attached to pickable layer data."""

    TYPE_PATH = "path"
    TYPE_WAY = "way"
    TYPE_NODE = "node"
    TYPE_MARKER = "marker"

    PICKING_RADIUS_PX = 6


class ChartConfig:
    """Chart rendering dimensions and settings."""

    DISTANCE_CHART_HEIGHT = 260
    TARGET_LINE_COLOR = "#6B7280"  # gray-500


class CoordinateConfig:
    """Coordinate handling for click deduplication.

    Never compare lat/lon floats with == directly.
    """

    # Decimal places for dedup key generation (6 decimals ≈ 10cm precision)
    DEDUP_KEY_DECIMALS: int = 6
