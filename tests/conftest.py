"""Shared pytest fixtures for route_explorer tests.

Provides hand-written doubles for the two external collaborators:
- FakeMapSurface: MapSurface that records frames and emits synthetic events
- MockSession/MockResponse: requests-compatible HTTP session with canned replies

COORDINATES:
    Test data sits around Sint-Niklaas (lat≈51.07, lon≈4.03), matching the
    default map view. One way lies far outside the default viewport
    (lat 52, lon 5) to exercise culling.
"""

from typing import Any, Optional

import pytest
import requests

from route_explorer.core.route_dispatcher import RouteRequestDispatcher
from route_explorer.core.routing_client import RoutingServiceClient
from route_explorer.model.map_event import MapEventKind, PointerEvent, ViewportChangeEvent
from route_explorer.model.path import Path
from route_explorer.model.viewport import ViewportBounds
from route_explorer.model.way import Way
from route_explorer.ui.coordinator import MapInteractionCoordinator, RenderFrame
from route_explorer.ui.map_surface import MapSurface

TEST_BASE_URL = "http://routing.test"

# Default viewport: covers the Sint-Niklaas test ways, not the far way
CITY_BOUNDS = ViewportBounds(min_lat=51.06, max_lat=51.08, min_lon=4.02, max_lon=4.05)
FAR_BOUNDS = ViewportBounds(min_lat=51.99, max_lat=52.01, min_lon=4.99, max_lon=5.01)


# =============================================================================
# FAKE MAP SURFACE
# =============================================================================


class FakeMapSurface(MapSurface):
    """MapSurface double: fixed bounds, recorded frames, synthetic events."""

    def __init__(self, bounds: ViewportBounds = CITY_BOUNDS) -> None:
        super().__init__()
        self.bounds = bounds
        self.frames: list[RenderFrame] = []

    def query_viewport_bounds(self) -> ViewportBounds:
        return self.bounds

    def draw(self, frame: RenderFrame) -> None:
        self.frames.append(frame)

    def handler_count(self, kind: MapEventKind) -> int:
        return len(self._handlers.get(kind, []))

    # Convenience emitters mirroring user actions

    def click(self, lat: float, lon: float, feature: Optional[dict[str, Any]] = None) -> None:
        self.emit(MapEventKind.PRIMARY_CLICK, PointerEvent(lat=lat, lon=lon, feature=feature))

    def right_click(self) -> None:
        self.emit(MapEventKind.SECONDARY_CLICK, None)

    def hover(self, lat: float, lon: float, feature: Optional[dict[str, Any]] = None) -> None:
        self.emit(MapEventKind.HOVER, PointerEvent(lat=lat, lon=lon, feature=feature))

    def hover_end(self) -> None:
        self.emit(MapEventKind.HOVER_END, None)

    def pan_to(self, bounds: ViewportBounds) -> None:
        self.bounds = bounds
        self.emit(MapEventKind.VIEWPORT_CHANGE, ViewportChangeEvent(bounds=bounds))


# =============================================================================
# MOCK HTTP SESSION
# =============================================================================


class MockResponse:
    """Minimal requests.Response stand-in."""

    def __init__(self, status_code: int = 200, payload: Any = None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class MockSession:
    """Records every POST and replies from a queue of responses/exceptions.

    The last queued reply is reused once the queue is exhausted.
    """

    def __init__(self, *replies: MockResponse | Exception) -> None:
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    def queue(self, *replies: MockResponse | Exception) -> None:
        self.replies.extend(replies)

    def post(self, url: str, json: Any = None, timeout: Optional[float] = None) -> MockResponse:
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if not self.replies:
            raise AssertionError(f"Unexpected POST to {url}")
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply


# =============================================================================
# SERVICE PAYLOADS
# =============================================================================


def node_dict(node_id: int, lat: float, lon: float) -> dict[str, Any]:
    return {"id": node_id, "lat": lat, "lon": lon}


WAYS_PAYLOAD: list[dict[str, Any]] = [
    {
        "id": "w1",
        "nodes": [
            node_dict(1, 51.0690, 4.0300),
            node_dict(2, 51.0695, 4.0310),
            node_dict(3, 51.0700, 4.0320),
        ],
    },
    {
        "id": "w2",
        "nodes": [
            node_dict(4, 51.0680, 4.0290),
            node_dict(5, 51.0685, 4.0295),
        ],
    },
    {
        "id": "w_far",
        "nodes": [
            node_dict(6, 52.0000, 5.0000),
            node_dict(7, 52.0010, 5.0010),
        ],
    },
]

PATHS_PAYLOAD: list[dict[str, Any]] = [
    {
        "id": "p0",
        "distance": 480.5,
        "nodes": [node_dict(1, 51.0690, 4.0300), node_dict(2, 51.0695, 4.0310), node_dict(3, 51.0700, 4.0320)],
    },
    {
        "id": "p1",
        "distance": 512.0,
        "nodes": [node_dict(1, 51.0690, 4.0300), node_dict(8, 51.0692, 4.0318), node_dict(3, 51.0700, 4.0320)],
    },
    {
        "id": "p2",
        "distance": 530.25,
        "nodes": [node_dict(1, 51.0690, 4.0300), node_dict(9, 51.0701, 4.0305), node_dict(3, 51.0700, 4.0320)],
    },
]

OTHER_PATHS_PAYLOAD: list[dict[str, Any]] = [
    {
        "id": "q0",
        "distance": 700.0,
        "nodes": [node_dict(1, 51.0690, 4.0300), node_dict(3, 51.0700, 4.0320)],
    },
]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def ways() -> list[Way]:
    """Three ways: two in the city viewport, one far outside."""
    return [Way.from_dict(w) for w in WAYS_PAYLOAD]


@pytest.fixture
def paths() -> list[Path]:
    """Three candidate routes with increasing distance."""
    return [Path.from_dict(p) for p in PATHS_PAYLOAD]


@pytest.fixture
def surface() -> FakeMapSurface:
    return FakeMapSurface()


@pytest.fixture
def session() -> MockSession:
    """Session answering the initial ways request; tests queue further replies."""
    return MockSession(MockResponse(status_code=200, payload=WAYS_PAYLOAD))


@pytest.fixture
def client(session: MockSession) -> RoutingServiceClient:
    return RoutingServiceClient(base_url=TEST_BASE_URL, session=session)  # type: ignore[arg-type]


@pytest.fixture
def coordinator(surface: FakeMapSurface, client: RoutingServiceClient) -> MapInteractionCoordinator:
    """Coordinator with no ways loaded yet."""
    return MapInteractionCoordinator(
        surface=surface,
        dispatcher=RouteRequestDispatcher(client=client),
        client=client,
    )


@pytest.fixture
def loaded_coordinator(coordinator: MapInteractionCoordinator, session: MockSession) -> MapInteractionCoordinator:
    """Coordinator with WAYS_PAYLOAD loaded and the session call log cleared."""
    assert coordinator.load_ways() is None
    session.calls.clear()
    session.replies.clear()
    return coordinator


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("Connection refused")
