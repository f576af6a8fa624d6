"""Tests for RoutingServiceClient and RouteRequestDispatcher.

HTTP is replaced by MockSession (conftest.py); no network access.
"""

import pytest
import requests

from conftest import OTHER_PATHS_PAYLOAD, PATHS_PAYLOAD, TEST_BASE_URL, WAYS_PAYLOAD, MockResponse, MockSession
from route_explorer.constants import ServiceConfig
from route_explorer.core.route_dispatcher import RouteRequestDispatcher, RouteRequestFailure
from route_explorer.core.routing_client import RoutingServiceClient, TransportFailure
from route_explorer.model.marker import Marker
from route_explorer.model.path import Path
from route_explorer.model.strategy import SearchStrategy

START = Marker(lat=51.069, lon=4.030)
GOAL = Marker(lat=51.070, lon=4.032)


def _dispatcher(*replies: MockResponse | Exception) -> tuple[RouteRequestDispatcher, MockSession]:
    session = MockSession(*replies)
    client = RoutingServiceClient(base_url=TEST_BASE_URL, session=session)  # type: ignore[arg-type]
    return RouteRequestDispatcher(client=client), session


def _request(dispatcher: RouteRequestDispatcher, **overrides):  # noqa: ANN202
    kwargs = dict(start=START, goal=GOAL, target_distance=500, result_count=3, strategy=SearchStrategy.BREADTH_FIRST)
    kwargs.update(overrides)
    return dispatcher.request_routes(**kwargs)


class TestRequestRoutes:
    """One request in, one outcome out."""

    def test_success_returns_paths_unmodified_and_in_order(self) -> None:
        dispatcher, session = _dispatcher(MockResponse(200, PATHS_PAYLOAD))
        outcome = _request(dispatcher)

        assert isinstance(outcome, list)
        assert outcome == [Path.from_dict(p) for p in PATHS_PAYLOAD]
        assert [p.id for p in outcome] == ["p0", "p1", "p2"]

    def test_request_body_and_endpoint(self) -> None:
        dispatcher, session = _dispatcher(MockResponse(200, PATHS_PAYLOAD))
        _request(dispatcher)

        assert len(session.calls) == 1
        call = session.calls[0]
        assert call["url"] == f"{TEST_BASE_URL}/paths_bfs"
        assert call["json"] == {
            "start_lat": 51.069,
            "start_lon": 4.030,
            "goal_lat": 51.070,
            "goal_lon": 4.032,
            "target_distance": 500,
            "amount": 3,
        }
        assert call["timeout"] is ServiceConfig.ROUTE_TIMEOUT_S

    @pytest.mark.parametrize(
        "strategy,endpoint",
        [
            (SearchStrategy.BREADTH_FIRST, "/paths_bfs"),
            (SearchStrategy.DEPTH_FIRST, "/paths_dfs"),
            (SearchStrategy.DISTANCE_TARGETED, "/paths_special_dijkstra"),
        ],
    )
    def test_each_strategy_hits_its_endpoint(self, strategy: SearchStrategy, endpoint: str) -> None:
        dispatcher, session = _dispatcher(MockResponse(200, []))
        _request(dispatcher, strategy=strategy)
        assert session.calls[0]["url"] == f"{TEST_BASE_URL}{endpoint}"

    def test_server_error_returns_failure_without_raising(self) -> None:
        dispatcher, _ = _dispatcher(MockResponse(500, {"detail": "boom"}))
        outcome = _request(dispatcher)
        assert isinstance(outcome, RouteRequestFailure)
        assert outcome.status_code == 500
        assert "500" in outcome.reason

    def test_connection_error_returns_failure(self, connection_error: requests.ConnectionError) -> None:
        dispatcher, _ = _dispatcher(connection_error)
        outcome = _request(dispatcher)
        assert isinstance(outcome, RouteRequestFailure)
        assert outcome.status_code is None
        assert "ConnectionError" in outcome.reason

    def test_invalid_json_returns_failure(self) -> None:
        dispatcher, _ = _dispatcher(MockResponse(200, invalid_json=True))
        outcome = _request(dispatcher)
        assert isinstance(outcome, RouteRequestFailure)
        assert outcome.status_code == 200

    @pytest.mark.parametrize(
        "payload",
        [
            {"paths": []},  # not a list
            [{"id": "p0", "nodes": []}],  # missing distance
            [{"id": "p0", "distance": -5.0, "nodes": []}],  # negative distance
        ],
    )
    def test_malformed_payload_returns_failure(self, payload: object) -> None:
        dispatcher, _ = _dispatcher(MockResponse(200, payload))
        assert isinstance(_request(dispatcher), RouteRequestFailure)

    def test_empty_result_is_success(self) -> None:
        dispatcher, _ = _dispatcher(MockResponse(200, []))
        assert _request(dispatcher) == []

    def test_arguments_are_forwarded_unclamped(self) -> None:
        """Invalid values are the service's to reject."""
        dispatcher, session = _dispatcher(MockResponse(422, {"detail": "amount must be >= 1"}))
        outcome = _request(dispatcher, target_distance=-10, result_count=0)
        assert session.calls[0]["json"]["amount"] == 0
        assert session.calls[0]["json"]["target_distance"] == -10
        assert isinstance(outcome, RouteRequestFailure)

    def test_one_request_per_call_no_retry(self) -> None:
        dispatcher, session = _dispatcher(MockResponse(503), MockResponse(200, OTHER_PATHS_PAYLOAD))
        first = _request(dispatcher)
        second = _request(dispatcher)
        assert isinstance(first, RouteRequestFailure)
        assert [p.id for p in second] == ["q0"]
        assert len(session.calls) == 2
        assert dispatcher.request_count == 2


class TestFetchWays:
    """Road network loading."""

    def test_fetch_ways_posts_tags(self) -> None:
        session = MockSession(MockResponse(200, WAYS_PAYLOAD))
        client = RoutingServiceClient(base_url=TEST_BASE_URL, session=session)  # type: ignore[arg-type]
        ways = client.fetch_ways()

        assert [w.id for w in ways] == ["w1", "w2", "w_far"]
        assert session.calls[0]["url"] == f"{TEST_BASE_URL}/ways_by_tags"
        assert session.calls[0]["json"] == {"tags": list(ServiceConfig.ACCEPTED_ROAD_TYPES)}

    def test_custom_tags(self) -> None:
        session = MockSession(MockResponse(200, []))
        client = RoutingServiceClient(base_url=TEST_BASE_URL + "/", session=session)  # type: ignore[arg-type]
        assert client.fetch_ways(tags=("residential",)) == []
        assert session.calls[0]["url"] == f"{TEST_BASE_URL}/ways_by_tags"
        assert session.calls[0]["json"] == {"tags": ["residential"]}

    def test_fetch_ways_raises_transport_failure(self) -> None:
        session = MockSession(MockResponse(404))
        client = RoutingServiceClient(base_url=TEST_BASE_URL, session=session)  # type: ignore[arg-type]
        with pytest.raises(TransportFailure) as exc_info:
            client.fetch_ways()
        assert exc_info.value.status_code == 404
