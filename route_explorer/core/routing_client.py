"""RoutingServiceClient - HTTP access to the remote routing service.

Sole responsibility: talk to the service over HTTP and turn its JSON into
Way/Path objects. It knows URLs and payload shapes; it does not know about
selection rules, colors or the map.

Endpoints:
    POST /ways_by_tags            {"tags": [...]}                     -> [Way]
    POST /paths_bfs|_dfs|_special_dijkstra
        {"start_lat", "start_lon", "goal_lat", "goal_lon",
         "target_distance", "amount"}                                -> [Path]
"""

import logging
from collections.abc import Sequence
from typing import Any, Optional

import requests

from route_explorer.constants import ServiceConfig
from route_explorer.model.marker import Marker
from route_explorer.model.path import Path
from route_explorer.model.strategy import SearchStrategy
from route_explorer.model.way import Way

logger = logging.getLogger(__name__)


class TransportFailure(Exception):
    """Service unreachable, non-2xx status or undecodable payload.

    Attributes:
        reason: Human-readable description
        status_code: HTTP status if a response was received
    """

    def __init__(self, reason: str, status_code: Optional[int] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class RoutingServiceClient:
    """Thin client over the routing service endpoints.

    Args:
        base_url: Service root (defaults to ServiceConfig.BASE_URL)
        session: Object with a requests-compatible ``post`` (injectable for tests)
        timeout: Seconds to wait; None waits indefinitely
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = ServiceConfig.ROUTE_TIMEOUT_S,
    ) -> None:
        self.base_url = (base_url or ServiceConfig.BASE_URL).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _post(self, endpoint: str, body: dict[str, Any]) -> Any:
        """POST JSON body and return the decoded response.

        Raises:
            TransportFailure: On any transport, status or decoding problem.
        """
        url = f"{self.base_url}{endpoint}"
        logger.info(f"[REQUEST] POST {url}")
        try:
            response = self.session.post(url, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportFailure(reason=f"{type(e).__name__}: {e}") from e

        if not 200 <= response.status_code < 300:
            raise TransportFailure(
                reason=f"HTTP {response.status_code} from {endpoint}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportFailure(
                reason=f"Invalid JSON from {endpoint}: {e}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _parse_list(payload: Any, parse, endpoint: str, status_code: Optional[int] = None) -> list:
        if not isinstance(payload, list):
            raise TransportFailure(
                reason=f"Expected a list from {endpoint}, got {type(payload).__name__}",
                status_code=status_code,
            )
        try:
            return [parse(item) for item in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise TransportFailure(reason=f"Malformed item from {endpoint}: {e}", status_code=status_code) from e

    def fetch_ways(self, tags: Sequence[str] = ServiceConfig.ACCEPTED_ROAD_TYPES) -> list[Way]:
        """Load all ways carrying one of the given highway tags."""
        endpoint = ServiceConfig.WAYS_ENDPOINT
        payload = self._post(endpoint, {"tags": list(tags)})
        ways = self._parse_list(payload, Way.from_dict, endpoint)
        logger.info(f"[REQUEST] Loaded {len(ways)} ways for {len(tags)} tags")
        return ways

    def fetch_paths(
        self,
        strategy: SearchStrategy,
        start: Marker,
        goal: Marker,
        target_distance: float,
        amount: int,
    ) -> list[Path]:
        """Ask one strategy endpoint for candidate routes (response order kept)."""
        body = {
            "start_lat": start.lat,
            "start_lon": start.lon,
            "goal_lat": goal.lat,
            "goal_lon": goal.lon,
            "target_distance": target_distance,
            "amount": amount,
        }
        payload = self._post(strategy.endpoint, body)
        paths = self._parse_list(payload, Path.from_dict, strategy.endpoint)
        logger.info(f"[REQUEST] {strategy.label} returned {len(paths)} paths")
        return paths
