"""RouteRequestDispatcher - One route request in, one resolved outcome out.

Each call sends exactly one request to the strategy's endpoint. There is no
retry, no de-duplication and no clamping of arguments: invalid values are
forwarded and rejected (or not) by the service. Every failure is logged and
returned as a RouteRequestFailure, so callers always get an outcome.

Callers must only dispatch with a complete selection (start AND goal);
the UI checks this before calling.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from route_explorer.core.routing_client import RoutingServiceClient, TransportFailure
from route_explorer.model.marker import Marker
from route_explorer.model.path import Path
from route_explorer.model.strategy import SearchStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteRequestFailure:
    """Why a route request did not produce a result set."""

    reason: str
    status_code: Optional[int] = None


RouteOutcome = Union[list[Path], RouteRequestFailure]


class RouteRequestDispatcher:
    """Dispatch route requests through a RoutingServiceClient."""

    def __init__(self, client: RoutingServiceClient) -> None:
        self.client = client
        self.request_count = 0

    def request_routes(
        self,
        start: Marker,
        goal: Marker,
        target_distance: float,
        result_count: int,
        strategy: SearchStrategy,
    ) -> RouteOutcome:
        """Request candidate routes from start to goal.

        Returns:
            Paths exactly as the service returned them, or RouteRequestFailure.
        """
        self.request_count += 1
        logger.info(
            f"[REQUEST] #{self.request_count} {strategy.value}: "
            f"({start.lat:.6f}, {start.lon:.6f}) -> ({goal.lat:.6f}, {goal.lon:.6f}), "
            f"target={target_distance}m, amount={result_count}"
        )
        try:
            return self.client.fetch_paths(
                strategy=strategy,
                start=start,
                goal=goal,
                target_distance=target_distance,
                amount=result_count,
            )
        except TransportFailure as e:
            logger.error(f"[REQUEST] #{self.request_count} {strategy.value} failed: {e.reason}")
            return RouteRequestFailure(reason=e.reason, status_code=e.status_code)
