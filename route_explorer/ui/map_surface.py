"""MapSurface - Interface between the interaction engine and a map widget.

The surface is a black-box producer of discrete, totally ordered events
(clicks, hovers, viewport changes) and a consumer of render frames. The
coordinator only talks to this interface, so tests drive it with a fake
surface that emits events synthetically.
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from route_explorer.model.map_event import MapEventKind
from route_explorer.model.viewport import ViewportBounds

if TYPE_CHECKING:
    from route_explorer.ui.coordinator import RenderFrame

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


class MapSurface(ABC):
    """Event subscription plus drawing; subclasses supply the widget."""

    def __init__(self) -> None:
        self._handlers: dict[MapEventKind, list[EventHandler]] = defaultdict(list)

    def subscribe(self, kind: MapEventKind, handler: EventHandler) -> None:
        """Call handler(payload) for every event of this kind, in subscription order."""
        self._handlers[kind].append(handler)

    def emit(self, kind: MapEventKind, payload: Any = None) -> None:
        """Deliver one event to all subscribers of its kind."""
        handlers = self._handlers.get(kind, [])
        logger.debug(f"[EVENT] {kind.value} -> {len(handlers)} handler(s)")
        for handler in list(handlers):
            handler(payload)

    @abstractmethod
    def query_viewport_bounds(self) -> ViewportBounds:
        """Currently visible geographic extent."""
        raise NotImplementedError

    @abstractmethod
    def draw(self, frame: "RenderFrame") -> None:
        """Render one frame of layers, markers and popup."""
        raise NotImplementedError
