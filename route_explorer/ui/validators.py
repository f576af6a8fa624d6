"""Validators - Checks run before a route request leaves the UI.

Validators return Optional[Message]:
- None if valid
- A Message object if invalid (caller displays it)

No exceptions for expected user mistakes; an incomplete selection blocks
the request instead of sending a malformed one.
"""

from collections.abc import Sequence

from route_explorer.constants import RouteConfig
from route_explorer.model.marker import Marker
from route_explorer.model.message import IncompleteSelectionMessage, ToastMessage


def validate_selection_complete(markers: Sequence[Marker]) -> ToastMessage | None:
    """Validate that both start and goal are placed.

    Returns:
        None if valid, IncompleteSelectionMessage if fewer than two markers.
    """
    if len(markers) < RouteConfig.MAX_MARKERS:
        return IncompleteSelectionMessage(num_markers=len(markers))
    return None
