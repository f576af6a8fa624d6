"""Unit tests for route_explorer validators.

Validators return Optional[Message] - None if valid, a Message if invalid.
"""

import pytest

from route_explorer.model.marker import Marker
from route_explorer.model.message import IncompleteSelectionMessage
from route_explorer.ui.validators import validate_selection_complete


class TestValidateSelectionComplete:
    """Tests for validate_selection_complete."""

    @pytest.mark.parametrize("num_markers", [0, 1])
    def test_incomplete_selection_returns_message(self, num_markers: int) -> None:
        markers = [Marker(lat=51.069, lon=4.030), Marker(lat=51.070, lon=4.032)][:num_markers]
        result = validate_selection_complete(markers)
        assert isinstance(result, IncompleteSelectionMessage)
        assert result.num_markers == num_markers
        assert f"({num_markers}/2 placed)" in result.message

    def test_start_and_goal_is_valid(self) -> None:
        markers = [Marker(lat=51.069, lon=4.030), Marker(lat=51.070, lon=4.032)]
        assert validate_selection_complete(markers) is None
