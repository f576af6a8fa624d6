"""Tests for golden-angle color assignment."""

from dataclasses import dataclass

from hypothesis import given, settings, strategies as st

from route_explorer.constants import StyleConfig
from route_explorer.core.color_assigner import assign_colors, color_for_index


@dataclass(frozen=True)
class _Entity:
    id: str


def _entities(ids: list[str]) -> list[_Entity]:
    return [_Entity(id=i) for i in ids]


class TestAssignColors:
    """Deterministic position-based colors."""

    def test_empty_input_gives_empty_mapping(self) -> None:
        assert assign_colors([]) == {}

    def test_first_three_hues(self) -> None:
        """Hues advance by the golden angle (~137.508°) modulo 360."""
        colors = assign_colors(_entities(["a", "b", "c"]))
        assert colors["a"].hue == 0.0
        assert abs(colors["b"].hue - 137.50776405) < 1e-6
        assert abs(colors["c"].hue - 2 * StyleConfig.GOLDEN_ANGLE_DEG) < 1e-9

    def test_fixed_saturation_and_lightness(self) -> None:
        for color in assign_colors(_entities([str(i) for i in range(10)])).values():
            assert color.saturation == StyleConfig.SATURATION_PCT
            assert color.lightness == StyleConfig.LIGHTNESS_PCT

    def test_reordering_changes_colors(self) -> None:
        forward = assign_colors(_entities(["a", "b"]))
        backward = assign_colors(_entities(["b", "a"]))
        assert forward["a"] == backward["b"]
        assert forward["a"] != backward["a"]

    def test_consecutive_hues_are_far_apart(self) -> None:
        """No two neighbours within the first 50 entities are closer than 30° in hue."""
        hues = [color_for_index(i).hue for i in range(50)]
        for a, b in zip(hues, hues[1:]):
            gap = abs(a - b) % 360.0
            assert min(gap, 360.0 - gap) > 30.0


class TestAssignColorsHypothesis:
    """Property-based tests on arbitrary id sequences."""

    @given(ids=st.lists(st.text(min_size=1, max_size=8), unique=True, max_size=60))
    @settings(max_examples=50)
    def test_one_entry_per_entity(self, ids: list[str]) -> None:
        assert len(assign_colors(_entities(ids))) == len(ids)

    @given(ids=st.lists(st.text(min_size=1, max_size=8), unique=True, max_size=60))
    @settings(max_examples=50)
    def test_rerun_is_identical(self, ids: list[str]) -> None:
        assert assign_colors(_entities(ids)) == assign_colors(_entities(ids))

    @given(ids=st.lists(st.text(min_size=1, max_size=8), unique=True, max_size=60))
    @settings(max_examples=50)
    def test_color_depends_only_on_position(self, ids: list[str]) -> None:
        """Renaming entities keeps the color at each position."""
        colors = assign_colors(_entities(ids))
        renamed = assign_colors(_entities([f"x{i}" for i in range(len(ids))]))
        for i, entity_id in enumerate(ids):
            assert colors[entity_id] == renamed[f"x{i}"] == color_for_index(i)
            assert 0.0 <= colors[entity_id].hue < 360.0
