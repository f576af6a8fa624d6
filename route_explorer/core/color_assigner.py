"""Color assignment for ways and paths.

The i-th entity gets hue = (i × golden angle) mod 360 at fixed saturation
and lightness. The golden angle keeps consecutive hues far apart for
sequences of any length. Colors depend only on position, never on ids,
so identical ordering always reproduces identical colors.
"""

from collections.abc import Sequence
from typing import Protocol

from route_explorer.constants import StyleConfig
from route_explorer.model.color import Color


class Identified(Protocol):
    """Anything with a string id (Way, Path)."""

    @property
    def id(self) -> str: ...


def color_for_index(index: int) -> Color:
    """Color of the entity at position index (0-based)."""
    hue = (index * StyleConfig.GOLDEN_ANGLE_DEG) % 360.0
    return Color(hue=hue, saturation=StyleConfig.SATURATION_PCT, lightness=StyleConfig.LIGHTNESS_PCT)


def assign_colors(entities: Sequence[Identified]) -> dict[str, Color]:
    """Map each entity id to the color of its position.

    Args:
        entities: Ordered ways or paths (ids unique)

    Returns:
        Dict id → Color with one entry per entity; empty for empty input.
    """
    return {entity.id: color_for_index(i) for i, entity in enumerate(entities)}
