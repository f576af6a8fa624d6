"""Color - Visual identity of a way or path on the map."""

import colorsys
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An HSL color.

    Attributes:
        hue: Hue in degrees [0, 360)
        saturation: Saturation in percent
        lightness: Lightness in percent
    """

    hue: float
    saturation: float
    lightness: float

    @property
    def rgba(self) -> list[int]:
        """Return [R, G, B, A] (0-255), the deck.gl color format."""
        r, g, b = colorsys.hls_to_rgb(self.hue / 360.0, self.lightness / 100.0, self.saturation / 100.0)
        return [round(r * 255), round(g * 255), round(b * 255), 255]

    @property
    def css(self) -> str:
        """Return CSS hsl() string for HTML widgets."""
        return f"hsl({self.hue:.3f}, {self.saturation:g}%, {self.lightness:g}%)"

    @property
    def hex(self) -> str:
        """Return #RRGGBB string for plotly and swatches."""
        r, g, b, _ = self.rgba
        return f"#{r:02X}{g:02X}{b:02X}"
