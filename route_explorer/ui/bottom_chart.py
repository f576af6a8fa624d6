"""DistanceChart - Plotly comparison of route distances.

One bar per route in its map color; hidden routes are drawn faded. A dashed
line marks the requested target distance.
"""

import logging
from collections.abc import Collection, Mapping, Sequence

import plotly.graph_objects as go

from route_explorer.constants import ChartConfig
from route_explorer.model.color import Color
from route_explorer.model.path import Path

logger = logging.getLogger(__name__)


class DistanceChart:
    """Renders route distances using Plotly.

    Example:
        chart = DistanceChart(height=ChartConfig.DISTANCE_CHART_HEIGHT)
        fig = chart.render(paths=paths, colors=colors, visible_ids=ids, target_distance=500)
        st.plotly_chart(fig)
    """

    def __init__(self, height: int = ChartConfig.DISTANCE_CHART_HEIGHT, width: int | None = None) -> None:
        self.height = height
        self.width = width

    def render(
        self,
        paths: Sequence[Path],
        colors: Mapping[str, Color],
        visible_ids: Collection[str],
        target_distance: float,
    ) -> go.Figure:
        """Render one bar per route.

        Returns:
            Plotly Figure object.
        """
        if not paths:
            return self._empty_figure("No routes to compare")

        labels = [f"Path {p.id}" for p in paths]
        distances = [p.distance for p in paths]
        bar_colors = [colors[p.id].hex if p.id in colors else "#000000" for p in paths]
        opacities = [1.0 if p.id in visible_ids else 0.3 for p in paths]

        fig = go.Figure()
        fig.add_trace(
            go.Bar(
                x=labels,
                y=distances,
                marker=dict(color=bar_colors, opacity=opacities),
                hovertemplate="%{x}<br>Distance: %{y:.0f} m<extra></extra>",
                showlegend=False,
            )
        )
        fig.add_hline(
            y=target_distance,
            line=dict(color=ChartConfig.TARGET_LINE_COLOR, dash="dash", width=1.5),
            annotation_text=f"Target {target_distance:g} m",
            annotation_position="top left",
        )
        fig.update_layout(
            title=dict(text="Route Distances", x=0.5),
            xaxis=dict(title="Route"),
            yaxis=dict(title="Distance (m)", showgrid=True, gridcolor="rgba(200, 200, 200, 0.3)"),
            width=self.width,
            height=self.height,
            margin=dict(l=50, r=30, t=50, b=40),
            plot_bgcolor="white",
        )
        return fig

    def _empty_figure(self, message: str) -> go.Figure:
        """Create empty figure with message."""
        fig = go.Figure()
        fig.add_annotation(
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            text=message,
            showarrow=False,
            font=dict(size=14, color="gray"),
        )
        fig.update_layout(
            width=self.width,
            height=self.height,
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            plot_bgcolor="white",
        )
        return fig
