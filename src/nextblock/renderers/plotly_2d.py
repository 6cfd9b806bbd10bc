"""Plotly 2D interactive tide chart renderer.

Draws the tide height over a window of blocks centred on the observed block.
Supports wheel zoom and drag panning along the block axis.
"""

import numpy as np
import plotly.graph_objects as go

from nextblock.telescope import Telescope
from nextblock.tidal import get_tide_height

_BG = "#050a1a"
_LINE_COLOR = "#7ec8e3"
_MARKER_COLOR = "#f0e0b0"
_ZERO_COLOR = "#334466"


def tide_series(height: int, span: int) -> tuple[np.ndarray, np.ndarray]:
    """Sample tide heights for every block in [height - span, height + span]."""
    blocks = np.arange(height - span, height + span + 1)
    tides = np.array([get_tide_height(b) for b in blocks])
    return blocks, tides


def render_tide_chart(telescope: Telescope, span: int = 144) -> go.Figure:
    """Render the tide around a Telescope's block as a Plotly line chart.

    Args:
        telescope: Fully assembled readouts for one block.
        span: Blocks shown either side of the observed block.

    Returns:
        Plotly Figure object.
    """
    blocks, tides = tide_series(telescope.height, span)

    tide_trace = go.Scatter(
        x=blocks,
        y=tides,
        mode="lines",
        line=dict(color=_LINE_COLOR, width=1.5),
        hovertemplate="block %{x}<br>tide %{y:+d}<extra></extra>",
        name="tide",
    )

    current_trace = go.Scatter(
        x=[telescope.height],
        y=[telescope.tidal.tide_height()],
        mode="markers",
        marker=dict(size=10, color=_MARKER_COLOR, line=dict(width=0)),
        hovertext=[telescope.tidal.display()],
        hoverinfo="text",
        name="current",
    )

    fig = go.Figure(data=[tide_trace, current_trace])

    limit = int(np.abs(tides).max()) + 2
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=24, b=0),
        height=320,
        dragmode="pan",
        title=dict(text=telescope.formatted_date(), font=dict(color=_MARKER_COLOR)),
        xaxis=dict(showgrid=False, color="#aaaaaa", tickformat="d"),
        yaxis=dict(
            range=[-limit, limit],
            zeroline=True,
            zerolinecolor=_ZERO_COLOR,
            showgrid=False,
            color="#aaaaaa",
        ),
    )

    # st.plotly_chart call also requires config={"scrollZoom": True}
    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]

    return fig
