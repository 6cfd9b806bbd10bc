"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from nextblock.renderers.plotly_2d import tide_series
from nextblock.telescope import Telescope

_ROOT = Path(__file__).parent.parent.parent.parent


def render_tide_chart(telescope: Telescope, span: int = 144, chart_size: int = 10) -> Figure:
    """Render the tide around a Telescope's block as a static matplotlib image.

    Args:
        telescope: Fully assembled readouts for one block.
        span: Blocks shown either side of the observed block.
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    blocks, tides = tide_series(telescope.height, span)

    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 3))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    ax.axhline(0, color="#334466", linewidth=0.5, zorder=1)
    ax.plot(blocks, tides, color="#7ec8e3", linewidth=1.0, zorder=2)
    ax.scatter(
        [telescope.height],
        [telescope.tidal.tide_height()],
        s=40,
        color="white",
        linewidths=0,
        zorder=3,
    )

    ax.set_title(telescope.formatted_date(), color="white")
    ax.set_xlim(blocks[0], blocks[-1])
    ax.tick_params(colors="#aaaaaa")
    for spine in ax.spines.values():
        spine.set_visible(False)

    return fig


def save_tide_chart(telescope: Telescope, output_path: Path | None = None) -> Path:
    """Save a Telescope's tide chart as a PNG file.

    Args:
        telescope: Fully assembled readouts for one block.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = _ROOT / "results" / f"{telescope.formatted_date()}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_tide_chart(telescope)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
