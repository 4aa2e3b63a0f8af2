# steel_nesting/plotting.py
# Minimal matplotlib visualization: one panel per material group,
# one horizontal strip per stock bar, pieces drawn left to right.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .types import MaterialGroup, NestingResult
from .units import format_feet_inches


@dataclass(frozen=True)
class PlotStyle:
    show_labels: bool = True
    show_dims: bool = True
    show_kerf: bool = True
    show_grid: bool = False
    font_size: int = 7
    bar_height: float = 0.6   # strip height in row units
    row_inches: float = 0.45  # figure height per stock bar


def _hash_color(key: str) -> Tuple[float, float, float]:
    """Deterministic pastel-ish color from a string."""
    h = 2166136261
    for ch in key.encode("utf-8"):
        h ^= ch
        h *= 16777619
        h &= 0xFFFFFFFF
    # map to [0.3..0.9] range for readability
    r = 0.3 + ((h >> 0) & 0xFF) / 255 * 0.6
    g = 0.3 + ((h >> 8) & 0xFF) / 255 * 0.6
    b = 0.3 + ((h >> 16) & 0xFF) / 255 * 0.6
    return (r, g, b)


def _group_title(group: MaterialGroup) -> str:
    bits = [group.label(), f"{group.total_stock_lengths} bars", f"waste {group.total_waste_percentage:.2f}%"]
    if group.coating_system:
        bits.insert(1, group.coating_system)
    return " | ".join(bits)


def _draw_group(ax: plt.Axes, group: MaterialGroup, kerf: float, style: PlotStyle) -> None:
    bars = group.stock_lengths
    stock_in = bars[0].capacity_inches if bars else 0

    for row, bar in enumerate(bars):
        y = len(bars) - 1 - row  # first bar on top
        y0 = y - style.bar_height / 2

        ax.add_patch(Rectangle((0, y0), bar.capacity_inches, style.bar_height, fill=False, linewidth=1.0))

        x = 0.0
        for piece in bar.pieces:
            color = _hash_color(piece.line_id or piece.item_description)
            ax.add_patch(
                Rectangle((x, y0), piece.length_inches, style.bar_height,
                          facecolor=color, edgecolor="black", linewidth=0.6)
            )
            if style.show_labels or style.show_dims:
                lines: List[str] = []
                if style.show_labels and piece.line_id:
                    lines.append(piece.line_id)
                if style.show_dims:
                    lines.append(format_feet_inches(piece.length_inches))
                ax.text(
                    x + piece.length_inches / 2,
                    y,
                    "\n".join(lines),
                    ha="center",
                    va="center",
                    fontsize=style.font_size,
                    color="black",
                )
            x += piece.length_inches
            if style.show_kerf and kerf > 0:
                ax.add_patch(Rectangle((x, y0), kerf, style.bar_height, facecolor="black", linewidth=0))
            x += kerf

        if bar.waste_length > 0:
            ax.add_patch(
                Rectangle((bar.used_length, y0), bar.waste_length, style.bar_height,
                          facecolor="white", edgecolor="grey", hatch="//", linewidth=0.4)
            )

    ax.set_yticks(range(len(bars)))
    ax.set_yticklabels([f"#{b.index}" for b in reversed(bars)], fontsize=style.font_size)
    ax.set_xlim(0, stock_in * 1.01 if stock_in else 1)
    ax.set_ylim(-1, len(bars))
    ax.set_xlabel("inches", fontsize=style.font_size)
    ax.set_title(_group_title(group), fontsize=9)
    if style.show_grid:
        ax.grid(True, axis="x", linewidth=0.3)
    else:
        ax.grid(False)


def plot_result(
    result: NestingResult,
    kerf: float = 0.0,
    style: Optional[PlotStyle] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> plt.Figure:
    """
    Draw every material group of a result in one matplotlib figure.
    Pass the kerf used for nesting to draw saw cuts between pieces.
    """
    style = style or PlotStyle()

    n = len(result.groups)
    if n == 0:
        raise ValueError("Result has no groups to plot")

    rows = [max(1, g.total_stock_lengths) for g in result.groups]
    if figsize is None:
        figsize = (11, max(2.5, sum(rows) * style.row_inches + 1.2 * n))

    fig, axes = plt.subplots(n, 1, figsize=figsize, gridspec_kw={"height_ratios": [r + 1 for r in rows]})
    ax_list: List[plt.Axes] = [axes] if n == 1 else list(axes)

    for ax, group in zip(ax_list, result.groups):
        _draw_group(ax, group, kerf, style)

    if result.stock_length_ft is not None:
        fig.suptitle(
            f"Stock {result.stock_length_ft:g}' | {result.total_stock_lengths} bars | "
            f"waste {result.total_waste_percentage:.2f}%",
            fontsize=10,
        )

    fig.tight_layout()
    return fig


def show_result(result: NestingResult, kerf: float = 0.0, style: Optional[PlotStyle] = None) -> None:
    """Convenience wrapper: plot and show."""
    plot_result(result, kerf=kerf, style=style)
    plt.show()


def save_result_png(
    result: NestingResult,
    path: str,
    kerf: float = 0.0,
    style: Optional[PlotStyle] = None,
    dpi: int = 200,
) -> None:
    """Save the cutting diagram to PNG."""
    fig = plot_result(result, kerf=kerf, style=style)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
