# steel_nesting/test_plotting.py
# Cutting diagram renders headless.

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from steel_nesting.nesting import nest_material  # noqa: E402
from steel_nesting.plotting import PlotStyle, plot_result, save_result_png  # noqa: E402
from steel_nesting.run import run_nesting  # noqa: E402
from steel_nesting.types import EstimatingLine, NestingResult  # noqa: E402


def _result() -> NestingResult:
    lines = [
        EstimatingLine(line_id="A", shape_type="W", size_designation="W12x26", grade="A992",
                       length_ft=9, length_in=6, qty=3),
        EstimatingLine(line_id="B", shape_type="L", size_designation="L4x4x3/8", grade="A36",
                       length_ft=4, length_in=0, qty=2, coating_system="Galv"),
    ]
    return nest_material(lines, stock_length_ft=20, optimize=False)


def test_one_axes_per_group() -> None:
    fig = plot_result(_result(), kerf=0.125)
    assert len(fig.axes) == 2
    plt.close(fig)


def test_single_group_without_labels() -> None:
    res = _result()
    res.groups = res.groups[:1]
    fig = plot_result(res, style=PlotStyle(show_labels=False, show_dims=False, show_kerf=False))
    assert len(fig.axes) == 1
    plt.close(fig)


def test_save_png(tmp_path: Path) -> None:
    path = tmp_path / "cutting.png"
    save_result_png(_result(), str(path), kerf=0.125, dpi=50)
    assert path.exists() and path.stat().st_size > 0


def test_empty_result_cannot_be_plotted() -> None:
    with pytest.raises(ValueError):
        plot_result(NestingResult())


def test_run_nesting_returns_figure() -> None:
    lines = [EstimatingLine(line_id="A", length_ft=10, qty=2)]
    res = run_nesting(lines, show_plot=True)
    assert res.result.total_stock_lengths == 1
    assert res.fig is not None
    plt.close(res.fig)

    assert run_nesting(lines).fig is None
