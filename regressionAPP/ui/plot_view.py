"""
Віджети з графіками matplotlib для моделі y = b.

    - DataPlot : точки даних, лінія моделі y = b, стовпчики залишків;
    - MsePlot  : крива MSE(b), поточна точка (b, MSE), оптимум b*
                 та слід відвіданих під час спуску значень b;
    - PlotView : обидва графіки поруч (головна вкладка).

На кожному тіку анімації оновлюються лише дані ліній (set_data),
а полотно перемальовується через draw_idle().
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np
from PyQt6.QtWidgets import QWidget, QHBoxLayout

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from regressionAPP.core.dataset import Dataset
from regressionAPP.core.history import HistoryEntry
from regressionAPP.core.metrics import B_MAX, B_MIN, b_range, model_line, mse, mse_curve, optimal_b
from regressionAPP.core.residuals import residual_segments
from .styles import MARGIN, SPACING, apply_card_style, PALETTE

_CANVAS_BG = PALETTE.surface
_TEXT = PALETTE.text_main
_MUTED = PALETTE.text_muted


class PlotPage:
    def __init__(self, figure: Figure, canvas: FigureCanvas, axes):
        self.figure = figure
        self.canvas = canvas
        self.axes = axes


def create_page() -> PlotPage:
    figure = Figure(facecolor=_CANVAS_BG)
    ax = figure.add_subplot(111)
    canvas = FigureCanvas(figure)
    canvas.setStyleSheet("background-color: transparent;")
    return PlotPage(figure, canvas, ax)


def style_2d_axes(ax) -> None:
    ax.set_facecolor(_CANVAS_BG)
    ax.tick_params(colors=_MUTED, labelsize=9)
    for spine in ax.spines.values():
        spine.set_color(PALETTE.border)
        spine.set_linewidth(0.8)
    ax.grid(True, color=PALETTE.border, linestyle="--", linewidth=0.5, alpha=0.6)
    ax.title.set_color(_TEXT)
    ax.xaxis.label.set_color(_TEXT)
    ax.yaxis.label.set_color(_TEXT)


# ---------------------------------------------------------------------------
# Графік даних
# ---------------------------------------------------------------------------

class DataPlot(QWidget):
    def __init__(
        self,
        parent: Optional[QWidget] = None,
        point_color: str = PALETTE.accent,
        model_color: str = PALETTE.model,
        show_residuals: bool = True,
        title: str = "Дані та модель y = b",
    ) -> None:
        super().__init__(parent)
        self.point_color = point_color
        self.model_color = model_color
        self.show_residuals = show_residuals
        self.title = title
        self.dataset: Optional[Dataset] = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.page = create_page()
        layout.addWidget(self.page.canvas)

        self._model_line = None
        self._residuals: Optional[LineCollection] = None

    def set_dataset(self, dataset: Dataset, b: float) -> None:
        self.dataset = dataset
        ax = self.page.axes
        ax.clear()
        style_2d_axes(ax)

        xs, ys = dataset.xs, dataset.ys
        if self.show_residuals:
            self._residuals = LineCollection(
                residual_segments(dataset, b),
                colors=PALETTE.residual,
                linewidths=2,
                linestyles="dashed",
                label="Залишки",
            )
            ax.add_collection(self._residuals)
        else:
            self._residuals = None

        ax.scatter(xs, ys, s=45, color=self.point_color, zorder=4, label="Точки даних")
        (p0, p1) = model_line(dataset, b)
        (self._model_line,) = ax.plot(
            [p0[0], p1[0]], [p0[1], p1[1]],
            linestyle="--", linewidth=2.5, color=self.model_color, label="Модель y = b",
        )

        ax.set_xlim(float(xs.min()) - 3.0, float(xs.max()) + 3.0)
        ax.set_ylim(min(-2.0, float(ys.min()) - 1.0), max(10.0, float(ys.max()) + 2.0))
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title(self.title)
        ax.legend(loc="upper left", fontsize=8)

        self.page.figure.tight_layout()
        self.page.canvas.draw_idle()

    def update_b(self, b: float) -> None:
        if self.dataset is None or self._model_line is None:
            return
        (p0, p1) = model_line(self.dataset, b)
        self._model_line.set_data([p0[0], p1[0]], [p0[1], p1[1]])
        if self._residuals is not None:
            self._residuals.set_segments(residual_segments(self.dataset, b))
        self.page.canvas.draw_idle()


# ---------------------------------------------------------------------------
# Графік MSE(b)
# ---------------------------------------------------------------------------

class MsePlot(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.dataset: Optional[Dataset] = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.page = create_page()
        layout.addWidget(self.page.canvas)

        self._current = None
        self._trail = None

    def set_dataset(self, dataset: Dataset, b: float) -> None:
        self.dataset = dataset
        ax = self.page.axes
        ax.clear()
        style_2d_axes(ax)

        bs = b_range(B_MIN, B_MAX, 50)
        curve = mse_curve(dataset, bs)
        b_star = optimal_b(dataset)

        ax.plot(bs, curve, linewidth=2, color=PALETTE.accent, label="MSE(b)")
        (self._trail,) = ax.plot(
            [], [], linestyle=":", marker="o", markersize=3,
            color=PALETTE.text_muted, label="Траєкторія спуску",
        )
        ax.scatter(
            [b_star], [mse(dataset, b_star)],
            marker="*", s=160, color=PALETTE.optimum, zorder=5, label="Оптимум b*",
        )
        (self._current,) = ax.plot(
            [b], [mse(dataset, b)],
            marker="o", markersize=9, linestyle="none", color=PALETTE.model,
            zorder=6, label="Поточне (b, MSE)",
        )

        ax.set_xlim(B_MIN, B_MAX)
        ax.set_ylim(0.0, float(curve.max()) * 1.05)
        ax.set_xlabel("b")
        ax.set_ylabel("MSE(b)")
        ax.set_title("Функція втрат MSE(b)")
        ax.legend(loc="upper center", fontsize=8)

        self.page.figure.tight_layout()
        self.page.canvas.draw_idle()

    def update_b(self, b: float, mse_value: float) -> None:
        if self._current is None:
            return
        self._current.set_data([b], [mse_value])
        self.page.canvas.draw_idle()

    def set_trail(self, history: List[HistoryEntry]) -> None:
        if self._trail is None:
            return
        self._trail.set_data([e.b for e in history], [e.mse for e in history])
        self.page.canvas.draw_idle()

    def trail_points(self) -> np.ndarray:
        if self._trail is None:
            return np.empty((0, 2))
        xs, ys = self._trail.get_data()
        return np.column_stack([np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)])


# ---------------------------------------------------------------------------
# Головна панель графіків
# ---------------------------------------------------------------------------

class PlotView(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("plotView")
        self._history: List[HistoryEntry] = []

        layout = QHBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)
        apply_card_style(self)

        self.data_plot = DataPlot(self)
        self.mse_plot = MsePlot(self)
        layout.addWidget(self.data_plot, stretch=1)
        layout.addWidget(self.mse_plot, stretch=1)

    def set_dataset(self, dataset: Dataset, b: float) -> None:
        self.data_plot.set_dataset(dataset, b)
        self.mse_plot.set_dataset(dataset, b)
        self.mse_plot.set_trail(self._history)

    def update_b(self, b: float, mse_value: float) -> None:
        self.data_plot.update_b(b)
        self.mse_plot.update_b(b, mse_value)

    def add_trail_entry(self, entry: HistoryEntry) -> None:
        self._history.append(entry)
        self.mse_plot.set_trail(self._history)

    def clear_trail(self) -> None:
        self._history = []
        self.mse_plot.set_trail(self._history)
