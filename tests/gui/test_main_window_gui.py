import numpy as np
import pytest

from regressionAPP.core.dataset import main_dataset
from regressionAPP.core.history import ControllerMode, HistoryEntry
from regressionAPP.ui.main_window import MainWindow


@pytest.fixture
def window(qapp):
    win = MainWindow(rng=np.random.default_rng(0))
    win.set_dataset(main_dataset(), 3.0)
    yield win
    win.close()
    win.deleteLater()


def test_window_has_three_tabs(window) -> None:
    titles = [window.tabs.tabText(i) for i in range(window.tabs.count())]
    assert titles == ["Градієнтний спуск", "Практика", "Перевірка розуміння"]


def test_show_b_updates_panel_and_residuals(window) -> None:
    window.show_b(4.5, 4.0)

    assert window.control_panel.label_b.text() == "4.50"
    assert window.control_panel.label_mse.text() == "4.0000"
    assert window.control_panel.slider_b.value() == 450
    # two data rows + MSE summary row
    assert window.residual_view.table.rowCount() == 3
    assert window.residual_view.formula.text().endswith("= 4.0000")


def test_show_b_clamps_slider_outside_range(window) -> None:
    window.show_b(18.0, 1.0)
    assert window.control_panel.slider_b.value() == 1000
    assert window.control_panel.label_b.text() == "18.00"


def test_history_entries_and_trail(window) -> None:
    window.add_history_entry(HistoryEntry(iteration=0, b=3.0, mse=6.25, gradient=-3.0))
    window.add_history_entry(HistoryEntry(iteration=1, b=3.3, mse=5.05, gradient=-2.4))

    assert window.history_table.row_count() == 2
    assert window.history_table.table.item(1, 1).text() == "3.3000"
    assert window.plot_view.mse_plot.trail_points().shape == (2, 2)

    window.clear_history()
    assert window.history_table.row_count() == 0
    assert window.plot_view.mse_plot.trail_points().shape == (0, 2)


def test_set_mode_toggles_controls(window) -> None:
    panel = window.control_panel

    window.set_mode(ControllerMode.RUNNING)
    assert not panel.button_run.isEnabled()
    assert not panel.slider_b.isEnabled()
    assert panel.button_stop.isEnabled()

    window.set_mode(ControllerMode.IDLE)
    assert panel.button_run.isEnabled()
    assert not panel.button_stop.isEnabled()


def test_programmatic_show_b_does_not_emit_b_changed(window) -> None:
    emitted = []
    window.control_panel.bChanged.connect(emitted.append)
    window.show_b(1.0, 1.0)
    assert emitted == []

    window.control_panel.slider_b.setValue(250)
    assert emitted == [2.5]


def test_concept_cards_toggle_answer(window) -> None:
    cards = window.concept_panel.cards
    assert len(cards) == 4

    card = cards[0]
    assert card.answer.isHidden()
    card.toggle()
    assert not card.answer.isHidden()
    card.toggle()
    assert card.answer.isHidden()


def test_practice_panel_reveal_solution(window) -> None:
    practice = window.practice_panel
    assert practice.current_b() == 3.0
    assert practice.label_optimal.isHidden()

    practice.reveal_solution()
    b_star = float(np.mean(practice.dataset.ys))
    assert not practice.label_optimal.isHidden()
    assert practice.current_b() == pytest.approx(b_star, abs=0.01)

    practice.new_dataset()
    assert practice.label_optimal.isHidden()
    assert practice.current_b() == 3.0
