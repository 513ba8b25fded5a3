"""Shared test fixtures for the regression demo test suite.

Provides a session-wide QApplication (offscreen), the demo dataset
and a manual-clock scheduler for animator/controller tests.
"""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
from PyQt6.QtWidgets import QApplication

from regressionAPP.core.animator import ManualScheduler, TrajectoryAnimator
from regressionAPP.core.dataset import main_dataset as make_main_dataset


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication, shared by all GUI tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture
def main_dataset():
    """Demo dataset {(2, 2.5), (7, 6.5)}; b* = 4.5."""
    return make_main_dataset()


@pytest.fixture
def manual_scheduler():
    return ManualScheduler()


@pytest.fixture
def animator(manual_scheduler):
    return TrajectoryAnimator(manual_scheduler)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


class RecordingSink:
    """DisplaySink that records every call for assertions."""

    def __init__(self):
        self.shown = []
        self.entries = []
        self.modes = []
        self.clears = 0

    def show_b(self, b, mse):
        self.shown.append((b, mse))

    def add_history_entry(self, entry):
        self.entries.append(entry)

    def clear_history(self):
        self.clears += 1
        self.entries = []

    def set_mode(self, mode):
        self.modes.append(mode)


@pytest.fixture
def recording_sink():
    return RecordingSink()
