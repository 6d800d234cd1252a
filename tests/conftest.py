"""Shared fixtures: a headless QApplication for widget tests."""
from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
# QApplication calls setlocale(LC_ALL, ""); LC_ALL wins over every LC_* category
os.environ["LC_ALL"] = "C.UTF-8"

import pytest
from PySide6.QtWidgets import QApplication

from whatday.app.store import SelectionStore
from whatday.config import PROMOTED_APPS_PATH
from whatday.model.catalog import InfoContent, load_info_content
from whatday.model.state import SelectionState


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    return QApplication.instance() or QApplication([])


@pytest.fixture
def store() -> SelectionStore:
    return SelectionStore(SelectionState(year=2024, month=5, day=14))


@pytest.fixture(scope="session")
def catalog() -> InfoContent:
    return load_info_content(PROMOTED_APPS_PATH)
