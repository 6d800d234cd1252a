"""Tests for whatday.app.store: signals emitted by SelectionStore."""

from __future__ import annotations

from whatday.app.store import SelectionStore


def record(signal) -> list:
    received: list = []
    signal.connect(lambda value: received.append(value))
    return received


class TestSelectionStore:

    def test_text_signal_on_change(self, qapp, store: SelectionStore) -> None:
        texts = record(store.date_text_changed)
        store.set_day(15)
        assert texts == ["15-05-2024 Wednesday"]
        assert store.displayed_text() == "15-05-2024 Wednesday"

    def test_no_signal_when_value_unchanged(self, qapp, store: SelectionStore) -> None:
        texts = record(store.date_text_changed)
        store.set_day(14)
        store.set_month(5)
        store.set_year(2024)
        assert texts == []

    def test_clamping_emits_range_and_day(self, qapp, store: SelectionStore) -> None:
        store.set_month(1)
        store.set_day(31)
        ranges = record(store.day_range_changed)
        days = record(store.day_changed)
        texts = record(store.date_text_changed)

        store.set_month(2)

        assert ranges == [29]
        assert days == [29]
        assert texts == ["29-02-2024 Thursday"]
        assert store.state.day == 29

    def test_range_signal_without_clamp(self, qapp, store: SelectionStore) -> None:
        ranges = record(store.day_range_changed)
        days = record(store.day_changed)
        store.set_month(4)
        assert ranges == [30]
        assert days == []

    def test_info_panel_toggle_and_close(self, qapp, store: SelectionStore) -> None:
        flags = record(store.info_panel_changed)
        store.toggle_info_panel()
        store.close_info_panel()
        store.close_info_panel()
        assert flags == [True, False]
        assert store.state.info_panel_visible is False
