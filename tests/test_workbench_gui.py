"""Tests for the DearPyGui error dialog wiring, using a recording stand-in for dpg."""
from __future__ import annotations

from contextlib import contextmanager

import pytest

pytest.importorskip("dearpygui.dearpygui")

from ui import workbench_gui  # noqa: E402


class RecordingDpg:
    def __init__(self) -> None:
        self.deleted: list[object] = []
        self.callbacks: list = []
        self.texts: list[str] = []
        self.values: dict[object, object] = {}

    @contextmanager
    def window(self, **kwargs):
        yield "error-modal"

    def add_text(self, text: str) -> None:
        self.texts.append(text)

    def add_button(self, label: str, callback) -> None:
        self.callbacks.append(callback)

    def delete_item(self, item) -> None:
        self.deleted.append(item)

    def get_value(self, item):
        return self.values[item]

    def set_value(self, item, value) -> None:
        self.values[item] = value


def test_close_button_deletes_its_own_modal(monkeypatch) -> None:
    fake = RecordingDpg()
    monkeypatch.setattr(workbench_gui, "dpg", fake)

    modal = workbench_gui.show_error("[MALFORMED_INPUT] bad hex")
    # Other containers opened later must not change what Close removes.
    with fake.window(label="Other"):
        pass
    fake.callbacks[0]()

    assert modal == "error-modal"
    assert fake.deleted == ["error-modal"]
    assert fake.texts == ["[MALFORMED_INPUT] bad hex"]


def test_failed_run_opens_error_dialog(monkeypatch) -> None:
    fake = RecordingDpg()
    fake.values.update({"input": "zz", "operation": "from_hex", "profile": "default"})
    monkeypatch.setattr(workbench_gui, "dpg", fake)

    workbench_gui.run_selected("input", "operation", "profile", "output", "status")

    assert fake.values["status"] == "Failed"
    assert str(fake.values["output"]).startswith("Error: [MALFORMED_INPUT]")
    assert len(fake.callbacks) == 1
