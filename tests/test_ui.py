"""Test the calculator window end to end (offscreen Qt).

Test cases:
    - initial window shows the default results
    - typing into the fields updates the store and the labels
    - preset buttons rewrite the target density field
    - mode tab switches the page and the preview grid
    - degenerate input is displayed, not rejected

Run:
    pytest tests/test_ui.py -v
"""
import pytest

from texelarchitect.app.ui import main_window
from texelarchitect.app.ui.main_window import MainWindow
from texelarchitect.model.density import QualityTier
from texelarchitect.model.state import Mode


@pytest.fixture
def window(qapp, store):
    win = MainWindow(store)
    yield win
    win.close()
    win.deleteLater()


@pytest.fixture
def panel(window):
    return window.work_area.calculator


def test_initial_display(panel, window):
    assert panel.object_size_edit.text() == "100"
    assert panel.resolution_combo.currentText() == "2048 x 2048"
    assert panel.target_density_edit.text() == "10.24"
    assert panel.density_value.text() == "20.48"
    assert QualityTier.HIGH.color in panel.density_value.styleSheet()
    assert panel.texture_size_value.text() == "1024"
    assert "1024" in panel.recommendation_label.text()
    assert window.work_area.preview.cell_size_px == pytest.approx(204.8)


def test_edit_object_size(panel, store):
    panel.object_size_edit.setText("200")
    panel.object_size_edit.textEdited.emit("200")

    assert store.state.inputs.object_size_cm == 200.0
    assert panel.density_value.text() == "10.24"
    assert QualityTier.GOOD.color in panel.density_value.styleSheet()


def test_select_resolution(panel, store):
    panel.resolution_combo.setCurrentIndex(0)

    assert store.state.inputs.texture_size_px == 512
    assert panel.density_value.text() == "5.12"
    assert QualityTier.MEDIUM.color in panel.density_value.styleSheet()


def test_mode_tab_switches_page_and_grid(panel, store, window):
    store.set_target_density(2.56)
    panel.tabs.setCurrentIndex(1)

    assert store.mode == Mode.SIZE
    assert panel.stack.currentWidget() is panel.page_size
    assert window.work_area.preview.cell_size_px == pytest.approx(25.6)
    assert panel.object_size_edit.text() == "100"


def test_preset_button_updates_target_field(panel, store):
    panel.tabs.setCurrentIndex(1)
    panel.preset_buttons["Third Person"].click()

    assert store.state.inputs.target_density == 5.12
    assert panel.target_density_edit.text() == "5.12"
    assert panel.texture_size_value.text() == "512"


def test_recommendation_uses_log_space(panel, store):
    store.set_mode(Mode.SIZE)
    panel.target_density_edit.setText("15")
    panel.target_density_edit.textEdited.emit("15")

    assert panel.texture_size_value.text() == "1500"
    assert "<b>2048</b>" in panel.recommendation_label.text()


def test_garbage_input_is_shown_not_rejected(panel, store, window):
    panel.object_size_edit.setText("abc")
    panel.object_size_edit.textEdited.emit("abc")

    assert panel.density_value.text() == "nan"
    # the user's text is left alone
    assert panel.object_size_edit.text() == "abc"
    assert window.work_area.preview.line_count == 0


def test_zero_object_size_shows_inf(panel):
    panel.object_size_edit.setText("0")
    panel.object_size_edit.textEdited.emit("0")

    assert panel.density_value.text() == "inf"


def test_external_mode_change_syncs_tabs(panel, store):
    store.set_mode(Mode.SIZE)
    assert panel.tabs.currentIndex() == 1
    store.reset()
    assert panel.tabs.currentIndex() == 0
    assert panel.stack.currentWidget() is panel.page_density


def test_open_link_uses_desktop_services(window, monkeypatch):
    opened = []

    class FakeDesktopServices:
        @staticmethod
        def openUrl(url):
            opened.append(url.toString())
            return True

    monkeypatch.setattr(main_window, "QDesktopServices", FakeDesktopServices)
    window.btn_pro.click()
    window.btn_donate.click()

    assert opened == ["https://gumroad.com/l/YOURPRODUCTLINK", "https://ko-fi.com/shawn_dis"]
