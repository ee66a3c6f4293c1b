"""Tests para el renderizador (sin abrir ventanas)."""

import pytest

from app.controller import MagicCalculatorController
from config.settings import MagicConfig
from ui.renderer import DISPLAY_REGION, HINT_REGION, UIRenderer


@pytest.fixture
def ui():
    return UIRenderer(width=400, height=730, config=MagicConfig())


class TestRegions:
    """Tests de traducción de posiciones a regiones."""

    def test_display_region(self, ui):
        assert ui.region_at(200, 50) == DISPLAY_REGION

    def test_keypad_tokens(self, ui):
        # Celdas de 100 x 100 bajo un display de 230 px
        assert ui.region_at(50, 280) == "clear"
        assert ui.region_at(350, 280) == "divide"
        assert ui.region_at(150, 380) == "num_8"
        assert ui.region_at(350, 680) == "equal"

    def test_hint_region(self, ui):
        assert ui.region_at(50, 680) == HINT_REGION

    def test_outside_window(self, ui):
        assert ui.region_at(-1, 10) is None
        assert ui.region_at(10, 900) is None


class TestRender:

    def test_frame_shape(self, ui):
        ctrl = MagicCalculatorController(MagicConfig())
        frame = ui.render(ctrl)
        assert frame.shape == (730, 400, 3)

    def test_render_with_hint_history_and_flash(self, ui):
        ctrl = MagicCalculatorController(MagicConfig())
        for token in ("num_1", "num_2", "multiply"):
            ctrl.handle_token(token)
        ctrl.hint_press()
        ctrl.flashing = True
        ctrl.debug("línea de prueba")
        frame = ui.render(ctrl)
        assert frame[5, 390].tolist() == [255, 255, 255]
