"""Fixtures compartidas: relojes falsos y controlador con fecha fija."""

from datetime import datetime

import pytest

from app.controller import MagicCalculatorController
from config.settings import MagicConfig


class FakeClock:
    """Reloj monotónico controlado a mano."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return MagicConfig()


@pytest.fixture
def fixed_time():
    """4 de julio, 09:30 → número mágico 7040931."""
    return datetime(2025, 7, 4, 9, 30, 12)


@pytest.fixture
def controller(config, clock, fixed_time):
    return MagicCalculatorController(config, clock=clock, wall_clock=lambda: fixed_time)
