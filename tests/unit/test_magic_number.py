"""Tests para el número mágico.

Coverage:
- Empaquetado MDDHHMM con desplazamiento de minuto
- Diferencia con y sin valor absoluto
- Pista de dígitos y operación
"""

from datetime import datetime

import pytest

from config.settings import MagicConfig
from core.magic_number import (
    MagicNumberDeriver,
    compose_magic_number,
    compute_hint,
    compute_reveal,
)


class TestComposeMagicNumber:
    """Tests de compose_magic_number."""

    def test_single_digit_month(self):
        """4 de julio 09:30 → "7" + "04" + "09" + "31"."""
        assert compose_magic_number(datetime(2025, 7, 4, 9, 30)) == 7040931

    def test_two_digit_month(self):
        assert compose_magic_number(datetime(2025, 12, 25, 23, 5)) == 12252306

    def test_minute_offset_does_not_roll_over(self):
        """El minuto 59 + 1 se escribe "60"."""
        assert compose_magic_number(datetime(2025, 1, 1, 0, 59)) == 1010060

    def test_custom_offset(self):
        assert compose_magic_number(datetime(2025, 3, 9, 14, 7), minute_offset=0) == 3091407


class TestComputeReveal:
    """Tests de compute_reveal."""

    def test_positive_delta(self):
        assert compute_reveal(7040931, 1234) == 7039697

    def test_negative_delta_made_absolute(self):
        assert compute_reveal(7040931, 8000000) == 959069

    def test_signed_policy(self):
        assert compute_reveal(7040931, 8000000, absolute=False) == -959069


class TestComputeHint:

    def test_add_hint(self):
        assert compute_hint(7040931, 1234) == (7, "add")

    def test_subtract_hint(self):
        assert compute_hint(7040931, 7041000) == (2, "subtract")

    def test_fractional_hint_counts_point(self):
        """Con decimales el punto cuenta como un carácter más."""
        assert compute_hint(7040931, 0.5) == (9, "add")
        assert compute_hint(7040931, 7040931.25) == (4, "subtract")


class TestMagicNumberDeriver:
    """Tests del derivador con reloj fijo."""

    def test_reveal_is_deterministic(self, fixed_time):
        """Display 1234 a las 09:30 del 4 de julio → "7,039,697"."""
        deriver = MagicNumberDeriver(MagicConfig(), clock=lambda: fixed_time)
        text, magic, shown = deriver.reveal("1,234")
        assert magic == 7040931
        assert shown == 1234
        assert text == "7,039,697"

    def test_unparseable_display_counts_as_zero(self, fixed_time):
        deriver = MagicNumberDeriver(MagicConfig(), clock=lambda: fixed_time)
        text, _, shown = deriver.reveal("-")
        assert shown == 0
        assert text == "7,040,931"

    def test_signed_policy_from_config(self, fixed_time):
        config = MagicConfig()
        config.absolute_delta = False
        deriver = MagicNumberDeriver(config, clock=lambda: fixed_time)
        text, _, _ = deriver.reveal("8,000,000")
        assert text == "-959,069"

    def test_decimal_display(self, fixed_time):
        deriver = MagicNumberDeriver(MagicConfig(), clock=lambda: fixed_time)
        text, _, _ = deriver.reveal("0.5")
        assert text == "7,040,930.5"

    def test_default_clock_is_now(self):
        deriver = MagicNumberDeriver(MagicConfig())
        assert deriver.magic_number() > 1010000
