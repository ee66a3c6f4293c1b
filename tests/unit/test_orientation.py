"""Tests para el monitor de orientación.

Coverage:
- Umbrales de inclinación y aceleración con histéresis
- Flancos (no niveles) compartidos entre dos flujos
- Muestras incompletas
"""

import pytest

from config.settings import MagicConfig
from core.orientation import OrientationMonitor


@pytest.fixture
def edges():
    return []


@pytest.fixture
def monitor(edges):
    return OrientationMonitor(lambda: edges.append("down"), lambda: edges.append("up"),
                              MagicConfig())


def motion(z, key='accelerationIncludingGravity'):
    return {key: {'x': 0.1, 'y': -0.2, 'z': z}}


class TestTilt:
    """Tests del flujo de inclinación."""

    def test_face_down_edge_once(self, monitor, edges):
        """Muestras repetidas boca abajo producen un solo flanco."""
        for beta in (170, 175, -178, 160):
            monitor.on_tilt(0, beta, 0)
        assert edges == ["down"]
        assert monitor.is_screen_down

    def test_face_up_edge(self, monitor, edges):
        monitor.on_tilt(beta=175)
        monitor.on_tilt(beta=10)
        assert edges == ["down", "up"]
        assert not monitor.is_screen_down

    def test_initial_face_up_is_not_an_edge(self, monitor, edges):
        monitor.on_tilt(beta=0)
        assert edges == []

    def test_hysteresis_band(self, monitor, edges):
        """Entre 120° y 150° no cambia el estado en ningún sentido."""
        monitor.on_tilt(beta=140)
        assert edges == []
        monitor.on_tilt(beta=155)
        monitor.on_tilt(beta=135)
        monitor.on_tilt(beta=145)
        assert edges == ["down"]
        monitor.on_tilt(beta=100)
        assert edges == ["down", "up"]

    def test_thresholds_are_inclusive_for_face_up(self, monitor, edges):
        """150° exactos no bastan para boca abajo; 120° exactos ya es boca arriba."""
        assert monitor.tilt_reading(150) is None
        assert monitor.tilt_reading(150.5) is True
        assert monitor.tilt_reading(120.5) is None
        assert monitor.tilt_reading(-120) is False

    def test_legacy_threshold(self, edges):
        config = MagicConfig()
        config.legacy_tilt = True
        monitor = OrientationMonitor(lambda: edges.append("down"),
                                     lambda: edges.append("up"), config)

        monitor.on_tilt(beta=155)
        assert edges == []
        monitor.on_tilt(beta=-161)
        assert edges == ["down"]
        monitor.on_tilt(beta=155)
        assert edges == ["down", "up"]

    @pytest.mark.parametrize("beta", [None, "abc", float("nan"), True])
    def test_missing_beta_ignored(self, monitor, edges, beta):
        assert not monitor.on_tilt(alpha=10, beta=beta, gamma=5)
        assert edges == []


class TestMotion:
    """Tests del flujo de movimiento."""

    def test_z_threshold(self, monitor, edges):
        monitor.on_motion(motion(-9.8))
        assert edges == ["down"]
        monitor.on_motion(motion(-7.0))  # Banda de histéresis
        monitor.on_motion(motion(-1.0))
        monitor.on_motion(motion(5.0))
        assert edges == ["down"]
        monitor.on_motion(motion(9.8))
        assert edges == ["down", "up"]

    def test_gravity_face_up_is_not_face_down(self, monitor, edges):
        """Con gravedad, z ≈ +9.8 es boca arriba aunque |z| supere el umbral."""
        assert monitor.motion_reading(motion(9.8)) is False
        assert monitor.motion_reading(motion(-9.8)) is True
        monitor.on_motion(motion(9.8))
        assert edges == []
        assert not monitor.is_screen_down

    def test_falls_back_to_acceleration(self, monitor, edges):
        """Sin gravedad solo cuenta la magnitud de z."""
        monitor.on_motion(motion(9.0, key='acceleration'))
        assert edges == ["down"]
        monitor.on_motion(motion(-0.3, key='acceleration'))
        assert edges == ["down", "up"]

    def test_prefers_gravity_vector(self, monitor, edges):
        sample = {'acceleration': {'x': 0, 'y': 0, 'z': 0.2},
                  'accelerationIncludingGravity': {'x': 0, 'y': 0, 'z': -9.7}}
        monitor.on_motion(sample)
        assert edges == ["down"]

    @pytest.mark.parametrize("sample", [
        None,
        {},
        {'acceleration': None},
        {'accelerationIncludingGravity': {'x': 1, 'y': 2}},
        {'accelerationIncludingGravity': {'x': 1, 'y': 2, 'z': None}},
    ])
    def test_incomplete_samples_ignored(self, monitor, edges, sample):
        assert not monitor.on_motion(sample)
        assert edges == []


class TestMergedStreams:
    """Ambos flujos comparten un único flag."""

    def test_redundant_detection_counts_once(self, monitor, edges):
        """Inclinación y movimiento detectan el mismo giro: un solo flanco."""
        monitor.on_tilt(beta=178)
        monitor.on_motion(motion(-9.8))
        monitor.on_motion(motion(-9.6))
        monitor.on_tilt(beta=-179)
        assert edges == ["down"]

    def test_either_stream_can_release(self, monitor, edges):
        monitor.on_motion(motion(-9.8))
        monitor.on_tilt(beta=5)
        assert edges == ["down", "up"]

    def test_face_up_streams_agree(self, monitor, edges):
        """Teléfono en reposo boca arriba: ningún par de muestras produce flancos."""
        for _ in range(5):
            monitor.on_tilt(beta=0)
            monitor.on_motion(motion(9.8))
        assert edges == []
        assert not monitor.is_screen_down

    def test_face_down_streams_agree(self, monitor, edges):
        for _ in range(5):
            monitor.on_tilt(beta=179)
            monitor.on_motion(motion(-9.8))
        assert edges == ["down"]
