"""
Combinador de seguridad de dos etapas (disparador mágico).

Este módulo contiene la máquina de estados que decide cuándo se revela el
número mágico: primero el gesto (toque múltiple), después la orientación.
"""

from .lock import ORIENTATION

IDLE = "idle"
FIRST_ARMED = "first_armed"


# ============================================================================
# CLASE: SafetyCombiner
# Propósito: Armar la revelación en dos etapas y dispararla una sola vez
# Responsabilidades:
#   - Armar la primera etapa solo con un toque múltiple
#   - Armar la segunda etapa solo con un flanco boca abajo posterior
#   - Disparar y volver a reposo de forma atómica
#   - Abortar si el teclado está bloqueado por otro camino
# ============================================================================
class SafetyCombiner:
    """
    Máquina de estados Idle → FirstArmed → BothArmed (dispara y vuelve a Idle).

    El orden es causal: un flanco boca abajo con first_armed en False no arma
    nada, aunque después llegue el toque múltiple. El orden lo imponen los
    propios flags, no el reloj, así que los eventos pueden llegar
    intercalados de cualquier forma.

    Garantía de un solo disparo: ambos flags vuelven a False antes de llamar
    a on_fire, por lo que un segundo flanco boca abajo no vuelve a disparar.
    """

    def __init__(self, on_fire, lock, debug=None):
        """
        Args:
            on_fire (callable): Revelación a ejecutar al completar el armado
            lock (LockController): Bloqueo del teclado compartido
            debug (callable): Sumidero opcional de mensajes de diagnóstico
        """
        self.on_fire = on_fire
        self.lock = lock
        self.debug = debug
        self.first_armed = False
        self.second_armed = False
        self.fire_count = 0

    @property
    def phase(self):
        return FIRST_ARMED if self.first_armed else IDLE

    def on_multi_tap(self, count):
        """Primera etapa: el gesto de toque múltiple arma first_armed."""
        if not self.first_armed:
            self.first_armed = True
            self._log(f"primera etapa armada ({count} toques)")

    def on_face_down(self):
        """
        Segunda etapa: flanco boca abajo.

        Returns:
            bool: True si la revelación se disparó
        """
        if not self.first_armed:
            return False

        self.second_armed = True
        return self._try_fire()

    def _try_fire(self):
        if not (self.first_armed and self.second_armed):
            return False

        self.reset()

        if self.lock.held_by_other(ORIENTATION):
            self._log(f"revelación abortada: teclado en uso ({self.lock.owner})")
            return False

        self.fire_count += 1
        self._log("revelación")
        self.on_fire()
        return True

    def reset(self):
        self.first_armed = False
        self.second_armed = False

    def _log(self, message):
        if self.debug:
            self.debug(message)
