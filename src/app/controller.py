"""
Controlador de la calculadora mágica.

Este módulo contiene la clase MagicCalculatorController, que integra el motor
aritmético con el detector de toques, el monitor de orientación, el bloqueo
del teclado y el combinador de seguridad.
"""

from collections import deque

from config.settings import MagicConfig
from core.calculator import Calculator, CLEAR_ALL
from core.formatter import font_tier
from core.lock import LockController, ORIENTATION, LONG_PRESS
from core.magic_number import MagicNumberDeriver
from core.orientation import OrientationMonitor
from core.safety import SafetyCombiner
from core.scheduler import TaskScheduler
from core.tap_debouncer import TapDebouncer


# ============================================================================
class MagicCalculatorController:
    """
    Coordinador de eventos de la calculadora mágica.

    Arquitectura:
        - Calculator: Señuelo aritmético y estado del display
        - TapDebouncer: Toques sobre el display → evento de toque múltiple
        - OrientationMonitor: Inclinación/movimiento → flanco boca abajo
        - SafetyCombiner: Toque múltiple y luego boca abajo → revelación
        - LockController: Descarta el teclado mientras hay un gesto en curso
        - TaskScheduler: Ventana de toques, destello y pulsación larga

    Modelo de ejecución:
        Cada evento externo (tecla, toque, muestra de sensor, tick del reloj)
        se procesa completo antes del siguiente. Los manejadores se registran
        una sola vez aquí y siempre leen el estado compartido.
    """

    FLASH_TASK = "flash"
    LONG_PRESS_TASK = "long_press"

    def __init__(self, config=None, clock=None, wall_clock=None, debug_sink=None):
        """
        Args:
            config (MagicConfig): Configuración (opcional)
            clock (callable): Reloj monotónico en segundos (tests)
            wall_clock (callable): Fecha local para el número mágico (tests)
            debug_sink (callable): Recibe cada línea de diagnóstico
        """
        self.config = config if config else MagicConfig()
        self.debug_sink = debug_sink
        self.debug_lines = deque(maxlen=self.config.debug_history)

        self.scheduler = TaskScheduler(clock)
        self.calc = Calculator(self.config)
        self.lock = LockController(debug=self.debug)
        self.safety = SafetyCombiner(self._reveal, self.lock, debug=self.debug)
        self.taps = TapDebouncer(self.scheduler, self.safety.on_multi_tap,
                                 window=self.config.get_tap_window_s(),
                                 min_taps=self.config.min_taps)
        self.orientation = OrientationMonitor(self._on_face_down, self._on_face_up,
                                              self.config, debug=self.debug)
        self.deriver = MagicNumberDeriver(self.config, wall_clock)

        self.flashing = False
        self.hint = None                # (dígitos, "add"/"subtract") mientras se pulsa
        self.display_pressed = False
        self.reveal_count = 0

    # ========================================================================
    # TECLADO
    # ========================================================================
    def handle_token(self, token):
        """
        Procesa un token del teclado.

        Args:
            token (str): Token de la calculadora ("num_5", "add", "clear", ...)

        Returns:
            bool: True si el token llegó al motor

        Con el teclado bloqueado el token se descarta antes del motor.
        Un AC también desarma el combinador y cancela las tareas pendientes.
        """
        if self.lock.locked:
            return False

        if token == "clear":
            if self.calc.clear() == CLEAR_ALL:
                self._clear_all_gestures()
            return True

        return self.calc.apply(token)

    def _clear_all_gestures(self):
        self.safety.reset()
        self.taps.reset()
        self.scheduler.cancel_all()
        self.flashing = False

    # ========================================================================
    # SUPERFICIE DEL DISPLAY (toques y pulsación larga)
    # ========================================================================
    def display_press(self):
        """
        Pulsación sobre el display.

        Cuenta para el doble toque y, si la variante está activa, inicia
        la pulsación larga: bloquea el teclado y programa la revelación.
        """
        if self.display_pressed:
            return
        self.display_pressed = True
        self.taps.press()

        if self.config.long_press_enabled and self.lock.lock(LONG_PRESS):
            self.scheduler.schedule(self.LONG_PRESS_TASK,
                                    self.config.get_long_press_s(),
                                    self._long_press_elapsed)

    def display_release(self):
        if not self.display_pressed:
            return
        self.display_pressed = False
        self.scheduler.cancel(self.LONG_PRESS_TASK)
        self.lock.unlock(LONG_PRESS)

    def _long_press_elapsed(self):
        if self.display_pressed:
            self.debug("pulsación larga completada")
            self.safety.reset()
            self._reveal()

    # ========================================================================
    # PISTA (región de la tecla de calculadora)
    # ========================================================================
    def hint_press(self):
        """Calcula la pista: dígitos de la diferencia y operación a usar."""
        self.hint = self.deriver.hint(self.calc.state.current_input)
        digits, operation = self.hint
        self.debug(f"pista: {digits} dígitos, {operation}")

    def hint_release(self):
        self.hint = None

    # ========================================================================
    # SENSORES
    # ========================================================================
    def on_tilt(self, alpha=None, beta=None, gamma=None):
        return self.orientation.on_tilt(alpha, beta, gamma)

    def on_motion(self, sample):
        return self.orientation.on_motion(sample)

    def _on_face_down(self):
        self.lock.lock(ORIENTATION)
        self.safety.on_face_down()

    def _on_face_up(self):
        self.lock.unlock(ORIENTATION)

    # ========================================================================
    # REVELACIÓN
    # ========================================================================
    def _reveal(self):
        """
        Sustituye el display por el valor derivado de la hora.

        Returns:
            str: Texto mostrado tras la revelación
        """
        text, magic, shown = self.deriver.reveal(self.calc.state.current_input)
        self.calc.set_display(text)
        self.reveal_count += 1
        self.debug(f"número mágico {magic} - {shown:g} = {text}")

        self.flashing = True
        self.scheduler.schedule(self.FLASH_TASK, self.config.get_flash_s(),
                                self._flash_elapsed)
        return text

    def _flash_elapsed(self):
        self.flashing = False

    # ========================================================================
    # RELOJ Y CONSULTA
    # ========================================================================
    def tick(self, now=None):
        """Ejecuta las tareas vencidas. Llamar una vez por frame."""
        return self.scheduler.run_pending(now)

    @property
    def display_text(self):
        return self.calc.get_display()

    @property
    def display_tier(self):
        return font_tier(self.display_text, self.config.max_display_chars)

    @property
    def history(self):
        return self.calc.state.history

    def debug(self, message):
        """Registra una línea de diagnóstico y la reenvía al sumidero."""
        self.debug_lines.append(message)
        if self.debug_sink:
            self.debug_sink(message)
