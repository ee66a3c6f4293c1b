"""
Detector de toques múltiples sobre el display.

Agrupa una ráfaga de pulsaciones en un único evento "N toques" cuando pasa
la ventana de silencio sin nuevas pulsaciones.
"""


class TapDebouncer:
    """
    Contador de toques con una única ventana de silencio cancelable.

    Garantías:
        - Como máximo un evento de toque múltiple por ventana
        - Los toques posteriores al evento empiezan un ciclo nuevo
        - Menos de min_taps toques se descartan en silencio
    """

    TASK_NAME = "tap_window"

    def __init__(self, scheduler, on_multi_tap, window=0.5, min_taps=2):
        """
        Args:
            scheduler (TaskScheduler): Programador compartido
            on_multi_tap (callable): Recibe el número final de toques
            window (float): Ventana de silencio en segundos
            min_taps (int): Toques mínimos para emitir el evento
        """
        self.scheduler = scheduler
        self.on_multi_tap = on_multi_tap
        self.window = window
        self.min_taps = min_taps
        self.tap_count = 0

    def press(self):
        """Registra una pulsación y reinicia la ventana de silencio."""
        self.tap_count += 1
        self.scheduler.schedule(self.TASK_NAME, self.window, self._window_elapsed)

    def _window_elapsed(self):
        count = self.tap_count
        self.tap_count = 0
        if count >= self.min_taps:
            self.on_multi_tap(count)

    def reset(self):
        self.tap_count = 0
        self.scheduler.cancel(self.TASK_NAME)

    @property
    def pending(self):
        return self.scheduler.is_pending(self.TASK_NAME)
