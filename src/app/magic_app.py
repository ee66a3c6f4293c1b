"""
Aplicación de escritorio que integra todos los componentes.

Este módulo contiene la clase MagicCalculatorApp: una ventana de OpenCV que
traduce ratón y teclado en eventos del controlador.
"""

import cv2

from app.controller import MagicCalculatorController
from config.settings import MagicConfig
from ui.renderer import UIRenderer, DISPLAY_REGION, HINT_REGION

WINDOW_NAME = 'Calculadora'

# Teclas del teclado físico → tokens de la calculadora
KEY_TOKENS = {
    ord('+'): "add",
    ord('-'): "subtract",
    ord('*'): "multiply",
    ord('x'): "multiply",
    ord('/'): "divide",
    ord('='): "equal",
    13: "equal",                # Enter
    ord('%'): "percent",
    ord('.'): "decimal",
    ord(','): "decimal",
    ord('n'): "toggle_sign",
    ord('c'): "clear",
    8: "clear",                 # Backspace
}
for _digit in range(10):
    KEY_TOKENS[ord(str(_digit))] = f"num_{_digit}"

# Muestras de inclinación simuladas (beta en grados)
FACE_DOWN_BETA = 180.0
FACE_UP_BETA = 0.0


# ============================================================================
class MagicCalculatorApp:
    """
    Aplicación de escritorio de la calculadora mágica.

    Controles:
        - Ratón sobre el teclado: teclas de la calculadora
        - Ratón sobre el display: toques y pulsación larga
        - Ratón sobre "#": pista mientras se mantiene pulsado
        - Teclado: 0-9 + - * / = Enter % . n(±) c Backspace
        - 'f' / 'u': simular pantalla boca abajo / boca arriba
        - 'h': mostrar/ocultar la pista
        - ESC o 'q': salir

    En un escritorio no hay sensores de orientación; las teclas 'f' y 'u'
    inyectan muestras de inclinación en el mismo camino que usaría un
    dispositivo real.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación y crea la ventana.

        Args:
            config (MagicConfig): Configuración (opcional)

        Raises:
            Exception: Si no se puede crear la ventana (entorno sin display)
        """
        self.config = config if config else MagicConfig()
        self.ctrl = MagicCalculatorController(self.config, debug_sink=self._print_debug)
        self.ui = UIRenderer(config=self.config)
        self.pressed_region = None

        try:
            cv2.namedWindow(WINDOW_NAME)
        except cv2.error as e:
            raise Exception(f"Error al abrir ventana: {e}")
        cv2.setMouseCallback(WINDOW_NAME, self.on_mouse)

        print(f"OK Ventana: {self.ui.width}x{self.ui.height}")
        if self.config.long_press_enabled:
            print(f"✓ Pulsación larga ACTIVADA ({self.config.long_press_ms} ms)")

    def _print_debug(self, message):
        if self.config.show_debug:
            print(f"· {message}")

    # ========================================================================
    # ENTRADA
    # ========================================================================
    def on_mouse(self, event, x, y, flags, param):
        """
        Callback de ratón de OpenCV.

        Pulsar sobre el display o la pista abre un par pulsar/soltar que se
        cierra al soltar el botón, aunque el ratón haya salido de la región.
        """
        if event == cv2.EVENT_LBUTTONDOWN:
            region = self.ui.region_at(x, y)
            self.pressed_region = region
            if region == DISPLAY_REGION:
                self.ctrl.display_press()
            elif region == HINT_REGION:
                self.ctrl.hint_press()
            elif region:
                self.ctrl.handle_token(region)

        elif event == cv2.EVENT_LBUTTONUP:
            if self.pressed_region == DISPLAY_REGION:
                self.ctrl.display_release()
            elif self.pressed_region == HINT_REGION:
                self.ctrl.hint_release()
            self.pressed_region = None

    def on_key(self, key):
        """
        Procesa una tecla.

        Returns:
            bool: False si hay que salir
        """
        if key == 27 or key == ord('q'):
            return False

        if key == ord('f'):
            self.ctrl.on_tilt(beta=FACE_DOWN_BETA)
        elif key == ord('u'):
            self.ctrl.on_tilt(beta=FACE_UP_BETA)
        elif key == ord('h'):
            if self.ctrl.hint:
                self.ctrl.hint_release()
            else:
                self.ctrl.hint_press()
        elif key in KEY_TOKENS:
            self.ctrl.handle_token(KEY_TOKENS[key])
        return True

    # ========================================================================
    # BUCLE PRINCIPAL
    # ========================================================================
    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Ejecutar tareas vencidas (ventana de toques, destello, pulsación larga)
            2. Renderizar display y teclado
            3. Mostrar frame y procesar teclado
            4. Repetir hasta ESC o 'q'
        """
        print("\n" + "="*50)
        print("CALCULADORA")
        print("="*50)
        print("\nRaton o teclado: 0-9 + - * / = % . n c")
        print("'f' boca abajo | 'u' boca arriba | 'h' pista")
        print("\nPresiona ESC o 'q' para salir")
        print("="*50 + "\n")

        while True:
            self.ctrl.tick()
            frame = self.ui.render(self.ctrl)
            cv2.imshow(WINDOW_NAME, frame)

            key = cv2.waitKey(15) & 0xFF
            if key != 0xFF and not self.on_key(key):
                break

        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
