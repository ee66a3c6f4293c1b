"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el display y el teclado
de la calculadora sobre un lienzo de OpenCV.
"""

import unicodedata

import cv2
import numpy as np

from core.formatter import FONT_LARGE, FONT_MEDIUM, FONT_SMALL

# Escala de fuente de OpenCV para cada tamaño del display
FONT_SCALES = {
    FONT_LARGE: 2.6,
    FONT_MEDIUM: 1.9,
    FONT_SMALL: 1.3,
}

# Disposición del teclado: (etiqueta, token)
KEYPAD = [
    [("C", "clear"), ("+/-", "toggle_sign"), ("%", "percent"), ("/", "divide")],
    [("7", "num_7"), ("8", "num_8"), ("9", "num_9"), ("x", "multiply")],
    [("4", "num_4"), ("5", "num_5"), ("6", "num_6"), ("-", "subtract")],
    [("1", "num_1"), ("2", "num_2"), ("3", "num_3"), ("+", "add")],
    [("#", "hint"), ("0", "num_0"), (".", "decimal"), ("=", "equal")],
]

OPERATOR_TOKENS = {"+": "add", "-": "subtract", "*": "multiply", "/": "divide"}

# Las fuentes Hershey solo dibujan ASCII
ASCII_SYMBOLS = str.maketrans({"\u2212": "-", "\u00d7": "x", "\u00f7": "/"})

DISPLAY_REGION = "display"
HINT_REGION = "hint"


# ============================================================================
class UIRenderer:
    """
    Renderizador de la calculadora mágica.

    Componentes visuales:
        1. Display: historial, número actual con tamaño según longitud
        2. Teclado: 5 filas x 4 columnas, operador activo resaltado
        3. Puntos de pista sobre el dígito y la operación sugeridos
        4. Destello del display tras una revelación
        5. Líneas de depuración opcionales
    """

    def __init__(self, width=420, height=760, config=None):
        """
        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (MagicConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config
        self.display_h = 230
        self.cell_w = width // 4
        self.cell_h = (height - self.display_h) // len(KEYPAD)

    # ========================================================================
    # GEOMETRÍA
    # ========================================================================
    def region_at(self, x, y):
        """
        Traduce una posición del ratón a una región de la interfaz.

        Returns:
            str | None: "display", "hint", un token del teclado o None
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        if y < self.display_h:
            return DISPLAY_REGION

        row = (y - self.display_h) // self.cell_h
        col = x // self.cell_w
        if row >= len(KEYPAD) or col >= 4:
            return None

        token = KEYPAD[row][col][1]
        return HINT_REGION if token == "hint" else token

    def _cell_rect(self, row, col):
        x = col * self.cell_w
        y = self.display_h + row * self.cell_h
        return x, y, self.cell_w, self.cell_h

    # ========================================================================
    # DIBUJO
    # ========================================================================
    def render(self, ctrl):
        """
        Dibuja un frame completo.

        Args:
            ctrl (MagicCalculatorController): Estado actual

        Returns:
            np.array: Imagen BGR lista para cv2.imshow
        """
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.draw_display(img, ctrl)
        self.draw_keypad(img, ctrl)
        if self.config is None or self.config.show_debug:
            self.draw_debug(img, ctrl.debug_lines)
        return img

    def draw_display(self, img, ctrl):
        """
        Dibuja el display con el texto alineado a la derecha.

        Colores:
            - Fondo negro, texto blanco
            - Fondo blanco, texto negro durante el destello
        """
        bg, fg = ((255, 255, 255), (0, 0, 0)) if ctrl.flashing else ((0, 0, 0), (255, 255, 255))
        cv2.rectangle(img, (0, 0), (self.width, self.display_h), bg, -1)

        if ctrl.history:
            self._put_right(img, ctrl.history.translate(ASCII_SYMBOLS), self.display_h - 130, 0.9, (150, 150, 150), 2)

        text = ctrl.display_text
        scale = FONT_SCALES[ctrl.display_tier]
        self._put_right(img, text, self.display_h - 30, scale, fg, 3)

    def draw_keypad(self, img, ctrl):
        active = OPERATOR_TOKENS.get(ctrl.calc.state.operator)
        hinted = set()
        if ctrl.hint:
            digits, operation = ctrl.hint
            hinted = {f"num_{digits}" if digits <= 9 else None, operation}

        for r, row in enumerate(KEYPAD):
            for c, (label, token) in enumerate(row):
                x, y, w, h = self._cell_rect(r, c)
                if token == "clear":
                    label = ctrl.calc.clear_mode()

                if c == 3:
                    color = (255, 255, 255) if token == active else (10, 149, 255)
                elif r == 0:
                    color = (165, 165, 165)
                else:
                    color = (51, 51, 51)

                center = (x + w // 2, y + h // 2)
                cv2.circle(img, center, min(w, h) // 2 - 8, color, -1)

                fg = (10, 149, 255) if token == active else (255, 255, 255)
                size = cv2.getTextSize(label, cv2.FONT_HERSHEY_DUPLEX, 1.2, 2)[0]
                cv2.putText(img, label, (center[0] - size[0] // 2, center[1] + size[1] // 2),
                            cv2.FONT_HERSHEY_DUPLEX, 1.2, fg, 2)

                if token in hinted:
                    cv2.circle(img, (x + w - 18, y + 18), 4, (0, 149, 255), -1)

    def draw_debug(self, img, lines):
        y = 20
        for line in lines:
            line = unicodedata.normalize("NFKD", line).encode("ascii", "ignore").decode()
            cv2.putText(img, line, (10, y), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (0, 200, 0), 1)
            y += 16

    def _put_right(self, img, text, baseline, scale, color, thickness):
        size = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, scale, thickness)[0]
        x = max(10, self.width - 20 - size[0])
        cv2.putText(img, text, (x, baseline), cv2.FONT_HERSHEY_DUPLEX, scale, color, thickness)
