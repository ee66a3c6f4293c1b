"""
Cálculo del número mágico.

El número mágico empaqueta la fecha y hora local (mes, día, hora, minuto) en
un entero decimal. La revelación muestra la diferencia entre ese número y el
valor que hay en el display.
"""

from datetime import datetime

from .formatter import format_result, parse_display, plain_number


def compose_magic_number(now, minute_offset=1):
    """
    Empaqueta una fecha en el número mágico MDDHHMM.

    Args:
        now (datetime): Instante de referencia
        minute_offset (int): Minutos que se suman al minuto actual

    Returns:
        int: Número mágico (4 de julio 09:30 con offset 1 → 7040931)

    El mes no lleva cero inicial; día, hora y minuto usan dos dígitos.
    El minuto desplazado no se propaga a la hora (59 + 1 → "60").
    """
    minute = now.minute + minute_offset
    return int(f"{now.month}{now.day:02d}{now.hour:02d}{minute:02d}")


def compute_reveal(magic_number, shown, absolute=True):
    """
    Diferencia entre el número mágico y el valor mostrado.

    Args:
        magic_number (int): Número mágico
        shown (float): Valor actual del display
        absolute (bool): Si es True, una diferencia negativa se vuelve positiva

    Returns:
        float: Valor a mostrar tras la revelación
    """
    delta = magic_number - shown
    if absolute and delta < 0:
        delta = abs(delta)
    return delta


def compute_hint(magic_number, shown):
    """
    Pista para el truco manual: qué sumar o restar para llegar a la hora.

    Args:
        magic_number (int): Número mágico
        shown (float): Valor actual del display

    Returns:
        tuple: (cantidad_de_dígitos, operación)
               operación es "add" si hay que sumar y "subtract" si hay que restar

    Ejemplo:
        Display 1234, número mágico 7040931 → diferencia 7039697 → (7, "add")
    """
    difference = magic_number - shown
    operation = "add" if difference >= 0 else "subtract"
    # Cuenta caracteres del texto plano, punto decimal incluido
    return len(plain_number(abs(difference))), operation


class MagicNumberDeriver:
    """
    Deriva el valor revelado a partir del reloj y del display.

    El reloj es inyectable para que los tests fijen la fecha.
    """

    def __init__(self, config, clock=None):
        """
        Args:
            config (MagicConfig): Desplazamiento de minuto y política de signo
            clock (callable): Función que retorna la fecha local (datetime.now)
        """
        self.config = config
        self.clock = clock if clock else datetime.now

    def magic_number(self):
        return compose_magic_number(self.clock(), self.config.minute_offset)

    def reveal(self, display_text):
        """
        Calcula el texto a mostrar tras la revelación.

        Args:
            display_text (str): Texto actual del display (puede llevar comas)

        Returns:
            tuple: (texto_formateado, número_mágico, valor_mostrado)
        """
        magic = self.magic_number()
        shown = parse_display(display_text)
        delta = compute_reveal(magic, shown, self.config.absolute_delta)
        text = format_result(delta, self.config.max_display_chars,
                             self.config.exponent_digits)
        return text, magic, shown

    def hint(self, display_text):
        return compute_hint(self.magic_number(), parse_display(display_text))
