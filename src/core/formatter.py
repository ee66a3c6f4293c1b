"""
Formateo de resultados para el display de la calculadora.

Convierte valores numéricos en el texto que se muestra (límite de caracteres,
separadores de miles, notación científica) y elige el tamaño de fuente.
"""

import math
import numpy as np


# Tamaños de fuente del display (pistas opacas para el renderizador)
FONT_LARGE = "large"
FONT_MEDIUM = "medium"
FONT_SMALL = "small"

MAX_DISPLAY_CHARS = 9


def plain_number(value):
    """
    Representación decimal más corta de un número, sin exponente.

    Args:
        value (float): Valor a representar

    Returns:
        str: Texto sin ceros finales (42.0 → "42", 0.1 → "0.1")
    """
    value = float(value)
    if value == 0:
        return "0"  # También cubre -0.0
    return np.format_float_positional(value, trim='-')


def add_commas(text):
    """
    Inserta separadores de miles en la parte entera de un número.

    Args:
        text (str): Número en texto, con o sin comas previas

    Returns:
        str: Texto agrupado de 3 en 3 desde el punto decimal hacia la izquierda

    Comportamiento:
        - La parte decimal no se toca
        - Las comas existentes se eliminan antes de agrupar
        - Texto en notación científica se devuelve sin cambios
    """
    if 'e' in text or 'E' in text:
        return text

    integer_part, dot, decimal_part = text.replace(',', '').partition('.')

    sign = ""
    if integer_part.startswith('-'):
        sign, integer_part = '-', integer_part[1:]

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)

    return sign + ",".join(groups) + dot + decimal_part


def format_result(value, max_chars=MAX_DISPLAY_CHARS, exponent_digits=2):
    """
    Formatea un resultado numérico para el display.

    Args:
        value (float): Resultado de una operación
        max_chars (int): Caracteres máximos del texto plano (9)
        exponent_digits (int): Decimales en notación científica

    Returns:
        str: Texto listo para el display

    Reglas:
        1. Valores no finitos (inf, nan) → "0"
        2. Texto plano > 9 caracteres y |valor| ≥ 1e9 → "1.23e+09"
        3. Texto plano > 9 caracteres y |valor| < 1e9 → se redondea a los
           decimales que caben en 9 caracteres, sin ceros finales; si ni
           sin decimales cabe, notación científica ("-1.00e+08")
        4. Resto → separadores de miles ("1234567" → "1,234,567")
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        return "0"

    if not math.isfinite(value):
        return "0"

    text = plain_number(value)
    if len(text) <= max_chars:
        return add_commas(text)

    if abs(value) >= 10 ** max_chars:
        return f"{value:.{exponent_digits}e}"

    # Decimales disponibles: lo que queda tras la parte entera y el punto.
    # El redondeo puede arrastrar un dígito más (99999999.99 → 100000000).
    dot = text.find('.')
    decimals = max(0, max_chars - dot - 1) if dot >= 0 else 0
    while decimals >= 0:
        rounded = round(value, decimals)
        if abs(rounded) >= 10 ** max_chars:
            break
        text = plain_number(rounded)
        if len(text) <= max_chars:
            return text
        decimals -= 1

    return f"{value:.{exponent_digits}e}"


def parse_display(text):
    """
    Convierte el texto del display en número.

    Args:
        text (str): Texto del display ("1,234.5", "1.23e+09", "-")

    Returns:
        float: Valor numérico, 0.0 si el texto no es un número válido
    """
    try:
        value = float(str(text).replace(',', ''))
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def font_tier(text, max_chars=MAX_DISPLAY_CHARS):
    """Tamaño de fuente según la longitud del texto mostrado."""
    if len(text) > max_chars:
        return FONT_SMALL
    if len(text) > 6:
        return FONT_MEDIUM
    return FONT_LARGE
