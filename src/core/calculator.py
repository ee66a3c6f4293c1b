"""
Lógica de calculadora aritmética básica (el señuelo).

Este módulo contiene el estado de la calculadora y la clase Calculator que
aplica cada token del teclado como una transición de estado.
"""

from .formatter import add_commas, format_result, parse_display, plain_number

# Operadores admitidos y su símbolo en el historial
OPERATORS = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
}

HISTORY_SYMBOLS = {
    "+": "+",
    "-": "−",
    "*": "×",
    "/": "÷",
}

CLEAR_ALL = "AC"
BACKSPACE = "C"


class CalculatorState:
    """
    Estado visible de la calculadora.

    Variables de estado:
        - current_input: Texto del operando actual ("0" al inicio)
        - previous_operand: Primer operando pendiente ("" si no hay)
        - operator: Operador pendiente ("" = ninguno, "+", "-", "*", "/")
        - should_reset_display: El próximo dígito empieza un operando nuevo
        - history: Anotación sobre el display ("12+" o "12+3")
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.current_input = "0"
        self.previous_operand = ""
        self.operator = ""
        self.should_reset_display = False
        self.history = ""

    def snapshot(self):
        """Tupla comparable con todo el estado (usada en tests y depuración)."""
        return (self.current_input, self.previous_operand, self.operator,
                self.should_reset_display, self.history)


# ============================================================================
# CLASE: Calculator
# Propósito: Motor aritmético de la calculadora señuelo
# Responsabilidades:
#   - Construir operandos dígito por dígito (máximo 9 dígitos)
#   - Evaluación encadenada de izquierda a derecha, sin precedencia
#   - Porcentaje, cambio de signo, punto decimal
#   - Borrado en dos modos (C = retroceso, AC = todo)
# ============================================================================
class Calculator:
    """
    Motor aritmético con evaluación encadenada.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en current_input
        2. Usuario selecciona operación → current_input pasa a previous_operand
        3. Si ya había una operación pendiente, se resuelve antes
           (3 + 4 × 2 = 14, no 11)
        4. Usuario presiona = → se calcula y el resultado queda en el display

    Nunca lanza excepciones: un texto no numérico vale 0 y dividir por
    cero da 0.
    """

    def __init__(self, config, state=None):
        """
        Args:
            config (MagicConfig): Límites de dígitos y de display
            state (CalculatorState): Estado compartido (se crea si no se pasa)
        """
        self.config = config
        self.state = state if state else CalculatorState()

    # ========================================================================
    # DESPACHO DE TOKENS
    # ========================================================================
    def apply(self, token):
        """
        Aplica un token del teclado.

        Args:
            token (str): "num_0".."num_9", "add", "subtract", "multiply",
                         "divide", "equal", "percent", "toggle_sign",
                         "decimal" o "clear"

        Returns:
            bool: True si el token es conocido

        Tokens desconocidos se ignoran sin modificar el estado.
        """
        if token.startswith("num_"):
            digit = token.split("_", 1)[1]
            if len(digit) != 1 or not digit.isdigit():
                return False
            self.add_digit(digit)
        elif token in OPERATORS:
            self.set_operator(OPERATORS[token])
        elif token == "equal":
            self.calculate()
        elif token == "percent":
            self.percent()
        elif token == "toggle_sign":
            self.toggle_sign()
        elif token == "decimal":
            self.add_decimal()
        elif token == "clear":
            self.clear()
        else:
            return False
        return True

    # ========================================================================
    # ENTRADA DE OPERANDOS
    # ========================================================================
    def add_digit(self, digit):
        """
        Añade un dígito al operando actual.

        Args:
            digit (str | int): Dígito 0-9

        Returns:
            bool: True si se añadió, False si se alcanzó el límite de 9 dígitos

        Un "0" solitario se sustituye por el dígito. Borra el historial.
        """
        state = self.state
        if state.should_reset_display:
            state.current_input = ""
            state.should_reset_display = False

        state.history = ""

        if self.raw_digit_count() >= self.config.max_digits:
            return False

        if state.current_input in ("", "0"):
            state.current_input = str(digit)
        elif state.current_input == "-0":
            state.current_input = "-" + str(digit)
        else:
            state.current_input += str(digit)
        return True

    def add_decimal(self):
        """
        Añade el punto decimal una sola vez.

        Returns:
            bool: True si se añadió

        Tras un resultado o un operador el punto empieza un operando nuevo
        ("0.").
        """
        state = self.state
        if state.should_reset_display:
            state.current_input = "0"
            state.should_reset_display = False
            state.history = ""

        if "." in state.current_input or "e" in state.current_input:
            return False
        state.current_input += "."
        return True

    def raw_digit_count(self):
        return sum(1 for c in self.state.current_input if c.isdigit())

    # ========================================================================
    # OPERACIONES
    # ========================================================================
    def set_operator(self, op):
        """
        Fija la operación pendiente.

        Args:
            op (str): "+", "-", "*" o "/"

        Returns:
            bool: True si se fijó

        Evaluación encadenada: si ya había un operador y se ha escrito un
        segundo operando, se calcula antes de guardar el nuevo operador.
        Si el operando todavía no se ha escrito, el operador se sustituye.
        """
        state = self.state
        if state.current_input == "":
            return False

        if state.previous_operand and state.operator and not state.should_reset_display:
            self.calculate()

        state.operator = op
        state.previous_operand = state.current_input
        state.should_reset_display = True
        state.history = add_commas(state.current_input) + HISTORY_SYMBOLS[op]
        return True

    def calculate(self):
        """
        Resuelve la operación pendiente.

        Returns:
            tuple: (éxito: bool, resultado: str)
                - (True, "14"): Cálculo realizado
                - (False, ""): Falta operando u operador

        Dividir por cero da 0 (comportamiento visible conservado a propósito).
        """
        state = self.state
        if not state.previous_operand or not state.current_input or not state.operator:
            return False, ""

        prev = parse_display(state.previous_operand)
        current = parse_display(state.current_input)

        if state.operator == "+":
            result = prev + current
        elif state.operator == "-":
            result = prev - current
        elif state.operator == "*":
            result = prev * current
        else:
            result = prev / current if current != 0 else 0

        symbol = HISTORY_SYMBOLS[state.operator]
        state.history = f"{plain_number(prev)}{symbol}{plain_number(current)}"

        state.current_input = self.format(result)
        state.previous_operand = ""
        state.operator = ""
        state.should_reset_display = True
        return True, state.current_input

    def percent(self):
        self.state.current_input = self.format(self.displayed_value() / 100)

    def toggle_sign(self):
        """Cambia el signo salvo que el display muestre exactamente "0"."""
        state = self.state
        if state.current_input == "0":
            return
        if state.current_input.startswith("-"):
            state.current_input = state.current_input[1:]
        else:
            state.current_input = "-" + state.current_input

    # ========================================================================
    # BORRADO
    # ========================================================================
    def clear_mode(self):
        """
        Modo del botón de borrado, derivado del estado.

        Returns:
            str: "AC" si la calculadora está en reposo, "C" en otro caso
        """
        state = self.state
        if state.current_input == "0" and not state.previous_operand and not state.operator:
            return CLEAR_ALL
        return BACKSPACE

    def clear(self):
        """
        Borra según el modo activo.

        Returns:
            str: Modo aplicado ("AC" o "C")

        Comportamiento:
            - C: Borra el último carácter; con un solo carácter (o solo el
              signo) vuelve a "0"
            - C sobre un "0" con operación pendiente: descarta la operación,
              de modo que el siguiente borrado es AC
            - AC: Resetea todo el estado de la calculadora
        """
        mode = self.clear_mode()
        if mode == CLEAR_ALL:
            self.state.reset()
            return mode

        if self.state.current_input == "0":
            self.state.previous_operand = ""
            self.state.operator = ""
            return mode

        remaining = self.state.current_input.replace(",", "")[:-1]
        self.state.current_input = remaining if remaining not in ("", "-") else "0"
        return mode

    # ========================================================================
    # CONSULTA
    # ========================================================================
    def format(self, value):
        return format_result(value, self.config.max_display_chars,
                             self.config.exponent_digits)

    def displayed_value(self):
        """Valor numérico del display (0.0 si no es un número válido)."""
        return parse_display(self.state.current_input)

    def get_display(self):
        """Texto del display con separadores de miles."""
        return add_commas(self.state.current_input)

    def set_display(self, text):
        """
        Sustituye el display por un valor calculado fuera del motor.

        Deja la calculadora sin operación pendiente, como tras un "=".
        """
        state = self.state
        state.current_input = text
        state.previous_operand = ""
        state.operator = ""
        state.should_reset_display = True
