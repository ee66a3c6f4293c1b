"""
Módulo core con la lógica principal de la calculadora mágica.
Contiene el motor aritmético, el formateo del display y la máquina de
estados que arma la revelación.
"""

from .calculator import Calculator, CalculatorState
from .formatter import format_result, parse_display, font_tier
from .scheduler import TaskScheduler
from .tap_debouncer import TapDebouncer
from .orientation import OrientationMonitor
from .lock import LockController
from .safety import SafetyCombiner
from .magic_number import MagicNumberDeriver, compose_magic_number

__all__ = [
    'Calculator', 'CalculatorState',
    'format_result', 'parse_display', 'font_tier',
    'TaskScheduler', 'TapDebouncer', 'OrientationMonitor',
    'LockController', 'SafetyCombiner',
    'MagicNumberDeriver', 'compose_magic_number',
]
