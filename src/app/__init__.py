"""
Módulo de la aplicación principal.
Contiene el controlador que integra todos los componentes y la ventana
de escritorio.
"""

from .controller import MagicCalculatorController
from .assets import AssetCache

__all__ = ['MagicCalculatorController', 'AssetCache']
