"""
Módulo de configuración.
Contiene los umbrales y tiempos de la calculadora mágica.
"""

from .settings import MagicConfig

__all__ = ['MagicConfig']
