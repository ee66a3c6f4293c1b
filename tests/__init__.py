"""
Suite de tests de la calculadora mágica.

Contiene:
- tests/unit/ : Tests unitarios por módulo y del controlador completo
"""
