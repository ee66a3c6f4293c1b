"""
Bloqueo del teclado mientras un gesto está en curso.
"""

ORIENTATION = "orientation"
LONG_PRESS = "long_press"


class LockController:
    """
    Bloqueo único del teclado con dueño.

    Mientras locked es True, el controlador descarta todos los tokens del
    teclado antes de que lleguen a la calculadora. Solo el dueño que tomó
    el bloqueo puede liberarlo.
    """

    def __init__(self, debug=None):
        self.locked = False
        self.owner = None
        self.debug = debug

    def lock(self, owner):
        """
        Bloquea el teclado.

        Args:
            owner (str): Origen del bloqueo ("orientation", "long_press")

        Returns:
            bool: True si se tomó el bloqueo, False si ya lo tenía otro dueño
        """
        if self.locked and self.owner != owner:
            return False
        if not self.locked and self.debug:
            self.debug(f"teclado bloqueado ({owner})")
        self.locked = True
        self.owner = owner
        return True

    def unlock(self, owner):
        """Libera el bloqueo si lo tiene este dueño. Retorna True si se liberó."""
        if not self.locked or self.owner != owner:
            return False
        self.locked = False
        self.owner = None
        if self.debug:
            self.debug(f"teclado desbloqueado ({owner})")
        return True

    def held_by_other(self, owner):
        return self.locked and self.owner != owner
