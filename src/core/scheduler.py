"""
Programador de tareas diferidas y cancelables.

Sustituye las cadenas de temporizadores por tareas con nombre: programar una
tarea con un nombre ya pendiente cancela siempre la anterior, de modo que hay
como máximo una tarea pendiente por propósito (ventana de toques, destello,
pulsación larga).
"""

import time


class ScheduledTask:
    """Tarea de un solo disparo pendiente en el programador."""

    def __init__(self, name, deadline, callback):
        self.name = name
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


# ============================================================================
# CLASE: TaskScheduler
# Propósito: Temporizadores cooperativos de un solo hilo
# Responsabilidades:
#   - Guardar una tarea pendiente por nombre
#   - Cancelar y reprogramar de forma explícita
#   - Ejecutar las tareas vencidas en orden de vencimiento
# ============================================================================
class TaskScheduler:
    """
    Programador cooperativo sondeado desde el bucle principal.

    No crea hilos: las tareas vencidas se ejecutan completas dentro de
    run_pending(), que el bucle de la aplicación llama en cada frame.
    Los tests inyectan un reloj falso para controlar el tiempo.
    """

    def __init__(self, clock=None):
        """
        Args:
            clock (callable): Función que retorna segundos monotónicos
                              (por defecto time.monotonic)
        """
        self.clock = clock if clock else time.monotonic
        self.tasks = {}

    def schedule(self, name, delay, callback):
        """
        Programa una tarea, cancelando la pendiente con el mismo nombre.

        Args:
            name (str): Propósito de la tarea ("tap_window", "flash", ...)
            delay (float): Segundos hasta el vencimiento
            callback (callable): Función sin argumentos a ejecutar

        Returns:
            ScheduledTask: La tarea programada
        """
        self.cancel(name)
        task = ScheduledTask(name, self.clock() + delay, callback)
        self.tasks[name] = task
        return task

    def cancel(self, name):
        """Cancela la tarea pendiente con ese nombre. Retorna True si existía."""
        task = self.tasks.pop(name, None)
        if task is None:
            return False
        task.cancel()
        return True

    def cancel_all(self):
        for name in list(self.tasks):
            self.cancel(name)

    def is_pending(self, name):
        return name in self.tasks

    def run_pending(self, now=None):
        """
        Ejecuta las tareas vencidas.

        Args:
            now (float): Instante de referencia (por defecto el reloj)

        Returns:
            int: Número de tareas ejecutadas

        Una tarea puede programar otras desde su callback; las que venzan
        dentro del mismo instante se ejecutan en esta misma llamada.
        """
        if now is None:
            now = self.clock()

        executed = 0
        while True:
            due = [t for t in self.tasks.values() if t.deadline <= now]
            if not due:
                return executed

            task = min(due, key=lambda t: t.deadline)
            del self.tasks[task.name]
            if not task.cancelled:
                task.callback()
                executed += 1
