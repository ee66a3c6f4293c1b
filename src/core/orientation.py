"""
Monitor de orientación del dispositivo.

Combina dos flujos de sensores independientes (inclinación y movimiento) en
una única señal booleana "boca abajo" con detección de flancos.
"""

import math
import numpy as np


# ============================================================================
# CLASE: OrientationMonitor
# Propósito: Detectar el flanco "pantalla boca abajo"
# Responsabilidades:
#   - Reducir cada muestra de sensor a una propuesta (abajo / arriba / nada)
#   - Aplicar histéresis para no oscilar cerca del umbral
#   - Mantener un único flag is_screen_down compartido por ambos flujos
#   - Notificar solo las transiciones, nunca los niveles
# ============================================================================
class OrientationMonitor:
    """
    Detector de flancos de orientación alimentado por dos flujos de sensores.

    Cada flujo solo propone una lectura; el monitor es el único dueño de la
    transición. Si el segundo flujo detecta lo mismo que ya se notificó, la
    propuesta se ignora y el evento físico cuenta una sola vez.

    Propuestas:
        - True: boca abajo con seguridad
        - False: boca arriba con seguridad
        - None: muestra incompleta o dentro de la banda de histéresis
    """

    def __init__(self, on_face_down, on_face_up, config, debug=None):
        """
        Args:
            on_face_down (callable): Flanco arriba → abajo
            on_face_up (callable): Flanco abajo → arriba
            config (MagicConfig): Umbrales de inclinación y aceleración
            debug (callable): Sumidero opcional de mensajes de diagnóstico
        """
        self.on_face_down = on_face_down
        self.on_face_up = on_face_up
        self.config = config
        self.debug = debug
        self.is_screen_down = False

    # ========================================================================
    # LECTURAS DE SENSORES
    # ========================================================================
    def on_tilt(self, alpha=None, beta=None, gamma=None):
        """
        Procesa una muestra de inclinación (grados).

        Solo beta (giro sobre el eje X) decide la orientación: cerca de ±180°
        la pantalla mira al suelo. Alpha y gamma se aceptan pero no se usan.
        """
        return self._propose(self.tilt_reading(beta), "tilt")

    def on_motion(self, sample):
        """
        Procesa una muestra de movimiento.

        Args:
            sample (dict): {'acceleration': {x,y,z},
                            'accelerationIncludingGravity': {x,y,z}}

        Se prefiere la aceleración con gravedad; si falta, se usa la
        aceleración pura. Muestras sin eje z numérico se ignoran.
        """
        return self._propose(self.motion_reading(sample), "motion")

    def tilt_reading(self, beta):
        """Propuesta a partir del ángulo beta, o None."""
        beta = _as_number(beta)
        if beta is None:
            return None

        down, up = self.config.get_tilt_thresholds()
        if abs(beta) > down:
            return True
        if abs(beta) <= up:
            return False
        return None

    def motion_reading(self, sample):
        """
        Propuesta a partir de la aceleración en z, o None.

        Con gravedad el signo de z distingue las caras: unos -9.8 m/s²
        boca abajo y +9.8 boca arriba. La aceleración pura no trae la
        gravedad, así que ahí solo cuenta la magnitud.
        """
        if not isinstance(sample, dict):
            return None

        down = self.config.motion_down_z
        up = self.config.motion_up_z

        gravity = _as_vector(sample.get('accelerationIncludingGravity'))
        if gravity is not None:
            z = gravity[2]
            if z < -down:
                return True
            if z > up:
                return False
            return None

        vector = _as_vector(sample.get('acceleration'))
        if vector is None:
            return None

        z = abs(vector[2])
        if z > down:
            return True
        if z < up:
            return False
        return None

    # ========================================================================
    # DETECCIÓN DE FLANCOS
    # ========================================================================
    def _propose(self, reading, source):
        """
        Aplica una propuesta y dispara el flanco si cambia el estado.

        Returns:
            bool: True si hubo transición
        """
        if reading is None or reading == self.is_screen_down:
            return False

        self.is_screen_down = reading
        if self.debug:
            self.debug(f"{source}: {'boca abajo' if reading else 'boca arriba'}")

        if reading:
            self.on_face_down()
        else:
            self.on_face_up()
        return True


def _as_number(value):
    if isinstance(value, bool):
        return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _as_vector(axes):
    """Convierte {x, y, z} en un array numpy, o None si falta z."""
    if not isinstance(axes, dict):
        return None
    z = _as_number(axes.get('z'))
    if z is None:
        return None
    x = _as_number(axes.get('x'))
    y = _as_number(axes.get('y'))
    return np.array([x or 0.0, y or 0.0, z])
