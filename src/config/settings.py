"""
Configuración centralizada de la calculadora mágica.

Este módulo reúne los umbrales y tiempos que gobiernan el teclado señuelo,
el detector de toques, el monitor de orientación y el cálculo de revelación.
"""


# ============================================================================
# CLASE: MagicConfig
# Propósito: Valores por defecto de la calculadora y del gesto de armado
# Responsabilidades:
#   - Límites del display (dígitos, caracteres visibles)
#   - Tiempos de las tareas programadas (ventana de toques, destello, pulsación larga)
#   - Umbrales de inclinación y aceleración con histéresis
#   - Política del número mágico (desplazamiento de minuto, valor absoluto)
# ============================================================================
class MagicConfig:
    """
    Configuración de la calculadora mágica.

    Todos los tiempos se expresan en milisegundos y los ángulos en grados,
    igual que los entregan los sensores del dispositivo.
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.max_digits = 9                 # Dígitos crudos admitidos por operando
        self.max_display_chars = 9          # Caracteres antes de recortar/exponencial
        self.exponent_digits = 2            # Decimales en notación científica

        # ====================================================================
        # DETECTOR DE TOQUES (doble toque sobre el display)
        # ====================================================================
        self.tap_window_ms = 500            # Ventana de silencio
        self.min_taps = 2                   # Toques mínimos para armar

        # ====================================================================
        # MONITOR DE ORIENTACIÓN (boca abajo)
        # ====================================================================
        self.tilt_down_deg = 150.0          # |beta| por encima: boca abajo
        self.tilt_up_deg = 120.0            # |beta| <= 120: boca arriba
        self.legacy_tilt = False            # Umbral antiguo: beta > 160 o beta < -160
        self.legacy_tilt_deg = 160.0
        self.motion_down_z = 8.0            # z < -8 con gravedad: boca abajo
        self.motion_up_z = 6.0              # z > 6 con gravedad: boca arriba

        # ====================================================================
        # REVELACIÓN
        # ====================================================================
        self.minute_offset = 1              # Se suma al minuto actual
        self.absolute_delta = True          # False: conserva el signo de la resta
        self.flash_ms = 300                 # Destello del display tras revelar

        # ====================================================================
        # VARIANTE DE PULSACIÓN LARGA
        # ====================================================================
        self.long_press_enabled = True
        self.long_press_ms = 5000

        # ====================================================================
        # DIAGNÓSTICO
        # ====================================================================
        self.debug_history = 6              # Líneas de depuración conservadas
        self.show_debug = True              # Mostrar líneas en la ventana

    def get_tap_window_s(self):
        """Retorna la ventana de silencio del detector en segundos."""
        return self.tap_window_ms / 1000.0

    def get_flash_s(self):
        return self.flash_ms / 1000.0

    def get_long_press_s(self):
        return self.long_press_ms / 1000.0

    def get_tilt_thresholds(self):
        """
        Calcula los umbrales de inclinación activos.

        Returns:
            tuple: (umbral_boca_abajo, umbral_boca_arriba) en grados

        En modo legacy ambos umbrales coinciden (sin histéresis), tal como
        se comportaba la primera versión del detector.
        """
        if self.legacy_tilt:
            return self.legacy_tilt_deg, self.legacy_tilt_deg
        return self.tilt_down_deg, self.tilt_up_deg
