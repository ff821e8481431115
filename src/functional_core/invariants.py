"""
src/functional_core/invariants.py
Constantes globales de la librería.
Única fuente de configuración: no se leen variables de entorno ni ficheros.
"""

# =============================================================================
# PRESENTACIÓN
# =============================================================================
# Número máximo de elementos que muestra repr() antes de truncar con "..."
REPR_LIMIT = 10

# =============================================================================
# AUDITORÍA DE LEYES
# =============================================================================
AUDIT_SAMPLES    = 200    # Listas aleatorias por lote
AUDIT_MAX_LENGTH = 64     # Longitud máxima de cada lista generada
AUDIT_SEED       = 0x5EED # Semilla base (determinismo entre ejecuciones)
AUDIT_BATCHES    = 4      # Lotes independientes (uno por proceso)

# =============================================================================
# ESTRÉS
# =============================================================================
# Tamaño que debe soportar cualquier operación no recursiva sin Stack Overflow
STRESS_LENGTH = 100_000
