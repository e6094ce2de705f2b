# utils/display.py
import math
from typing import Optional

# La barra de posición cubre IMC de 0 a 40; por encima se muestra llena
SCALE_MAX = 40.0

CALCULATE_LABEL = "Calculate BMI"
CALCULATING_LABEL = "Calculating..."


def display_fraction(value: float) -> float:
    return min(value / SCALE_MAX, 1.0)


def format_bmi(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def button_label(computing: bool) -> str:
    return CALCULATING_LABEL if computing else CALCULATE_LABEL


def finite_or_none(value: float) -> Optional[float]:
    # JSON no admite inf ni nan
    return value if math.isfinite(value) else None
