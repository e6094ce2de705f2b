# utils/measurements.py
import math
import re
from dataclasses import dataclass
from typing import List, Optional

# Prefijo numérico al estilo parseFloat; sólo dígitos ASCII
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ValidationFailure(ValueError):
    """Peso o altura no se pudieron convertir a un número finito."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__(f"Valores no numéricos en: {', '.join(fields)}")


@dataclass(frozen=True)
class Measurement:
    weight_kg: float
    height_cm: float


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Toma el prefijo numérico más largo del texto (ej. "70kg" -> 70.0).
    Devuelve None si no hay número o si el valor no es finito.
    """
    if text is None:
        return None
    match = _NUMBER_PREFIX.match(text.strip())
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_measurement(weight_text: Optional[str], height_text: Optional[str]) -> Measurement:
    weight = parse_number(weight_text)
    height = parse_number(height_text)

    invalid = []
    if weight is None:
        invalid.append("weight")
    if height is None:
        invalid.append("height")
    if invalid:
        raise ValidationFailure(invalid)

    # Ceros y negativos se aceptan; el motor no los filtra
    return Measurement(weight_kg=weight, height_cm=height)
