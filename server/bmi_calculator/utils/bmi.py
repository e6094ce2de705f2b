# utils/bmi.py
import math
from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal
from typing import Optional, Tuple

from bmi_calculator.utils.measurements import Measurement


@dataclass(frozen=True)
class CategoryBand:
    lower: float
    upper: float
    label: str
    color: str

    def contains(self, value: float) -> bool:
        return self.lower <= value < self.upper


# Intervalos [lower, upper) que cubren [0, inf) sin huecos
CATEGORY_BANDS: Tuple[CategoryBand, ...] = (
    CategoryBand(0.0, 18.5, "Underweight", "#60a5fa"),
    CategoryBand(18.5, 25.0, "Normal", "#4ade80"),
    CategoryBand(25.0, 30.0, "Overweight", "#facc15"),
    CategoryBand(30.0, math.inf, "Obese", "#f87171"),
)


@dataclass(frozen=True)
class BmiResult:
    value: float
    category: Optional[CategoryBand]

    @property
    def label(self) -> Optional[str]:
        return self.category.label if self.category else None


def _divide(numerator: float, denominator: float) -> float:
    # Python lanza ZeroDivisionError; aquí se sigue IEEE (inf / nan)
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _to_decimal(value: float) -> Decimal:
    # repr da el texto más corto del float, el mismo que escribió el usuario
    return Decimal(repr(value))


def compute_bmi(measurement: Measurement) -> float:
    """
    IMC = peso_kg / altura_m², redondeado a 2 decimales con empates hacia
    arriba como Math.round, es decir floor(x + 0.5). Se calcula en Decimal
    para que 120 kg / 160 cm dé 46.875 exacto y no 46.87499999999999.
    Altura cero no es error: el resultado es inf o nan.
    """
    if not (math.isfinite(measurement.weight_kg) and math.isfinite(measurement.height_cm)):
        height_m = measurement.height_cm / 100.0
        return _divide(measurement.weight_kg, height_m * height_m)

    height_m = _to_decimal(measurement.height_cm) / 100
    denominator = height_m * height_m
    if denominator == 0:
        return _divide(measurement.weight_kg, 0.0)

    bmi = _to_decimal(measurement.weight_kg) / denominator
    scaled = (bmi * 100 + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)
    return float(scaled / 100)


def classify_bmi(value: float) -> Optional[CategoryBand]:
    """Primera banda cuyo intervalo contiene el valor; None si es negativo o no finito."""
    for band in CATEGORY_BANDS:
        if band.contains(value):
            return band
    return None


def evaluate(measurement: Measurement) -> BmiResult:
    value = compute_bmi(measurement)
    return BmiResult(value=value, category=classify_bmi(value))
