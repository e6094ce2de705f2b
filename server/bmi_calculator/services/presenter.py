# server/bmi_calculator/services/presenter.py
import math
from typing import Optional

from bmi_calculator.schemas.bmi import (
    BmiResultResponse,
    CategoryBandResponse,
    CategoryTableResponse,
    SessionStateResponse,
)
from bmi_calculator.services.calculator_session import SessionSnapshot
from bmi_calculator.utils.bmi import CATEGORY_BANDS, BmiResult
from bmi_calculator.utils.display import (
    SCALE_MAX,
    button_label,
    display_fraction,
    finite_or_none,
    format_bmi,
)


def present_result(result: Optional[BmiResult]) -> Optional[BmiResultResponse]:
    if result is None:
        return None
    band = result.category
    return BmiResultResponse(
        value=finite_or_none(result.value),
        display_value=format_bmi(result.value),
        category=band.label if band else None,
        color=band.color if band else None,
        display_fraction=finite_or_none(display_fraction(result.value)),
    )


def present(snapshot: SessionSnapshot) -> SessionStateResponse:
    """Vista JSON del estado de la sesión que consume la página."""
    return SessionStateResponse(
        state=snapshot.state.value,
        submission=snapshot.submission,
        rejected=snapshot.rejected,
        submit_disabled=snapshot.submit_disabled,
        button_label=button_label(snapshot.submit_disabled),
        result=present_result(snapshot.result),
    )


def present_categories() -> CategoryTableResponse:
    bands = [
        CategoryBandResponse(
            label=band.label,
            lower=band.lower,
            upper=band.upper if math.isfinite(band.upper) else None,
            color=band.color,
        )
        for band in CATEGORY_BANDS
    ]
    return CategoryTableResponse(scale_max=SCALE_MAX, bands=bands)
