# schemas/bmi.py
from pydantic import BaseModel, field_validator
from typing import Any, List, Optional


class MeasurementRequest(BaseModel):
    weight: Optional[str] = ""
    height: Optional[str] = ""

    @field_validator("weight", "height", mode="before")
    @classmethod
    def number_as_text(cls, value: Any) -> Any:
        # Acepta {"weight": 70} además de {"weight": "70"}
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return repr(value)
        return value


class BmiResultResponse(BaseModel):
    value: Optional[float]
    display_value: str
    category: Optional[str]
    color: Optional[str]
    display_fraction: Optional[float]


class SessionStateResponse(BaseModel):
    state: str
    submission: int
    rejected: bool
    submit_disabled: bool
    button_label: str
    result: Optional[BmiResultResponse]


class CategoryBandResponse(BaseModel):
    label: str
    lower: float
    upper: Optional[float]
    color: str


class CategoryTableResponse(BaseModel):
    scale_max: float
    bands: List[CategoryBandResponse]
