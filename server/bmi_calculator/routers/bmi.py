# routers/bmi.py
from fastapi import APIRouter, HTTPException, Request
from bmi_calculator.schemas.bmi import (
    BmiResultResponse,
    CategoryTableResponse,
    MeasurementRequest,
    SessionStateResponse,
)
from bmi_calculator.services.calculator_session import CalculatorSession
from bmi_calculator.services.presenter import present, present_categories, present_result
from bmi_calculator.utils.bmi import evaluate
from bmi_calculator.utils.measurements import ValidationFailure, parse_measurement

router = APIRouter()


def _session(request: Request) -> CalculatorSession:
    return request.app.state.calculator


@router.get("", response_model=SessionStateResponse)
async def get_state(request: Request) -> SessionStateResponse:
    return present(_session(request).snapshot())


@router.post("", response_model=SessionStateResponse)
async def submit_measurement(body: MeasurementRequest, request: Request) -> SessionStateResponse:
    return present(_session(request).submit(body.weight, body.height))


@router.delete("", response_model=SessionStateResponse)
async def reset_session(request: Request) -> SessionStateResponse:
    snapshot = _session(request).reset()
    request.app.state.logs.write("Sesión reiniciada")
    return present(snapshot)


@router.post("/compute", response_model=BmiResultResponse)
async def compute(body: MeasurementRequest) -> BmiResultResponse:
    #Cálculo inmediato, sin pasar por la sesión
    try:
        measurement = parse_measurement(body.weight, body.height)
    except ValidationFailure as e:
        raise HTTPException(400, str(e))
    return present_result(evaluate(measurement))


@router.get("/categories", response_model=CategoryTableResponse)
async def categories() -> CategoryTableResponse:
    return present_categories()
