# main.py
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from bmi_calculator.config import Settings
from bmi_calculator.logs import Logs
from bmi_calculator.routers.bmi import router as bmi_router
from bmi_calculator.services.calculator_session import CalculatorSession

TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(title="BMI Calculator")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Una sola sesión por proceso
    logs = Logs(settings.log_file)
    app.state.logs = logs
    app.state.calculator = CalculatorSession(delay=settings.result_delay, on_event=logs.write)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index() -> HTMLResponse:
        html = (TEMPLATES_DIR / "index.html").read_text(encoding="utf-8")
        return HTMLResponse(html)

    # Registrar rutas
    app.include_router(bmi_router, prefix="/api/bmi", tags=["BMI"])

    return app

app = create_app()
