# server/bmi_calculator/config.py
import os
from typing import List
from dotenv import load_dotenv, find_dotenv

# Carga variables de entorno
load_dotenv(find_dotenv(usecwd=True))


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} debe ser numérico, se recibió {raw!r}")


class Settings:
    def __init__(self):
        self.result_delay = _float_env("BMI_RESULT_DELAY_SECONDS", 0.8)
        self.log_file = os.getenv("BMI_LOG_FILE", "app.log")
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("BMI_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.host = os.getenv("BMI_HOST", "127.0.0.1")
        self.port = int(_float_env("BMI_PORT", 8000))

        if self.result_delay < 0:
            raise RuntimeError("BMI_RESULT_DELAY_SECONDS no puede ser negativo")
