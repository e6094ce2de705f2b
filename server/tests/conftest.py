"""
Pytest configuration and fixtures

Every app instance gets its own log file under tmp_path and a short
result delay so lifecycle tests run quickly.
"""
import pytest
from fastapi.testclient import TestClient

from bmi_calculator.config import Settings
from bmi_calculator.main import create_app

TEST_DELAY = 0.05


@pytest.fixture
def settings(tmp_path, monkeypatch):
    monkeypatch.setenv("BMI_LOG_FILE", str(tmp_path / "logs" / "app.log"))
    monkeypatch.setenv("BMI_RESULT_DELAY_SECONDS", str(TEST_DELAY))
    monkeypatch.delenv("BMI_CORS_ORIGINS", raising=False)
    return Settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # The context manager keeps one event loop alive across requests,
    # otherwise scheduled results would never fire.
    with TestClient(app) as c:
        yield c
