import uvicorn

from bmi_calculator.config import Settings


def main():
    settings = Settings()
    uvicorn.run("bmi_calculator.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
