# main.py

"""Run the API with uvicorn: ``python main.py``."""

from uvicorn import run

from app.configs import settings


def main() -> None:
    run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
        workers=None if settings.DEBUG else 4,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
