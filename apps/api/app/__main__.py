"""Run the dashboard API with uvicorn: ``python -m app``."""
from __future__ import annotations

import uvicorn

from .core.config import settings
from .core.logging_config import configure_logging


def main() -> None:
    configure_logging(settings.log_level)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
