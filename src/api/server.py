from __future__ import annotations

import uvicorn
from src.core.config import get_settings


def run() -> None:
    """Serve the API on the configured host and port."""
    settings = get_settings()
    uvicorn.run("src.api.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
