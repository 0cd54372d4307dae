"""Run the API with uvicorn: ``python -m placebook``."""
from __future__ import annotations

import uvicorn

from placebook.core.config import get_settings
from placebook.main import create_app


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
