"""Run the API with uvicorn: python -m mediashelf"""

import uvicorn

from mediashelf.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "mediashelf.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=not settings.is_production,
        log_config=None,
    )


if __name__ == "__main__":
    main()
