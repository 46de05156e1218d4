"""
Run the API with uvicorn: ``python -m bizdesk``.
"""

import uvicorn

from bizdesk.core.config import settings


def main() -> None:
    uvicorn.run(
        "bizdesk.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
