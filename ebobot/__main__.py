"""Serve the activity endpoint: python -m ebobot"""

import uvicorn

from ebobot.api.dependencies import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "ebobot.api.app:create_app",
        factory=True,
        host=settings.api.host,
        port=settings.api.port,
    )


if __name__ == "__main__":
    main()
