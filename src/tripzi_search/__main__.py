"""Poetry script entrypoint for the flight search API."""

import uvicorn

from tripzi_search.config import get_settings


def main() -> None:
    """Run dev server."""
    settings = get_settings()
    uvicorn.run(
        "tripzi_search.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
