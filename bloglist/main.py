"""
Bloglist - main entry point.

Configures logging and serves the API with uvicorn:

    bloglist            # console script
    python -m bloglist.main
"""

from __future__ import annotations

import logging

import uvicorn

from bloglist.config import get_settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    uvicorn.run(
        "bloglist.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug and not settings.is_production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
