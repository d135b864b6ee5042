"""Role table lifecycle and FastAPI dependencies."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from skillgap.config import settings
from skillgap.errors import DataLoadError
from skillgap.services.catalog import Catalogs, load_catalogs
from skillgap.services.news import HackerNewsClient

logger = logging.getLogger(__name__)


def init_catalogs(app: FastAPI) -> Catalogs | None:
    """Load role tables into app state.

    Should be called during application startup. A load failure is logged
    and leaves app.state.catalogs unset, so the app still starts and
    catalog-dependent requests report the failure.
    """
    try:
        app.state.catalogs = load_catalogs(
            settings.role_skills_path, settings.learning_order_path
        )
    except DataLoadError as e:
        logger.error(f"Role tables not loaded at startup: {e}")
        app.state.catalogs = None
    return app.state.catalogs


def get_catalogs(request: Request) -> Catalogs:
    """FastAPI dependency to get the loaded role tables.

    If startup loading failed, the load is attempted once more for this
    request.

    Raises:
        HTTPException: 500 if the role tables cannot be loaded
    """
    catalogs = getattr(request.app.state, "catalogs", None)
    if catalogs is not None:
        return catalogs

    try:
        catalogs = load_catalogs(
            settings.role_skills_path, settings.learning_order_path
        )
    except DataLoadError as e:
        logger.error(f"Role tables unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Role data unavailable: {e.reason}"
        )

    request.app.state.catalogs = catalogs
    return catalogs


def get_news_client() -> HackerNewsClient:
    """FastAPI dependency to get a HackerNews client."""
    return HackerNewsClient()
