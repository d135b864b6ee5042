import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from skillgap.config import settings
from skillgap.dependencies import init_catalogs
from skillgap.handlers import register_exception_handlers
from skillgap.health import catalog_stats, check_news_api
from skillgap.routers import news, roadmap, skill_gap

logging.basicConfig(
    level=settings.effective_log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Load static role tables
    logger.info(f"🚀 Starting {settings.app_name}")
    if init_catalogs(app) is not None:
        logger.info("✅ Role tables loaded")
    yield
    logger.info(f"👋 Shutting down {settings.app_name}")

app = FastAPI(
    title=settings.app_name,
    description="Career skill-gap analysis, learning roadmaps and tech news",
    version=settings.app_version,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Wrap errors in the {success: false, message} envelope
register_exception_handlers(app)

# Include routers
app.include_router(skill_gap.router)
app.include_router(roadmap.router)
app.include_router(news.router)


@app.get("/")
async def root():
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check(request: Request):
    """Health check for the role tables and the news API."""
    news_health = await check_news_api(settings.news_api_base_url)
    catalogs = catalog_stats(getattr(request.app.state, "catalogs", None))

    return {
        "status": "healthy" if catalogs["loaded"] and news_health.status == "connected" else "degraded",
        "dependencies": {
            "news_api": news_health.status,
            "role_tables": "loaded" if catalogs["loaded"] else "error",
        },
        "metrics": catalogs,
    }
