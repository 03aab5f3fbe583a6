import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.catalog.router import router as catalog_router
from app.config import get_settings
from app.database import Base, engine
from app.purchases.router import router as purchases_router
from app.storage import models as storage_models  # noqa: F401
from app.storage.visitor import visitor_middleware
from app.storefront.router import router as storefront_router

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Storage tables ensured")
    yield
    # Shutdown


app = FastAPI(
    title="UC Shop",
    description="Storefront for PUBG Mobile UC packages with visitor-local purchase history",
    version="1.0.0",
    lifespan=lifespan,
)

# Visitor cookie selects the storage namespace
app.middleware("http")(visitor_middleware)

app.mount(
    "/static",
    StaticFiles(directory=Path(__file__).parent / "storefront" / "static"),
    name="static",
)

# Include routers with /api/v1 prefix
app.include_router(catalog_router, prefix="/api/v1/catalog", tags=["catalog"])
app.include_router(purchases_router, prefix="/api/v1/purchases", tags=["purchases"])
app.include_router(storefront_router, tags=["storefront"])


@app.get("/health")
def health_check():
    return {"status": "healthy"}
