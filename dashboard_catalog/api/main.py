# Load environment variables from .env file first, before any other imports
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dashboard_catalog import __version__
from dashboard_catalog.config import get_settings
from dashboard_catalog.models.response_models import ErrorResponse
from dashboard_catalog.services.catalog_service import get_catalog_service
from dashboard_catalog.api.routes import dashboards, favorites, search

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Vectorize the catalog once before serving requests
    service = app.dependency_overrides.get(get_catalog_service, get_catalog_service)()
    metrics = service.refresh_embeddings()
    logger.info(f"Embeddings initialized for {metrics.total_dashboards} dashboards")
    yield


app = FastAPI(title="Dashboard Catalog Service", version=__version__, lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed ids, unknown categories and empty queries are invalid input
    logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(detail="Invalid request", errors=jsonable_encoder(exc.errors())).model_dump()
    )


# Static paths go before /api/dashboards/{dashboard_id}
app.include_router(search.router, prefix="/api/dashboards", tags=["search"])
app.include_router(favorites.router, prefix="/api/dashboards", tags=["favorites"])
app.include_router(dashboards.router, prefix="/api/dashboards", tags=["dashboards"])


@app.get("/health")
def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
