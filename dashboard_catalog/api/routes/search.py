from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List
import logging

from dashboard_catalog.models.dashboard_models import Dashboard
from dashboard_catalog.models.embedding_models import EmbeddingRefreshMetrics
from dashboard_catalog.models.request_models import SearchQuery
from dashboard_catalog.models.response_models import DashboardSearchResponse, ErrorResponse
from dashboard_catalog.services.catalog_service import CatalogService, get_catalog_service
from dashboard_catalog.services.errors import CatalogError

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.post("/search", response_model=DashboardSearchResponse, responses=ERROR_RESPONSES)
def search_dashboards(
    request: SearchQuery,
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Rank dashboards against a free text query using bag-of-words cosine similarity
    """
    try:
        hits = service.search(request.query, request.limit)
        return DashboardSearchResponse(dashboards=hits)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error searching dashboards for '{request.query}': {str(e)}")
        raise HTTPException(status_code=500, detail="Error searching dashboards")


@router.get("/keyword-search", response_model=List[Dashboard], responses=ERROR_RESPONSES)
def keyword_search_dashboards(
    q: str = Query(..., min_length=1, description="Substring to match in title or description"),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        return service.keyword_search(q)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error in keyword search for '{q}': {str(e)}")
        raise HTTPException(status_code=500, detail="Error searching dashboards")


@router.post("/embeddings/refresh", response_model=EmbeddingRefreshMetrics)
def refresh_embeddings(
    force: bool = Query(False, description="Recompute embeddings that already exist"),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Vectorize every dashboard lacking an embedding (all of them with force=true)
    """
    try:
        logger.info(f"Triggering embedding refresh via API (force={force})")
        return service.refresh_embeddings(force=force)
    except Exception as e:
        logger.error(f"Error refreshing embeddings via API: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to refresh embeddings: {str(e)}")
