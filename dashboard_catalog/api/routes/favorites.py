from fastapi import APIRouter, Depends, HTTPException, Path, Response
from typing import List
import logging

from dashboard_catalog.models.dashboard_models import Dashboard, FavoriteDashboard
from dashboard_catalog.models.request_models import FavoriteCreate
from dashboard_catalog.models.response_models import ErrorResponse
from dashboard_catalog.services.catalog_service import CatalogService, get_catalog_service
from dashboard_catalog.services.errors import CatalogError

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("/favorites", response_model=List[Dashboard])
def list_favorite_dashboards(service: CatalogService = Depends(get_catalog_service)):
    try:
        return service.list_favorites()
    except Exception as e:
        logger.error(f"Error fetching favorite dashboards: {str(e)}")
        raise HTTPException(status_code=500, detail="Error fetching favorite dashboards")


@router.post("/favorite", response_model=FavoriteDashboard, status_code=201, responses=ERROR_RESPONSES)
def add_favorite_dashboard(
    payload: FavoriteCreate,
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Mark a dashboard as favorite. 404 when it does not exist, 400 when it is
    already a favorite.
    """
    try:
        return service.add_favorite(payload.dashboard_id)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error adding dashboard {payload.dashboard_id} to favorites: {str(e)}")
        raise HTTPException(status_code=500, detail="Error adding dashboard to favorites")


@router.delete("/favorite/{dashboard_id}", status_code=204, responses=ERROR_RESPONSES)
def remove_favorite_dashboard(
    dashboard_id: int = Path(..., description="Dashboard ID"),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        service.remove_favorite(dashboard_id)
        return Response(status_code=204)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error removing dashboard {dashboard_id} from favorites: {str(e)}")
        raise HTTPException(status_code=500, detail="Error removing dashboard from favorites")
