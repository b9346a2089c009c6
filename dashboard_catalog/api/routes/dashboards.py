from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response
from typing import List, Optional
import logging

from dashboard_catalog.models.dashboard_models import Category, Dashboard, DashboardDetail
from dashboard_catalog.models.request_models import DashboardCreate, DashboardUpdate
from dashboard_catalog.models.response_models import ErrorResponse
from dashboard_catalog.services.catalog_service import CatalogService, get_catalog_service
from dashboard_catalog.services.errors import CatalogError

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("", response_model=List[Dashboard])
def list_dashboards(service: CatalogService = Depends(get_catalog_service)):
    try:
        return service.list_dashboards()
    except Exception as e:
        logger.error(f"Error fetching dashboards: {str(e)}")
        raise HTTPException(status_code=500, detail="Error fetching dashboards")


@router.get("/featured", response_model=List[Dashboard])
def list_featured_dashboards(
    limit: Optional[int] = Query(None, ge=1, description="Number of featured dashboards to return"),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        return service.list_featured(limit)
    except Exception as e:
        logger.error(f"Error fetching featured dashboards: {str(e)}")
        raise HTTPException(status_code=500, detail="Error fetching featured dashboards")


@router.get("/recent", response_model=List[Dashboard])
def list_recent_dashboards(
    limit: Optional[int] = Query(None, ge=1, description="Number of recent dashboards to return"),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        return service.list_recent(limit)
    except Exception as e:
        logger.error(f"Error fetching recent dashboards: {str(e)}")
        raise HTTPException(status_code=500, detail="Error fetching recent dashboards")


@router.get("/category/{category}", response_model=List[Dashboard], responses=ERROR_RESPONSES)
def list_dashboards_by_category(
    category: Category,
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        return service.list_by_category(category)
    except Exception as e:
        logger.error(f"Error fetching dashboards for category {category}: {str(e)}")
        raise HTTPException(status_code=500, detail="Error fetching dashboards by category")


@router.get("/{dashboard_id}", response_model=DashboardDetail, responses=ERROR_RESPONSES)
def get_dashboard(
    dashboard_id: int = Path(..., description="Dashboard ID"),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Fetch a dashboard with its favorite flag. Counts as a view and updates
    the recently viewed list.
    """
    try:
        return service.get_dashboard(dashboard_id)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching dashboard {dashboard_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Error fetching dashboard")


@router.post("", response_model=Dashboard, status_code=201, responses=ERROR_RESPONSES)
def create_dashboard(
    payload: DashboardCreate,
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        return service.create_dashboard(payload)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error creating dashboard: {str(e)}")
        raise HTTPException(status_code=500, detail="Error creating dashboard")


@router.put("/{dashboard_id}", response_model=Dashboard, responses=ERROR_RESPONSES)
def update_dashboard(
    payload: DashboardUpdate,
    dashboard_id: int = Path(..., description="Dashboard ID"),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        return service.update_dashboard(dashboard_id, payload)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error updating dashboard {dashboard_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Error updating dashboard")


@router.delete("/{dashboard_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_dashboard(
    dashboard_id: int = Path(..., description="Dashboard ID"),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        service.delete_dashboard(dashboard_id)
        return Response(status_code=204)
    except CatalogError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error deleting dashboard {dashboard_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Error deleting dashboard")
