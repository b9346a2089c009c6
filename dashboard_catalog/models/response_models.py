# Pydantic models for outgoing API responses
from pydantic import BaseModel
from typing import List, Optional, Any
from .dashboard_models import Dashboard

class ErrorResponse(BaseModel):
    detail: str
    errors: Optional[Any] = None

class DashboardSearchHit(BaseModel):
    dashboard: Dashboard
    similarity: float

class DashboardSearchResponse(BaseModel):
    dashboards: List[DashboardSearchHit]
