# Pydantic models for incoming API requests
from pydantic import BaseModel, Field
from typing import Optional
from .dashboard_models import Category


class DashboardCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str
    category: Category
    image_url: str
    created_by: str
    is_featured: bool = False


class DashboardUpdate(BaseModel):
    """Partial update, only the fields that are set get applied"""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[Category] = None
    image_url: Optional[str] = None
    created_by: Optional[str] = None
    is_featured: Optional[bool] = None


class SearchQuery(BaseModel):
    query: str = Field(..., min_length=1, description="Free text query")
    limit: int = Field(5, ge=1, description="Maximum number of results")


class FavoriteCreate(BaseModel):
    dashboard_id: int
