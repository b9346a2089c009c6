# Models for dashboard records, recent views and favorites
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone
from enum import Enum


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Category(str, Enum):
    """Fixed set of dashboard category tags"""
    DATA = "data"
    BUSINESS = "business"
    ECOM = "ecom"
    STRATEGY = "strategy"


class Dashboard(BaseModel):
    """
    Stored dashboard record.

    `embeddings` and `embedding_terms` hold JSON text: the vector and the local
    vocabulary it was computed over. Both are None until the dashboard has been
    vectorized.
    """
    id: int
    title: str
    description: str
    category: Category
    image_url: str
    created_by: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    views: int = 0
    is_featured: bool = False
    embeddings: Optional[str] = None
    embedding_terms: Optional[str] = None


class DashboardDetail(Dashboard):
    """Dashboard returned by the detail endpoint, flagged with favorite state"""
    is_favorite: bool = False


class RecentDashboard(BaseModel):
    id: int
    dashboard_id: int
    viewed_at: datetime = Field(default_factory=utc_now)


class FavoriteDashboard(BaseModel):
    id: int
    dashboard_id: int
