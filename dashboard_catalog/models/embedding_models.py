# Data classes for text embeddings and similarity results
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class TextEmbedding(BaseModel):
    """Vector plus the local vocabulary whose order defines its slots"""
    terms: List[str]
    vector: List[float]


class DashboardEmbedding(BaseModel):
    """Projection of a dashboard used to seed the ranking corpus"""
    id: int
    title: str
    description: str
    embeddings: Optional[List[float]] = None
    terms: Optional[List[str]] = None


class SimilarityResult(BaseModel):
    dashboard_id: int
    similarity: float


class EmbeddingRefreshMetrics(BaseModel):
    """Model for embedding refresh sweep statistics"""
    execution_date: datetime
    total_dashboards: int = 0
    embeddings_computed: int = 0
    already_embedded: int = 0
    failed_updates: int = 0
    forced: bool = False
    execution_time_seconds: float = 0.0
    errors: List[str] = []
