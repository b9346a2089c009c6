# Dashboard models
from .dashboard_models import Category, Dashboard, DashboardDetail, RecentDashboard, FavoriteDashboard

# Embedding models
from .embedding_models import TextEmbedding, DashboardEmbedding, SimilarityResult, EmbeddingRefreshMetrics

# Request/Response models
from .request_models import *
from .response_models import *

__all__ = [
    "Category",
    "Dashboard",
    "DashboardDetail",
    "RecentDashboard",
    "FavoriteDashboard",
    "TextEmbedding",
    "DashboardEmbedding",
    "SimilarityResult",
    "EmbeddingRefreshMetrics"
]
