"""
Catalog service that ties the dashboard store to the embedding and ranking services
"""
from typing import List, Dict, Any, Optional
from functools import lru_cache
import logging

from dashboard_catalog.config import Settings, get_settings
from dashboard_catalog.database.memory_store import MemoryStore
from dashboard_catalog.models.dashboard_models import Category, Dashboard, DashboardDetail, FavoriteDashboard
from dashboard_catalog.models.embedding_models import EmbeddingRefreshMetrics
from dashboard_catalog.models.request_models import DashboardCreate, DashboardUpdate
from dashboard_catalog.models.response_models import DashboardSearchHit
from dashboard_catalog.pipelines.embedding_refresh import EmbeddingRefreshPipeline
from dashboard_catalog.services.embedding_service import EmbeddingService, embedding_service
from dashboard_catalog.services.ranking_service import RankingService
from dashboard_catalog.services.errors import (
    DashboardNotFoundError, InvalidInputError, AlreadyExistsError, NotInFavoritesError
)

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Operations behind the REST surface. Raises CatalogError subclasses for
    not-found, invalid-input and already-exists outcomes.
    """

    def __init__(self, store: MemoryStore,
                 embedder: Optional[EmbeddingService] = None,
                 ranker: Optional[RankingService] = None,
                 settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or Settings()
        self.embedder = embedder or embedding_service
        self.ranker = ranker or RankingService(self.embedder, alignment=self.settings.similarity_alignment)
        self.refresh_pipeline = EmbeddingRefreshPipeline(store, self.embedder)

    def _require_dashboard(self, dashboard_id: int) -> Dashboard:
        dashboard = self.store.get_dashboard_by_id(dashboard_id)
        if dashboard is None:
            raise DashboardNotFoundError(dashboard_id)
        return dashboard

    def _store_embedding(self, dashboard: Dashboard) -> Dashboard:
        embedding = self.embedder.embed_dashboard(dashboard)
        return self.store.update_dashboard_embeddings(dashboard.id, embedding.vector, embedding.terms)

    # Reads
    def list_dashboards(self) -> List[Dashboard]:
        return self.store.get_all_dashboards()

    def list_by_category(self, category: Category) -> List[Dashboard]:
        return self.store.get_dashboards_by_category(category)

    def list_featured(self, limit: Optional[int] = None) -> List[Dashboard]:
        return self.store.get_featured_dashboards(limit or self.settings.featured_limit)

    def list_recent(self, limit: Optional[int] = None) -> List[Dashboard]:
        return self.store.get_recent_dashboards(limit or self.settings.recent_limit)

    def list_favorites(self) -> List[Dashboard]:
        return self.store.get_favorite_dashboards()

    def get_dashboard(self, dashboard_id: int) -> DashboardDetail:
        """
        Fetch a dashboard for display. Counts the view and moves the dashboard to
        the top of the recently viewed list.
        """
        with self.store.lock:
            self._require_dashboard(dashboard_id)

            dashboard = self.store.increment_dashboard_views(dashboard_id)
            self.store.add_recent_dashboard(dashboard_id)
            is_favorite = self.store.is_favorite_dashboard(dashboard_id)

        return DashboardDetail(**dashboard.model_dump(), is_favorite=is_favorite)

    # Search
    def refresh_embeddings(self, force: bool = False) -> EmbeddingRefreshMetrics:
        return self.refresh_pipeline.run(force=force)

    def search(self, query: str, limit: Optional[int] = None) -> List[DashboardSearchHit]:
        """
        Rank dashboards by similarity to a free text query

        Args:
            query: Non-empty query text
            limit: Maximum number of hits, defaults to the configured search limit

        Returns:
            Hits ordered by similarity, highest first
        """
        if not query or not query.strip():
            raise InvalidInputError("Invalid search query")
        if limit is None:
            limit = self.settings.search_limit
        if limit < 1:
            raise InvalidInputError("Search limit must be at least 1")

        # Lazily vectorize anything created without an embedding
        self.refresh_pipeline.run()

        candidates = self.store.get_dashboard_embeddings()
        similar = self.ranker.find_similar_dashboards(query, candidates, limit)

        hits = []
        for result in similar:
            dashboard = self.store.get_dashboard_by_id(result.dashboard_id)
            if dashboard is None:
                logger.warning(f"Ranked dashboard {result.dashboard_id} no longer exists")
                continue
            hits.append(DashboardSearchHit(dashboard=dashboard, similarity=result.similarity))

        logger.info(f"Search '{query}' returned {len(hits)} of {len(candidates)} dashboards")
        return hits

    def keyword_search(self, query: str) -> List[Dashboard]:
        if not query or not query.strip():
            raise InvalidInputError("Invalid search query")
        return self.store.search_dashboards(query.strip())

    # Writes
    def create_dashboard(self, payload: DashboardCreate) -> Dashboard:
        with self.store.lock:
            dashboard = self.store.create_dashboard(payload)
            dashboard = self._store_embedding(dashboard)
        logger.info(f"Created dashboard {dashboard.id}: {dashboard.title}")
        return dashboard

    def update_dashboard(self, dashboard_id: int, payload: DashboardUpdate) -> Dashboard:
        """
        Apply a partial update. The embedding is recomputed whenever the
        title, description or category text changed.
        """
        changes: Dict[str, Any] = {
            key: value for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }

        # Text and embedding change together under the store lock
        with self.store.lock:
            current = self._require_dashboard(dashboard_id)
            updated = self.store.update_dashboard(dashboard_id, changes)

            text_changed = self.embedder.dashboard_text(current) != self.embedder.dashboard_text(updated)
            if text_changed or updated.embeddings is None:
                updated = self._store_embedding(updated)
                logger.debug(f"Recomputed embedding for dashboard {dashboard_id}")

        return updated

    def delete_dashboard(self, dashboard_id: int) -> None:
        if not self.store.delete_dashboard(dashboard_id):
            raise DashboardNotFoundError(dashboard_id)
        logger.info(f"Deleted dashboard {dashboard_id}")

    # Favorites
    def add_favorite(self, dashboard_id: int) -> FavoriteDashboard:
        with self.store.lock:
            self._require_dashboard(dashboard_id)
            if self.store.is_favorite_dashboard(dashboard_id):
                raise AlreadyExistsError("Dashboard already in favorites")
            return self.store.add_favorite_dashboard(dashboard_id)

    def remove_favorite(self, dashboard_id: int) -> None:
        with self.store.lock:
            self._require_dashboard(dashboard_id)
            if not self.store.remove_favorite_dashboard(dashboard_id):
                raise NotInFavoritesError(dashboard_id)


def build_catalog_service(settings: Optional[Settings] = None) -> CatalogService:
    settings = settings or get_settings()
    store = MemoryStore(seed_sample_data=settings.seed_sample_data)
    return CatalogService(store, settings=settings)


@lru_cache()
def get_catalog_service() -> CatalogService:
    """Process-wide catalog service, created on first use"""
    return build_catalog_service()
