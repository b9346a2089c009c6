import json
import random
import logging
import threading
from typing import List, Dict, Any, Optional, Set

from dashboard_catalog.models.dashboard_models import (
    Category, Dashboard, RecentDashboard, FavoriteDashboard, utc_now
)
from dashboard_catalog.models.embedding_models import DashboardEmbedding
from dashboard_catalog.models.request_models import DashboardCreate
from dashboard_catalog.database.sample_data import (
    SAMPLE_DASHBOARDS, MIN_SEED_VIEWS, MAX_SEED_VIEWS, SEED_RECENT_COUNT, SEED_FAVORITE_EVERY
)

logger = logging.getLogger(__name__)


class MemoryStore:
    """
    In-memory store for dashboards, recently viewed entries and favorites.

    All state lives for the lifetime of the process. Deleting a dashboard leaves
    any recent or favorite entries pointing at it in place; readers skip ids that
    no longer resolve.

    Mutations hold `lock`, a re-entrant lock, so callers can also take it to
    read and write a dashboard as one step.
    """

    def __init__(self, seed_sample_data: bool = False, rng: Optional[random.Random] = None):
        self.lock = threading.RLock()
        self.dashboards: Dict[int, Dashboard] = {}
        self.recent_dashboards: List[RecentDashboard] = []
        self.favorite_dashboards: Set[int] = set()
        self.current_dashboard_id = 1
        self.current_recent_id = 1
        self.current_favorite_id = 1

        if seed_sample_data:
            self._initialize_sample_dashboards(rng or random.Random())

    # Dashboard operations
    def get_all_dashboards(self) -> List[Dashboard]:
        with self.lock:
            return list(self.dashboards.values())

    def get_dashboard_by_id(self, dashboard_id: int) -> Optional[Dashboard]:
        return self.dashboards.get(dashboard_id)

    def get_dashboards_by_category(self, category: Category) -> List[Dashboard]:
        with self.lock:
            return [d for d in self.dashboards.values() if d.category == category]

    def get_featured_dashboards(self, limit: int = 3) -> List[Dashboard]:
        """Featured dashboards, most viewed first"""
        with self.lock:
            featured = [d for d in self.dashboards.values() if d.is_featured]
        featured.sort(key=lambda d: d.views, reverse=True)
        return featured[:limit]

    def create_dashboard(self, dashboard_data: DashboardCreate, views: int = 0) -> Dashboard:
        with self.lock:
            dashboard_id = self.current_dashboard_id
            self.current_dashboard_id += 1

            now = utc_now()
            dashboard = Dashboard(
                **dashboard_data.model_dump(),
                id=dashboard_id,
                views=views,
                created_at=now,
                updated_at=now,
                embeddings=None,
                embedding_terms=None
            )
            self.dashboards[dashboard_id] = dashboard
            return dashboard

    def update_dashboard(self, dashboard_id: int, changes: Dict[str, Any]) -> Optional[Dashboard]:
        """
        Merge changes into a stored dashboard and bump updated_at.

        Stored embeddings are left untouched; recomputing them after a text
        change is the caller's job.
        """
        with self.lock:
            dashboard = self.dashboards.get(dashboard_id)
            if not dashboard:
                return None

            updated = dashboard.model_copy(update={**changes, "updated_at": utc_now()})
            self.dashboards[dashboard_id] = updated
            return updated

    def delete_dashboard(self, dashboard_id: int) -> bool:
        with self.lock:
            return self.dashboards.pop(dashboard_id, None) is not None

    def increment_dashboard_views(self, dashboard_id: int) -> Optional[Dashboard]:
        with self.lock:
            dashboard = self.dashboards.get(dashboard_id)
            if not dashboard:
                return None

            updated = dashboard.model_copy(update={"views": dashboard.views + 1, "updated_at": utc_now()})
            self.dashboards[dashboard_id] = updated
            return updated

    def search_dashboards(self, query: str) -> List[Dashboard]:
        """Case-insensitive substring match on title or description"""
        lowercase_query = query.lower()
        with self.lock:
            return [
                d for d in self.dashboards.values()
                if lowercase_query in d.title.lower() or lowercase_query in d.description.lower()
            ]

    # Embedding operations
    def get_dashboard_embeddings(self) -> List[DashboardEmbedding]:
        """
        Every dashboard with its decoded embedding, or None where it has not been
        vectorized yet
        """
        with self.lock:
            dashboards = list(self.dashboards.values())
        return [
            DashboardEmbedding(
                id=d.id,
                title=d.title,
                description=d.description,
                embeddings=json.loads(d.embeddings) if d.embeddings else None,
                terms=json.loads(d.embedding_terms) if d.embedding_terms else None
            )
            for d in dashboards
        ]

    def update_dashboard_embeddings(self, dashboard_id: int, embeddings: List[float],
                                    terms: Optional[List[str]] = None) -> Optional[Dashboard]:
        """
        Overwrite the stored embedding of a dashboard. Without `terms` the vector
        is stored without a vocabulary and can only be compared positionally.
        """
        with self.lock:
            dashboard = self.dashboards.get(dashboard_id)
            if not dashboard:
                return None

            updated = dashboard.model_copy(update={
                "embeddings": json.dumps(embeddings),
                "embedding_terms": json.dumps(terms) if terms is not None else None,
                "updated_at": utc_now()
            })
            self.dashboards[dashboard_id] = updated
            return updated

    # Recent dashboards operations
    def get_recent_dashboards(self, limit: int = 4) -> List[Dashboard]:
        """Most recently viewed dashboards first, skipping deleted ones"""
        with self.lock:
            recents = sorted(
                self.recent_dashboards,
                key=lambda r: (r.viewed_at, r.id),
                reverse=True
            )

            dashboards = []
            for recent in recents:
                dashboard = self.dashboards.get(recent.dashboard_id)
                if dashboard is None:
                    logger.debug(f"Skipping recent entry for missing dashboard {recent.dashboard_id}")
                    continue
                dashboards.append(dashboard)
                if len(dashboards) >= limit:
                    break
            return dashboards

    def add_recent_dashboard(self, dashboard_id: int) -> RecentDashboard:
        with self.lock:
            recent_id = self.current_recent_id
            self.current_recent_id += 1

            # Keep at most one entry per dashboard
            self.recent_dashboards = [
                r for r in self.recent_dashboards if r.dashboard_id != dashboard_id
            ]

            recent = RecentDashboard(id=recent_id, dashboard_id=dashboard_id, viewed_at=utc_now())
            self.recent_dashboards.append(recent)
            return recent

    # Favorite dashboards operations
    def get_favorite_dashboards(self) -> List[Dashboard]:
        with self.lock:
            return [d for d in self.dashboards.values() if d.id in self.favorite_dashboards]

    def add_favorite_dashboard(self, dashboard_id: int) -> FavoriteDashboard:
        with self.lock:
            favorite_id = self.current_favorite_id
            self.current_favorite_id += 1
            self.favorite_dashboards.add(dashboard_id)
            return FavoriteDashboard(id=favorite_id, dashboard_id=dashboard_id)

    def remove_favorite_dashboard(self, dashboard_id: int) -> bool:
        with self.lock:
            if dashboard_id not in self.favorite_dashboards:
                return False
            self.favorite_dashboards.discard(dashboard_id)
            return True

    def is_favorite_dashboard(self, dashboard_id: int) -> bool:
        return dashboard_id in self.favorite_dashboards

    def _initialize_sample_dashboards(self, rng: random.Random):
        for index, dashboard_data in enumerate(SAMPLE_DASHBOARDS):
            views = rng.randrange(MIN_SEED_VIEWS, MAX_SEED_VIEWS)
            dashboard = self.create_dashboard(dashboard_data, views=views)

            if index < SEED_RECENT_COUNT:
                self.add_recent_dashboard(dashboard.id)

            if index % SEED_FAVORITE_EVERY == 0:
                self.favorite_dashboards.add(dashboard.id)

        logger.info(f"Seeded store with {len(SAMPLE_DASHBOARDS)} sample dashboards")
