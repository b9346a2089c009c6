# Embedding refresh sweep: vectorizes every dashboard that lacks an embedding
from datetime import datetime, timezone
from typing import Optional
import logging

from dashboard_catalog.database.memory_store import MemoryStore
from dashboard_catalog.models.embedding_models import EmbeddingRefreshMetrics
from dashboard_catalog.services.embedding_service import EmbeddingService, embedding_service

logger = logging.getLogger(__name__)


class EmbeddingRefreshPipeline:
    """
    Computes and stores embeddings for dashboards in the store.

    The sweep is idempotent: vectorization is deterministic, so running it again
    (or with force=True) rewrites identical vectors.
    """

    def __init__(self, store: MemoryStore, embedder: Optional[EmbeddingService] = None):
        self.store = store
        self.embedder = embedder or embedding_service

    def run(self, force: bool = False) -> EmbeddingRefreshMetrics:
        """
        Run one sweep over all dashboards

        Args:
            force: Recompute embeddings that are already present too

        Returns:
            EmbeddingRefreshMetrics with per-sweep counts and errors
        """
        start_time = datetime.now(timezone.utc)
        metrics = EmbeddingRefreshMetrics(execution_date=start_time, forced=force)

        dashboards = self.store.get_all_dashboards()
        metrics.total_dashboards = len(dashboards)

        for dashboard_id in [d.id for d in dashboards]:
            try:
                # Embed and store as one step so a concurrent edit cannot be
                # paired with a vector of its previous text
                with self.store.lock:
                    dashboard = self.store.get_dashboard_by_id(dashboard_id)
                    if dashboard is None:
                        metrics.failed_updates += 1
                        metrics.errors.append(f"Dashboard {dashboard_id} disappeared during refresh")
                        continue

                    if dashboard.embeddings and not force:
                        metrics.already_embedded += 1
                        continue

                    embedding = self.embedder.embed_dashboard(dashboard)
                    self.store.update_dashboard_embeddings(
                        dashboard_id, embedding.vector, embedding.terms
                    )
                metrics.embeddings_computed += 1

            except Exception as e:
                logger.error(f"Error computing embedding for dashboard {dashboard_id}: {str(e)}")
                metrics.failed_updates += 1
                metrics.errors.append(f"Dashboard {dashboard_id}: {str(e)}")

        metrics.execution_time_seconds = (datetime.now(timezone.utc) - start_time).total_seconds()

        if metrics.embeddings_computed:
            logger.info(
                f"Embedding refresh computed {metrics.embeddings_computed}/{metrics.total_dashboards} "
                f"embeddings in {metrics.execution_time_seconds:.3f}s"
            )
        return metrics
