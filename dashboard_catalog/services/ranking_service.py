from typing import List, Optional
import logging
import numpy as np

from dashboard_catalog.models.embedding_models import DashboardEmbedding, SimilarityResult, TextEmbedding
from dashboard_catalog.services.embedding_service import EmbeddingService, embedding_service

logger = logging.getLogger(__name__)

ALIGNMENT_MODES = ("vocabulary", "positional")


class RankingService:
    """
    Cosine-similarity ranking of stored dashboard embeddings against a query.

    Embeddings are built over per-text vocabularies, so slot i of one vector and
    slot i of another usually stand for different terms. Two comparison modes:

    - "vocabulary": the query vector is re-ordered into the candidate's own
      vocabulary before comparison (terms the candidate lacks go after its
      slots). This is exact bag-of-words cosine similarity.
    - "positional": vectors are compared slot by slot after zero padding,
      whatever terms the slots stand for.

    Candidates stored without a vocabulary can only be compared positionally.
    """

    def __init__(self, embedder: Optional[EmbeddingService] = None, alignment: str = "vocabulary"):
        if alignment not in ALIGNMENT_MODES:
            raise ValueError(f"Unknown similarity alignment: {alignment}")
        self.embedder = embedder or embedding_service
        self.alignment = alignment

    def pad_vectors(self, vec_a: List[float], vec_b: List[float]):
        """Right-pad the shorter vector with zeros so both have the same length"""
        a = np.asarray(vec_a, dtype=float)
        b = np.asarray(vec_b, dtype=float)
        max_length = max(len(a), len(b))
        return (
            np.pad(a, (0, max_length - len(a))),
            np.pad(b, (0, max_length - len(b)))
        )

    def cosine_similarity(self, vec_a: List[float], vec_b: List[float]) -> float:
        """
        Cosine similarity of two vectors, zero-padding the shorter one.
        Returns 0.0 when either vector has zero norm.
        """
        a, b = self.pad_vectors(vec_a, vec_b)

        norm_a = np.linalg.norm(a)
        norm_b = np.linalg.norm(b)
        if norm_a == 0 or norm_b == 0:
            return 0.0

        return float(np.dot(a, b) / (norm_a * norm_b))

    def align_query(self, query: TextEmbedding, candidate_terms: List[str]) -> List[float]:
        """
        Express the query vector in the candidate's coordinate order.

        Slot i of the result holds the query weight of candidate_terms[i];
        weights of query terms the candidate does not have are appended after.
        """
        weights = dict(zip(query.terms, query.vector))
        aligned = [weights.pop(term, 0.0) for term in candidate_terms]
        aligned.extend(weight for term, weight in zip(query.terms, query.vector) if term in weights)
        return aligned

    def score_candidate(self, query: TextEmbedding, candidate: DashboardEmbedding) -> float:
        if self.alignment == "vocabulary" and candidate.terms is not None:
            query_vector = self.align_query(query, candidate.terms)
        else:
            query_vector = query.vector
        return self.cosine_similarity(query_vector, candidate.embeddings)

    def find_similar_dashboards(self, query: str,
                                dashboards: List[DashboardEmbedding],
                                limit: int = 5) -> List[SimilarityResult]:
        """
        Rank dashboards against a free text query

        Args:
            query: Query text, vectorized with the same tokenizer as dashboards
            dashboards: Candidates; those without an embedding are skipped
            limit: Maximum number of results

        Returns:
            At most `limit` results ordered by similarity, highest first. Ties keep
            the candidates' original order.
        """
        query_embedding = self.embedder.embed_text(query)
        if not query_embedding.vector:
            logger.info(f"Query '{query}' has no searchable terms, all similarities will be 0")

        similarities = [
            SimilarityResult(
                dashboard_id=dashboard.id,
                similarity=self.score_candidate(query_embedding, dashboard)
            )
            for dashboard in dashboards
            if dashboard.embeddings is not None
        ]

        # sorted() is stable, so equal scores stay in candidate order
        similarities = sorted(similarities, key=lambda x: x.similarity, reverse=True)
        return similarities[:limit]


# Global ranking instance
ranking_service = RankingService()
