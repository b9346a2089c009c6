import re
import logging
from typing import List, Dict
import numpy as np

from dashboard_catalog.models.dashboard_models import Dashboard
from dashboard_catalog.models.embedding_models import TextEmbedding

logger = logging.getLogger(__name__)

STOPWORDS = frozenset([
    "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
    "of", "in", "to", "for", "with", "by", "at", "on", "from"
])

PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")


class EmbeddingService:
    """
    Bag-of-words vectorizer over a local vocabulary.

    Each text gets its own vocabulary, enumerated in order of first appearance,
    so two vectors only share a coordinate space when their texts share the same
    leading terms. Vectors are raw term frequencies scaled to unit length, no IDF.
    """

    def tokenize(self, text: str) -> List[str]:
        """
        Lowercase, strip punctuation, split on whitespace and drop short tokens
        and stopwords. Order of the remaining tokens is preserved.
        """
        cleaned = PUNCTUATION_PATTERN.sub("", text.lower())
        return [
            token for token in cleaned.split()
            if len(token) > 1 and token not in STOPWORDS
        ]

    def build_vocabulary(self, tokens: List[str]) -> List[str]:
        """Distinct tokens in order of first appearance"""
        return list(dict.fromkeys(tokens))

    def embed_text(self, text: str) -> TextEmbedding:
        """
        Vectorize text and keep the vocabulary that defines the slot order

        Args:
            text: Free text to vectorize

        Returns:
            TextEmbedding with the local vocabulary and the L2-normalized
            term-frequency vector. Empty or all-stopword text gives an empty vector.
        """
        tokens = self.tokenize(text)
        vocabulary = self.build_vocabulary(tokens)
        index: Dict[str, int] = {term: i for i, term in enumerate(vocabulary)}

        # Raw term frequencies
        vector = np.zeros(len(vocabulary), dtype=float)
        for token in tokens:
            vector[index[token]] += 1.0

        # L2 normalization, zero vector is returned unchanged
        magnitude = np.linalg.norm(vector)
        if magnitude > 0:
            vector = vector / magnitude

        return TextEmbedding(terms=vocabulary, vector=vector.tolist())

    def create_embedding(self, text: str) -> List[float]:
        return self.embed_text(text).vector

    def dashboard_text(self, dashboard: Dashboard) -> str:
        # Category is included so same-category dashboards always share a term
        return f"{dashboard.title} {dashboard.description} {dashboard.category.value}"

    def embed_dashboard(self, dashboard: Dashboard) -> TextEmbedding:
        return self.embed_text(self.dashboard_text(dashboard))

    def generate_dashboard_embedding(self, dashboard: Dashboard) -> List[float]:
        """Embedding of the dashboard's title, description and category"""
        return self.embed_dashboard(dashboard).vector


# Global service instance
embedding_service = EmbeddingService()
