# Embedding lifecycle pipelines

from .embedding_refresh import EmbeddingRefreshPipeline

__all__ = [
    "EmbeddingRefreshPipeline"
]
