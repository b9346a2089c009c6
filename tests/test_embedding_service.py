import math
import pytest

from dashboard_catalog.models.dashboard_models import Dashboard
from dashboard_catalog.services.embedding_service import EmbeddingService


@pytest.fixture
def embedder():
    return EmbeddingService()


def _norm(vector):
    return math.sqrt(sum(v * v for v in vector))


def test_tokenize_drops_stopwords_and_punctuation(embedder):
    assert embedder.tokenize("The Quick, Fox!") == ["quick", "fox"]


def test_tokenize_strips_symbols_inside_words(embedder):
    assert embedder.tokenize("Real-time KPI_s (v2) {beta}") == ["realtime", "kpis", "v2", "beta"]


def test_tokenize_drops_single_characters(embedder):
    assert embedder.tokenize("x y data z") == ["data"]


def test_tokenize_splits_on_whitespace_runs(embedder):
    assert embedder.tokenize("  sales\t\tmetrics \n revenue ") == ["sales", "metrics", "revenue"]


def test_create_embedding_counts_terms_in_first_seen_order(embedder):
    vector = embedder.create_embedding("sales sales metrics")
    assert vector == pytest.approx([2 / math.sqrt(5), 1 / math.sqrt(5)])


def test_embed_text_keeps_vocabulary(embedder):
    embedding = embedder.embed_text("Revenue forecast, revenue trends")
    assert embedding.terms == ["revenue", "forecast", "trends"]
    assert len(embedding.vector) == len(embedding.terms)


@pytest.mark.parametrize("text", [
    "Sales Performance Dashboard",
    "Track data quality metrics across all sources data data",
    "a",
    "the of a",
    "",
    "!!! ... ---",
])
def test_embedding_norm_is_zero_or_one(embedder, text):
    vector = embedder.create_embedding(text)
    norm = _norm(vector)
    assert norm == pytest.approx(0.0) or norm == pytest.approx(1.0)


def test_all_stopword_text_gives_empty_vector(embedder):
    assert embedder.create_embedding("the of a and") == []
    assert embedder.create_embedding("") == []


def test_embedding_is_deterministic(embedder):
    text = "Customer acquisition and retention metrics ecom"
    assert embedder.create_embedding(text) == embedder.create_embedding(text)


def test_dashboard_embedding_includes_category():
    embedder = EmbeddingService()
    dashboard = Dashboard(
        id=1,
        title="Revenue Forecast",
        description="Projected revenue",
        category="business",
        image_url="https://example.com/x.png",
        created_by="Finance Team"
    )
    assert embedder.dashboard_text(dashboard) == "Revenue Forecast Projected revenue business"
    assert embedder.embed_dashboard(dashboard).terms == ["revenue", "forecast", "projected", "business"]
    assert embedder.generate_dashboard_embedding(dashboard) == pytest.approx(
        [2 / math.sqrt(7), 1 / math.sqrt(7), 1 / math.sqrt(7), 1 / math.sqrt(7)]
    )
