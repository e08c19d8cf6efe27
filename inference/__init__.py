"""
Transcript enrichment boundary (translation + sentiment).

The case pipeline depends only on EnrichmentBackend, so the inference
provider can be swapped without touching request handling.

Supported backends:
- StubEnrichmentBackend: Deterministic, offline (default for CI/tests)
- OpenAIEnrichmentBackend: OpenAI chat completions in JSON mode

Example usage:
    from inference import StubEnrichmentBackend

    backend = StubEnrichmentBackend()
    result = await backend.enrich("AC is not working since Monday")
"""

from .types import DEFAULT_SENTIMENT, SENTIMENTS, EnrichmentResult, Sentiment, normalize_sentiment
from .base import EnrichmentBackend
from .stub import StubEnrichmentBackend
from .openai_backend import OpenAIEnrichmentBackend

__all__ = [
    "EnrichmentResult",
    "Sentiment",
    "SENTIMENTS",
    "DEFAULT_SENTIMENT",
    "normalize_sentiment",
    "EnrichmentBackend",
    "StubEnrichmentBackend",
    "OpenAIEnrichmentBackend",
]
