from typing import Any, Dict

from .base import EnrichmentBackend


class StubEnrichmentBackend(EnrichmentBackend):
    """
    Deterministic fake enrichment for testing and CI.

    Echoes the transcript untouched and derives a sentiment from a couple of
    obvious words, so local runs never need network access.
    """

    name = "stub"

    _NEGATIVE = ("bad", "rude", "angry", "worst", "complaint", "not working")
    _POSITIVE = ("thank", "great", "good", "happy", "excellent")

    async def _analyze(self, transcript: str) -> Dict[str, Any]:
        lowered = transcript.lower()
        if any(word in lowered for word in self._NEGATIVE):
            sentiment = "Negative"
        elif any(word in lowered for word in self._POSITIVE):
            sentiment = "Positive"
        else:
            sentiment = "Neutral"
        return {"translatedText": transcript, "sentiment": sentiment}
