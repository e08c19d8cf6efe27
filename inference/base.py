import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .types import DEFAULT_SENTIMENT, EnrichmentResult, normalize_sentiment

logger = logging.getLogger(__name__)


class EnrichmentBackend(ABC):
    """
    Abstract translation + sentiment boundary.

    Callers use enrich(); backends implement _analyze().

    Guarantees:
    - Empty transcript never reaches the backend
    - Missing fields default independently (translation -> transcript,
      sentiment -> Neutral)
    - Never raises: any backend failure degrades to the untranslated
      transcript with a Neutral sentiment
    """

    name = "base"

    async def enrich(self, transcript: Optional[str]) -> EnrichmentResult:
        if not transcript or not transcript.strip():
            return EnrichmentResult(translated_text="", sentiment=DEFAULT_SENTIMENT)

        try:
            result = await self._analyze(transcript)
        except Exception as e:
            logger.error(
                f"Translation/sentiment analysis failed: {e}",
                exc_info=True,
                extra={"backend": self.name},
            )
            return EnrichmentResult(translated_text=transcript, sentiment=DEFAULT_SENTIMENT)

        if not isinstance(result, dict):
            logger.warning(f"Enrichment backend {self.name} returned non-object result")
            result = {}

        translated = result.get("translatedText")
        if not isinstance(translated, str) or not translated:
            translated = transcript

        return EnrichmentResult(
            translated_text=translated,
            sentiment=normalize_sentiment(result.get("sentiment")),
        )

    @abstractmethod
    async def _analyze(self, transcript: str) -> Dict[str, Any]:
        """Return the raw {"translatedText", "sentiment"} object."""
        raise NotImplementedError
