import json
import logging
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from .base import EnrichmentBackend

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a helpful assistant that translates text to English and analyzes sentiment.
For the given transcript:
1. Translate it to English if it's in another language (if already in English, return as is)
2. Analyze the overall sentiment and classify it as one of: Positive, Negative, or Neutral

Respond in JSON format with two fields:
{
  "translatedText": "the English translation",
  "sentiment": "Positive/Negative/Neutral"
}"""


class OpenAIEnrichmentBackend(EnrichmentBackend):
    """
    OpenAI chat-completions backend for transcript enrichment.

    One JSON-mode completion per transcript. Failures surface as exceptions
    from _analyze() and are absorbed by EnrichmentBackend.enrich().
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-3.5-turbo",
        timeout_s: float = 30.0,
        temperature: float = 0.3,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize OpenAI backend.

        Args:
            api_key:     OpenAI API key (required unless client is given)
            model_name:  Chat model used for translation + sentiment
            timeout_s:   Per-request timeout in seconds
            temperature: Sampling temperature
            client:      Pre-built AsyncOpenAI client (tests)
        """
        self.model_name = model_name
        self.temperature = temperature
        self._api_key = api_key
        self._timeout_s = timeout_s
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise RuntimeError("OPENAI_API_KEY not configured")
            self._client = AsyncOpenAI(api_key=self._api_key, timeout=self._timeout_s)
        return self._client

    async def _analyze(self, transcript: str) -> Dict[str, Any]:
        client = self._get_client()
        completion = await client.chat.completions.create(
            model=self.model_name,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": transcript},
            ],
            temperature=self.temperature,
            response_format={"type": "json_object"},
        )
        content = completion.choices[0].message.content or ""
        logger.debug(
            "Enrichment completion received",
            extra={"model": self.model_name, "content_length": len(content)},
        )
        return json.loads(content)
