from dataclasses import dataclass
from typing import Literal

Sentiment = Literal["Positive", "Negative", "Neutral"]

SENTIMENTS = ("Positive", "Negative", "Neutral")
DEFAULT_SENTIMENT: Sentiment = "Neutral"


@dataclass(frozen=True)
class EnrichmentResult:
    translated_text: str
    sentiment: Sentiment = DEFAULT_SENTIMENT

    def to_dict(self) -> dict:
        return {"translatedText": self.translated_text, "sentiment": self.sentiment}


def normalize_sentiment(value) -> Sentiment:
    """Map a model-supplied label onto one of the three sentiments."""
    if not isinstance(value, str):
        return DEFAULT_SENTIMENT
    label = value.strip().capitalize()
    if label in SENTIMENTS:
        return label  # type: ignore[return-value]
    return DEFAULT_SENTIMENT
