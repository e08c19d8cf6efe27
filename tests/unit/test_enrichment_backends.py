"""
Transcript Enrichment Tests

Verifies:
✔ Empty transcript short-circuits (no backend call)
✔ Missing fields default independently
✔ Backend failures degrade to (transcript, Neutral)
✔ OpenAI backend sends one JSON-mode completion
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from inference import (
    EnrichmentBackend,
    EnrichmentResult,
    OpenAIEnrichmentBackend,
    StubEnrichmentBackend,
    normalize_sentiment,
)


# ─────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────


class RecordingBackend(EnrichmentBackend):
    """Backend returning a canned result and counting calls."""

    name = "recording"

    def __init__(self, result=None, error=None):
        self.result = result or {}
        self.error = error
        self.calls = 0

    async def _analyze(self, transcript):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


def make_completion(content: str):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def make_openai_client(content=None, error=None):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(
        return_value=make_completion(content) if content is not None else None,
        side_effect=error,
    )
    return client


# ─────────────────────────────────────────────────────
# Base contract
# ─────────────────────────────────────────────────────


class TestEnrichmentContract:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("transcript", ["", "   \n\t", None])
    async def test_empty_transcript_skips_backend(self, transcript):
        backend = RecordingBackend(result={"translatedText": "x", "sentiment": "Positive"})
        result = await backend.enrich(transcript)

        assert result == EnrichmentResult(translated_text="", sentiment="Neutral")
        assert result.to_dict() == {"translatedText": "", "sentiment": "Neutral"}
        assert backend.calls == 0

    @pytest.mark.asyncio
    async def test_full_result(self):
        backend = RecordingBackend(result={"translatedText": "My AC is broken", "sentiment": "Negative"})
        result = await backend.enrich("mera AC kharab hai")

        assert result.translated_text == "My AC is broken"
        assert result.sentiment == "Negative"
        assert backend.calls == 1

    @pytest.mark.asyncio
    async def test_missing_translation_defaults_to_transcript(self):
        backend = RecordingBackend(result={"sentiment": "Positive"})
        result = await backend.enrich("thank you")

        assert result.translated_text == "thank you"
        assert result.sentiment == "Positive"

    @pytest.mark.asyncio
    async def test_missing_sentiment_defaults_to_neutral(self):
        backend = RecordingBackend(result={"translatedText": "hello"})
        result = await backend.enrich("namaste")

        assert result.translated_text == "hello"
        assert result.sentiment == "Neutral"

    @pytest.mark.asyncio
    async def test_backend_exception_degrades(self):
        backend = RecordingBackend(error=RuntimeError("service down"))
        result = await backend.enrich("mera AC kharab hai")

        assert result.translated_text == "mera AC kharab hai"
        assert result.sentiment == "Neutral"

    @pytest.mark.asyncio
    async def test_non_object_result_degrades(self):
        backend = RecordingBackend(result=["not", "a", "dict"])
        result = await backend.enrich("hello")

        assert result == EnrichmentResult(translated_text="hello", sentiment="Neutral")


class TestNormalizeSentiment:
    def test_known_labels_case_normalized(self):
        assert normalize_sentiment("positive") == "Positive"
        assert normalize_sentiment(" NEGATIVE ") == "Negative"

    def test_unknown_labels_neutral(self):
        assert normalize_sentiment("Mixed") == "Neutral"
        assert normalize_sentiment(None) == "Neutral"
        assert normalize_sentiment(3) == "Neutral"


# ─────────────────────────────────────────────────────
# Stub backend
# ─────────────────────────────────────────────────────


class TestStubEnrichmentBackend:
    @pytest.mark.asyncio
    async def test_echoes_transcript(self):
        result = await StubEnrichmentBackend().enrich("AC not working")
        assert result.translated_text == "AC not working"
        assert result.sentiment == "Negative"

    @pytest.mark.asyncio
    async def test_positive(self):
        result = await StubEnrichmentBackend().enrich("thank you, great service")
        assert result.sentiment == "Positive"


# ─────────────────────────────────────────────────────
# OpenAI backend
# ─────────────────────────────────────────────────────


class TestOpenAIEnrichmentBackend:
    @pytest.mark.asyncio
    async def test_parses_json_completion(self):
        client = make_openai_client(
            content=json.dumps({"translatedText": "The AC is broken", "sentiment": "Negative"})
        )
        backend = OpenAIEnrichmentBackend(api_key="sk-test", client=client)

        result = await backend.enrich("AC kharab hai")

        assert result.translated_text == "The AC is broken"
        assert result.sentiment == "Negative"

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-3.5-turbo"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["temperature"] == 0.3
        assert kwargs["messages"][0]["role"] == "system"
        assert kwargs["messages"][1] == {"role": "user", "content": "AC kharab hai"}

    @pytest.mark.asyncio
    async def test_empty_transcript_makes_no_call(self):
        client = make_openai_client(content="{}")
        backend = OpenAIEnrichmentBackend(api_key="sk-test", client=client)

        result = await backend.enrich("")

        assert result.to_dict() == {"translatedText": "", "sentiment": "Neutral"}
        assert client.chat.completions.create.call_count == 0

    @pytest.mark.asyncio
    async def test_api_error_degrades(self):
        client = make_openai_client(error=RuntimeError("rate limited"))
        backend = OpenAIEnrichmentBackend(api_key="sk-test", client=client)

        result = await backend.enrich("hello there")

        assert result.translated_text == "hello there"
        assert result.sentiment == "Neutral"

    @pytest.mark.asyncio
    async def test_invalid_json_degrades(self):
        client = make_openai_client(content="not json at all")
        backend = OpenAIEnrichmentBackend(api_key="sk-test", client=client)

        result = await backend.enrich("hello there")

        assert result == EnrichmentResult(translated_text="hello there", sentiment="Neutral")

    @pytest.mark.asyncio
    async def test_missing_api_key_degrades(self):
        backend = OpenAIEnrichmentBackend(api_key="")

        result = await backend.enrich("hello there")

        assert result == EnrichmentResult(translated_text="hello there", sentiment="Neutral")
