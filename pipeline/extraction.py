"""
Field Extraction

PURE READ - NO NETWORK, NO MUTATION

Pulls the fields the case needs out of an arbitrarily shaped webhook payload.
Each logical field has an ordered list of keys; the first key with a usable
value wins. No individual field is required.
"""

from typing import Any, Mapping, Optional, Sequence

from pydantic import BaseModel


class ExtractionError(Exception):
    """Payload has no usable extracted_data."""
    pass


# Ordered lookup keys per logical field, searched inside extracted_data
FIELD_CHAINS: dict[str, tuple[str, ...]] = {
    "user_name": ("user_name", "user"),
    "mobile": ("mobile", "Mobile"),
    "email": ("email",),
    "pincode": ("pincode", "Pincode"),
    "visit_date": ("technician_visit_date",),
    "issue_desc": ("issuedesc", "issueDesc", "issue"),
    "full_address": ("fulladdress", "fullAddress"),
    "rating": ("rate", "rating"),
    "feedback": ("feedback", "comment"),
}

# Top-level and telephony_data keys
DURATION_KEYS = ("conversation_duration", "conversationDueration")
RECORDING_KEYS = ("recording_url", "recordingUrl")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def first_present(source: Optional[Mapping], keys: Sequence[str], default: Any = "") -> Any:
    """
    Return the first usable value among `keys` in `source`.

    Missing keys, None and blank strings are skipped. Zero and False are
    real values and are returned as-is.
    """
    if not isinstance(source, Mapping):
        return default
    for key in keys:
        value = source.get(key)
        if not _is_blank(value):
            return value
    return default


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value)


class ExtractedFields(BaseModel):
    """Raw field values resolved from the payload, before normalization."""

    user_name: str = ""
    mobile: str = ""
    email: str = ""
    pincode: str = ""
    visit_date: str = ""
    issue_desc: str = ""
    full_address: str = ""
    rating: str = ""
    feedback: str = ""
    recording_url: str = ""
    transcript: str = ""
    duration_seconds: Any = None

    class Config:
        frozen = True


def extract_fields(payload: Any) -> ExtractedFields:
    """
    Resolve every logical field from the webhook payload.

    Args:
        payload: Decoded JSON body

    Returns:
        ExtractedFields with every field defaulted to "" (duration to None)

    Raises:
        ExtractionError: extracted_data missing, not an object, or empty
    """
    if not isinstance(payload, Mapping):
        raise ExtractionError("No extracted_data found in payload")

    extracted = payload.get("extracted_data")
    if not isinstance(extracted, Mapping) or not extracted:
        raise ExtractionError("No extracted_data found in payload")

    fields = {
        name: _as_text(first_present(extracted, keys))
        for name, keys in FIELD_CHAINS.items()
    }

    transcript = payload.get("transcript")
    fields["transcript"] = transcript if isinstance(transcript, str) else ""
    fields["recording_url"] = _as_text(first_present(payload.get("telephony_data"), RECORDING_KEYS))
    fields["duration_seconds"] = first_present(payload, DURATION_KEYS, default=None)

    return ExtractedFields(**fields)
