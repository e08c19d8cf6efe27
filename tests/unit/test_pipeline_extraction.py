"""
Field Extraction Tests

Fallback chains over differently spelled keys; only extracted_data is required.
"""

import pytest

from pipeline.extraction import ExtractionError, extract_fields, first_present


class TestFirstPresent:
    """Generic ordered lookup."""

    def test_first_key_wins(self):
        assert first_present({"a": "1", "b": "2"}, ("a", "b")) == "1"

    def test_skips_missing_none_and_blank(self):
        source = {"a": None, "b": "  ", "c": "3"}
        assert first_present(source, ("x", "a", "b", "c")) == "3"

    def test_zero_is_a_value(self):
        assert first_present({"rate": 0}, ("rate", "rating")) == 0

    def test_default_when_nothing_found(self):
        assert first_present({}, ("a",)) == ""
        assert first_present({}, ("a",), default=None) is None

    def test_non_mapping_source(self):
        assert first_present("not a dict", ("a",)) == ""
        assert first_present(None, ("a",), default="x") == "x"


class TestExtractFields:
    """Payload → ExtractedFields."""

    @pytest.mark.parametrize("payload", [
        {},
        {"extracted_data": {}},
        {"extracted_data": None},
        {"extracted_data": "text"},
        {"transcript": "hello"},
        [],
        None,
    ])
    def test_missing_extracted_data_raises(self, payload):
        with pytest.raises(ExtractionError):
            extract_fields(payload)

    def test_primary_keys(self):
        fields = extract_fields({
            "extracted_data": {
                "user_name": "Asha",
                "mobile": "+91-9876543210",
                "issuedesc": "AC not working",
                "fulladdress": "12 MG Road",
                "technician_visit_date": "2024-05-01T10:00:00Z",
                "rate": 5,
                "feedback": "Quick visit",
                "email": "asha at gmail dot com",
                "pincode": 560001,
            },
        })
        assert fields.user_name == "Asha"
        assert fields.mobile == "+91-9876543210"
        assert fields.issue_desc == "AC not working"
        assert fields.full_address == "12 MG Road"
        assert fields.visit_date == "2024-05-01T10:00:00Z"
        assert fields.rating == "5"
        assert fields.feedback == "Quick visit"
        assert fields.email == "asha at gmail dot com"
        assert fields.pincode == "560001"

    def test_alternate_keys(self):
        fields = extract_fields({
            "extracted_data": {
                "user": "Ravi",
                "issueDesc": "leak",
                "fullAddress": "Flat 4",
                "rating": "4",
                "comment": "ok",
            },
        })
        assert fields.user_name == "Ravi"
        assert fields.issue_desc == "leak"
        assert fields.full_address == "Flat 4"
        assert fields.rating == "4"
        assert fields.feedback == "ok"

    def test_issue_falls_back_to_issue_key(self):
        fields = extract_fields({"extracted_data": {"issuedesc": "", "issue": "noise"}})
        assert fields.issue_desc == "noise"

    def test_top_level_fields(self):
        fields = extract_fields({
            "extracted_data": {"user_name": "Asha"},
            "telephony_data": {"recordingUrl": "https://rec/1.mp3"},
            "transcript": "namaste",
            "conversationDueration": "61",
        })
        assert fields.recording_url == "https://rec/1.mp3"
        assert fields.transcript == "namaste"
        assert fields.duration_seconds == "61"

    def test_absent_fields_default_empty(self):
        fields = extract_fields({"extracted_data": {"user_name": "Asha"}})
        assert fields.mobile == ""
        assert fields.email == ""
        assert fields.recording_url == ""
        assert fields.transcript == ""
        assert fields.duration_seconds is None

    def test_non_object_telephony_data_ignored(self):
        fields = extract_fields({"extracted_data": {"a": 1}, "telephony_data": "n/a"})
        assert fields.recording_url == ""
