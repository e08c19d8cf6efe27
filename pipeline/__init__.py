"""
Case intake pipeline.

Pure stages (extraction, normalization, classification, record assembly)
plus the handler and notifier that drive the external collaborators.
"""

from .classifier import CASE_CATEGORIES, COMPLAINT, DEFAULT_CATEGORY, SERVICE_APPOINTMENT, classify_issue
from .extraction import ExtractedFields, ExtractionError, FIELD_CHAINS, extract_fields, first_present
from .handler import CaseIntakeHandler, CaseIntakeResult
from .normalize import clean_mobile, format_duration, format_service_time, spoken_to_email, to_iso_timestamp
from .notify import NotificationReport, Notifier, build_email, build_template_parameters, to_whatsapp_number
from .record import CaseRecord, build_case_record

__all__ = [
    # Extraction
    "ExtractedFields",
    "ExtractionError",
    "FIELD_CHAINS",
    "extract_fields",
    "first_present",
    # Normalization
    "spoken_to_email",
    "clean_mobile",
    "format_duration",
    "to_iso_timestamp",
    "format_service_time",
    # Classification
    "CASE_CATEGORIES",
    "COMPLAINT",
    "SERVICE_APPOINTMENT",
    "DEFAULT_CATEGORY",
    "classify_issue",
    # Record
    "CaseRecord",
    "build_case_record",
    # Notification
    "Notifier",
    "NotificationReport",
    "build_email",
    "build_template_parameters",
    "to_whatsapp_number",
    # Handler
    "CaseIntakeHandler",
    "CaseIntakeResult",
]
