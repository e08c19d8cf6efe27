"""
Case Type Classifier

Keyword table evaluated in priority order. The first category with a
keyword contained in the issue description wins; anything else is a
service appointment.
"""

from typing import Optional, Sequence, Tuple

COMPLAINT = "Complaint"
SERVICE_APPOINTMENT = "Service Appointment"
DEFAULT_CATEGORY = SERVICE_APPOINTMENT

CaseCategory = Tuple[str, Tuple[str, ...]]

COMPLAINT_KEYWORDS = (
    "complaint",
    "rude",
    "delay",
    "wrong",
    "poor",
    "service complaint",
    "technician complaint",
)

SERVICE_KEYWORDS = (
    "not working",
    "leak",
    "repair",
    "ac not working",
    "washing machine not working",
    "issue",
    "problem",
    "kharab",
)

# Priority order matters: complaints outrank service keywords
CASE_CATEGORIES: Tuple[CaseCategory, ...] = (
    (COMPLAINT, COMPLAINT_KEYWORDS),
    (SERVICE_APPOINTMENT, SERVICE_KEYWORDS),
)


def classify_issue(
    description: Optional[str],
    categories: Sequence[CaseCategory] = CASE_CATEGORIES,
    default: str = DEFAULT_CATEGORY,
) -> str:
    """Return the case subject for an issue description."""
    if not description:
        return default
    lowered = description.lower()
    for category, keywords in categories:
        if any(keyword in lowered for keyword in keywords):
            return category
    return default
