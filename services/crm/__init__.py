"""
CRM (Salesforce) service exports.
"""

from .errors import AuthError, CaseCreationError, CRMError
from .salesforce import SalesforceClient
from .types import CaseResult, SalesforceSettings, SalesforceToken

__all__ = [
    "SalesforceClient",
    "SalesforceSettings",
    "SalesforceToken",
    "CaseResult",
    "CRMError",
    "AuthError",
    "CaseCreationError",
]
