"""
Salesforce data types.

Token and case-creation results as returned by the org.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SalesforceSettings:
    """Connection settings for the password-grant flow and the case service."""

    client_id: str
    client_secret: str
    username: str
    password: str
    login_url: str = "https://login.salesforce.com"
    case_path: str = "/services/apexrest/caseService"
    timeout_s: float = 30.0
    verify_ssl: bool = True

    def missing_credentials(self) -> list:
        names = {
            "SALESFORCE_CLIENT_ID": self.client_id,
            "SALESFORCE_CLIENT_SECRET": self.client_secret,
            "SALESFORCE_USERNAME": self.username,
            "SALESFORCE_PASSWORD": self.password,
        }
        return [name for name, value in names.items() if not value]


@dataclass(frozen=True)
class SalesforceToken:
    access_token: str
    instance_url: str

    def __repr__(self) -> str:
        # keep the bearer token out of logs
        return f"SalesforceToken(instance_url={self.instance_url!r})"


@dataclass(frozen=True)
class CaseResult:
    """
    Case-service response.

    The Apex service has answered with caseNumber, caseNum and CaseNumber
    over time, and with caseId or id for the record id.
    """

    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def case_number(self) -> str:
        for key in ("caseNumber", "caseNum", "CaseNumber"):
            value = self.data.get(key)
            if value:
                return str(value)
        return ""

    @property
    def case_id(self) -> str:
        for key in ("caseId", "id"):
            value = self.data.get(key)
            if value:
                return str(value)
        return ""

    @property
    def email(self) -> Optional[str]:
        value = self.data.get("email")
        return str(value) if value else None

    @property
    def reference(self) -> str:
        """Customer-facing case reference."""
        if self.case_number:
            return f"SR-{self.case_number}"
        return self.case_id or "SR-UNKNOWN"
