from typing import Any, Optional


class CRMError(Exception):
    """Salesforce call failed. Fatal for the request."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    @property
    def detail(self) -> Any:
        """Upstream error body when there is one, else the message."""
        return self.payload if self.payload is not None else str(self)


class AuthError(CRMError):
    """Token exchange failed or returned no access_token/instance_url."""
    pass


class CaseCreationError(CRMError):
    """Case-service POST failed."""
    pass
