"""
Salesforce Case Client

Password-grant token exchange followed by one POST to the Apex case service.
No retries. Every failure raises and aborts the request.
"""

import logging
from typing import Any, Optional

import httpx

from .errors import AuthError, CaseCreationError
from .types import CaseResult, SalesforceSettings, SalesforceToken

logger = logging.getLogger(__name__)

TOKEN_PATH = "/services/oauth2/token"


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class SalesforceClient:
    """
    Creates Cases through the org's Apex REST service.

    Usage:
        client = SalesforceClient(settings)
        result = await client.submit(record)
        print(result.reference)
    """

    def __init__(self, settings: SalesforceSettings):
        self.settings = settings

    async def get_token(self) -> SalesforceToken:
        """
        Exchange the configured credentials for a bearer token.

        Raises:
            AuthError: Missing credentials, HTTP failure, or incomplete response
        """
        missing = self.settings.missing_credentials()
        if missing:
            raise AuthError(f"Salesforce credentials not configured: {', '.join(missing)}")

        form = {
            "grant_type": "password",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "username": self.settings.username,
            "password": self.settings.password,
        }
        endpoint = self.settings.login_url.rstrip("/") + TOKEN_PATH

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_s,
                verify=self.settings.verify_ssl,
            ) as client:
                response = await client.post(
                    endpoint,
                    data=form,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.RequestError as e:
            logger.error(f"Salesforce token request failed: {e}", exc_info=True)
            raise AuthError(f"Salesforce token request failed: {e}")

        if response.status_code != 200:
            body = _error_body(response)
            logger.error(
                f"Salesforce token endpoint returned {response.status_code}",
                extra={"status_code": response.status_code, "error_body": body},
            )
            raise AuthError(
                f"Salesforce token endpoint returned {response.status_code}",
                status_code=response.status_code,
                payload=body,
            )

        try:
            data = response.json()
        except ValueError:
            raise AuthError("Salesforce token response is not JSON")

        access_token = data.get("access_token") if isinstance(data, dict) else None
        instance_url = data.get("instance_url") if isinstance(data, dict) else None
        if not access_token or not instance_url:
            raise AuthError("Failed to obtain Salesforce token")

        logger.info("Salesforce token acquired", extra={"instance_url": instance_url})
        return SalesforceToken(access_token=access_token, instance_url=instance_url)

    async def create_case(self, token: SalesforceToken, payload: dict) -> CaseResult:
        """
        POST one case record to the Apex case service.

        Args:
            token:   Result of get_token()
            payload: Case record keyed by the Apex field names

        Raises:
            CaseCreationError: Transport failure or non-2xx response
        """
        endpoint = token.instance_url.rstrip("/") + self.settings.case_path
        headers = {
            "Authorization": f"Bearer {token.access_token}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_s,
                verify=self.settings.verify_ssl,
            ) as client:
                response = await client.post(endpoint, json=payload, headers=headers)
        except httpx.RequestError as e:
            logger.error(f"Salesforce case request failed: {e}", exc_info=True)
            raise CaseCreationError(f"Salesforce case request failed: {e}")

        if response.status_code >= 400:
            body = _error_body(response)
            logger.error(
                f"Salesforce case service returned {response.status_code}",
                extra={"status_code": response.status_code, "error_body": body},
            )
            raise CaseCreationError(
                f"Salesforce case service returned {response.status_code}",
                status_code=response.status_code,
                payload=body,
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {"response": data}

        result = CaseResult(data=data)
        logger.info("Salesforce case created", extra={"case_reference": result.reference})
        return result

    async def submit(self, payload: dict, token: Optional[SalesforceToken] = None) -> CaseResult:
        """Acquire a token (unless given) and create the case."""
        token = token or await self.get_token()
        return await self.create_case(token, payload)
