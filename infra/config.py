"""
Infrastructure configuration system.

Environment-based backend selection with sensible defaults.
Secrets are read here and handed to the clients that use them; nothing
below holds a network connection.
"""

import os
from dataclasses import dataclass
from typing import Literal, Optional

from inference import EnrichmentBackend, OpenAIEnrichmentBackend, StubEnrichmentBackend
from services.crm import SalesforceClient, SalesforceSettings
from services.mail import MailTransport, SMTPMailTransport, StubMailTransport
from transport.whatsapp import WhatsAppSettings


EnrichmentBackendType = Literal["stub", "openai"]
MailBackendType = Literal["stub", "smtp", "disabled"]


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    # Outbound HTTP
    http_timeout_s: float
    http_verify_ssl: bool

    # Enrichment
    enrichment_backend: EnrichmentBackendType
    openai_api_key: str
    openai_model: str

    # Salesforce
    salesforce_client_id: str
    salesforce_client_secret: str
    salesforce_username: str
    salesforce_password: str
    salesforce_login_url: str
    salesforce_case_path: str

    # WhatsApp
    whatsapp_enabled: bool
    whatsapp_token: str
    whatsapp_phone_number_id: str
    whatsapp_api_version: str
    whatsapp_template_name: str
    whatsapp_template_language: str
    contact_number: str

    # Mail
    mail_backend: MailBackendType
    smtp_host: str
    smtp_port: int
    smtp_username: Optional[str]
    smtp_password: Optional[str]
    smtp_use_tls: bool
    mail_from: Optional[str]

    # Presentation
    brand_name: str
    display_timezone: str

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """
        Load configuration from environment variables.

        Defaults:
        - Enrichment: openai (gpt-3.5-turbo)
        - Mail: smtp
        - WhatsApp: enabled
        - TLS verification: on
        """
        return cls(
            # HTTP Configuration
            http_timeout_s=float(os.getenv("HTTP_TIMEOUT_S", "30")),
            http_verify_ssl=_env_bool("HTTP_VERIFY_SSL", "true"),

            # Enrichment Configuration
            enrichment_backend=os.getenv("ENRICHMENT_BACKEND", "openai"),  # type: ignore
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),

            # Salesforce Configuration
            salesforce_client_id=os.getenv("SALESFORCE_CLIENT_ID", ""),
            salesforce_client_secret=os.getenv("SALESFORCE_CLIENT_SECRET", ""),
            salesforce_username=os.getenv("SALESFORCE_USERNAME", ""),
            salesforce_password=os.getenv("SALESFORCE_PASSWORD", ""),
            salesforce_login_url=os.getenv("SALESFORCE_LOGIN_URL", "https://login.salesforce.com"),
            salesforce_case_path=os.getenv("SALESFORCE_CASE_PATH", "/services/apexrest/caseService"),

            # WhatsApp Configuration
            whatsapp_enabled=_env_bool("WHATSAPP_ENABLED", "true"),
            whatsapp_token=os.getenv("WHATSAPP_TOKEN", ""),
            whatsapp_phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
            whatsapp_api_version=os.getenv("WHATSAPP_API_VERSION", "v22.0"),
            whatsapp_template_name=os.getenv("WHATSAPP_TEMPLATE_NAME", "gb_feedback_thankyou"),
            whatsapp_template_language=os.getenv("WHATSAPP_TEMPLATE_LANGUAGE", "en"),
            contact_number=os.getenv("CONTACT_NUMBER", "1800-123-456"),

            # Mail Configuration
            mail_backend=os.getenv("MAIL_BACKEND", "smtp"),  # type: ignore
            smtp_host=os.getenv("SMTP_HOST", ""),
            smtp_port=int(os.getenv("SMTP_PORT", "587")),
            smtp_username=os.getenv("SMTP_USERNAME") or None,
            smtp_password=os.getenv("SMTP_PASSWORD") or None,
            smtp_use_tls=_env_bool("SMTP_USE_TLS", "true"),
            mail_from=os.getenv("MAIL_FROM") or None,

            # Presentation
            brand_name=os.getenv("BRAND_NAME", "G&B"),
            display_timezone=os.getenv("DISPLAY_TIMEZONE", "Asia/Kolkata"),
        )

    def create_enrichment_backend(self) -> EnrichmentBackend:
        """Create enrichment backend instance based on configuration."""
        if self.enrichment_backend == "stub":
            return StubEnrichmentBackend()
        # Default to openai
        return OpenAIEnrichmentBackend(
            api_key=self.openai_api_key,
            model_name=self.openai_model,
            timeout_s=self.http_timeout_s,
        )

    def create_crm_client(self) -> SalesforceClient:
        """Create Salesforce client. Credentials are checked at call time."""
        return SalesforceClient(
            SalesforceSettings(
                client_id=self.salesforce_client_id,
                client_secret=self.salesforce_client_secret,
                username=self.salesforce_username,
                password=self.salesforce_password,
                login_url=self.salesforce_login_url,
                case_path=self.salesforce_case_path,
                timeout_s=self.http_timeout_s,
                verify_ssl=self.http_verify_ssl,
            )
        )

    def create_mail_transport(self) -> Optional[MailTransport]:
        """Create mail transport instance based on configuration."""
        if self.mail_backend == "disabled":
            return None
        if self.mail_backend == "stub":
            return StubMailTransport()
        # Default to smtp
        return SMTPMailTransport(
            host=self.smtp_host,
            port=self.smtp_port,
            username=self.smtp_username,
            password=self.smtp_password,
            sender=self.mail_from,
            use_tls=self.smtp_use_tls,
            timeout_s=self.http_timeout_s,
            verify_ssl=self.http_verify_ssl,
        )

    def create_whatsapp_settings(self) -> Optional[WhatsAppSettings]:
        """WhatsApp settings, or None when the channel is disabled."""
        if not self.whatsapp_enabled:
            return None
        return WhatsAppSettings(
            access_token=self.whatsapp_token,
            phone_number_id=self.whatsapp_phone_number_id,
            api_version=self.whatsapp_api_version,
            template_name=self.whatsapp_template_name,
            language_code=self.whatsapp_template_language,
            timeout_s=self.http_timeout_s,
            verify_ssl=self.http_verify_ssl,
        )


def get_config() -> InfraConfig:
    """Get infrastructure configuration."""
    return InfraConfig.from_env()
