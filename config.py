"""
Configuration management for the Case Intake service.

Loads environment variables from .env file and provides typed access to
service-level configuration. Backend credentials are read by infra.config.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for the Case Intake service."""

    SERVICE_NAME = os.getenv("SERVICE_NAME", "Case Intake Webhook")

    # API Configuration
    AGENT_PORT = int(os.getenv("AGENT_PORT", "8000"))

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Backend selection
    ENRICHMENT_BACKEND = os.getenv("ENRICHMENT_BACKEND", "openai")
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", "smtp")
    WHATSAPP_ENABLED = os.getenv("WHATSAPP_ENABLED", "true").strip().lower() in ("1", "true", "yes", "on")

    @classmethod
    def required(cls) -> list:
        """Secrets the configured backends need."""
        required = [
            "SALESFORCE_CLIENT_ID",
            "SALESFORCE_CLIENT_SECRET",
            "SALESFORCE_USERNAME",
            "SALESFORCE_PASSWORD",
        ]
        if cls.ENRICHMENT_BACKEND == "openai":
            required.append("OPENAI_API_KEY")
        if cls.WHATSAPP_ENABLED:
            required.extend(["WHATSAPP_TOKEN", "WHATSAPP_PHONE_NUMBER_ID"])
        if cls.MAIL_BACKEND == "smtp":
            required.extend(["SMTP_HOST", "MAIL_FROM"])
        return required

    @classmethod
    def missing(cls) -> list:
        """Required environment variables that are not set."""
        return [key for key in cls.required() if not os.getenv(key)]

    @classmethod
    def validate(cls) -> bool:
        """Validate that required configuration is set."""
        missing = cls.missing()

        if missing:
            print(f"⚠️  Missing required environment variables: {', '.join(missing)}")
            print(f"   Please set them in .env file")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Service: {Config.SERVICE_NAME}")
    print(f"  Agent Port: {Config.AGENT_PORT}")
    print(f"  Enrichment Backend: {Config.ENRICHMENT_BACKEND}")
    print(f"  Mail Backend: {Config.MAIL_BACKEND}")
    print(f"  WhatsApp: {'enabled' if Config.WHATSAPP_ENABLED else 'disabled'}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
