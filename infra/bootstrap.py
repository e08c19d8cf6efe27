"""
Infrastructure initialization and bootstrap.

Singleton pattern for building the case intake handler from configuration.
"""

from typing import Optional

from pipeline import CaseIntakeHandler, Notifier

from .config import InfraConfig, get_config


class InfraBootstrap:
    """
    Bootstrap infrastructure based on configuration.

    Singleton pattern - single instance per process.
    """

    _instance: Optional["InfraBootstrap"] = None

    def __init__(self, config: Optional[InfraConfig] = None):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.enrichment_backend = self.config.create_enrichment_backend()
        self.crm_client = self.config.create_crm_client()
        self.notifier = Notifier(
            mailer=self.config.create_mail_transport(),
            whatsapp=self.config.create_whatsapp_settings(),
            brand_name=self.config.brand_name,
            contact_number=self.config.contact_number,
            display_timezone=self.config.display_timezone,
        )
        self.handler = CaseIntakeHandler(
            enrichment=self.enrichment_backend,
            crm=self.crm_client,
            notifier=self.notifier,
        )

    @classmethod
    def get_instance(cls, config: Optional[InfraConfig] = None) -> "InfraBootstrap":
        """
        Get singleton instance.

        Args:
            config: Optional custom configuration (only used first time)

        Returns:
            Singleton InfraBootstrap instance
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    def get_handler(self) -> CaseIntakeHandler:
        """Get the case intake handler."""
        return self.handler

    def __repr__(self) -> str:
        """String representation showing configured backends."""
        return (
            f"InfraBootstrap(enrichment={self.config.enrichment_backend}, "
            f"mail={self.config.mail_backend}, "
            f"whatsapp={'enabled' if self.config.whatsapp_enabled else 'disabled'})"
        )


def bootstrap_infrastructure(config: Optional[InfraConfig] = None) -> InfraBootstrap:
    """
    Bootstrap all infrastructure backends.

    Args:
        config: Optional custom configuration

    Returns:
        InfraBootstrap instance with all backends initialized
    """
    return InfraBootstrap.get_instance(config)
