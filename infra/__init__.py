"""
Infrastructure module exports.

Configuration and bootstrap for all service backends.
"""

from .config import InfraConfig, get_config, EnrichmentBackendType, MailBackendType
from .bootstrap import InfraBootstrap, bootstrap_infrastructure

__all__ = [
    "InfraConfig",
    "get_config",
    "EnrichmentBackendType",
    "MailBackendType",
    "InfraBootstrap",
    "bootstrap_infrastructure",
]
