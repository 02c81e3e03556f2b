"""Application Ports."""

from discovery.application.discovery.ports.business_catalog import BusinessCatalog

__all__ = ["BusinessCatalog"]
