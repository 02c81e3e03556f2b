"""Observability."""

from discovery.infrastructure.observability.tracing import (
    setup_tracing,
    instrument_fastapi,
    instrument_httpx,
    shutdown_tracing,
)

__all__ = ["setup_tracing", "instrument_fastapi", "instrument_httpx", "shutdown_tracing"]
