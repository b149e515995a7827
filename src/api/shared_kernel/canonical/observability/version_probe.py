"""Observability probe for the canonical version registry.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class VersionRegistryProbe(Protocol):
    """Protocol for version registry observability probes."""

    def version_mismatch(
        self,
        model_type: str,
        declared_version: str,
        current_version: str,
    ) -> None:
        """Probe emitted when a model fails ensure_current().

        Args:
            model_type: Class name of the offending model
            declared_version: The model_version string the model carries
            current_version: The registered version, or "unknown"
        """
        ...


class DefaultVersionRegistryProbe:
    """Default implementation of VersionRegistryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger()

    def version_mismatch(
        self,
        model_type: str,
        declared_version: str,
        current_version: str,
    ) -> None:
        """Log the mismatch as a warning."""
        self._logger.warning(
            "canonical_version_mismatch",
            model_type=model_type,
            declared_version=declared_version,
            current_version=current_version,
        )
