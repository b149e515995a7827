"""Registry of current canonical schema versions.

Each canonical model declares a ``model_version`` of the form
``"<kind>/<version>"``. The registry knows the current version of every
kind and rejects records produced against an older or newer schema.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from shared_kernel.canonical.exceptions import VersionMismatchError
from shared_kernel.canonical.observability import (
    DefaultVersionRegistryProbe,
    VersionRegistryProbe,
)
from shared_kernel.canonical.protocols import CanonicalModel

DEFAULT_VERSION = "1.0"
UNKNOWN_VERSION = "unknown"

CURRENT_VERSIONS: Mapping[str, str] = MappingProxyType(
    {
        "customer-record": "1.0",
        "shipment-record": "1.0",
        "billing-record": "1.0",
        "location-access-extension": "1.0",
    }
)


def parse_model_version(model_version: str) -> tuple[str, str]:
    """Split a model version tag into (kind, version).

    A tag without a version part is treated as version "1.0".
    """
    parts = model_version.split("/")
    key = parts[0]
    version = parts[1] if len(parts) > 1 else DEFAULT_VERSION
    return key, version


class CanonicalVersionRegistry:
    """Read-only lookup of current schema versions per model kind."""

    def __init__(
        self,
        versions: Mapping[str, str] = CURRENT_VERSIONS,
        probe: VersionRegistryProbe | None = None,
    ) -> None:
        self._versions = MappingProxyType(dict(versions))
        self._probe = probe or DefaultVersionRegistryProbe()

    @property
    def versions(self) -> Mapping[str, str]:
        """Registered versions keyed by model kind."""
        return self._versions

    def is_current(self, model: CanonicalModel) -> bool:
        """Check whether the model's declared version is the current one."""
        key, version = parse_model_version(model.model_version)
        return self._versions.get(key) == version

    def ensure_current(self, model: CanonicalModel) -> None:
        """Require that the model's declared version is current.

        Raises:
            VersionMismatchError: If the kind is unknown or the version differs
        """
        if self.is_current(model):
            return

        current = self.get_current(model)
        model_type = type(model).__name__
        self._probe.version_mismatch(
            model_type=model_type,
            declared_version=model.model_version,
            current_version=current,
        )
        raise VersionMismatchError(
            f"Version mismatch for {model_type}: declared "
            f"{model.model_version}, current is {current}",
            declared=model.model_version,
            current=current,
        )

    def get_current(self, model: CanonicalModel) -> str:
        """Return the registered version for the model's kind, or "unknown"."""
        key, _ = parse_model_version(model.model_version)
        return self._versions.get(key, UNKNOWN_VERSION)
