"""Domain-Oriented Observability for canonical model versioning."""

from shared_kernel.canonical.observability.version_probe import (
    DefaultVersionRegistryProbe,
    VersionRegistryProbe,
)

__all__ = [
    "DefaultVersionRegistryProbe",
    "VersionRegistryProbe",
]
