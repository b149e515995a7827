"""Canonical model primitives shared by every bounded context.

Provides the CanonicalModel protocol, field-level change tracking and the
schema version registry.
"""

from shared_kernel.canonical.change_tracking import ChangeSet, replace_if_changed
from shared_kernel.canonical.exceptions import (
    DomainStateError,
    MissingAddressError,
    ReferentialIntegrityError,
    VersionMismatchError,
)
from shared_kernel.canonical.protocols import CanonicalModel, TrackedCanonicalModel
from shared_kernel.canonical.versioning import CanonicalVersionRegistry

__all__ = [
    "CanonicalModel",
    "CanonicalVersionRegistry",
    "ChangeSet",
    "DomainStateError",
    "MissingAddressError",
    "ReferentialIntegrityError",
    "TrackedCanonicalModel",
    "VersionMismatchError",
    "replace_if_changed",
]
