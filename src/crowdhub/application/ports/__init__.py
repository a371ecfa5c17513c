"""Application ports - interfaces for external adapters."""

from crowdhub.application.ports.feature_flags import FeatureFlagStore
from crowdhub.application.ports.permission_resolver import PermissionResolver
from crowdhub.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "FeatureFlagStore",
    "PermissionResolver",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
