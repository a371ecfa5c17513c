"""Feature flag port."""

from typing import Protocol


class FeatureFlagStore(Protocol):
    """Port for feature flags, queried independently of permissions."""

    def is_enabled(self, feature: str) -> bool: ...
