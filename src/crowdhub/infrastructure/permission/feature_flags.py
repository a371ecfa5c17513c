"""Static feature flag store backed by configuration."""

from collections.abc import Iterable


class StaticFeatureFlags:
    """Feature flags from a fixed set of enabled keys."""

    def __init__(self, enabled: Iterable[str]) -> None:
        self._enabled = frozenset(enabled)

    def is_enabled(self, feature: str) -> bool:
        return feature in self._enabled
