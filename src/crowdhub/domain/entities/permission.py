"""Permission entity - a protected (resource, action) pair."""

from dataclasses import dataclass
from uuid import UUID

from crowdhub.domain.value_objects import WILDCARD


@dataclass(frozen=True)
class Permission:
    """Permission - resource/action pair, either may be the ``*`` wildcard."""

    id: UUID
    resource: str
    action: str
    description: str | None = None

    @property
    def key(self) -> str:
        return f"{self.resource}:{self.action}"

    @property
    def is_wildcard(self) -> bool:
        return self.action == WILDCARD or self.resource == WILDCARD
