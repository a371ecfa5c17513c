"""Role entity for RBAC."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Role:
    """Role - named bundle of permission rules assignable to users."""

    id: UUID
    name: str
    description: str | None = None
