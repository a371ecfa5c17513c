"""User-role assignment."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class UserRole:
    """Assignment - user holds role."""

    user_id: str
    role_id: UUID
    created_at: datetime
