"""Profile repository port."""

from typing import Protocol

from crowdhub.domain.entities import Profile


class ProfileRepository(Protocol):
    """Port for user profile lookup."""

    async def get_by_id(self, user_id: str) -> Profile | None: ...
