"""Role repository port."""

from typing import Protocol

from crowdhub.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_for_user(self, user_id: str) -> list[Role]: ...
