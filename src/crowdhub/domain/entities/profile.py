"""User profile entity."""

from dataclasses import dataclass


@dataclass
class Profile:
    """Profile - identity record for a portal user."""

    id: str
    email: str | None = None
    full_name: str | None = None
    is_active: bool = True
