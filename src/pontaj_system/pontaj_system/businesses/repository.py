from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Business


class BusinessRepository(Protocol):
    def get_owned(self, *, business_id: str, owner_user_id: str) -> Optional[Business]:
        """Business by id, only if owned by ``owner_user_id``."""

        raise NotImplementedError

    def list_for_owner(self, owner_user_id: str) -> Sequence[Business]:
        """Owned businesses, oldest first."""

        raise NotImplementedError

    def create(self, *, owner_user_id: str, name: str, location_name: str) -> Business:
        raise NotImplementedError

    def update(self, *, business_id: str, name: str, location_name: str) -> Business:
        raise NotImplementedError

    def delete(self, *, business_id: str) -> bool:
        raise NotImplementedError
