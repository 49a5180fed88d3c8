from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_BUSINESS_NAME, DEFAULT_LOCATION_NAME
from ..core.exceptions import NotFoundError
from .model import Business
from .repository import BusinessRepository

logger = logging.getLogger(__name__)


class BusinessService:
    """Use cases: manage the caller's businesses."""

    def __init__(self, businesses: BusinessRepository):
        self._businesses = businesses

    def require_owned(self, *, user_id: str, business_id: str) -> Business:
        business = self._businesses.get_owned(business_id=business_id, owner_user_id=user_id) if business_id else None
        if not business:
            raise NotFoundError("Firma nu există")
        return business

    def list_businesses(self, *, user_id: str) -> Sequence[Business]:
        """Owned businesses; a first listing creates the default one."""
        businesses = list(self._businesses.list_for_owner(user_id))
        if not businesses:
            default = self._businesses.create(
                owner_user_id=user_id,
                name=DEFAULT_BUSINESS_NAME,
                location_name=DEFAULT_LOCATION_NAME,
            )
            logger.info("Created default business %s for user %s", default.business_id, user_id)
            businesses = [default]
        return businesses

    def create(self, *, user_id: str, name: str, location_name: Optional[str] = None) -> Business:
        name = require_non_empty(name, "Numele firmei")
        location_name = (location_name or "").strip() or DEFAULT_LOCATION_NAME
        return self._businesses.create(owner_user_id=user_id, name=name, location_name=location_name)

    def update(
        self,
        *,
        user_id: str,
        business_id: str,
        name: Optional[str] = None,
        location_name: Optional[str] = None,
    ) -> Business:
        business = self.require_owned(user_id=user_id, business_id=business_id)
        new_name = require_non_empty(name, "Numele firmei") if name is not None else business.name
        new_location = location_name.strip() if location_name is not None else business.location_name
        return self._businesses.update(business_id=business.business_id, name=new_name, location_name=new_location)

    def delete(self, *, user_id: str, business_id: str) -> None:
        business = self.require_owned(user_id=user_id, business_id=business_id)
        if not self._businesses.delete(business_id=business.business_id):
            raise NotFoundError("Firma nu există")
        logger.info("Deleted business %s", business.business_id)
