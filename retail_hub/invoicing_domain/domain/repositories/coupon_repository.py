# retail_hub/invoicing_domain/domain/repositories/coupon_repository.py
"""Coupon reference data repository interface."""
from abc import ABC, abstractmethod

from retail_hub.invoicing_domain.domain.entities.coupon import Coupon


class ICouponRepository(ABC):

    @abstractmethod
    def find_by_code(self, code: str) -> Coupon:
        """Case-insensitive exact match on the coupon code; raises NotFoundError if unknown."""
        pass

    @abstractmethod
    def get_all_coupons(self) -> list[Coupon]:
        """Returns the full read-only coupon table."""
        pass
