# retail_hub/invoicing_domain/infrastructure/persistence/json_coupon_repository.py
"""Coupon repository backed by the bundled JSON coupon table."""

import json
import logging
from decimal import Decimal, InvalidOperation

from retail_hub.common.config.settings import settings
from retail_hub.common.exceptions.custom_exceptions import ApplicationError, NotFoundError
from retail_hub.invoicing_domain.domain.entities.coupon import Coupon, CouponKind
from retail_hub.invoicing_domain.domain.repositories.coupon_repository import ICouponRepository

logger = logging.getLogger(__name__)


class JsonCouponRepository(ICouponRepository):
    """Loads the coupon table once; it is read-only afterwards."""

    def __init__(self, config_path: str | None = None) -> None:
        self.config_path = config_path or settings.COUPONS_CONFIG_PATH
        self._coupons = self._load_coupons()

    def _load_coupons(self) -> dict[str, Coupon]:
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                coupons_data = json.load(f)
        except FileNotFoundError:
            raise ApplicationError(f"Coupons configuration file not found at {self.config_path}")
        except json.JSONDecodeError:
            raise ApplicationError(f"Error decoding coupons configuration from {self.config_path}")

        # Accept either {"coupons": [...]} or a bare list
        if isinstance(coupons_data, dict) and "coupons" in coupons_data:
            coupons_list = coupons_data["coupons"]
        elif isinstance(coupons_data, list):
            coupons_list = coupons_data
        else:
            raise ApplicationError("Invalid coupons configuration format")

        coupons: dict[str, Coupon] = {}
        for entry in coupons_list:
            try:
                coupon = Coupon(
                    code=entry["code"],
                    kind=CouponKind(entry["kind"]),
                    value=Decimal(str(entry["value"])),
                    description=entry.get("description", ""),
                )
            except (KeyError, ValueError, InvalidOperation) as e:
                raise ApplicationError(f"Invalid coupon entry {entry!r}", original_exception=e)
            coupons[coupon.code.lower()] = coupon

        logger.debug(f"Loaded {len(coupons)} coupons from {self.config_path}")
        return coupons

    def find_by_code(self, code: str) -> Coupon:
        coupon = self._coupons.get(code.strip().lower())
        if coupon is None:
            raise NotFoundError("Coupon code not found.", identifier=code)
        return coupon

    def get_all_coupons(self) -> list[Coupon]:
        return list(self._coupons.values())
