# tests/conftest.py
from datetime import datetime
from decimal import Decimal
from unittest.mock import Mock

import pytest
import pytz

from retail_hub.catalog_domain.application.catalog_service import CatalogApplicationService
from retail_hub.catalog_domain.infrastructure.seed.seed_catalog import build_seed_catalog
from retail_hub.common.config.settings import settings
from retail_hub.common.dtos.catalog_dtos import InventoryItemFieldsDTO
from retail_hub.invoicing_domain.application.invoice_service import InvoiceApplicationService
from retail_hub.invoicing_domain.domain.entities.coupon import Coupon, CouponKind
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine
from retail_hub.invoicing_domain.domain.repositories.coupon_repository import ICouponRepository
from retail_hub.invoicing_domain.infrastructure.printers.rich_invoice_printer import RichInvoicePrinter
from retail_hub.state.app_state import AppState, StateStore, initial_state


@pytest.fixture(autouse=True)
def mock_pricing_settings(mocker) -> None:
    """Pins tax rate, currency and history limits so tests don't depend on the environment."""
    mocker.patch.object(settings, "TAX_RATE", Decimal("0.18"))
    mocker.patch.object(settings, "CURRENCY_SYMBOL", "₹")
    mocker.patch.object(settings, "INVOICE_HISTORY_LIMIT", 20)
    mocker.patch.object(settings, "ACTIVITY_LOG_LIMIT", 40)
    mocker.patch.object(settings, "TIMEZONE", "Asia/Kolkata")


@pytest.fixture
def fixed_now() -> datetime:
    """Issuance time used across tests: 19 Oct 2026, 14:05 IST."""
    return pytz.timezone("Asia/Kolkata").localize(datetime(2026, 10, 19, 14, 5))


@pytest.fixture
def seed_state() -> AppState:
    return initial_state(build_seed_catalog())


@pytest.fixture
def state_store(seed_state) -> StateStore:
    return StateStore(seed_state)


@pytest.fixture
def catalog_service(state_store, fixed_now) -> CatalogApplicationService:
    return CatalogApplicationService(state_store, clock=lambda: fixed_now)


@pytest.fixture
def mock_coupon_repository() -> Mock:
    """Mock for the coupon repository."""
    return Mock(spec=ICouponRepository)


@pytest.fixture
def mock_invoice_printer() -> Mock:
    """Mock for RichInvoicePrinter."""
    return Mock(spec=RichInvoicePrinter)


@pytest.fixture
def invoice_service(state_store, mock_coupon_repository, mock_invoice_printer, fixed_now) -> InvoiceApplicationService:
    """Instance of InvoiceApplicationService with mocked collaborators."""
    return InvoiceApplicationService(
        store=state_store,
        coupon_repo=mock_coupon_repository,
        printer=mock_invoice_printer,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def sample_item_fields() -> InventoryItemFieldsDTO:
    return InventoryItemFieldsDTO(
        name="Masala Chai Tin",
        sku="TE-MC-310",
        barcode="8901234000062",
        category="Beverages",
        stock=30,
        reorder_point=10,
        price=Decimal("275"),
        unit="tin",
        supplier="Assam Leaf Co.",
        incoming=0,
        description="Loose-leaf CTC chai with cardamom and ginger.",
    )


@pytest.fixture
def welcome_coupon() -> Coupon:
    return Coupon(code="WELCOME10", kind=CouponKind.PERCENTAGE, value=Decimal("10"), description="10% off")


@pytest.fixture
def freeship_coupon() -> Coupon:
    return Coupon(code="FREESHIP", kind=CouponKind.FLAT, value=Decimal("150"), description="Flat 150 off")


@pytest.fixture
def discounted_line() -> InvoiceLine:
    """2 x 500 with a flat 100 discount: line total 900."""
    return InvoiceLine(id="line-a", name="Ceramic Vase", quantity=2, price=Decimal("500"), discount=Decimal("100"))
