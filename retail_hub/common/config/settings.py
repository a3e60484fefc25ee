"""Application settings and environment variables."""

import os
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    # Pricing
    TAX_RATE: Decimal = Decimal(os.getenv("TAX_RATE", "0.18"))  # GST, applied after coupon deduction
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "₹")

    # Bounded histories
    INVOICE_HISTORY_LIMIT: int = int(os.getenv("INVOICE_HISTORY_LIMIT", "20"))
    ACTIVITY_LOG_LIMIT: int = int(os.getenv("ACTIVITY_LOG_LIMIT", "40"))

    TIMEZONE: str = os.getenv("TIMEZONE", "Asia/Kolkata")

    # Printed on every invoice
    STORE_NAME: str = os.getenv("STORE_NAME", "Velocity Retail Hub")
    STORE_GSTIN: str = os.getenv("STORE_GSTIN", "29ABCDE1234F2Z5")
    STORE_SUPPORT_EMAIL: str = os.getenv("STORE_SUPPORT_EMAIL", "hello@velocity.in")

    COUPONS_CONFIG_PATH: str = os.getenv(
        "COUPONS_CONFIG_PATH", os.path.join(os.path.dirname(__file__), "coupons.json")
    )

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
