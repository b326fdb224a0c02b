"""General API endpoints: status, currencies and estimates."""

from __future__ import annotations

from typing import Any

from nowpayments.services.base import BaseService


class GeneralService(BaseService):
    """API status, currency lists and price estimates."""

    async def get_status(self) -> Any:
        """Check whether the API is up."""
        return await self._get("status")

    async def get_currencies(self) -> Any:
        return await self._get("currencies")

    async def get_merchant_currencies(self) -> Any:
        """Currencies enabled in the merchant's account."""
        return await self._get("merchant/coins")

    async def get_full_currencies(self) -> Any:
        return await self._get("full-currencies")

    async def get_min_amount(self, currency_from: str, currency_to: str) -> Any:
        """Minimum payment amount for a currency pair."""
        return await self._get(
            "min-amount", {"currency_from": currency_from, "currency_to": currency_to}
        )

    async def get_estimate(self, amount: float, currency_from: str, currency_to: str) -> Any:
        """Estimated price of ``amount`` of ``currency_from`` in ``currency_to``."""
        return await self._get(
            "estimate",
            {"amount": amount, "currency_from": currency_from, "currency_to": currency_to},
        )
