"""Currency conversions inside the custody balance."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nowpayments.core.types import ConversionStatus
from nowpayments.services.base import BaseService

CONVERSION_REQUIRED_FIELDS = ("from_currency", "to_currency", "amount")


class ConversionsService(BaseService):
    """
    Conversion operations.

    Example:
        >>> conversion = await client.conversions.convert_btc_to_usdt(0.5)
        >>> rate = ConversionsService.get_rate(conversion)
    """

    async def create(self, data: Mapping[str, Any]) -> Any:
        self._validate_required_fields(data, CONVERSION_REQUIRED_FIELDS)
        return await self._post("conversion", data)

    async def get_status(self, conversion_id: int | str) -> Any:
        return await self._get(f"conversion/{conversion_id}")

    async def list(self, filters: Mapping[str, Any] | None = None) -> Any:
        return await self._get("conversion", filters)

    async def create_conversion(self, from_currency: str, to_currency: str, amount: float) -> Any:
        return await self.create(
            {"from_currency": from_currency, "to_currency": to_currency, "amount": amount}
        )

    async def convert_btc_to_eth(self, amount: float) -> Any:
        return await self.create_conversion("btc", "eth", amount)

    async def convert_eth_to_btc(self, amount: float) -> Any:
        return await self.create_conversion("eth", "btc", amount)

    async def convert_btc_to_usdt(self, amount: float) -> Any:
        return await self.create_conversion("btc", "usdt", amount)

    async def convert_eth_to_usdt(self, amount: float) -> Any:
        return await self.create_conversion("eth", "usdt", amount)

    async def convert_usdt_to_btc(self, amount: float) -> Any:
        return await self.create_conversion("usdt", "btc", amount)

    async def convert_usdt_to_eth(self, amount: float) -> Any:
        return await self.create_conversion("usdt", "eth", amount)

    async def list_by_status(self, status: str, limit: int = 10, offset: int = 0) -> Any:
        return await self.list({"status": status, "limit": limit, "offset": offset})

    async def list_by_currency(self, currency: str, limit: int = 10, offset: int = 0) -> Any:
        return await self.list({"currency": currency, "limit": limit, "offset": offset})

    async def _has_status(self, conversion_id: int | str, status: ConversionStatus) -> bool:
        data = await self.get_status(conversion_id)
        return isinstance(data, Mapping) and data.get("status") == status.value

    async def is_completed(self, conversion_id: int | str) -> bool:
        return await self._has_status(conversion_id, ConversionStatus.COMPLETED)

    async def is_pending(self, conversion_id: int | str) -> bool:
        return await self._has_status(conversion_id, ConversionStatus.PENDING)

    async def is_failed(self, conversion_id: int | str) -> bool:
        return await self._has_status(conversion_id, ConversionStatus.FAILED)

    @staticmethod
    def get_rate(conversion: Mapping[str, Any]) -> float | None:
        return conversion.get("rate")

    @staticmethod
    def get_converted_amount(conversion: Mapping[str, Any]) -> float | None:
        return conversion.get("to_amount")
