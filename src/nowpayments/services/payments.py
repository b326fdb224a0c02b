"""Payments and invoices."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nowpayments.core.types import PaymentStatus
from nowpayments.services.base import BaseService

PAYMENT_REQUIRED_FIELDS = ("price_amount", "price_currency", "pay_currency")
INVOICE_REQUIRED_FIELDS = ("price_amount", "price_currency", "order_id")
INVOICE_PAYMENT_REQUIRED_FIELDS = ("iid", "pay_currency")


class PaymentsService(BaseService):
    """
    Payment and invoice operations.

    Example:
        >>> payment = await client.payments.create_payment(100, "usd", "btc", order_id="A-1")
        >>> status = await client.payments.get_status(payment["payment_id"])
    """

    async def create(self, data: Mapping[str, Any]) -> Any:
        """
        Create a payment.

        Raises:
            ValidationError: If price_amount, price_currency or pay_currency is missing
        """
        self._validate_required_fields(data, PAYMENT_REQUIRED_FIELDS)
        return await self._post("payment", data)

    async def get_status(self, payment_id: int | str) -> Any:
        return await self._get(f"payment/{payment_id}")

    async def list(self, filters: Mapping[str, Any] | None = None) -> Any:
        return await self._get("payment", filters)

    async def update_estimate(self, payment_id: int | str) -> Any:
        """Refresh the merchant estimate of a payment."""
        return await self._post(f"payment/{payment_id}/update-merchant-estimate")

    async def create_invoice(self, data: Mapping[str, Any]) -> Any:
        self._validate_required_fields(data, INVOICE_REQUIRED_FIELDS)
        return await self._post("invoice", data)

    async def get_invoice_status(self, invoice_id: int | str) -> Any:
        return await self._get(f"invoice/{invoice_id}")

    async def create_invoice_payment(self, data: Mapping[str, Any]) -> Any:
        """Create a payment for an existing invoice (``iid``)."""
        self._validate_required_fields(data, INVOICE_PAYMENT_REQUIRED_FIELDS)
        return await self._post("invoice-payment", data)

    async def create_payment(
        self,
        price_amount: float,
        price_currency: str,
        pay_currency: str,
        **options: Any,
    ) -> Any:
        """
        Create a payment from its three required fields.

        Args:
            price_amount: Price in ``price_currency``
            price_currency: Fiat currency, e.g. "usd"
            pay_currency: Cryptocurrency the customer pays in, e.g. "btc"
            **options: Extra fields (order_id, ipn_callback_url, ...)
        """
        data = {
            "price_amount": price_amount,
            "price_currency": price_currency,
            "pay_currency": pay_currency,
            **options,
        }
        return await self.create(data)

    async def get_payment(self, payment_id: int | str) -> Any:
        return await self.get_status(payment_id)

    async def list_by_status(
        self, status: PaymentStatus | str, limit: int = 10, page: int = 0
    ) -> Any:
        status_value = status.value if isinstance(status, PaymentStatus) else status
        return await self.list({"payment_status": status_value, "limit": limit, "page": page})

    async def list_by_currency(self, currency: str, limit: int = 10, page: int = 0) -> Any:
        return await self.list({"pay_currency": currency, "limit": limit, "page": page})

    async def list_by_date_range(
        self, date_from: str, date_to: str, limit: int = 10, page: int = 0
    ) -> Any:
        """List payments between two dates (YYYY-MM-DD)."""
        return await self.list(
            {"dateFrom": date_from, "dateTo": date_to, "limit": limit, "page": page}
        )
