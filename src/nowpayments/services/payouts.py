"""Mass payouts (withdrawals from the merchant balance)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from nowpayments.core.types import PayoutStatus
from nowpayments.services.base import BaseService

PAYOUT_REQUIRED_FIELDS = ("withdrawals",)


class PayoutsService(BaseService):
    """
    Batch payout operations.

    Creating a payout needs a JWT from the auth endpoint. Pass it as the
    ``auth_token`` field and it is sent as a Bearer header instead of in
    the body.
    """

    async def create(self, data: Mapping[str, Any]) -> Any:
        self._validate_required_fields(data, PAYOUT_REQUIRED_FIELDS)

        body = dict(data)
        headers = None
        auth_token = body.pop("auth_token", None)
        if auth_token:
            headers = {"Authorization": f"Bearer {auth_token}"}

        return await self._transport.request("POST", "payout", json_body=body, headers=headers)

    async def verify(self, batch_id: int | str, code: str) -> Any:
        """Confirm a payout batch with the 2FA code."""
        return await self._post(f"payout/{batch_id}/verify", {"code": code})

    async def get_status(self, batch_id: int | str) -> Any:
        return await self._get(f"payout/{batch_id}")

    async def list(self, filters: Mapping[str, Any] | None = None) -> Any:
        return await self._get("payout", filters)

    async def validate_address(
        self, address: str, currency: str, extra_id: str | None = None
    ) -> Any:
        data: dict[str, Any] = {"address": address, "currency": currency}
        if extra_id is not None:
            data["extra_id"] = extra_id
        return await self._post("payout/validate-address", data)

    async def create_payout(self, withdrawals: Sequence[Mapping[str, Any]], **options: Any) -> Any:
        return await self.create({"withdrawals": [dict(w) for w in withdrawals], **options})

    async def create_single_payout(
        self, address: str, currency: str, amount: float, **options: Any
    ) -> Any:
        withdrawal = {"address": address, "currency": currency, "amount": amount, **options}
        return await self.create_payout([withdrawal])

    async def create_payout_with_fiat_amount(
        self,
        address: str,
        currency: str,
        fiat_amount: float,
        fiat_currency: str,
        **options: Any,
    ) -> Any:
        """Pay out a fiat-denominated amount, converted to ``currency`` by the gateway."""
        withdrawal = {
            "address": address,
            "currency": currency,
            "fiat_amount": fiat_amount,
            "fiat_currency": fiat_currency,
            **options,
        }
        return await self.create_payout([withdrawal])

    async def list_by_status(self, status: str, limit: int = 10, page: int = 0) -> Any:
        return await self.list({"status": status, "limit": limit, "page": page})

    async def list_by_date_range(
        self, date_from: str, date_to: str, limit: int = 10, page: int = 0
    ) -> Any:
        return await self.list(
            {"date_from": date_from, "date_to": date_to, "limit": limit, "page": page}
        )

    async def _has_status(self, batch_id: int | str, status: PayoutStatus) -> bool:
        data = await self.get_status(batch_id)
        return isinstance(data, Mapping) and data.get("status") == status.value

    async def is_finished(self, batch_id: int | str) -> bool:
        return await self._has_status(batch_id, PayoutStatus.FINISHED)

    async def is_sending(self, batch_id: int | str) -> bool:
        return await self._has_status(batch_id, PayoutStatus.SENDING)

    async def is_failed(self, batch_id: int | str) -> bool:
        return await self._has_status(batch_id, PayoutStatus.FAILED)
