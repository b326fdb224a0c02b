"""
Custody (sub-partner) accounts.

Sub-accounts hold balances on behalf of the merchant's own users. Account id
0 is the merchant's master account.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nowpayments.services.base import BaseService

MASTER_ACCOUNT_ID = 0

DEPOSIT_REQUIRED_FIELDS = ("user_id", "currency")
TRANSFER_REQUIRED_FIELDS = ("from_id", "to_id", "currency", "amount")
WITHDRAW_REQUIRED_FIELDS = ("user_id", "currency", "amount")


class CustodyService(BaseService):
    """Sub-account balances, deposits, transfers and write-offs."""

    async def create_user(self, data: Mapping[str, Any] | None = None) -> Any:
        return await self._post("sub-partner/balance", data)

    async def get_balance(self, user_id: int | str) -> Any:
        return await self._get(f"sub-partner/balance/{user_id}")

    async def list_users(self, filters: Mapping[str, Any] | None = None) -> Any:
        return await self._get("sub-partner", filters)

    async def create_payment(self, data: Mapping[str, Any]) -> Any:
        """Create a deposit payment into a sub-account."""
        self._validate_required_fields(data, DEPOSIT_REQUIRED_FIELDS)
        return await self._post("sub-partner/payment", data)

    async def transfer(self, data: Mapping[str, Any]) -> Any:
        self._validate_required_fields(data, TRANSFER_REQUIRED_FIELDS)
        return await self._post("sub-partner/transfer", data)

    async def list_transfers(self, filters: Mapping[str, Any] | None = None) -> Any:
        return await self._get("sub-partner/transfers", filters)

    async def get_transfer(self, transfer_id: int | str) -> Any:
        return await self._get(f"sub-partner/transfer/{transfer_id}")

    async def withdraw(self, data: Mapping[str, Any]) -> Any:
        self._validate_required_fields(data, WITHDRAW_REQUIRED_FIELDS)
        return await self._post("sub-partner/write-off", data)

    async def create_user_account(
        self, external_id: str | None = None, email: str | None = None
    ) -> Any:
        data: dict[str, Any] = {}
        if external_id is not None:
            data["external_id"] = external_id
        if email is not None:
            data["email"] = email
        return await self.create_user(data)

    async def create_deposit_payment(
        self,
        user_id: int,
        currency: str,
        amount: float | None = None,
        track_id: str | None = None,
    ) -> Any:
        data: dict[str, Any] = {"user_id": user_id, "currency": currency}
        if amount is not None:
            data["amount"] = amount
        if track_id is not None:
            data["track_id"] = track_id
        return await self.create_payment(data)

    async def transfer_between_users(
        self, from_user_id: int, to_user_id: int, currency: str, amount: float
    ) -> Any:
        return await self.transfer(
            {"from_id": from_user_id, "to_id": to_user_id, "currency": currency, "amount": amount}
        )

    async def transfer_to_master(self, user_id: int, currency: str, amount: float) -> Any:
        return await self.transfer_between_users(user_id, MASTER_ACCOUNT_ID, currency, amount)

    async def transfer_from_master(self, user_id: int, currency: str, amount: float) -> Any:
        return await self.transfer_between_users(MASTER_ACCOUNT_ID, user_id, currency, amount)

    async def withdraw_to_address(
        self, user_id: int, currency: str, amount: float, address: str, **options: Any
    ) -> Any:
        return await self.withdraw(
            {
                "user_id": user_id,
                "currency": currency,
                "amount": amount,
                "address": address,
                **options,
            }
        )

    async def withdraw_to_master(self, user_id: int, currency: str, amount: float) -> Any:
        return await self.withdraw({"user_id": user_id, "currency": currency, "amount": amount})

    async def list_transfers_by_user(self, user_id: int, limit: int = 10, offset: int = 0) -> Any:
        return await self.list_transfers({"id": user_id, "limit": limit, "offset": offset})

    async def list_transfers_by_status(self, status: str, limit: int = 10, offset: int = 0) -> Any:
        return await self.list_transfers({"status": status, "limit": limit, "offset": offset})
