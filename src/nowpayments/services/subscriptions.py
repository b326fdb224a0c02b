"""Recurring payments: subscription plans and subscriptions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nowpayments.services.base import BaseService

PLAN_REQUIRED_FIELDS = ("title", "interval_day", "amount", "currency")
SUBSCRIPTION_REQUIRED_FIELDS = ("plan_id", "email")


class SubscriptionsService(BaseService):
    """Subscription plan and subscription operations."""

    async def create_plan(self, data: Mapping[str, Any]) -> Any:
        self._validate_required_fields(data, PLAN_REQUIRED_FIELDS)
        return await self._post("subscriptions/plans", data)

    async def update_plan(self, plan_id: int | str, data: Mapping[str, Any]) -> Any:
        return await self._patch(f"subscriptions/plans/{plan_id}", data)

    async def get_plan(self, plan_id: int | str) -> Any:
        return await self._get(f"subscriptions/plans/{plan_id}")

    async def list_plans(self) -> Any:
        return await self._get("subscriptions/plans")

    async def create(self, data: Mapping[str, Any]) -> Any:
        """Subscribe a customer email to a plan."""
        self._validate_required_fields(data, SUBSCRIPTION_REQUIRED_FIELDS)
        return await self._post("subscriptions", data)

    async def get_subscription(self, subscription_id: int | str) -> Any:
        return await self._get(f"subscriptions/{subscription_id}")

    async def list(self, filters: Mapping[str, Any] | None = None) -> Any:
        return await self._get("subscriptions", filters)

    async def cancel(self, subscription_id: int | str) -> Any:
        return await self._delete(f"subscriptions/{subscription_id}")

    async def create_subscription_plan(
        self,
        title: str,
        interval_day: int,
        amount: float,
        currency: str,
        **options: Any,
    ) -> Any:
        data = {
            "title": title,
            "interval_day": interval_day,
            "amount": amount,
            "currency": currency,
            **options,
        }
        return await self.create_plan(data)

    async def create_subscription(self, plan_id: int | str, email: str, **options: Any) -> Any:
        return await self.create({"plan_id": plan_id, "email": email, **options})

    async def list_by_plan(self, plan_id: int | str, limit: int = 10, page: int = 0) -> Any:
        return await self.list({"plan_id": plan_id, "limit": limit, "page": page})

    async def list_by_status(self, status: str, limit: int = 10, page: int = 0) -> Any:
        return await self.list({"status": status, "limit": limit, "page": page})

    async def update_plan_amount(self, plan_id: int | str, amount: float) -> Any:
        return await self.update_plan(plan_id, {"amount": amount})

    async def update_plan_interval(self, plan_id: int | str, interval_day: int) -> Any:
        return await self.update_plan(plan_id, {"interval_day": interval_day})
