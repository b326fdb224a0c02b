"""
Base class for NOWPayments API services.

Each service groups the endpoints of one API resource and shares a single
ApiTransport with the rest of the client.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from nowpayments.core.exceptions import ValidationError
from nowpayments.core.http import ApiTransport
from nowpayments.core.logging import get_logger


def _is_blank(value: Any) -> bool:
    """
    True for values that do not count as a provided field.

    Integer 0 is a real value. Zero floats, the string "0", empty strings and
    empty containers are treated as not provided.
    """
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, int):
        return False
    if isinstance(value, float):
        return value == 0.0
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def find_missing_fields(data: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Return the required fields absent from ``data``, in declared order."""
    return [name for name in required if name not in data or _is_blank(data[name])]


class BaseService:
    """Common request helpers for the resource services."""

    def __init__(self, transport: ApiTransport) -> None:
        self._transport = transport
        self._logger = get_logger(f"services.{type(self).__name__}")

    async def _get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._transport.request("GET", endpoint, params=dict(params or {}))

    async def _post(self, endpoint: str, data: Mapping[str, Any] | None = None) -> Any:
        return await self._transport.request("POST", endpoint, json_body=dict(data or {}))

    async def _patch(self, endpoint: str, data: Mapping[str, Any] | None = None) -> Any:
        return await self._transport.request("PATCH", endpoint, json_body=dict(data or {}))

    async def _delete(self, endpoint: str) -> Any:
        return await self._transport.request("DELETE", endpoint)

    def _validate_required_fields(self, data: Mapping[str, Any], required: Iterable[str]) -> None:
        """
        Check required request fields before any network call.

        Raises:
            ValidationError: Naming every missing field, comma-joined
        """
        missing = find_missing_fields(data, required)
        if missing:
            self._logger.debug(f"Rejected request, missing fields: {missing}")
            raise ValidationError(
                "Missing required fields: " + ", ".join(missing), missing_fields=missing
            )
