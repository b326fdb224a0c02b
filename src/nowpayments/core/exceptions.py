"""
Exception hierarchy for the NOWPayments SDK.

All SDK-specific exceptions inherit from NowPaymentsError for easy catching.
"""

from __future__ import annotations

from typing import Any


class NowPaymentsError(Exception):
    """
    Base exception for all NOWPayments SDK errors.

    Catch this to handle any SDK-related exception.

    Example:
        >>> try:
        ...     await client.payments.create({...})
        ... except NowPaymentsError as e:
        ...     print(f"NOWPayments error: {e}")
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(NowPaymentsError):
    """
    Configuration is missing or invalid.

    Raised when:
    - The API key is not provided
    - An IPN helper needs a secret that was never configured
    - Environment variables hold values that cannot be parsed
    """

    pass


class ValidationError(NowPaymentsError):
    """
    Request payload validation error.

    Raised before any network call when required request fields are missing.
    ``missing_fields`` keeps the order in which the fields were declared.
    """

    def __init__(
        self,
        message: str,
        missing_fields: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.missing_fields = list(missing_fields or [])


class ApiError(NowPaymentsError):
    """
    The API returned an error, or the request never got a response.

    Raised when:
    - The gateway answers with a non-2xx status
    - The HTTP request fails at the transport level (status_code is 0)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_data: dict[str, Any] | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.response_data = response_data or {}
        self.url = url

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message

    def is_rate_limited(self) -> bool:
        """Check if this is a rate limit error."""
        return self.status_code == 429

    def is_server_error(self) -> bool:
        """Check if this is a server-side error."""
        return 500 <= self.status_code < 600
