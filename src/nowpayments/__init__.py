"""
nowpayments - Python client for the NOWPayments crypto payment gateway

REST usage:
    >>> from nowpayments import NowPayments
    >>>
    >>> async with NowPayments(api_key="YOUR_API_KEY", sandbox=True) as client:
    ...     payment = await client.payments.create_payment(
    ...         price_amount=100,
    ...         price_currency="usd",
    ...         pay_currency="btc",
    ...     )

IPN (webhook) verification:
    >>> from nowpayments import PaymentStatus, classify, process_notification
    >>>
    >>> data = process_notification(body, headers["x-nowpayments-sig"], "IPN_SECRET")
    >>> if data is not None and classify(data) is PaymentStatus.FINISHED:
    ...     ...
"""

from nowpayments.client import NowPayments
from nowpayments.core.config import PRODUCTION_BASE_URL, SANDBOX_BASE_URL, Config
from nowpayments.core.exceptions import (
    ApiError,
    ConfigurationError,
    NowPaymentsError,
    ValidationError,
)
from nowpayments.core.logging import configure_logging, get_logger
from nowpayments.core.types import (
    ConversionStatus,
    PaymentNotification,
    PaymentStatus,
    PayoutStatus,
)
from nowpayments.webhooks import (
    SIGNATURE_HEADER,
    IpnParser,
    canonicalize,
    classify,
    compute_signature,
    extract_payment_fields,
    is_confirmed,
    is_confirming,
    is_expired,
    is_failed,
    is_finished,
    is_partially_paid,
    is_payment_completed,
    is_waiting,
    process_notification,
    process_notification_with_config,
    signatures_match,
    verify_notification,
    verify_notification_with_config,
)

__version__ = "0.1.0"
__all__ = [
    # Main Client
    "NowPayments",
    # Config
    "Config",
    "PRODUCTION_BASE_URL",
    "SANDBOX_BASE_URL",
    "configure_logging",
    "get_logger",
    # Types
    "PaymentStatus",
    "PayoutStatus",
    "ConversionStatus",
    "PaymentNotification",
    # Exceptions
    "NowPaymentsError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    # IPN
    "SIGNATURE_HEADER",
    "IpnParser",
    "canonicalize",
    "compute_signature",
    "signatures_match",
    "process_notification",
    "process_notification_with_config",
    "verify_notification",
    "verify_notification_with_config",
    "extract_payment_fields",
    "classify",
    "is_waiting",
    "is_confirming",
    "is_confirmed",
    "is_partially_paid",
    "is_finished",
    "is_failed",
    "is_expired",
    "is_payment_completed",
]
