"""
IPN (webhook) verification and payment status classification.

The whole package is synchronous and performs no I/O, so it can be called
from any web framework's request handler.
"""

from nowpayments.webhooks.canonical import canonicalize
from nowpayments.webhooks.classifier import (
    PAYMENT_FIELDS,
    classify,
    extract_payment_fields,
    is_confirmed,
    is_confirming,
    is_expired,
    is_failed,
    is_finished,
    is_partially_paid,
    is_payment_completed,
    is_waiting,
)
from nowpayments.webhooks.parser import (
    SIGNATURE_HEADER,
    IpnParser,
    process_notification,
    process_notification_with_config,
    verify_notification,
    verify_notification_with_config,
)
from nowpayments.webhooks.signing import compute_signature, signatures_match

__all__ = [
    "SIGNATURE_HEADER",
    "PAYMENT_FIELDS",
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
