"""
Payment status classification for verified IPN payloads.

These helpers only read the payload, so they are safe to call on any decoded
value; anything they do not recognize maps to ``PaymentStatus.UNKNOWN``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from nowpayments.core.types import PaymentNotification, PaymentStatus

PAYMENT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(PaymentNotification))


def extract_payment_fields(decoded: Any) -> PaymentNotification:
    """Project the known payment attributes out of an IPN payload."""
    if not isinstance(decoded, Mapping):
        return PaymentNotification()
    return PaymentNotification(**{name: decoded.get(name) for name in PAYMENT_FIELDS})


def classify(decoded: Any) -> PaymentStatus:
    """Return the payload's ``payment_status`` as a PaymentStatus."""
    if not isinstance(decoded, Mapping):
        return PaymentStatus.UNKNOWN
    return PaymentStatus.from_value(decoded.get("payment_status"))


def is_waiting(decoded: Any) -> bool:
    return classify(decoded) is PaymentStatus.WAITING


def is_confirming(decoded: Any) -> bool:
    return classify(decoded) is PaymentStatus.CONFIRMING


def is_confirmed(decoded: Any) -> bool:
    return classify(decoded) is PaymentStatus.CONFIRMED


def is_partially_paid(decoded: Any) -> bool:
    return classify(decoded) is PaymentStatus.PARTIALLY_PAID


def is_finished(decoded: Any) -> bool:
    return classify(decoded) is PaymentStatus.FINISHED


def is_failed(decoded: Any) -> bool:
    return classify(decoded) is PaymentStatus.FAILED


def is_expired(decoded: Any) -> bool:
    return classify(decoded) is PaymentStatus.EXPIRED


# A finished payment is the only completed one
is_payment_completed = is_finished
