"""
Type definitions for the NOWPayments SDK.

Enums and data classes shared by the webhook core and the REST services.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, TypeAlias

# Decoded JSON object as returned by the gateway
JsonDict: TypeAlias = dict[str, Any]


class PaymentStatus(str, Enum):
    """Lifecycle states of a NOWPayments payment."""

    WAITING = "waiting"
    CONFIRMING = "confirming"
    CONFIRMED = "confirmed"
    SENDING = "sending"
    PARTIALLY_PAID = "partially_paid"
    FINISHED = "finished"
    FAILED = "failed"
    REFUNDED = "refunded"
    EXPIRED = "expired"

    # Missing, empty or unrecognized status value
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: Any) -> PaymentStatus:
        """Map a raw status value to a member, never raising."""
        if not isinstance(value, str) or not value:
            return cls.UNKNOWN
        for member in cls:
            if member is not cls.UNKNOWN and member.value == value:
                return member
        return cls.UNKNOWN

    def is_final(self) -> bool:
        return self in (
            PaymentStatus.FINISHED,
            PaymentStatus.FAILED,
            PaymentStatus.REFUNDED,
            PaymentStatus.EXPIRED,
        )


class PayoutStatus(str, Enum):
    """Batch payout states checked by the payout helpers."""

    SENDING = "sending"
    FINISHED = "finished"
    FAILED = "failed"


class ConversionStatus(str, Enum):
    """Conversion states checked by the conversion helpers."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class PaymentNotification:
    """
    Known payment attributes of an IPN payload.

    Every field is always present; a key missing from the payload is None.
    """

    payment_id: Any = None
    payment_status: Any = None
    pay_address: Any = None
    price_amount: Any = None
    price_currency: Any = None
    pay_amount: Any = None
    pay_currency: Any = None
    order_id: Any = None
    order_description: Any = None
    purchase_id: Any = None
    created_at: Any = None
    updated_at: Any = None
    outcome_amount: Any = None
    outcome_currency: Any = None
    actually_paid: Any = None
    commission_fee: Any = None

    @property
    def status(self) -> PaymentStatus:
        return PaymentStatus.from_value(self.payment_status)

    def to_dict(self) -> JsonDict:
        return asdict(self)
