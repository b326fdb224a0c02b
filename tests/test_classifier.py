"""Unit tests for payment status classification and field projection."""

import pytest

from nowpayments.core.types import PaymentNotification, PaymentStatus
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

PREDICATES = {
    PaymentStatus.WAITING: is_waiting,
    PaymentStatus.CONFIRMING: is_confirming,
    PaymentStatus.CONFIRMED: is_confirmed,
    PaymentStatus.PARTIALLY_PAID: is_partially_paid,
    PaymentStatus.FINISHED: is_finished,
    PaymentStatus.FAILED: is_failed,
    PaymentStatus.EXPIRED: is_expired,
}


class TestClassify:
    @pytest.mark.parametrize("status", list(PREDICATES))
    def test_each_predicate_matches_only_its_status(self, status):
        payload = {"payment_status": status.value}

        assert classify(payload) is status
        for other, predicate in PREDICATES.items():
            assert predicate(payload) is (other is status)

    @pytest.mark.parametrize("status", ["sending", "refunded"])
    def test_statuses_without_predicate(self, status):
        payload = {"payment_status": status}

        assert classify(payload) is PaymentStatus(status)
        assert not any(predicate(payload) for predicate in PREDICATES.values())

    @pytest.mark.parametrize(
        "payload",
        [
            {"payment_status": "bogus"},
            {"payment_status": ""},
            {"payment_status": None},
            {"payment_status": 5},
            {"payment_status": "FINISHED"},
            {"payment_status": "unknown"},
            {},
            None,
            "finished",
        ],
    )
    def test_unrecognized_is_unknown(self, payload):
        assert classify(payload) is PaymentStatus.UNKNOWN
        assert not any(predicate(payload) for predicate in PREDICATES.values())

    def test_payment_completed_alias(self):
        assert is_payment_completed({"payment_status": "finished"}) is True
        assert is_payment_completed({"payment_status": "partially_paid"}) is False


class TestPaymentStatus:
    def test_from_value(self):
        assert PaymentStatus.from_value("partially_paid") is PaymentStatus.PARTIALLY_PAID
        assert PaymentStatus.from_value("nope") is PaymentStatus.UNKNOWN

    def test_is_final(self):
        assert PaymentStatus.FINISHED.is_final()
        assert PaymentStatus.EXPIRED.is_final()
        assert not PaymentStatus.WAITING.is_final()
        assert not PaymentStatus.UNKNOWN.is_final()


class TestExtractPaymentFields:
    def test_projection_is_complete(self):
        notification = extract_payment_fields({"payment_id": 123, "payment_status": "finished"})
        data = notification.to_dict()

        assert set(data) == set(PAYMENT_FIELDS)
        assert len(PAYMENT_FIELDS) == 16
        assert data["payment_id"] == 123
        assert data["payment_status"] == "finished"
        assert all(value is None for key, value in data.items() if key not in ("payment_id", "payment_status"))

    def test_unknown_keys_are_dropped(self):
        notification = extract_payment_fields({"payment_id": 1, "fee": {"currency": "btc"}})

        assert "fee" not in notification.to_dict()

    def test_full_payload(self):
        payload = {
            "payment_id": 5077125051,
            "payment_status": "partially_paid",
            "pay_address": "TNDFkiSmBQorNFacb3735q8MnT29sn8BLn",
            "price_amount": 1,
            "price_currency": "usd",
            "pay_amount": 165.652609,
            "actually_paid": 160,
            "pay_currency": "trx",
            "order_id": "order-42",
            "order_description": "Apple Macbook Pro 2019 x 1",
            "purchase_id": "5837122679",
            "created_at": "2021-12-15T11:31:11.924Z",
            "updated_at": "2021-12-15T11:36:19.613Z",
            "outcome_amount": 1.123,
            "outcome_currency": "trx",
            "commission_fee": 0.01,
        }

        notification = extract_payment_fields(payload)

        assert notification.to_dict() == payload
        assert notification.status is PaymentStatus.PARTIALLY_PAID

    def test_non_mapping_gives_empty_projection(self):
        assert extract_payment_fields(None) == PaymentNotification()
        assert extract_payment_fields([1, 2]) == PaymentNotification()

    def test_notification_is_immutable(self):
        notification = extract_payment_fields({"payment_id": 1})

        with pytest.raises(AttributeError):
            notification.payment_id = 2  # type: ignore
