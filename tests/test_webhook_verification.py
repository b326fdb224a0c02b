import json

import pytest

from nowpayments.core.config import Config
from nowpayments.core.exceptions import ConfigurationError
from nowpayments.core.types import PaymentNotification, PaymentStatus
from nowpayments.webhooks import (
    IpnParser,
    classify,
    is_confirmed,
    is_confirming,
    is_expired,
    is_failed,
    is_finished,
    is_partially_paid,
    is_waiting,
    process_notification,
    process_notification_with_config,
    verify_notification,
    verify_notification_with_config,
)

OTHER_PREDICATES = [is_waiting, is_confirming, is_confirmed, is_partially_paid, is_failed, is_expired]


@pytest.fixture
def parser(config):
    return IpnParser(config)


def test_end_to_end_finished_payment(finished_body, ipn_secret, sign):
    signature = sign(json.loads(finished_body))

    result = process_notification(finished_body, signature, ipn_secret)

    assert result == {
        "payment_id": 123,
        "payment_status": "finished",
        "price_amount": 100,
        "price_currency": "USD",
    }
    assert classify(result) is PaymentStatus.FINISHED
    assert is_finished(result) is True
    assert not any(predicate(result) for predicate in OTHER_PREDICATES)


def test_tampered_payment_id_rejected(finished_body, ipn_secret, sign):
    forged = dict(json.loads(finished_body), payment_id=124)
    signature = sign(forged)

    assert process_notification(finished_body, signature, ipn_secret) is None


def test_wrong_secret_rejected(finished_body, sign):
    signature = sign(json.loads(finished_body), secret="another-secret")

    assert process_notification(finished_body, signature, "test-secret") is None


def test_unsorted_body_verifies(ipn_secret, sign):
    body = '{"price_currency": "usd", "payment_status": "waiting", "payment_id": 7}'
    signature = sign(json.loads(body))

    result = process_notification(body, signature, ipn_secret)

    assert result is not None
    # Caller sees the payload in the order it was sent
    assert list(result) == ["price_currency", "payment_status", "payment_id"]


def test_bytes_body_and_bytes_secret(finished_body, sign):
    signature = sign(json.loads(finished_body))

    assert process_notification(finished_body.encode(), signature, b"test-secret") is not None


@pytest.mark.parametrize(
    "body",
    [
        "{not json",
        "",
        "null",
        "[1, 2, 3]",
        '"finished"',
        '{"amount": NaN}',
        b"\xff\xfe{}",
    ],
)
def test_malformed_body_fails_closed(body, ipn_secret):
    assert process_notification(body, "a" * 128, ipn_secret) is None
    assert verify_notification(body, "a" * 128, ipn_secret) is False


def test_missing_signature_rejected(finished_body, ipn_secret):
    assert process_notification(finished_body, None, ipn_secret) is None


@pytest.mark.parametrize("body", ["{not json", "[]"])
@pytest.mark.parametrize("secret", ["", b""])
def test_empty_secret_fails_closed_on_malformed_body(body, secret):
    assert process_notification(body, "abc", secret) is None
    assert verify_notification(body, "abc", secret) is False


def test_empty_secret_rejects_valid_body(finished_body, sign):
    signature = sign(json.loads(finished_body), secret="")

    assert process_notification(finished_body, signature, "") is None
    assert verify_notification(finished_body, signature, b"") is False


def test_verify_notification(finished_body, ipn_secret, sign):
    signature = sign(json.loads(finished_body))

    assert verify_notification(finished_body, signature, ipn_secret) is True
    assert verify_notification(finished_body, signature[::-1], ipn_secret) is False


class TestConfigVariants:
    def test_uses_config_secret(self, config, finished_body, sign):
        signature = sign(json.loads(finished_body))

        assert process_notification_with_config(config, finished_body, signature) is not None
        assert verify_notification_with_config(config, finished_body, signature) is True

    def test_missing_secret_raises(self, finished_body):
        config = Config(api_key="test_key")

        with pytest.raises(ConfigurationError, match="IPN secret not configured"):
            process_notification_with_config(config, finished_body, "abc")
        with pytest.raises(ConfigurationError):
            verify_notification_with_config(config, finished_body, "abc")

    def test_missing_secret_raises_even_for_malformed_body(self):
        config = Config(api_key="test_key")

        with pytest.raises(ConfigurationError):
            process_notification_with_config(config, "{not json", "abc")


class TestIpnParser:
    def test_handle_returns_payment_fields(self, parser, finished_body, sign):
        headers = {"x-nowpayments-sig": sign(json.loads(finished_body))}

        notification = parser.handle(finished_body, headers)

        assert isinstance(notification, PaymentNotification)
        assert notification.payment_id == 123
        assert notification.status is PaymentStatus.FINISHED
        assert notification.pay_address is None

    def test_handle_header_lookup_is_case_insensitive(self, parser, finished_body, sign):
        headers = {"X-NOWPayments-Sig": sign(json.loads(finished_body))}

        assert parser.handle(finished_body, headers) is not None

    def test_handle_missing_header(self, parser, finished_body):
        assert parser.handle(finished_body, {}) is None

    def test_handle_bad_signature(self, parser, finished_body):
        assert parser.handle(finished_body, {"x-nowpayments-sig": "0" * 128}) is None

    def test_explicit_secret_overrides_config(self, parser, finished_body, sign):
        signature = sign(json.loads(finished_body), secret="per-call")

        assert parser.verify_signature(finished_body, signature) is False
        assert parser.verify_signature(finished_body, signature, secret="per-call") is True

    def test_explicit_empty_secret_is_not_replaced(self, parser, finished_body, sign):
        signature = sign(json.loads(finished_body))

        assert parser.verify_signature(finished_body, signature) is True
        assert parser.verify_signature(finished_body, signature, secret="") is False
        assert parser.process(finished_body, signature, secret=b"") is None

    def test_parser_secret_without_config(self, finished_body, sign):
        parser = IpnParser(secret="test-secret")

        assert parser.process(finished_body, sign(json.loads(finished_body))) is not None

    def test_no_secret_anywhere(self, finished_body):
        with pytest.raises(ConfigurationError):
            IpnParser().process(finished_body, "abc")

    def test_config_without_secret(self, finished_body):
        parser = IpnParser(Config(api_key="test_key"))

        with pytest.raises(ConfigurationError, match="IPN secret not configured"):
            parser.verify_signature(finished_body, "abc")

    def test_classification_shortcuts(self, parser):
        assert parser.is_payment_completed({"payment_status": "finished"}) is True
        assert parser.is_payment_completed({"payment_status": "confirmed"}) is False
        assert parser.classify({"payment_status": "waiting"}) is PaymentStatus.WAITING
        assert parser.extract_payment_data({"payment_id": 1}).payment_id == 1
