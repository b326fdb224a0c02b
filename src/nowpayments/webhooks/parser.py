"""
IPN (Instant Payment Notification) verification.

NOWPayments POSTs a JSON body and puts a hex HMAC-SHA512 of the key-sorted
body in the ``x-nowpayments-sig`` header. A notification is accepted only when
the signature recomputed with the merchant's IPN secret matches.

Anything coming from the network is untrusted: malformed JSON, a body that is
not a JSON object, a missing header and a wrong signature all produce the
same "no result" outcome instead of an exception.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from nowpayments.core.config import Config
from nowpayments.core.exceptions import ConfigurationError
from nowpayments.core.logging import get_logger
from nowpayments.core.types import JsonDict, PaymentNotification
from nowpayments.webhooks.canonical import canonicalize
from nowpayments.webhooks.classifier import classify, extract_payment_fields, is_finished
from nowpayments.webhooks.signing import compute_signature, signatures_match

SIGNATURE_HEADER = "x-nowpayments-sig"

logger = get_logger("webhooks")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _decode_body(body: str | bytes) -> JsonDict | None:
    """Decode a raw body into a JSON object, or None when it is not one."""
    try:
        if isinstance(body, (bytes, bytearray)):
            body = bytes(body).decode("utf-8")
        data = json.loads(body, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def _require_secret(secret: str | bytes | None) -> str | bytes:
    if not secret:
        raise ConfigurationError("IPN secret not configured")
    return secret


def _verify_decoded(data: JsonDict, signature: Any, secret: str | bytes) -> bool:
    try:
        canonical = canonicalize(data)
    except (ValueError, TypeError):
        return False
    return signatures_match(signature, compute_signature(secret, canonical))


def process_notification(
    body: str | bytes, signature: str | None, secret: str | bytes
) -> JsonDict | None:
    """
    Verify an IPN body and return it decoded.

    Args:
        body: Raw request body
        signature: Value of the x-nowpayments-sig header
        secret: IPN secret

    Returns:
        The decoded payload exactly as sent (original key order), or None
        when the body is malformed, the secret is empty or the signature
        does not match.
    """
    data = _decode_body(body)
    if data is None:
        logger.debug("Rejected IPN: body is not a JSON object")
        return None
    if not secret:
        logger.debug("Rejected IPN: empty secret")
        return None
    if not _verify_decoded(data, signature, secret):
        logger.debug(f"Rejected IPN: signature mismatch (payment_id={data.get('payment_id')})")
        return None
    logger.debug(f"Verified IPN for payment_id={data.get('payment_id')}")
    return data


def verify_notification(body: str | bytes, signature: str | None, secret: str | bytes) -> bool:
    """Return True if ``signature`` authenticates ``body``."""
    return process_notification(body, signature, secret) is not None


def process_notification_with_config(
    config: Config, body: str | bytes, signature: str | None
) -> JsonDict | None:
    """process_notification() using the IPN secret held by ``config``."""
    return process_notification(body, signature, _require_secret(config.ipn_secret))


def verify_notification_with_config(
    config: Config, body: str | bytes, signature: str | None
) -> bool:
    """verify_notification() using the IPN secret held by ``config``."""
    return verify_notification(body, signature, _require_secret(config.ipn_secret))


class IpnParser:
    """
    Framework-agnostic IPN parser.

    Verifies signatures and projects verified payloads into PaymentNotification.
    Does NOT handle HTTP transport - that is the application's responsibility.

    Example:
        >>> parser = IpnParser(secret="my-ipn-secret")
        >>> notification = parser.handle(request.body, request.headers)
        >>> if notification and notification.status.value == "finished":
        ...     fulfil_order(notification.order_id)
    """

    def __init__(self, config: Config | None = None, secret: str | bytes | None = None) -> None:
        """
        Initialize parser.

        Args:
            config: SDK config whose ipn_secret is used when no secret is given
            secret: Explicit IPN secret, takes precedence over the config
        """
        self._config = config
        self._secret = secret

    def _resolve_secret(self, secret: str | bytes | None) -> str | bytes:
        if secret is not None:
            return secret
        if self._secret is not None:
            return self._secret
        if self._config is not None:
            return _require_secret(self._config.ipn_secret)
        raise ConfigurationError("IPN secret not configured")

    def verify_signature(
        self, body: str | bytes, signature: str | None, secret: str | bytes | None = None
    ) -> bool:
        return verify_notification(body, signature, self._resolve_secret(secret))

    def process(
        self, body: str | bytes, signature: str | None, secret: str | bytes | None = None
    ) -> JsonDict | None:
        return process_notification(body, signature, self._resolve_secret(secret))

    def handle(
        self, body: str | bytes, headers: Mapping[str, str]
    ) -> PaymentNotification | None:
        """
        Verify a webhook request and return its payment fields.

        Args:
            body: Raw request body
            headers: Request headers (looked up case-insensitively)

        Returns:
            PaymentNotification, or None when the request is not authentic
        """
        signature = _find_header(headers, SIGNATURE_HEADER)
        data = self.process(body, signature)
        if data is None:
            return None
        return extract_payment_fields(data)

    # Classification shortcuts, mirroring the module-level helpers
    extract_payment_data = staticmethod(extract_payment_fields)
    classify = staticmethod(classify)
    is_payment_completed = staticmethod(is_finished)


def _find_header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None
