"""HMAC-SHA512 signing of canonical IPN payloads."""

from __future__ import annotations

from typing import Any

from cryptography.hazmat.primitives import constant_time, hashes, hmac


def _key_bytes(secret: str | bytes) -> bytes:
    return secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)


def compute_signature(secret: str | bytes, message: bytes) -> str:
    """
    Compute the lowercase hex HMAC-SHA512 of ``message`` keyed by ``secret``.

    Args:
        secret: IPN secret from the merchant dashboard
        message: Canonical payload bytes

    Returns:
        128-character lowercase hex digest
    """
    mac = hmac.HMAC(_key_bytes(secret), hashes.SHA512())
    mac.update(message)
    return mac.finalize().hex()


def signatures_match(expected: Any, computed: Any) -> bool:
    """Compare two hex signatures in constant time. Never raises."""
    if not isinstance(expected, str) or not isinstance(computed, str):
        return False
    return constant_time.bytes_eq(expected.encode("utf-8"), computed.encode("utf-8"))
