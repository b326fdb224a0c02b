import hashlib
import hmac
import json
import os
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from nowpayments.core.config import Config

IPN_SECRET = "test-secret"

FINISHED_BODY = (
    '{"payment_id":123,"payment_status":"finished","price_amount":100,"price_currency":"USD"}'
)


def _reference_signature(secret: str, payload: dict) -> str:
    """Signature as NOWPayments documents it, computed with the stdlib."""
    message = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hmac.new(secret.encode(), message.encode(), hashlib.sha512).hexdigest()


def _last_request(http_client) -> tuple[str, str, dict]:
    args, kwargs = http_client.request.call_args
    return args[0], args[1], kwargs


@pytest.fixture(autouse=True)
def clean_env():
    """Keep NOWPAYMENTS_* variables from the developer's shell out of tests."""
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith("NOWPAYMENTS_")}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture
def ipn_secret() -> str:
    return IPN_SECRET


@pytest.fixture
def finished_body() -> str:
    return FINISHED_BODY


@pytest.fixture
def sign():
    """sign(payload_dict, secret=IPN_SECRET) -> hex signature."""

    def _sign(payload: dict, secret: str = IPN_SECRET) -> str:
        return _reference_signature(secret, payload)

    return _sign


@pytest.fixture
def config() -> Config:
    return Config(api_key="test_api_key_123456", ipn_secret=IPN_SECRET)


@pytest.fixture
def http_client():
    """Mocked httpx client; set ``http_client.request.return_value`` per test."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.request.return_value = httpx.Response(200, json={})
    return mock_client


@pytest.fixture
def last_request():
    """last_request(http_client) -> (method, url, kwargs) of the latest call."""
    return _last_request
