"""NowPayments - Main SDK entry point."""

from __future__ import annotations

from typing import Any

import httpx

from nowpayments.core.config import Config
from nowpayments.core.http import ApiTransport
from nowpayments.core.logging import configure_logging, get_logger
from nowpayments.services import (
    ConversionsService,
    CustodyService,
    GeneralService,
    PaymentsService,
    PayoutsService,
    SubscriptionsService,
)
from nowpayments.webhooks import IpnParser


class NowPayments:
    """
    Main client for the NOWPayments API.

    Initialization requires an API key, given directly, through ``config`` or
    via the NOWPAYMENTS_API_KEY environment variable. The IPN secret is only
    needed for webhook helpers that do not take an explicit secret.

    Example:
        >>> async with NowPayments(api_key="...", ipn_secret="...", sandbox=True) as client:
        ...     payment = await client.payments.create_payment(25, "usd", "btc")
        ...     notification = client.ipn.handle(body, headers)
    """

    def __init__(
        self,
        api_key: str | None = None,
        ipn_secret: str | bytes | None = None,
        sandbox: bool | None = None,
        config: Config | None = None,
        http_client: httpx.AsyncClient | None = None,
        log_level: int | str | None = None,
    ) -> None:
        """
        Initialize NowPayments client.

        Args:
            api_key: NOWPayments API key (or from NOWPAYMENTS_API_KEY env)
            ipn_secret: IPN secret (or from NOWPAYMENTS_IPN_SECRET env)
            sandbox: Use the sandbox endpoint (or from NOWPAYMENTS_SANDBOX env)
            config: Complete configuration; other settings are ignored when given
            http_client: Shared httpx client, left open by close()
            log_level: Logging level (default from config)
        """
        if config is None:
            overrides: dict[str, Any] = {}
            if sandbox is not None:
                overrides["sandbox"] = sandbox
            config = Config.from_env(api_key=api_key, ipn_secret=ipn_secret, **overrides)

        self._config = config

        configure_logging(level=log_level or config.log_level)
        self._logger = get_logger("client")
        self._logger.info(
            f"Initializing NOWPayments SDK ({config.api_base_url}, key {config.masked_api_key()})"
        )

        self._transport = ApiTransport(config, http_client)

        self._general = GeneralService(self._transport)
        self._payments = PaymentsService(self._transport)
        self._subscriptions = SubscriptionsService(self._transport)
        self._payouts = PayoutsService(self._transport)
        self._custody = CustodyService(self._transport)
        self._conversions = ConversionsService(self._transport)
        self._ipn = IpnParser(config)

    @property
    def config(self) -> Config:
        """Get SDK configuration."""
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.api_base_url

    @property
    def general(self) -> GeneralService:
        """API status, currencies and estimates."""
        return self._general

    @property
    def payments(self) -> PaymentsService:
        return self._payments

    @property
    def subscriptions(self) -> SubscriptionsService:
        return self._subscriptions

    @property
    def payouts(self) -> PayoutsService:
        return self._payouts

    @property
    def custody(self) -> CustodyService:
        return self._custody

    @property
    def conversions(self) -> ConversionsService:
        return self._conversions

    @property
    def ipn(self) -> IpnParser:
        """IPN parser bound to the configured secret."""
        return self._ipn

    async def get_status(self) -> Any:
        """Check API status."""
        return await self._general.get_status()

    async def get_currencies(self) -> Any:
        return await self._general.get_currencies()

    async def get_merchant_currencies(self) -> Any:
        return await self._general.get_merchant_currencies()

    async def close(self) -> None:
        """Close the underlying HTTP client (unless it was passed in)."""
        await self._transport.close()

    async def __aenter__(self) -> NowPayments:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
