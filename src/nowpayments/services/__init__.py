"""
Resource services for the NOWPayments REST API.

Each service covers one API resource:
- GeneralService: API status, currencies, estimates
- PaymentsService: Payments and invoices
- SubscriptionsService: Recurring payment plans
- PayoutsService: Mass payouts
- CustodyService: Sub-partner accounts
- ConversionsService: Currency conversions
"""

from nowpayments.services.base import BaseService, find_missing_fields
from nowpayments.services.conversions import ConversionsService
from nowpayments.services.custody import CustodyService
from nowpayments.services.general import GeneralService
from nowpayments.services.payments import PaymentsService
from nowpayments.services.payouts import PayoutsService
from nowpayments.services.subscriptions import SubscriptionsService

__all__ = [
    # Base
    "BaseService",
    "find_missing_fields",
    # Services
    "GeneralService",
    "PaymentsService",
    "SubscriptionsService",
    "PayoutsService",
    "CustodyService",
    "ConversionsService",
]
