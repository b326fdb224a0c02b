"""
Example: Basic Payment Flow

Creates a sandbox payment and polls its status once.
"""

import asyncio

from dotenv import load_dotenv
load_dotenv()

from nowpayments import ApiError, NowPayments, PaymentStatus


async def main():
    print("=== NOWPayments Basic Example ===\n")

    # Reads NOWPAYMENTS_API_KEY from the environment
    async with NowPayments(sandbox=True) as client:
        status = await client.get_status()
        print(f"API status: {status.get('message')}")

        estimate = await client.general.get_estimate(25, "usd", "btc")
        print(f"25 USD ~ {estimate.get('estimated_amount')} BTC")

        try:
            payment = await client.payments.create_payment(
                price_amount=25,
                price_currency="usd",
                pay_currency="btc",
                order_id="example-order-1",
                order_description="Example order",
            )
        except ApiError as e:
            print(f"Payment failed: {e} ({e.response_data})")
            return

        print(f"Payment {payment['payment_id']} created")
        print(f"   Pay {payment['pay_amount']} {payment['pay_currency']} to {payment['pay_address']}")

        current = await client.payments.get_status(payment["payment_id"])
        status = PaymentStatus.from_value(current.get("payment_status"))
        print(f"   Status: {status.value}")


if __name__ == "__main__":
    asyncio.run(main())
