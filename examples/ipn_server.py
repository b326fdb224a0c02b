"""
Example: IPN receiver

Minimal HTTP server that verifies NOWPayments IPN callbacks.
Run it, then point ipn_callback_url at http://<host>:8000/ipn
"""

import http.server
import os
import socketserver

from dotenv import load_dotenv
load_dotenv()

from nowpayments import Config, IpnParser, PaymentStatus

PORT = 8000

# Reads NOWPAYMENTS_API_KEY and NOWPAYMENTS_IPN_SECRET
parser = IpnParser(Config.from_env())


class IpnHandler(http.server.BaseHTTPRequestHandler):
    def do_POST(self):
        if self.path != "/ipn":
            self.send_error(404, "Not Found")
            return

        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length)

        notification = parser.handle(body, self.headers)
        if notification is None:
            print("[IPN] Rejected notification")
            self.send_response(400)
            self.end_headers()
            return

        print(f"[IPN] Payment {notification.payment_id}: {notification.status.value}")
        if notification.status is PaymentStatus.FINISHED:
            print(f"[IPN] Order {notification.order_id} paid in full")
        elif notification.status is PaymentStatus.PARTIALLY_PAID:
            print(f"[IPN] Order {notification.order_id} underpaid: {notification.actually_paid}")

        self.send_response(200)
        self.end_headers()


if __name__ == "__main__":
    port = int(os.environ.get("PORT", PORT))
    with socketserver.TCPServer(("", port), IpnHandler) as httpd:
        print(f"Listening for IPN callbacks on port {port}")
        httpd.serve_forever()
