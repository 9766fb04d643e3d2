"""
SMS message templates.
"""
from __future__ import annotations

from datetime import datetime

from app.billing.workflow.catalog import Package

EXPIRY_FORMAT = "%Y-%m-%d %H:%M UTC"


def payment_instructions(package: Package, code: str, payment_number: str, currency: str) -> str:
    # The validity line is fixed text, independent of the package duration.
    return "\n".join([
        "WiFi Access Request",
        f"Package: {package.name} - {currency} {package.price}",
        f"Code: {code}",
        "",
        "To pay:",
        f"1. Send {currency} {package.price} to {payment_number} (M-Pesa)",
        f"2. Use code: {code} to confirm payment",
        "3. You'll receive login details",
        "",
        "Valid for 30 minutes.",
    ])


def login_details(username: str, password: str, expires_at: datetime | None, ssid: str) -> str:
    valid_until = expires_at.strftime(EXPIRY_FORMAT) if expires_at else "unknown"
    return "\n".join([
        "Payment confirmed!",
        "WiFi Login:",
        f"Username: {username}",
        f"Password: {password}",
        f"Valid until: {valid_until}",
        "",
        f'Connect to "{ssid}" and use these details.',
    ])
