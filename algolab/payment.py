"""Payment by cash on delivery, card or UPI."""

from __future__ import annotations


class InvalidPaymentError(ValueError):
    """Raised when a payment cannot be processed."""


def pay_cash(amount: int) -> str:
    """Return the message for a cash-on-delivery payment."""
    return f"Processing amout of Rs: {amount} using cash on delivery method."


def pay_card(amount: int, card_number: str) -> str:
    """Return the message for a card payment."""
    return f"Proccessing amount of Rs: {amount} using Card Method."


def pay_upi(amount: int, upi_id: str, is_upi: bool) -> str:
    """Return the message for a UPI payment; raise if the UPI is invalid."""
    if not is_upi:
        raise InvalidPaymentError("Invalid UPI")
    return f"Proccessing amount of Rs: {amount} using UPI:{upi_id}"