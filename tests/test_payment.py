import pytest

from algolab.payment import InvalidPaymentError, pay_card, pay_cash, pay_upi


def test_cash_message():
    assert pay_cash(120) == "Processing amout of Rs: 120 using cash on delivery method."


def test_card_message_does_not_expose_card_number():
    message = pay_card(250, "card-placeholder")
    assert message == "Proccessing amount of Rs: 250 using Card Method."
    assert "card-placeholder" not in message


def test_upi_message_includes_id():
    assert pay_upi(120, "user@upi", True) == "Proccessing amount of Rs: 120 using UPI:user@upi"


def test_upi_message_includes_amount():
    assert "Rs: 999 " in pay_upi(999, "someone@upi", True)


def test_invalid_upi_raises():
    with pytest.raises(InvalidPaymentError, match="Invalid UPI"):
        pay_upi(120, "user@upi", False)


def test_invalid_payment_is_value_error():
    with pytest.raises(ValueError):
        pay_upi(1, "user@upi", False)