"""Food delivery services and delivery methods that differ only in how they
carry out the same operations."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FoodDelivery(ABC):
    """A food delivery service: orders are placed, then paid for."""

    @abstractmethod
    def place_order(self) -> str:
        """Return the message for placing an order."""

    def payment(self) -> str:
        """Return the message for paying for an order."""
        return "Processing Payment..."


class ZomatoDelivery(FoodDelivery):
    def place_order(self) -> str:
        return "Placing order through Zomato..."

    def payment(self) -> str:
        return "Payment is done to Zomato."


class SwiggyDelivery(FoodDelivery):
    def place_order(self) -> str:
        return "Placing order through Swiggy..."

    def payment(self) -> str:
        return "Payment is done to Swiggy."


def process_order(service: FoodDelivery) -> str:
    """Place and pay for an order, returning both messages as two lines."""
    return f"{service.place_order()}\n{service.payment()}"


class Delivery:
    """A standard delivery method."""

    def deliver_order(self) -> str:
        return "Delivering order through standard method."


class ExpressDelivery(Delivery):
    def deliver_order(self) -> str:
        return "Delivering order through express method."


class NoContactDelivery(Delivery):
    def deliver_order(self) -> str:
        return "Delivering order with no-contact delivery method."


def deliver(delivery: Delivery) -> str:
    """Return the message of the given delivery method."""
    return delivery.deliver_order()