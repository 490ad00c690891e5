"""Ticket bookings whose price depends on the kind of booking."""

from __future__ import annotations


def _format_price(value: float) -> str:
    return f"{value:g}"


class Booking:
    """A generic booking with a base price."""

    booking_type = "Generic"
    multiplier = 1.0

    def __init__(self, booking_type: str, price: float) -> None:
        if price < 0:
            raise ValueError("price must not be negative")
        self.booking_type = booking_type
        self.price = price

    def ticket_message(self) -> str:
        """Return the line announcing the booking."""
        return "Booking a generic ticket: "

    def total_price(self) -> float:
        """Return the price charged for this booking."""
        return self.price * self.multiplier

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.booking_type!r}, price={self.price!r})"


class _NamedBooking(Booking):
    """A booking for a named movie, event or match."""

    kind = "Generic"
    template = "Booking a generic ticket: {name}"

    def __init__(self, name: str, price: float) -> None:
        super().__init__(self.kind, price)
        self.name = name

    def ticket_message(self) -> str:
        return self.template.format(name=self.name)


class MovieBooking(_NamedBooking):
    """A movie ticket, charged 10% over the base price."""

    kind = "Movie"
    multiplier = 1.1
    template = "Booking a movie ticket: {name}"


class EventBooking(_NamedBooking):
    """An event ticket, charged 20% over the base price."""

    kind = "Event"
    multiplier = 1.2
    template = "Booking a ticket for Event: {name}"


class ConcertBooking(EventBooking):
    """A concert ticket: an event booking with its own announcement."""

    kind = "Concert"
    template = "Booking a concert ticket for: {name}"


class SportBooking(_NamedBooking):
    """A sports ticket, charged 50% over the base price."""

    kind = "Sports"
    multiplier = 1.5
    template = "Booking ticket for sports: {name}"


def process_booking(booking: Booking) -> str:
    """Return the announcement and the total price of ``booking`` as two lines."""
    return f"{booking.ticket_message()}\nTotal Price: {_format_price(booking.total_price())}"