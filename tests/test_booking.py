import pytest

from algolab.booking import (
    Booking,
    ConcertBooking,
    EventBooking,
    MovieBooking,
    SportBooking,
    process_booking,
)


def test_generic_booking_keeps_base_price():
    booking = Booking("Generic", 400)
    assert booking.total_price() == 400
    assert booking.ticket_message() == "Booking a generic ticket: "


@pytest.mark.parametrize(
    "booking, message",
    [
        (MovieBooking("Dangal", 250), "Booking a movie ticket: Dangal"),
        (EventBooking("ColdPlay", 7800), "Booking a ticket for Event: ColdPlay"),
        (SportBooking("Cric-T20", 2400), "Booking ticket for sports: Cric-T20"),
        (ConcertBooking("Symphony", 100), "Booking a concert ticket for: Symphony"),
    ],
)
def test_ticket_messages(booking, message):
    assert booking.ticket_message() == message


def test_booking_types():
    assert MovieBooking("a", 1).booking_type == "Movie"
    assert EventBooking("a", 1).booking_type == "Event"
    assert SportBooking("a", 1).booking_type == "Sports"


def test_surcharges_order_prices():
    base = 1000
    movie = MovieBooking("m", base).total_price()
    event = EventBooking("e", base).total_price()
    sport = SportBooking("s", base).total_price()
    assert base < movie < event < sport


def test_concert_priced_like_event():
    assert ConcertBooking("c", 300).total_price() == EventBooking("e", 300).total_price()
    assert isinstance(ConcertBooking("c", 1), EventBooking)


def test_total_price_scales_with_base():
    small = SportBooking("s", 100).total_price()
    large = SportBooking("s", 300).total_price()
    assert large == pytest.approx(3 * small)


def test_process_booking_movie_example():
    text = process_booking(MovieBooking("Dangal", 250))
    assert text == "Booking a movie ticket: Dangal\nTotal Price: 275"


def test_process_booking_starts_with_message():
    booking = SportBooking("Cric-T20", 2400)
    lines = process_booking(booking).splitlines()
    assert lines[0] == booking.ticket_message()
    assert lines[1].startswith("Total Price: ")


def test_negative_price_rejected():
    with pytest.raises(ValueError):
        MovieBooking("x", -1)