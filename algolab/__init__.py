"""Recursion, sorting, prime sieves, stacks and binary trees, with small
object-oriented examples of bookings, accounts, payments and deliveries."""

__version__ = "0.1.0"

__all__ = [
    "account",
    "algebra",
    "booking",
    "delivery",
    "geometry",
    "payment",
    "recursion",
    "sieve",
    "sorting",
    "stack_algos",
    "stacks",
    "tree",
    "tree_build",
]