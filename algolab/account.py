"""A bank account whose balance changes only through deposits and withdrawals."""

from __future__ import annotations


class BankAccount:
    """An account holding a balance for one holder."""

    def __init__(self, holder: str, balance: float) -> None:
        self._holder = holder
        self._balance = balance

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> float:
        """Add a positive ``amount`` and return the new balance."""
        if amount <= 0:
            raise ValueError("Invalid deposit amount!")
        self._balance += amount
        return self._balance

    def withdraw(self, amount: float) -> float:
        """Take a positive ``amount`` no larger than the balance and return the new balance."""
        if amount <= 0 or amount > self._balance:
            raise ValueError("Invalid withdrawal amount!")
        self._balance -= amount
        return self._balance

    def __repr__(self) -> str:
        return f"BankAccount(holder={self._holder!r}, balance={self._balance!r})"