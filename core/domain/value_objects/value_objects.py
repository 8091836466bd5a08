"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable
from uuid import UUID, uuid4

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Menu prices are never negative, but Money itself allows any sign so
    differences (e.g. stale order totals) can be expressed.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        # Convert to Decimal if needed (str() keeps 8.99 as 8.99, not the binary float)
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, 'amount', Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValueError(f"Invalid amount: {self.amount!r}") from None

        # NaN and Infinity cannot be compared or summed safely
        if not self.amount.is_finite():
            raise ValueError(f"Amount must be finite, got: {self.amount}")

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        """Zero amount in the given currency."""
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def total(cls, values: Iterable['Money'], currency: str = DEFAULT_CURRENCY) -> 'Money':
        """Sum Money values, starting from zero in ``currency``."""
        result = cls.zero(currency)
        for value in values:
            result = result + value
        return result

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: 'Money') -> 'Money':
        """Subtract two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot subtract different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def is_negative(self) -> bool:
        """Check if amount is negative."""
        return self.amount < 0

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for one pass of an order through a handler chain."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
