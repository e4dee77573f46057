"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union
from uuid import UUID, uuid4


Scalar = Union[int, float, str, Decimal]


def _to_decimal(value: Scalar) -> Decimal:
    """Convert a number to Decimal through str so 0.1 stays exactly 0.1."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value.

    A single implicit currency is assumed everywhere, so Money only carries
    the amount. Every operation returns a new instance.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal = Decimal("0")

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', _to_decimal(self.amount))

    @classmethod
    def zero(cls) -> 'Money':
        """Canonical zero amount."""
        return cls(amount=Decimal("0"))

    def __str__(self) -> str:
        return f"{self.amount}"

    def add(self, other: 'Money') -> 'Money':
        """Return the sum of two amounts."""
        return Money(amount=self.amount + other.amount)

    def subtract(self, other: 'Money') -> 'Money':
        """Return the difference; the result may be negative."""
        return Money(amount=self.amount - other.amount)

    def multiply(self, scalar: Scalar) -> 'Money':
        """
        Scale the amount by an integer or fractional factor.

        Args:
            scalar: int, Decimal, or a float/str that is converted via str

        Returns:
            New Money with amount * scalar

        Raises:
            TypeError: If scalar is a Money or a bool
        """
        if isinstance(scalar, (Money, bool)):
            raise TypeError(
                f"Money can only be multiplied by a number, got {type(scalar).__name__}"
            )
        return Money(amount=self.amount * _to_decimal(scalar))

    def __add__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: Scalar) -> 'Money':
        if isinstance(scalar, (Money, bool)):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: Scalar) -> 'Money':
        return self.__mul__(scalar)

    def is_negative(self) -> bool:
        """Check if amount is negative."""
        return self.amount < 0

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for workflow execution tracing."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
