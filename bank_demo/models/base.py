"""Shared value helpers for the account models."""

from decimal import Decimal, InvalidOperation

from bank_demo.exceptions import InvalidAmountError

ZERO = Decimal("0")


def to_amount(value: object) -> Decimal:
    """Coerce an int, float, str or Decimal into a ``Decimal`` amount.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Not a monetary amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    return amount
