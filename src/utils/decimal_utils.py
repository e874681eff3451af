"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize stored or user-entered amounts to Decimal.

    Strings may carry a leading dollar sign and thousands separators, as
    statement exports and command-line input often do.

    Args:
        value: Raw numeric value from SQL rows, JSON blobs or user input.

    Returns:
        Decimal: Normalized amount; None maps to zero.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, str):
        cleaned = value.strip().replace(",", "")
        if cleaned.startswith("-$"):
            cleaned = "-" + cleaned[2:]
        try:
            result = Decimal(cleaned.lstrip("$"))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    else:
        result = Decimal(str(value))
    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return result


__all__ = ["coerce_decimal"]
