"""Keyword categorization and amount normalization for imported rows."""

from decimal import Decimal
from enum import Enum

from src.domain.constants import CATEGORY_KEYWORDS, Category


class AmountConvention(str, Enum):
    """Sign convention used by an upstream statement."""

    POSITIVE_SPEND = "positive-spend"
    NEGATIVE_SPEND = "negative-spend"


def categorize_transaction(description: str) -> Category:
    """Return the first category whose keywords appear in the description.

    Categories are checked in declaration order, so a description matching
    keywords of several categories resolves to the earliest one.

    Args:
        description: Free-text transaction description.

    Returns:
        Category: Matched category, or misc when nothing matches.
    """
    lowered = description.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        for keyword in keywords:
            if keyword.lower() in lowered:
                return category
    return Category.MISC


def normalize_amount(
    amount: Decimal,
    convention: AmountConvention | str = AmountConvention.POSITIVE_SPEND,
) -> Decimal:
    """Convert an amount to the positive-spend convention.

    Args:
        amount: Raw amount from the statement.
        convention: Sign convention of the statement.

    Returns:
        Decimal: Amount where positive values are spend.
    """
    if AmountConvention(convention) is AmountConvention.NEGATIVE_SPEND:
        return abs(amount)
    return amount


__all__ = ["AmountConvention", "categorize_transaction", "normalize_amount"]
