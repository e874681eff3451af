"""Tests for keyword categorization and amount normalization."""

from decimal import Decimal

import pytest

from src.domain.constants import CATEGORY_KEYWORDS, Category
from src.domain.services.categorization import (
    AmountConvention,
    categorize_transaction,
    normalize_amount,
)


@pytest.mark.parametrize(
    ("description", "expected"),
    [
        ("Whole Foods Market", Category.GROCERIES),
        ("Netflix Monthly", Category.SUBSCRIPTIONS),
        ("completely unknown vendor xyz", Category.MISC),
        ("", Category.MISC),
        ("STARBUCKS #1234", Category.DINING),
        ("Payroll ACME Corp", Category.INCOME),
    ],
)
def test_categorize_transaction_matches_keywords(description, expected) -> None:
    """Known merchants should map to their category, others to misc."""
    assert categorize_transaction(description) is expected


def test_categorize_transaction_is_deterministic() -> None:
    """The same description should always give the same category."""
    results = {categorize_transaction("Whole Foods Market") for _ in range(5)}

    assert results == {Category.GROCERIES}


def test_earlier_category_wins_on_shared_keyword() -> None:
    """'gas' is listed under utilities before transportation."""
    assert categorize_transaction("Shell Gas Station") is Category.UTILITIES


def test_earlier_category_wins_across_keywords() -> None:
    """Rent keywords are checked before income keywords."""
    assert categorize_transaction("Rent payment received") is Category.RENT


def test_uber_eats_resolves_to_transportation() -> None:
    """'ubereats' needs no space, so 'uber' from transportation matches."""
    assert categorize_transaction("Uber Eats order") is Category.TRANSPORTATION


def test_keyword_table_follows_category_declaration_order() -> None:
    """Match priority is the enum declaration order."""
    assert list(CATEGORY_KEYWORDS) == list(Category)
    assert CATEGORY_KEYWORDS[Category.MISC] == ()


def test_normalize_amount_negative_spend_returns_absolute_value() -> None:
    """Negative-spend statements should be flipped to positive spend."""
    assert normalize_amount(
        Decimal("-12.50"),
        AmountConvention.NEGATIVE_SPEND,
    ) == Decimal("12.50")
    assert normalize_amount(Decimal("3.00"), "negative-spend") == Decimal("3.00")


def test_normalize_amount_positive_spend_is_unchanged() -> None:
    """Positive-spend amounts should pass through, sign included."""
    assert normalize_amount(Decimal("-12.50")) == Decimal("-12.50")
    assert normalize_amount(
        Decimal("8.25"),
        AmountConvention.POSITIVE_SPEND,
    ) == Decimal("8.25")
