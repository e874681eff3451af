"""Domain constants for semester budgeting."""

from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    """Closed set of spending and income categories."""

    RENT = "rent"
    UTILITIES = "utilities"
    GROCERIES = "groceries"
    DINING = "dining"
    TRANSPORTATION = "transportation"
    BOOKS_SUPPLIES = "books_supplies"
    HEALTH = "health"
    SUBSCRIPTIONS = "subscriptions"
    ENTERTAINMENT = "entertainment"
    TRAVEL = "travel"
    MISC = "misc"
    INCOME = "income"


CATEGORY_LABELS: dict[Category, str] = {
    Category.RENT: "Rent",
    Category.UTILITIES: "Utilities",
    Category.GROCERIES: "Groceries",
    Category.DINING: "Dining Out",
    Category.TRANSPORTATION: "Transportation",
    Category.BOOKS_SUPPLIES: "Books & Supplies",
    Category.HEALTH: "Health",
    Category.SUBSCRIPTIONS: "Subscriptions",
    Category.ENTERTAINMENT: "Entertainment",
    Category.TRAVEL: "Travel",
    Category.MISC: "Miscellaneous",
    Category.INCOME: "Income",
}

# Iteration order is the match priority of the categorizer.
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.RENT: ("rent", "apartment", "lease", "housing"),
    Category.UTILITIES: (
        "electric",
        "water",
        "gas",
        "internet",
        "wifi",
        "phone",
        "verizon",
        "att",
        "tmobile",
    ),
    Category.GROCERIES: (
        "grocery",
        "supermarket",
        "whole foods",
        "trader joe",
        "safeway",
        "kroger",
        "walmart",
        "target",
    ),
    Category.DINING: (
        "restaurant",
        "cafe",
        "coffee",
        "starbucks",
        "chipotle",
        "mcdonalds",
        "pizza",
        "burger",
        "food delivery",
        "doordash",
        "ubereats",
        "grubhub",
    ),
    Category.TRANSPORTATION: (
        "gas",
        "fuel",
        "uber",
        "lyft",
        "transit",
        "parking",
        "bus",
        "train",
        "metro",
    ),
    Category.BOOKS_SUPPLIES: (
        "book",
        "amazon",
        "textbook",
        "supplies",
        "office",
        "staples",
    ),
    Category.HEALTH: (
        "pharmacy",
        "cvs",
        "walgreens",
        "doctor",
        "medical",
        "health",
        "clinic",
    ),
    Category.SUBSCRIPTIONS: (
        "netflix",
        "spotify",
        "apple",
        "subscription",
        "membership",
        "prime",
    ),
    Category.ENTERTAINMENT: (
        "movie",
        "theater",
        "concert",
        "ticket",
        "game",
        "entertainment",
    ),
    Category.TRAVEL: ("airline", "flight", "hotel", "airbnb", "travel"),
    Category.MISC: (),
    Category.INCOME: (
        "payroll",
        "deposit",
        "transfer",
        "income",
        "payment received",
    ),
}

WEEKS_PER_MONTH = Decimal("4.33")
WEEKS_PER_SEMESTER = 16
STATUS_TOLERANCE = Decimal("0.05")
TOP_CATEGORY_LIMIT = 5
TOP_CATEGORY_WINDOW_DAYS = 14
LOOKAHEAD_DAYS = 7


__all__ = [
    "Category",
    "CATEGORY_LABELS",
    "CATEGORY_KEYWORDS",
    "WEEKS_PER_MONTH",
    "WEEKS_PER_SEMESTER",
    "STATUS_TOLERANCE",
    "TOP_CATEGORY_LIMIT",
    "TOP_CATEGORY_WINDOW_DAYS",
    "LOOKAHEAD_DAYS",
]
