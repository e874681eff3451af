"""Affordability check of a purchase against a computed snapshot."""

from decimal import Decimal

from src.domain.models import BudgetSnapshot, PurchaseEvaluation, PurchaseVerdict


# Static estimate keyed by verdict; the runway is not re-simulated.
RUNWAY_IMPACT_MESSAGES: dict[PurchaseVerdict, str] = {
    PurchaseVerdict.SAFE: "No significant impact",
    PurchaseVerdict.RISKY: "Could reduce runway by 1-2 weeks",
    PurchaseVerdict.NOT_RECOMMENDED: "Would exhaust funds before semester end",
}


def evaluate_purchase(
    amount: Decimal,
    snapshot: BudgetSnapshot,
) -> PurchaseEvaluation:
    """Classify a candidate purchase.

    Args:
        amount: Purchase amount.
        snapshot: Snapshot the purchase is checked against.

    Returns:
        PurchaseEvaluation: Verdict, safe-to-spend impact and runway message.
    """
    if amount <= snapshot.safe_to_spend_this_week:
        verdict = PurchaseVerdict.SAFE
    elif amount <= snapshot.remaining_funds_today:
        verdict = PurchaseVerdict.RISKY
    else:
        verdict = PurchaseVerdict.NOT_RECOMMENDED
    return PurchaseEvaluation(
        verdict=verdict,
        impact_on_safe_to_spend=snapshot.safe_to_spend_this_week - amount,
        impact_on_runway=RUNWAY_IMPACT_MESSAGES[verdict],
    )


__all__ = ["RUNWAY_IMPACT_MESSAGES", "evaluate_purchase"]
