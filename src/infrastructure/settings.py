"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.services.categorization import AmountConvention
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BudgetSettings:
    """Settings for the budget persistence and import adapters.

    Attributes:
        db_url: SQLAlchemy URL of the budget database, if configured.
        amount_convention: Sign convention of imported statement amounts.
    """

    db_url: str | None = None
    amount_convention: AmountConvention = AmountConvention.POSITIVE_SPEND

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables and a local .env file.

        Returns:
            BudgetSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        db_url = os.getenv("BUDGET_DB_URL", "").strip() or None
        raw_convention = os.getenv("BUDGET_AMOUNT_CONVENTION", "")
        amount_convention = cls._parse_convention(
            raw_convention,
            logger=get_app_logger(),
        )
        return cls(db_url=db_url, amount_convention=amount_convention)

    @staticmethod
    def _parse_convention(raw_value: str, logger) -> AmountConvention:
        """Parse the amount convention, falling back to positive-spend.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            AmountConvention: Parsed convention.
        """
        cleaned = raw_value.strip().lower()
        if not cleaned:
            return AmountConvention.POSITIVE_SPEND
        try:
            return AmountConvention(cleaned)
        except ValueError:
            logger.warning(
                f"Unknown BUDGET_AMOUNT_CONVENTION '{raw_value}'. "
                "Falling back to positive-spend."
            )
            return AmountConvention.POSITIVE_SPEND


__all__ = ["BudgetSettings"]
