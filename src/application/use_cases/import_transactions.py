"""Use case to normalize and categorize imported statement rows."""

from collections.abc import Iterable

from src.domain.models import ImportedTransaction, RawTransactionRow
from src.domain.services.categorization import (
    AmountConvention,
    categorize_transaction,
    normalize_amount,
)
from src.infrastructure.logging.logger import get_app_logger


class ImportTransactionsUseCase:
    """Prepare parsed statement rows for storage.

    Categorization happens once, at import time. Editing a description later
    requires running the categorizer again.
    """

    def __init__(
        self,
        logger=None,
        amount_convention: AmountConvention = AmountConvention.POSITIVE_SPEND,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            amount_convention: Sign convention of the statement amounts.
        """
        self._logger = logger or get_app_logger()
        self._amount_convention = AmountConvention(amount_convention)

    def execute(
        self,
        rows: Iterable[RawTransactionRow],
    ) -> list[ImportedTransaction]:
        """Return the rows with normalized amounts and categories.

        Args:
            rows: Raw rows from a statement parser.

        Returns:
            list[ImportedTransaction]: Rows in their original order.
        """
        imported = [
            ImportedTransaction(
                date=row.date,
                description=row.description,
                amount=normalize_amount(row.amount, self._amount_convention),
                category=categorize_transaction(row.description),
            )
            for row in rows
        ]
        counts: dict[str, int] = {}
        for item in imported:
            counts[item.category.value] = counts.get(item.category.value, 0) + 1
        self._logger.info(
            f"Imported {len(imported)} rows "
            f"({self._amount_convention.value}): {counts}"
        )
        return imported


__all__ = ["ImportTransactionsUseCase", "ImportedTransaction"]
