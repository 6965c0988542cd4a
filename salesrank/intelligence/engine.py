"""Estimation engine - validates requests and assembles results."""

from functools import lru_cache
import logging
from typing import Any

from salesrank.config import settings
from salesrank.signals import CalibrationTable, SalesEstimate, SalesEstimator, get_calibration_table
from .narrative import EstimationOutput, compose_output
from .validator import validate_input

logger = logging.getLogger(__name__)


class EstimationEngine:
    """Runs a raw estimation request through validation, estimation and composition."""

    def __init__(self, table: CalibrationTable | None = None, max_rank: int | None = None):
        self.table = table if table is not None else get_calibration_table()
        self.max_rank = max_rank if max_rank is not None else settings.max_rank
        self.estimator = SalesEstimator(self.table)

    def categories(self) -> list[str]:
        """Known categories, sorted."""
        return sorted(self.table)

    def estimate(self, category: str, rank: float) -> SalesEstimate:
        """Estimate monthly units without validation or composition."""
        return self.estimator.estimate(category, rank)

    def run(self, category: str | None, rank: Any, price: Any = None) -> EstimationOutput:
        """Validate raw input and produce a full estimate.

        Raises:
            InvalidInput: if the input fails validation; nothing is estimated.
            UnknownCategory: if the category has no calibration.
        """
        request = validate_input(category, rank, price, max_rank=self.max_rank)

        estimate = self.estimator.estimate(request.category, request.rank)
        logger.info(
            f"Estimated {request.category} BSR #{request.rank:,}: "
            f"{estimate.units:,} units/month ({estimate.method.value})"
        )

        return compose_output(request.category, request.rank, estimate, request.price)


@lru_cache
def get_engine() -> EstimationEngine:
    """Get cached engine instance."""
    return EstimationEngine()
