"""BSR to monthly unit sales estimation.

Estimation Strategy:
    rank inside the observed anchors  -> linear interpolation between them
    rank below the first anchor       -> power law extrapolation
    rank above the last anchor        -> power law regression

    monthly_units = max(30, round(raw / 30) * 30)
"""

from dataclasses import dataclass
from enum import Enum
import logging
import math

from salesrank.errors import UnknownCategory
from .calibration import CalibrationPoint, CalibrationTable

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30
MIN_MONTHLY_UNITS = 30


class Method(str, Enum):
    """Estimation method used for a result."""

    INTERPOLATION = "interpolation"
    EXTRAPOLATION = "extrapolation"
    POWER_LAW = "power_law"


@dataclass(frozen=True)
class SalesEstimate:
    """Estimator result."""

    units: int  # per month, multiple of 30
    method: Method
    raw_units: float  # before rounding
    anchors: tuple[CalibrationPoint, CalibrationPoint] | None = None


def interpolate(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Linear interpolation between (x1, y1) and (x2, y2)."""
    return y1 + (y2 - y1) * (x - x1) / (x2 - x1)


def power_law(rank: float, coefficient: float, exponent: float) -> float:
    """units = coefficient * rank ^ exponent"""
    return coefficient * math.pow(rank, exponent)


def round_to_month(raw_units: float) -> int:
    """Round to the nearest multiple of 30 units, never below 30.

    Halves round up, so 45 units becomes 60.
    """
    months = math.floor(raw_units / DAYS_PER_MONTH + 0.5)
    return max(MIN_MONTHLY_UNITS, months * DAYS_PER_MONTH)


class SalesEstimator:
    """Estimates monthly unit sales from BSR using per-category calibration."""

    def __init__(self, table: CalibrationTable):
        self.table = table

    def estimate(self, category: str, rank: float) -> SalesEstimate:
        """Estimate monthly units for a rank in a category.

        Ranks are trusted to be >= 1; callers validate input first.

        Raises:
            UnknownCategory: if the category has no calibration record.
        """
        record = self.table.get(category)
        if record is None:
            raise UnknownCategory(category)

        points = record.points

        # First bracket wins, so a rank equal to an inner anchor
        # is served by the bracket below it.
        for lower, upper in zip(points, points[1:]):
            if lower.rank <= rank <= upper.rank:
                raw = interpolate(rank, lower.rank, lower.units, upper.rank, upper.units)
                logger.debug(
                    f"{category} BSR {rank:,} interpolated between "
                    f"{lower.rank:,g} and {upper.rank:,g} -> {raw:.1f}"
                )
                return SalesEstimate(
                    units=round_to_month(raw),
                    method=Method.INTERPOLATION,
                    raw_units=raw,
                    anchors=(lower, upper),
                )

        raw = power_law(rank, record.coefficient, record.exponent)
        if rank < record.min_rank:
            method = Method.EXTRAPOLATION
        else:
            method = Method.POWER_LAW

        logger.debug(f"{category} BSR {rank:,} {method.value} -> {raw:.1f}")

        return SalesEstimate(
            units=round_to_month(raw),
            method=method,
            raw_units=raw,
        )
