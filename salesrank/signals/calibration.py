"""Per-category BSR calibration data.

Each category carries a power-law fit and a set of observed anchor points:

    monthly_units = coefficient * (rank ^ exponent)

The anchors are used directly (linear interpolation) whenever a rank falls
inside their range; the power law only covers ranks outside it.
"""

import json
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from salesrank.config import settings
from salesrank.errors import DegenerateCalibration

logger = logging.getLogger(__name__)


class CalibrationPoint(NamedTuple):
    """Observed (rank, monthly units) anchor."""

    rank: float
    units: float


@dataclass(frozen=True)
class CalibrationRecord:
    """Calibration parameters for a single category."""

    category: str
    coefficient: float
    exponent: float
    points: tuple[CalibrationPoint, ...]

    @property
    def min_rank(self) -> float:
        return self.points[0].rank

    @property
    def max_rank(self) -> float:
        return self.points[-1].rank


CalibrationTable = Mapping[str, CalibrationRecord]


# Amazon US calibration, monthly units.
# Format: {"coefficient": C, "exponent": E, "data": [[rank, units], ...]}
AMAZON_CATEGORY_CALIBRATION: dict[str, dict[str, Any]] = {
    "Electronics": {
        "coefficient": 300000,
        "exponent": -0.75,
        "data": [
            [10, 52000], [50, 16500], [100, 9200], [500, 2900], [1000, 1650],
            [5000, 520], [10000, 290], [50000, 95], [100000, 55],
        ],
    },
    "Home & Kitchen": {
        "coefficient": 360000,
        "exponent": -0.75,
        "data": [
            [10, 62500], [50, 19800], [100, 11000], [500, 3500], [1000, 1980],
            [5000, 620], [10000, 350], [50000, 110], [100000, 62],
        ],
    },
    "Toys & Games": {
        "coefficient": 180000,
        "exponent": -0.68,
        "data": [
            [50, 13100], [100, 7700], [500, 2700], [1000, 1600],
            [5000, 560], [10000, 335], [50000, 118], [100000, 70],
        ],
    },
    "Sports & Outdoors": {
        "coefficient": 140000,
        "exponent": -0.68,
        "data": [
            [10, 28400], [50, 10100], [100, 6000], [500, 2100], [1000, 1250],
            [5000, 435], [10000, 260], [50000, 92], [100000, 55],
        ],
    },
    "Beauty & Personal Care": {
        "coefficient": 240000,
        "exponent": -0.75,
        "data": [
            [10, 41500], [50, 13200], [100, 7400], [500, 2330], [1000, 1320],
            [5000, 410], [10000, 236], [50000, 74], [100000, 42],
        ],
    },
    "Health & Household": {
        "coefficient": 260000,
        "exponent": -0.75,
        "data": [
            [50, 14300], [100, 8050], [500, 2520], [1000, 1430],
            [5000, 445], [10000, 255], [50000, 80], [100000, 45],
        ],
    },
    "Clothing, Shoes & Jewelry": {
        "coefficient": 520000,
        "exponent": -0.82,
        "data": [
            [10, 76500], [50, 21800], [100, 11600], [500, 3260], [1000, 1760],
            [5000, 495], [10000, 268], [50000, 75], [100000, 40],
        ],
    },
    "Books": {
        "coefficient": 450000,
        "exponent": -0.82,
        "data": [
            [10, 66000], [50, 18800], [100, 10050], [500, 2820], [1000, 1520],
            [5000, 428], [10000, 230], [50000, 65], [100000, 35],
        ],
    },
    "Pet Supplies": {
        "coefficient": 110000,
        "exponent": -0.68,
        "data": [
            [10, 22400], [50, 7950], [100, 4700], [500, 1650], [1000, 980],
            [5000, 345], [10000, 205], [50000, 72], [100000, 43],
        ],
    },
    "Office Products": {
        "coefficient": 90000,
        "exponent": -0.68,
        "data": [
            [50, 6500], [100, 3850], [500, 1350], [1000, 800],
            [5000, 282], [10000, 168], [50000, 59], [100000, 35],
        ],
    },
    "Tools & Home Improvement": {
        "coefficient": 100000,
        "exponent": -0.68,
        "data": [
            [10, 20400], [50, 7200], [100, 4280], [500, 1500], [1000, 890],
            [5000, 313], [10000, 187], [50000, 66], [100000, 39],
        ],
    },
    "Automotive": {
        "coefficient": 80000,
        "exponent": -0.68,
        "data": [
            [10, 16300], [50, 5750], [100, 3420], [500, 1200], [1000, 715],
            [5000, 250], [10000, 149], [50000, 52], [100000, 31],
        ],
    },
    "Video Games": {
        "coefficient": 200000,
        "exponent": -0.82,
        "data": [
            [10, 29500], [50, 8350], [100, 4480], [500, 1260], [1000, 680],
            [5000, 190], [10000, 103], [50000, 29],
        ],
    },
    "Baby": {
        "coefficient": 150000,
        "exponent": -0.82,
        "data": [
            [50, 6250], [100, 3360], [500, 945], [1000, 510],
            [5000, 143], [10000, 77], [50000, 22],
        ],
    },
}


def _as_finite(value: Any, what: str, category: str) -> float:
    if isinstance(value, bool):
        raise DegenerateCalibration(f"{category}: {what} must be a number", category)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise DegenerateCalibration(f"{category}: {what} must be a number", category)
    if not math.isfinite(number):
        raise DegenerateCalibration(f"{category}: {what} must be finite", category)
    return number


def build_record(category: str, raw: Mapping[str, Any]) -> CalibrationRecord:
    """Build a validated CalibrationRecord from a raw table entry.

    Raises:
        DegenerateCalibration: if the entry cannot be served safely
            (missing fields, fewer than 2 points, unsorted or duplicate
            ranks, non-positive coefficient or rank).
    """
    if not isinstance(raw, Mapping):
        raise DegenerateCalibration(f"{category}: entry must be an object", category)

    for key in ("coefficient", "exponent", "data"):
        if key not in raw:
            raise DegenerateCalibration(f"{category}: missing '{key}'", category)

    coefficient = _as_finite(raw["coefficient"], "coefficient", category)
    exponent = _as_finite(raw["exponent"], "exponent", category)
    if coefficient <= 0:
        raise DegenerateCalibration(f"{category}: coefficient must be > 0", category)

    data = raw["data"]
    if isinstance(data, (str, bytes)) or not hasattr(data, "__iter__"):
        raise DegenerateCalibration(f"{category}: 'data' must be a list of pairs", category)

    points: list[CalibrationPoint] = []
    for pair in data:
        try:
            rank, units = pair
        except (TypeError, ValueError):
            raise DegenerateCalibration(f"{category}: malformed point {pair!r}", category)
        point = CalibrationPoint(
            _as_finite(rank, "rank", category),
            _as_finite(units, "units", category),
        )
        if point.rank <= 0:
            raise DegenerateCalibration(f"{category}: ranks must be > 0", category)
        if points and point.rank <= points[-1].rank:
            raise DegenerateCalibration(
                f"{category}: ranks must be strictly increasing "
                f"({points[-1].rank:g} then {point.rank:g})",
                category,
            )
        points.append(point)

    if len(points) < 2:
        raise DegenerateCalibration(
            f"{category}: at least 2 data points required, got {len(points)}", category
        )

    return CalibrationRecord(
        category=category,
        coefficient=coefficient,
        exponent=exponent,
        points=tuple(points),
    )


def load_calibration_table(
    raw: Mapping[str, Mapping[str, Any]],
    strict: bool = False,
) -> CalibrationTable:
    """Build a read-only calibration table.

    In strict mode the first degenerate category aborts the load. Otherwise
    degenerate categories are logged and left out of the table.
    """
    records: dict[str, CalibrationRecord] = {}

    for category, entry in raw.items():
        try:
            records[category] = build_record(category, entry)
        except DegenerateCalibration as e:
            if strict:
                raise
            logger.warning(f"Excluding category from calibration table: {e}")

    if not records:
        raise DegenerateCalibration("Calibration table has no usable categories")

    logger.info(f"Loaded calibration for {len(records)} categories")
    return MappingProxyType(records)


def load_calibration_file(path: str | Path, strict: bool = False) -> CalibrationTable:
    """Load a calibration table from a JSON file in the raw table format."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise DegenerateCalibration(f"Cannot read calibration file {path}: {e}")

    if not isinstance(raw, dict):
        raise DegenerateCalibration(f"Calibration file {path} must contain a JSON object")

    return load_calibration_table(raw, strict=strict)


@lru_cache
def get_calibration_table() -> CalibrationTable:
    """Get the process-wide calibration table, loaded once."""
    if settings.calibration_path:
        logger.info(f"Loading calibration from {settings.calibration_path}")
        return load_calibration_file(
            settings.calibration_path, strict=settings.strict_calibration
        )
    return load_calibration_table(
        AMAZON_CATEGORY_CALIBRATION, strict=settings.strict_calibration
    )
