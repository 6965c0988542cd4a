"""Validation of raw user input before estimation."""

from dataclasses import dataclass
import math
from typing import Any

from salesrank.config import settings
from salesrank.errors import InvalidInput

CATEGORY_REQUIRED = "Please select a product category."
RANK_INVALID = "Please enter a valid Best Seller Rank (must be 1 or greater)."
RANK_TOO_HIGH = "BSR value seems unusually high. Please verify your input."
PRICE_INVALID = "Please enter a valid price (must be greater than 0)."


@dataclass(frozen=True)
class EstimationInput:
    """Validated estimation request."""

    category: str
    rank: int
    price: float | None = None

    @property
    def price_provided(self) -> bool:
        return self.price is not None


def _parse_number(value: Any, strip: str = "") -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if strip:
            text = text.lstrip(strip).strip()
        if not text:
            return None
        value = text
    try:
        number = float(value)
    except OverflowError:
        # ints too large for a float
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def parse_rank(value: Any) -> float | None:
    """Parse a BSR that may carry thousands separators ("12,345")."""
    if isinstance(value, str):
        value = value.replace(",", "")
    return _parse_number(value)


def parse_price(value: Any) -> float | None:
    """Parse a price, tolerating a leading "$"."""
    return _parse_number(value, strip="$")


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_input(
    category: str | None,
    rank: Any,
    price: Any = None,
    max_rank: int | None = None,
) -> EstimationInput:
    """Validate raw input, reporting only the first failing rule.

    Raises:
        InvalidInput: with a message suitable for the end user.
    """
    if max_rank is None:
        max_rank = settings.max_rank

    category = category.strip() if isinstance(category, str) else ""
    if not category:
        raise InvalidInput(CATEGORY_REQUIRED, field="category")

    parsed_rank = parse_rank(rank)
    if parsed_rank is None or parsed_rank < 1 or (
        math.isfinite(parsed_rank) and not parsed_rank.is_integer()
    ):
        raise InvalidInput(RANK_INVALID, field="rank")
    if parsed_rank > max_rank:
        raise InvalidInput(RANK_TOO_HIGH, field="rank")

    parsed_price = None
    if not _is_absent(price):
        parsed_price = parse_price(price)
        if parsed_price is None or not math.isfinite(parsed_price) or parsed_price <= 0:
            raise InvalidInput(PRICE_INVALID, field="price")

    return EstimationInput(category=category, rank=int(parsed_rank), price=parsed_price)
