"""Derived sales/revenue metrics and the methodology narrative."""

from dataclasses import dataclass

from salesrank.signals.estimator import DAYS_PER_MONTH, Method, SalesEstimate

MONTHS_PER_YEAR = 12

NARRATIVE_TEMPLATES: dict[Method, str] = {
    Method.INTERPOLATION: (
        "This estimate is interpolated from verified historical sales data for the "
        "{category} category at BSR {rank}, based on direct data points."
    ),
    Method.EXTRAPOLATION: (
        "This estimate uses power law extrapolation calibrated from historical data in the "
        "{category} category, as the BSR is below the typical observed range."
    ),
    Method.POWER_LAW: (
        "This estimate uses a power law regression model calibrated from extensive "
        "historical data in the {category} category."
    ),
}

PRICE_CLAUSE = " Revenue calculations based on a ${price:.2f} price point."


@dataclass
class EstimationOutput:
    """Everything a presentation layer needs to render an estimate."""

    category: str
    rank: int
    price: float | None
    price_provided: bool
    monthly_units: int
    daily_units: int
    method: Method
    monthly_revenue: float
    daily_revenue: float
    annual_revenue: float
    narrative: str


def build_narrative(category: str, rank: int, method: Method, price: float | None = None) -> str:
    """Explain how the estimate was produced."""
    text = NARRATIVE_TEMPLATES[method].format(category=category, rank=f"{rank:,}")
    if price is not None:
        text += PRICE_CLAUSE.format(price=price)
    return text


def compose_output(
    category: str,
    rank: int,
    estimate: SalesEstimate,
    price: float | None = None,
) -> EstimationOutput:
    """Derive daily/annual figures and revenue from an estimate.

    Revenue fields are 0.0 when no price is given; check ``price_provided``
    to tell that apart from a genuine zero.
    """
    monthly_units = estimate.units
    daily_units = round(monthly_units / DAYS_PER_MONTH)

    if price is not None:
        monthly_revenue = monthly_units * price
        daily_revenue = daily_units * price
        annual_revenue = monthly_revenue * MONTHS_PER_YEAR
    else:
        monthly_revenue = daily_revenue = annual_revenue = 0.0

    return EstimationOutput(
        category=category,
        rank=rank,
        price=price,
        price_provided=price is not None,
        monthly_units=monthly_units,
        daily_units=daily_units,
        method=estimate.method,
        monthly_revenue=monthly_revenue,
        daily_revenue=daily_revenue,
        annual_revenue=annual_revenue,
        narrative=build_narrative(category, rank, estimate.method, price),
    )
