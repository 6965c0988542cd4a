"""Estimate output formatter for human-readable responses."""

import math

from .narrative import EstimationOutput


def format_number(value: float) -> str:
    return f"{value:,}"


def format_currency(value: float) -> str:
    return f"${math.floor(value + 0.5):,}"


class EstimateFormatter:
    """Formats estimates into readable Markdown."""

    def format_estimate(self, output: EstimationOutput) -> str:
        """Format an estimate as a sales & revenue report."""
        lines = []

        lines.append("# 📊 Sales & Revenue Analysis")
        lines.append(f"**Category:** {output.category} | **BSR:** #{output.rank:,}")
        lines.append("")

        # Sales
        lines.append("## 📦 Unit Sales")
        lines.append("| Metric | Value |")
        lines.append("|--------|-------|")
        lines.append(f"| **Estimated Monthly Sales** | {format_number(output.monthly_units)} units/month |")
        lines.append(f"| **Daily Sales** | {format_number(output.daily_units)} units/day |")
        lines.append("")

        # Revenue only makes sense with a price
        if output.price_provided:
            lines.append("## 💰 Revenue")
            lines.append("| Metric | Value |")
            lines.append("|--------|-------|")
            lines.append(f"| **Monthly Revenue** | {format_currency(output.monthly_revenue)} |")
            lines.append(f"| **Daily Revenue** | {format_currency(output.daily_revenue)} |")
            lines.append(f"| **Annual Revenue Projection** | {format_currency(output.annual_revenue)} |")
            lines.append("")

        lines.append("## 🧮 Calculation Method")
        lines.append(output.narrative)
        lines.append("")

        lines.append("---")
        lines.append(f"*Method: {output.method.value}*")

        return "\n".join(lines)

    def format_categories(self, categories: list[str]) -> str:
        """Format the list of supported categories."""
        lines = ["# Supported Categories", ""]
        for category in categories:
            lines.append(f"- {category}")
        lines.append("")
        lines.append(f"*{len(categories)} categories calibrated*")
        return "\n".join(lines)
