from dataclasses import dataclass
from fractions import Fraction
from typing import List

from vat_calculator.engine.fee_engine import CalculationResult
from vat_calculator.presentation.formatting import format_money, format_percent


@dataclass(frozen=True)
class BreakdownLine:
    key: str
    label: str
    amount: float
    text: str

    def to_dict(self) -> dict:
        return {"key": self.key, "label": self.label, "amount": self.amount, "text": self.text}


def _base_ratio(base: float) -> str:
    frac = Fraction(base).limit_denominator(100)
    return f"{frac.numerator}/{frac.denominator}"


def build_breakdown(result: CalculationResult) -> List[BreakdownLine]:
    """
    Display lines for a result, in page order.

    VAT lines only appear when the country charges VAT; the tax base line
    only when VAT is levied on part of the fee.
    """
    cfg = result.config

    def line(key: str, label: str, amount: float) -> BreakdownLine:
        return BreakdownLine(key, label, amount, format_money(amount, cfg))

    lines = [
        line("flat_fee", "Flat fee", result.flat_fee),
        line("variable_fee", f"Variable fee ({format_percent(result.percent_fee)}%)", result.variable_fee),
        line("total_fee", "Total fee", result.total_fee),
    ]

    if cfg.has_vat:
        vat_label = f"VAT @{cfg.rate * 100:.0f}%"
        if cfg.has_reduced_base:
            lines.append(
                line("vat_base", f"VAT tax base ({_base_ratio(cfg.base)} of total fee)", result.vat_base)
            )
            vat_label += " (of tax base)"
        lines.append(line("vat", vat_label, result.vat_amount))

    lines.append(line("net_receipt", "You receive", result.net_receipt))
    return lines


def render_text(lines: List[BreakdownLine]) -> str:
    width = max(len(l.label) for l in lines)
    rows = []
    for l in lines:
        if l.key == "net_receipt":
            rows.append("-" * (width + 2 + len(l.text)))
        rows.append(f"{l.label:<{width}}  {l.text}")
    return "\n".join(rows)


def render_markdown(lines: List[BreakdownLine]) -> str:
    rows = ["| | |", "|---|---:|"]
    for l in lines:
        if l.key == "net_receipt":
            rows.append(f"| **{l.label}** | **{l.text}** |")
        else:
            rows.append(f"| {l.label} | {l.text} |")
    return "\n".join(rows)
