from dataclasses import dataclass
from typing import Any, Dict

from vat_calculator.domain.countries import CountryConfig


@dataclass(frozen=True)
class CalculationResult:
    flat_fee: float
    variable_fee: float
    total_fee: float
    vat_base: float
    vat_amount: float
    net_receipt: float
    percent_fee: float  # after clamping
    config: CountryConfig

    def to_dict(self) -> Dict[str, Any]:
        return {
            "country": self.config.code,
            "flat_fee": self.flat_fee,
            "variable_fee": self.variable_fee,
            "total_fee": self.total_fee,
            "vat_base": self.vat_base,
            "vat_amount": self.vat_amount,
            "net_receipt": self.net_receipt,
            "percent_fee": self.percent_fee,
        }


def clamp_percent(percent_fee: float) -> float:
    """Clamp a percentage fee into [0, 100]."""
    return min(max(float(percent_fee), 0.0), 100.0)


def compute(config: CountryConfig, amount: float, flat_fee: float, percent_fee: float) -> CalculationResult:
    """
    Net payout after fees and VAT on the fee.

    variable fee = amount * percent / 100
    total fee    = flat fee + variable fee
    VAT          = total fee * base * rate
    net receipt  = amount - total fee - VAT

    No rounding and no validation: amount and flat fee go through as given,
    only the percentage is clamped.
    """
    percent = clamp_percent(percent_fee)

    variable_fee = amount * (percent / 100)
    total_fee = flat_fee + variable_fee
    vat_base = total_fee * config.base
    vat_amount = vat_base * config.rate
    net_receipt = amount - total_fee - vat_amount

    return CalculationResult(
        flat_fee=flat_fee,
        variable_fee=variable_fee,
        total_fee=total_fee,
        vat_base=vat_base,
        vat_amount=vat_amount,
        net_receipt=net_receipt,
        percent_fee=percent,
        config=config,
    )
