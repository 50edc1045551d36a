import logging
from typing import Any, Dict, Optional

from vat_calculator.config import DEFAULT_PERCENT_FEE
from vat_calculator.domain.countries import CountryConfig, default_country, get_country
from vat_calculator.engine.fee_engine import CalculationResult, clamp_percent, compute
from vat_calculator.presentation.breakdown import build_breakdown
from vat_calculator.tools.input_parser import parse_number

logger = logging.getLogger(__name__)


class CalculatorAgent:
    """
    State of one calculator form.

    Every mutation re-runs the engine straight away, so `result` always
    matches the current inputs.
    """

    def __init__(self, country: Optional[str] = None, percent_fee: float = DEFAULT_PERCENT_FEE):
        self.country: CountryConfig = get_country(country) if country else default_country()
        self.amount: float = float(self.country.default_amount)
        self.flat_fee: float = float(self.country.default_flat_fee)
        self.percent_fee: float = clamp_percent(percent_fee)
        self.result: CalculationResult = self.calculate()

    # -------------------------
    # Mutations
    # -------------------------
    def select_country(self, code: str) -> CalculationResult:
        """Switch country and reseed amount and flat fee from its defaults."""
        self.country = get_country(code)
        self.amount = float(self.country.default_amount)
        self.flat_fee = float(self.country.default_flat_fee)
        logger.info("Country set to %s", self.country.code)
        return self.calculate()

    def set_amount(self, raw: Any) -> CalculationResult:
        self.amount = parse_number(raw)
        return self.calculate()

    def set_flat_fee(self, raw: Any) -> CalculationResult:
        self.flat_fee = parse_number(raw)
        return self.calculate()

    def set_percent_fee(self, raw: Any) -> CalculationResult:
        self.percent_fee = clamp_percent(parse_number(raw))
        return self.calculate()

    def calculate(self) -> CalculationResult:
        self.result = compute(self.country, self.amount, self.flat_fee, self.percent_fee)
        return self.result

    # -------------------------
    # One-shot
    # -------------------------
    @staticmethod
    def handle(
        country: str,
        amount: Any = None,
        flat_fee: Any = None,
        percent_fee: Any = None,
    ) -> Dict[str, Any]:
        """
        Stateless calculation for API/CLI callers.

        Missing amount or flat fee fall back to the country's defaults,
        a missing percent fee to the configured default.
        """
        cfg = get_country(country)
        amt = cfg.default_amount if amount is None else parse_number(amount)
        flat = cfg.default_flat_fee if flat_fee is None else parse_number(flat_fee)
        pct = DEFAULT_PERCENT_FEE if percent_fee is None else parse_number(percent_fee)

        result = compute(cfg, float(amt), float(flat), pct)
        logger.info("Calculated %s: %s", cfg.code, result.to_dict())

        out = result.to_dict()
        out["amount"] = float(amt)
        out["symbol"] = cfg.symbol
        out["lines"] = [l.to_dict() for l in build_breakdown(result)]
        return out
