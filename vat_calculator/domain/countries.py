from dataclasses import dataclass
from types import MappingProxyType
from typing import List

from vat_calculator.config import DEFAULT_COUNTRY


class UnknownCountryError(KeyError):
    """Raised when a country code is not in the registry."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unsupported country code: {self.code!r}"


@dataclass(frozen=True)
class CountryConfig:
    """
    Static VAT settings for one country of service.

    - rate: VAT rate applied to the fee, 0 <= rate < 1
    - base: fraction of the fee that VAT is levied on, 0 < base <= 1
    Everything else is display data.
    """

    code: str
    name: str
    rate: float
    base: float
    symbol: str
    locale: str
    flag: str
    default_amount: float
    default_flat_fee: float

    def __post_init__(self):
        if not 0 <= self.rate < 1:
            raise ValueError(f"VAT rate for {self.code} must be in [0, 1), got {self.rate}")
        if not 0 < self.base <= 1:
            raise ValueError(f"VAT base for {self.code} must be in (0, 1], got {self.base}")

    @property
    def has_vat(self) -> bool:
        return self.rate > 0

    @property
    def has_reduced_base(self) -> bool:
        return self.base < 1

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "rate": self.rate,
            "base": self.base,
            "symbol": self.symbol,
            "locale": self.locale,
            "flag": self.flag,
            "default_amount": self.default_amount,
            "default_flat_fee": self.default_flat_fee,
        }


_COUNTRIES = [
    # Indonesia taxes 11/12 of the fee at 12%
    CountryConfig("ID", "Indonesia", 0.12, 11 / 12, "Rp", "id-ID", "🇮🇩", 160000, 1600),
    CountryConfig("MY", "Malaysia", 0.0, 1, "RM", "ms-MY", "🇲🇾", 47, 0.5),
    CountryConfig("TH", "Thailand", 0.07, 1, "฿", "th-TH", "🇹🇭", 370, 4),
    CountryConfig("VN", "Vietnam", 0.08, 1, "₫", "vi-VN", "🇻🇳", 246000, 2500),
    CountryConfig("PH", "Philippines", 0.12, 1, "₱", "en-PH", "🇵🇭", 560, 6),
    CountryConfig("SG", "Singapore", 0.0, 1, "$", "en-SG", "🇸🇬", 13.5, 0.15),
]

VAT = MappingProxyType({c.code: c for c in _COUNTRIES})


def get_country(code: str) -> CountryConfig:
    key = (code or "").strip().upper()
    try:
        return VAT[key]
    except KeyError:
        raise UnknownCountryError(code) from None


def list_countries() -> List[CountryConfig]:
    return list(VAT.values())


def default_country() -> CountryConfig:
    return get_country(DEFAULT_COUNTRY)
