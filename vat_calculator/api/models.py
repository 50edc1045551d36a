from pydantic import BaseModel
from typing import Optional, List


class CalculateRequest(BaseModel):
    country: Optional[str] = None
    amount: Optional[float] = None
    flat_fee: Optional[float] = None
    percent_fee: Optional[float] = None


class CountryItem(BaseModel):
    code: str
    name: str
    rate: float
    base: float
    symbol: str
    locale: str
    flag: str
    default_amount: float
    default_flat_fee: float


class BreakdownItem(BaseModel):
    key: str
    label: str
    amount: float
    text: str


class CalculateResponse(BaseModel):
    country: str
    symbol: str
    amount: float
    flat_fee: float
    variable_fee: float
    total_fee: float
    vat_base: float
    vat_amount: float
    net_receipt: float
    percent_fee: float
    lines: List[BreakdownItem]


class CountriesResponse(BaseModel):
    items: List[CountryItem]
