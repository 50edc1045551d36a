from vat_calculator.domain.countries import CountryConfig

# (grouping, decimal) separators per display locale
_SEPARATORS = {
    "id-ID": (".", ","),
    "vi-VN": (".", ","),
    "ms-MY": (",", "."),
    "th-TH": (",", "."),
    "en-PH": (",", "."),
    "en-SG": (",", "."),
}


def format_number(value: float, locale: str) -> str:
    """Two fixed decimals with the locale's grouping and decimal separators."""
    group, decimal = _SEPARATORS.get(locale, (",", "."))
    text = f"{value:,.2f}"
    if (group, decimal) == (",", "."):
        return text
    return text.replace(",", "\0").replace(".", decimal).replace("\0", group)


def format_money(value: float, config: CountryConfig) -> str:
    return f"{config.symbol} {format_number(value, config.locale)}"


def format_percent(value: float) -> str:
    """Percentage as entered: no rounding, whole numbers without '.0'."""
    text = str(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return "0" if text == "-0" else text
