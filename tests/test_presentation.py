# tests/test_presentation.py

from vat_calculator.domain.countries import get_country
from vat_calculator.engine.fee_engine import compute
from vat_calculator.presentation.breakdown import build_breakdown, render_markdown, render_text
from vat_calculator.presentation.formatting import format_money, format_number, format_percent


def test_format_number_uses_locale_separators():
    assert format_number(154672, "id-ID") == "154.672,00"
    assert format_number(1234567.891, "en-SG") == "1,234,567.89"
    assert format_number(-1234.5, "vi-VN") == "-1.234,50"
    assert format_number(0.798, "th-TH") == "0.80"


def test_unknown_locale_falls_back_to_comma_grouping():
    assert format_number(1000, "xx-XX") == "1,000.00"


def test_format_money_prefixes_symbol():
    assert format_money(45.56, get_country("MY")) == "RM 45.56"


def test_format_percent_trims_zeros():
    assert format_percent(2) == "2"
    assert format_percent(2.5) == "2.5"
    assert format_percent(100) == "100"
    assert format_percent(0) == "0"


def test_format_percent_keeps_entered_precision():
    assert format_percent(2.345) == "2.345"

    lines = build_breakdown(compute(get_country("MY"), 47, 0.5, 2.345))
    assert lines[1].label == "Variable fee (2.345%)"


def test_indonesia_breakdown_shows_tax_base():
    lines = build_breakdown(compute(get_country("ID"), 160000, 1600, 2))

    assert [l.key for l in lines] == ["flat_fee", "variable_fee", "total_fee", "vat_base", "vat", "net_receipt"]
    labels = {l.key: l.label for l in lines}
    assert labels["variable_fee"] == "Variable fee (2%)"
    assert labels["vat_base"] == "VAT tax base (11/12 of total fee)"
    assert labels["vat"] == "VAT @12% (of tax base)"
    assert lines[-1].text == "Rp 154.672,00"


def test_full_base_breakdown_has_no_tax_base_line():
    lines = build_breakdown(compute(get_country("TH"), 370, 4, 2))

    keys = [l.key for l in lines]
    assert "vat_base" not in keys
    vat = next(l for l in lines if l.key == "vat")
    assert vat.label == "VAT @7%"
    assert vat.text == "฿ 0.80"


def test_zero_rate_breakdown_hides_vat():
    lines = build_breakdown(compute(get_country("SG"), 13.5, 0.15, 2))
    assert [l.key for l in lines] == ["flat_fee", "variable_fee", "total_fee", "net_receipt"]


def test_renderers_include_every_line():
    lines = build_breakdown(compute(get_country("PH"), 560, 6, 2))

    text = render_text(lines)
    md = render_markdown(lines)
    for l in lines:
        assert l.label in text
        assert l.text in md
    assert "**You receive**" in md
