# tests/test_ui.py

import pytest

from vat_calculator.ui import app as ui


def _triggers():
    config = ui.demo.get_config_file()
    return {tuple(t) for dep in config["dependencies"] for t in dep["targets"]}


def test_every_input_field_recomputes_on_change():
    trig = _triggers()

    for field in (ui.country_input, ui.amount_input, ui.flat_fee_input, ui.percent_fee_input):
        assert (field._id, "change") in trig
    assert (ui.run_button._id, "click") in trig


def test_on_calculate_uses_current_inputs():
    md = ui.on_calculate("TH", 370, 4, 2)

    assert "VAT @7%" in md
    assert "฿ 357.80" in md


def test_on_calculate_treats_empty_fields_as_zero():
    md = ui.on_calculate("SG", None, None, 2)
    assert "$ 0.00" in md


def test_on_country_change_reseeds_defaults():
    amount, flat_fee, md = ui.on_country_change("MY", 2)

    assert amount["value"] == pytest.approx(47)
    assert flat_fee["value"] == pytest.approx(0.5)
    assert flat_fee["label"] == "Flat Fee (RM)"
    assert "RM 45.56" in md
    assert "VAT" not in md
