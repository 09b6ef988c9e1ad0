# tests/test_formatting.py
# -*- coding: utf-8 -*-

import pytest

from co2calc.app.evaluator import evaluate_trip
from co2calc.app.formatting import (
      BAR_GREEN
    , BAR_ORANGE
    , BAR_RED
    , BAR_YELLOW
    , comparison_bar_color
    , comparison_bar_width
    , format_currency
    , format_number
    , render_text_report
)
from co2calc.core.models import TripInput


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (1234.567, 2, "1.234,57"),
        (10000, 0, "10.000"),
        (0.0383, 4, "0,0383"),
        (74.1667, 1, "74,2"),
        (-1234.5, 2, "-1.234,50"),
        (12, 2, "12,00"),
    ],
)
def test_format_number(value, decimals, expected):
    assert format_number(value, decimals) == expected


@pytest.mark.parametrize("value", ["12", None, True])
def test_format_number_non_numeric(value):
    assert format_number(value, 2) == "0"


def test_format_currency():
    assert format_currency(100) == "R$ 100,00"
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_currency(-5) == "-R$ 5,00"
    assert format_currency("100") == "R$ 0,00"


@pytest.mark.parametrize(
    "percentage, color",
    [
        (0, BAR_GREEN),
        (25, BAR_GREEN),
        (25.01, BAR_YELLOW),
        (74.17, BAR_YELLOW),
        (75, BAR_YELLOW),
        (100, BAR_ORANGE),
        (166.67, BAR_RED),
    ],
)
def test_comparison_bar_color(percentage, color):
    assert comparison_bar_color(percentage) == color


def test_comparison_bar_width():
    assert comparison_bar_width(48, 96) == 50
    assert comparison_bar_width(0, 0) == 0


def test_text_report_plane():
    ev = evaluate_trip(
        TripInput(origin="São Paulo, SP", destination="Rio de Janeiro, RJ", distance_km=430, mode="plane")
    )
    text = render_text_report(ev)

    assert "São Paulo, SP → Rio de Janeiro, RJ" in text
    assert "430,00 km" in text
    assert "86,00 kg" in text
    assert "✈️ Avião" in text
    assert "Economia vs Carro" in text
    assert "-34,40 kg" in text
    assert "[Selecionado]" in text
    assert "1 crédito = 1.000 kg CO2" in text
    assert "R$ 8,60" in text
    assert "R$ 4,30 - R$ 12,90" in text


def test_text_report_car_has_no_savings():
    ev = evaluate_trip(TripInput(origin="A", destination="B", distance_km=100, mode="car"))
    assert "Economia vs Carro" not in render_text_report(ev)
