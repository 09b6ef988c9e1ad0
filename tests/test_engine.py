# tests/test_engine.py
# -*- coding: utf-8 -*-

import logging

import pytest

from co2calc.core.config import EmissionConfig
from co2calc.core.models import ComparisonEntry, SavingsResult
from co2calc.emissions.engine import compute_all_modes, compute_emission, compute_savings


# ─────────────────────────────────────────────────────────────────────────────
# compute_emission
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "distance_km, mode, expected",
    [
        (100, "car", 12),
        (100, "bus", 8.9),
        (100, "plane", 20),
        (100, "boat", 15),
        (100, "truck", 96),
        (430, "bus", 38.27),
        (430, "car", 51.6),
        (0, "car", 0),
    ],
)
def test_compute_emission(distance_km, mode, expected):
    assert compute_emission(distance_km, mode) == expected


@pytest.mark.parametrize("distance_km", [0, 1, 13, 430, 2187.5])
def test_bicycle_never_emits(distance_km):
    assert compute_emission(distance_km, "bicycle") == 0


@pytest.mark.parametrize(
    "distance_km, mode",
    [
        (-5, "car"),
        (float("nan"), "car"),
        (float("inf"), "car"),
        ("far", "car"),
        (None, "car"),
        (100, "rocket"),
        (100, ""),
        (100, None),
    ],
)
def test_compute_emission_fails_open_to_zero(distance_km, mode, caplog):
    with caplog.at_level(logging.WARNING, logger="co2calc.emissions.engine"):
        assert compute_emission(distance_km, mode) == 0
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_compute_emission_uses_given_config():
    cfg = EmissionConfig(factors={"car": 0.2, "bicycle": 0.0})
    assert compute_emission(100, "car", config=cfg) == 20
    # not in this table
    assert compute_emission(100, "bus", config=cfg) == 0


# ─────────────────────────────────────────────────────────────────────────────
# compute_all_modes
# ─────────────────────────────────────────────────────────────────────────────

def test_all_modes_zero_distance_is_empty():
    assert compute_all_modes(0) == []


def test_all_modes_negative_distance_is_empty():
    assert compute_all_modes(-10) == []


def test_all_modes_100km():
    result = compute_all_modes(100)

    assert [e.mode for e in result] == ["bicycle", "bus", "car", "boat", "plane", "truck"]
    assert sorted(e.mode for e in result) == sorted(EmissionConfig().modes)

    emissions = [e.emission for e in result]
    assert emissions == sorted(emissions)

    by_mode = {e.mode: e for e in result}
    assert by_mode["car"] == ComparisonEntry(mode="car", emission=12, percentage_vs_car=100)
    assert by_mode["bus"].percentage_vs_car == 74.17
    assert by_mode["plane"].percentage_vs_car == 166.67
    assert by_mode["truck"].percentage_vs_car == 800
    assert by_mode["bicycle"].percentage_vs_car == 0


def test_all_modes_sort_is_stable():
    cfg = EmissionConfig(factors={"car": 0.1, "tram": 0.1, "walk": 0.05})
    result = compute_all_modes(10, config=cfg)
    assert [e.mode for e in result] == ["walk", "car", "tram"]


# ─────────────────────────────────────────────────────────────────────────────
# compute_savings
# ─────────────────────────────────────────────────────────────────────────────

def test_savings_bus_vs_car():
    assert compute_savings(8.9, 12) == SavingsResult(saved_kg=3.1, percentage=25.83)


def test_savings_can_be_negative():
    result = compute_savings(20, 12)
    assert result.saved_kg == -8
    assert result.percentage == -66.67


def test_savings_percentage_comes_from_rounded_kg():
    # raw saving 0.006 kg would be 60 %; saved_kg is rounded to 0.01 first
    result = compute_savings(0.004, 0.01)
    assert result.saved_kg == 0.01
    assert result.percentage == 100


def test_savings_zero_baseline(caplog):
    with caplog.at_level(logging.WARNING, logger="co2calc.emissions.engine"):
        assert compute_savings(5, 0) == SavingsResult(saved_kg=0, percentage=0)
    assert "baseline emission is 0" in caplog.text


# ─────────────────────────────────────────────────────────────────────────────
# Purity
# ─────────────────────────────────────────────────────────────────────────────

def test_same_input_same_output():
    assert compute_emission(586, "bus") == compute_emission(586, "bus")
    assert compute_all_modes(586) == compute_all_modes(586)
    assert compute_savings(52.15, 70.32) == compute_savings(52.15, 70.32)


# ─────────────────────────────────────────────────────────────────────────────
# non-finite and overflowing input
# ─────────────────────────────────────────────────────────────────────────────

def test_compute_emission_overflow_is_zero(caplog):
    with caplog.at_level(logging.WARNING, logger="co2calc.emissions.engine"):
        assert compute_emission(1e307, "truck") == 0
    assert "overflows" in caplog.text


def test_all_modes_with_overflowing_mode():
    # truck and plane overflow at this distance, car does not
    entries = {e.mode: e for e in compute_all_modes(1e307)}
    assert entries["truck"].emission == 0
    assert entries["plane"].emission == 0
    assert entries["car"].percentage_vs_car == 100


@pytest.mark.parametrize(
    "emission, baseline",
    [
        (float("nan"), 12),
        (float("inf"), 12),
        (8.9, float("nan")),
        (8.9, float("-inf")),
        ("lots", 12),
        (1e308, -1e308),
    ],
)
def test_savings_fails_open_on_non_finite(emission, baseline, caplog):
    with caplog.at_level(logging.WARNING, logger="co2calc.emissions.engine"):
        assert compute_savings(emission, baseline) == SavingsResult(saved_kg=0.0, percentage=0.0)
    assert caplog.records
