# co2calc/emissions/engine.py
# -*- coding: utf-8 -*-
"""
Emission engine
===============

Pure functions turning a distance into kg CO2 per transport mode.

Public API
----------
- compute_emission(distance_km, mode, *, config=None) -> float
- compute_all_modes(distance_km, *, config=None) -> List[ComparisonEntry]
- compute_savings(emission, baseline_emission) -> SavingsResult

Invalid input never raises: the function logs a warning and returns the
zero value of its result type (0.0, [] or SavingsResult(0, 0)). Callers
reject bad form input before getting here.

Rounding
--------
Emissions and percentages are rounded to 2 decimals, ties away from zero
(see `co2calc.core.rounding`). The savings percentage is computed from the
already-rounded `saved_kg`:

    saved_kg   = round2(baseline - emission)
    percentage = round_half_away(saved_kg / baseline * 10000) / 100

Example (100 km)
----------------
    bicycle   0.00 kg     0.00 %
    bus       8.90 kg    74.17 %
    car      12.00 kg   100.00 %
    boat     15.00 kg   125.00 %
    plane    20.00 kg   166.67 %
    truck    96.00 kg   800.00 %
"""

from __future__ import annotations

import math
from typing import Any, List, Optional

from co2calc.core.config import EmissionConfig, get_emission_config
from co2calc.core.models import ComparisonEntry, SavingsResult
from co2calc.core.rounding import round2, round_half_away
from co2calc.core.types import Number
from co2calc.infra.logging import get_logger

_log = get_logger(__name__)


def _as_number(value: Any) -> Optional[float]:
    """
    Return `value` as a finite float, or None.
    """
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_distance(distance_km: Any) -> Optional[float]:
    km = _as_number(distance_km)
    if km is None or km < 0:
        return None
    return km


def compute_emission(
      distance_km: Number
    , mode: str
    , *
    , config: Optional[EmissionConfig] = None
) -> float:
    """
    kg CO2 emitted travelling `distance_km` by `mode`, 2 decimals.

    Returns 0.0 (with a warning) for a negative / non-finite distance or an
    unknown mode.
    """
    cfg = config or get_emission_config()

    km = _as_distance(distance_km)
    if km is None or not mode:
        _log.warning(
              "compute_emission: invalid input distance_km=%r mode=%r → 0"
            , distance_km
            , mode
        )
        return 0.0

    ef = cfg.factors.get(mode)
    if ef is None:
        _log.warning(
              "compute_emission: unknown transport mode %r (known: %s) → 0"
            , mode
            , ", ".join(cfg.modes)
        )
        return 0.0

    emission = round2(km * ef)
    if not math.isfinite(emission):
        _log.warning("compute_emission: %r km by %s overflows → 0", distance_km, mode)
        return 0.0

    _log.debug("compute_emission: %.3f km × %.4f kg/km (%s) → %.2f kg", km, ef, mode, emission)
    return emission


def compute_all_modes(
      distance_km: Number
    , *
    , config: Optional[EmissionConfig] = None
) -> List[ComparisonEntry]:
    """
    Emission of every configured mode for the same distance, ascending.

    Each entry carries its percentage of the baseline (car) emission. When
    the baseline emission is 0 (distance 0) the result is an empty list.
    """
    cfg = config or get_emission_config()

    baseline = compute_emission(distance_km, cfg.baseline_mode, config=cfg)
    if baseline == 0:
        _log.debug("compute_all_modes: baseline emission is 0 for distance_km=%r → []", distance_km)
        return []

    results: List[ComparisonEntry] = []
    for mode in cfg.modes:
        emission = compute_emission(distance_km, mode, config=cfg)
        share = round2(emission / baseline * 100)
        if not math.isfinite(share):
            _log.warning("compute_all_modes: %s share of baseline overflows → 0", mode)
            share = 0.0
        results.append(
            ComparisonEntry(
                  mode=mode
                , emission=emission
                , percentage_vs_car=share
            )
        )

    # sorted() is stable: equal emissions keep table order
    return sorted(results, key=lambda entry: entry.emission)


def compute_savings(
      emission: Number
    , baseline_emission: Number
) -> SavingsResult:
    """
    kg and percentage saved by `emission` against `baseline_emission`.

    Negative values mean the chosen mode emits more than the baseline and
    are returned as they are.
    """
    e = _as_number(emission)
    b = _as_number(baseline_emission)
    if e is None or b is None:
        _log.warning(
              "compute_savings: invalid input emission=%r baseline=%r → savings 0"
            , emission
            , baseline_emission
        )
        return SavingsResult(saved_kg=0.0, percentage=0.0)

    if b == 0:
        _log.warning("compute_savings: baseline emission is 0 → savings 0")
        return SavingsResult(saved_kg=0.0, percentage=0.0)

    saved_kg = round2(b - e)
    percentage = round_half_away(saved_kg / b * 10000) / 100
    if not (math.isfinite(saved_kg) and math.isfinite(percentage)):
        _log.warning("compute_savings: overflow for emission=%r baseline=%r → savings 0", emission, baseline_emission)
        return SavingsResult(saved_kg=0.0, percentage=0.0)

    return SavingsResult(saved_kg=saved_kg, percentage=percentage)


__all__ = ["compute_emission", "compute_all_modes", "compute_savings"]
