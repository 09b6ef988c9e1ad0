# co2calc/app/evaluator.py
# -*- coding: utf-8 -*-

"""
Trip evaluator: the full origin/destination/mode → results pipeline.

Steps
-----
1. resolve_distance(): autofill the distance from the route catalog, or take
   the manual value, and produce the helper message for the distance field.
2. validate_trip_input(): reject incomplete requests (InvalidTripInput).
3. evaluate_trip(): selected-mode emission, car baseline, savings, all-modes
   comparison, carbon credits and price range.

The core (catalog + emission engine) never raises on bad values; this
module is where incomplete user input is turned away.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from co2calc.core.config import (
      CarbonCreditConfig
    , EmissionConfig
    , get_carbon_credit_config
    , get_emission_config
)
from co2calc.core.models import DistanceResolution, TripEvaluation, TripInput
from co2calc.emissions.credits import estimate_credits
from co2calc.emissions.engine import compute_all_modes, compute_emission, compute_savings
from co2calc.emissions.modes import normalise_mode
from co2calc.infra.logging import get_logger
from co2calc.routes.catalog import RouteCatalog, default_catalog

_log = get_logger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Errors / messages
# ────────────────────────────────────────────────────────────────────────────────

class InvalidTripInput(ValueError):
    """Raised when a trip request is incomplete (missing field, distance <= 0)."""
    ...


MSG_MISSING_ORIGIN = "Por favor, selecione a cidade de origem"
MSG_MISSING_DESTINATION = "Por favor, selecione a cidade de destino"
MSG_MISSING_DISTANCE = "Por favor, insira a distância em quilômetros"
MSG_NON_POSITIVE_DISTANCE = "A distância deve ser maior que zero"
MSG_MISSING_MODE = "Por favor, selecione um modo de transporte"

HELP_DEFAULT = "A distância será preenchida automaticamente"
HELP_FOUND = "✓ Distância preenchida automaticamente"
HELP_NOT_FOUND = "Rota não encontrada. Insira a distância manualmente marcando a caixa abaixo."
HELP_MANUAL = "Você está editando a distância manualmente"


# ────────────────────────────────────────────────────────────────────────────────
# Distance autofill
# ────────────────────────────────────────────────────────────────────────────────

def resolve_distance(
      origin: Optional[str]
    , destination: Optional[str]
    , *
    , catalog: Optional[RouteCatalog] = None
    , manual_distance_km: Optional[float] = None
) -> DistanceResolution:
    """
    Decide which distance to use for an origin/destination pair.

    - Either name blank            → source='empty', no distance.
    - `manual_distance_km` given   → source='manual', that distance.
    - Pair in the catalog          → source='catalog', catalog distance.
    - Otherwise                    → source='not_found', no distance.
    """
    o = (origin or "").strip()
    d = (destination or "").strip()

    if not o or not d:
        return DistanceResolution(distance_km=None, source="empty", message=HELP_DEFAULT)

    if manual_distance_km is not None:
        return DistanceResolution(
              distance_km=float(manual_distance_km)
            , source="manual"
            , message=HELP_MANUAL
        )

    cat = catalog if catalog is not None else default_catalog()
    km = cat.find_distance(o, d)
    if km is None:
        _log.info("resolve_distance: route %r → %r not in catalog", o, d)
        return DistanceResolution(distance_km=None, source="not_found", message=HELP_NOT_FOUND)

    return DistanceResolution(distance_km=km, source="catalog", message=HELP_FOUND)


# ────────────────────────────────────────────────────────────────────────────────
# Validation
# ────────────────────────────────────────────────────────────────────────────────

def _parse_distance(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        km = float(str(value).strip().replace(",", ".")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(km):
        return None
    return km


def validate_trip_input(
      origin: Optional[str]
    , destination: Optional[str]
    , distance_km: Any
    , mode: Optional[str]
) -> TripInput:
    """
    Check a raw trip request and return it as a TripInput.

    Checks run in order: origin, destination, distance present and numeric,
    distance > 0, mode present. Known aliases of a mode ('Ônibus', 'carro')
    are mapped to their tag; anything else is passed through untouched.

    Raises
    ------
    InvalidTripInput
        With the pt-BR message of the first failed check.
    """
    o = (origin or "").strip()
    if not o:
        raise InvalidTripInput(MSG_MISSING_ORIGIN)

    d = (destination or "").strip()
    if not d:
        raise InvalidTripInput(MSG_MISSING_DESTINATION)

    km = _parse_distance(distance_km)
    if km is None:
        raise InvalidTripInput(MSG_MISSING_DISTANCE)
    if km <= 0:
        raise InvalidTripInput(MSG_NON_POSITIVE_DISTANCE)

    raw_mode = (mode or "").strip()
    if not raw_mode:
        raise InvalidTripInput(MSG_MISSING_MODE)

    return TripInput(
          origin=o
        , destination=d
        , distance_km=km
        , mode=normalise_mode(raw_mode) or raw_mode
    )


# ────────────────────────────────────────────────────────────────────────────────
# Evaluation
# ────────────────────────────────────────────────────────────────────────────────

def evaluate_trip(
      trip: TripInput
    , *
    , emission_config: Optional[EmissionConfig] = None
    , credit_config: Optional[CarbonCreditConfig] = None
) -> TripEvaluation:
    """
    Run every calculation for a validated trip.

    Savings are only reported when the selected mode is not the baseline.
    """
    ecfg = emission_config or get_emission_config()
    ccfg = credit_config or get_carbon_credit_config()

    emission = compute_emission(trip.distance_km, trip.mode, config=ecfg)
    baseline = compute_emission(trip.distance_km, ecfg.baseline_mode, config=ecfg)

    savings = None
    if trip.mode != ecfg.baseline_mode:
        savings = compute_savings(emission, baseline)

    comparison = compute_all_modes(trip.distance_km, config=ecfg)
    credits = estimate_credits(emission, config=ccfg)

    _log.info(
          "evaluate_trip: %s → %s | %.2f km by %s → %.2f kg CO2 (baseline %.2f kg) | %.4f credit(s)"
        , trip.origin
        , trip.destination
        , trip.distance_km
        , trip.mode
        , emission
        , baseline
        , credits.credits
    )

    return TripEvaluation(
          origin=trip.origin
        , destination=trip.destination
        , distance_km=trip.distance_km
        , mode=trip.mode
        , emission_kg=emission
        , baseline_kg=baseline
        , savings=savings
        , comparison=comparison
        , credits=credits
    )


__all__ = [
      "InvalidTripInput"
    , "resolve_distance"
    , "validate_trip_input"
    , "evaluate_trip"
]
