# co2calc/core/models.py
# -*- coding: utf-8 -*-

"""
Core domain models (pure dataclasses).

Small, shared value types:
    - Route: one known, undirected city pair with its distance
    - ComparisonEntry: one transport mode in an all-modes comparison
    - SavingsResult: kg and % saved against a baseline emission
    - PriceEstimate / CreditEstimate: carbon credits and their price range
    - DistanceResolution: outcome of the distance autofill
    - TripInput / TripEvaluation: validated request and full result

This module deliberately has:
    - no I/O
    - no logging
    - no emission or rounding logic

It is safe to import from anywhere.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Optional

from co2calc.core.types import JSONDict


# ────────────────────────────────────────────────────────────────────────────────
# Route catalog entries
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Route:
    """
    A known travel distance between two named places.

    Attributes
    ----------
    origin : str
        Place name as stored (e.g. 'São Paulo, SP'). Not normalised.
    destination : str
        Place name as stored.
    distance_km : float
        Distance in kilometers. Must be > 0. Valid in both directions.
    """

    origin: str
    destination: str
    distance_km: float

    def __post_init__(self) -> None:
        km = float(self.distance_km)
        if not (km > 0):
            raise ValueError(
                f"Route {self.origin!r} → {self.destination!r}: distance_km must be > 0 "
                f"(got {self.distance_km!r})."
            )
        object.__setattr__(self, "distance_km", km)


# ────────────────────────────────────────────────────────────────────────────────
# Emission engine outputs
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ComparisonEntry:
    """
    Emission of one transport mode relative to the car baseline.

    Attributes
    ----------
    mode : str
        Transport-mode tag.
    emission : float
        kg CO2 for the compared distance (2 decimals).
    percentage_vs_car : float
        emission / car emission * 100 (2 decimals).
    """

    mode: str
    emission: float
    percentage_vs_car: float


@dataclass(frozen=True)
class SavingsResult:
    """
    Emission saved against a baseline. Negative when the chosen mode emits
    more than the baseline.
    """

    saved_kg: float
    percentage: float


@dataclass(frozen=True)
class PriceEstimate:
    """
    Price range to offset a number of carbon credits (2 decimals each).

    `average` is the mean of the already-rounded `min` and `max`.
    """

    min: float
    max: float
    average: float


@dataclass(frozen=True)
class CreditEstimate:
    """
    Carbon credits needed for an emission (4 decimals) and their price.
    """

    credits: float
    price: PriceEstimate


# ────────────────────────────────────────────────────────────────────────────────
# Application layer
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DistanceResolution:
    """
    Outcome of filling the distance for an origin/destination pair.

    Attributes
    ----------
    distance_km : Optional[float]
        Resolved distance, or None when it still has to be typed in.
    source : str
        One of 'catalog', 'manual', 'not_found', 'empty'.
    message : str
        Helper text shown next to the distance field (pt-BR).
    """

    distance_km: Optional[float]
    source: str
    message: str

    @property
    def found(self) -> bool:
        return self.distance_km is not None


@dataclass(frozen=True)
class TripInput:
    """
    A validated trip request (trimmed names, positive distance, mode set).
    """

    origin: str
    destination: str
    distance_km: float
    mode: str


@dataclass(frozen=True)
class TripEvaluation:
    """
    Everything computed for one trip.

    Attributes
    ----------
    origin, destination : str
        Place names as entered.
    distance_km : float
        Trip distance.
    mode : str
        Selected transport mode.
    emission_kg : float
        Emission of the selected mode.
    baseline_kg : float
        Emission of the baseline (car) for the same distance.
    savings : Optional[SavingsResult]
        Savings vs the baseline; None when the selected mode is the baseline.
    comparison : List[ComparisonEntry]
        All modes, ascending by emission. Empty when the baseline is zero.
    credits : CreditEstimate
        Credits needed to offset `emission_kg` and their price range.
    """

    origin: str
    destination: str
    distance_km: float
    mode: str
    emission_kg: float
    baseline_kg: float
    savings: Optional[SavingsResult]
    comparison: List[ComparisonEntry] = field(default_factory=list)
    credits: CreditEstimate = field(
        default_factory=lambda: CreditEstimate(credits=0.0, price=PriceEstimate(0.0, 0.0, 0.0))
    )

    def to_dict(self) -> JSONDict:
        return asdict(self)
