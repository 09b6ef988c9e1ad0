# co2calc/core/config.py
# -*- coding: utf-8 -*-

"""
Core configuration models and defaults.

Pure, immutable configuration structures, independent of any I/O. They are
built once at import time and handed to the engine functions as explicit
parameters; nothing here is ever mutated.

Current contents
----------------
- ProjectConfig: locale / country / currency defaults
- EmissionConfig: kg CO2 per km per transport mode + baseline mode
- CarbonCreditConfig: kg per credit and the BRL price range per credit
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


# ────────────────────────────────────────────────────────────────────────────────
# High-level project configuration
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProjectConfig:
    """
    Global project configuration.

    Attributes
    ----------
    default_country : str
        ISO 3166-1 alpha-2 country code of the built-in route catalog.
    default_language : str
        Locale tag used for labels and user-facing messages.
    currency : str
        ISO 4217 code of the carbon-credit prices.
    """

    default_country: str = "BR"
    default_language: str = "pt-BR"
    currency: str = "BRL"


# ────────────────────────────────────────────────────────────────────────────────
# Emission factors
# ────────────────────────────────────────────────────────────────────────────────

# kg CO2 per km (per passenger for plane/boat/bus). Planning-level estimates.
# Order matters: it is the iteration order of the all-modes comparison.
DEFAULT_EMISSION_FACTORS: Mapping[str, float] = MappingProxyType({
      "bicycle": 0.0
    , "car":     0.12
    , "plane":   0.20
    , "boat":    0.15
    , "bus":     0.089
    , "truck":   0.96
})

DEFAULT_BASELINE_MODE = "car"


@dataclass(frozen=True)
class EmissionConfig:
    """
    Emission-factor table used by the emission engine.

    Attributes
    ----------
    factors : Mapping[str, float]
        kg CO2 emitted per km, keyed by transport-mode tag. Read-only view.
    baseline_mode : str
        Mode whose emission is the 100% reference in comparisons.
    """

    factors: Mapping[str, float] = field(default_factory=lambda: DEFAULT_EMISSION_FACTORS)
    baseline_mode: str = DEFAULT_BASELINE_MODE

    def __post_init__(self) -> None:
        # freeze whatever mapping the caller handed in
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))
        if self.baseline_mode not in self.factors:
            raise ValueError(
                f"baseline_mode={self.baseline_mode!r} is not in factors {sorted(self.factors)}"
            )
        for mode, ef in self.factors.items():
            if float(ef) < 0:
                raise ValueError(f"Emission factor for {mode!r} must be >= 0 (got {ef}).")

    @property
    def modes(self) -> Tuple[str, ...]:
        return tuple(self.factors.keys())


# ────────────────────────────────────────────────────────────────────────────────
# Carbon credits
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CarbonCreditConfig:
    """
    Carbon-credit conversion constants.

    Prices are static placeholders for the voluntary market, not quotes.

    Attributes
    ----------
    kg_per_credit : float
        kg CO2 represented by one credit (1 credit = 1 t CO2e).
    price_min_per_credit : float
        Lower bound of the price range per credit.
    price_max_per_credit : float
        Upper bound of the price range per credit.
    currency : str
        Currency of both prices.
    """

    kg_per_credit: float = 1000.0
    price_min_per_credit: float = 50.0
    price_max_per_credit: float = 150.0
    currency: str = "BRL"

    def __post_init__(self) -> None:
        if self.kg_per_credit <= 0:
            raise ValueError("kg_per_credit must be > 0.")
        if self.price_min_per_credit > self.price_max_per_credit:
            raise ValueError("price_min_per_credit must be <= price_max_per_credit.")


# ────────────────────────────────────────────────────────────────────────────────
# Singleton-style instances
# ────────────────────────────────────────────────────────────────────────────────

PROJECT_CONFIG = ProjectConfig()
EMISSION_CONFIG = EmissionConfig()
CARBON_CREDIT_CONFIG = CarbonCreditConfig()


def get_project_config() -> ProjectConfig:
    """
    Return the global project configuration.
    """
    return PROJECT_CONFIG


def get_emission_config() -> EmissionConfig:
    """
    Return the default emission-factor configuration.

    Provided as a function so call sites do not change if the table ever
    becomes loadable from a file.
    """
    return EMISSION_CONFIG


def get_carbon_credit_config() -> CarbonCreditConfig:
    """
    Return the default carbon-credit constants.
    """
    return CARBON_CREDIT_CONFIG
