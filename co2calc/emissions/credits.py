# co2calc/emissions/credits.py
# -*- coding: utf-8 -*-
"""
Carbon credits: convert kg CO2 into credits and a price range.

One credit offsets `kg_per_credit` kg (1 t by default). Prices per credit
are static placeholders (BRL) from `CarbonCreditConfig`.

Example
-------
    compute_carbon_credits(1250)  -> 1.25
    estimate_credit_price(1.25)   -> PriceEstimate(min=62.5, max=187.5, average=125.0)

Negative, non-finite or overflowing input returns the zero value with a
warning.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from co2calc.core.config import CarbonCreditConfig, get_carbon_credit_config
from co2calc.core.models import CreditEstimate, PriceEstimate
from co2calc.core.rounding import round2, round4
from co2calc.core.types import Number
from co2calc.infra.logging import get_logger

_log = get_logger(__name__)


def _as_amount(value: Any) -> Optional[float]:
    """Finite, non-negative float or None."""
    if isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount) or amount < 0:
        return None
    return amount


def compute_carbon_credits(
      emission_kg: Number
    , *
    , config: Optional[CarbonCreditConfig] = None
) -> float:
    """
    Credits needed to offset `emission_kg`, 4 decimals.
    """
    cfg = config or get_carbon_credit_config()

    kg = _as_amount(emission_kg)
    if kg is None:
        _log.warning("compute_carbon_credits: invalid emission_kg=%r → 0", emission_kg)
        return 0.0

    credits = round4(kg / cfg.kg_per_credit)
    if not math.isfinite(credits):
        _log.warning("compute_carbon_credits: emission_kg=%r overflows → 0", emission_kg)
        return 0.0
    return credits


def estimate_credit_price(
      credits: Number
    , *
    , config: Optional[CarbonCreditConfig] = None
) -> PriceEstimate:
    """
    Price range for `credits`, 2 decimals each.

    `average` is taken from the rounded min/max, not from the raw product.
    """
    cfg = config or get_carbon_credit_config()

    amount = _as_amount(credits)
    if amount is None:
        _log.warning("estimate_credit_price: invalid credits=%r → 0", credits)
        return PriceEstimate(min=0.0, max=0.0, average=0.0)

    price_min = round2(amount * cfg.price_min_per_credit)
    price_max = round2(amount * cfg.price_max_per_credit)
    average = round2((price_min + price_max) / 2)
    if not math.isfinite(average):
        _log.warning("estimate_credit_price: credits=%r overflows → 0", credits)
        return PriceEstimate(min=0.0, max=0.0, average=0.0)

    return PriceEstimate(min=price_min, max=price_max, average=average)


def estimate_credits(
      emission_kg: Number
    , *
    , config: Optional[CarbonCreditConfig] = None
) -> CreditEstimate:
    """
    Credits for `emission_kg` together with their price range.
    """
    cfg = config or get_carbon_credit_config()
    credits = compute_carbon_credits(emission_kg, config=cfg)
    price = estimate_credit_price(credits, config=cfg)
    _log.debug(
          "estimate_credits: %r kg → %.4f credit(s), %s %.2f–%.2f"
        , emission_kg
        , credits
        , cfg.currency
        , price.min
        , price.max
    )
    return CreditEstimate(credits=credits, price=price)


__all__ = ["compute_carbon_credits", "estimate_credit_price", "estimate_credits"]
