# co2calc/emissions/__init__.py
# -*- coding: utf-8 -*-

# ── emission engine ─────────────────────────────────────────────────────────────
from .engine import (
      compute_emission
    , compute_all_modes
    , compute_savings
)

# ── carbon credits ──────────────────────────────────────────────────────────────
from .credits import (
      compute_carbon_credits
    , estimate_credit_price
    , estimate_credits
)

# ── mode metadata ───────────────────────────────────────────────────────────────
from .modes import (
      TRANSPORT_MODES
    , TransportModeInfo
    , get_mode_info
    , list_modes
    , normalise_mode
)

__all__ = [
    # engine
      "compute_emission", "compute_all_modes", "compute_savings",
    # credits
      "compute_carbon_credits", "estimate_credit_price", "estimate_credits",
    # modes
      "TRANSPORT_MODES", "TransportModeInfo", "get_mode_info", "list_modes", "normalise_mode",
]
