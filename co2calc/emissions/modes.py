# co2calc/emissions/modes.py
# -*- coding: utf-8 -*-
"""
Transport modes: display metadata and free-text normalisation.

The numeric emission factors live in `co2calc.core.config`; this module only
knows how a mode is presented (pt-BR label, emoji, colour) and how loosely
typed input ("Ônibus", "Bike", " CARRO ") maps to a canonical tag.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from co2calc.core.config import EmissionConfig, get_emission_config
from co2calc.infra.logging import get_logger

_log = get_logger(__name__)


@dataclass(frozen=True)
class TransportModeInfo:
    key: str
    label: str
    emoji: str
    color: str


TRANSPORT_MODES: Dict[str, TransportModeInfo] = {
      "bicycle": TransportModeInfo(key="bicycle", label="Bicicleta", emoji="🚲", color="#3b82f6")
    , "car":     TransportModeInfo(key="car",     label="Carro",     emoji="🚗", color="#ef4444")
    , "bus":     TransportModeInfo(key="bus",     label="Ônibus",    emoji="🚌", color="#f59e0b")
    , "truck":   TransportModeInfo(key="truck",   label="Caminhão",  emoji="🚚", color="#8b5cf6")
    , "plane":   TransportModeInfo(key="plane",   label="Avião",     emoji="✈️", color="#0284c7")
    , "boat":    TransportModeInfo(key="boat",    label="Barco",     emoji="🚢", color="#0ea5a4")
}


# Aliases → canonical keys (lowercase, accents stripped).
_MODE_ALIASES: Dict[str, str] = {
      "bicycle": "bicycle"
    , "bicicleta": "bicycle"
    , "bike": "bicycle"

    , "car": "car"
    , "carro": "car"
    , "automovel": "car"

    , "plane": "plane"
    , "airplane": "plane"
    , "aviao": "plane"

    , "boat": "boat"
    , "ship": "boat"
    , "barco": "boat"
    , "navio": "boat"

    , "bus": "bus"
    , "onibus": "bus"

    , "truck": "truck"
    , "caminhao": "truck"
}


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalise_mode(text: Optional[str]) -> Optional[str]:
    """
    Map free-text mode input to a canonical tag.

    Lowercases, trims and strips accents, then looks the result up in the
    alias table. Returns None for blank or unknown input.
    """
    if text is None:
        return None
    key = _strip_accents(str(text).strip().lower())
    if not key:
        return None
    canonical = _MODE_ALIASES.get(key)
    if canonical is None:
        _log.debug("normalise_mode: unknown mode %r", text)
    return canonical


def list_modes(config: Optional[EmissionConfig] = None) -> Tuple[str, ...]:
    """
    Mode tags in emission-table order.
    """
    cfg = config or get_emission_config()
    return cfg.modes


def get_mode_info(mode: str) -> Optional[TransportModeInfo]:
    info = TRANSPORT_MODES.get(mode)
    if info is None:
        _log.debug("get_mode_info: no display metadata for mode %r", mode)
    return info


# ────────────────────────────────────────────────────────────────────────────────
# CLI / smoke test
# ────────────────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    """
    Print the mode table (label, emoji, colour, kg CO2/km).

    python -m co2calc.emissions.modes
    """
    import argparse
    import json

    from co2calc.infra.logging import init_logging

    parser = argparse.ArgumentParser(description="Transport modes and their emission factors.")
    parser.add_argument(
          "--log-level"
        , default="INFO"
        , choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    args = parser.parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=False)

    cfg = get_emission_config()
    rows = []
    for mode in list_modes(cfg):
        info = get_mode_info(mode)
        rows.append({
              "mode": mode
            , "label": info.label if info else mode
            , "emoji": info.emoji if info else ""
            , "color": info.color if info else None
            , "kg_co2_per_km": cfg.factors[mode]
            , "baseline": mode == cfg.baseline_mode
        })

    print(json.dumps(rows, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
