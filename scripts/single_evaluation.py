#!/usr/bin/env python3
# scripts/single_evaluation.py
# -*- coding: utf-8 -*-

"""
Evaluate one trip and print the result.

    python scripts/single_evaluation.py --origin "São Paulo, SP" --destination "Rio de Janeiro, RJ" --mode bus --pretty
    python scripts/single_evaluation.py --origin "Campinas, SP" --destination "Santos, SP" --distance 160 --mode car --format text

Exit codes: 0 on success, 2 when the input is rejected or the route is unknown
and no --distance was given.
"""

from __future__ import annotations

# --- path bootstrap (must be the first lines of the file) ---
from pathlib import Path
import sys
ROOT = Path(__file__).resolve().parents[1]  # repo root (one level above /scripts)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# ------------------------------------------------------------

import argparse
import json
import logging
from typing import List, Optional

from co2calc.app.evaluator import (
      InvalidTripInput
    , evaluate_trip
    , resolve_distance
    , validate_trip_input
)
from co2calc.app.formatting import render_text_report
from co2calc.emissions.modes import list_modes
from co2calc.infra.logging import init_logging
from co2calc.routes.catalog import RouteCatalog, default_catalog

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Estimate the CO2 emission of one trip, compare transport modes and price the carbon credits."
    )
    p.add_argument("--origin", required=True, help="Origin place name (e.g. 'São Paulo, SP').")
    p.add_argument("--destination", required=True, help="Destination place name (e.g. 'Rio de Janeiro, RJ').")
    p.add_argument(
          "--distance"
        , type=float
        , default=None
        , help="Distance in km. If omitted, it is looked up in the route catalog."
    )
    p.add_argument(
          "--mode"
        , required=True
        , help=f"Transport mode: {', '.join(list_modes())} (pt-BR names accepted, e.g. 'ônibus')."
    )
    p.add_argument(
          "--routes-csv"
        , type=Path
        , default=None
        , help="Extra routes CSV (origin,destination,distance_km) appended to the built-in catalog."
    )

    # UX
    p.add_argument("--format", default="json", choices=["json", "text"], help="Output format. Default: json")
    p.add_argument("--pretty", action="store_true", help="Pretty-print JSON.")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=False)

    catalog = default_catalog()
    if args.routes_csv is not None:
        catalog = catalog.merged_with(RouteCatalog.from_csv(args.routes_csv))

    resolution = resolve_distance(
          args.origin
        , args.destination
        , catalog=catalog
        , manual_distance_km=args.distance
    )
    log.info("Distance: %s (%s)", resolution.distance_km, resolution.message)

    if resolution.source == "not_found":
        log.error("%s (--distance)", resolution.message)
        return 2

    try:
        trip = validate_trip_input(
              args.origin
            , args.destination
            , resolution.distance_km
            , args.mode
        )
    except InvalidTripInput as exc:
        log.error("Invalid input: %s", exc)
        return 2

    evaluation = evaluate_trip(trip)

    if args.format == "text":
        print(render_text_report(evaluation))
        return 0

    payload = evaluation.to_dict()
    payload["distance_source"] = resolution.source
    if args.pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
