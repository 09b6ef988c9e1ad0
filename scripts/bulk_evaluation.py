#!/usr/bin/env python3
# scripts/bulk_evaluation.py
# -*- coding: utf-8 -*-

"""
Bulk runner: evaluate every trip of a CSV and write the results to another CSV.

Input columns: origin, destination, mode[, distance_km]
(see co2calc/app/bulk.py for aliases and output columns).

    python scripts/bulk_evaluation.py --input data/trips.csv --output data/trips_results.csv
"""

from __future__ import annotations

# ───────────────────── path bootstrap (must be first) ─────────────────────
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]  # repo root (one level above /scripts)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# ──────────────────────────────────────────────────────────────────────────

import argparse
import logging
from typing import List, Optional

from co2calc.app.bulk import evaluate_trips_csv
from co2calc.infra.logging import get_current_log_path, init_logging, log_banner
from co2calc.routes.catalog import RouteCatalog, default_catalog


log = logging.getLogger(__name__)


# ───────────────────────────────── parser / CLI ────────────────────────────
def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser for the bulk evaluation.
    """
    parser = argparse.ArgumentParser(
        description=(
            "Evaluate many trips from a CSV (origin,destination,mode[,distance_km]).\n"
            "Rows that fail validation or miss the route catalog are kept with a status."
        )
    )

    parser.add_argument(
        "--input"
        , type=Path
        , required=True
        , help="Trips CSV."
    )

    parser.add_argument(
        "--output"
        , type=Path
        , required=True
        , help="Where to write the results CSV."
    )

    parser.add_argument(
        "--routes-csv"
        , type=Path
        , default=None
        , help="Extra routes CSV appended to the built-in catalog."
    )

    parser.add_argument(
        "--write-log"
        , action="store_true"
        , help="Also write a per-run log file under logs/."
    )

    parser.add_argument(
        "--log-level"
        , default="INFO"
        , choices=["DEBUG", "INFO", "WARNING", "ERROR"]
        , help="Logging level."
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=args.write_log)
    log_banner(log, "co2calc: bulk trip evaluation")
    if args.write_log:
        log.info("Log file: %s", get_current_log_path())

    catalog = default_catalog()
    if args.routes_csv is not None:
        catalog = catalog.merged_with(RouteCatalog.from_csv(args.routes_csv))

    try:
        out = evaluate_trips_csv(args.input, args.output, catalog=catalog)
    except (FileNotFoundError, ValueError) as exc:
        log.error("Bulk evaluation aborted: %s", exc)
        return 2

    ok = int((out["status"] == "ok").sum())
    log.info("Done: %d/%d trip(s) evaluated → %s", ok, len(out), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
