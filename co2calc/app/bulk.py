# co2calc/app/bulk.py
# -*- coding: utf-8 -*-
"""
Bulk trip evaluation over a pandas DataFrame.

Input columns (case-insensitive, aliases accepted)
--------------------------------------------------
- origin        ('origem')
- destination   ('destiny' / 'destino')
- mode          ('transport' / 'modo')
- distance_km   optional; blank → looked up in the route catalog

Output
------
One row per input row, in the same order, with the input columns plus:

    status, distance_km, distance_source, emission_kg, baseline_kg,
    saved_kg, saved_pct, credits, price_min, price_max, price_avg

`status` is 'ok', 'route_not_found' or 'invalid: <message>'. A mode that is
neither a known tag nor an alias ('carr') is reported as invalid instead of
being evaluated as a zero-emission trip. A bad row never stops the batch.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from co2calc.app.evaluator import InvalidTripInput, evaluate_trip, resolve_distance, validate_trip_input
from co2calc.core.config import get_emission_config
from co2calc.core.types import StrPath
from co2calc.infra.logging import get_logger
from co2calc.routes.catalog import RouteCatalog, default_catalog

_log = get_logger(__name__)


_COLUMN_ALIASES: Dict[str, str] = {
      "origin": "origin"
    , "origem": "origin"
    , "destination": "destination"
    , "destiny": "destination"
    , "destino": "destination"
    , "mode": "mode"
    , "transport": "mode"
    , "modo": "mode"
    , "distance_km": "distance_km"
    , "distancekm": "distance_km"
    , "distancia_km": "distance_km"
}

MSG_UNKNOWN_MODE = "Modo de transporte desconhecido"

_REQUIRED_COLUMNS = ("origin", "destination", "mode")

RESULT_COLUMNS = (
      "status"
    , "distance_km"
    , "distance_source"
    , "emission_kg"
    , "baseline_kg"
    , "saved_kg"
    , "saved_pct"
    , "credits"
    , "price_min"
    , "price_max"
    , "price_avg"
)


def _cell(value: Any) -> Optional[Any]:
    """
    NaN / blank string → None; anything else unchanged.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _normalise_columns(df: pd.DataFrame) -> pd.DataFrame:
    rename = {}
    for col in df.columns:
        canonical = _COLUMN_ALIASES.get(str(col).strip().lower())
        if canonical is not None and canonical not in rename.values():
            rename[col] = canonical
    out = df.rename(columns=rename)

    missing = [c for c in _REQUIRED_COLUMNS if c not in out.columns]
    if missing:
        raise ValueError(f"trips table is missing column(s) {missing}; found {list(df.columns)}")
    if "distance_km" not in out.columns:
        out["distance_km"] = None
    return out


def _evaluate_row(row: Dict[str, Any], catalog: RouteCatalog) -> Dict[str, Any]:
    result: Dict[str, Any] = {c: None for c in RESULT_COLUMNS}

    origin = _cell(row.get("origin"))
    destination = _cell(row.get("destination"))
    mode = _cell(row.get("mode"))
    manual = _cell(row.get("distance_km"))

    origin = None if origin is None else str(origin)
    destination = None if destination is None else str(destination)

    if manual is not None:
        distance: Any = manual
        result["distance_source"] = "manual"
    else:
        resolution = resolve_distance(origin, destination, catalog=catalog)
        result["distance_source"] = resolution.source
        if resolution.source == "not_found":
            result["status"] = "route_not_found"
            return result
        distance = resolution.distance_km

    try:
        trip = validate_trip_input(
              origin
            , destination
            , distance
            , None if mode is None else str(mode)
        )
    except InvalidTripInput as exc:
        result["status"] = f"invalid: {exc}"
        return result

    if trip.mode not in get_emission_config().factors:
        result["status"] = f"invalid: {MSG_UNKNOWN_MODE}: {trip.mode}"
        return result

    ev = evaluate_trip(trip)
    result.update(
          status="ok"
        , distance_km=ev.distance_km
        , emission_kg=ev.emission_kg
        , baseline_kg=ev.baseline_kg
        , saved_kg=None if ev.savings is None else ev.savings.saved_kg
        , saved_pct=None if ev.savings is None else ev.savings.percentage
        , credits=ev.credits.credits
        , price_min=ev.credits.price.min
        , price_max=ev.credits.price.max
        , price_avg=ev.credits.price.average
    )
    return result


def evaluate_trips(
      trips: pd.DataFrame
    , *
    , catalog: Optional[RouteCatalog] = None
) -> pd.DataFrame:
    """
    Evaluate every row of `trips`; see the module docstring for columns.

    Raises
    ------
    ValueError
        If origin / destination / mode columns are missing.
    """
    cat = catalog if catalog is not None else default_catalog()
    # input labels may repeat; results join on a fresh 0..n-1 index
    df = _normalise_columns(trips).reset_index(drop=True)

    rows: List[Dict[str, Any]] = []
    for record in df.to_dict(orient="records"):
        rows.append(_evaluate_row(record, cat))

    results = pd.DataFrame(rows, columns=list(RESULT_COLUMNS), index=df.index)
    stale = [c for c in RESULT_COLUMNS if c in df.columns]
    out = df.drop(columns=stale).join(results)

    counts = out["status"].value_counts().to_dict()
    _log.info("evaluate_trips: %d row(s) → %s", len(out), counts)
    return out


def evaluate_trips_csv(
      input_csv: StrPath
    , output_csv: StrPath
    , *
    , catalog: Optional[RouteCatalog] = None
) -> pd.DataFrame:
    """
    Read trips from `input_csv`, evaluate them, write `output_csv`.
    """
    src = Path(input_csv)
    if not src.is_file():
        raise FileNotFoundError(f"trips CSV not found: {src}")

    trips = pd.read_csv(src)
    out = evaluate_trips(trips, catalog=catalog)

    dst = Path(output_csv)
    dst.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(dst, index=False, encoding="utf-8")
    _log.info("evaluate_trips_csv: wrote %d row(s) → %s", len(out), dst)
    return out


__all__ = ["RESULT_COLUMNS", "evaluate_trips", "evaluate_trips_csv"]
