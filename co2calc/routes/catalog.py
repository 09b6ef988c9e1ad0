# co2calc/routes/catalog.py
# -*- coding: utf-8 -*-
"""
Route catalog
=============

Immutable, undirected table of known road distances between Brazilian
cities, used to autofill the trip distance.

Public API
----------
- RouteCatalog(routes)
    .list_cities() -> tuple of place names, deduplicated and sorted
    .find_distance(origin, destination) -> km or None
    .merged_with(other) -> RouteCatalog
    .from_csv(path) -> RouteCatalog       (pandas)
- default_catalog() -> the built-in catalog
- BUILTIN_ROUTES

Lookup rules
------------
- Both query names are trimmed and lowercased; stored names are compared
  lowercased (storage keeps the original spelling).
- Forward match (origin → destination) is tried over the whole table first,
  then the reverse match. The first hit in table order wins.
- No hit → None. Callers treat that as "ask for the distance manually".

The lookup is a linear scan; at a few dozen routes that is all it needs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from co2calc.core.models import Route
from co2calc.core.types import StrPath
from co2calc.infra.logging import get_logger

_log = get_logger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Built-in routes (road distances, km)
# ────────────────────────────────────────────────────────────────────────────────

BUILTIN_ROUTES: Tuple[Route, ...] = (
    # Sudeste
      Route("São Paulo, SP",       "Rio de Janeiro, RJ", 430)
    , Route("São Paulo, SP",       "Brasília, DF",       1015)
    , Route("Rio de Janeiro, RJ",  "Brasília, DF",       1148)
    , Route("São Paulo, SP",       "Campinas, SP",       95)
    , Route("Rio de Janeiro, RJ",  "Niterói, RJ",        13)
    , Route("Belo Horizonte, MG",  "Ouro Preto, MG",     100)
    , Route("São Paulo, SP",       "Belo Horizonte, MG", 586)
    , Route("Rio de Janeiro, RJ",  "Belo Horizonte, MG", 716)
    , Route("São Paulo, SP",       "Sorocaba, SP",       108)
    , Route("São Paulo, SP",       "Guarulhos, SP",      28)

    # Norte
    , Route("Manaus, AM",          "Rio Branco, AC",     1800)
    , Route("Belém, PA",           "Manaus, AM",         1665)
    , Route("Belém, PA",           "Brasília, DF",       1863)
    , Route("Manaus, AM",          "Brasília, DF",       2187)

    # Nordeste
    , Route("Salvador, BA",        "Brasília, DF",       1268)
    , Route("Recife, PE",          "Salvador, BA",       766)
    , Route("Fortaleza, CE",       "Brasília, DF",       2145)
    , Route("Natal, RN",           "Recife, PE",         299)
    , Route("Maceió, AL",          "Recife, PE",         240)
    , Route("São Luís, MA",        "Brasília, DF",       2125)
    , Route("Teresina, PI",        "Brasília, DF",       1704)

    # Sul
    , Route("Curitiba, PR",        "Brasília, DF",       1110)
    , Route("Rio de Janeiro, RJ",  "Curitiba, PR",       920)
    , Route("São Paulo, SP",       "Curitiba, PR",       408)
    , Route("Porto Alegre, RS",    "Curitiba, PR",       1090)
    , Route("Curitiba, PR",        "Londrina, PR",       380)
    , Route("Brasília, DF",        "Porto Alegre, RS",   2020)
    , Route("Santa Maria, RS",     "Porto Alegre, RS",   290)
    , Route("Florianópolis, SC",   "Porto Alegre, RS",   640)

    # Centro-Oeste
    , Route("Brasília, DF",        "Goiânia, GO",        209)
    , Route("Brasília, DF",        "Cuiabá, MT",         925)
    , Route("Goiânia, GO",         "São Paulo, SP",      917)
    , Route("Campo Grande, MS",    "Brasília, DF",       1315)
    , Route("Cuiabá, MT",          "Goiânia, GO",        1070)

    # Extra regional links
    , Route("Santos, SP",          "São Paulo, SP",      72)
    , Route("Jundiaí, SP",         "São Paulo, SP",      60)
    , Route("Ribeirão Preto, SP",  "São Paulo, SP",      310)
    , Route("Araçatuba, SP",       "São Paulo, SP",      520)
    , Route("Vitória, ES",         "Rio de Janeiro, RJ", 521)
)


# CSV header aliases → canonical column (keys are lowercase).
_COLUMN_ALIASES: Dict[str, str] = {
      "origin": "origin"
    , "origem": "origin"

    , "destination": "destination"
    , "destiny": "destination"
    , "destino": "destination"

    , "distance_km": "distance_km"
    , "distancekm": "distance_km"
    , "distancia_km": "distance_km"
    , "km": "distance_km"
}

_REQUIRED_COLUMNS = ("origin", "destination", "distance_km")


def _normalise_name(name: str) -> str:
    return str(name).strip().lower()


# ────────────────────────────────────────────────────────────────────────────────
# Catalog
# ────────────────────────────────────────────────────────────────────────────────

class RouteCatalog:
    """
    Ordered, read-only collection of `Route` entries.

    Parameters
    ----------
    routes : Iterable[Route]
        Routes in lookup-priority order.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[Route]) -> None:
        self._routes: Tuple[Route, ...] = tuple(routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __repr__(self) -> str:
        return f"RouteCatalog({len(self._routes)} routes)"

    @property
    def routes(self) -> Tuple[Route, ...]:
        return self._routes

    # ── queries ────────────────────────────────────────────────────────────────

    def list_cities(self) -> Tuple[str, ...]:
        """
        Return every place name used as origin or destination, deduplicated
        and sorted.
        """
        cities = set()
        for route in self._routes:
            cities.add(route.origin)
            cities.add(route.destination)
        return tuple(sorted(cities))

    def find_distance(self, origin: str, destination: str) -> Optional[float]:
        """
        Distance in km between two places, in either direction.

        Parameters
        ----------
        origin, destination : str
            Place names; surrounding whitespace and letter case are ignored.

        Returns
        -------
        Optional[float]
            The stored distance, or None when the pair is not in the catalog.
        """
        o = _normalise_name(origin)
        d = _normalise_name(destination)

        for route in self._routes:
            if route.origin.lower() == o and route.destination.lower() == d:
                return route.distance_km

        for route in self._routes:
            if route.origin.lower() == d and route.destination.lower() == o:
                return route.distance_km

        _log.debug("find_distance: no route for %r ↔ %r", origin, destination)
        return None

    # ── builders ───────────────────────────────────────────────────────────────

    def merged_with(self, other: "RouteCatalog") -> "RouteCatalog":
        """
        New catalog with this catalog's routes first, then `other`'s.
        On duplicate pairs the routes of `self` keep priority.
        """
        return RouteCatalog(self._routes + tuple(other))

    @classmethod
    def from_csv(cls, path: StrPath) -> "RouteCatalog":
        """
        Load a catalog from a CSV file.

        CSV expectations
        ----------------
        A header with (case-insensitive, common aliases accepted):
          - 'origin'       (or 'origem')
          - 'destination'  (or 'destiny' / 'destino')
          - 'distance_km'  (or 'distanceKm' / 'distancia_km' / 'km')

        Rows with a blank name or a missing / non-positive distance are
        dropped with a warning.

        Raises
        ------
        FileNotFoundError
            If `path` does not exist.
        ValueError
            If a required column is missing.
        """
        p = Path(path)
        if not p.is_file():
            raise FileNotFoundError(f"routes CSV not found: {p}")

        df_raw = pd.read_csv(p)

        rename = {}
        for col in df_raw.columns:
            canonical = _COLUMN_ALIASES.get(str(col).strip().lower())
            if canonical is not None and canonical not in rename.values():
                rename[col] = canonical
        df = df_raw.rename(columns=rename)

        missing = [c for c in _REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(
                f"routes CSV {p} is missing column(s) {missing}; found {list(df_raw.columns)}"
            )

        df = df[list(_REQUIRED_COLUMNS)].copy()
        df["origin"] = df["origin"].fillna("").astype(str).str.strip()
        df["destination"] = df["destination"].fillna("").astype(str).str.strip()
        df["distance_km"] = pd.to_numeric(df["distance_km"], errors="coerce")

        ok = (df["origin"] != "") & (df["destination"] != "") & (df["distance_km"] > 0)
        dropped = int((~ok).sum())
        if dropped:
            _log.warning(
                  "from_csv: dropped %d row(s) from %s (blank name or distance_km <= 0 / missing)"
                , dropped
                , p
            )

        routes: List[Route] = [
            Route(origin=row.origin, destination=row.destination, distance_km=float(row.distance_km))
            for row in df[ok].itertuples(index=False)
        ]
        _log.info("from_csv: loaded %d route(s) from %s", len(routes), p)
        return cls(routes)


_DEFAULT_CATALOG = RouteCatalog(BUILTIN_ROUTES)


def default_catalog() -> RouteCatalog:
    """
    Return the built-in catalog.
    """
    return _DEFAULT_CATALOG


# ────────────────────────────────────────────────────────────────────────────────
# CLI / smoke test
# ────────────────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    """
    Print the known cities, or look up one pair.

    Examples
    --------
    python -m co2calc.routes.catalog
    python -m co2calc.routes.catalog --origin "São Paulo, SP" --destination "rio de janeiro, rj"
    """
    import argparse
    import json

    from co2calc.infra.logging import init_logging

    parser = argparse.ArgumentParser(
        description="Built-in route catalog: list cities or look up a distance."
    )
    parser.add_argument("--origin", default=None, help="Origin place name (e.g. 'São Paulo, SP').")
    parser.add_argument("--destination", default=None, help="Destination place name.")
    parser.add_argument(
          "--routes-csv"
        , type=Path
        , default=None
        , help="Extra routes CSV (origin,destination,distance_km) appended to the built-in table."
    )
    parser.add_argument(
          "--log-level"
        , default="INFO"
        , choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )

    args = parser.parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=False)

    catalog = default_catalog()
    if args.routes_csv is not None:
        catalog = catalog.merged_with(RouteCatalog.from_csv(args.routes_csv))

    if args.origin is None or args.destination is None:
        cities = catalog.list_cities()
        payload = {"routes": len(catalog), "cities": list(cities)}
    else:
        payload = {
              "origin": args.origin
            , "destination": args.destination
            , "distance_km": catalog.find_distance(args.origin, args.destination)
        }

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
