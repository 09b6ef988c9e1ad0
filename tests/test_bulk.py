# tests/test_bulk.py
# -*- coding: utf-8 -*-

import pandas as pd
import pytest

from co2calc.app.bulk import MSG_UNKNOWN_MODE, RESULT_COLUMNS, evaluate_trips, evaluate_trips_csv


@pytest.fixture
def trips() -> pd.DataFrame:
    return pd.DataFrame(
        {
              "origin": ["São Paulo, SP", "Campinas, SP", "Campinas, SP", "", "São Paulo, SP"]
            , "destination": ["Rio de Janeiro, RJ", "Santos, SP", "Santos, SP", "Santos, SP", "Rio de Janeiro, RJ"]
            , "mode": ["bus", "car", "carro", "car", ""]
            , "distance_km": [None, None, 160, 10, None]
        }
    )


def test_evaluate_trips_statuses(trips):
    out = evaluate_trips(trips)

    assert len(out) == len(trips)
    assert list(out["status"]) == [
          "ok"
        , "route_not_found"
        , "ok"
        , "invalid: Por favor, selecione a cidade de origem"
        , "invalid: Por favor, selecione um modo de transporte"
    ]
    assert list(out["distance_source"]) == ["catalog", "not_found", "manual", "manual", "catalog"]
    for col in RESULT_COLUMNS:
        assert col in out.columns


def test_evaluate_trips_values(trips):
    out = evaluate_trips(trips)

    first = out.iloc[0]
    assert first["distance_km"] == 430
    assert first["emission_kg"] == 38.27
    assert first["baseline_kg"] == 51.6
    assert first["saved_kg"] == 13.33
    assert first["saved_pct"] == 25.83
    assert first["credits"] == 0.0383

    manual = out.iloc[2]
    assert manual["mode"] == "carro"  # input column untouched
    assert manual["emission_kg"] == 19.2
    assert pd.isna(manual["saved_kg"])  # car: no savings


def test_evaluate_trips_repeated_index_labels():
    df = pd.DataFrame(
        {
              "origin": ["São Paulo, SP", "Natal, RN"]
            , "destination": ["Rio de Janeiro, RJ", "Recife, PE"]
            , "mode": ["car", "bus"]
        }
        , index=[0, 0]
    )
    out = evaluate_trips(df)

    assert len(out) == 2
    assert list(out["origin"]) == ["São Paulo, SP", "Natal, RN"]
    assert list(out["distance_km"]) == [430, 299]


def test_evaluate_trips_unknown_mode_is_invalid():
    df = pd.DataFrame({"origin": ["Natal, RN"], "destination": ["Recife, PE"], "mode": ["carr"]})
    out = evaluate_trips(df)

    assert out.loc[0, "status"] == f"invalid: {MSG_UNKNOWN_MODE}: carr"
    assert pd.isna(out.loc[0, "emission_kg"])


def test_evaluate_trips_replaces_stale_result_columns():
    df = pd.DataFrame(
        {
              "origin": ["Natal, RN"]
            , "destination": ["Recife, PE"]
            , "mode": ["car"]
            , "status": ["pending"]
        }
    )
    out = evaluate_trips(df)

    assert list(out.columns).count("status") == 1
    assert out.loc[0, "status"] == "ok"


def test_evaluate_trips_column_aliases():
    df = pd.DataFrame({"Origem": ["Natal, RN"], "Destino": ["Recife, PE"], "Modo": ["Ônibus"]})
    out = evaluate_trips(df)
    assert out.loc[0, "status"] == "ok"
    assert out.loc[0, "distance_km"] == 299


def test_evaluate_trips_missing_columns():
    with pytest.raises(ValueError, match="mode"):
        evaluate_trips(pd.DataFrame({"origin": ["A"], "destination": ["B"]}))


def test_evaluate_trips_csv_roundtrip(tmp_path, trips):
    src = tmp_path / "trips.csv"
    dst = tmp_path / "out" / "results.csv"
    trips.to_csv(src, index=False)

    out = evaluate_trips_csv(src, dst)

    assert dst.is_file()
    written = pd.read_csv(dst)
    assert len(written) == len(out) == len(trips)
    assert list(written["status"]) == list(out["status"])


def test_evaluate_trips_csv_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        evaluate_trips_csv(tmp_path / "nope.csv", tmp_path / "out.csv")
