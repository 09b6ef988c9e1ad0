# tests/conftest.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import importlib.util
import logging
from pathlib import Path
from types import ModuleType

import pytest

from co2calc.core.models import Route
from co2calc.infra.logging import LOG_LEVEL_ENV
from co2calc.routes.catalog import RouteCatalog, default_catalog

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def _restore_root_logger(monkeypatch):
    """init_logging() replaces root handlers; put them back after each test."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def catalog() -> RouteCatalog:
    return default_catalog()


@pytest.fixture
def tiny_catalog() -> RouteCatalog:
    return RouteCatalog([
          Route("Alfa, SP", "Beta, RJ", 10)
        , Route("Beta, RJ", "Alfa, SP", 20)
        , Route("Gama, MG", "Alfa, SP", 35.5)
    ])


def load_script(name: str) -> ModuleType:
    """Import scripts/<name>.py as a module (scripts/ is not a package)."""
    path = ROOT / "scripts" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
