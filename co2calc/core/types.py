# co2calc/core/types.py
# -*- coding: utf-8 -*-

"""
Shared type aliases.

Kept in their own module so they can be imported everywhere without
creating circular dependencies.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union


# ────────────────────────────────────────────────────────────────────────────────
# Path-like
# ────────────────────────────────────────────────────────────────────────────────

StrPath = Union[str, Path]
"""Path representation accepted by the CSV helpers (string or Path)."""


# ────────────────────────────────────────────────────────────────────────────────
# Numeric + JSON-like
# ────────────────────────────────────────────────────────────────────────────────

Number = Union[int, float]
"""Numeric value (int or float)."""

JSONDict = Dict[str, Any]
"""Dictionary ready for json.dumps (what `to_dict()` methods return)."""
