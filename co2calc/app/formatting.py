# co2calc/app/formatting.py
# -*- coding: utf-8 -*-
"""
pt-BR presentation helpers and the plain-text trip report.

    format_number(1234.567, 2) -> '1.234,57'
    format_currency(1234.5)    -> 'R$ 1.234,50'

Comparison bars are coloured by the percentage of the car emission:

    ≤ 25 %    green   #10b981
    > 25 %    yellow  #fbbf24
    > 75 %    orange  #f59e0b
    > 100 %   red     #ef4444
"""

from __future__ import annotations

from typing import Any, List

from co2calc.core.config import get_carbon_credit_config
from co2calc.core.models import TripEvaluation
from co2calc.core.rounding import round_to
from co2calc.emissions.modes import get_mode_info

BAR_GREEN = "#10b981"
BAR_YELLOW = "#fbbf24"
BAR_ORANGE = "#f59e0b"
BAR_RED = "#ef4444"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: Any, decimals: int = 2) -> str:
    """
    Fixed decimals with pt-BR separators ('.' thousands, ',' decimals).
    Non-numeric input gives '0'.
    """
    if not _is_number(value):
        return "0"
    # round_to keeps ties away from zero, format spec then only pads
    text = f"{round_to(value, decimals):,.{decimals}f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: Any) -> str:
    """
    BRL amount, 2 decimals ('R$ 1.234,56', '-R$ 5,00').
    Non-numeric input gives 'R$ 0,00'.
    """
    if not _is_number(value):
        return "R$ 0,00"
    amount = format_number(abs(value), 2)
    sign = "-" if round_to(value, 2) < 0 else ""
    return f"{sign}R$ {amount}"


def comparison_bar_color(percentage_vs_car: float) -> str:
    if percentage_vs_car > 100:
        return BAR_RED
    if percentage_vs_car > 75:
        return BAR_ORANGE
    if percentage_vs_car > 25:
        return BAR_YELLOW
    return BAR_GREEN


def comparison_bar_width(emission: float, max_emission: float) -> float:
    """
    Bar length as a percentage of the largest emission in the comparison.
    """
    if max_emission <= 0:
        return 0.0
    return emission / max_emission * 100


def _mode_caption(mode: str) -> str:
    info = get_mode_info(mode)
    if info is None:
        return mode
    return f"{info.emoji} {info.label}"


def render_text_report(evaluation: TripEvaluation) -> str:
    """
    Plain-text version of the results, comparison and credits sections.
    """
    ccfg = get_carbon_credit_config()
    lines: List[str] = []

    lines.append("Resultado da Emissão")
    lines.append(f"  Rota:               {evaluation.origin} → {evaluation.destination}")
    lines.append(f"  Distância:          {format_number(evaluation.distance_km, 2)} km")
    lines.append(f"  Emissão de CO2:     🍃 {format_number(evaluation.emission_kg, 2)} kg")
    lines.append(f"  Modo de Transporte: {_mode_caption(evaluation.mode)}")

    if evaluation.savings is not None:
        lines.append("  Economia vs Carro:")
        lines.append(f"    Kg Economizados:  {format_number(evaluation.savings.saved_kg, 2)} kg")
        lines.append(f"    Percentual:       {format_number(evaluation.savings.percentage, 2)}%")

    lines.append("")
    lines.append("Comparação entre Modos de Transporte")
    if evaluation.comparison:
        max_emission = max(entry.emission for entry in evaluation.comparison)
        for entry in evaluation.comparison:
            width = comparison_bar_width(entry.emission, max_emission)
            bar = "█" * int(round_to(width / 5, 0))
            flag = "  [Selecionado]" if entry.mode == evaluation.mode else ""
            lines.append(
                f"  {_mode_caption(entry.mode):<14} {format_number(entry.emission, 2):>10} kg"
                f"  {format_number(entry.percentage_vs_car, 1):>7}% do carro  {bar}{flag}"
            )
    else:
        lines.append("  (sem dados para comparação)")

    lines.append("")
    lines.append("Créditos de Carbono")
    lines.append(f"  Créditos Necessários: {format_number(evaluation.credits.credits, 4)}")
    lines.append(
        f"  1 crédito = {format_number(ccfg.kg_per_credit, 0)} kg CO2"
    )
    price = evaluation.credits.price
    lines.append(f"  Preço Estimado:       {format_currency(price.average)}")
    lines.append(f"  Faixa:                {format_currency(price.min)} - {format_currency(price.max)}")

    return "\n".join(lines)


__all__ = [
      "format_number"
    , "format_currency"
    , "comparison_bar_color"
    , "comparison_bar_width"
    , "render_text_report"
]
