"""Plain-text and JSON-ready rendering of column evaluations."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from .buckling import ColumnEvaluation
from .models import Regime

_PRECISION = 6


def _fmt(value: float) -> str:
    return f"{value:.{_PRECISION}f}"


def regime_message(regime: Regime) -> str:
    if regime is Regime.LONG:
        return "The column is long, so use Euler's formula."
    return "The column is short, so use Johnson's formula."


def format_report(evaluation: ColumnEvaluation) -> list[str]:
    """Return the report lines for *evaluation*, six decimals throughout."""
    ev = evaluation
    lines = [
        f"Radius of gyration: {_fmt(ev.radius_of_gyration)}",
        f"Area: {_fmt(ev.area)}",
        f"Slenderness ratio: {_fmt(ev.slenderness_ratio)}",
        f"Column constant: {_fmt(ev.column_constant)}",
    ]
    if ev.eccentricity is not None:
        lines.append(f"Eccentricity: {_fmt(ev.eccentricity)}")

    lines.append(regime_message(ev.regime))
    lines.append(f"Critical Load ({ev.regime.formula}): {_fmt(ev.critical_load)}")

    if ev.allowable_load is not None:
        lines.append(f"C1: {_fmt(ev.quadratic_c1)}")
        lines.append(f"C2: {_fmt(ev.quadratic_c2)}")
        lines.append(f"Allowable Load: {_fmt(ev.allowable_load)}")
    if ev.approx_maximum_stress is not None:
        lines.append(
            f"Approx. Maximum Stress: {_fmt(ev.approx_maximum_stress)} (load/area)"
        )
    return lines


def evaluation_to_dict(evaluation: ColumnEvaluation) -> dict[str, Any]:
    """Flatten *evaluation* into a JSON-serialisable mapping."""
    data = asdict(evaluation)
    section = data.pop("section")
    data["radius_of_gyration"] = section["radius_of_gyration"]
    data["area"] = section["area"]
    data["case"] = evaluation.case.value
    data["regime"] = evaluation.regime.value
    data["formula"] = evaluation.regime.formula
    return {key: value for key, value in data.items() if value is not None}
