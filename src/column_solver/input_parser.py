"""Parse and validate YAML case files for batch column evaluation.

Reads a case file, checks that every case carries the fields its loading
condition needs, and builds validated :class:`~column_solver.models.ColumnCase`
records.  Every problem found is collected and reported together.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ColumnSolverError
from .models import ColumnCase, LoadCase, SectionKind


class InputError(ColumnSolverError):
    """Raised when the YAML input is invalid or incomplete."""


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _format_loc(prefix: str, loc: tuple) -> str:
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def _validate_case(index: int, raw: Any, errors: list[str]) -> ColumnCase | None:
    """Build a :class:`ColumnCase` from *raw*, appending problems to *errors*."""
    prefix = f"cases[{index}]"
    if not isinstance(raw, dict):
        errors.append(f"{prefix}: must be a mapping")
        return None

    data = dict(raw)
    data.setdefault("name", f"case-{index + 1}")
    try:
        case = ColumnCase.model_validate(data)
    except ValidationError as exc:
        for err in exc.errors():
            errors.append(f"{_format_loc(prefix, err['loc'])}: {err['msg']}")
        return None

    # Cross-field requirements per loading condition
    loading = case.loading
    if case.case in (LoadCase.CROOKED, LoadCase.ECCENTRIC):
        if loading.design_factor is None:
            errors.append(f"{prefix}.loading.design_factor: required for {case.case.value} columns")
        if case.section.kind is SectionKind.CIRCULAR and loading.initial_crookedness <= 0:
            errors.append(
                f"{prefix}.loading.initial_crookedness: must be > 0 for "
                f"circular {case.case.value} columns"
            )
    if case.case is LoadCase.ECCENTRIC and loading.eccentricity is None:
        errors.append(f"{prefix}.loading.eccentricity: required for eccentric columns")

    return case


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_cases(raw: Any) -> tuple[dict[str, Any], list[ColumnCase]]:
    """Validate an already-loaded case-file mapping.

    Returns
    -------
    (project, cases)
        The ``project`` mapping (possibly empty) and the validated cases in
        file order.

    Raises
    ------
    InputError
        If validation fails (the message lists every problem found).
    """
    if not isinstance(raw, dict):
        raise InputError("YAML root must be a mapping (dict)")

    errors: list[str] = []

    project = raw.get("project") or {}
    if not isinstance(project, dict):
        errors.append("Section 'project' must be a mapping")
        project = {}

    raw_cases = raw.get("cases")
    if raw_cases is None:
        errors.append("Missing required section: cases")
        raw_cases = []
    elif not isinstance(raw_cases, list) or not raw_cases:
        errors.append("Section 'cases' must be a non-empty list")
        raw_cases = []

    cases: list[ColumnCase] = []
    for i, entry in enumerate(raw_cases):
        case = _validate_case(i, entry, errors)
        if case is not None:
            cases.append(case)

    names = [c.name for c in cases]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    for name in duplicates:
        errors.append(f"cases: duplicate case name {name!r}")

    if errors:
        bullet_list = "\n  - ".join(errors)
        raise InputError(
            f"Input validation failed with {len(errors)} error(s):\n  - {bullet_list}"
        )
    return project, cases


def parse_cases(yaml_path: str | Path) -> tuple[dict[str, Any], list[ColumnCase]]:
    """Read and validate a case file.

    Raises
    ------
    FileNotFoundError
        If *yaml_path* does not exist.
    InputError
        If validation fails.
    """
    path = Path(yaml_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {yaml_path}")

    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)

    return validate_cases(raw)


# ---------------------------------------------------------------------------
# Template generator
# ---------------------------------------------------------------------------

_TEMPLATE_YAML = """\
# Column Solver Case File
# =======================
# Units are not converted: use one consistent system for every value.

project:
  name: "PROJECT_NAME"

cases:
  - name: "C1"
    case: straight                # Options: straight | crooked | eccentric
    section:
      type: circular              # Options: circular | rectangular
      diameter: 2.0               # D
    material:
      yield_strength: 36000       # S
      elastic_modulus: 30000000.0 # E
    loading:
      end_fixity: 1.0             # K
      length: 50.0                # L

  - name: "C2"
    case: crooked
    section:
      type: circular
      diameter: 1.0
    material:
      yield_strength: 36000
      elastic_modulus: 30000000.0
    loading:
      end_fixity: 1.0
      length: 40.0
      initial_crookedness: 0.05   # a
      design_factor: 3.0          # N

  - name: "C3"
    case: eccentric
    section:
      type: rectangular
      base: 2.0                   # B (governs radius of gyration)
      height: 4.0                 # H
    material:
      yield_strength: 36000
      elastic_modulus: 30000000.0
    loading:
      end_fixity: 1.0
      length: 100.0
      design_factor: 3.0
      eccentricity: 0.5           # e (reported only)
"""


def generate_template() -> str:
    """Return a commented YAML template for a case file.

    The returned text is ready to be written to a file and edited by the
    user.
    """
    return _TEMPLATE_YAML
