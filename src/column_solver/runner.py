"""Batch evaluation of validated column cases.

Runs every case from a case file and returns structured results in memory;
printing and file output are left to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from .buckling import evaluate
from .errors import ColumnSolverError
from .models import ColumnCase

logger = logging.getLogger(__name__)


def run_cases(cases: list[ColumnCase]) -> dict[str, Any]:
    """Evaluate each case in order.

    Returns
    -------
    dict with keys:
        results (list of ``(ColumnCase, ColumnEvaluation)`` pairs),
        errors (list[str])
    """
    output: dict[str, Any] = {"results": [], "errors": []}

    for case in cases:
        logger.debug("evaluating %s (%s, %s)", case.name, case.case.value, case.section.kind.value)
        try:
            evaluation = evaluate(case.case, case.section, case.material, case.loading)
        except ColumnSolverError as exc:
            output["errors"].append(f"{case.name}: {exc}")
            continue
        output["results"].append((case, evaluation))

    return output
