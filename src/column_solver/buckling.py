"""Column buckling loads by the Euler and Johnson formulas.

Evaluates straight (concentric), crooked (initially bent) and eccentric
columns of circular or rectangular section.  The slenderness ratio is compared
with the column constant to choose between the Euler formula (long columns)
and the Johnson parabola (short columns).  Crooked and eccentric columns are
further reduced to an allowable load: the smaller root of a quadratic that
combines direct stress, the critical load and the initial imperfection.

Notation
--------
- ``K``   -- end-fixity constant
- ``L``   -- actual column length
- ``r``   -- radius of gyration
- ``A``   -- cross-sectional area
- ``S``   -- yield strength of the material
- ``E``   -- modulus of elasticity
- ``a``   -- initial crookedness
- ``c``   -- half section dimension (extreme fibre distance)
- ``N``   -- design factor
- ``e``   -- eccentricity (reported only)

Units are not enforced; all inputs must use one consistent system.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .errors import DomainError
from .models import (
    CircularSection,
    LoadCase,
    LoadingParams,
    MaterialParams,
    RectangularSection,
    Regime,
)
from .sections import SectionProperties, section_properties

logger = logging.getLogger(__name__)

_PI2 = math.pi * math.pi


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise DomainError(f"{name} must be positive and finite, got {value!r}")


# ---------------------------------------------------------------------------
# Regime classification
# ---------------------------------------------------------------------------

def slenderness_ratio(end_fixity: float, length: float, radius_of_gyration: float) -> float:
    """Effective length over radius of gyration, ``K * L / r``."""
    return (end_fixity * length) / radius_of_gyration


def column_constant(yield_strength: float, elastic_modulus: float) -> float:
    """Slenderness at which the Euler and Johnson formulas are switched.

    ``Cc = sqrt(2 * pi^2 * E / S)``
    """
    return math.sqrt((2.0 * _PI2 * elastic_modulus) / yield_strength)


def select_regime(slenderness: float, constant: float) -> Regime:
    """Long (Euler) only when the slenderness strictly exceeds the constant."""
    return Regime.LONG if slenderness > constant else Regime.SHORT


@dataclass(frozen=True)
class RegimeClassification:
    slenderness_ratio: float
    column_constant: float
    regime: Regime


def classify_regime(
    end_fixity: float,
    length: float,
    radius_of_gyration: float,
    yield_strength: float,
    elastic_modulus: float,
) -> RegimeClassification:
    """Compute the slenderness ratio and column constant and pick a regime.

    Raises
    ------
    DomainError
        If any input is non-positive or non-finite.
    """
    for name, value in (
        ("end_fixity", end_fixity),
        ("length", length),
        ("radius_of_gyration", radius_of_gyration),
        ("yield_strength", yield_strength),
        ("elastic_modulus", elastic_modulus),
    ):
        _require_positive(name, value)

    sr = slenderness_ratio(end_fixity, length, radius_of_gyration)
    cc = column_constant(yield_strength, elastic_modulus)
    regime = select_regime(sr, cc)
    logger.debug("slenderness %.6f vs column constant %.6f -> %s", sr, cc, regime.value)
    return RegimeClassification(slenderness_ratio=sr, column_constant=cc, regime=regime)


# ---------------------------------------------------------------------------
# Critical load formulas
# ---------------------------------------------------------------------------

def euler_load(elastic_modulus: float, area: float, slenderness: float) -> float:
    """Euler critical load, ``pi^2 * E * A / (KL/r)^2``."""
    return (_PI2 * elastic_modulus * area) / (slenderness * slenderness)


def johnson_load(
    area: float,
    yield_strength: float,
    slenderness: float,
    elastic_modulus: float,
) -> float:
    """Johnson critical load, ``A * S * (1 - S * (KL/r)^2 / (4 * pi^2 * E))``."""
    reduction = (yield_strength * slenderness * slenderness) / (4.0 * _PI2 * elastic_modulus)
    return (area * yield_strength) * (1.0 - reduction)


def critical_load(
    regime: Regime,
    area: float,
    yield_strength: float,
    elastic_modulus: float,
    slenderness: float,
) -> float:
    if regime is Regime.LONG:
        return euler_load(elastic_modulus, area, slenderness)
    return johnson_load(area, yield_strength, slenderness, elastic_modulus)


# ---------------------------------------------------------------------------
# Allowable load (crooked / eccentric)
# ---------------------------------------------------------------------------

def imperfection_term(
    initial_crookedness: float,
    half_section_dimension: float,
    radius_of_gyration: float,
) -> float:
    """``a * c / r^2``; zero whenever ``c`` is zero."""
    return (initial_crookedness * half_section_dimension) / (radius_of_gyration**2)


def quadratic_coefficients(
    yield_strength: float,
    area: float,
    critical: float,
    design_factor: float,
    imperfection: float = 0.0,
) -> tuple[float, float]:
    """Coefficients of ``P^2 + C1 * P + C2 = 0`` for the allowable load.

    ``C1 = -(1/N) * (S * A + (1 + a*c/r^2) * Pcr)``
    ``C2 = S * A * Pcr / N^2``
    """
    squash = yield_strength * area
    c1 = (-1.0 / design_factor) * (squash + (1.0 + imperfection) * critical)
    c2 = (squash * critical) / (design_factor * design_factor)
    return c1, c2


def solve_small_root(c1: float, c2: float) -> float:
    """Smaller root of ``x^2 + c1 * x + c2 = 0``.

    A negative discriminant is clamped to zero, so the result is always real
    and equals ``-c1 / 2`` in that case.
    """
    disc = c1 * c1 - 4.0 * c2
    if disc < 0.0:
        logger.debug("discriminant %.6e clamped to zero", disc)
        disc = 0.0
    return (-c1 - math.sqrt(disc)) / 2.0


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ColumnEvaluation:
    """Outcome of one column evaluation.

    The quadratic coefficients and allowable load are populated for crooked
    and eccentric columns; ``eccentricity`` and ``approx_maximum_stress`` for
    eccentric columns only.
    """
    case: LoadCase
    section: SectionProperties
    slenderness_ratio: float
    column_constant: float
    regime: Regime
    critical_load: float

    quadratic_c1: Optional[float] = None
    quadratic_c2: Optional[float] = None
    allowable_load: Optional[float] = None

    eccentricity: Optional[float] = None
    approx_maximum_stress: Optional[float] = None

    @property
    def radius_of_gyration(self) -> float:
        return self.section.radius_of_gyration

    @property
    def area(self) -> float:
        return self.section.area


# ---------------------------------------------------------------------------
# Case orchestrators
# ---------------------------------------------------------------------------

def _critical(
    section: CircularSection | RectangularSection,
    material: MaterialParams,
    loading: LoadingParams,
) -> tuple[SectionProperties, RegimeClassification, float]:
    props = section_properties(section)
    cls = classify_regime(
        loading.end_fixity,
        loading.length,
        props.radius_of_gyration,
        material.yield_strength,
        material.elastic_modulus,
    )
    pcr = critical_load(
        cls.regime,
        props.area,
        material.yield_strength,
        material.elastic_modulus,
        cls.slenderness_ratio,
    )
    return props, cls, pcr


def _allowable(
    props: SectionProperties,
    material: MaterialParams,
    loading: LoadingParams,
    pcr: float,
) -> tuple[float, float, float]:
    if loading.design_factor is None:
        raise DomainError("design_factor is required for crooked and eccentric columns")
    _require_positive("design_factor", loading.design_factor)

    term = imperfection_term(
        loading.initial_crookedness,
        props.half_section_dimension,
        props.radius_of_gyration,
    )
    c1, c2 = quadratic_coefficients(
        material.yield_strength, props.area, pcr, loading.design_factor, term
    )
    return c1, c2, solve_small_root(c1, c2)


def evaluate_straight(
    section: CircularSection | RectangularSection,
    material: MaterialParams,
    loading: LoadingParams,
) -> ColumnEvaluation:
    """Critical load of a straight, concentrically loaded column."""
    props, cls, pcr = _critical(section, material, loading)
    return ColumnEvaluation(
        case=LoadCase.STRAIGHT,
        section=props,
        slenderness_ratio=cls.slenderness_ratio,
        column_constant=cls.column_constant,
        regime=cls.regime,
        critical_load=pcr,
    )


def evaluate_crooked(
    section: CircularSection | RectangularSection,
    material: MaterialParams,
    loading: LoadingParams,
) -> ColumnEvaluation:
    """Critical and allowable load of an initially crooked column."""
    props, cls, pcr = _critical(section, material, loading)
    c1, c2, allowable = _allowable(props, material, loading, pcr)
    return ColumnEvaluation(
        case=LoadCase.CROOKED,
        section=props,
        slenderness_ratio=cls.slenderness_ratio,
        column_constant=cls.column_constant,
        regime=cls.regime,
        critical_load=pcr,
        quadratic_c1=c1,
        quadratic_c2=c2,
        allowable_load=allowable,
    )


def evaluate_eccentric(
    section: CircularSection | RectangularSection,
    material: MaterialParams,
    loading: LoadingParams,
) -> ColumnEvaluation:
    """Allowable load of an eccentrically loaded column.

    The allowable load is found exactly as for a crooked column; the
    eccentricity is only carried into the result, together with the
    approximate maximum stress ``P_allow / A``.
    """
    props, cls, pcr = _critical(section, material, loading)
    c1, c2, allowable = _allowable(props, material, loading, pcr)
    return ColumnEvaluation(
        case=LoadCase.ECCENTRIC,
        section=props,
        slenderness_ratio=cls.slenderness_ratio,
        column_constant=cls.column_constant,
        regime=cls.regime,
        critical_load=pcr,
        quadratic_c1=c1,
        quadratic_c2=c2,
        allowable_load=allowable,
        eccentricity=loading.eccentricity,
        approx_maximum_stress=allowable / props.area,
    )


_ORCHESTRATORS = {
    LoadCase.STRAIGHT: evaluate_straight,
    LoadCase.CROOKED: evaluate_crooked,
    LoadCase.ECCENTRIC: evaluate_eccentric,
}


def evaluate(
    case: LoadCase,
    section: CircularSection | RectangularSection,
    material: MaterialParams,
    loading: LoadingParams,
) -> ColumnEvaluation:
    """Run the orchestrator for *case*."""
    return _ORCHESTRATORS[LoadCase(case)](section, material, loading)
