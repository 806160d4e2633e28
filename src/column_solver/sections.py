"""Section property calculations for solid column cross-sections.

Provides:
- Area and radius of gyration for circular and rectangular sections
- :func:`section_properties`, which dispatches on the cross-section variant
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .models import CircularSection, RectangularSection


# ---------------------------------------------------------------------------
# Section properties -- circular
# ---------------------------------------------------------------------------

def circular_area(diameter: float) -> float:
    """Cross-sectional area of a circle.

    Parameters
    ----------
    diameter : float
        Diameter in consistent units.

    Returns
    -------
    float
        Area in ``diameter`` units squared.
    """
    return math.pi * diameter**2 / 4.0


def circular_radius_of_gyration(diameter: float) -> float:
    """Radius of gyration of a solid circular section.

    ``r = sqrt(I / A) = sqrt((pi * d^4 / 64) / (pi * d^2 / 4)) = d / 4``
    """
    return diameter / 4.0


# ---------------------------------------------------------------------------
# Section properties -- rectangular
# ---------------------------------------------------------------------------

def rectangular_area(base: float, height: float) -> float:
    """Cross-sectional area of a rectangle."""
    return base * height


def rectangular_radius_of_gyration(base: float) -> float:
    """Radius of gyration of a solid rectangle about its weak axis.

    ``r = b / sqrt(12)``

    Parameters
    ----------
    base : float
        Base (b), the dimension perpendicular to the buckling axis.

    Returns
    -------
    float
        Radius of gyration in ``base`` units.
    """
    return base / math.sqrt(12.0)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SectionProperties:
    """Derived properties of a column cross-section.

    Attributes
    ----------
    radius_of_gyration : float
        Radius of gyration used in the slenderness ratio.
    area : float
        Gross cross-sectional area.
    half_section_dimension : float
        Distance from the centroid to the extreme fibre used by the
        initial-crookedness term. Zero for rectangular sections, which
        carry no imperfection term.
    """
    radius_of_gyration: float
    area: float
    half_section_dimension: float = 0.0


def section_properties(section: CircularSection | RectangularSection) -> SectionProperties:
    """Derive :class:`SectionProperties` for *section*."""
    if isinstance(section, CircularSection):
        return SectionProperties(
            radius_of_gyration=circular_radius_of_gyration(section.diameter),
            area=circular_area(section.diameter),
            half_section_dimension=section.diameter / 2.0,
        )
    if isinstance(section, RectangularSection):
        return SectionProperties(
            radius_of_gyration=rectangular_radius_of_gyration(section.base),
            area=rectangular_area(section.base, section.height),
        )
    raise TypeError(f"Unsupported cross-section: {type(section).__name__}")
