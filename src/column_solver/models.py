"""
Input data models for column buckling evaluation using Pydantic for validation.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SectionKind(str, Enum):
    """Supported column cross-sections."""
    CIRCULAR = "circular"
    RECTANGULAR = "rectangular"


class LoadCase(str, Enum):
    """Column loading conditions."""
    STRAIGHT = "straight"      # concentric load
    CROOKED = "crooked"        # initially bent column
    ECCENTRIC = "eccentric"    # load applied off the centroid


class Regime(str, Enum):
    """Buckling regime selected by the slenderness ratio."""
    LONG = "long"    # Euler
    SHORT = "short"  # Johnson

    @property
    def formula(self) -> str:
        return "Euler" if self is Regime.LONG else "Johnson"


PositiveFloat = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class CircularSection(BaseModel):
    """Solid circular cross-section."""
    model_config = ConfigDict(frozen=True)

    type: Literal["circular"] = "circular"
    diameter: PositiveFloat = Field(description="Diameter (D)")

    @property
    def kind(self) -> SectionKind:
        return SectionKind.CIRCULAR


class RectangularSection(BaseModel):
    """Solid rectangular cross-section.

    Only ``base`` governs the radius of gyration (weak-axis assumption);
    ``height`` enters the area alone.
    """
    model_config = ConfigDict(frozen=True)

    type: Literal["rectangular"] = "rectangular"
    base: PositiveFloat = Field(description="Base (B)")
    height: PositiveFloat = Field(description="Height (H)")

    @property
    def kind(self) -> SectionKind:
        return SectionKind.RECTANGULAR


CrossSection = Annotated[
    Union[CircularSection, RectangularSection],
    Field(discriminator="type"),
]


class MaterialParams(BaseModel):
    """Material strength and stiffness, in units consistent with the section."""
    model_config = ConfigDict(frozen=True)

    yield_strength: PositiveFloat = Field(description="Yield strength of material (S)")
    elastic_modulus: PositiveFloat = Field(description="Modulus of elasticity (E)")


class LoadingParams(BaseModel):
    """End fixity, length and the imperfection parameters of a column.

    ``initial_crookedness``, ``design_factor`` and ``eccentricity`` are only
    read by the crooked and eccentric cases. ``eccentricity`` is carried for
    reporting and never enters a load formula.
    """
    model_config = ConfigDict(frozen=True)

    end_fixity: PositiveFloat = Field(description="Constant end fixity (K)")
    length: PositiveFloat = Field(description="Actual length (L)")
    initial_crookedness: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Initial crookedness (a)",
    )
    design_factor: Optional[PositiveFloat] = Field(
        default=None, description="Design factor (N)"
    )
    eccentricity: Optional[PositiveFloat] = Field(
        default=None, description="Eccentricity (e)"
    )


class ColumnCase(BaseModel):
    """A named column to evaluate, as read from a case file."""
    model_config = ConfigDict(frozen=True)

    name: str = "column"
    case: LoadCase = LoadCase.STRAIGHT
    section: CrossSection
    material: MaterialParams
    loading: LoadingParams
