"""Section properties and input-model validation."""
import math

import pytest
from pydantic import ValidationError

from column_solver.models import (
    CircularSection,
    ColumnCase,
    LoadingParams,
    MaterialParams,
    RectangularSection,
    SectionKind,
)
from column_solver.sections import (
    circular_area,
    rectangular_radius_of_gyration,
    section_properties,
)


class TestSectionProperties:
    """Area and radius of gyration per cross-section."""

    def test_circular(self):
        props = section_properties(CircularSection(diameter=2.0))
        assert props.radius_of_gyration == pytest.approx(0.5)
        assert props.area == pytest.approx(math.pi)
        assert props.half_section_dimension == pytest.approx(1.0)

    def test_rectangular_uses_base_only(self):
        props = section_properties(RectangularSection(base=2.0, height=4.0))
        assert props.radius_of_gyration == pytest.approx(0.57735, abs=1e-5)
        assert props.area == pytest.approx(8.0)
        assert props.half_section_dimension == 0.0

    def test_helpers(self):
        assert circular_area(1.0) == pytest.approx(math.pi / 4)
        assert rectangular_radius_of_gyration(math.sqrt(12.0)) == pytest.approx(1.0)

    def test_unsupported_section(self):
        with pytest.raises(TypeError):
            section_properties(object())


class TestInputModels:
    """Pydantic constraints on the input records."""

    @pytest.mark.parametrize("bad", [0.0, -1.0, float("inf"), float("nan")])
    def test_dimensions_must_be_positive_and_finite(self, bad):
        with pytest.raises(ValidationError):
            CircularSection(diameter=bad)
        with pytest.raises(ValidationError):
            RectangularSection(base=1.0, height=bad)

    def test_material_must_be_positive(self):
        with pytest.raises(ValidationError):
            MaterialParams(yield_strength=-36000.0, elastic_modulus=3e7)

    def test_models_are_frozen(self):
        section = CircularSection(diameter=2.0)
        with pytest.raises(ValidationError):
            section.diameter = 3.0

    def test_optional_loading_fields(self):
        loading = LoadingParams(end_fixity=1.0, length=10.0)
        assert loading.initial_crookedness == 0.0
        assert loading.design_factor is None
        with pytest.raises(ValidationError):
            LoadingParams(end_fixity=1.0, length=10.0, design_factor=0.0)

    def test_section_discriminator(self):
        case = ColumnCase.model_validate({
            "case": "crooked",
            "section": {"type": "rectangular", "base": 2, "height": 4},
            "material": {"yield_strength": 36000, "elastic_modulus": 30000000},
            "loading": {"end_fixity": 1, "length": 100, "design_factor": 3},
        })
        assert isinstance(case.section, RectangularSection)
        assert case.section.kind is SectionKind.RECTANGULAR
        assert case.section.base == 2.0
