# Column buckling calculator: Euler / Johnson loads for straight, crooked and eccentric columns
from .buckling import (
    ColumnEvaluation,
    classify_regime,
    column_constant,
    evaluate,
    evaluate_crooked,
    evaluate_eccentric,
    evaluate_straight,
    euler_load,
    johnson_load,
    slenderness_ratio,
    solve_small_root,
)
from .errors import ColumnSolverError, DomainError, InputFormatError, InvalidSelectionError
from .models import (
    CircularSection,
    ColumnCase,
    LoadCase,
    LoadingParams,
    MaterialParams,
    RectangularSection,
    Regime,
    SectionKind,
)
from .sections import SectionProperties, section_properties
