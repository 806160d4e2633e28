"""Interactive menu-driven column solver session.

All prompting and input validation live here; the buckling functions are only
called with values that have already passed :func:`parse_positive`.
"""

from __future__ import annotations

import logging
import math

import click

from .buckling import ColumnEvaluation, evaluate
from .errors import DomainError, InputFormatError, InvalidSelectionError
from .models import (
    CircularSection,
    LoadCase,
    LoadingParams,
    MaterialParams,
    RectangularSection,
    SectionKind,
)
from .report import format_report

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------

_MENU = {
    1: LoadCase.STRAIGHT,
    2: LoadCase.CROOKED,
    3: LoadCase.ECCENTRIC,
}
_SECTIONS = {
    1: SectionKind.CIRCULAR,
    2: SectionKind.RECTANGULAR,
}


def parse_positive(text: str) -> float:
    """Parse *text* as a positive, finite number.

    Raises
    ------
    InputFormatError
        If *text* is not numeric.
    DomainError
        If the number is zero, negative, infinite or NaN.
    """
    try:
        value = float(text.strip())
    except ValueError as exc:
        raise InputFormatError(f"{text!r} is not a number") from exc
    if not math.isfinite(value) or value <= 0.0:
        raise DomainError("Value must be positive and finite.")
    return value


def parse_menu_choice(text: str) -> LoadCase | None:
    """Map a main-menu answer to a :class:`LoadCase`; ``None`` means exit."""
    try:
        choice = int(text.strip())
    except ValueError:
        raise InvalidSelectionError("Invalid selection") from None
    if choice == 0:
        return None
    if choice not in _MENU:
        raise InvalidSelectionError("Invalid selection")
    return _MENU[choice]


def parse_section_choice(text: str) -> SectionKind:
    try:
        choice = int(text.strip())
    except ValueError:
        raise InvalidSelectionError("Invalid option.") from None
    if choice not in _SECTIONS:
        raise InvalidSelectionError("Invalid option.")
    return _SECTIONS[choice]


class PositiveNumber(click.ParamType):
    """Click parameter type that re-prompts until a positive number is given."""

    name = "positive number"

    def convert(self, value, param, ctx):
        if isinstance(value, float):
            return value
        try:
            return parse_positive(value)
        except InputFormatError:
            self.fail("Invalid input, try again.", param, ctx)
        except DomainError as exc:
            self.fail(str(exc), param, ctx)


POSITIVE_NUMBER = PositiveNumber()


# ---------------------------------------------------------------------------
# Prompt sequences
# ---------------------------------------------------------------------------

_PROMPTS = {
    "diameter": "Enter the diameter(D)",
    "base": "Enter the base(B)",
    "height": "Enter the height(H)",
    "end_fixity": "Enter the constant end fixity(K)",
    "length": "Enter the actual length(L)",
    "initial_crookedness": "Enter the initial crookedness(a)",
    "design_factor": "Enter the design factor(N)",
    "yield_strength": "Enter the yield strength of material(S)",
    "elastic_modulus": "Enter the modulus of elasticity of material(E)",
    "eccentricity": "Enter the eccentricity(e)",
}

_CIRCULAR_ORDER = {
    LoadCase.STRAIGHT: ("diameter", "end_fixity", "length", "yield_strength", "elastic_modulus"),
    LoadCase.CROOKED: (
        "diameter", "end_fixity", "initial_crookedness", "design_factor",
        "length", "yield_strength", "elastic_modulus",
    ),
    LoadCase.ECCENTRIC: (
        "diameter", "end_fixity", "initial_crookedness", "design_factor",
        "length", "yield_strength", "elastic_modulus", "eccentricity",
    ),
}

# Rectangular crooked/eccentric columns never use the initial crookedness.
_RECTANGULAR_ORDER = {
    LoadCase.STRAIGHT: ("base", "height", "length", "end_fixity", "yield_strength", "elastic_modulus"),
    LoadCase.CROOKED: (
        "base", "height", "length", "design_factor", "end_fixity",
        "yield_strength", "elastic_modulus",
    ),
    LoadCase.ECCENTRIC: (
        "base", "height", "length", "design_factor", "end_fixity",
        "yield_strength", "elastic_modulus", "eccentricity",
    ),
}

_LOADING_FIELDS = ("end_fixity", "length", "initial_crookedness", "design_factor", "eccentricity")


def prompt_order(case: LoadCase, kind: SectionKind) -> tuple[str, ...]:
    table = _CIRCULAR_ORDER if kind is SectionKind.CIRCULAR else _RECTANGULAR_ORDER
    return table[case]


def collect_inputs(case: LoadCase, kind: SectionKind):
    """Prompt for every value *case* needs and build the input models."""
    values = {
        field: click.prompt(_PROMPTS[field], type=POSITIVE_NUMBER)
        for field in prompt_order(case, kind)
    }

    if kind is SectionKind.CIRCULAR:
        section = CircularSection(diameter=values["diameter"])
    else:
        section = RectangularSection(base=values["base"], height=values["height"])
    material = MaterialParams(
        yield_strength=values["yield_strength"],
        elastic_modulus=values["elastic_modulus"],
    )
    loading = LoadingParams(**{k: values[k] for k in _LOADING_FIELDS if k in values})
    return section, material, loading


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

def run_case(case: LoadCase) -> ColumnEvaluation | None:
    """Ask for a cross-section, collect inputs, evaluate and print the report.

    Returns ``None`` without computing anything when the cross-section choice
    is invalid.
    """
    answer = click.prompt(
        "\nPlease type if its 1-circular cross section, 2-rectangular cross section",
        default="",
        show_default=False,
    )
    try:
        kind = parse_section_choice(answer)
    except InvalidSelectionError as exc:
        click.secho(str(exc), fg="red")
        return None

    section, material, loading = collect_inputs(case, kind)
    evaluation = evaluate(case, section, material, loading)
    logger.info("%s %s column: %s regime", case.value, kind.value, evaluation.regime.value)

    click.echo("")
    for line in format_report(evaluation):
        click.echo(line)
    return evaluation


def _print_menu() -> None:
    click.echo("<----------MENU---------->")
    click.echo("Welcome to Column Solver")
    for number, case in _MENU.items():
        click.echo(f"{number} - {case.value.capitalize()} column")


def run_session() -> None:
    """Menu loop: run cases until the user exits or declines to continue."""
    try:
        while True:
            _print_menu()
            answer = click.prompt(
                "Select from the following (0 to exit)", default="", show_default=False
            )
            try:
                case = parse_menu_choice(answer)
            except InvalidSelectionError as exc:
                click.secho(str(exc), fg="red")
            else:
                if case is None:
                    break
                run_case(case)

            again = click.prompt("\nBack to main menu? (y/n)", default="", show_default=False)
            if again.strip().lower() not in ("y", "yes"):
                break
    except click.Abort:
        # end of input
        click.echo("")

    click.echo("\nThank you for using the system")
