"""Interactive session driven through click's test runner."""
import pytest
from click.testing import CliRunner

from column_solver.cli import main
from column_solver.errors import DomainError, InputFormatError, InvalidSelectionError
from column_solver.models import LoadCase, SectionKind
from column_solver.shell import (
    parse_menu_choice,
    parse_positive,
    parse_section_choice,
    prompt_order,
)


def _session(*lines):
    runner = CliRunner()
    return runner.invoke(main, ["interactive"], input="\n".join(lines) + "\n")


class TestParsing:
    """Boundary parsing of prompt answers."""

    def test_positive(self):
        assert parse_positive(" 2.5 ") == 2.5

    def test_non_numeric(self):
        with pytest.raises(InputFormatError):
            parse_positive("abc")

    @pytest.mark.parametrize("text", ["0", "-3", "inf", "nan"])
    def test_out_of_domain(self, text):
        with pytest.raises(DomainError):
            parse_positive(text)

    def test_menu(self):
        assert parse_menu_choice("0") is None
        assert parse_menu_choice("3") is LoadCase.ECCENTRIC
        for text in ("4", "-1", "x"):
            with pytest.raises(InvalidSelectionError):
                parse_menu_choice(text)

    def test_section(self):
        assert parse_section_choice("2") is SectionKind.RECTANGULAR
        with pytest.raises(InvalidSelectionError):
            parse_section_choice("3")

    def test_rectangular_crooked_skips_crookedness(self):
        assert "initial_crookedness" not in prompt_order(LoadCase.CROOKED, SectionKind.RECTANGULAR)
        assert "initial_crookedness" in prompt_order(LoadCase.CROOKED, SectionKind.CIRCULAR)


class TestSession:
    """Full menu round-trips."""

    def test_straight_circular(self):
        result = _session("1", "1", "2", "1", "50", "36000", "30000000", "n")
        assert result.exit_code == 0
        assert "Radius of gyration: 0.500000" in result.output
        assert "Area: 3.141593" in result.output
        assert "Slenderness ratio: 100.000000" in result.output
        assert "The column is short, so use Johnson's formula." in result.output
        assert "Critical Load (Johnson): 78719.8" in result.output
        assert "Allowable Load" not in result.output
        assert "Thank you for using the system" in result.output

    def test_reprompts_until_valid(self):
        result = _session("1", "1", "abc", "-2", "2", "1", "50", "36000", "30000000", "n")
        assert result.exit_code == 0
        assert "Invalid input, try again." in result.output
        assert "Value must be positive and finite." in result.output
        assert "Radius of gyration: 0.500000" in result.output

    def test_invalid_section_runs_nothing(self):
        result = _session("1", "3", "n")
        assert result.exit_code == 0
        assert "Invalid option." in result.output
        assert "Radius of gyration" not in result.output

    def test_invalid_menu_selection(self):
        result = _session("7", "y", "0")
        assert result.exit_code == 0
        assert "Invalid selection" in result.output
        assert result.output.count("<----------MENU---------->") == 2

    def test_exit_immediately(self):
        result = _session("0")
        assert result.exit_code == 0
        assert "Back to main menu" not in result.output
        assert "Thank you for using the system" in result.output

    def test_any_non_affirmative_answer_ends(self):
        result = _session("7", "maybe")
        assert result.exit_code == 0
        assert result.output.count("<----------MENU---------->") == 1

    def test_rectangular_then_crooked(self):
        result = _session(
            "1", "2", "2", "4", "100", "1", "36000", "30000000", "y",
            "2", "1", "1", "1", "0.05", "3", "40", "36000", "30000000", "n",
        )
        assert result.exit_code == 0
        assert "Critical Load (Euler): 78956.83" in result.output
        assert "C1: " in result.output
        assert "Allowable Load: " in result.output
        assert "Approx. Maximum Stress" not in result.output

    def test_eccentric_reports_stress(self):
        result = _session("3", "2", "2", "4", "100", "3", "1", "36000", "30000000", "0.5", "n")
        assert result.exit_code == 0
        assert "Eccentricity: 0.500000" in result.output
        assert "Approx. Maximum Stress: " in result.output

    def test_end_of_input_ends_session(self):
        result = _session("1")
        assert result.exit_code == 0
        assert "Thank you for using the system" in result.output

    def test_default_command_is_interactive(self):
        result = CliRunner().invoke(main, [], input="0\n")
        assert result.exit_code == 0
        assert "Welcome to Column Solver" in result.output
