"""Batch commands: run, template and validate."""
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from column_solver.cli import main

SAMPLE_PATH = Path(__file__).parent.parent / "config" / "sample_input.yaml"


@pytest.fixture
def runner():
    return CliRunner()


class TestTemplate:

    def test_prints_case_file(self, runner):
        result = runner.invoke(main, ["template"])
        assert result.exit_code == 0
        assert "cases:" in result.output
        assert "case: eccentric" in result.output


class TestValidate:

    def test_sample_is_valid(self, runner):
        result = runner.invoke(main, ["validate", str(SAMPLE_PATH)])
        assert result.exit_code == 0
        assert "Input file is valid (3 case(s))." in result.output

    def test_invalid_file(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "cases:\n"
            "  - case: crooked\n"
            "    section: {type: rectangular, base: 2, height: 4}\n"
            "    material: {yield_strength: 36000, elastic_modulus: 30000000}\n"
            "    loading: {end_fixity: 1, length: 100}\n",
            encoding="utf-8",
        )
        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1
        assert "design_factor" in result.output

    def test_yaml_syntax_error(self, runner, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("cases: [\n", encoding="utf-8")
        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1
        assert "YAML syntax error" in result.output


class TestRun:

    def test_writes_results(self, runner, tmp_path):
        out_dir = tmp_path / "out"
        result = runner.invoke(main, ["run", str(SAMPLE_PATH), "-o", str(out_dir)])
        assert result.exit_code == 0, result.output
        assert "--- C1 (straight, circular) ---" in result.output
        assert "Critical Load (Johnson): 78719.8" in result.output

        with open(out_dir / "results.json", encoding="utf-8") as fh:
            data = json.load(fh)
        assert data["project"]["name"] == "SAMPLE-COLUMNS"
        assert [c["name"] for c in data["cases"]] == ["C1", "C2", "C3"]
        assert data["errors"] == []

        c1, c2, c3 = data["cases"]
        assert c1["regime"] == "short"
        assert c1["formula"] == "Johnson"
        assert "allowable_load" not in c1
        assert c2["regime"] == "long"
        assert c2["allowable_load"] < c2["critical_load"]
        assert c3["eccentricity"] == 0.5
        assert c3["approx_maximum_stress"] == pytest.approx(c3["allowable_load"] / c3["area"])

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["run", str(tmp_path / "nope.yaml")])
        assert result.exit_code != 0
