# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Tests for the rebar-tools command line.
"""

import json
import math

import pytest

from rebar_tools.tests.conftest import HAS_IFC, requires_ifc

if HAS_IFC:
    from rebar_tools.cli import main
    from rebar_tools.tool import Ifc

BAR_MASS = math.pi * 5.0 ** 2 * 1000.0 * 7850e-9


@pytest.fixture
def model_path(rebar_model, tmp_path):
    """Millimetre model with one straight bar and one bent bar, on disk."""
    rebar_model.straight_bar((0, 0, 0), (1000, 0, 0), name="STRAIGHT")
    curve = rebar_model.indexed_curve(
        [(0, 500, 0), (1000, 500, 0), (1050, 550, 0), (1000, 600, 0)],
        [("line", (1, 2)), ("arc", (2, 3, 4))],
    )
    rebar_model.bar([rebar_model.swept_disk(curve)], name="HOOK")

    path = tmp_path / "bars.ifc"
    rebar_model.file.write(str(path))
    return path


@pytest.fixture
def single_bar_path(rebar_model, tmp_path):
    bar = rebar_model.straight_bar((0, 0, 0), (1000, 0, 0), name="B1")
    path = tmp_path / "single.ifc"
    rebar_model.file.write(str(path))
    return path, bar.GlobalId


@pytest.fixture(autouse=True)
def reset_ifc():
    yield
    if HAS_IFC:
        Ifc.set(None)


@requires_ifc
class TestMassCommand:

    @pytest.mark.integration
    def test_prints_mass_and_cog(self, single_bar_path, capsys):
        path, _ = single_bar_path
        assert main(["mass", str(path)]) == 0

        out = capsys.readouterr().out
        assert "Calculated mass: 0.62 kg." in out
        assert "Centre of gravity: (500.000, 0.000, 0.000) [MILLIMETRE]" in out

    @pytest.mark.integration
    def test_precision(self, single_bar_path, capsys):
        path, _ = single_bar_path
        assert main(["mass", str(path), "--precision", "4"]) == 0

        assert f"Calculated mass: {round(BAR_MASS, 4)} kg." in capsys.readouterr().out

    @pytest.mark.integration
    def test_json_output(self, single_bar_path, capsys):
        path, _ = single_bar_path
        assert main(["mass", str(path), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_mass"] == pytest.approx(BAR_MASS)
        assert data["rounded_mass"] == 0.62
        assert data["center_of_gravity"] == pytest.approx([500.0, 0.0, 0.0])
        assert data["unit"] == "MILLIMETRE"
        assert data["arc_centroid"] == "ANNULAR"

    @pytest.mark.integration
    def test_guid_selection(self, model_path, capsys):
        assert main(["mass", str(model_path), "--json"]) == 0
        everything = json.loads(capsys.readouterr().out)

        guid = Ifc.by_type("IfcReinforcingBar")[0].GlobalId
        assert main(["mass", str(model_path), "--guid", guid, "--json"]) == 0
        selected = json.loads(capsys.readouterr().out)

        assert selected["total_mass"] == pytest.approx(BAR_MASS)
        assert everything["total_mass"] > selected["total_mass"]

    @pytest.mark.integration
    def test_arc_centroid_option(self, model_path, capsys):
        assert main(["mass", str(model_path), "--json"]) == 0
        annular = json.loads(capsys.readouterr().out)

        assert main(["mass", str(model_path), "--json", "--arc-centroid", "TOROIDAL"]) == 0
        toroidal = json.loads(capsys.readouterr().out)

        assert toroidal["arc_centroid"] == "TOROIDAL"
        assert toroidal["total_mass"] == pytest.approx(annular["total_mass"])
        assert toroidal["center_of_gravity"][0] < annular["center_of_gravity"][0]

    @pytest.mark.integration
    def test_missing_file(self, tmp_path, capsys):
        assert main(["mass", str(tmp_path / "missing.ifc")]) == 1
        assert "file not found" in capsys.readouterr().err

    @pytest.mark.integration
    def test_unreadable_file(self, tmp_path, capsys):
        path = tmp_path / "notes.ifc"
        path.write_text("not an ifc file\n")

        assert main(["mass", str(path)]) == 1
        assert f"Error: cannot read {path}" in capsys.readouterr().err

    @pytest.mark.integration
    def test_unknown_guid(self, single_bar_path, capsys):
        path, _ = single_bar_path
        assert main(["mass", str(path), "--guid", "0000000000000000000000"]) == 1
        assert "no element with GlobalId" in capsys.readouterr().err

    @pytest.mark.integration
    def test_engine_error_reported(self, rebar_model, tmp_path, capsys):
        rebar_model.bar([rebar_model.swept_disk(rebar_model.circle(100.0))], name="RING")
        path = tmp_path / "ring.ifc"
        rebar_model.file.write(str(path))

        assert main(["mass", str(path)]) == 1
        err = capsys.readouterr().err
        assert "Error: Unsupported bar directrix: IfcCircle" in err
        assert "RING" in err

    @pytest.mark.integration
    def test_model_without_rebars(self, rebar_model, tmp_path, capsys):
        rebar_model.wall()
        path = tmp_path / "empty.ifc"
        rebar_model.file.write(str(path))

        assert main(["mass", str(path)]) == 1
        assert "No rebars to compute" in capsys.readouterr().err


class TestParser:

    @requires_ifc
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: rebar-tools" in capsys.readouterr().out

    @requires_ifc
    def test_invalid_arc_model_rejected(self):
        with pytest.raises(SystemExit):
            main(["mass", "bars.ifc", "--arc-centroid", "PARABOLIC"])
