"""End-to-end tests for the lilufo command line."""

import json
from pathlib import Path

import pytest
import ufoLib2
from typer.testing import CliRunner

from lilufo import __version__
from lilufo.cli import app
from lilufo.io import read_groups_plist, read_kerning_plist

runner = CliRunner()

GLYPH_O = """<?xml version="1.0" encoding="UTF-8"?>
<glyph name="O" format="2">
  <advance width="600"/>
  <outline>
    <contour>
      <point x="301" y="-9.6" type="curve" smooth="yes"/>
      <point x="55.5" y="350" type="curve" smooth="yes"/>
    </contour>
  </outline>
</glyph>
"""


@pytest.fixture
def ufo_path(tmp_path: Path) -> Path:
    """A UFO with glyphs, one group per side and one pair."""
    font = ufoLib2.Font()
    font.info.familyName = "Test Sans"
    font.info.styleName = "Regular"
    font.info.versionMajor = 2
    font.info.versionMinor = 5
    for name in ("A", "C", "O", "Q", "V", "W"):
        font.newGlyph(name)
    font.groups["public.kern1.O"] = ["O", "Q"]
    font.groups["public.kern2.V"] = ["V", "W"]
    font.kerning[("A", "V")] = -50
    path = tmp_path / "Test.ufo"
    font.save(path)
    return path


def invoke(ufo_path: Path, *args: str):
    return runner.invoke(app, ["--ufo-path", str(ufo_path), *args])


def invoke_with(ufo_path: Path, options: list[str], *args: str):
    return runner.invoke(app, ["--ufo-path", str(ufo_path), *options, *args])


class TestCli:
    """Tests for the Typer application."""

    def test_version(self) -> None:
        """Test --version prints and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_basic_info(self, ufo_path: Path) -> None:
        """Test basic font information is printed."""
        result = invoke(ufo_path, "basic-info")

        assert result.exit_code == 0, result.stdout
        assert "Lil' UFO" in result.stdout
        assert "Family Name: Test Sans" in result.stdout
        assert "Style Name: Regular" in result.stdout
        assert "Version Major: 2" in result.stdout
        assert "Version Minor: 5" in result.stdout
        assert "Number of Glyphs: 6" in result.stdout

    def test_log_level_case_insensitive(self, ufo_path: Path) -> None:
        """Test --log-level accepts lowercase level names."""
        result = invoke_with(ufo_path, ["--log-level", "debug"], "show-kerning")

        assert result.exit_code == 0, result.output
        assert "A V → -50" in result.stdout

    def test_log_level_unknown(self, ufo_path: Path) -> None:
        """Test an unknown --log-level is a usage error, not a crash."""
        result = invoke_with(ufo_path, ["--log-level", "bogus"], "show-kerning")

        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)

    def test_basic_info_missing_font(self, tmp_path: Path) -> None:
        """Test a missing package exits with an error."""
        result = invoke(tmp_path / "missing.ufo", "basic-info")

        assert result.exit_code == 1
        assert "Could not load font" in result.stdout

    def test_show_kerning_groups(self, ufo_path: Path) -> None:
        """Test groups are listed per side with @ names."""
        result = invoke(ufo_path, "show-kerning-groups")

        assert result.exit_code == 0, result.stdout
        assert "Left Groups (prefix: public.kern1):" in result.stdout
        assert "Right Groups (prefix: public.kern2):" in result.stdout
        assert "@O → O, Q" in result.stdout
        assert "@V → V, W" in result.stdout

    def test_show_kerning(self, ufo_path: Path) -> None:
        """Test pairs are listed."""
        result = invoke(ufo_path, "show-kerning")

        assert result.exit_code == 0, result.stdout
        assert "A V → -50" in result.stdout

    def test_show_without_plists(self, tmp_path: Path) -> None:
        """Test missing metadata files are reported, not treated as errors."""
        package = tmp_path / "Empty.ufo"
        package.mkdir()

        groups = invoke(package, "show-kerning-groups")
        kerning = invoke(package, "show-kerning")

        assert groups.exit_code == 0
        assert "No groups.plist found in UFO" in groups.stdout
        assert kerning.exit_code == 0
        assert "No kerning.plist found in UFO" in kerning.stdout

    def test_add_kerning_group(self, ufo_path: Path) -> None:
        """Test a group is written to groups.plist."""
        result = invoke(
            ufo_path,
            "add-kerning-group",
            "--name", "C",
            "--side", "left",
            "--members", " C , O,, Q ",
        )

        assert result.exit_code == 0, result.stdout
        assert "Successfully added kerning group 'C'" in result.stdout
        assert read_groups_plist(ufo_path)["public.kern1.C"] == ["C", "O", "Q"]

        listing = invoke(ufo_path, "show-kerning-groups")
        assert "@C → C, O, Q" in listing.stdout

    def test_add_kerning_group_invalid_side(self, ufo_path: Path) -> None:
        """Test an invalid side fails and writes nothing."""
        before = (ufo_path / "groups.plist").read_bytes()

        result = invoke(
            ufo_path, "add-kerning-group", "--name", "C", "--side", "center", "--members", "C"
        )

        assert result.exit_code == 1
        assert "must be either 'left' or 'right'" in result.stdout
        assert (ufo_path / "groups.plist").read_bytes() == before

    def test_edit_kerning_group_append(self, ufo_path: Path) -> None:
        """Test append merges sorted and unique."""
        result = invoke(
            ufo_path,
            "edit-kerning-group",
            "--name", "O",
            "--side", "left",
            "--members", "C,O",
            "--append",
        )

        assert result.exit_code == 0, result.stdout
        assert "Successfully updated kerning group 'O'" in result.stdout
        assert read_groups_plist(ufo_path)["public.kern1.O"] == ["C", "O", "Q"]

    def test_edit_kerning_group_replace(self, ufo_path: Path) -> None:
        """Test replace stores members in the given order."""
        result = invoke(
            ufo_path, "edit-kerning-group", "--name", "V", "--side", "right", "--members", "W,A"
        )

        assert result.exit_code == 0, result.stdout
        assert read_groups_plist(ufo_path)["public.kern2.V"] == ["W", "A"]

    def test_edit_missing_group(self, ufo_path: Path) -> None:
        """Test editing a group that does not exist fails."""
        result = invoke(
            ufo_path, "edit-kerning-group", "--name", "Z", "--side", "left", "--members", "A"
        )

        assert result.exit_code == 1
        assert "Kerning group 'Z' does not exist" in result.stdout

    def test_add_kerning_pair_with_groups(self, ufo_path: Path) -> None:
        """Test a group pair is stored under prefixed keys and listed as @Name."""
        result = invoke(
            ufo_path, "add-kerning-pair", "--first", "@O", "--second", "@V", "--value=-40"
        )

        assert result.exit_code == 0, result.stdout
        kerning = read_kerning_plist(ufo_path)
        assert kerning["public.kern1.O"] == {"public.kern2.V": -40}
        assert kerning["A"] == {"V": -50}

        listing = invoke(ufo_path, "show-kerning")
        assert "@O @V → -40" in listing.stdout

    def test_add_kerning_pair_missing_group(self, ufo_path: Path) -> None:
        """Test referencing a missing group fails without saving."""
        before = (ufo_path / "kerning.plist").read_bytes()

        result = invoke(
            ufo_path, "add-kerning-pair", "--first", "@Left", "--second", "@V", "--value=-50"
        )

        assert result.exit_code == 1
        assert "Kerning group 'Left' does not exist" in result.stdout
        assert (ufo_path / "kerning.plist").read_bytes() == before

    def test_add_kerning_pair_require_known_glyphs(self, ufo_path: Path) -> None:
        """Test the strict option rejects unknown glyphs."""
        result = invoke(
            ufo_path,
            "add-kerning-pair",
            "--first", "A",
            "--second", "Nope",
            "--value", "10",
            "--require-known-glyphs",
        )

        assert result.exit_code == 1
        assert "Glyph 'Nope' not found in font" in result.stdout

    def test_round_to_even(self, ufo_path: Path) -> None:
        """Test outline points are rounded and reported per file."""
        glif = ufo_path / "glyphs" / "O_.glif"
        glif.write_text(GLYPH_O, encoding="utf-8")

        result = invoke(ufo_path, "round-to-even")

        assert result.exit_code == 0, result.stdout
        assert f"{glif}: All points rounded to even integers" in result.stdout
        text = glif.read_text(encoding="utf-8")
        assert 'x="302" y="-10"' in text
        assert 'x="56" y="350"' in text

    def test_round_to_even_strict(self, ufo_path: Path) -> None:
        """Test --strict-numbers fails on unparsable coordinates."""
        glif = ufo_path / "glyphs" / "O_.glif"
        glif.write_text(GLYPH_O.replace('x="301"', 'x="oops"'), encoding="utf-8")

        result = invoke(ufo_path, "round-to-even", "--strict-numbers")

        assert result.exit_code == 1
        assert "Invalid coordinate" in result.stdout

    def test_log_file(self, ufo_path: Path, tmp_path: Path) -> None:
        """Test --log-file captures structured log records."""
        log_file = tmp_path / "run.log"

        result = runner.invoke(
            app,
            [
                "--ufo-path", str(ufo_path),
                "--log-file", str(log_file),
                "add-kerning-pair", "--first", "A", "--second", "W", "--value=-5",
            ],
        )

        assert result.exit_code == 0, result.stdout
        records = [
            json.loads(line.split(" | ", 3)[3])
            for line in log_file.read_text(encoding="utf-8").splitlines()
            if "| lilufo" in line
        ]
        assert any(r["event"] == "Kerning pair added" and r["second"] == "W" for r in records)
