"""Tests for the command-line interface and rendering."""

import io

from click.testing import CliRunner
from rich.console import Console

from trackheat import __version__
from trackheat.bounds import compute_bounding_box
from trackheat.grid import bin_track
from trackheat.main import main
from trackheat.renderer import render_summary, render_symbols


def test_render_symbols_one_line_per_row():
    assert render_symbols([[".", "#"], ["#", "."]]) == ".#\n#.\n"


def test_version_command():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_command():
    result = CliRunner().invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_diagonal_heatmap_from_stdin(temp_dir):
    result = CliRunner().invoke(
        main, ["2", "2", ".#", "1", "--config", str(temp_dir / "none.yaml")],
        input="0 0 0\n1 1 1\n",
    )
    assert result.exit_code == 0
    assert result.output == ".#\n#.\n"


def test_segments_do_not_change_output(temp_dir):
    args = ["3", "3", ".#", "1", "--config", str(temp_dir / "none.yaml")]
    runner = CliRunner()
    joined = runner.invoke(main, args, input="0 0 0\n0.5 0.5 1\n1 1 2\n")
    split = runner.invoke(main, args, input="0 0 0\n\n0.5 0.5 1\n\n\n1 1 2\n")

    assert joined.exit_code == 0 and split.exit_code == 0
    assert joined.output == split.output


def test_input_file_and_config_defaults(temp_dir, mock_config_file):
    track_file = temp_dir / "ride.txt"
    track_file.write_text("0 0 0\n0 0 1\n\n1 1 2\n1 0 3\n")
    result = CliRunner().invoke(main, ["--input", str(track_file), "--config", mock_config_file])

    assert result.exit_code == 0
    # 4x3 grid, bucket size 2: the doubled south-west point reaches "o"
    assert result.output == "....\n....\no...\n"


def test_empty_input_renders_sparsest_symbol(temp_dir):
    result = CliRunner().invoke(
        main, ["3", "2", "_X", "1", "--config", str(temp_dir / "none.yaml")], input=""
    )
    assert result.exit_code == 0
    assert result.output == "___\n___\n"


def test_zero_bucket_size_fails_fast(temp_dir):
    result = CliRunner().invoke(
        main, ["2", "2", ".#", "0", "--config", str(temp_dir / "none.yaml")], input="0 0 0\n"
    )
    assert result.exit_code == 1
    assert "Bucket size must be positive" in result.output


def test_invalid_width_fails_fast(temp_dir):
    result = CliRunner().invoke(
        main, ["wide", "2", ".#", "1", "--config", str(temp_dir / "none.yaml")], input="0 0 0\n"
    )
    assert result.exit_code == 1
    assert "Invalid size value" in result.output


def test_missing_input_file(temp_dir):
    result = CliRunner().invoke(
        main, ["2", "2", ".#", "1", "--input", str(temp_dir / "missing.txt"),
               "--config", str(temp_dir / "none.yaml")]
    )
    assert result.exit_code == 1
    assert "Could not read track" in result.output


def test_render_summary_table(diagonal_track):
    bbox = compute_bounding_box(diagonal_track)
    grid = bin_track(diagonal_track, 2, 2, bbox)
    console = Console(file=io.StringIO(), width=100)

    render_summary(diagonal_track, bbox, grid, console=console)
    output = console.file.getvalue()

    assert "Track Summary" in output
    assert "Points" in output
    assert "2 rows x 2 cols" in output


def test_render_summary_empty_track():
    from trackheat.track import Track

    track = Track()
    grid = bin_track(track, 2, 2)
    console = Console(file=io.StringIO(), width=100)

    render_summary(track, None, grid, console=console)
    assert "empty track" in console.file.getvalue()


def test_non_finite_width_fails_fast(temp_dir):
    result = CliRunner().invoke(
        main, ["nan", "2", ".#", "1", "--config", str(temp_dir / "none.yaml")], input="0 0 0\n"
    )
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_extreme_coordinates_render(temp_dir):
    result = CliRunner().invoke(
        main, ["2", "2", ".#", "1", "--config", str(temp_dir / "none.yaml")],
        input="1e308 0 0\n-1e308 0 1\n",
    )
    assert result.exit_code == 0
    assert result.output == "#.\n#.\n"


def test_nan_line_is_skipped(temp_dir):
    result = CliRunner().invoke(
        main, ["2", "2", ".#", "1", "--config", str(temp_dir / "none.yaml")],
        input="nan 0 0\n1 1 1\n",
    )
    assert result.exit_code == 0
    assert result.output == "..\n#.\n"


def test_undecodable_stdin_line_is_skipped(temp_dir):
    result = CliRunner().invoke(
        main, ["2", "2", ".#", "1", "--config", str(temp_dir / "none.yaml")],
        input=b"0 0 0\n\xff\xfe junk\n1 1 1\n",
    )
    assert result.exit_code == 0
    assert result.output == ".#\n#.\n"


def test_alphabet_starting_with_dash(temp_dir):
    result = CliRunner().invoke(
        main, ["--config", str(temp_dir / "none.yaml"), "--", "2", "2", "-#", "1"],
        input="0 0 0\n1 1 1\n",
    )
    assert result.exit_code == 0
    assert result.output == "-#\n#-\n"
