import logging
from pathlib import Path

import pytest

from gpxdistance.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the console handler installed by main() after each test."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == "gpxdistance":
            root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def in_fixtures(monkeypatch):
    monkeypatch.chdir(FIXTURES)


def run_main(argv):
    """Run main() and return its exit code."""
    try:
        main(argv)
    except SystemExit as e:
        return e.code
    return 0


def test_documented_example(in_fixtures, capsys):
    code = run_main(["-gpxfile=ellenbogen.gpx", "-lat=55.05", "-lon=8.41"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == '"ellenbogen.gpx",55.05,8.41,1066,3425\n'


def test_space_separated_arguments(in_fixtures, capsys):
    code = run_main(["-gpxfile", "ellenbogen.gpx", "-lat", "55.05", "-lon", "8.41"])
    assert code == 0
    assert capsys.readouterr().out == '"ellenbogen.gpx",55.05,8.41,1066,3425\n'


def test_double_dash_arguments(in_fixtures, capsys):
    code = run_main(
        ["--gpxfile=ellenbogen.gpx", "--lat", "55.05", "--lon=8.41", "--loglevel=ERROR"]
    )
    assert code == 0
    assert capsys.readouterr().out == '"ellenbogen.gpx",55.05,8.41,1066,3425\n'


@pytest.mark.parametrize("lat", ["5_5.05", " 55.05", "55.05\n"])
def test_non_decimal_latitude_is_fatal(in_fixtures, capsys, lat):
    code = run_main(["-gpxfile=ellenbogen.gpx", f"-lat={lat}", "-lon=8.41"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "not a base-10 number" in captured.err


def test_raw_coordinates_are_echoed(in_fixtures, capsys):
    code = run_main(["-gpxfile=ellenbogen.gpx", "-lat=55.050", "-lon=+8.41"])
    assert code == 0
    assert capsys.readouterr().out == '"ellenbogen.gpx",55.050,+8.41,1066,3425\n'


@pytest.mark.parametrize(
    "lon_args", [["-lon=-8.41"], ["-lon", "-8.41"]], ids=["equals", "separate"]
)
def test_negative_longitude(in_fixtures, capsys, lon_args):
    code = run_main(["-gpxfile=ellenbogen.gpx", "-lat=55.05"] + lon_args)
    out = capsys.readouterr().out
    assert code == 0
    fields = out.strip().split(",")
    assert fields[:3] == ['"ellenbogen.gpx"', "55.05", "-8.41"]
    assert 0 < int(fields[3]) <= int(fields[4])


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["-gpxfile=", "-lat=", "-lon="],
        ["-gpxfile=ellenbogen.gpx", "-lat=55.05"],
        ["-gpxfile=ellenbogen.gpx", "-lon=8.41"],
        ["-lat=55.05", "-lon=8.41"],
        ["-gpxfile=ellenbogen.gpx", "-lat=55.05", "-lon="],
    ],
)
def test_missing_arguments_print_usage(in_fixtures, capsys, argv):
    code = run_main(argv)
    out = capsys.readouterr().out
    assert code == 1
    assert "Usage:" in out
    assert "gpxdistance -gpxfile=filename -lat=latitude -lon=longitude" in out
    # No CSV result line, only the indented output example
    assert not any(line.startswith('"') for line in out.splitlines())


@pytest.mark.parametrize("flag", ["-h", "-help", "--help"])
def test_help_prints_usage(capsys, flag):
    code = run_main([flag])
    out = capsys.readouterr().out
    assert code == 1
    assert "Program:" in out
    assert "Options:" in out


def test_unknown_flag_prints_usage(capsys):
    code = run_main(["-gpxfile=ellenbogen.gpx", "-lat=55.05", "-lon=8.41", "-bogus"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Usage:" in captured.out
    assert "-bogus" in captured.err


def test_invalid_log_level_prints_usage(capsys):
    code = run_main(
        ["-gpxfile=ellenbogen.gpx", "-lat=55.05", "-lon=8.41", "-loglevel=LOUD"]
    )
    assert code == 1
    assert "Usage:" in capsys.readouterr().out


def test_version(capsys):
    code = run_main(["-version"])
    assert code == 0
    assert capsys.readouterr().out.startswith("gpxdistance ")


def test_non_numeric_latitude(in_fixtures, capsys):
    code = run_main(["-gpxfile=ellenbogen.gpx", "-lat=north", "-lon=8.41"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "CRITICAL" in captured.err
    assert "north" in captured.err


def test_non_finite_longitude(in_fixtures, capsys):
    code = run_main(["-gpxfile=ellenbogen.gpx", "-lat=55.05", "-lon=nan"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""


def test_missing_file(in_fixtures, capsys):
    code = run_main(["-gpxfile=nowhere.gpx", "-lat=55.05", "-lon=8.41"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "nowhere.gpx" in captured.err


def test_malformed_file(in_fixtures, capsys):
    code = run_main(["-gpxfile=malformed.gpx", "-lat=55.05", "-lon=8.41"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "parsing GPX data" in captured.err


def test_file_without_track_points(in_fixtures, capsys):
    code = run_main(["-gpxfile=no_tracks.gpx", "-lat=55.05", "-lon=8.41"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == '"no_tracks.gpx",55.05,8.41,2147483647,-2147483648\n'
    assert "No track points found" in captured.err


def test_debug_logging(in_fixtures, capsys):
    code = run_main(
        ["-gpxfile=ellenbogen.gpx", "-lat=55.05", "-lon=8.41", "-loglevel=DEBUG"]
    )
    captured = capsys.readouterr()
    assert code == 0
    assert "Reading GPX file: ellenbogen.gpx" in captured.err
    assert "Measured 4 track points" in captured.err
    assert captured.out == '"ellenbogen.gpx",55.05,8.41,1066,3425\n'
