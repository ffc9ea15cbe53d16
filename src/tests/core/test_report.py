"""
Report / CLI Tests
==================

Run: python -m pytest tests/core/test_report.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from triangle_math.report import format_report, format_path, check_triangle, main
from triangle_math.spec.constants import (
    EXIT_OK,
    EXIT_NO_INPUT,
    EXIT_BAD_SHAPE,
)
from triangle_math.builders import build_example_triangle, build_random_triangle


def _write(tmp_path, text, name="triangle.txt"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_format_report_text():
    """Report wording and line breaks."""
    assert format_report(4, 23, 10) == (
        "Loaded triangle with 4 rows.\n"
        "The maximum path value is 23.\n"
        "If you may only move left onto an odd number or right onto an even number, the\n"
        "maximum path value is 10."
    )


def test_format_path_lists_each_row():
    """One header plus one line per row."""
    text = format_path(build_example_triangle())
    lines = text.splitlines()
    assert lines[0] == "Best path (total 23):"
    assert len(lines) == 5
    assert lines[-1].split()[-1] == "9"


def test_check_triangle_passes(capsys):
    """Reference solvers agree with correct values."""
    tri = build_random_triangle(10, seed=1)
    from triangle_math.operators import max_path, max_odd_even_path
    assert check_triangle(tri, max_path(tri), max_odd_even_path(tri))
    out = capsys.readouterr().out
    assert out.count("✓") == 3


def test_check_triangle_detects_mismatch(capsys):
    """A wrong value is reported."""
    tri = build_example_triangle()
    assert not check_triangle(tri, 24, 10)
    assert "✗ max_path vs numpy" in capsys.readouterr().out


def test_main_prints_report(tmp_path, capsys):
    """Happy path: exit 0, report on stdout."""
    path = _write(tmp_path, "3\n7 4\n2 4 6\n8 5 9 3\n")
    assert main([path]) == EXIT_OK

    out = capsys.readouterr().out
    assert "Loaded triangle with 4 rows." in out
    assert "The maximum path value is 23." in out
    assert "maximum path value is 10." in out


def test_main_path_and_check(tmp_path, capsys):
    """--path and --check add their sections."""
    path = _write(tmp_path, "3\n7 4\n2 4 6\n8 5 9 3\n")
    assert main([path, "--path", "--check"]) == EXIT_OK

    out = capsys.readouterr().out
    assert "Best path (total 23):" in out
    assert "✓ max_path vs brute force" in out


def test_main_missing_file(tmp_path, capsys):
    """Missing input -> exit 1 and 'Failed to open' on stderr."""
    missing = str(tmp_path / "nope.txt")
    assert main([missing]) == EXIT_NO_INPUT
    assert f"Failed to open {missing}" in capsys.readouterr().err


def test_main_bad_shape(tmp_path, capsys):
    """Malformed triangle -> exit 2 with diagnostic."""
    path = _write(tmp_path, "3\n7 4 1\n")
    assert main([path]) == EXIT_BAD_SHAPE
    assert "Row 2" in capsys.readouterr().err


def test_main_value_out_of_range(tmp_path, capsys):
    """Value beyond int64 -> exit 2 with diagnostic, no traceback."""
    path = _write(tmp_path, "9223372036854775808\n1 2\n")
    assert main([path]) == EXIT_BAD_SHAPE
    assert "out of int64 range" in capsys.readouterr().err


def test_main_empty_file(tmp_path, capsys):
    """No rows -> exit 2."""
    path = _write(tmp_path, "\n")
    assert main([path]) == EXIT_BAD_SHAPE
    assert "no rows" in capsys.readouterr().err
