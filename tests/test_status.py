import io
import random
import pytest
from progress_printer.colors import apply_color
from progress_printer.config import MarkerSet, RenderOptions
from progress_printer.renderer import ProgressRenderer

@pytest.mark.parametrize("code,marker", [(".", "✓"), ("S", "➦"), ("I", "ℹ"), ("F", "✖"), ("E", "⚈")])
def test_marker_for_each_outcome(make_renderer, code, marker):
    r = make_renderer()
    r.emit_status(code)
    assert r.stream.getvalue() == marker + " "

def test_error_uses_error_marker(make_renderer):
    r = make_renderer()
    r.emit_status("E")
    assert r.stream.getvalue() == "⚈ "

def test_simple_output_uses_codes(make_renderer):
    r = make_renderer(simple_output=True)
    for code in ".sIfE":
        r.emit_status(code)
    assert r.stream.getvalue() == ". S I F E "

def test_unknown_code_passes_through(make_renderer):
    r = make_renderer()
    r.emit_status("R")
    assert r.stream.getvalue() == "R "
    assert r.state.column == 2

def test_pass_is_green_and_bold():
    stream = io.StringIO()
    r = ProgressRenderer(RenderOptions(), MarkerSet(), stream=stream, width=80)
    stream.seek(0)
    stream.truncate()
    r.emit_status(".")
    assert stream.getvalue() == apply_color("bold green", "✓ ")
    assert r.state.column == 2

def test_unknown_code_keeps_caller_color():
    stream = io.StringIO()
    r = ProgressRenderer(RenderOptions(), MarkerSet(), stream=stream, width=80)
    stream.seek(0)
    stream.truncate()
    r.emit_status("R", color="magenta")
    assert stream.getvalue() == apply_color("magenta", "R ")

def test_column_advances_two_per_status(make_renderer):
    r = make_renderer(width=200)
    r.state.column = 7
    for _ in range(10):
        r.emit_status(".")
    assert r.state.column == 7 + 20
    assert "\n" not in r.stream.getvalue()

def test_wrap_reindents_under_header(make_renderer):
    r = make_renderer(width=80)
    r.state.column = 79
    r.emit_status(".")
    assert r.stream.getvalue() == "\n" + " " * 40 + "✓ "
    assert r.state.column == 42

def test_full_line_wraps(make_renderer):
    r = make_renderer(width=80)
    r.state.column = 80
    r.emit_status("F")
    assert r.stream.getvalue().startswith("\n")
    assert r.state.column == 42

def test_status_that_fits_does_not_wrap(make_renderer):
    r = make_renderer(width=80)
    r.state.column = 78
    r.emit_status(".")
    assert r.stream.getvalue() == "✓ "
    assert r.state.column == 80

def test_column_never_exceeds_width(make_renderer):
    rng = random.Random(1234)
    r = make_renderer(width=37)
    for i in range(500):
        if i % 40 == 0:
            r.on_group_entered(f"tests.Group{i}")
        r.emit_status(rng.choice(".SIFEX"))
        assert r.state.column <= r.state.max_columns
    for line in r.stream.getvalue().splitlines():
        assert len(line) <= 37

def test_debug_mode_labels_each_outcome(make_renderer):
    r = make_renderer(debug_mode=True)
    r.emit_status(".")
    r.emit_status("E")
    assert r.stream.getvalue() == "✓ Passed \n⚈ Error \n"
    assert r.state.column == 4

def test_debug_mode_never_wraps(make_renderer):
    r = make_renderer(width=20, debug_mode=True)
    for _ in range(30):
        r.emit_status("S")
    assert r.stream.getvalue() == "➦ Skipped \n" * 30

def test_debug_mode_with_simple_output(make_renderer):
    r = make_renderer(debug_mode=True, simple_output=True)
    r.emit_status("i")
    assert r.stream.getvalue() == "I Incomplete \n"

def test_write_progress_prints_header_then_status(make_renderer):
    r = make_renderer(width=80)
    r.enter_group("tests.AlphaTests")
    r.write_progress(".")
    r.write_progress("F")
    header = " ==> tests.AlphaTests".ljust(40)
    assert r.stream.getvalue() == "\n" + header + "✓ ✖ "
    assert r.state.column == 44

def test_write_progress_in_debug_mode_skips_header(make_renderer):
    r = make_renderer(debug_mode=True)
    r.enter_group("tests.AlphaTests")
    r.write_progress(".")
    assert r.stream.getvalue() == "✓ Passed \n"
