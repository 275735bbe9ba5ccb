import pytest

from shapearea.main import _create_argument_parser, main


def test_main_circle(capsys):
    assert main(["circle", "1"]) == 0
    out = capsys.readouterr().out
    assert "Circle area: 3.141592653589793" in out
    assert "Right triangle" not in out


def test_main_right_triangle(capsys):
    assert main(["TRIANGLE", "3", "4", "5"]) == 0
    out = capsys.readouterr().out
    assert "Triangle area: 6.0" in out
    assert "Right triangle: True" in out


def test_main_other_triangle(capsys):
    assert main(["triangle", "2", "3", "4"]) == 0
    assert "Right triangle: False" in capsys.readouterr().out


def test_main_negative_radius(capsys):
    assert main(["circle", "-1"]) == 0
    assert "Circle area: 3.141592653589793" in capsys.readouterr().out


def test_main_wrong_parameter_count(capsys):
    assert main(["circle", "1", "2"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    err = captured.err
    assert err.count("\n") == 1
    assert err.startswith("error: Invalid number of parameters for a circle")


def test_main_unknown_type(capsys):
    assert main(["square", "1"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown shape type 'square'" in captured.err


def test_main_verbose_logs_debug(capsys):
    assert main(["-v", "circle", "2"]) == 0
    assert "DEBUG - Created Circle(radius=2.0)" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["circle", "abc"]])
def test_main_usage_error(capsys, argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
    assert "usage: shapearea" in capsys.readouterr().err


def test_argument_parser_parses_floats():
    parsed = _create_argument_parser().parse_args(["triangle", "3", "4.5", "5"])
    assert parsed.shape_type == "triangle"
    assert parsed.parameters == [3.0, 4.5, 5.0]
    assert not parsed.verbose
