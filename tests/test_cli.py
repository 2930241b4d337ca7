import argparse
import sys

import pytest

from scalelab import main as cli
from scalelab.shared.logger import ScalelabArgumentParser, log
from scalelab.shared.sanitizer import INPUT_HANDLERS, normalize_hex


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["scalelab", *argv])
    try:
        cli.main()
    except SystemExit as exc:
        return exc.code
    return 0


def test_color_command(monkeypatch, capsys):
    code = run_cli(monkeypatch, "-L", "60", "-C", "0.1", "-H", "240")
    out = capsys.readouterr().out
    assert code == 0
    assert "oklch(" in out
    assert "display-p3" in out
    assert "#" in out


def test_color_command_with_apca_target(monkeypatch, capsys):
    code = run_cli(monkeypatch, "-m", "apca-target", "-tl", "60", "-b", "black", "-hb")
    assert code == 0
    assert "oklch(" in capsys.readouterr().out


def test_misplaced_subcommand(monkeypatch, capsys):
    code = run_cli(monkeypatch, "-L", "50", "scale")
    assert code == 2
    assert "first argument" in capsys.readouterr().err


def test_unknown_preset_exits(monkeypatch):
    assert run_cli(monkeypatch, "-p", "no-such-preset") == 2


def test_scale_subcommand(monkeypatch, capsys):
    code = run_cli(monkeypatch, "scale", "-H", "150", "-S", "90,50,14", "--pairs", "-t", "body-text")
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("oklch(") >= 3


def test_scale_autofix(monkeypatch, capsys):
    code = run_cli(monkeypatch, "scale", "-S", "98,60,14", "--autofix", "--fix-apca", "body-text-white")
    assert code == 0
    assert capsys.readouterr().out


def test_blend_subcommand(monkeypatch, capsys):
    code = run_cli(monkeypatch, "blend", "-L", "30", "-C", "0.1", "--min-apca", "60")
    assert code == 0
    assert capsys.readouterr().out


def test_blend_matrix(monkeypatch, capsys):
    code = run_cli(monkeypatch, "blend", "-S", "90,50", "-O", "25,50,100", "-bm", "linear")
    assert code == 0
    assert capsys.readouterr().out


def test_limits_subcommand(monkeypatch, capsys):
    code = run_cli(monkeypatch, "limits", "-H", "240", "-S", "50")
    out = capsys.readouterr().out
    assert code == 0
    assert "compensation" in out


def test_parser_error_exits_with_two(capsys):
    parser = ScalelabArgumentParser(prog="test")
    parser.add_argument("-x", type=INPUT_HANDLERS["float"])
    with pytest.raises(SystemExit) as exc:
        parser.parse_args(["-x", "abc"])
    assert exc.value.code == 2
    assert "[error]" in capsys.readouterr().err


def test_float_range_clamps():
    assert INPUT_HANDLERS["lightness_pct"]("140") == 100.0
    assert INPUT_HANDLERS["chroma"]("-1") == 0.0


def test_step_list():
    assert INPUT_HANDLERS["lightness_steps"]("98, 50;14") == [98.0, 50.0, 14.0]
    assert INPUT_HANDLERS["opacity_steps"]("150") == [100.0]
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["lightness_steps"](",,")


def test_hex_validation():
    assert INPUT_HANDLERS["hex"]("FFF") == normalize_hex("#fff")
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["hex"]("zz")


def test_int_range():
    assert INPUT_HANDLERS["workers"]("0") == 1
    assert INPUT_HANDLERS["hue_steps"]("29.6") == 30


@pytest.mark.parametrize("shift, hue", [("20", "254.0"), ("-30", "219.0")])
def test_hue_shift_in_degrees(monkeypatch, capsys, shift, hue):
    code = run_cli(monkeypatch, "-L", "30", "-C", "0.1", "-H", "240",
                   "-m", "fixed-lightness", "-nc", f"--hue-shift={shift}")
    out = capsys.readouterr().out
    assert code == 0
    assert f" {hue})" in out


def test_hue_shift_range():
    assert INPUT_HANDLERS["hue_shift"]("20") == 20.0
    assert INPUT_HANDLERS["hue_shift"]("400") == 180.0
    assert INPUT_HANDLERS["chroma_shift"]("0.5") == 0.5


def test_no_color_output_is_plain(monkeypatch, capsys):
    code = run_cli(monkeypatch, "-L", "60", "-C", "0.1", "-H", "240", "-b", "nowhere")
    captured = capsys.readouterr()
    assert code == 0
    assert "\x1b" not in captured.out
    assert "[warning]" in captured.err
    assert "\x1b" not in captured.err


def test_colored_output_without_no_color(monkeypatch, capsys):
    monkeypatch.delenv("NO_COLOR", raising=False)
    log("error", "boom")
    assert "\x1b[" in capsys.readouterr().err


def test_log_respects_no_color(capsys):
    log("error", "boom")
    assert capsys.readouterr().err == "[error] boom\n"
