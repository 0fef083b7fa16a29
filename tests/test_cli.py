"""Tests for the tiny-qubit command-line interface."""

import pytest

from tiny_qubit import __version__
from tiny_qubit.cli import build_parser, main


def test_run_default_low_draw(capsys):
    assert main(["run", "--draw", "0.25"]) == 0
    out = capsys.readouterr().out
    assert "Initial Qubit State:" in out
    assert "After H Gate:" in out
    assert "Measurement Result: |0⟩" in out


def test_run_default_high_draw(capsys):
    assert main(["run", "--draw", "0.75"]) == 0
    assert "Measurement Result: |1⟩" in capsys.readouterr().out


def test_run_with_shots(capsys):
    assert main(["run", "--gate", "x", "--shots", "10", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Measurement Result: |1⟩" in out
    assert "Counts:" in out
    assert "    10  100.0%" in out


def test_run_with_initial_and_param(capsys):
    argv = ["run", "--initial", "1", "0", "1", "0", "--gate", "p", "--param", "3.141592653589793",
            "--draw", "0.1"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "After P(3.14159) Gate:" in out
    assert "-0.707107" in out


def test_run_with_bloch(capsys):
    assert main(["run", "--gate", "i", "--draw", "0.5", "--bloch"]) == 0
    out = capsys.readouterr().out
    assert "Bloch vector:" in out
    assert "z=+1.000" in out
    assert "|−⟩ " in out


def test_run_strict(capsys):
    assert main(["run", "--strict", "--draw", "0.1"]) == 0


def test_unknown_gate_exit_code(capsys):
    assert main(["run", "--gate", "cnot"]) == 2
    assert "Unknown gate" in capsys.readouterr().err


def test_zero_initial_exit_code(capsys):
    assert main(["run", "--initial", "0", "0", "0", "0"]) == 2
    assert "zero vector" in capsys.readouterr().err


def test_draw_out_of_range(capsys):
    assert main(["run", "--draw", "1.5"]) == 2
    assert "[0, 1)" in capsys.readouterr().err


def test_missing_param(capsys):
    assert main(["run", "--gate", "p"]) == 2
    assert "requires 1 parameter" in capsys.readouterr().err


def test_draw_with_shots_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["run", "--draw", "0.2", "--shots", "5"])
    assert exc.value.code == 2


def test_gates_command(capsys):
    assert main(["gates"]) == 0
    out = capsys.readouterr().out
    assert "Available gates:" in out
    assert "Hadamard" in out
    assert "(1 param)" in out


def test_info_command(capsys):
    assert main(["info"]) == 0
    assert f"tiny-qubit v{__version__}" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_verbose_flag_parses():
    args = build_parser().parse_args(["-vv", "gates"])
    assert args.verbose == 2
