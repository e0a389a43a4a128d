from __future__ import annotations

import pytest

import rpncalc


@pytest.fixture(autouse=True)
def _no_value_source(monkeypatch):
    monkeypatch.delenv("RPNCALC_VALUE_SOURCE_URL", raising=False)


def test_postfix_command(capsys):
    rpncalc.main(["postfix", "--text", "3 + 2 * (5 - x)"])

    assert capsys.readouterr().out.strip() == "3 2 5 x - * +"


def test_calc_command_with_vars(capsys):
    rpncalc.main(["calc", "--text", "3 + 2 * (5 - x)", "--var", "x=2", "--no-prompt"])

    assert capsys.readouterr().out.strip() == "9.0"


def test_eval_command(capsys):
    rpncalc.main(["eval", "--postfix", "a b /", "--var", "a=1", "--var", "b=4", "--no-prompt"])

    assert capsys.readouterr().out.strip() == "0.25"


def test_calc_command_error_exits_with_kind_and_code(capsys):
    with pytest.raises(SystemExit) as exc_info:
        rpncalc.main(["calc", "--text", "(1 + 2", "--no-prompt"])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("malformed_expression (1001)")


def test_missing_variable_without_prompt(capsys):
    with pytest.raises(SystemExit):
        rpncalc.main(["calc", "--text", "x + 1", "--no-prompt"])

    assert "unbound_variable" in capsys.readouterr().err


def test_eval_command_error(capsys):
    with pytest.raises(SystemExit):
        rpncalc.main(["eval", "--postfix", "3 4", "--no-prompt"])

    assert capsys.readouterr().err.startswith("malformed_postfix (2001)")


def test_invalid_var_argument_is_rejected():
    with pytest.raises(SystemExit) as exc_info:
        rpncalc.main(["calc", "--text", "x", "--var", "x"])

    assert exc_info.value.code == 2


def test_missing_variable_is_prompted(monkeypatch, capsys):
    monkeypatch.setattr(
        "adapters.variable_provider.prompt_provider.FloatPrompt.ask",
        lambda prompt, console=None: 3.0,
    )

    rpncalc.main(["calc", "--text", "x * x"])

    assert capsys.readouterr().out.strip().endswith("9.0")
