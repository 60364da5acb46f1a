import math

import pytest

from algobox.calculator import calculate, evaluate, main


@pytest.mark.parametrize("x, y", [(1.5, 2.0), (-3.0, 7.25), (10.0, 0.5)])
def test_calculate_relations(x, y):
    assert calculate(x, "+", y) == calculate(y, "+", x)
    assert calculate(x, "*", y) == calculate(y, "*", x)
    assert calculate(x, "-", y) == -calculate(y, "-", x)
    assert math.isclose(calculate(calculate(x, "/", y), "*", y), x)
    assert math.isclose(calculate(calculate(x, "+", y), "-", y), x)


def test_calculate_rejects_unknown_operator():
    with pytest.raises(ValueError, match="Invalid operator!"):
        calculate(1, "%", 2)


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate(1, "/", 0)


@pytest.mark.parametrize(
    "expression, parts",
    [
        ("1.5 + 2", (1.5, "+", 2.0)),
        ("3-2", (3.0, "-", 2.0)),
        ("  4 * -0.5 ", (4.0, "*", -0.5)),
        ("9/3", (9.0, "/", 3.0)),
    ],
)
def test_evaluate_matches_calculate(expression, parts):
    assert evaluate(expression) == calculate(*parts)


@pytest.mark.parametrize("expression", ["", "1 +", "+ 2", "one + two", "1 + 2 3"])
def test_evaluate_rejects_malformed(expression):
    with pytest.raises(ValueError, match="malformed"):
        evaluate(expression)


def test_evaluate_invalid_operator():
    with pytest.raises(ValueError, match="Invalid operator!"):
        evaluate("3 x 4")


def test_main_prints_two_decimals(capsys):
    assert main(["2", "*", "3"]) == 0
    assert capsys.readouterr().out == "6.00\n"


def test_main_invalid_operator(capsys):
    assert main(["2 ^ 3"]) == 1
    assert capsys.readouterr().out == "Invalid operator!\n"