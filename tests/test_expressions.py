from collections import Counter

import pytest

from dsakit.expressions import (
    ExpressionError,
    apply_operator,
    evaluate_postfix,
    evaluate_prefix,
    main,
    precedence,
    to_postfix,
    to_prefix,
)

EXPRESSIONS = [
    "2+3*5",
    "(2+3)*5",
    "9-4-1",
    "8/2/2",
    "1+2*3-4/2",
    "((1+2)*(3+4))/7",
    "2^3*4",
    "7",
    "5*(6-(2+1))",
]


def _digits(text):
    return [c for c in text if c.isdigit()]


def test_prefix_worked_example():
    assert to_prefix("2+3*5") == "+2*35"


def test_evaluate_prefix_worked_example():
    assert evaluate_prefix("+2*35") == 17.0


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_and_prefix_evaluate_alike(expression):
    assert evaluate_postfix(to_postfix(expression)) == pytest.approx(
        evaluate_prefix(to_prefix(expression))
    )


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_operands_keep_their_order(expression):
    assert _digits(to_postfix(expression)) == _digits(expression)
    assert _digits(to_prefix(expression)) == _digits(expression)


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_operators_kept_and_parentheses_dropped(expression):
    operators = Counter(c for c in expression if c in "+-*/^")
    for converted in (to_postfix(expression), to_prefix(expression)):
        assert "(" not in converted and ")" not in converted
        assert Counter(c for c in converted if c in "+-*/^") == operators
        assert len(converted) == len(_digits(expression)) + sum(operators.values())


def test_parentheses_change_grouping():
    assert evaluate_postfix(to_postfix("(2+3)*5")) != evaluate_postfix(to_postfix("2+3*5"))


def test_postfix_power_groups_left():
    assert evaluate_postfix(to_postfix("2^3^2")) == evaluate_postfix(
        to_postfix("(2^3)^2")
    )


def test_prefix_power_groups_right():
    assert evaluate_prefix(to_prefix("2^3^2")) == evaluate_prefix(to_prefix("2^(3^2)"))


def test_prefix_left_associative_subtraction():
    assert evaluate_prefix(to_prefix("9-4-1")) == evaluate_prefix(to_prefix("(9-4)-1"))


def test_prefix_ignores_spaces():
    assert to_prefix("2 + 3 * 5") == to_prefix("2+3*5")


def test_evaluation_ignores_spaces():
    postfix = to_postfix("2+3*5")
    assert evaluate_postfix(" ".join(postfix)) == evaluate_postfix(postfix)
    prefix = to_prefix("2+3*5")
    assert evaluate_prefix(" ".join(prefix)) == evaluate_prefix(prefix)


def test_single_operand():
    assert evaluate_postfix("7") == 7.0
    assert evaluate_prefix("7") == 7.0


def test_precedence_order():
    assert precedence("+") == precedence("-")
    assert precedence("*") == precedence("/")
    assert precedence("+") < precedence("*") < precedence("^")
    assert precedence("(") == -1


def test_apply_operator_relations():
    assert apply_operator(6, 3, "+") - 3 == 6
    assert apply_operator(6, 3, "-") + 3 == 6
    assert apply_operator(6, 3, "*") == apply_operator(3, 6, "*")
    assert apply_operator(apply_operator(7, 2, "/"), 2, "*") == pytest.approx(7)
    assert apply_operator(2, 10, "^") == 1024


def test_apply_operator_division_by_zero():
    with pytest.raises(ExpressionError):
        apply_operator(1, 0, "/")


def test_apply_operator_unknown():
    with pytest.raises(ExpressionError):
        apply_operator(1, 2, "%")


def test_evaluate_division_by_zero():
    with pytest.raises(ExpressionError):
        evaluate_postfix(to_postfix("5/0"))
    with pytest.raises(ExpressionError):
        evaluate_prefix(to_prefix("5/(3-3)"))


@pytest.mark.parametrize("expression", ["2 + 3", "2+a", "12.5"])
def test_postfix_rejects_invalid_characters(expression):
    with pytest.raises(ExpressionError):
        to_postfix(expression)


def test_prefix_rejects_invalid_characters():
    with pytest.raises(ExpressionError):
        to_prefix("2+x")


@pytest.mark.parametrize("expression", ["(1+2", "1+2)", "((3)"])
def test_unbalanced_parentheses(expression):
    with pytest.raises(ExpressionError):
        to_postfix(expression)
    with pytest.raises(ExpressionError):
        to_prefix(expression)


@pytest.mark.parametrize("text", ["+", "12", "1+", "", "1a+"])
def test_malformed_postfix(text):
    with pytest.raises(ExpressionError):
        evaluate_postfix(text)


@pytest.mark.parametrize("text", ["+", "12", "+1", ""])
def test_malformed_prefix(text):
    with pytest.raises(ExpressionError):
        evaluate_prefix(text)


def test_too_deep_nesting():
    with pytest.raises(ExpressionError):
        to_postfix("(" * 150 + "1" + ")" * 150)


def test_main_postfix(capsys):
    assert main(["2+3*5"]) == 0
    out = capsys.readouterr().out
    assert f"Postfix Expression: {to_postfix('2+3*5')}" in out
    assert "Result of Postfix Evaluation: 17.0000" in out


def test_main_prefix(capsys):
    assert main(["--prefix", "2+3*5"]) == 0
    out = capsys.readouterr().out
    assert "Prefix Expression: +2*35" in out
    assert "Result of Prefix Evaluation: 17.0000" in out


def test_main_reads_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "7")
    assert main([]) == 0
    assert "Result of Postfix Evaluation: 7.0000" in capsys.readouterr().out


def test_main_reports_error(capsys):
    assert main(["1/0"]) == 1
    assert "division by zero" in capsys.readouterr().err