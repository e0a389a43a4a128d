import pytest

from adapters.postfix_converter.shunting_yard_converter import ShuntingYardConverter
from contracts import TokenKind
from errors import InvalidCharacterError, MalformedExpressionError


def _postfix(expression: str) -> str:
    return str(ShuntingYardConverter().to_postfix(expression))


def test_to_postfix_mixed_precedence_with_variable():
    postfix = ShuntingYardConverter().to_postfix("3 + 2 * (5 - x)")

    assert postfix.texts() == ["3", "2", "5", "x", "-", "*", "+"]
    assert str(postfix) == "3 2 5 x - * +"
    assert [t.kind for t in postfix.tokens] == [
        TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.IDENTIFIER,
        TokenKind.OPERATOR, TokenKind.OPERATOR, TokenKind.OPERATOR,
    ]


def test_to_postfix_merges_digit_and_letter_runs():
    assert _postfix("12+345") == "12 345 +"
    assert _postfix("alpha * beta2") == "alpha beta2 *"


def test_to_postfix_equal_priority_is_left_associative():
    assert _postfix("10 - 4 - 3") == "10 4 - 3 -"
    assert _postfix("2 ^ 3 ^ 2") == "2 3 ^ 2 ^"


def test_to_postfix_skips_any_whitespace():
    assert _postfix(" 1\t+\n2 ") == "1 2 +"


def test_to_postfix_function_markers():
    postfix = ShuntingYardConverter().to_postfix("s(x)")

    assert str(postfix) == "x s"
    assert postfix.tokens[-1].kind == TokenKind.FUNCTION


def test_single_letter_s_is_never_a_variable():
    assert _postfix("s + 1") == "1 + s"


def test_longer_identifiers_starting_with_marker_letters_are_variables():
    assert _postfix("sx + cy") == "sx cy +"


def test_function_marker_ranks_below_operators():
    # Functions rank 0, so a following operator does not pop them.
    assert _postfix("c(0) + 1") == "0 1 + c"
    assert _postfix("(c(0)) + 1") == "0 c 1 +"


def test_to_postfix_empty_expression():
    assert _postfix("") == ""
    assert _postfix("   ") == ""


@pytest.mark.parametrize("expression", ["(1 + 2", "((1)", "1 + (2 * 3"])
def test_unclosed_paren_is_malformed(expression):
    with pytest.raises(MalformedExpressionError):
        ShuntingYardConverter().to_postfix(expression)


@pytest.mark.parametrize("expression", ["1 + 2)", ")(", "(1))"])
def test_unopened_paren_is_malformed(expression):
    with pytest.raises(MalformedExpressionError):
        ShuntingYardConverter().to_postfix(expression)


def test_invalid_character_reports_char_and_position():
    with pytest.raises(InvalidCharacterError) as exc_info:
        ShuntingYardConverter().to_postfix("3 $ 4")

    assert exc_info.value.char == "$"
    assert exc_info.value.position == 2
    assert exc_info.value.code == "1002"


def test_decimal_point_is_not_in_the_alphabet():
    with pytest.raises(InvalidCharacterError):
        ShuntingYardConverter().to_postfix("1.5 + 2")


@pytest.mark.parametrize("expression, char", [("٣ + 1", "٣"), ("x + é", "é"), ("2 * Ω", "Ω")])
def test_non_ascii_digits_and_letters_are_invalid(expression, char):
    with pytest.raises(InvalidCharacterError) as exc_info:
        ShuntingYardConverter().to_postfix(expression)

    assert exc_info.value.char == char
