"""Tests for the tokenizer."""

import pytest


class TestTokenize:
    """Test tokenize() classification and scanning."""

    def test_number_function_call(self):
        from equations.tokenizer import Token, tokenize

        tokens = tokenize("3.5+sin(x)")

        assert tokens == [
            Token("number", "3.5", 3.5),
            Token("operator", "+"),
            Token("function", "sin"),
            Token("lparen", "("),
            Token("variable", "x"),
            Token("rparen", ")"),
        ]

    def test_whitespace_and_unknown_characters_skipped(self):
        from equations.tokenizer import tokenize

        tokens = tokenize(" 2 # 3 ")
        assert [t.kind for t in tokens] == ["number", "number"]
        assert [t.value for t in tokens] == [2.0, 3.0]

    def test_equals_token(self):
        from equations.tokenizer import tokenize, EQUALS

        tokens = tokenize("y=x")
        assert tokens[1].kind == EQUALS

    def test_all_function_names(self):
        from equations.tokenizer import tokenize, FUNCTION

        for name in ("sin", "cos", "tan", "log", "ln", "exp"):
            tokens = tokenize(name)
            assert len(tokens) == 1
            assert tokens[0].kind == FUNCTION
            assert tokens[0].text == name

    def test_longest_letter_run_is_variable(self):
        from equations.tokenizer import tokenize, VARIABLE

        tokens = tokenize("sinx")
        assert len(tokens) == 1
        assert tokens[0].kind == VARIABLE
        assert tokens[0].text == "sinx"

    def test_letters_and_digits_split(self):
        from equations.tokenizer import tokenize

        tokens = tokenize("2x")
        assert [t.kind for t in tokens] == ["number", "variable"]

    def test_minus_is_operator(self):
        from equations.tokenizer import tokenize, OPERATOR

        tokens = tokenize("-3")
        assert tokens[0].kind == OPERATOR
        assert tokens[0].text == "-"
        assert tokens[1].value == 3.0

    def test_max_tokens_bound(self):
        from equations.tokenizer import tokenize
        from equations.defaults import MAX_TOKENS

        tokens = tokenize("1+" * 200)
        assert len(tokens) == MAX_TOKENS

    def test_empty(self):
        from equations.tokenizer import tokenize

        assert tokenize("") == []


class TestParseNumber:
    """Test atof-style number parsing."""

    def test_plain(self):
        from equations.tokenizer import parse_number

        assert parse_number("3.5") == 3.5
        assert parse_number("42") == 42.0
        assert parse_number(".25") == 0.25
        assert parse_number("5.") == 5.0

    def test_longest_prefix(self):
        from equations.tokenizer import parse_number

        assert parse_number("1.2.3") == pytest.approx(1.2)

    def test_no_digits(self):
        from equations.tokenizer import parse_number

        assert parse_number(".") == 0.0
        assert parse_number("..") == 0.0


class TestSplitEquation:
    """Test splitting at '='."""

    def test_split(self):
        from equations.tokenizer import split_equation

        assert split_equation("y=x") == ("y", "x")

    def test_no_equals(self):
        from equations.tokenizer import split_equation

        assert split_equation("x^2+y^2-4") == ("x^2+y^2-4", "0")

    def test_first_equals_wins(self):
        from equations.tokenizer import split_equation

        assert split_equation("a=b=c") == ("a", "b=c")

    def test_empty_right(self):
        from equations.tokenizer import split_equation

        assert split_equation("y=") == ("y", "")


class TestFormatTokens:

    def test_format(self):
        from equations.tokenizer import tokenize, format_tokens

        text = format_tokens(tokenize("3.5+sin(x)"))
        assert text == "Number(3.5) Operator('+') Function('sin') LParen Variable('x') RParen"
