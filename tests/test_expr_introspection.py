"""
Tests for the introspection API and the command line.
"""

import json

import pytest

from mathcore.expressions.__main__ import main, parse_binding
from mathcore.expressions.introspection import (
    ExampleResult,
    describe_function,
    get_api_reference,
    get_function_info,
    list_categories,
    list_functions,
    to_json,
)


class TestIntrospection:

    def test_categories(self):
        categories = list_categories()
        for expected in ("Constants", "Elementary Functions", "Statistics",
                         "Linear Algebra", "Special Functions"):
            assert expected in categories
        assert categories == sorted(categories)

    def test_list_functions(self):
        names = list_functions()
        assert names == sorted(names)
        assert "sqrt" in names and "pi" in names

    def test_list_by_category_ignores_case(self):
        names = list_functions("statistics")
        assert "median" in names
        assert "sqrt" not in names
        assert list_functions("No Such Category") == []

    def test_function_info(self):
        info = get_function_info("hist")
        assert info["display_name"] == "Histogram"
        assert info["category"] == "Statistics"
        assert info["section"] == "Distribution"
        assert info["arities"] == [1, 2]
        assert info["signatures"][0] == "hist(data: real matrix)"
        assert len(info["examples"]) == 3

    def test_unknown_function_info(self):
        assert get_function_info("nope") is None
        assert describe_function("nope") == "Unknown function: nope"

    def test_describe(self):
        text = describe_function("sqrt")
        assert text.startswith("Square root (Elementary Functions)")
        assert "sqrt(z: complex)" in text
        assert "sqrt(-4) = 2i" in text

    def test_api_reference_is_json(self):
        reference = json.loads(to_json())
        assert reference["categories"] == list_categories()
        assert set(reference["functions"]) == set(list_functions())
        assert get_api_reference()["functions"]["pi"]["arities"] == [0]

    def test_example_result_ignores_whitespace(self):
        assert ExampleResult("f", "f(1)", "1 + 2i", "1+2i").passed
        assert not ExampleResult("f", "f(1)", "1 + 2i", "1 - 2i").passed


class TestParseBinding:

    def test_expression_value(self):
        assert parse_binding("x=2i") == ("x", 2j)
        assert parse_binding(" y = 1 + 1 ") == ("y", 2)

    def test_missing_equals(self):
        with pytest.raises(ValueError):
            parse_binding("x")

    def test_empty_name(self):
        with pytest.raises(ValueError):
            parse_binding("=3")


class TestCommandLine:

    def test_eval(self, capsys):
        assert main(["eval", "2(3+4)"]) == 0
        assert capsys.readouterr().out.strip() == "14"

    def test_eval_matrix(self, capsys):
        assert main(["eval", "transpose({1,2;3,4})"]) == 0
        assert capsys.readouterr().out.strip() == "{1, 3; 2, 4}"

    def test_eval_with_variables(self, capsys):
        assert main(["eval", "x^2 + y", "--var", "x=3", "--var", "y=2i"]) == 0
        assert capsys.readouterr().out.strip() == "9 + 2i"

    def test_eval_syntax_error(self, capsys):
        assert main(["eval", "1 + * 2"]) == 1
        err = capsys.readouterr().err
        assert "error[E101]" in err
        assert "  | 1 + * 2" in err

    def test_eval_unbound_variable(self, capsys):
        assert main(["eval", "x + 1"]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_eval_domain_error(self, capsys):
        assert main(["eval", "1/0"]) == 1
        assert "division by zero" in capsys.readouterr().err

    def test_eval_nesting_too_deep(self, capsys):
        assert main(["eval", "(" * 500 + "1" + ")" * 500]) == 1
        assert "error[E104]" in capsys.readouterr().err

    def test_list(self, capsys):
        assert main(["list", "--category", "Constants"]) == 0
        out = capsys.readouterr().out
        assert "pi" in out and "Golden ratio" in out
        assert "sqrt" not in out

    def test_list_unknown_category(self, capsys):
        assert main(["list", "-c", "Astrology"]) == 1
        assert "Unknown category" in capsys.readouterr().err

    def test_describe(self, capsys):
        assert main(["describe", "log"]) == 0
        out = capsys.readouterr().out
        assert "log(z: complex, base: complex)" in out

    def test_describe_unknown(self, capsys):
        assert main(["describe", "nope"]) == 1

    def test_examples(self, capsys):
        assert main(["examples"]) == 0
        out = capsys.readouterr().out
        assert "FAIL" not in out
        assert "examples passed" in out
