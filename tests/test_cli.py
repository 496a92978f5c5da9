"""Tests for the command-line interface."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cli import OUT_OF_RANGE, app

runner = CliRunner()


class TestCompute:

    def test_arguments(self):
        result = runner.invoke(app, ["compute", "123", "877", "10"])
        assert result.exit_code == 0
        assert result.stdout == "1000 107871 0\n"

    def test_stdin(self):
        result = runner.invoke(app, ["compute"], input="999 999 10\n")
        assert result.exit_code == 0
        assert result.stdout == "1998 998001 1\n"

    def test_stdin_across_lines(self):
        result = runner.invoke(app, ["compute"], input="111\n1\n2\n")
        assert result.exit_code == 0
        assert result.stdout == "1000 111 111\n"

    def test_remainder_flag(self):
        result = runner.invoke(app, ["compute", "100", "7", "10", "--remainder"])
        assert result.exit_code == 0
        assert result.stdout == "107 700 14 2\n"

    def test_verified_calculator(self):
        result = runner.invoke(app, ["compute", "12", "2", "3", "--verify"])
        assert result.exit_code == 0
        assert result.stdout == "21 101 2\n"

    def test_big_operands(self):
        a, b = "12345678901234567890", "98765432109876543210"
        result = runner.invoke(app, ["compute", a, b, "10"])
        total, product, quotient = result.stdout.split()
        assert int(total) == int(a) + int(b)
        assert int(product) == int(a) * int(b)
        assert quotient == "0"


class TestComputeErrors:

    @pytest.mark.parametrize(
        "args",
        [
            ["compute", "1", "1", "11"],
            ["compute", "1", "1", "1"],
            ["compute", "1" * 101, "1", "10"],
            ["compute", "12", "1", "2"],
            ["compute", "1x", "1", "10"],
        ],
    )
    def test_out_of_range(self, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert OUT_OF_RANGE in result.output

    def test_too_few_tokens_on_stdin(self):
        result = runner.invoke(app, ["compute"], input="1 2\n")
        assert result.exit_code == 1
        assert OUT_OF_RANGE in result.output

    def test_non_integer_base_on_stdin(self):
        result = runner.invoke(app, ["compute"], input="1 2 ten\n")
        assert result.exit_code == 1
        assert OUT_OF_RANGE in result.output

    @pytest.mark.parametrize("args", [["compute", "123"], ["compute", "123", "877"]])
    def test_partial_arguments_do_not_read_stdin(self, args):
        result = runner.invoke(app, args, input="5 6 10\n")
        assert result.exit_code == 1
        assert OUT_OF_RANGE in result.output
        assert "11 30 0" not in result.output

    def test_non_integer_base_argument(self):
        result = runner.invoke(app, ["compute", "1", "1", "ten"])
        assert result.exit_code == 1
        assert OUT_OF_RANGE in result.output

    def test_division_by_zero_keeps_sum_and_product(self):
        result = runner.invoke(app, ["compute", "12345", "0", "10"])
        assert result.exit_code == 1
        assert result.stdout.splitlines()[0] == "12345 0"
        assert "Division by zero" in result.output
