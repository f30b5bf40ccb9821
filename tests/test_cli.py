"""Tests for the click command line."""

import logging

import pytest
from click.testing import CliRunner

from realexpr.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_eval(self, runner):
        result = runner.invoke(main, ["eval", "x*y + x", "-a", "x=2", "-a", "y=3"])
        assert result.exit_code == 0
        assert "result" in result.output
        assert "8" in result.output

    def test_eval_missing_binding(self, runner):
        result = runner.invoke(main, ["eval", "x + y", "-a", "x=1"])
        assert result.exit_code == 1
        assert "No value assigned" in result.output

    def test_eval_domain_error(self, runner):
        result = runner.invoke(main, ["eval", "log(x)", "-a", "x=0"])
        assert result.exit_code == 1
        assert "Evaluation failed" in result.output

    def test_bad_binding(self, runner):
        result = runner.invoke(main, ["eval", "x", "-a", "x"])
        assert result.exit_code == 2

    def test_parse_error(self, runner):
        result = runner.invoke(main, ["eval", "x +"])
        assert result.exit_code == 2
        assert "Could not parse" in result.output

    def test_diff(self, runner):
        result = runner.invoke(main, ["diff", "x*y", "--wrt", "x", "-a", "x=1", "-a", "y=5"])
        assert result.exit_code == 0
        assert "0*x + 1*y" in result.output
        assert "Value: 5" in result.output

    def test_diff_without_bindings(self, runner):
        result = runner.invoke(main, ["diff", "x + y", "--wrt", "y"])
        assert result.exit_code == 0
        assert "Value" not in result.output

    def test_vars(self, runner):
        result = runner.invoke(main, ["vars", "(x + y)*z"])
        assert result.exit_code == 0
        assert "x, y, z" in result.output

    def test_show(self, runner):
        result = runner.invoke(main, ["show", "y*x"])
        assert result.exit_code == 0
        assert "x*y" in result.output
        assert "Multiplication" in result.output

    def test_verbose(self, runner, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        result = runner.invoke(main, ["-v", "eval", "x", "-a", "x=4"])
        assert result.exit_code == 0
        assert calls and calls[0]["level"] == logging.DEBUG
