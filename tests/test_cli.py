"""Tests for the CLI implementation."""

import json

import pytest
from typer.testing import CliRunner

from strictconv.cli import app, coerce_arg, coerce_args


def reject_constant(name):
    raise ValueError(f"non-standard JSON constant {name}")


class TestParseCommand:
    """Test the parse command."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    def test_single_value_json_pretty(self, runner):
        result = runner.invoke(app, ["parse", "int32", "42"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload == {"type": "int32", "input": "42", "value": 42, "success": True}

    def test_single_invalid_value(self, runner):
        """A rejected value is reported and sets a failing exit code."""
        result = runner.invoke(app, ["parse", "uint32", "4294967296"])

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["success"] is False
        assert "value" not in payload

    def test_multiple_values_jsonl(self, runner):
        result = runner.invoke(app, ["parse", "double", "1.5", "2.5"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert [json.loads(ln)["value"] for ln in lines] == [1.5, 2.5]

    def test_force_jsonl_single_value(self, runner):
        result = runner.invoke(app, ["parse", "--jsonl", "bool", "true"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["value"] is True

    def test_base_option(self, runner):
        result = runner.invoke(app, ["parse", "--base", "16", "uint64", "ff"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["value"] == 255

    def test_fields_option(self, runner):
        result = runner.invoke(app, ["parse", "--fields", "value", "int64", "--", "-5"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"value": -5, "success": True}

    def test_stdin_mode(self, runner):
        """'-' reads one value per line from stdin."""
        result = runner.invoke(app, ["parse", "int32", "-"], input="1\n2\nx\n")

        assert result.exit_code == 1
        objs = [json.loads(ln) for ln in result.stdout.strip().splitlines()]
        assert [o["success"] for o in objs] == [True, True, False]

    def test_output_file(self, runner, tmp_path):
        out = tmp_path / "out.jsonl"
        result = runner.invoke(app, ["parse", "-o", str(out), "int32", "7", "8"])

        assert result.exit_code == 0
        lines = out.read_text(encoding="utf-8").splitlines()
        assert [json.loads(ln)["value"] for ln in lines] == [7, 8]

    def test_no_values(self, runner):
        result = runner.invoke(app, ["parse", "int32"])
        assert result.exit_code == 1

    def test_unknown_type(self, runner):
        result = runner.invoke(app, ["parse", "int128", "1"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("text,rendered", [("inf", "inf"), ("-Infinity", "-inf"), ("nan", "nan")])
    def test_non_finite_values_are_strict_json(self, runner, text, rendered):
        """inf and nan are emitted as strings, never as bare JSON constants."""
        result = runner.invoke(app, ["parse", "double", "--", text])

        assert result.exit_code == 0
        payload = json.loads(result.stdout, parse_constant=reject_constant)
        assert payload["value"] == rendered

    def test_non_finite_values_jsonl(self, runner):
        result = runner.invoke(app, ["parse", "float", "inf", "1.5"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert [json.loads(ln, parse_constant=reject_constant)["value"] for ln in lines] == ["inf", 1.5]


class TestFormatCommand:
    """Test the format command."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_truncated(self, runner):
        result = runner.invoke(app, ["format", "3", "hello"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"length": 2, "at_capacity": True, "text": "he"}

    def test_numeric_arguments(self, runner):
        result = runner.invoke(app, ["format", "32", "%d Hz, %.1f ms", "48000", "2.5"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["text"] == "48000 Hz, 2.5 ms"
        assert payload["at_capacity"] is False

    def test_text_conversion_keeps_argument(self, runner):
        """Arguments for %s are passed through verbatim, even when numeric."""
        result = runner.invoke(app, ["format", "32", "id=%s", "0012"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["text"] == "id=0012"

    def test_bad_format(self, runner):
        with pytest.warns(RuntimeWarning):
            result = runner.invoke(app, ["format", "16", "%d", "abc"])
        assert result.exit_code == 1

    def test_zero_size_rejected(self, runner):
        """Option validation rejects the size before the formatter would abort."""
        result = runner.invoke(app, ["format", "0", "hello"])
        assert result.exit_code == 2


class TestCoerceArg:
    """Test format argument coercion."""

    def test_coercion(self):
        assert coerce_arg("12") == 12
        assert coerce_arg("0.5") == 0.5
        assert coerce_arg("abc") == "abc"

    def test_args_follow_conversions(self):
        """Only arguments consumed by numeric conversions become numbers."""
        assert coerce_args("%s=%d", ["007", "007"]) == ["007", 7]
        assert coerce_args("%.2f %r", ["1", "2"]) == [1, "2"]
        assert coerce_args("100%% %x", ["255"]) == [255]

    def test_star_width_consumes_argument(self):
        assert coerce_args("%*d|%-*s", ["5", "42", "3", "ab"]) == [5, 42, 3, "ab"]

    def test_extra_args_stay_text(self):
        assert coerce_args("%d", ["1", "2"]) == [1, "2"]
