"""
Integration tests for the decoding command line interface.

Runs the full workflow from a JSON transaction dump to a CSV of decoded
transfers.
"""

import json
from pathlib import Path

import pandas as pd
import pytest
from click.testing import CliRunner

from erc20_decoder.cli import load_transactions, main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def input_file(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample_transactions.json"


def read_output(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, dtype=str, keep_default_na=False)


class TestDecodeCommand:
    """Test the erc20-decode command end to end."""

    def test_decodes_and_skips_failures(self, runner, input_file, tmp_path):
        output = tmp_path / "out.csv"

        result = runner.invoke(main, ["--input", str(input_file), "--output", str(output)])

        assert result.exit_code == 0, result.output
        df = read_output(output)
        assert len(df) == 5
        assert set(df["token_symbol"]) >= {"USDT", "DAI"}

    def test_transfers_only(self, runner, input_file, tmp_path):
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main,
            ["--input", str(input_file), "--output", str(output), "--transfers-only"],
        )

        assert result.exit_code == 0, result.output
        df = read_output(output)
        assert list(df["method"]) == [
            "nativeTransfer",
            "erc20Transfer",
            "erc20TransferFrom",
        ]

    def test_strict_mode_fails_on_malformed_transaction(
        self, runner, input_file, tmp_path
    ):
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main, ["--input", str(input_file), "--output", str(output), "--strict"]
        )

        assert result.exit_code == 1
        assert not output.exists()

    def test_strict_from_config(self, runner, input_file, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("decoder:\n  strict: true\n")
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main,
            [
                "--input",
                str(input_file),
                "--output",
                str(output),
                "--config",
                str(config),
            ],
        )

        assert result.exit_code == 1

    def test_no_strict_overrides_config(self, runner, input_file, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("decoder:\n  strict: true\n")
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main,
            [
                "--input",
                str(input_file),
                "--output",
                str(output),
                "--config",
                str(config),
                "--no-strict",
            ],
        )

        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_annotation_disabled_by_config(self, runner, input_file, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("decoder:\n  annotate_tokens: false\n")
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main,
            [
                "--input",
                str(input_file),
                "--output",
                str(output),
                "--config",
                str(config),
            ],
        )

        assert result.exit_code == 0, result.output
        assert set(read_output(output)["token_symbol"]) == {""}

    def test_invalid_config(self, runner, input_file, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("logging:\n  level: LOUD\n")

        result = runner.invoke(
            main,
            [
                "--input",
                str(input_file),
                "--output",
                str(tmp_path / "out.csv"),
                "--config",
                str(config),
            ],
        )

        assert result.exit_code == 1

    def test_invalid_json(self, runner, tmp_path):
        bad_input = tmp_path / "bad.json"
        bad_input.write_text("{not json")

        result = runner.invoke(
            main, ["--input", str(bad_input), "--output", str(tmp_path / "out.csv")]
        )

        assert result.exit_code == 1

    def test_null_records_are_skipped(self, runner, tmp_path):
        null_input = tmp_path / "null.json"
        null_input.write_text("[null]")
        output = tmp_path / "out.csv"

        result = runner.invoke(main, ["--input", str(null_input), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert not output.exists()

    def test_null_records_fail_cleanly_in_strict_mode(self, runner, tmp_path):
        null_input = tmp_path / "null.json"
        null_input.write_text("[null]")
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main, ["--input", str(null_input), "--output", str(output), "--strict"]
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert not output.exists()

    def test_approve_call_is_exported(self, runner, tmp_path):
        approve_input = tmp_path / "approve.json"
        approve_input.write_text(
            json.dumps(
                [
                    {
                        "from": "0x" + "11" * 20,
                        "to": "0xdac17f958d2ee523a2206206994597c13d831ec7",
                        "value": 0,
                        "input": "0x095ea7b3" + "00" * 64,
                    }
                ]
            )
        )
        output = tmp_path / "out.csv"

        result = runner.invoke(
            main, ["--input", str(approve_input), "--output", str(output), "--strict"]
        )

        assert result.exit_code == 0, result.output
        df = read_output(output)
        assert list(df["method"]) == ["unknownCall"]
        assert list(df["erc20_method"]) == ["approve"]
        assert list(df["selector"]) == ["0x095ea7b3"]


class TestLoadTransactions:
    """Test JSON input loading."""

    def test_list(self, input_file):
        assert len(load_transactions(input_file)) == 6

    def test_wrapped_object(self, tmp_path, sample_transactions):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"transactions": sample_transactions}))

        assert load_transactions(path) == sample_transactions

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "scalar.json"
        path.write_text("42")

        with pytest.raises(ValueError, match="Expected a list"):
            load_transactions(path)
