"""Tests for the command-line entry point."""

import pytest

from depthsim.cli import build_parser, format_metrics, main


class TestParser:
    """Argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["--quantity", "1"])

        assert args.venue == "okx"
        assert args.symbol == "BTC-USDT"
        assert args.side == "buy"
        assert args.order_type == "market"
        assert args.price is None
        assert args.timing == "immediate"
        assert args.snapshots == 1

    def test_rejects_unknown_timing(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--quantity", "1", "--timing", "1m"])

    def test_log_level_case_insensitive(self):
        args = build_parser().parse_args(["--quantity", "1", "--log-level", "debug"])

        assert args.log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--quantity", "1", "--log-level", "VERBOSE"])


class TestMain:
    """End-to-end runs against the synthetic feed."""

    def test_market_preview(self, capsys):
        code = main(["--quantity", "0.5", "--seed", "7", "--snapshots", "2"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("snapshot") == 2
        assert "Average fill price" in out
        assert "spread" in out

    def test_limit_preview(self, capsys):
        code = main(
            [
                "--symbol", "ETH-USDT",
                "--side", "sell",
                "--type", "limit",
                "--price", "2400",
                "--quantity", "3",
                "--timing", "10s",
                "--seed", "1",
            ]
        )

        assert code == 0
        assert "Est. fill time" in capsys.readouterr().out

    def test_invalid_order(self, capsys):
        code = main(["--type", "limit", "--quantity", "1", "--seed", "1"])

        assert code == 2
        assert "limit orders require a limit_price" in capsys.readouterr().err

    def test_unknown_env_log_level(self, capsys, monkeypatch):
        monkeypatch.setenv("DEPTHSIM_LOG_LEVEL", "LOUD")

        code = main(["--quantity", "1", "--seed", "1"])

        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_flag_overrides_bad_env_log_level(self, monkeypatch):
        monkeypatch.setenv("DEPTHSIM_LOG_LEVEL", "LOUD")

        assert main(["--quantity", "0.5", "--seed", "1", "--log-level", "warning"]) == 0


class TestFormatMetrics:
    """Tests for format_metrics."""

    def test_no_preview(self):
        assert "No preview" in format_metrics(None)
