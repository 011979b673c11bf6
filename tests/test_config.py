"""Tests for configuration loading and validation."""

from dataclasses import replace

import pytest

from src.config import AppConfig, HoursConfig, PricingConfig, _validate_config


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_default_pricing_values(self):
        pricing = PricingConfig()
        assert pricing.base_rate == pytest.approx(2.5)
        assert pricing.hazard_fee == pytest.approx(50)
        assert pricing.lawn_fee == pytest.approx(99)

    def test_default_hours(self):
        hours = HoursConfig()
        assert (hours.open_hour, hours.close_hour) == (8, 17)

    def test_zero_base_rate_rejected(self):
        config = replace(AppConfig(), pricing=replace(PricingConfig(), base_rate=0.0))
        with pytest.raises(ValueError, match="QUOTE_BASE_RATE"):
            _validate_config(config)

    def test_negative_hazard_fee_rejected(self):
        config = replace(AppConfig(), pricing=replace(PricingConfig(), hazard_fee=-1.0))
        with pytest.raises(ValueError, match="HAZARD_FEE"):
            _validate_config(config)

    def test_negative_lawn_fee_rejected(self):
        config = replace(AppConfig(), pricing=replace(PricingConfig(), lawn_fee=-5.0))
        with pytest.raises(ValueError, match="LAWN_FEE"):
            _validate_config(config)

    def test_hour_out_of_range_rejected(self):
        config = replace(AppConfig(), hours=HoursConfig(open_hour=8, close_hour=24))
        with pytest.raises(ValueError, match="CLOSE_HOUR"):
            _validate_config(config)

    def test_open_after_close_rejected(self):
        config = replace(AppConfig(), hours=HoursConfig(open_hour=18, close_hour=17))
        with pytest.raises(ValueError, match="OPEN_HOUR must be before"):
            _validate_config(config)

    def test_safe_int_parsing(self):
        from src.config import _safe_int

        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_float_parsing(self):
        from src.config import _safe_float

        assert _safe_float("NONEXISTENT_VAR_12345", "3.14") == pytest.approx(3.14)

    def test_safe_float_bad_value(self, monkeypatch):
        from src.config import _safe_float

        monkeypatch.setenv("QUOTE_BASE_RATE_TEST", "cheap")
        with pytest.raises(ValueError, match="QUOTE_BASE_RATE_TEST"):
            _safe_float("QUOTE_BASE_RATE_TEST", "2.5")

    def test_safe_int_bad_value(self, monkeypatch):
        from src.config import _safe_int

        monkeypatch.setenv("OPEN_HOUR_TEST", "eight")
        with pytest.raises(ValueError, match="OPEN_HOUR_TEST"):
            _safe_int("OPEN_HOUR_TEST", "8")


class TestLogHandler:
    def test_formatted_record_includes_submission_id(self):
        import logging

        from src.config import _build_log_handler
        from src.logging_context import set_submission_id

        handler = _build_log_handler()
        set_submission_id("QUOTE-ABC123")
        record = logging.LogRecord("src.forms.handlers", logging.INFO, __file__, 1, "Quote estimated", None, None)
        assert handler.filter(record)
        assert "[QUOTE-ABC123] INFO: Quote estimated" in handler.format(record)
