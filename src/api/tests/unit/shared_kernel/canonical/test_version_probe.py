"""Unit tests for the version registry probe."""

from unittest.mock import MagicMock

import structlog

from shared_kernel.canonical.observability import DefaultVersionRegistryProbe


class TestDefaultVersionRegistryProbe:
    def test_creates_with_custom_logger(self):
        custom_logger = structlog.get_logger()
        probe = DefaultVersionRegistryProbe(logger=custom_logger)

        assert probe._logger is custom_logger

    def test_logs_mismatch_at_warning_level(self):
        mock_logger = MagicMock()
        probe = DefaultVersionRegistryProbe(logger=mock_logger)

        probe.version_mismatch(
            model_type="CustomerRecord",
            declared_version="customer-record/2.0",
            current_version="1.0",
        )

        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "canonical_version_mismatch"
        assert call_args[1]["model_type"] == "CustomerRecord"
        assert call_args[1]["declared_version"] == "customer-record/2.0"
        assert call_args[1]["current_version"] == "1.0"
