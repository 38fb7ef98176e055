"""Unit tests for environment-driven configuration."""

import logging
from unittest.mock import patch

from wifiscanner.config import _get_env_bool, _get_env_choice, _get_env_float
from wifiscanner.constants import LINUX_SCAN_TOOLS, TOOL_IW


class TestGetEnvChoice:
    """Tests for _get_env_choice."""

    def test_default_when_unset(self):
        with patch.dict('os.environ', {}, clear=True):
            assert _get_env_choice('LINUX_TOOL', TOOL_IW, LINUX_SCAN_TOOLS) == 'iw'

    def test_valid_value_normalised(self):
        """Test a permitted value is accepted case-insensitively."""
        with patch.dict('os.environ', {'WIFISCANNER_LINUX_TOOL': 'IWLIST'}):
            assert _get_env_choice('LINUX_TOOL', TOOL_IW, LINUX_SCAN_TOOLS) == 'iwlist'

    def test_invalid_value_falls_back(self, caplog):
        """Test an unknown tool falls back to the default with a warning."""
        with patch.dict('os.environ', {'WIFISCANNER_LINUX_TOOL': 'bogus'}), \
                caplog.at_level(logging.WARNING, logger='wifiscanner.config'):
            value = _get_env_choice('LINUX_TOOL', TOOL_IW, LINUX_SCAN_TOOLS)

        assert value == 'iw'
        assert "WIFISCANNER_LINUX_TOOL='bogus'" in caplog.text


class TestGetEnvTyped:
    """Tests for the float and bool helpers."""

    def test_float_parsed(self):
        with patch.dict('os.environ', {'WIFISCANNER_SCAN_TIMEOUT': '12.5'}):
            assert _get_env_float('SCAN_TIMEOUT', 30.0) == 12.5

    def test_float_invalid_uses_default(self):
        with patch.dict('os.environ', {'WIFISCANNER_SCAN_TIMEOUT': 'soon'}):
            assert _get_env_float('SCAN_TIMEOUT', 30.0) == 30.0

    def test_bool(self):
        with patch.dict('os.environ', {'WIFISCANNER_DEBUG': 'yes'}):
            assert _get_env_bool('DEBUG', False) is True
        with patch.dict('os.environ', {}, clear=True):
            assert _get_env_bool('DEBUG', False) is False
