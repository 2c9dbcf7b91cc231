import os
import subprocess
import sys
from unittest.mock import patch

from twirest.core.utils.logging import (SensitiveDataMaskingProcessor, get_logger,
                                        mask_sensitive, render_colored)

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))

IMPORT_SCRIPT = """
import logging
import structlog
handlers_before = list(logging.getLogger().handlers)
import twirest
from twirest.modules.responses.services import decode_response, from_http_response
from twirest.core.utils import get_logger
get_logger("host").info("hello")
print(structlog.is_configured(), logging.getLogger().handlers == handlers_before)
"""

CONFIGURE_SCRIPT = """
import logging
import structlog
from twirest.core.utils import configure_logging
configure_logging()
print(structlog.is_configured(), len(logging.getLogger().handlers) > 0)
"""


def _run(script, tmp_path):
    env = dict(os.environ, PYTHONPATH=PROJECT_ROOT)
    return subprocess.run(
        [sys.executable, "-c", script], cwd=tmp_path, env=env, capture_output=True, text=True
    )


class TestSensitiveDataMasking:
    @patch("twirest.core.utils.logging.settings")
    def test_masks_in_production(self, mock_settings):
        mock_settings.api.environment = "production"
        processor = SensitiveDataMaskingProcessor()

        event = processor(
            None,
            "info",
            {
                "event": "Decoded response",
                "auth_token": "0123456789abcdef0123456789abcdef",
                "to": "+14155551212",
                "call_sid": "CA12345678901234",
            },
        )

        assert event["auth_token"] == "[TOKEN_REDACTED]"
        assert event["to"] == "[PHONE_REDACTED]"
        assert event["call_sid"] == "CA12345678901234"
        assert event["event"] == "Decoded response"

    @patch("twirest.core.utils.logging.settings")
    def test_masks_event_text_in_production(self, mock_settings):
        mock_settings.api.environment = "production"
        event = SensitiveDataMaskingProcessor()(
            None, "warning", {"event": "Unexpected reply for +14155551212"}
        )
        assert event["event"] == "Unexpected reply for [PHONE_REDACTED]"

    @patch("twirest.core.utils.logging.settings")
    def test_no_masking_outside_production(self, mock_settings):
        mock_settings.api.environment = "development"
        event = SensitiveDataMaskingProcessor()(
            None, "info", {"event": "call +14155551212", "to": "+14155551212"}
        )
        assert event["to"] == "+14155551212"
        assert event["event"] == "call +14155551212"

    def test_mask_sensitive_text(self):
        masked = mask_sensitive("call from +14155551212 token 0123456789abcdef0123456789abcdef")
        assert "+14155551212" not in masked
        assert "[PHONE_REDACTED]" in masked
        assert "[TOKEN_REDACTED]" in masked

    def test_mask_sensitive_empty(self):
        assert mask_sensitive("") == ""


class TestRenderColored:
    def test_renders_event_and_pairs(self):
        line = render_colored(
            None, "info", {"event": "Decoded", "logger": "twirest", "level": "info", "kind": "Call"}
        )
        assert "INFO" in line
        assert "twirest" in line
        assert "Decoded" in line
        assert "kind='Call'" in line


class TestLoggerSetup:
    def test_get_logger(self):
        logger = get_logger("twirest.test")
        assert hasattr(logger, "info")

    def test_import_leaves_logging_untouched(self, tmp_path):
        result = _run(IMPORT_SCRIPT, tmp_path)
        assert result.returncode == 0, result.stderr
        assert result.stdout.split()[-2:] == ["False", "True"]

    def test_configure_logging_is_opt_in(self, tmp_path):
        result = _run(CONFIGURE_SCRIPT, tmp_path)
        assert result.returncode == 0, result.stderr
        assert result.stdout.split() == ["True", "True"]
