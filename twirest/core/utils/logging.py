"""
Logging utilities.

Modules obtain loggers through get_logger(); nothing is configured on import.
Applications that want twirest's console/JSON output call configure_logging()
once at startup.
"""

import logging
import os
import re
import sys
from typing import Any, Dict

import colorama
import structlog

from twirest.core.config import settings

# Regex patterns for sensitive data
PHONE_REGEX = re.compile(r'(?:\+)?\b[1-9]\d{7,14}\b')
TOKEN_REGEX = re.compile(r'\b[0-9a-f]{32}\b')

PHONE_KEYS = ('phone', 'from', 'to', 'caller', 'forwarded')
TOKEN_KEYS = ('auth_token', 'authtoken', 'token')


def mask_sensitive(text: str) -> str:
    """Replace auth tokens and phone numbers in free text."""
    if not text:
        return text
    text = TOKEN_REGEX.sub('[TOKEN_REDACTED]', text)
    return PHONE_REGEX.sub('[PHONE_REDACTED]', text)


class SensitiveDataMaskingProcessor:
    """
    Structlog processor that masks auth tokens and phone numbers in log events.
    Active in production only.
    """
    def __call__(self, logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        if settings.api.environment != "production":
            return event_dict

        for key, value in event_dict.items():
            if not isinstance(value, str):
                continue
            lowered = key.lower()
            if any(k in lowered for k in TOKEN_KEYS):
                event_dict[key] = '[TOKEN_REDACTED]'
            elif key == 'event':
                event_dict[key] = mask_sensitive(value)
            # Sids contain long digit runs; only named phone fields are masked
            elif 'sid' not in lowered and any(k in lowered for k in PHONE_KEYS):
                event_dict[key] = PHONE_REGEX.sub('[PHONE_REDACTED]', value)
        return event_dict


LEVEL_COLORS = {
    'debug': colorama.Fore.CYAN,
    'info': colorama.Fore.GREEN,
    'warning': colorama.Fore.YELLOW,
    'error': colorama.Fore.RED,
    'critical': colorama.Fore.RED + colorama.Style.BRIGHT,
}


def render_colored(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> str:
    """Render '<LEVEL> <logger> <event> key=value ...' with the level coloured."""
    level = event_dict.pop('level', method_name).lower()
    color = LEVEL_COLORS.get(level, '')
    head = [event_dict.pop('timestamp', ''), f"{color}{level.upper()}{colorama.Style.RESET_ALL}"]
    head += [event_dict.pop('logger', ''), str(event_dict.pop('event', ''))]
    pairs = [f"{k}={v!r}" for k, v in sorted(event_dict.items())]
    return ' '.join(part for part in head + pairs if part)


def configure_logging():
    """
    Configure structlog and the root stdlib logger for twirest output.

    Opt-in: the library never calls this itself. Colour console output in
    development or debug mode, JSON lines otherwise.
    """
    if settings.api.environment == "development" or settings.api.debug:
        # FORCE_COLOR=true keeps colours when writing to files/pipes
        force_color = os.getenv("FORCE_COLOR", "false").lower() == "true"
        colorama.init(strip=False if force_color else None)
        renderer = render_colored
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            SensitiveDataMaskingProcessor(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log.level.upper(), logging.INFO),
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy structlog logger; output follows whatever configuration the
        host application has installed.
    """
    return structlog.get_logger(name)
