"""Twilio REST API response models and their XML codec."""

from .enums import ResourceKind
from .models import ExceptionResponse, ResponseStatus, TwilioResponse
from .services import decode_response, from_http_response

__all__ = [
    "ExceptionResponse",
    "ResourceKind",
    "ResponseStatus",
    "TwilioResponse",
    "decode_response",
    "from_http_response",
]
