"""
twirest: response data model for the Twilio REST API (2010-04-01).
"""

from twirest.core.utils.exceptions import (AppError, DecodeError, ResourceKindError,
                                           TwilioAPIError)
from twirest.modules.responses import (ExceptionResponse, ResourceKind, ResponseStatus,
                                       TwilioResponse, decode_response,
                                       from_http_response)

__version__ = "0.1.0"

__all__ = [
    "AppError",
    "DecodeError",
    "ExceptionResponse",
    "ResourceKind",
    "ResourceKindError",
    "ResponseStatus",
    "TwilioAPIError",
    "TwilioResponse",
    "decode_response",
    "from_http_response",
]
