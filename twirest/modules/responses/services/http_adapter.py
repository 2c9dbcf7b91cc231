"""
Adapt HTTP responses from the client into response envelopes.

Requests are issued elsewhere; this module only reads what came back.
"""

import requests

from twirest.core.config import settings
from twirest.core.utils import get_logger
from twirest.modules.responses.models.recording import RecordingAudio
from twirest.modules.responses.models.response import TwilioResponse
from twirest.modules.responses.models.status import ResponseStatus
from twirest.modules.responses.services.xml_decoder import decode_response

logger = get_logger(__name__)


def is_audio(content_type: str) -> bool:
    content_type = (content_type or "").lower()
    return any(content_type.startswith(prefix) for prefix in settings.twilio.audio_content_types)


def from_http_response(response: requests.Response) -> TwilioResponse:
    """
    Build an envelope from an HTTP response.

    Audio bodies are wrapped, unread, in RecordingAudio; request them with
    stream=True and close the audio once consumed. Any other body is decoded
    as XML.

    Args:
        response: requests.Response, or any object with status_code,
            headers, content and raw

    Returns:
        TwilioResponse for the response

    Raises:
        DecodeError: If a non-audio body is not well-formed XML
    """
    content_type = response.headers.get("Content-Type", "")
    if is_audio(content_type):
        audio = RecordingAudio(response.raw, content_type=content_type)
        logger.debug(
            "Received recording audio",
            http_status=response.status_code,
            content_type=content_type,
        )
        return TwilioResponse.from_resource(audio, ResponseStatus(http=response.status_code))

    envelope = decode_response(response.content, http_status=response.status_code)
    if not envelope.ok:
        logger.warning(
            "Request failed",
            http_status=envelope.status.http,
            twilio_status=envelope.status.twilio,
            error=str(envelope.exception) if envelope.exception else None,
        )
    return envelope
