"""
Transport status of a response and its success classification.
"""
from http import HTTPStatus

from pydantic import BaseModel, ConfigDict

# Closed policy: any code not listed here, including other 2xx values, is a failure.
SUCCESS_STATUS_CODES = frozenset(
    {
        HTTPStatus.OK,
        HTTPStatus.CREATED,
        HTTPStatus.ACCEPTED,
        HTTPStatus.NON_AUTHORITATIVE_INFORMATION,
        HTTPStatus.NO_CONTENT,
        HTTPStatus.RESET_CONTENT,
        HTTPStatus.PARTIAL_CONTENT,
        HTTPStatus.MULTI_STATUS,
        HTTPStatus.ALREADY_REPORTED,
        HTTPStatus.IM_USED,
    }
)


def status_text(code: int) -> str:
    """Canonical reason phrase for an HTTP status code, "" when unknown."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


class ResponseStatus(BaseModel):
    """
    Status of the request (HTTP) and of the API (Twilio error code).
    """

    http: int = 0
    twilio: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.http in SUCCESS_STATUS_CODES

    @property
    def reason(self) -> str:
        return status_text(self.http)

    def __repr__(self) -> str:
        return f"ResponseStatus(http={self.http}, twilio={self.twilio})"
