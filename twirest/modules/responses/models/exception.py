"""
Error payload returned by the API when a request fails (RestException).
"""
import re
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator

from twirest.core.config import settings
from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.status import status_text

if TYPE_CHECKING:
    from twilio.base.exceptions import TwilioRestException

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
# Largest value a 64-bit signed status can hold
MAX_STATUS_CODE = 2**63 - 1


class ExceptionResponse(TwilioModel):
    """
    What the API returns if there's an issue with a request.

    `status` arrives as the numeric HTTP status ("404"); parse() replaces it
    with the reason phrase and records the number in `status_code`.
    `status_code` has no element of its own: once set, the encoder writes it
    back as the numeric `Status`, so decoding with normalization restores
    both fields.
    """

    xml_tag = "RestException"

    code: int = Field(0, alias="Code")
    detail: str = Field("", alias="Detail")
    message: str = Field("", alias="Message")
    more_info: str = Field("", alias="MoreInfo")
    status: str = Field("", alias="Status")
    status_code: int = Field(0, exclude=True)

    @field_validator("code", mode="before")
    @classmethod
    def empty_code_is_zero(cls, v):
        if isinstance(v, str) and not v.strip():
            return 0
        return v

    def error(self) -> str:
        return f"{self.message} ({self.more_info})"

    def __str__(self) -> str:
        return self.error()

    def parse(self) -> "ExceptionResponse":
        """
        Normalize `status` into its reason phrase.

        Non-numeric values and numbers outside 1..MAX_STATUS_CODE are left
        untouched, so calling this on an already normalized record is a no-op.
        """
        if not _DECIMAL_INT.fullmatch(self.status):
            return self
        code = int(self.status)
        if 0 < code <= MAX_STATUS_CODE:
            self.status = status_text(code)
            self.status_code = code
        return self

    def xml_value(self, name: str) -> Any:
        if name == "status" and self.status_code > 0:
            return str(self.status_code)
        return super().xml_value(name)

    @classmethod
    def from_twilio_exception(cls, exc: "TwilioRestException") -> "ExceptionResponse":
        """
        Build a normalized record from the official SDK's TwilioRestException.
        """
        code = exc.code or 0
        more_info = getattr(exc, "more_info", None) or ""
        if not more_info and code:
            more_info = f"{settings.twilio.error_docs_url.rstrip('/')}/{code}"
        details = getattr(exc, "details", None) or ""
        record = cls(
            code=code,
            detail=details if isinstance(details, str) else str(details),
            message=exc.msg or "",
            more_info=more_info,
            status=str(exc.status),
        )
        return record.parse()

    def __repr__(self) -> str:
        return (
            f"ExceptionResponse(code={self.code}, status={self.status!r}, "
            f"message={self.message!r})"
        )
