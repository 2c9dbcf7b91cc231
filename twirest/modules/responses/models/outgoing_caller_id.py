from typing import List

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page


class OutgoingCallerIdResponse(TwilioModel):
    xml_tag = "OutgoingCallerId"

    sid: str = Field("", alias="Sid")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    friendly_name: str = Field("", alias="FriendlyName")
    account_sid: str = Field("", alias="AccountSid")
    phone_number: str = Field("", alias="PhoneNumber")
    uri: str = Field("", alias="Uri")


class OutgoingCallerIdsResponse(Page):
    xml_tag = "OutgoingCallerIds"

    outgoing_caller_ids: List[OutgoingCallerIdResponse] = Field(
        default_factory=list, alias="OutgoingCallerId"
    )


class ValidationRequestResponse(TwilioModel):
    """Returned when a new outgoing caller id is submitted for validation."""

    xml_tag = "ValidationRequest"

    account_sid: str = Field("", alias="AccountSid")
    phone_number: str = Field("", alias="PhoneNumber")
    friendly_name: str = Field("", alias="FriendlyName")
    validation_code: str = Field("", alias="ValidationCode")
    call_sid: str = Field("", alias="CallSid")
