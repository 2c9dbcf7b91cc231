from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.models.sub_uris import SUB_URIS_ALIASES
from twirest.modules.responses.utils.helpers import to_datetime, to_decimal, to_int


class CallSubUris(TwilioModel):
    notifications: str = Field("", alias="Notifications")
    recordings: str = Field("", alias="Recordings")


class CallResponse(TwilioModel):
    """
    Call resource. Dates, duration and price are kept exactly as sent.
    """

    xml_tag = "Call"

    sid: str = Field("", alias="Sid")
    parent_call_sid: str = Field("", alias="ParentCallSid")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    account_sid: str = Field("", alias="AccountSid")
    to: str = Field("", alias="To")
    from_number: str = Field("", alias="From")
    phone_number_sid: str = Field("", alias="PhoneNumberSid")
    status: str = Field("", alias="Status")
    start_time: str = Field("", alias="StartTime")
    end_time: str = Field("", alias="EndTime")
    duration: str = Field("", alias="Duration")
    price: str = Field("", alias="Price")
    price_unit: str = Field("", alias="PriceUnit")
    direction: str = Field("", alias="Direction")
    answered_by: str = Field("", alias="AnsweredBy")
    forwarded_from: str = Field("", alias="ForwardedFrom")
    caller_name: str = Field("", alias="CallerName")
    uri: str = Field("", alias="Uri")
    sub_resource_uris: Optional[CallSubUris] = Field(None, **SUB_URIS_ALIASES)

    @property
    def duration_seconds(self) -> Optional[int]:
        return to_int(self.duration)

    @property
    def price_amount(self) -> Optional[Decimal]:
        return to_decimal(self.price)

    @property
    def date_created_at(self) -> Optional[datetime]:
        return to_datetime(self.date_created)

    def __repr__(self) -> str:
        return f"CallResponse(sid={self.sid}, status={self.status}, direction={self.direction})"


class CallsResponse(Page):
    xml_tag = "Calls"

    calls: List[CallResponse] = Field(default_factory=list, alias="Call")
