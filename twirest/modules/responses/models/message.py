from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.utils.helpers import to_decimal, to_int


class MessageResponse(TwilioModel):
    xml_tag = "Message"

    sid: str = Field("", alias="Sid")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    date_sent: str = Field("", alias="DateSent")
    account_sid: str = Field("", alias="AccountSid")
    to: str = Field("", alias="To")
    from_number: str = Field("", alias="From")
    body: str = Field("", alias="Body")
    num_segments: str = Field("", alias="NumSegments")
    status: str = Field("", alias="Status")
    direction: str = Field("", alias="Direction")
    price: str = Field("", alias="Price")
    price_unit: str = Field("", alias="PriceUnit")
    api_version: str = Field("", alias="ApiVersion")
    uri: str = Field("", alias="Uri")

    @property
    def segment_count(self) -> Optional[int]:
        return to_int(self.num_segments)

    @property
    def price_amount(self) -> Optional[Decimal]:
        return to_decimal(self.price)

    def __repr__(self) -> str:
        return f"MessageResponse(sid={self.sid}, status={self.status}, direction={self.direction})"


class MessagesResponse(Page):
    xml_tag = "Messages"

    messages: List[MessageResponse] = Field(default_factory=list, alias="Message")
