from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.models.sub_uris import SUB_URIS_ALIASES
from twirest.modules.responses.utils.helpers import to_decimal


class UsageRecordSubUris(TwilioModel):
    daily: str = Field("", alias="Daily")
    monthly: str = Field("", alias="Monthly")
    yearly: str = Field("", alias="Yearly")
    all_time: str = Field("", alias="AllTime")
    today: str = Field("", alias="Today")
    yesterday: str = Field("", alias="Yesterday")
    this_month: str = Field("", alias="ThisMonth")
    last_month: str = Field("", alias="LastMonth")


class UsageRecordResponse(TwilioModel):
    xml_tag = "UsageRecord"

    category: str = Field("", alias="Category")
    description: str = Field("", alias="Description")
    account_sid: str = Field("", alias="AccountSid")
    start_date: str = Field("", alias="StartDate")
    end_date: str = Field("", alias="EndDate")
    usage: str = Field("", alias="Usage")
    usage_unit: str = Field("", alias="UsageUnit")
    count: str = Field("", alias="Count")
    count_unit: str = Field("", alias="CountUnit")
    price: str = Field("", alias="Price")
    price_unit: str = Field("", alias="PriceUnit")
    uri: str = Field("", alias="Uri")
    sub_resource_uris: Optional[UsageRecordSubUris] = Field(None, **SUB_URIS_ALIASES)

    @property
    def price_amount(self) -> Optional[Decimal]:
        return to_decimal(self.price)


class UsageRecordsResponse(Page):
    xml_tag = "UsageRecords"

    usage_records: List[UsageRecordResponse] = Field(default_factory=list, alias="UsageRecord")
