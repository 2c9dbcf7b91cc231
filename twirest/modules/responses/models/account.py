from typing import List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.models.sub_uris import SUB_URIS_ALIASES


class AccountSubUris(TwilioModel):
    available_phone_numbers: str = Field("", alias="AvailablePhoneNumbers")
    calls: str = Field("", alias="Calls")
    conferences: str = Field("", alias="Conferences")
    incoming_phone_numbers: str = Field("", alias="IncomingPhoneNumbers")
    notifications: str = Field("", alias="Notifications")
    outgoing_caller_ids: str = Field("", alias="OutgoingCallerIds")
    recordings: str = Field("", alias="Recordings")
    transcriptions: str = Field("", alias="Transcriptions")
    sms_messages: str = Field("", alias="SMSMessages")


class AccountResponse(TwilioModel):
    xml_tag = "Account"

    sid: str = Field("", alias="Sid")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    friendly_name: str = Field("", alias="FriendlyName")
    type: str = Field("", alias="Type")
    status: str = Field("", alias="Status")
    auth_token: str = Field("", alias="AuthToken", repr=False)
    uri: str = Field("", alias="Uri")
    owner_account_sid: str = Field("", alias="OwnerAccountSid")
    sub_resource_uris: Optional[AccountSubUris] = Field(None, **SUB_URIS_ALIASES)

    def __repr__(self) -> str:
        return f"AccountResponse(sid={self.sid}, friendly_name={self.friendly_name!r}, status={self.status})"


class AccountsResponse(Page):
    xml_tag = "Accounts"

    accounts: List[AccountResponse] = Field(default_factory=list, alias="Account")
