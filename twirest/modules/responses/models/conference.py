from typing import List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.models.sub_uris import SUB_URIS_ALIASES


class ConferenceSubUris(TwilioModel):
    participants: str = Field("", alias="Participants")


class ConferenceResponse(TwilioModel):
    xml_tag = "Conference"

    sid: str = Field("", alias="Sid")
    account_sid: str = Field("", alias="AccountSid")
    friendly_name: str = Field("", alias="FriendlyName")
    status: str = Field("", alias="Status")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    uri: str = Field("", alias="Uri")
    sub_resource_uris: Optional[ConferenceSubUris] = Field(None, **SUB_URIS_ALIASES)


class ConferencesResponse(Page):
    xml_tag = "Conferences"

    conferences: List[ConferenceResponse] = Field(default_factory=list, alias="Conference")
