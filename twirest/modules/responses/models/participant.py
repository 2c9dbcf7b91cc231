from typing import List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.utils.helpers import to_bool


class ParticipantResponse(TwilioModel):
    xml_tag = "Participant"

    conference_sid: str = Field("", alias="ConferenceSid")
    account_sid: str = Field("", alias="AccountSid")
    call_sid: str = Field("", alias="CallSid")
    muted: str = Field("", alias="Muted")
    end_conference_on_exit: str = Field("", alias="EndConferenceOnExit")
    start_conference_on_enter: str = Field("", alias="StartConferenceOnEnter")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    uri: str = Field("", alias="Uri")

    @property
    def is_muted(self) -> Optional[bool]:
        return to_bool(self.muted)


class ParticipantsResponse(Page):
    xml_tag = "Participants"

    participants: List[ParticipantResponse] = Field(default_factory=list, alias="Participant")
