from typing import List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.utils.helpers import to_int


class QueueResponse(TwilioModel):
    xml_tag = "Queue"

    sid: str = Field("", alias="Sid")
    friendly_name: str = Field("", alias="FriendlyName")
    current_size: str = Field("", alias="CurrentSize")
    max_size: str = Field("", alias="MaxSize")
    average_wait_time: str = Field("", alias="AverageWaitTime")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    uri: str = Field("", alias="Uri")

    @property
    def current_size_count(self) -> Optional[int]:
        return to_int(self.current_size)

    @property
    def max_size_count(self) -> Optional[int]:
        return to_int(self.max_size)


class QueuesResponse(Page):
    xml_tag = "Queues"

    queues: List[QueueResponse] = Field(default_factory=list, alias="Queue")


class QueueMemberResponse(TwilioModel):
    xml_tag = "QueueMember"

    call_sid: str = Field("", alias="CallSid")
    date_enqueued: str = Field("", alias="DateEnqueued")
    wait_time: str = Field("", alias="WaitTime")
    position: str = Field("", alias="Position")


class QueueMembersResponse(Page):
    xml_tag = "QueueMembers"

    queue_members: List[QueueMemberResponse] = Field(default_factory=list, alias="QueueMember")
