from typing import List

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page


class NotificationResponse(TwilioModel):
    xml_tag = "Notification"

    sid: str = Field("", alias="Sid")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    account_sid: str = Field("", alias="AccountSid")
    call_sid: str = Field("", alias="CallSid")
    api_version: str = Field("", alias="ApiVersion")
    log: str = Field("", alias="Log")
    error_code: str = Field("", alias="ErrorCode")
    more_info: str = Field("", alias="MoreInfo")
    message_text: str = Field("", alias="MessageText")
    message_date: str = Field("", alias="MessageDate")
    request_url: str = Field("", alias="RequestUrl")
    request_method: str = Field("", alias="RequestMethod")
    uri: str = Field("", alias="Uri")
    # Only present when a single notification is read
    request_variables: str = Field("", alias="RequestVariables")
    response_headers: str = Field("", alias="ResponseHeaders")
    response_body: str = Field("", alias="ResponseBody")


class NotificationsResponse(Page):
    xml_tag = "Notifications"

    notifications: List[NotificationResponse] = Field(
        default_factory=list, alias="Notification"
    )
