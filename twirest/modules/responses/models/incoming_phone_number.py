from typing import List

from pydantic import Field

from twirest.modules.responses.models.capabilities import CapabilitiesMixin
from twirest.modules.responses.models.page import Page


class IncomingPhoneNumberResponse(CapabilitiesMixin):
    xml_tag = "IncomingPhoneNumber"

    sid: str = Field("", alias="Sid")
    account_sid: str = Field("", alias="AccountSid")
    friendly_name: str = Field("", alias="FriendlyName")
    phone_number: str = Field("", alias="PhoneNumber")
    voice_url: str = Field("", alias="VoiceUrl")
    voice_method: str = Field("", alias="VoiceMethod")
    voice_fallback_url: str = Field("", alias="VoiceFallbackUrl")
    voice_fallback_method: str = Field("", alias="VoiceFallbackMethod")
    status_callback: str = Field("", alias="StatusCallback")
    status_callback_method: str = Field("", alias="StatusCallbackMethod")
    voice_caller_id_lookup: str = Field("", alias="VoiceCallerIdLookup")
    voice_application_sid: str = Field("", alias="VoiceApplicationSid")
    date_created: str = Field("", alias="DateCreated")
    date_updated: str = Field("", alias="DateUpdated")
    sms_url: str = Field("", alias="SmsUrl")
    sms_method: str = Field("", alias="SmsMethod")
    sms_fallback_url: str = Field("", alias="SmsFallbackUrl")
    sms_fallback_method: str = Field("", alias="SmsFallbackMethod")
    sms_application_sid: str = Field("", alias="SmsApplicationSid")
    beta: str = Field("", alias="Beta")
    api_version: str = Field("", alias="ApiVersion")
    uri: str = Field("", alias="Uri")


class IncomingPhoneNumbersResponse(Page):
    xml_tag = "IncomingPhoneNumbers"

    incoming_phone_numbers: List[IncomingPhoneNumberResponse] = Field(
        default_factory=list, alias="IncomingPhoneNumber"
    )
