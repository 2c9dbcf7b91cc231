from .account import AccountResponse, AccountsResponse, AccountSubUris
from .available_phone_number import AvailablePhoneNumber, AvailablePhoneNumbersResponse
from .base import TwilioModel
from .call import CallResponse, CallsResponse, CallSubUris
from .conference import ConferenceResponse, ConferencesResponse, ConferenceSubUris
from .exception import ExceptionResponse
from .incoming_phone_number import IncomingPhoneNumberResponse, IncomingPhoneNumbersResponse
from .message import MessageResponse, MessagesResponse
from .notification import NotificationResponse, NotificationsResponse
from .outgoing_caller_id import (OutgoingCallerIdResponse, OutgoingCallerIdsResponse,
                                 ValidationRequestResponse)
from .page import Page
from .participant import ParticipantResponse, ParticipantsResponse
from .queue import QueueMemberResponse, QueueMembersResponse, QueueResponse, QueuesResponse
from .recording import RecordingAudio, RecordingResponse, RecordingsResponse
from .response import RESOURCE_MODELS, TwilioResponse
from .status import SUCCESS_STATUS_CODES, ResponseStatus
from .usage_record import UsageRecordResponse, UsageRecordsResponse, UsageRecordSubUris

__all__ = [
    "AccountResponse",
    "AccountsResponse",
    "AccountSubUris",
    "AvailablePhoneNumber",
    "AvailablePhoneNumbersResponse",
    "CallResponse",
    "CallsResponse",
    "CallSubUris",
    "ConferenceResponse",
    "ConferencesResponse",
    "ConferenceSubUris",
    "ExceptionResponse",
    "IncomingPhoneNumberResponse",
    "IncomingPhoneNumbersResponse",
    "MessageResponse",
    "MessagesResponse",
    "NotificationResponse",
    "NotificationsResponse",
    "OutgoingCallerIdResponse",
    "OutgoingCallerIdsResponse",
    "Page",
    "ParticipantResponse",
    "ParticipantsResponse",
    "QueueMemberResponse",
    "QueueMembersResponse",
    "QueueResponse",
    "QueuesResponse",
    "RecordingAudio",
    "RecordingResponse",
    "RecordingsResponse",
    "RESOURCE_MODELS",
    "ResponseStatus",
    "SUCCESS_STATUS_CODES",
    "TwilioModel",
    "TwilioResponse",
    "UsageRecordResponse",
    "UsageRecordsResponse",
    "UsageRecordSubUris",
    "ValidationRequestResponse",
]
