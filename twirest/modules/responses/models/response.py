"""
Response envelope: one resource of a known kind plus the transport status.
"""
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, model_validator

from twirest.core.utils.exceptions import ResourceKindError, TwilioAPIError
from twirest.modules.responses.enums.resource_kind import ResourceKind
from twirest.modules.responses.models.account import AccountResponse, AccountsResponse
from twirest.modules.responses.models.available_phone_number import \
    AvailablePhoneNumbersResponse
from twirest.modules.responses.models.call import CallResponse, CallsResponse
from twirest.modules.responses.models.conference import (ConferenceResponse,
                                                         ConferencesResponse)
from twirest.modules.responses.models.exception import ExceptionResponse
from twirest.modules.responses.models.incoming_phone_number import (
    IncomingPhoneNumberResponse, IncomingPhoneNumbersResponse)
from twirest.modules.responses.models.message import MessageResponse, MessagesResponse
from twirest.modules.responses.models.notification import (NotificationResponse,
                                                           NotificationsResponse)
from twirest.modules.responses.models.outgoing_caller_id import (
    OutgoingCallerIdResponse, OutgoingCallerIdsResponse, ValidationRequestResponse)
from twirest.modules.responses.models.participant import (ParticipantResponse,
                                                          ParticipantsResponse)
from twirest.modules.responses.models.queue import (QueueMemberResponse,
                                                    QueueMembersResponse, QueueResponse,
                                                    QueuesResponse)
from twirest.modules.responses.models.recording import (RecordingAudio,
                                                        RecordingResponse,
                                                        RecordingsResponse)
from twirest.modules.responses.models.status import ResponseStatus
from twirest.modules.responses.models.usage_record import UsageRecordsResponse

RESOURCE_MODELS: Dict[ResourceKind, Type[Any]] = {
    ResourceKind.ACCOUNTS: AccountsResponse,
    ResourceKind.ACCOUNT: AccountResponse,
    ResourceKind.AVAILABLE_PHONE_NUMBERS: AvailablePhoneNumbersResponse,
    ResourceKind.CALLS: CallsResponse,
    ResourceKind.CALL: CallResponse,
    ResourceKind.CONFERENCES: ConferencesResponse,
    ResourceKind.CONFERENCE: ConferenceResponse,
    ResourceKind.EXCEPTION: ExceptionResponse,
    ResourceKind.INCOMING_PHONE_NUMBERS: IncomingPhoneNumbersResponse,
    ResourceKind.INCOMING_PHONE_NUMBER: IncomingPhoneNumberResponse,
    ResourceKind.MESSAGES: MessagesResponse,
    ResourceKind.MESSAGE: MessageResponse,
    ResourceKind.NOTIFICATIONS: NotificationsResponse,
    ResourceKind.NOTIFICATION: NotificationResponse,
    ResourceKind.OUTGOING_CALLER_IDS: OutgoingCallerIdsResponse,
    ResourceKind.OUTGOING_CALLER_ID: OutgoingCallerIdResponse,
    ResourceKind.PARTICIPANTS: ParticipantsResponse,
    ResourceKind.PARTICIPANT: ParticipantResponse,
    ResourceKind.RECORDINGS: RecordingsResponse,
    ResourceKind.RECORDING: RecordingResponse,
    ResourceKind.QUEUES: QueuesResponse,
    ResourceKind.QUEUE: QueueResponse,
    ResourceKind.QUEUE_MEMBERS: QueueMembersResponse,
    ResourceKind.QUEUE_MEMBER: QueueMemberResponse,
    ResourceKind.USAGE_RECORDS: UsageRecordsResponse,
    ResourceKind.VALIDATION_REQUEST: ValidationRequestResponse,
    ResourceKind.RECORDING_AUDIO: RecordingAudio,
}


def kind_for(resource: Any) -> ResourceKind:
    """Return the kind registered for a resource instance."""
    for kind, model in RESOURCE_MODELS.items():
        if type(resource) is model:
            return kind
    raise ResourceKindError(f"Unsupported resource type: {type(resource).__name__}")


class TwilioResponse(BaseModel):
    """
    Result of one API operation.

    Holds at most one resource, tagged by `kind`, plus the status of the
    request. Check `ok` first; on failure the EXCEPTION variant, when
    present, carries the reason.
    """

    kind: Optional[ResourceKind] = None
    resource: Any = None
    status: ResponseStatus = Field(default_factory=ResponseStatus)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_resource_matches_kind(self) -> "TwilioResponse":
        if self.kind is None:
            if self.resource is not None:
                raise ResourceKindError("resource given without a kind")
            return self
        if self.resource is None:
            raise ResourceKindError(f"kind {self.kind.value} given without a resource")
        expected = RESOURCE_MODELS[self.kind]
        if type(self.resource) is not expected:
            raise ResourceKindError(
                f"kind {self.kind.value} expects {expected.__name__}, "
                f"got {type(self.resource).__name__}"
            )
        return self

    @classmethod
    def from_resource(
        cls, resource: Any, status: Optional[ResponseStatus] = None
    ) -> "TwilioResponse":
        """Build an envelope, inferring the kind from the resource type."""
        kind = kind_for(resource) if resource is not None else None
        return cls(kind=kind, resource=resource, status=status or ResponseStatus())

    @property
    def ok(self) -> bool:
        return self.status.ok

    def get(self, kind: ResourceKind) -> Optional[Any]:
        """Return the resource if it is of the requested kind."""
        if self.kind is kind:
            return self.resource
        return None

    @property
    def exception(self) -> Optional[ExceptionResponse]:
        return self.get(ResourceKind.EXCEPTION)

    @property
    def recording_audio(self) -> Optional[RecordingAudio]:
        return self.get(ResourceKind.RECORDING_AUDIO)

    def populated_kinds(self) -> List[ResourceKind]:
        return [self.kind] if self.kind is not None else []

    def raise_for_status(self) -> None:
        """Raise TwilioAPIError if the request did not succeed."""
        if not self.ok or self.kind is ResourceKind.EXCEPTION:
            raise TwilioAPIError(self.status, self.exception)

    def __repr__(self) -> str:
        kind = self.kind.value if self.kind else None
        return f"TwilioResponse(kind={kind}, status={self.status.http}, ok={self.ok})"
