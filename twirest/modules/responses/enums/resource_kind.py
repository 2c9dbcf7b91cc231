from enum import Enum
from typing import Optional


class ResourceKind(str, Enum):
    """
    Enum for the resource carried by a response envelope.

    Each value is the top-level XML element that selects the variant,
    except RECORDING_AUDIO which is a binary payload with no element.
    """

    ACCOUNTS = "Accounts"
    ACCOUNT = "Account"
    AVAILABLE_PHONE_NUMBERS = "AvailablePhoneNumbers"
    CALLS = "Calls"
    CALL = "Call"
    CONFERENCES = "Conferences"
    CONFERENCE = "Conference"
    EXCEPTION = "RestException"
    INCOMING_PHONE_NUMBERS = "IncomingPhoneNumbers"
    INCOMING_PHONE_NUMBER = "IncomingPhoneNumber"
    MESSAGES = "Messages"
    MESSAGE = "Message"
    NOTIFICATIONS = "Notifications"
    NOTIFICATION = "Notification"
    OUTGOING_CALLER_IDS = "OutgoingCallerIds"
    OUTGOING_CALLER_ID = "OutgoingCallerId"
    PARTICIPANTS = "Participants"
    PARTICIPANT = "Participant"
    RECORDINGS = "Recordings"
    RECORDING = "Recording"
    QUEUES = "Queues"
    QUEUE = "Queue"
    QUEUE_MEMBERS = "QueueMembers"
    QUEUE_MEMBER = "QueueMember"
    USAGE_RECORDS = "UsageRecords"
    VALIDATION_REQUEST = "ValidationRequest"
    RECORDING_AUDIO = "RecordingAudio"

    @property
    def has_xml_tag(self) -> bool:
        return self is not ResourceKind.RECORDING_AUDIO

    @classmethod
    def from_tag(cls, tag: str) -> Optional["ResourceKind"]:
        """Return the kind selected by an XML element name, if any."""
        for kind in cls:
            if kind.has_xml_tag and kind.value == tag:
                return kind
        return None

    def __repr__(self) -> str:
        return f"ResourceKind.{self.name}"
