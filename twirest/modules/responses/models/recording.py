from decimal import Decimal
from typing import BinaryIO, Iterator, List, Optional

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.page import Page
from twirest.modules.responses.utils.helpers import to_decimal, to_int


class RecordingResponse(TwilioModel):
    xml_tag = "Recording"

    sid: str = Field("", alias="Sid")
    account_sid: str = Field("", alias="AccountSid")
    call_sid: str = Field("", alias="CallSid")
    duration: str = Field("", alias="Duration")
    date_created: str = Field("", alias="DateCreated")
    api_version: str = Field("", alias="ApiVersion")
    date_updated: str = Field("", alias="DateUpdated")
    status: str = Field("", alias="Status")
    source: str = Field("", alias="Source")
    channels: str = Field("", alias="Channels")
    price: str = Field("", alias="Price")
    price_unit: str = Field("", alias="PriceUnit")
    uri: str = Field("", alias="Uri")

    @property
    def duration_seconds(self) -> Optional[int]:
        return to_int(self.duration)

    @property
    def price_amount(self) -> Optional[Decimal]:
        return to_decimal(self.price)


class RecordingsResponse(Page):
    xml_tag = "Recordings"

    recordings: List[RecordingResponse] = Field(default_factory=list, alias="Recording")


class RecordingAudio:
    """
    Binary audio of a recording.

    Holds the open stream as returned by the HTTP client. The caller owns it
    and must close it once consumed; the envelope never does.
    """

    def __init__(self, data: BinaryIO, content_type: str = ""):
        self.data = data
        self.content_type = content_type

    def read(self, size: int = -1) -> bytes:
        return self.data.read(size)

    def iter_chunks(self, chunk_size: int = 8192) -> Iterator[bytes]:
        while True:
            chunk = self.data.read(chunk_size)
            if not chunk:
                break
            yield chunk

    def close(self) -> None:
        self.data.close()

    @property
    def closed(self) -> bool:
        return bool(getattr(self.data, "closed", False))

    def __enter__(self) -> "RecordingAudio":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RecordingAudio(content_type={self.content_type!r}, closed={self.closed})"
