"""
Capability flags nested under <Capabilities> in phone number resources.

The nested element only exists while decoding; public records carry the
flags as flat fields.
"""
from typing import Any, Dict, Optional

from pydantic import Field, model_validator

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.utils.helpers import to_bool

CAPABILITIES_TAG = "Capabilities"


class _Capabilities(TwilioModel):
    xml_tag = CAPABILITIES_TAG

    voice: str = Field("", alias="Voice")
    sms: str = Field("", alias="SMS")
    mms: str = Field("", alias="MMS")
    fax: str = Field("", alias="Fax")


class CapabilitiesMixin(TwilioModel):
    """Flat capability fields projected from the nested XML group."""

    xml_groups = {CAPABILITIES_TAG: _Capabilities}

    voice: str = Field("", alias="Voice")
    sms: str = Field("", alias="SMS")
    mms: str = Field("", alias="MMS")
    fax: str = Field("", alias="Fax")

    @model_validator(mode="before")
    @classmethod
    def flatten_capabilities(cls, data: Any) -> Any:
        if not isinstance(data, dict) or CAPABILITIES_TAG not in data:
            return data
        data = dict(data)
        nested = data.pop(CAPABILITIES_TAG)
        if isinstance(nested, _Capabilities):
            nested = nested.model_dump(by_alias=True)
        for alias, value in (nested or {}).items():
            data.setdefault(alias, value)
        return data

    @property
    def capabilities(self) -> Dict[str, Optional[bool]]:
        return {
            "voice": to_bool(self.voice),
            "sms": to_bool(self.sms),
            "mms": to_bool(self.mms),
            "fax": to_bool(self.fax),
        }
