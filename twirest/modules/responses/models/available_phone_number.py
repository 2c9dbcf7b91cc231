from typing import List

from pydantic import Field

from twirest.modules.responses.models.base import TwilioModel
from twirest.modules.responses.models.capabilities import CapabilitiesMixin


class AvailablePhoneNumber(CapabilitiesMixin):
    xml_tag = "AvailablePhoneNumber"

    friendly_name: str = Field("", alias="FriendlyName")
    phone_number: str = Field("", alias="PhoneNumber")
    lata: str = Field("", alias="Lata")
    rate_center: str = Field("", alias="RateCenter")
    latitude: str = Field("", alias="Latitude")
    longitude: str = Field("", alias="Longitude")
    region: str = Field("", alias="Region")
    postal_code: str = Field("", alias="PostalCode")
    iso_country: str = Field("", alias="IsoCountry")
    address_requirements: str = Field("", alias="AddressRequirements")
    beta: str = Field("", alias="Beta")


class AvailablePhoneNumbersResponse(TwilioModel):
    """
    Search results. Carries only the uri attribute, no page metadata, and
    takes every child element as a number.
    """

    xml_tag = "AvailablePhoneNumbers"
    xml_attributes = frozenset({"uri"})
    xml_any_children = "available_phone_numbers"

    uri: str = Field("", alias="uri")
    available_phone_numbers: List[AvailablePhoneNumber] = Field(
        default_factory=list, alias="AvailablePhoneNumber"
    )
