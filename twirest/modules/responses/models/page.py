"""
Pagination metadata shared by every list response.
"""
from pydantic import Field, field_validator

from twirest.modules.responses.models.base import TwilioModel


class Page(TwilioModel):
    """
    Page attributes of a list element, e.g.
    <Calls page="0" numpages="1" pagesize="50" total="2" start="0" end="1" ...>
    """

    xml_attributes = frozenset(
        {
            "page",
            "numpages",
            "pagesize",
            "total",
            "start",
            "end",
            "uri",
            "firstpageuri",
            "previouspageuri",
            "nextpageuri",
            "lastpageuri",
        }
    )

    page: int = Field(0, ge=0, alias="page")
    num_pages: int = Field(0, ge=0, alias="numpages")
    page_size: int = Field(0, ge=0, alias="pagesize")
    total: int = Field(0, ge=0, alias="total")
    start: int = Field(0, ge=0, alias="start")
    end: int = Field(0, ge=0, alias="end")
    uri: str = Field("", alias="uri")
    first_page_uri: str = Field("", alias="firstpageuri")
    previous_page_uri: str = Field("", alias="previouspageuri")
    next_page_uri: str = Field("", alias="nextpageuri")
    last_page_uri: str = Field("", alias="lastpageuri")

    @field_validator("page", "num_pages", "page_size", "total", "start", "end", mode="before")
    @classmethod
    def empty_attribute_is_zero(cls, v):
        if isinstance(v, str) and not v.strip():
            return 0
        return v

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page_uri)

    @property
    def has_previous_page(self) -> bool:
        return bool(self.previous_page_uri)
