"""
Base model for records decoded from the Twilio XML representation.
"""
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Type

from pydantic import AliasChoices, BaseModel, ConfigDict
from pydantic.fields import FieldInfo


class TwilioModel(BaseModel):
    """
    Passive record whose fields are aliased to XML element names.

    The class variables describe the XML shape for the decoder and encoder:
    - xml_tag: element name used when the record is encoded on its own
    - xml_attributes: aliases carried as attributes instead of child elements
    - xml_groups: nested elements projected onto flat fields of the record
    - xml_any_children: list field whose items are every child element
    """

    xml_tag: ClassVar[str] = ""
    xml_attributes: ClassVar[FrozenSet[str]] = frozenset()
    xml_groups: ClassVar[Dict[str, Type["TwilioModel"]]] = {}
    xml_any_children: ClassVar[Optional[str]] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def xml_grouped_aliases(cls) -> FrozenSet[str]:
        """Aliases of flat fields that live inside a nested group element."""
        return frozenset(
            field.alias
            for group in cls.xml_groups.values()
            for field in group.model_fields.values()
        )

    def xml_value(self, name: str) -> Any:
        """Value written to XML for field `name`."""
        return getattr(self, name)


def field_xml_tags(name: str, field: FieldInfo) -> List[str]:
    """
    Element or attribute names accepted for a field, preferred name first.
    """
    if isinstance(field.validation_alias, AliasChoices):
        tags = [c for c in field.validation_alias.choices if isinstance(c, str)]
        preferred = field.serialization_alias
        if preferred in tags:
            tags.remove(preferred)
            tags.insert(0, preferred)
        return tags
    return [field.serialization_alias or field.alias or name]
