"""
Encode response models back into the XML shape the decoder reads.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from pydantic import BaseModel

from twirest.core.config import settings
from twirest.core.utils.exceptions import ResourceKindError
from twirest.modules.responses.models.base import TwilioModel, field_xml_tags
from twirest.modules.responses.models.recording import RecordingAudio
from twirest.modules.responses.models.response import TwilioResponse


def model_to_element(model: TwilioModel, tag: str) -> ET.Element:
    cls = type(model)
    element = ET.Element(tag)
    grouped = cls.xml_grouped_aliases()

    for name, field in cls.model_fields.items():
        if field.exclude:
            continue
        xml_tag = field_xml_tags(name, field)[0]
        value = model.xml_value(name)

        if xml_tag in cls.xml_attributes:
            element.set(xml_tag, str(value))
        elif xml_tag in grouped or value is None:
            continue
        elif isinstance(value, list):
            for item in value:
                element.append(model_to_element(item, xml_tag))
        elif isinstance(value, BaseModel):
            element.append(model_to_element(value, xml_tag))
        else:
            ET.SubElement(element, xml_tag).text = str(value)

    for group_tag, group_model in cls.xml_groups.items():
        group = ET.SubElement(element, group_tag)
        for group_name, group_field in group_model.model_fields.items():
            ET.SubElement(group, group_field.alias).text = getattr(model, group_name)

    return element


def encode_resource(model: TwilioModel, tag: Optional[str] = None) -> bytes:
    """Serialize a single record, using its own element name by default."""
    return ET.tostring(model_to_element(model, tag or type(model).xml_tag), encoding="utf-8")


def encode_response(response: TwilioResponse) -> bytes:
    """
    Serialize an envelope inside the root element.

    Raises:
        ResourceKindError: If the envelope holds binary recording audio
    """
    root = ET.Element(settings.decoder.root_tag)
    if response.resource is not None:
        if isinstance(response.resource, RecordingAudio):
            raise ResourceKindError("RecordingAudio has no XML representation")
        root.append(model_to_element(response.resource, response.kind.value))
    return ET.tostring(root, encoding="utf-8")
