"""
Decode Twilio XML response bodies into response models.

Decoding is directed by the target model: only the elements and attributes
a model declares are read, absent ones keep their defaults, and repeated
elements keep document order.
"""

import types
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel

from twirest.core.config import settings
from twirest.core.utils import get_logger
from twirest.core.utils.exceptions import DecodeError
from twirest.modules.responses.enums.resource_kind import ResourceKind
from twirest.modules.responses.models.base import TwilioModel, field_xml_tags
from twirest.modules.responses.models.exception import ExceptionResponse
from twirest.modules.responses.models.response import RESOURCE_MODELS, TwilioResponse
from twirest.modules.responses.models.status import ResponseStatus

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=TwilioModel)

_UNION_TYPES = (Union, types.UnionType)


def _field_shape(annotation: Any) -> Tuple[str, Any]:
    """Classify a field annotation as ("list" | "model" | "scalar", inner type)."""
    origin = get_origin(annotation)
    if origin is list:
        return "list", get_args(annotation)[0]
    if origin in _UNION_TYPES:
        members = [a for a in get_args(annotation) if a is not type(None)]
        return _field_shape(members[0])
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return "model", annotation
    return "scalar", annotation


def _find_child(element: ET.Element, tags) -> Optional[ET.Element]:
    for tag in tags:
        child = element.find(tag)
        if child is not None:
            return child
    return None


def element_to_data(element: ET.Element, model_cls: Type[TwilioModel]) -> Dict[str, Any]:
    """
    Collect the raw values `model_cls` declares from an element, keyed by alias.
    """
    data: Dict[str, Any] = {}
    grouped = model_cls.xml_grouped_aliases()

    for name, field in model_cls.model_fields.items():
        if field.exclude:
            continue
        tags = field_xml_tags(name, field)
        tag = tags[0]

        if tag in model_cls.xml_attributes:
            value = element.get(tag)
            if value is not None:
                data[tag] = value
            continue
        if tag in grouped:
            continue

        shape, inner = _field_shape(field.annotation)
        if shape == "list":
            if model_cls.xml_any_children == name:
                children = list(element)
            else:
                children = element.findall(tag)
            data[tag] = [element_to_data(child, inner) for child in children]
            continue

        child = _find_child(element, tags)
        if child is None:
            continue
        if shape == "model":
            data[tag] = element_to_data(child, inner)
        else:
            data[tag] = child.text or ""

    for group_tag, group_model in model_cls.xml_groups.items():
        child = element.find(group_tag)
        if child is not None:
            data[group_tag] = element_to_data(child, group_model)

    return data


def _parse(body: Union[bytes, str]) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raw = body.encode("utf-8", "replace") if isinstance(body, str) else body
        logger.error("Malformed XML response body", error=str(e))
        raise DecodeError(body=raw, cause=e) from e


def decode_resource(
    source: Union[bytes, str, ET.Element], model_cls: Type[ModelT]
) -> ModelT:
    """
    Decode a single record from an element or from its XML text.
    """
    element = source if isinstance(source, ET.Element) else _parse(source)
    return model_cls.model_validate(element_to_data(element, model_cls))


def _select_resource_element(root: ET.Element) -> Optional[ET.Element]:
    if ResourceKind.from_tag(root.tag) is not None:
        return root
    if root.tag != settings.decoder.root_tag:
        logger.warning("Unexpected root element", tag=root.tag)
        return None
    for child in root:
        if ResourceKind.from_tag(child.tag) is not None:
            return child
        logger.warning("Unknown resource element", tag=child.tag)
    return None


def decode_response(
    body: Union[bytes, str, None],
    http_status: int = 200,
    twilio_status: int = 0,
) -> TwilioResponse:
    """
    Decode a response body into an envelope.

    Args:
        body: XML body as returned by the API (may be empty)
        http_status: Transport status code of the response
        twilio_status: API-specific status code, if already known

    Returns:
        TwilioResponse holding at most one resource

    Raises:
        DecodeError: If the body is not well-formed XML
    """
    if body is None or not body.strip():
        return TwilioResponse(status=ResponseStatus(http=http_status, twilio=twilio_status))

    element = _select_resource_element(_parse(body))
    if element is None:
        return TwilioResponse(status=ResponseStatus(http=http_status, twilio=twilio_status))

    kind = ResourceKind.from_tag(element.tag)
    resource = decode_resource(element, RESOURCE_MODELS[kind])

    if isinstance(resource, ExceptionResponse):
        if settings.decoder.normalize_exceptions:
            resource.parse()
        if not twilio_status:
            twilio_status = resource.code

    logger.debug(
        "Decoded response",
        kind=kind.value,
        http_status=http_status,
        twilio_status=twilio_status,
    )
    return TwilioResponse(
        kind=kind,
        resource=resource,
        status=ResponseStatus(http=http_status, twilio=twilio_status),
    )
