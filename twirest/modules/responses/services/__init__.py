from .http_adapter import from_http_response
from .xml_decoder import decode_resource, decode_response
from .xml_encoder import encode_resource, encode_response

__all__ = [
    "decode_resource",
    "decode_response",
    "encode_resource",
    "encode_response",
    "from_http_response",
]
