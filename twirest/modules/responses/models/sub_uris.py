"""
Aliases shared by every sub-resource URI field.

The API spells the element SubresourceUris; older payloads and fixtures use
SubResourceUris. Both are accepted, the former is written.
"""
from pydantic import AliasChoices

SUB_URIS_TAG = "SubresourceUris"

SUB_URIS_ALIASES = {
    "validation_alias": AliasChoices(
        SUB_URIS_TAG, "SubResourceUris", "sub_resource_uris"
    ),
    "serialization_alias": SUB_URIS_TAG,
}
