from .resource_kind import ResourceKind

__all__ = [
    "ResourceKind",
]
