"""Data models for catalog resources.

Architecture:
    Pydantic v2 models for the shapes the remote catalog returns. All models
    are immutable (frozen=True); a listing or detail response is decoded once
    and then only read.

Model Categories:
    - Listing: ResourcePage, ResourceReference
    - Detail: Item
"""

from .item import Item
from .page import ResourcePage
from .reference import ResourceReference

__all__ = [
    "Item",
    "ResourcePage",
    "ResourceReference",
]
