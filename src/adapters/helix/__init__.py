"""Fachadas de recursos Helix.

Cada recurso expone `list()` → builder → `do()`.
"""

from adapters.helix.channels import (
    ChannelsListCall,
    ChannelsResource,
    FollowedListCall,
    FollowedResource,
    FollowersListCall,
    FollowersResource,
)
from adapters.helix.client import HelixClient, api

__all__ = [
    "ChannelsListCall",
    "ChannelsResource",
    "FollowedListCall",
    "FollowedResource",
    "FollowersListCall",
    "FollowersResource",
    "HelixClient",
    "api",
]
