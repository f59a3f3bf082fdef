"""
Role-based capabilities.

Privileged behavior is checked against a capability, never against
a specific account or email.
"""

from enum import Enum

from .models import Role


class Capability(str, Enum):
    VIEW_PRIVATE_PROFILES = "view_private_profiles"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.USER: frozenset(),
    Role.MODERATOR: frozenset({Capability.VIEW_PRIVATE_PROFILES}),
}


def has_capability(role: Role, capability: Capability) -> bool:
    """Check whether a role grants a capability."""
    return capability in ROLE_CAPABILITIES.get(role, frozenset())
