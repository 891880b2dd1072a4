"""Deletion guard: which entities refuse deletion while they have dependents.

Rooms are guarded so that occupancy and payment history is never orphaned.
Tenants are not guarded; deleting one removes its assignments and payments
through the storage cascade.
"""

from enum import Enum
from typing import Mapping


class EntityKind(str, Enum):
    ROOM = "room"
    TENANT = "tenant"


class DeletionPolicy(str, Enum):
    GUARDED = "guarded"
    UNGUARDED = "unguarded"


DELETION_POLICIES: Mapping[EntityKind, DeletionPolicy] = {
    EntityKind.ROOM: DeletionPolicy.GUARDED,
    EntityKind.TENANT: DeletionPolicy.UNGUARDED,
}


class DeletionGuard:
    """Look up the deletion policy for an entity kind."""

    def __init__(self, policies: Mapping[EntityKind, DeletionPolicy] = DELETION_POLICIES):
        self.policies = dict(policies)

    def policy_for(self, kind: EntityKind) -> DeletionPolicy:
        try:
            return self.policies[kind]
        except KeyError:
            raise ValueError(f"No deletion policy defined for '{kind.value}'")

    def is_guarded(self, kind: EntityKind) -> bool:
        return self.policy_for(kind) is DeletionPolicy.GUARDED
