"""Utility for resolving room, tenant and manager names to IDs."""

from typing import Callable, Optional, TypeVar

from roomledger.domain.errors import NotFoundError
from roomledger.domain.manager import ManagerService
from roomledger.domain.room import RoomService
from roomledger.domain.tenant import TenantService

T = TypeVar("T")


def _resolve(
    value: str | int,
    kind: str,
    get_by_id: Callable[[int], Optional[T]],
    get_by_name: Callable[[str], Optional[T]],
) -> int:
    """Resolve a name or ID (int or string representation of int) to an ID.

    A numeric string is tried as an ID first and then as a name, so rooms
    named "101" can still be found by name.
    """
    if isinstance(value, int):
        if get_by_id(value) is None:
            raise NotFoundError(f"{kind} ID {value} not found")
        return value

    try:
        entity_id = int(value)
    except (ValueError, TypeError):
        entity_id = None

    if entity_id is not None and get_by_id(entity_id) is not None:
        return entity_id

    entity = get_by_name(value)
    if entity is not None:
        return entity.id

    raise NotFoundError(f"{kind} '{value}' not found")


def resolve_room(room_service: RoomService, room: str | int) -> int:
    """Resolve room name or ID to room ID.

    Raises:
        NotFoundError: If room is not found
    """
    return _resolve(room, "Room", room_service.get_room, room_service.get_room_by_name)


def resolve_tenant(tenant_service: TenantService, tenant: str | int) -> int:
    """Resolve tenant name or ID to tenant ID.

    Raises:
        NotFoundError: If tenant is not found
    """
    return _resolve(tenant, "Tenant", tenant_service.get_tenant, tenant_service.get_tenant_by_name)


def resolve_manager(manager_service: ManagerService, manager: str | int) -> int:
    """Resolve manager username or ID to manager ID.

    Raises:
        NotFoundError: If manager is not found
    """
    return _resolve(
        manager, "Manager", manager_service.get_manager, manager_service.get_manager_by_username
    )
