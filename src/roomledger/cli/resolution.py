"""CLI helpers for resolving names to IDs with consistent error handling."""

from __future__ import annotations

import click

from roomledger.cli.error_handling import handle_domain_error
from roomledger.domain.errors import DomainError
from roomledger.domain.manager import ManagerService
from roomledger.domain.room import RoomService
from roomledger.domain.tenant import TenantService
from roomledger.utils.entity_resolver import resolve_manager, resolve_room, resolve_tenant


def resolve_room_or_exit(ctx: click.Context, room_service: RoomService, room: str | int) -> int:
    """Resolve room name or ID, or exit with a CLI error."""
    try:
        return resolve_room(room_service, room)
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def resolve_tenant_or_exit(ctx: click.Context, tenant_service: TenantService, tenant: str | int) -> int:
    """Resolve tenant name or ID, or exit with a CLI error."""
    try:
        return resolve_tenant(tenant_service, tenant)
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def resolve_manager_or_exit(ctx: click.Context, manager_service: ManagerService, manager: str | int) -> int:
    """Resolve manager username or ID, or exit with a CLI error."""
    try:
        return resolve_manager(manager_service, manager)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
