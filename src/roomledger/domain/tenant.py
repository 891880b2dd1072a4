"""Tenant domain service."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from roomledger.domain import errors
from roomledger.domain.deletion import DeletionGuard, EntityKind
from roomledger.domain.entities import Tenant as TenantEntity, TenantProfile
from roomledger.logging_config import get_logger

if TYPE_CHECKING:
    from roomledger.database.base import Database

logger = get_logger(__name__)


class TenantService:
    """Service for managing tenants."""

    def __init__(self, db: Database, deletion_guard: Optional[DeletionGuard] = None):
        """Initialize tenant service.

        Args:
            db: Database instance
            deletion_guard: Deletion policy lookup (defaults to the standard policies)
        """
        self.db = db
        self.deletion_guard = deletion_guard or DeletionGuard()

    def create_tenant(self, name: str, notes: Optional[str] = None) -> int:
        """Create a tenant.

        Raises:
            ValidationError: If name is missing
            ConflictError: If a tenant with that name already exists
        """
        if name is None or not name.strip():
            raise errors.ValidationError("Name is required")
        tenant_id = self.db.create_tenant(name=name.strip(), notes=notes)
        logger.info("Created tenant %s (%s)", tenant_id, name)
        return tenant_id

    def get_tenant(self, tenant_id: int) -> Optional[TenantEntity]:
        return self.db.get_tenant(tenant_id)

    def get_tenant_by_name(self, name: str) -> Optional[TenantEntity]:
        return self.db.get_tenant_by_name(name)

    def require_tenant(self, tenant_id: int) -> TenantEntity:
        """Get tenant by ID or raise NotFoundError."""
        tenant = self.db.get_tenant(tenant_id)
        if tenant is None:
            raise errors.NotFoundError(errors.tenant_not_found(tenant_id))
        return tenant

    def list_tenants(self) -> list[TenantEntity]:
        return self.db.list_tenants()

    def get_profile(self, tenant_id: int) -> TenantProfile:
        """Get a tenant with assignment history and payments.

        Raises:
            NotFoundError: If tenant doesn't exist
        """
        profile = self.db.get_tenant_profile(tenant_id)
        if profile is None:
            raise errors.NotFoundError(errors.tenant_not_found(tenant_id))
        return profile

    def get_profile_by_name(self, name: str) -> TenantProfile:
        """Get a tenant profile by unique name.

        Raises:
            NotFoundError: If no tenant has that name
        """
        tenant = self.db.get_tenant_by_name(name)
        if tenant is None:
            raise errors.NotFoundError(f"Tenant '{name}' not found")
        return self.get_profile(tenant.id)

    def update_tenant(
        self,
        tenant_id: int,
        name: Optional[str] = None,
        notes: Optional[str] = None,
        clear_notes: bool = False,
    ) -> TenantEntity:
        """Update tenant name and/or notes.

        Raises:
            ValidationError: If name is blank or both notes and clear_notes are given
            NotFoundError: If tenant doesn't exist
            ConflictError: If the new name is taken
        """
        if clear_notes and notes is not None:
            raise errors.ValidationError("Cannot set both notes and clear_notes")
        if name is not None:
            if not name.strip():
                raise errors.ValidationError("Name is required")
            name = name.strip()

        tenant = self.db.update_tenant(tenant_id, name=name, notes=notes, update_notes=clear_notes)
        logger.info("Updated tenant %s", tenant_id)
        return tenant

    def dependent_counts(self, tenant_id: int) -> tuple[int, int]:
        """Return how many assignments and payments reference a tenant."""
        return self.db.count_tenant_dependents(tenant_id)

    def delete_tenant(self, tenant_id: int) -> None:
        """Delete a tenant.

        Tenants are not guarded, so the tenant's assignments and payments
        are deleted along with it.

        Raises:
            NotFoundError: If tenant doesn't exist
            DependencyError: Only if the tenant policy has been switched to guarded
        """
        guarded = self.deletion_guard.is_guarded(EntityKind.TENANT)
        try:
            self.db.delete_tenant(tenant_id, require_no_dependents=guarded)
        except errors.DependencyError as e:
            logger.warning("Refused to delete tenant %s: %s", tenant_id, e)
            raise
        logger.info("Deleted tenant %s", tenant_id)
