"""Shared domain error messages and error types."""

from datetime import date


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def missing_fields(*names: str) -> str:
    """Return message for required fields that were not supplied."""
    return f"Missing required field{'s' if len(names) != 1 else ''}: {', '.join(names)}"


def manager_not_found(manager_id: int) -> str:
    """Return message for missing manager."""
    return f"Manager {manager_id} not found"


def room_not_found(room_id: int) -> str:
    """Return message for missing room."""
    return f"Room {room_id} not found"


def tenant_not_found(tenant_id: int) -> str:
    """Return message for missing tenant."""
    return f"Tenant {tenant_id} not found"


def assignment_not_found(assignment_id: int) -> str:
    """Return message for missing room assignment."""
    return f"Assignment {assignment_id} not found"


def tenant_transaction_not_found(transaction_id: int) -> str:
    """Return message for missing tenant transaction."""
    return f"Transaction {transaction_id} not found"


def manager_transaction_not_found(transaction_id: int) -> str:
    """Return message for missing manager transaction."""
    return f"Transfer {transaction_id} not found"


def duplicate_name(kind: str, name: str) -> str:
    """Return message for a duplicate unique name (room, tenant or username)."""
    return f"{kind} with name '{name}' already exists"


def duplicate_assignment(room_id: int, start_date: date) -> str:
    """Return message for a second assignment with the same room and start date."""
    return (
        f"Assignment conflict: room {room_id} already has an assignment "
        f"starting on {start_date.isoformat()}"
    )


def _delete_blocked(
    kind: str, entity_id: int, assignment_count: int, transaction_count: int
) -> str:
    parts = []
    if assignment_count > 0:
        parts.append(
            f"{assignment_count} assignment{'s' if assignment_count != 1 else ''}"
        )
    if transaction_count > 0:
        parts.append(
            f"{transaction_count} payment{'s' if transaction_count != 1 else ''}"
        )
    return (
        f"Cannot delete {kind} {entity_id}: it has {', '.join(parts)}. "
        "Please delete them first."
    )


def tenant_delete_blocked(
    tenant_id: int, assignment_count: int, transaction_count: int
) -> str:
    """Return message when tenant deletion is guarded and has dependents."""
    return _delete_blocked("tenant", tenant_id, assignment_count, transaction_count)


def room_delete_blocked(
    room_id: int, assignment_count: int, transaction_count: int
) -> str:
    """Return message when room has dependent assignments or payments."""
    return _delete_blocked("room", room_id, assignment_count, transaction_count)
