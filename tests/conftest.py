"""Shared pytest fixtures for roomledger tests."""

import tempfile
import os
from datetime import date, datetime, UTC
import pytest

from roomledger.database.factories import create_sqlite_database
from roomledger.domain.assignment import AssignmentService
from roomledger.domain.ledger import LedgerService
from roomledger.domain.manager import ManagerService
from roomledger.domain.room import RoomService
from roomledger.domain.summary import SummaryService
from roomledger.domain.tenant import TenantService
from roomledger.logging_config import reset_logging

FIXED_NOW = datetime(2025, 5, 15, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop any handler installed by a previous CLI invocation."""
    yield
    reset_logging()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def fixed_clock():
    """Clock that always reports 2025-05-15 12:00 UTC."""
    return lambda: FIXED_NOW


@pytest.fixture
def room_service(temp_db):
    """Create a RoomService with a temporary database."""
    return RoomService(temp_db)


@pytest.fixture
def tenant_service(temp_db):
    """Create a TenantService with a temporary database."""
    return TenantService(temp_db)


@pytest.fixture
def manager_service(temp_db):
    """Create a ManagerService with a temporary database."""
    return ManagerService(temp_db)


@pytest.fixture
def assignment_service(temp_db):
    """Create an AssignmentService with a temporary database."""
    return AssignmentService(temp_db)


@pytest.fixture
def ledger_service(temp_db, fixed_clock):
    """Create a LedgerService with a temporary database and fixed clock."""
    return LedgerService(temp_db, clock=fixed_clock)


@pytest.fixture
def summary_service(temp_db, fixed_clock):
    """Create a SummaryService with a temporary database and fixed clock."""
    return SummaryService(temp_db, clock=fixed_clock)


@pytest.fixture
def sample_room(room_service):
    """Create a sample room for testing."""
    room_id = room_service.create_room(name="A-101", notes="Ground floor")
    return room_service.get_room(room_id)


@pytest.fixture
def sample_tenant(tenant_service):
    """Create a sample tenant for testing."""
    tenant_id = tenant_service.create_tenant(name="Alice")
    return tenant_service.get_tenant(tenant_id)


@pytest.fixture
def sample_manager(manager_service):
    """Create a sample manager for testing."""
    manager_id = manager_service.register_manager(username="bob", credential="hash-bob")
    return manager_service.get_manager(manager_id)


@pytest.fixture
def sample_assignment(assignment_service, sample_tenant, sample_room):
    """Assign the sample tenant to the sample room from 2025-05-01."""
    return assignment_service.create_assignment(
        tenant_id=sample_tenant.id, room_id=sample_room.id, start_date=date(2025, 5, 1)
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
