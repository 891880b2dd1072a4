"""SQLAlchemy models for roomledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Index,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utc_now_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class Manager(Base):
    """Manager model."""

    __tablename__ = "managers"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    credential = Column(String, nullable=False)
    created_at = Column(DateTime, default=_utc_now_naive, nullable=False)

    # Relationships
    recorded_payments = relationship("TenantTransaction", back_populates="manager")
    sent_transfers = relationship(
        "ManagerTransaction", foreign_keys="ManagerTransaction.sender_id", back_populates="sender"
    )
    received_transfers = relationship(
        "ManagerTransaction", foreign_keys="ManagerTransaction.receiver_id", back_populates="receiver"
    )


class Room(Base):
    """Room model.

    Deletion is guarded in the domain layer, so dependents do not cascade.
    """

    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utc_now_naive, nullable=False)

    # Relationships
    assignments = relationship("RoomAssignment", back_populates="room", passive_deletes="all")
    payments = relationship("TenantTransaction", back_populates="room", passive_deletes="all")


class Tenant(Base):
    """Tenant model.

    Deleting a tenant removes its assignments and payments with it.
    """

    __tablename__ = "tenants"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utc_now_naive, nullable=False)

    # Relationships
    assignments = relationship(
        "RoomAssignment", back_populates="tenant", cascade="all, delete-orphan", passive_deletes=True
    )
    payments = relationship(
        "TenantTransaction", back_populates="tenant", cascade="all, delete-orphan", passive_deletes=True
    )


class RoomAssignment(Base):
    """Room assignment model (one occupancy interval)."""

    __tablename__ = "room_assignments"

    id = Column(Integer, primary_key=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=_utc_now_naive, nullable=False)

    # A room cannot have two assignments starting on the same day. This
    # constraint is what serializes concurrent assignment creation.
    __table_args__ = (
        UniqueConstraint("room_id", "start_date", name="uq_room_start_date"),
        Index("ix_room_assignments_room_end", "room_id", "end_date"),
    )

    # Relationships
    tenant = relationship("Tenant", back_populates="assignments")
    room = relationship("Room", back_populates="assignments")


class TenantTransaction(Base):
    """Tenant rent payment model."""

    __tablename__ = "tenant_transactions"

    id = Column(Integer, primary_key=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    manager_id = Column(Integer, ForeignKey("managers.id"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    start_month = Column(Date, nullable=False)
    end_month = Column(Date, nullable=False)
    payment_date = Column(DateTime, default=_utc_now_naive, nullable=False)
    notes = Column(String, nullable=True)

    __table_args__ = (Index("ix_tenant_transactions_payment_date", "payment_date"),)

    # Relationships
    tenant = relationship("Tenant", back_populates="payments")
    room = relationship("Room", back_populates="payments")
    manager = relationship("Manager", back_populates="recorded_payments")


class ManagerTransaction(Base):
    """Manager-to-manager transfer model."""

    __tablename__ = "manager_transactions"

    id = Column(Integer, primary_key=True)
    sender_id = Column(Integer, ForeignKey("managers.id"), nullable=False)
    receiver_id = Column(Integer, ForeignKey("managers.id"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")
    payment_date = Column(DateTime, default=_utc_now_naive, nullable=False)
    notes = Column(String, nullable=True)

    # Relationships
    sender = relationship("Manager", foreign_keys=[sender_id], back_populates="sent_transfers")
    receiver = relationship("Manager", foreign_keys=[receiver_id], back_populates="received_transfers")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement for SQLite connections."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory and make sure the schema exists."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
