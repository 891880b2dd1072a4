"""Tenant payment commands."""

import click
from roomledger.cli.error_handling import handle_domain_error
from roomledger.cli.resolution import (
    resolve_manager_or_exit,
    resolve_room_or_exit,
    resolve_tenant_or_exit,
)
from roomledger.domain.errors import DomainError
from roomledger.domain.ledger import LedgerService
from roomledger.domain.manager import ManagerService
from roomledger.domain.room import RoomService
from roomledger.domain.tenant import TenantService
from roomledger.utils.amount_parser import parse_amount
from roomledger.utils.date_parser import month_bounds, parse_date, parse_datetime, parse_month


@click.group()
def payment_group():
    """Record and review rent payments."""
    pass


@payment_group.command("record")
@click.option("--tenant", "tenant", required=True, help="Paying tenant (name or ID)")
@click.option("--room", "room", required=True, help="Room the payment is for (name or ID)")
@click.option("--manager", "manager", required=True, help="Manager recording the payment (username or ID)")
@click.option("--amount", "amount", required=True, help="Amount paid (e.g. 300, 300.50, €300)")
@click.option("--from", "start_month", required=True, help="First billing month (YYYY-MM or a date)")
@click.option("--to", "end_month", help="Last billing month (YYYY-MM or a date, defaults to --from)")
@click.option("--paid", "paid", help="When it was paid (defaults to now)")
@click.option("--notes", help="Optional notes")
@click.pass_context
def record_payment(
    ctx,
    tenant: str,
    room: str,
    manager: str,
    amount: str,
    start_month: str,
    end_month: str | None,
    paid: str | None,
    notes: str | None,
):
    """Record a rent payment.

    Examples:
        roomledger payment record --tenant Alice --room A-101 --manager bob --amount 300 --from 2025-05
        roomledger payment record --tenant 1 --room 1 --manager 1 --amount 600 --from 2025-05 --to 2025-06
    """
    db = ctx.obj["db"]
    service = LedgerService(db)
    tenant_id = resolve_tenant_or_exit(ctx, TenantService(db), tenant)
    room_id = resolve_room_or_exit(ctx, RoomService(db), room)
    manager_id = resolve_manager_or_exit(ctx, ManagerService(db), manager)

    try:
        value = parse_amount(amount)
        period_start = parse_month(start_month)
        period_end = parse_month(end_month if end_month else start_month, end=True)
        payment_date = parse_datetime(paid) if paid else None
        transaction_id = service.record_tenant_transaction(
            tenant_id=tenant_id,
            room_id=room_id,
            manager_id=manager_id,
            amount=value,
            start_month=period_start,
            end_month=period_end,
            payment_date=payment_date,
            notes=notes,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Recorded payment {transaction_id}: {value:.2f} for "
        f"{period_start.isoformat()} - {period_end.isoformat()}"
    )


@payment_group.command("list")
@click.option("--tenant", help="Only payments of this tenant (name or ID)")
@click.option("--room", help="Only payments for this room (name or ID)")
@click.option("--month", help="Only payments made in this month (YYYY-MM or a date)")
@click.pass_context
def list_payments(ctx, tenant: str | None, room: str | None, month: str | None):
    """List rent payments, newest first."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    tenant_id = resolve_tenant_or_exit(ctx, TenantService(db), tenant) if tenant else None
    room_id = resolve_room_or_exit(ctx, RoomService(db), room) if room else None

    start = end = None
    if month:
        try:
            start, end = month_bounds(parse_month(month))
        except ValueError as e:
            handle_domain_error(ctx, e)

    payments = service.list_tenant_transactions(tenant_id=tenant_id, room_id=room_id, start=start, end=end)
    if not payments:
        click.echo("No payments found.")
        return

    click.echo("\nPayments:")
    click.echo("-" * 90)
    for detail in payments:
        txn = detail.transaction
        click.echo(
            f"ID: {txn.id:3d} | {txn.payment_date:%Y-%m-%d} | {detail.tenant.name:20s} | "
            f"{detail.room.name:10s} | {txn.amount:>10.2f} | "
            f"{txn.start_month.isoformat()} - {txn.end_month.isoformat()}"
        )


@payment_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_payment(ctx, transaction_id: int):
    """Show a single payment."""
    service = LedgerService(ctx.obj["db"])

    try:
        detail = service.get_tenant_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    txn = detail.transaction
    click.echo(f"Payment {txn.id}")
    click.echo(f"  Tenant:   {detail.tenant.name}")
    click.echo(f"  Room:     {detail.room.name}")
    click.echo(f"  Manager:  {detail.manager.username}")
    click.echo(f"  Amount:   {txn.amount:.2f}")
    click.echo(f"  Period:   {txn.start_month.isoformat()} - {txn.end_month.isoformat()}")
    click.echo(f"  Paid:     {txn.payment_date:%Y-%m-%d %H:%M}")
    if txn.notes:
        click.echo(f"  Notes:    {txn.notes}")


@payment_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--from", "start_month", help="New first billing month")
@click.option("--to", "end_month", help="New last billing month")
@click.option("--notes", help="New notes")
@click.option("--clear-notes", is_flag=True, help="Remove the notes")
@click.pass_context
def update_payment(
    ctx,
    transaction_id: int,
    amount: str | None,
    start_month: str | None,
    end_month: str | None,
    notes: str | None,
    clear_notes: bool,
):
    """Correct the amount, period or notes of a payment."""
    service = LedgerService(ctx.obj["db"])

    if amount is None and start_month is None and end_month is None and notes is None and not clear_notes:
        click.echo("Error: Nothing to update. Use --amount, --from, --to, --notes or --clear-notes.", err=True)
        ctx.exit(1)

    try:
        transaction = service.update_tenant_transaction(
            transaction_id,
            notes=notes,
            amount=parse_amount(amount) if amount is not None else None,
            start_month=parse_month(start_month) if start_month is not None else None,
            end_month=parse_month(end_month, end=True) if end_month is not None else None,
            clear_notes=clear_notes,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated payment {transaction.id}")


@payment_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_payment(ctx, transaction_id: int, yes: bool):
    """Delete a payment."""
    service = LedgerService(ctx.obj["db"])

    if not yes and not click.confirm(f"Are you sure you want to delete payment {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_tenant_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted payment {transaction_id}")


def register_commands(cli):
    """Register payment commands with main CLI."""
    cli.add_command(payment_group, name="payment")
