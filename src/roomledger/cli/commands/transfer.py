"""Manager transfer commands."""

import click
from roomledger.cli.error_handling import handle_domain_error
from roomledger.cli.resolution import resolve_manager_or_exit
from roomledger.domain.errors import DomainError
from roomledger.domain.ledger import LedgerService
from roomledger.domain.manager import ManagerService
from roomledger.utils.amount_parser import parse_amount
from roomledger.utils.date_parser import parse_datetime


@click.group()
def transfer_group():
    """Record and review transfers between managers."""
    pass


@transfer_group.command("record")
@click.option("--from", "sender", required=True, help="Sending manager (username or ID)")
@click.option("--to", "receiver", required=True, help="Receiving manager (username or ID)")
@click.option("--amount", required=True, help="Amount transferred")
@click.option("--currency", help="Three letter currency code (default: EUR)")
@click.option("--paid", help="When the transfer happened (defaults to now)")
@click.option("--notes", help="Optional notes")
@click.pass_context
def record_transfer(
    ctx,
    sender: str,
    receiver: str,
    amount: str,
    currency: str | None,
    paid: str | None,
    notes: str | None,
):
    """Record a transfer of funds from one manager to another.

    Sender and receiver may be the same manager for internal adjustments.

    Examples:
        roomledger transfer record --from bob --to carol --amount 500
    """
    db = ctx.obj["db"]
    managers = ManagerService(db)
    sender_id = resolve_manager_or_exit(ctx, managers, sender)
    receiver_id = resolve_manager_or_exit(ctx, managers, receiver)

    try:
        transaction_id = LedgerService(db).record_manager_transfer(
            sender_id=sender_id,
            receiver_id=receiver_id,
            amount=parse_amount(amount),
            currency=currency,
            payment_date=parse_datetime(paid) if paid else None,
            notes=notes,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded transfer {transaction_id}")


@transfer_group.command("list")
@click.option("--manager", help="Only transfers sent or received by this manager (username or ID)")
@click.pass_context
def list_transfers(ctx, manager: str | None):
    """List transfers, newest first."""
    db = ctx.obj["db"]
    manager_id = resolve_manager_or_exit(ctx, ManagerService(db), manager) if manager else None

    transfers = LedgerService(db).list_manager_transactions(manager_id=manager_id)
    if not transfers:
        click.echo("No transfers found.")
        return

    click.echo("\nTransfers:")
    click.echo("-" * 80)
    for detail in transfers:
        txn = detail.transaction
        click.echo(
            f"ID: {txn.id:3d} | {txn.payment_date:%Y-%m-%d} | {detail.sender.username:15s} -> "
            f"{detail.receiver.username:15s} | {txn.amount:>10.2f} {txn.currency}"
        )


def register_commands(cli):
    """Register transfer commands with main CLI."""
    cli.add_command(transfer_group, name="transfer")
