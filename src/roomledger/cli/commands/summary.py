"""House summary command."""

from datetime import datetime

import click
from roomledger.domain.summary import SummaryService
from roomledger.utils.date_parser import parse_date


@click.command()
@click.option("--date", "reference", help="Any day in the month to summarize (defaults to today)")
@click.pass_context
def summary(ctx, reference: str | None):
    """Show room, occupancy and tenant counts and this month's income."""
    service = SummaryService(ctx.obj["db"])

    reference_instant = None
    if reference:
        try:
            day = parse_date(reference)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        reference_instant = datetime(day.year, day.month, day.day)

    result = service.compute_summary(reference_instant)
    click.echo(f"Total rooms:        {result.total_rooms}")
    click.echo(f"Occupied rooms:     {result.occupied_rooms}")
    click.echo(f"Total tenants:      {result.total_tenants}")
    click.echo(f"Income this month:  {result.total_income_this_month:.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary, name="summary")
