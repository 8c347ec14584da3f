import asyncio
import datetime
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

import typer
from tortoise import Tortoise
from tortoise.exceptions import BaseORMException, IntegrityError, DoesNotExist

from reporting.main import TORTOISE_ORM_CONFIG
from reporting.features.transactions.models import Merchant, Outlet, Transaction
from reporting.features.transactions.repository import TortoiseReportRepository
from reporting.features.transactions import service as report_service

logger = logging.getLogger(__name__)


app = typer.Typer(name="reporting-cli", help="CLI for managing omzet reporting data.")

# Shared async context manager for database connection
class DBConnection:
    async def __aenter__(self):
        await Tortoise.init(config=TORTOISE_ORM_CONFIG)
        await Tortoise.generate_schemas(safe=True) # Generate schema if it doesn't exist
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()


def _parse_datetime(value: Optional[str], option: str) -> Optional[datetime.datetime]:
    if value is None:
        return None
    try:
        return datetime.datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not an ISO 8601 date/time.", param_hint=option)


# Merchant and outlet management commands
merchant_app = typer.Typer(name="merchants", help="Manage merchants.")
app.add_typer(merchant_app)

outlet_app = typer.Typer(name="outlets", help="Manage merchant outlets.")
app.add_typer(outlet_app)

@merchant_app.command("create")
def create_merchant_command(
    name: str = typer.Argument(..., help="Name of the new merchant.")
):
    """Creates a new merchant."""
    asyncio.run(_create_merchant(name))

async def _create_merchant(name: str):
    async with DBConnection():
        merchant = await Merchant.create(name=name)
        typer.secho(f"Merchant '{merchant.name}' created with ID: {merchant.id}", fg=typer.colors.GREEN)

@outlet_app.command("create")
def create_outlet_command(
    merchant_id: int = typer.Argument(..., help="ID of the merchant owning the outlet."),
    name: str = typer.Argument(..., help="Name of the new outlet.")
):
    """Creates a new outlet for a merchant."""
    asyncio.run(_create_outlet(merchant_id, name))

async def _create_outlet(merchant_id: int, name: str):
    async with DBConnection():
        try:
            merchant = await Merchant.get(id=merchant_id)
            outlet = await Outlet.create(merchant=merchant, name=name)
        except DoesNotExist:
            typer.secho(f"Error: Merchant with ID {merchant_id} not found.", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        except IntegrityError:
            typer.secho(f"Error: Merchant {merchant_id} already has an outlet named '{name}'.", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.secho(f"Outlet '{outlet.name}' created with ID: {outlet.id}", fg=typer.colors.GREEN)


# Transaction commands
transaction_app = typer.Typer(name="transactions", help="Record sales transactions.")
app.add_typer(transaction_app)

@transaction_app.command("record")
def record_transaction_command(
    outlet_id: int = typer.Argument(..., help="ID of the outlet where the sale happened."),
    amount: str = typer.Argument(..., help="Bill total, e.g. 15000.50"),
    at: Optional[str] = typer.Option(None, "--at", help="Time of the sale (ISO 8601), defaults to now.")
):
    """Records a transaction for an outlet."""
    try:
        bill_total = Decimal(amount)
    except InvalidOperation:
        raise typer.BadParameter(f"'{amount}' is not a number.", param_hint="AMOUNT")
    transacted_at = _parse_datetime(at, "--at") or datetime.datetime.now()
    asyncio.run(_record_transaction(outlet_id, bill_total, transacted_at))

async def _record_transaction(outlet_id: int, bill_total: Decimal, transacted_at: datetime.datetime):
    async with DBConnection():
        outlet = await Outlet.get_or_none(id=outlet_id)
        if not outlet:
            typer.secho(f"Error: Outlet with ID {outlet_id} not found.", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        trx = await Transaction.create(
            merchant_id=outlet.merchant_id,
            outlet=outlet,
            bill_total=bill_total,
            transacted_at=transacted_at.replace(tzinfo=None),
        )
        typer.secho(f"Transaction {trx.public_id} recorded for outlet '{outlet.name}'.", fg=typer.colors.GREEN)


# Report commands
report_app = typer.Typer(name="reports", help="Print omzet reports as JSON.")
app.add_typer(report_app)

@report_app.command("daily")
def daily_report_command(
    merchant_id: int = typer.Argument(..., help="ID of the merchant to report on."),
    outlet_id: int = typer.Option(0, help="Restrict to one outlet."),
    start: Optional[str] = typer.Option(None, help="Start of the range (ISO 8601)."),
    end: Optional[str] = typer.Option(None, help="End of the range (ISO 8601)."),
    limit: int = typer.Option(10, help="Days per page."),
    page: int = typer.Option(1, help="Page number."),
):
    """Prints one page of the date-complete daily report."""
    start_date = _parse_datetime(start, "--start")
    end_date = _parse_datetime(end, "--end")
    asyncio.run(_daily_report(merchant_id, outlet_id, start_date, end_date, limit, page))

async def _daily_report(merchant_id, outlet_id, start_date, end_date, limit, page):
    try:
        async with DBConnection():
            report = await report_service.generate_daily_report(
                TortoiseReportRepository(), merchant_id, outlet_id, start_date, end_date, limit, page
            )
    except BaseORMException as e:
        typer.secho(f"Error: Could not build the daily report: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(report.model_dump_json(indent=2))

@report_app.command("monthly")
def monthly_report_command(
    merchant_id: int = typer.Argument(..., help="ID of the merchant to report on."),
    outlet_id: int = typer.Option(0, help="Restrict to one outlet."),
    month: Optional[str] = typer.Option(None, help="Month to report on (YYYY-MM)."),
    limit: int = typer.Option(10, help="Rows per page."),
    page: int = typer.Option(1, help="Page number."),
):
    """Prints one page of the monthly report."""
    asyncio.run(_monthly_report(merchant_id, outlet_id, month, limit, page))

async def _monthly_report(merchant_id, outlet_id, month, limit, page):
    try:
        async with DBConnection():
            report = await report_service.generate_monthly_report(
                TortoiseReportRepository(), merchant_id, outlet_id, month, limit, page
            )
    except BaseORMException as e:
        typer.secho(f"Error: Could not build the monthly report: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(report.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
