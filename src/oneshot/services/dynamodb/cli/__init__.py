from functools import partial

import typer

from oneshot.core.runner import run_command
from oneshot.services.dynamodb.commands import (
    DEFAULT_CAPACITY,
    DEFAULT_KEY,
    CreateTable,
    ListTables,
    Scan,
)

dynamodb_app = typer.Typer(help="Amazon DynamoDB tables and items")


@dynamodb_app.command("list-tables")
def list_tables(
    limit: int | None = typer.Option(
        None, "--limit", help="Maximum number of table names to return"
    ),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """List the DynamoDB tables in the region (first page only)."""
    exit_code = run_command(
        partial(ListTables, limit=limit),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


@dynamodb_app.command("create-table")
def create_table(
    table: str = typer.Option(..., "--table", help="Name of the table to create"),
    key: str = typer.Option(DEFAULT_KEY, "--key", help="Name of the string hash key"),
    read_capacity: int = typer.Option(
        DEFAULT_CAPACITY, "--read-capacity", help="Provisioned read capacity units"
    ),
    write_capacity: int = typer.Option(
        DEFAULT_CAPACITY, "--write-capacity", help="Provisioned write capacity units"
    ),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Create a table with a single string hash key."""
    exit_code = run_command(
        partial(
            CreateTable,
            table=table,
            key=key,
            read_capacity=read_capacity,
            write_capacity=write_capacity,
        ),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


@dynamodb_app.command("scan")
def scan(
    table: str = typer.Option(..., "--table", help="Name of the table to scan"),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """List the items in a table (first page only)."""
    exit_code = run_command(
        partial(Scan, table=table),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)
