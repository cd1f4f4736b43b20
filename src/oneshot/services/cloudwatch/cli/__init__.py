from functools import partial

import typer

from oneshot.core.runner import run_command
from oneshot.services.cloudwatch.commands import DeleteAlarms

cloudwatch_app = typer.Typer(help="Amazon CloudWatch alarms")


@cloudwatch_app.command("delete-alarms")
def delete_alarms(
    names: list[str] = typer.Option(
        ..., "--name", help="Alarm to delete; repeat for several"
    ),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Delete one or more CloudWatch alarms."""
    exit_code = run_command(
        partial(DeleteAlarms, names=tuple(names)),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)
