from functools import partial

import typer

from oneshot.core.runner import run_command
from oneshot.services.kinesis.commands import DescribeStream

kinesis_app = typer.Typer(help="Amazon Kinesis data streams")


@kinesis_app.command("describe-stream")
def describe_stream(
    name: str = typer.Option(..., "--name", help="Name of the stream"),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Display information about a Kinesis data stream."""
    exit_code = run_command(
        partial(DescribeStream, name=name),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)
