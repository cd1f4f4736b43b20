from functools import partial

import typer

from oneshot.core.runner import run_command
from oneshot.services.s3.commands import (
    DecryptObject,
    DeleteBucket,
    DeleteObject,
    GetObject,
)

s3_app = typer.Typer(help="Amazon S3 buckets and objects")


@s3_app.command("delete-bucket")
def delete_bucket(
    bucket: str = typer.Option(..., "--bucket", help="Name of the (empty) bucket"),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Delete an S3 bucket. The bucket must be empty."""
    exit_code = run_command(
        partial(DeleteBucket, bucket=bucket),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


@s3_app.command("delete-object")
def delete_object(
    bucket: str = typer.Option(..., "--bucket", help="Name of the bucket"),
    key: str = typer.Option(..., "--key", help="Key of the object to delete"),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Delete an object from an S3 bucket."""
    exit_code = run_command(
        partial(DeleteObject, bucket=bucket, key=key),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


@s3_app.command("get-object")
def get_object(
    bucket: str = typer.Option(..., "--bucket", help="Name of the bucket"),
    key: str = typer.Option(..., "--key", help="Key of the object to download"),
    destination: str | None = typer.Option(
        None, "--to", help="Local file to write; defaults to the key's basename"
    ),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Download an object from an S3 bucket to a local file."""
    exit_code = run_command(
        partial(GetObject, bucket=bucket, key=key, destination=destination),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


@s3_app.command("decrypt-object")
def decrypt_object(
    bucket: str = typer.Option(..., "--bucket", help="Name of the bucket"),
    key: str = typer.Option(..., "--key", help="Key of the encrypted object"),
    region: str | None = typer.Option(None, "--region", help="AWS Region to use"),
    verbose: bool = False,
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="Connect/read timeout in seconds"
    ),
):
    """Read an object holding a KMS ciphertext and print its plaintext."""
    exit_code = run_command(
        partial(DecryptObject, bucket=bucket, key=key),
        region=region,
        verbose=verbose,
        timeout=timeout,
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)
