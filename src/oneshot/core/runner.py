import logging
from collections.abc import Callable

import botocore
from botocore.exceptions import BotoCoreError, ClientError

from oneshot.core.client import build_client
from oneshot.core.config import load_config, setup_logging
from oneshot.core.errors import ServiceError, classify_error
from oneshot.core.executor import execute
from oneshot.core.exit_codes import map_result
from oneshot.core.models import (
    BaseCommand,
    BinaryStream,
    CommandResult,
    Failure,
    Success,
)
from oneshot.core.persister import persist
from oneshot.core.presenter import (
    CommandPresenter,
    console_err,
    print_failure,
    print_verbose_header,
    render,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_PREFIX = "Got an error reading the command arguments:"


def materialize(result: CommandResult) -> CommandResult:
    """
    Persists a streamed payload to disk. Structured payloads pass through.

    The persisted result is replaced by a summary mapping of the destination
    and the number of bytes written.
    """
    if isinstance(result, Failure) or not isinstance(result.payload, BinaryStream):
        return result

    stream = result.payload
    logger.debug("Streaming %s body to %s", stream.content_type, stream.destination)
    try:
        written = persist(stream.body, stream.destination, stream.content_length)
    except (ServiceError, ClientError, BotoCoreError, OSError) as e:
        return Failure(classify_error(e))

    return Success(
        {
            **stream.summary,
            "Destination": str(stream.destination),
            "BytesWritten": written,
            "ContentType": stream.content_type,
        }
    )


def run_command(
    request_factory: Callable[[], BaseCommand],
    region: str | None = None,
    verbose: bool = False,
    timeout: float | None = None,
) -> int:
    """
    Runs one command end to end and returns the process exit code.

    ``request_factory`` builds the request so that argument validation
    failures are reported the same way as service failures.
    """
    setup_logging(verbose)

    try:
        request = request_factory()
    except ServiceError as e:
        exit_code, message = map_result(Failure(e), INVALID_INPUT_PREFIX)
        print_failure(message)
        return exit_code

    config = load_config(region=region, verbose=verbose, timeout=timeout)

    if config.verbose:
        print_verbose_header(
            [
                (f"{request.service_name} client version", botocore.__version__),
                ("AWS Region", config.region),
                *request.describe(),
            ]
        )

    try:
        client = build_client(config, request.service_name)
        companions = {
            name: build_client(config, name) for name in request.companion_services
        }
    except BotoCoreError as e:
        result = Failure(classify_error(e))
    else:
        result = materialize(execute(client, request, companions))

    exit_code, message = map_result(result, request.error_prefix)
    if exit_code != 0:
        print_failure(message)
        return exit_code

    lines = render(result.payload, request.view_class)
    if lines:
        CommandPresenter(lines).print_lines()
    elif config.verbose:
        console_err.print("[bold blue]No Results Found[/bold blue]")

    return exit_code
