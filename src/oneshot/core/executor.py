import logging
from collections.abc import Mapping
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from oneshot.core.errors import ServiceError, classify_error
from oneshot.core.models import BaseCommand, CommandResult, Failure, Success

logger = logging.getLogger(__name__)


def execute(
    client: Any,
    request: BaseCommand,
    companions: Mapping[str, Any] | None = None,
) -> CommandResult:
    """
    Sends ``request`` through ``client`` exactly once.

    ``companions`` holds the extra clients named by
    ``request.companion_services``, keyed by service name.

    Listing and scanning operations return the first page only. Provider
    failures are classified and returned as a Failure; no retry happens here.
    """
    logger.debug("Sending %s.%s", request.service_name, request.operation)

    try:
        payload = request.send(client, **(companions or {}))
    except (ClientError, BotoCoreError, ServiceError, OSError) as e:
        error = classify_error(e)
        logger.debug(
            "%s failed: %s (%s)", request.operation, error.kind, error.code or "-"
        )
        return Failure(error)

    return Success(payload)
