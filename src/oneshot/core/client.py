import logging
from typing import Any

import boto3
from botocore.config import Config

from oneshot.core.config import ResolvedConfig

logger = logging.getLogger(__name__)


def build_client_config(config: ResolvedConfig) -> Config:
    options: dict[str, Any] = {
        "region_name": config.region,
        "retries": {"mode": "standard"},
    }
    if config.timeout is not None:
        options["connect_timeout"] = config.timeout
        options["read_timeout"] = config.timeout
    return Config(**options)


def build_client(
    config: ResolvedConfig,
    service_name: str,
    session: boto3.Session | None = None,
) -> Any:
    """
    Builds a service client for the resolved region.

    Construction is local: no connection is opened and credentials are not
    checked until the first request is sent.
    """
    session = session or boto3.Session(region_name=config.region)
    logger.debug("Building %s client in %s", service_name, config.region)
    return session.client(service_name, config=build_client_config(config))
