import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-west-2"
REGION_ENV_VAR = "AWS_DEFAULT_REGION"


@dataclass(frozen=True)
class ResolvedConfig:
    """Settings for a single invocation. Built once, never mutated."""

    region: str
    verbose: bool = False
    timeout: float | None = None


def setup_logging(verbose: bool):
    log_level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _present(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def resolve_region(explicit: str | None, env_value: str | None, fallback: str) -> str:
    """
    Picks the effective region.

    Order: the explicit --region flag, then the environment, then the fallback.
    Blank strings count as absent.
    """
    if _present(explicit):
        return explicit.strip()
    if _present(env_value):
        return env_value.strip()
    return fallback


def load_config(
    region: str | None = None,
    verbose: bool = False,
    timeout: float | None = None,
    environ: Mapping[str, str] | None = None,
) -> ResolvedConfig:
    environ = os.environ if environ is None else environ
    resolved = resolve_region(region, environ.get(REGION_ENV_VAR), DEFAULT_REGION)
    logger.debug("Resolved region %s (flag=%r)", resolved, region)
    return ResolvedConfig(region=resolved, verbose=verbose, timeout=timeout)
