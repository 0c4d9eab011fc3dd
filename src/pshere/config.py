"""Configuration for pshere, read from the environment."""

import logging
import os
from collections.abc import Mapping

from pshere.models import DEFAULT_PWSH_VERSION, PshereConfig

log = logging.getLogger(__name__)

SHELL_ENV = "PSHERE_SHELL"
PWSH_VERSION_ENV = "PSHERE_PWSH_VERSION"
DEBUG_ENV = "PSHERE_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def load_config(environ: Mapping[str, str] | None = None) -> PshereConfig:
    """Build a PshereConfig from PSHERE_* environment variables."""
    env = os.environ if environ is None else environ
    config = PshereConfig(
        shell=env.get(SHELL_ENV),
        pwsh_version=env.get(PWSH_VERSION_ENV, DEFAULT_PWSH_VERSION),
        debug=_env_flag(env.get(DEBUG_ENV)),
    )
    log.debug("config=%s", config.model_dump())
    return config
