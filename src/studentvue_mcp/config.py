"""Portal credentials and connection settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from studentvue_mcp.exceptions import ConfigurationError

LOGGER = logging.getLogger(__name__)

PORTAL_ENV = "STUDENTVUE_PORTAL"
USERNAME_ENV = "STUDENTVUE_USERNAME"
PASSWORD_ENV = "STUDENTVUE_PASSWORD"
TIMEOUT_ENV = "STUDENTVUE_TIMEOUT"

REQUIRED_ENV = (PORTAL_ENV, USERNAME_ENV, PASSWORD_ENV)


@dataclass(frozen=True)
class StudentVueConfig:
    """Credentials for one StudentVue account."""

    portal_url: str
    username: str
    password: str
    timeout: float | None = None

    def __post_init__(self) -> None:
        # Endpoint paths are appended with a leading slash
        object.__setattr__(self, "portal_url", self.portal_url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"StudentVueConfig(portal_url={self.portal_url!r}, "
            f"username={self.username!r}, password='***', timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None
    ) -> StudentVueConfig | None:
        """
        Build config from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ).

        Returns: Config, or None when any required variable is unset or empty.

        Raises:
            ConfigurationError: STUDENTVUE_TIMEOUT is set but not a number.
        """
        env = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_ENV if not env.get(name)]
        if missing:
            LOGGER.warning(
                "StudentVue credentials not found in environment: %s",
                ", ".join(missing),
            )
            return None

        timeout: float | None = None
        raw_timeout = env.get(TIMEOUT_ENV)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}"
                )

        return cls(
            portal_url=env[PORTAL_ENV],
            username=env[USERNAME_ENV],
            password=env[PASSWORD_ENV],
            timeout=timeout,
        )
