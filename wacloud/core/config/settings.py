"""
Environment configuration for wacloud.

Decoding and building never read this module; the messenger takes its
default VALIDATION_MODE from here. Unknown LOG_LEVEL or VALIDATION_MODE
values fall back to the default with a warning. Graph API
credentials are looked up lazily by the transport layer, so importing the
library never requires them.
"""

import logging
import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

from wacloud.schemas.core.types import ValidationMode

# .env in the current working directory, if any
load_dotenv(".env")

DEFAULT_VERSION = "0.1.0"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
ENVIRONMENTS = ("DEV", "PROD")


def _read_project_version() -> str:
    """Return ``project.version`` from the closest pyproject.toml above this file."""
    for directory in Path(__file__).parents:
        candidate = directory / "pyproject.toml"
        if not candidate.is_file():
            continue
        try:
            data = tomllib.loads(candidate.read_text(encoding="utf-8"))
            project = data.get("project", {})
        except (OSError, tomllib.TOMLDecodeError):
            continue
        if project.get("version"):
            return project["version"]
    return DEFAULT_VERSION


def _choice(name: str, default: str, allowed: tuple[str, ...]) -> str:
    value = os.getenv(name, default).upper()
    if value not in allowed:
        # the wacloud logger wraps this module, so plain logging here
        logging.getLogger(__name__).warning(
            "%s must be one of %s, got %r; using %s", name, list(allowed), value, default
        )
        return default
    return value


class Settings:
    """Settings read from the environment when the instance is created."""

    def __init__(self):
        self.version: str = _read_project_version()

        # Logging
        self.log_level: str = _choice("LOG_LEVEL", "INFO", LOG_LEVELS)
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        environment = os.getenv("ENVIRONMENT", "DEV").upper()
        self.environment: str = environment if environment in ENVIRONMENTS else "DEV"

        # Validation
        modes = tuple(mode.value.upper() for mode in ValidationMode)
        self.validation_mode = ValidationMode(
            _choice("VALIDATION_MODE", ValidationMode.COLLECT_ALL.value, modes).lower()
        )

        # Graph API, used by the transport layer only
        self.api_version: str = os.getenv("API_VERSION", "v21.0")
        self.base_url: str = os.getenv("BASE_URL", "https://graph.facebook.com/")
        self.wp_access_token: str | None = os.getenv("WP_ACCESS_TOKEN")
        self.wp_phone_id: str | None = os.getenv("WP_PHONE_ID")
        self.wp_bid: str | None = os.getenv("WP_BID")

    def require_credentials(self) -> tuple[str, str]:
        """
        Return ``(access_token, phone_number_id)``.

        Raises:
            ValueError: If WP_ACCESS_TOKEN or WP_PHONE_ID is not set
        """
        missing = [
            name
            for name, value in (
                ("WP_ACCESS_TOKEN", self.wp_access_token),
                ("WP_PHONE_ID", self.wp_phone_id),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"{' and '.join(missing)} required to create a client")
        return self.wp_access_token, self.wp_phone_id

    def resolve_validation_mode(
        self, mode: ValidationMode | str | None = None
    ) -> ValidationMode:
        """Return ``mode`` as a ValidationMode, or the configured default when None."""
        return self.validation_mode if mode is None else ValidationMode(mode)

    @property
    def is_development(self) -> bool:
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        return self.environment == "PROD"


settings = Settings()
