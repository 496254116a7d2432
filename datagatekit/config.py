# datagatekit/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, ClassVar, Dict, Optional
from dotenv import dotenv_values
import logging
from datagatekit.enums import CredentialMode

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Config:
    """Configuration constants for the datagatekit package."""

    # Rows per query page; fixed
    PAGE_SIZE = 50

    # Row store URL selecting the in-memory adapter
    IN_MEMORY_URL = "inmemory://"

    DEFAULT_ENV_FILE = ".env"

    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

    @staticmethod
    def parse_bool(key: str, value: str) -> bool:
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{key} must be a boolean, got {value!r}")

    @staticmethod
    def parse_int(key: str, value: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {value!r}")


@dataclass
class GateSettings:
    row_store_url: str = Config.IN_MEMORY_URL
    credential_mode: CredentialMode = CredentialMode.SHARED_SECRET
    shared_secret: str = "password"
    allow_group_self_assignment: bool = True
    seed_demo_data: bool = True
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    token_expire_minutes: int = 30
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Class-level default function for getting environment variables
    _getenv: ClassVar[Callable[[str, Optional[str]], Optional[str]]] = staticmethod(os.getenv)

    @classmethod
    def set_getenv(cls, custom_getenv: Callable[[str, Optional[str]], Optional[str]]) -> None:
        """Replace os.getenv as the source of environment variables (used by tests)."""
        cls._getenv = staticmethod(custom_getenv)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "GateSettings":
        """Build settings from the process environment and an optional .env file.

        Environment variables take precedence over values in the file.

        Args:
            env_file: Path to a .env file; defaults to ./.env when it exists.

        Raises:
            ValueError: If a value cannot be parsed.
        """
        file_values: Dict[str, Optional[str]] = {}
        path = env_file or Config.DEFAULT_ENV_FILE
        if Path(path).exists():
            file_values = dotenv_values(path)
            logger.debug(f"Loaded settings file {path}")
        elif env_file:
            raise FileNotFoundError(f"Settings file not found: {env_file}")

        def lookup(key: str) -> Optional[str]:
            value = cls._getenv(key, None)
            if value is None:
                value = file_values.get(key)
            return value

        settings = cls()

        value = lookup("DATAGATE_ROW_STORE_URL")
        if value:
            settings.row_store_url = value

        value = lookup("DATAGATE_CREDENTIAL_MODE")
        if value:
            try:
                settings.credential_mode = CredentialMode(value.strip().lower())
            except ValueError:
                raise ValueError(f"Unsupported DATAGATE_CREDENTIAL_MODE: {value}")

        value = lookup("DATAGATE_SHARED_SECRET")
        if value:
            settings.shared_secret = value

        value = lookup("DATAGATE_ALLOW_GROUP_SELF_ASSIGNMENT")
        if value:
            settings.allow_group_self_assignment = Config.parse_bool("DATAGATE_ALLOW_GROUP_SELF_ASSIGNMENT", value)

        value = lookup("DATAGATE_SEED_DEMO_DATA")
        if value:
            settings.seed_demo_data = Config.parse_bool("DATAGATE_SEED_DEMO_DATA", value)

        value = lookup("DATAGATE_JWT_SECRET")
        if value:
            settings.jwt_secret = value
        else:
            logger.warning("DATAGATE_JWT_SECRET not set; using the insecure default")

        value = lookup("DATAGATE_JWT_ALGORITHM")
        if value:
            settings.jwt_algorithm = value

        value = lookup("DATAGATE_TOKEN_EXPIRE_MINUTES")
        if value:
            settings.token_expire_minutes = Config.parse_int("DATAGATE_TOKEN_EXPIRE_MINUTES", value)

        value = lookup("DATAGATE_LOG_LEVEL")
        if value:
            settings.log_level = value.upper()

        value = lookup("DATAGATE_LOG_FILE")
        if value:
            settings.log_file = value

        return settings
