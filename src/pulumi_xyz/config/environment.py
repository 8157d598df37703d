"""
Environment Configuration Module

Centralized access to the settings that drive the xyz SDK and provider:

- `XYZ_API_URL`: overrides the base URL recorded in the API metadata
- `XYZ_API_TOKEN`: bearer token sent with every API request
- `XYZ_REQUEST_TIMEOUT`: HTTP timeout in seconds
- `PULUMI_XYZ_LOG_LEVEL`: log level for the SDK loggers
- `PULUMI_XYZ_VERSION`: provider version used when package metadata is missing

Values come from the process environment, then from `.env` files in the
working directory (the Pulumi project), then from the defaults below.
"""

import os
from pathlib import Path
from typing import Any, Optional

DEFAULT_ENV = {
    "XYZ_API_URL": None,
    "XYZ_API_TOKEN": None,
    "XYZ_REQUEST_TIMEOUT": "30",
    "PULUMI_XYZ_LOG_LEVEL": "INFO",
    "PULUMI_XYZ_VERSION": None,
    "ENV": "development",
}


def load_dotenv_files(project_root: Optional[Path] = None):
    """Load environment variables from .env files based on current environment."""
    from dotenv import load_dotenv

    project_root = project_root or Path.cwd()
    env_name = os.environ.get("ENV", "development")

    # later files never override variables that are already set
    env_files = [
        project_root / ".env",
        project_root / f".env.{env_name}",
        project_root / f".env.{env_name}.local",
    ]

    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file, override=False)


class Environment(object):
    """
    Class-level accessors for configuration values, with defaults and type conversions.
    """

    _dotenv_loaded: bool = False

    @classmethod
    def get(cls, key: str, default: Any = None):
        if not cls._dotenv_loaded:
            load_dotenv_files()
            cls._dotenv_loaded = True
        value = os.environ.get(key)
        if value is not None:
            return value
        if default is not None:
            return default
        return DEFAULT_ENV.get(key)

    @classmethod
    def get_api_url(cls) -> Optional[str]:
        """
        Base URL of the backend API, when it should differ from the generated metadata.
        """
        url = cls.get("XYZ_API_URL")
        return url.rstrip("/") if url else None

    @classmethod
    def get_api_token(cls) -> Optional[str]:
        return cls.get("XYZ_API_TOKEN")

    @classmethod
    def get_request_timeout(cls) -> float:
        raw = cls.get("XYZ_REQUEST_TIMEOUT")
        try:
            return float(raw)
        except (TypeError, ValueError):
            return float(DEFAULT_ENV["XYZ_REQUEST_TIMEOUT"])

    @classmethod
    def get_version(cls) -> Optional[str]:
        return cls.get("PULUMI_XYZ_VERSION")

    @classmethod
    def get_log_level(cls) -> str:
        """Return desired log level string.

        Priority:
        1) PULUMI_XYZ_LOG_LEVEL from the environment
        2) If DEBUG env is truthy, return "DEBUG"
        3) "INFO"
        """
        level = os.getenv("PULUMI_XYZ_LOG_LEVEL")
        if level:
            return str(level).upper()
        debug = os.getenv("DEBUG")
        if debug and debug.strip().lower() not in ("0", "false", "no", "off", ""):
            return "DEBUG"
        return DEFAULT_ENV["PULUMI_XYZ_LOG_LEVEL"]
